from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from utest.testing.session import Session


SESSION_CONTEXT: ContextVar[Session | None] = ContextVar("utest_session", default=None)


@contextmanager
def session_scope(session: Session) -> Iterator[Session]:
    """Make ``session`` the current session for suites created in this scope."""
    token = SESSION_CONTEXT.set(session)
    try:
        yield session
    finally:
        SESSION_CONTEXT.reset(token)


__all__ = ["SESSION_CONTEXT", "session_scope"]
