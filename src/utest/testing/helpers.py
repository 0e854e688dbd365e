"""Helper constructors for common test shapes."""

from __future__ import annotations

import functools
import inspect
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from utest.testing.reporter import CaseReporter

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def accepts_reporter(fn: Callable[..., Any]) -> bool:
    """Whether ``fn`` takes a positional argument to receive the case reporter."""
    try:
        signature = inspect.signature(fn, follow_wrapped=False)
    except (TypeError, ValueError):
        return False
    return any(param.kind in _POSITIONAL for param in signature.parameters.values())


def invoke(fn: Callable[..., Any], reporter: CaseReporter) -> Any:
    """Call ``fn`` with the reporter when it can take one, otherwise bare."""
    if accepts_reporter(fn):
        return fn(reporter)
    return fn()


def multi(*results: Any) -> dict[int, Any]:
    """Bundle several results into one return value, keyed by position.

    >>> multi(True, [1, 1])
    {0: True, 1: [1, 1]}
    """
    return dict(enumerate(results))


def safe(fn: Callable[..., Any]) -> Callable[[CaseReporter], Any]:
    """Wrap ``fn`` in a test that passes once ``fn`` returns without raising.

    The wrapped test still returns ``fn``'s result, which is judged as usual.
    """
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def safe_async_test(reporter: CaseReporter) -> Any:
            result = await invoke(fn, reporter)
            reporter.report(True)
            return result

        return safe_async_test

    @functools.wraps(fn)
    def safe_test(reporter: CaseReporter) -> Any:
        result = invoke(fn, reporter)
        reporter.report(True)
        return result

    return safe_test


def _raised(exc: BaseException, expected: Any) -> Any:
    if expected is None:
        return True
    if isinstance(expected, type) and issubclass(expected, BaseException):
        return isinstance(exc, expected)
    if isinstance(expected, (str, re.Pattern)):
        return [str(exc), "=~", expected]
    return [exc, expected]


def raises(fn: Callable[..., Any], expected: Any = None) -> Callable[[CaseReporter], Any]:
    """Wrap ``fn`` in a test that passes when ``fn`` raises.

    Args:
        fn: The callable expected to raise. It receives the reporter if it takes one.
        expected: Optional check on the raised exception. An exception class is
            matched with ``isinstance``; a string or compiled pattern is matched
            against ``str(exc)`` with ``=~``; anything else is compared to the
            exception with ``===``.

    Returns:
        A test returning ``False`` when nothing is raised.
    """
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def raises_async_test(reporter: CaseReporter) -> Any:
            try:
                await invoke(fn, reporter)
            except Exception as exc:
                return _raised(exc, expected)
            return False

        return raises_async_test

    @functools.wraps(fn)
    def raises_test(reporter: CaseReporter) -> Any:
        try:
            invoke(fn, reporter)
        except Exception as exc:
            return _raised(exc, expected)
        return False

    return raises_test


__all__ = ["accepts_reporter", "invoke", "multi", "raises", "safe"]
