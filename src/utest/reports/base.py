"""Base reporter protocol for utest output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from utest.testing.case import VerdictEvent
    from utest.testing.suite import Suite


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for render sinks.

    Hooks are synchronous: verdicts settle from timer callbacks and deferred reports,
    so a sink must not block. Suites call a hook only when the sink defines it.
    """

    def on_suite_start(self, suite: Suite) -> None:
        """Called when a suite is constructed, before its tests are defined."""
        ...

    def on_verdict(self, event: VerdictEvent) -> None:
        """Called after each judged verdict has been applied to the counters."""
        ...

    def on_suite_complete(self, suite: Suite) -> None:
        """Called once, after every registered collection has been scheduled through."""
        ...

    def on_suite_error(self, suite: Suite, error: BaseException) -> None:
        """Called when defining the suite's tests raised."""
        ...
