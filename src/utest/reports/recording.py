"""In-memory sink, handy for assertions in tests and for post-run inspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from utest.reports.registry import reporter

if TYPE_CHECKING:
    from utest.testing.case import VerdictEvent
    from utest.testing.suite import Suite


@reporter(aliases=("recording",))
@dataclass
class RecordingReporter:
    """Keeps every hook call it receives."""

    started: list[Suite] = field(default_factory=list)
    events: list[VerdictEvent] = field(default_factory=list)
    completed: list[Suite] = field(default_factory=list)
    errors: list[tuple[Suite, BaseException]] = field(default_factory=list)

    def on_suite_start(self, suite: Suite) -> None:
        self.started.append(suite)

    def on_verdict(self, event: VerdictEvent) -> None:
        self.events.append(event)

    def on_suite_complete(self, suite: Suite) -> None:
        self.completed.append(suite)

    def on_suite_error(self, suite: Suite, error: BaseException) -> None:
        self.errors.append((suite, error))

    @property
    def failures(self) -> list[VerdictEvent]:
        return [event for event in self.events if not event.passed]

    def messages(self, case_label: str | None = None) -> list[str]:
        """Verdict texts, optionally only those of one case."""
        return [e.text for e in self.events if case_label is None or e.case_label == case_label]
