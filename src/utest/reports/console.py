"""Console output through rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from utest.reports.registry import reporter

if TYPE_CHECKING:
    from utest.testing.case import VerdictEvent
    from utest.testing.suite import Suite


@reporter(aliases=("console",))
class ConsoleReporter:
    """Prints failed verdicts as they settle and a header line per suite.

    Args:
        console: Target console, a fresh ``Console()`` by default.
        verbosity: ``-1`` prints only suite headers, ``0`` adds failures, ``1`` and
            above print every verdict and the suite name when it starts.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def on_suite_start(self, suite: Suite) -> None:
        if self.verbosity > 0:
            self.console.print(f"[bold]{escape(suite.name)}[/bold]")

    def on_verdict(self, event: VerdictEvent) -> None:
        if self.verbosity < 0 or (event.passed and self.verbosity == 0):
            return
        mark = "[green]PASS[/green]" if event.passed else "[red]FAIL[/red]"
        self.console.print(f"  {mark} {escape(event.case_label)}: {escape(event.text)}")

    def on_suite_complete(self, suite: Suite) -> None:
        counters = suite.counters
        if counters.wrong:
            style = "red"
        elif counters.stand:
            style = "yellow"
        else:
            style = "green"
        self.console.print(f"[{style}]{escape(suite.header)}[/{style}]")

    def on_suite_error(self, suite: Suite, error: BaseException) -> None:
        self.console.print(
            f"[bold red]{escape(suite.name)}: could not define tests: "
            f"{escape(type(error).__name__)}: {escape(str(error))}[/bold red]"
        )
