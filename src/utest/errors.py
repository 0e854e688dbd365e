"""Error types raised by utest."""


class UtestError(Exception):
    """Base class for errors raised by the engine itself."""


class SuiteSetupError(UtestError, TypeError):
    """Raised when a suite's test collection cannot be normalized.

    This is a broken test definition rather than a failing test, so it is never
    contained: it propagates out of suite construction.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unsupported test collection of kind '{kind}'")


class ReportSettledError(UtestError, RuntimeError):
    """Raised when a report handle is settled a second time."""

    def __init__(self, case_label: str, name: str | None = None) -> None:
        self.case_label = case_label
        self.name = name
        target = f"{case_label}> {name}" if name else case_label
        super().__init__(f"Report for '{target}' was already settled")


class ConfigError(UtestError, ValueError):
    """Raised when configuration values are invalid."""
