"""utest: a small unit-test engine with an assertion grammar and async reports."""

from utest.assertions import Judge, Verdict, get_operator, judge, operator
from utest.config import UtestConfig, load_config
from utest.context import session_scope
from utest.errors import ConfigError, ReportSettledError, SuiteSetupError, UtestError
from utest.reports import ConsoleReporter, RecordingReporter, Reporter, reporter
from utest.testing import (
    Case,
    CaseReporter,
    CaseStatus,
    Counters,
    Report,
    Session,
    Suite,
    VerdictEvent,
    current_session,
    multi,
    raises,
    run,
    run_suite,
    safe,
    set_enabled,
)
from utest.types import HOLE, UNDEFINED, Kind
from utest.values import classify, dump
from utest.version import __version__


__all__ = [
    "HOLE",
    "UNDEFINED",
    "Case",
    "CaseReporter",
    "CaseStatus",
    "ConfigError",
    "ConsoleReporter",
    "Counters",
    "Judge",
    "Kind",
    "RecordingReporter",
    "Report",
    "ReportSettledError",
    "Reporter",
    "Session",
    "Suite",
    "SuiteSetupError",
    "UtestConfig",
    "UtestError",
    "Verdict",
    "VerdictEvent",
    "__version__",
    "classify",
    "current_session",
    "dump",
    "get_operator",
    "judge",
    "load_config",
    "multi",
    "operator",
    "raises",
    "reporter",
    "run",
    "run_suite",
    "safe",
    "session_scope",
    "set_enabled",
]
