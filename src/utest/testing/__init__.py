"""Test execution: cases, reports, scheduling and suites."""

from utest.testing.case import Case, CaseStatus, Counters, TestSpec, VerdictEvent, normalize_tests
from utest.testing.helpers import multi, raises, safe
from utest.testing.reporter import CaseReporter, Report
from utest.testing.runner import CaseRunner
from utest.testing.scheduler import Scheduler
from utest.testing.session import Session, current_session, get_default_session, set_enabled
from utest.testing.suite import Suite, run, run_suite


__all__ = [
    "Case",
    "CaseReporter",
    "CaseRunner",
    "CaseStatus",
    "Counters",
    "Report",
    "Scheduler",
    "Session",
    "Suite",
    "TestSpec",
    "VerdictEvent",
    "current_session",
    "get_default_session",
    "multi",
    "normalize_tests",
    "raises",
    "run",
    "run_suite",
    "safe",
    "set_enabled",
]
