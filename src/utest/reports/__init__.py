"""Render sinks for utest verdicts."""

from utest.reports.base import Reporter
from utest.reports.console import ConsoleReporter
from utest.reports.recording import RecordingReporter
from utest.reports.registry import (
    registered_reporters,
    reporter,
    reporter_class,
    resolve_reporter,
    resolve_reporters,
)

__all__ = [
    "ConsoleReporter",
    "RecordingReporter",
    "Reporter",
    "registered_reporters",
    "reporter",
    "reporter_class",
    "resolve_reporter",
    "resolve_reporters",
]
