"""Shared fixtures for unit tests."""

import pytest

from utest.reports import RecordingReporter
from utest.reports.base import Reporter
from utest.testing import Session


class NullReporter(Reporter):
    """Silent reporter for testing."""

    def on_suite_start(self, suite) -> None:
        pass

    def on_verdict(self, event) -> None:
        pass

    def on_suite_complete(self, suite) -> None:
        pass

    def on_suite_error(self, suite, error) -> None:
        pass


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def session(recorder: RecordingReporter) -> Session:
    """An isolated session whose only sink is ``recorder``."""
    return Session(reporters=[recorder])


@pytest.fixture(autouse=True)
def _no_env_toggle(monkeypatch):
    monkeypatch.delenv("UTEST_ENABLED", raising=False)
