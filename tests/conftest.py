from __future__ import annotations

import threading
from collections.abc import Callable

import pytest

from debug_utils import AppLogger, LogRecord
from debug_utils.options import ENV_FORCE_DEBUG, ENV_MIN_SEVERITY, ENV_MODE, ENV_TAGS


class RecordingSink:
    """Test sink that keeps every record it receives."""

    def __init__(self) -> None:
        self.records: list[LogRecord] = []
        self._lock = threading.Lock()

    def log(self, record: LogRecord) -> None:
        with self._lock:
            self.records.append(record)


class FailingSink:
    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("sink down")
        self.calls = 0

    def log(self, record: LogRecord) -> None:
        self.calls += 1
        raise self.exc


@pytest.fixture(autouse=True)
def _isolate_app_logger(monkeypatch: pytest.MonkeyPatch):
    # Depends on monkeypatch so the reset runs before patched hooks are undone.
    for name in (ENV_MODE, ENV_FORCE_DEBUG, ENV_MIN_SEVERITY, ENV_TAGS):
        monkeypatch.delenv(name, raising=False)
    AppLogger.reset_instance_for_testing()
    yield
    AppLogger.reset_instance_for_testing()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_recording_sink() -> Callable[[], RecordingSink]:
    return RecordingSink


@pytest.fixture
def make_failing_sink() -> Callable[..., FailingSink]:
    return FailingSink
