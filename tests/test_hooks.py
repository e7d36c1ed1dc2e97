from __future__ import annotations

import sys
import threading

from debug_utils import (
    PLATFORM_ERROR_TAG,
    THREAD_ERROR_TAG,
    AppLogger,
    FixedTimestampProvider,
    GlobalErrorHandlers,
    HookSlot,
    NoOpBreakpointStrategy,
    Severity,
)


def explode() -> None:
    raise ValueError("kaboom")


def _captured() -> tuple[type[BaseException], BaseException, object]:
    try:
        explode()
    except ValueError as exc:
        return type(exc), exc, exc.__traceback__
    raise AssertionError("unreachable")


def _init(sink, **overrides) -> AppLogger:
    return AppLogger.init(
        debug_sink=sink,
        force_debug_mode=True,
        timestamp_provider=FixedTimestampProvider(),
        breakpoint_strategy=NoOpBreakpointStrategy(),
        **overrides,
    )


def test_platform_hook_chains_then_logs(monkeypatch, recording_sink) -> None:
    calls: list[str] = []

    def previous(exc_type, exc_value, exc_tb) -> None:
        calls.append("previous")
        assert recording_sink.records == []

    monkeypatch.setattr(sys, "excepthook", previous)
    _init(recording_sink)
    assert sys.excepthook is not previous

    exc_type, exc, tb = _captured()
    handled = sys.excepthook(exc_type, exc, tb)

    assert handled is True
    assert calls == ["previous"]
    [record] = recording_sink.records
    assert record.severity is Severity.ERROR
    assert record.tag == PLATFORM_ERROR_TAG
    assert record.error is exc
    assert record.stack_trace is tb
    assert record.message.startswith("ValueError: kaboom\n")
    assert record.caller.startswith("explode@test_hooks.py:")


def test_thread_hook_chains_then_logs(monkeypatch, recording_sink) -> None:
    seen_threads: list[str] = []
    monkeypatch.setattr(threading, "excepthook", lambda args: seen_threads.append(args.thread.name))
    _init(recording_sink)

    worker = threading.Thread(target=explode, name="worker-1")
    worker.start()
    worker.join()

    assert seen_threads == ["worker-1"]
    [record] = recording_sink.records
    assert record.tag == THREAD_ERROR_TAG
    assert isinstance(record.error, ValueError)
    assert dict(record.context) == {"thread": "worker-1"}


def test_reset_restores_previous_hooks(monkeypatch, recording_sink) -> None:
    prev_sys = lambda *a: None  # noqa: E731
    prev_thread = lambda args: None  # noqa: E731
    monkeypatch.setattr(sys, "excepthook", prev_sys)
    monkeypatch.setattr(threading, "excepthook", prev_thread)

    _init(recording_sink)
    AppLogger.reset_instance_for_testing()

    assert sys.excepthook is prev_sys
    assert threading.excepthook is prev_thread


def test_dispose_restores_hooks_but_keeps_instance(monkeypatch, recording_sink) -> None:
    prev_sys = lambda *a: None  # noqa: E731
    monkeypatch.setattr(sys, "excepthook", prev_sys)

    app = _init(recording_sink)
    app.dispose()
    app.dispose()

    assert sys.excepthook is prev_sys
    assert AppLogger.instance() is app


def test_handlers_not_attached_when_disabled(monkeypatch, recording_sink) -> None:
    prev_sys = lambda *a: None  # noqa: E731
    monkeypatch.setattr(sys, "excepthook", prev_sys)

    app = _init(recording_sink, attach_global_error_handlers=False)

    assert sys.excepthook is prev_sys
    assert app.error_handlers is None


def test_previous_hook_failure_still_logs(recording_sink) -> None:
    holder: dict[str, object] = {}

    def broken_previous(exc_type, exc_value, exc_tb) -> None:
        raise RuntimeError("previous hook broke")

    slot = HookSlot("fake.hook", "FakeError", get=lambda: broken_previous, set=lambda h: holder.update(hook=h))
    thread_slot = HookSlot("fake.thread", "FakeThread", get=lambda: None, set=lambda h: None)
    reports: list[tuple[str, dict]] = []

    def report(message, **kwargs) -> None:
        reports.append((message, kwargs))

    handlers = GlobalErrorHandlers(report, platform_slot=slot, thread_slot=thread_slot)
    handlers.install()

    exc_type, exc, tb = _captured()
    try:
        holder["hook"](exc_type, exc, tb)
    except RuntimeError:
        pass
    else:
        raise AssertionError("previous hook failure should propagate")

    assert len(reports) == 1
    assert reports[0][1]["tag"] == "FakeError"


def test_reporter_failure_is_contained(caplog) -> None:
    holder: dict[str, object] = {}
    slot = HookSlot("fake.hook", "FakeError", get=lambda: None, set=lambda h: holder.update(hook=h))
    thread_slot = HookSlot("fake.thread", "FakeThread", get=lambda: None, set=lambda h: None)

    def report(message, **kwargs) -> None:
        raise RuntimeError("sink exploded")

    handlers = GlobalErrorHandlers(report, platform_slot=slot, thread_slot=thread_slot)
    handlers.install()
    assert handlers.installed

    exc_type, exc, tb = _captured()
    assert holder["hook"](exc_type, exc, tb) is True
    assert any("failed to record uncaught exception" in r.getMessage() for r in caplog.records)

    handlers.restore()
    assert holder["hook"] is None
    assert not handlers.installed
