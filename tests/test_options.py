from __future__ import annotations

import pytest

from debug_utils import AppLogger, LogFilter, LoggerOptions, Severity, resolve_logger_options
from debug_utils.options import ambient_debug_mode


def test_defaults_get_a_fresh_filter() -> None:
    opts = resolve_logger_options(None)
    assert isinstance(opts.filter, LogFilter)
    assert opts.filter.min_severity is Severity.TRACE
    assert opts.enable_caller_info is True
    assert opts.attach_global_error_handlers is True
    assert opts.force_debug_mode is False


def test_env_min_severity_and_tags(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG_UTILS_MIN_SEVERITY", "warning")
    monkeypatch.setenv("DEBUG_UTILS_TAGS", "payments, shipping,,")

    opts = resolve_logger_options(LoggerOptions())

    assert opts.filter.min_severity is Severity.WARNING
    assert opts.filter.enabled_tags == frozenset({"payments", "shipping"})


def test_env_reconfigures_supplied_filter_in_place(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG_UTILS_MIN_SEVERITY", "error")
    live = LogFilter(enabled_tags={"a"})

    opts = resolve_logger_options(LoggerOptions(filter=live))

    assert opts.filter is live
    assert live.min_severity is Severity.ERROR
    assert live.enabled_tags == frozenset({"a"})


def test_env_invalid_severity(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG_UTILS_MIN_SEVERITY", "loud")
    with pytest.raises(ValueError, match="DEBUG_UTILS_MIN_SEVERITY"):
        resolve_logger_options(None)


def test_env_force_debug(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG_UTILS_FORCE_DEBUG", "yes")
    assert resolve_logger_options(None).force_debug_mode is True

    monkeypatch.setenv("DEBUG_UTILS_FORCE_DEBUG", "off")
    assert resolve_logger_options(LoggerOptions(force_debug_mode=True)).force_debug_mode is False


def test_env_force_debug_rejects_garbage(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG_UTILS_FORCE_DEBUG", "maybe")
    with pytest.raises(ValueError, match="DEBUG_UTILS_FORCE_DEBUG"):
        resolve_logger_options(None)


def test_ambient_mode(monkeypatch) -> None:
    assert ambient_debug_mode() is __debug__

    monkeypatch.setenv("DEBUG_UTILS_MODE", "Release")
    assert ambient_debug_mode() is False

    monkeypatch.setenv("DEBUG_UTILS_MODE", "debug")
    assert ambient_debug_mode() is True

    monkeypatch.setenv("DEBUG_UTILS_MODE", "staging")
    with pytest.raises(ValueError):
        ambient_debug_mode()


def test_env_filter_applies_through_init(monkeypatch, recording_sink) -> None:
    monkeypatch.setenv("DEBUG_UTILS_MIN_SEVERITY", "error")
    app = AppLogger.init(
        debug_sink=recording_sink,
        force_debug_mode=True,
        attach_global_error_handlers=False,
    )
    app.warning("dropped")
    app.error("kept")
    assert [r.message for r in recording_sink.records] == ["kept"]


def test_unknown_override_is_rejected() -> None:
    with pytest.raises(TypeError):
        AppLogger.init(not_an_option=True)
    assert AppLogger.is_initialized() is False
