"""Initialization options for ``AppLogger`` and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .core.breakpoints import BreakpointStrategy
from .core.caller_info import CallerInfoExtractor
from .core.filters import LogFilter
from .core.severity import Severity
from .core.timestamps import TimestampProvider
from .sinks import Sink, SinkErrorCallback

ENV_MODE = "DEBUG_UTILS_MODE"
ENV_FORCE_DEBUG = "DEBUG_UTILS_FORCE_DEBUG"
ENV_MIN_SEVERITY = "DEBUG_UTILS_MIN_SEVERITY"
ENV_TAGS = "DEBUG_UTILS_TAGS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class LoggerOptions:
    debug_sink: Sink | None = None  # wrapped in a CompositeSink in debug mode
    release_sink: Sink | None = None  # SilentSink when omitted
    filter: LogFilter | None = None
    enable_caller_info: bool = True
    attach_global_error_handlers: bool = True
    force_debug_mode: bool = False
    timestamp_provider: TimestampProvider | None = None
    caller_info_extractor: CallerInfoExtractor | None = None
    breakpoint_strategy: BreakpointStrategy | None = None

    # Receives failures of individual sinks inside the debug composite.
    on_sink_error: SinkErrorCallback | None = None


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off)")


def ambient_debug_mode() -> bool:
    """Build mode signal: ``DEBUG_UTILS_MODE`` if set, else ``__debug__``."""
    raw = os.getenv(ENV_MODE)
    if raw is None or raw.strip() == "":
        return __debug__
    mode = raw.strip().lower()
    if mode == "debug":
        return True
    if mode == "release":
        return False
    raise ValueError(f"{ENV_MODE} must be 'debug' or 'release'")


def resolve_logger_options(options: LoggerOptions | None) -> LoggerOptions:
    """Return options with environment overrides applied.

    A filter supplied in ``options`` is reconfigured in place so callers
    holding a reference keep controlling the live filter.
    """
    if options is None:
        options = LoggerOptions()

    force = _env_flag(ENV_FORCE_DEBUG)
    if force is not None and force != options.force_debug_mode:
        options = replace(options, force_debug_mode=force)

    min_severity: Severity | None = None
    raw_min = os.getenv(ENV_MIN_SEVERITY)
    if raw_min:
        try:
            min_severity = Severity.parse(raw_min)
        except ValueError as exc:
            raise ValueError(f"{ENV_MIN_SEVERITY}: {exc}") from exc

    tags: frozenset[str] | None = None
    raw_tags = os.getenv(ENV_TAGS)
    if raw_tags is not None and raw_tags.strip():
        tags = frozenset(t.strip() for t in raw_tags.split(",") if t.strip())

    log_filter = options.filter
    if log_filter is None:
        log_filter = LogFilter()
        options = replace(options, filter=log_filter)
    if min_severity is not None or tags is not None:
        log_filter.configure(min_severity=min_severity, enabled_tags=tags)

    return options
