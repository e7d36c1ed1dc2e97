"""Structured, mode-aware logging facade.

Typical use::

    from debug_utils import AppLogger, LogFilter, Severity

    AppLogger.init(filter=LogFilter(min_severity=Severity.INFO))
    AppLogger.instance().info("service started", tag="boot", context={"port": 8080})
"""

from __future__ import annotations

import logging

from .app_logger import CALLER_DISABLED, NO_CALLER, AppLogger
from .core import (
    UNKNOWN_CALLER,
    BreakpointStrategy,
    CallerInfoExtractor,
    DefaultBreakpointStrategy,
    DefaultCallerInfoExtractor,
    DefaultLogFormatter,
    DefaultTimestampProvider,
    FixedTimestampProvider,
    JsonLogFormatter,
    LogFilter,
    LogFormatter,
    LogRecord,
    LRUCache,
    NoOpBreakpointStrategy,
    RecordingBreakpointStrategy,
    Severity,
    TimestampProvider,
    trace_text,
)
from .errors import AlreadyInitializedError, LoggerStateError, NotInitializedError
from .hooks import PLATFORM_ERROR_TAG, THREAD_ERROR_TAG, GlobalErrorHandlers, HookSlot
from .options import LoggerOptions, resolve_logger_options
from .sinks import CompositeSink, ConsoleSink, DebugSink, LoggingSink, SilentSink, Sink

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlreadyInitializedError",
    "AppLogger",
    "BreakpointStrategy",
    "CALLER_DISABLED",
    "CallerInfoExtractor",
    "CompositeSink",
    "ConsoleSink",
    "DebugSink",
    "DefaultBreakpointStrategy",
    "DefaultCallerInfoExtractor",
    "DefaultLogFormatter",
    "DefaultTimestampProvider",
    "FixedTimestampProvider",
    "GlobalErrorHandlers",
    "HookSlot",
    "JsonLogFormatter",
    "LRUCache",
    "LogFilter",
    "LogFormatter",
    "LogRecord",
    "LoggerOptions",
    "LoggerStateError",
    "LoggingSink",
    "NO_CALLER",
    "NoOpBreakpointStrategy",
    "NotInitializedError",
    "PLATFORM_ERROR_TAG",
    "RecordingBreakpointStrategy",
    "Severity",
    "SilentSink",
    "Sink",
    "THREAD_ERROR_TAG",
    "TimestampProvider",
    "UNKNOWN_CALLER",
    "resolve_logger_options",
    "trace_text",
]
