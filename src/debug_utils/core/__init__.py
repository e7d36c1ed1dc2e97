"""Core pipeline pieces: severities, records, filtering, caller info, formatting."""

from __future__ import annotations

from .breakpoints import (
    BreakpointStrategy,
    DefaultBreakpointStrategy,
    NoOpBreakpointStrategy,
    RecordingBreakpointStrategy,
)
from .caller_info import (
    UNKNOWN_CALLER,
    CallerInfoExtractor,
    DefaultCallerInfoExtractor,
    LRUCache,
    trace_text,
)
from .filters import LogFilter
from .formatting import DefaultLogFormatter, JsonLogFormatter, LogFormatter, StructuredRecord
from .models import LogRecord
from .severity import Severity
from .timestamps import DefaultTimestampProvider, FixedTimestampProvider, TimestampProvider

__all__ = [
    "BreakpointStrategy",
    "CallerInfoExtractor",
    "DefaultBreakpointStrategy",
    "DefaultCallerInfoExtractor",
    "DefaultLogFormatter",
    "DefaultTimestampProvider",
    "FixedTimestampProvider",
    "JsonLogFormatter",
    "LRUCache",
    "LogFilter",
    "LogFormatter",
    "LogRecord",
    "NoOpBreakpointStrategy",
    "RecordingBreakpointStrategy",
    "Severity",
    "StructuredRecord",
    "TimestampProvider",
    "UNKNOWN_CALLER",
    "trace_text",
]
