"""Sink implementations."""

from __future__ import annotations

from .base import DebugSink, Sink
from .composite import CompositeSink, SinkErrorCallback
from .console import ConsoleSink
from .silent import SilentSink
from .stdlib import LoggingSink

__all__ = [
    "CompositeSink",
    "ConsoleSink",
    "DebugSink",
    "LoggingSink",
    "SilentSink",
    "Sink",
    "SinkErrorCallback",
]
