"""Sink interfaces."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.models import LogRecord


@runtime_checkable
class Sink(Protocol):
    """Consumes finished log records."""

    def log(self, record: LogRecord) -> None:
        """Perform the sink's effect for one record."""
        ...


@runtime_checkable
class DebugSink(Sink, Protocol):
    """A sink that can also pause execution for a debugger."""

    def breakpoint(self) -> None:
        ...
