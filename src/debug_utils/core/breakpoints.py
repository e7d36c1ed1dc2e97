"""Breakpoint strategies used by the facade and debug sinks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class BreakpointStrategy(Protocol):
    """Pauses execution for interactive inspection."""

    def trigger(self) -> None:
        ...


class DefaultBreakpointStrategy:
    """Drop into the configured debugger (``sys.breakpointhook``).

    Does nothing when running with ``python -O``. ``PYTHONBREAKPOINT=0``
    disables it as well.
    """

    def trigger(self) -> None:
        if __debug__:
            breakpoint()


class NoOpBreakpointStrategy:
    """Never pauses; safe for tests and headless runs."""

    def trigger(self) -> None:
        return None


@dataclass(slots=True)
class RecordingBreakpointStrategy:
    """Counts triggers instead of pausing."""

    count: int = 0

    @property
    def triggered(self) -> bool:
        return self.count > 0

    def trigger(self) -> None:
        self.count += 1
