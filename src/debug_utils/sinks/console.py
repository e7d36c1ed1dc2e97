"""Console sink: format and write one line per record."""

from __future__ import annotations

import sys
from typing import TextIO

from ..core.breakpoints import BreakpointStrategy, DefaultBreakpointStrategy
from ..core.formatting import DefaultLogFormatter, LogFormatter
from ..core.models import LogRecord


class ConsoleSink:
    """Writes formatted records to a text stream (``sys.stdout`` by default)."""

    def __init__(
        self,
        formatter: LogFormatter | None = None,
        stream: TextIO | None = None,
        breakpoint_strategy: BreakpointStrategy | None = None,
    ) -> None:
        self.formatter = formatter or DefaultLogFormatter()
        self._stream = stream
        self.breakpoint_strategy = breakpoint_strategy or DefaultBreakpointStrategy()

    @property
    def stream(self) -> TextIO:
        # Resolved per write so redirected/captured stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def log(self, record: LogRecord) -> None:
        stream = self.stream
        stream.write(self.formatter.format(record) + "\n")
        stream.flush()

    def breakpoint(self) -> None:
        self.breakpoint_strategy.trigger()
