"""Fan-out sink with per-sink failure isolation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from types import TracebackType

from ..core.models import LogRecord
from .base import DebugSink, Sink

logger = logging.getLogger(__name__)

SinkErrorCallback = Callable[[BaseException, TracebackType | None], None]


class CompositeSink:
    """Deliver each record to every child sink, in order.

    A failing child is reported (via ``on_sink_error`` when given, else on this
    module's logger) and skipped; the remaining children still receive the
    record.
    """

    def __init__(
        self,
        sinks: Iterable[Sink],
        *,
        on_sink_error: SinkErrorCallback | None = None,
    ) -> None:
        self.sinks: list[Sink] = list(sinks)
        self.on_sink_error = on_sink_error

    def _report(self, sink: object, exc: Exception, action: str) -> None:
        if self.on_sink_error is None:
            logger.warning("%s failed in %r: %s", action, sink, exc, exc_info=exc)
            return
        try:
            self.on_sink_error(exc, exc.__traceback__)
        except Exception:
            logger.exception("on_sink_error callback failed while handling %r", exc)

    def log(self, record: LogRecord) -> None:
        for sink in self.sinks:
            try:
                sink.log(record)
            except Exception as exc:
                self._report(sink, exc, "log")

    def breakpoint(self) -> None:
        for sink in self.sinks:
            if not isinstance(sink, DebugSink):
                continue
            try:
                sink.breakpoint()
            except Exception as exc:
                self._report(sink, exc, "breakpoint")
