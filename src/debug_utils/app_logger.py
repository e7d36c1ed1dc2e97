"""Process-wide logging facade.

``AppLogger.init()`` creates the single instance; ``AppLogger.instance()``
returns it. Every severity method runs the same pipeline on the caller's
thread: filter, caller lookup, timestamp, record, sink.
"""

from __future__ import annotations

import logging
import threading
import traceback
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, ClassVar

from .core.breakpoints import BreakpointStrategy, DefaultBreakpointStrategy
from .core.caller_info import (
    UNKNOWN_CALLER,
    CallerInfoExtractor,
    DefaultCallerInfoExtractor,
    trace_text,
)
from .core.filters import LogFilter
from .core.models import LogRecord
from .core.severity import Severity
from .core.timestamps import DefaultTimestampProvider, TimestampProvider
from .errors import AlreadyInitializedError, NotInitializedError
from .hooks import GlobalErrorHandlers
from .options import LoggerOptions, ambient_debug_mode, resolve_logger_options
from .sinks import CompositeSink, ConsoleSink, SilentSink, Sink

logger = logging.getLogger(__name__)

CALLER_DISABLED = "CALLER_DISABLED"
NO_CALLER = "NO_CALLER"

_init_lock = threading.Lock()


class AppLogger:
    """Singleton logging facade."""

    _instance: ClassVar[AppLogger | None] = None

    def __init__(
        self,
        *,
        sink: Sink,
        log_filter: LogFilter,
        is_debug: bool,
        enable_caller_info: bool = True,
        timestamp_provider: TimestampProvider | None = None,
        caller_info_extractor: CallerInfoExtractor | None = None,
        breakpoint_strategy: BreakpointStrategy | None = None,
    ) -> None:
        self._sink = sink
        self._filter = log_filter
        self._is_debug = is_debug
        self._enable_caller_info = enable_caller_info
        self._timestamp_provider = timestamp_provider or DefaultTimestampProvider()
        self._caller_info_extractor = caller_info_extractor or DefaultCallerInfoExtractor()
        self._breakpoint_strategy = breakpoint_strategy or DefaultBreakpointStrategy()
        self._error_handlers: GlobalErrorHandlers | None = None

    # -- lifecycle ---------------------------------------------------------

    @classmethod
    def init(cls, options: LoggerOptions | None = None, /, **overrides: Any) -> AppLogger:
        """Create the process-wide instance.

        Keyword overrides are applied on top of ``options`` (field names of
        ``LoggerOptions``). Raises ``AlreadyInitializedError`` if an instance
        exists.
        """
        with _init_lock:
            if cls._instance is not None:
                raise AlreadyInitializedError()

            if overrides:
                options = replace(options or LoggerOptions(), **overrides)
            opts = resolve_logger_options(options)
            is_debug = opts.force_debug_mode or ambient_debug_mode()

            if is_debug:
                sink: Sink = CompositeSink(
                    [opts.debug_sink or ConsoleSink()],
                    on_sink_error=opts.on_sink_error,
                )
            else:
                sink = opts.release_sink or SilentSink()

            inst = cls(
                sink=sink,
                log_filter=opts.filter or LogFilter(),
                is_debug=is_debug,
                enable_caller_info=opts.enable_caller_info,
                timestamp_provider=opts.timestamp_provider,
                caller_info_extractor=opts.caller_info_extractor,
                breakpoint_strategy=opts.breakpoint_strategy,
            )
            if opts.attach_global_error_handlers:
                inst._error_handlers = GlobalErrorHandlers(inst.error)
                inst._error_handlers.install()

            cls._instance = inst
            logger.debug("AppLogger initialized (debug=%s, sink=%r)", is_debug, sink)
            return inst

    @classmethod
    def instance(cls) -> AppLogger:
        inst = cls._instance
        if inst is None:
            raise NotInitializedError()
        return inst

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset_instance_for_testing(cls) -> None:
        """Restore global hooks and forget the instance. Safe to call twice."""
        with _init_lock:
            inst, cls._instance = cls._instance, None
        if inst is not None:
            inst._restore_handlers()

    def dispose(self) -> None:
        """Restore global hooks; the instance stays registered."""
        self._restore_handlers()

    def _restore_handlers(self) -> None:
        if self._error_handlers is not None:
            self._error_handlers.restore()

    # -- accessors ---------------------------------------------------------

    @property
    def filter(self) -> LogFilter:
        return self._filter

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def is_debug(self) -> bool:
        return self._is_debug

    @property
    def error_handlers(self) -> GlobalErrorHandlers | None:
        return self._error_handlers

    # -- dispatch ----------------------------------------------------------

    def _log(
        self,
        message: str,
        *,
        severity: Severity,
        tag: str | None = None,
        error: object | None = None,
        stack_trace: Any | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if not self._filter.should_log(severity, tag):
            return

        caller = CALLER_DISABLED
        if self._enable_caller_info:
            trace = stack_trace if stack_trace is not None else traceback.extract_stack()
            try:
                caller = self._caller_info_extractor.extract(trace) or NO_CALLER
            except Exception:
                logger.debug("caller extractor failed", exc_info=True)
                caller = UNKNOWN_CALLER

        timestamp = self._timestamp_provider.current_timestamp()

        if severity in (Severity.ERROR, Severity.FATAL) and stack_trace is not None:
            message = f"{message}\n{trace_text(stack_trace)}"

        record = LogRecord(
            severity=severity,
            message=message,
            caller=caller,
            timestamp=timestamp,
            tag=tag,
            error=error,
            stack_trace=stack_trace,
            context=context,
        )
        try:
            self._sink.log(record)
        except Exception as exc:
            # Composite sinks isolate their children; this covers a bare release sink.
            logger.warning("sink %r failed: %s", self._sink, exc, exc_info=exc)

    def log(
        self,
        message: str,
        severity: Severity,
        *,
        tag: str | None = None,
        error: object | None = None,
        stack_trace: Any | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self._log(
            message,
            severity=severity,
            tag=tag,
            error=error,
            stack_trace=stack_trace,
            context=context,
        )

    def trace(self, message: str, **kwargs: Any) -> None:
        self._log(message, severity=Severity.TRACE, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(message, severity=Severity.DEBUG, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(message, severity=Severity.INFO, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(message, severity=Severity.WARNING, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR; a supplied ``stack_trace`` is appended to the message."""
        self._log(message, severity=Severity.ERROR, **kwargs)

    def fatal(self, message: str, **kwargs: Any) -> None:
        self._log(message, severity=Severity.FATAL, **kwargs)

    def verbose(self, message: str, **kwargs: Any) -> None:
        self._log(message, severity=Severity.VERBOSE, **kwargs)

    def breakpoint(self) -> None:
        """Pause via the configured breakpoint strategy."""
        self._breakpoint_strategy.trigger()
