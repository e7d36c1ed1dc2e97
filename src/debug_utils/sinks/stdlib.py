"""Forward records to the standard ``logging`` module."""

from __future__ import annotations

import logging

from ..core.formatting import LogFormatter
from ..core.models import LogRecord


class LoggingSink:
    """Hand records to a stdlib logger so existing handlers pick them up.

    The message is the bare record message unless a formatter is given. Tag,
    caller and context travel as ``extra`` attributes (``du_tag``,
    ``du_caller``, ``du_context``) for use in handler format strings.
    """

    def __init__(self, logger_name: str = "debug_utils.app", formatter: LogFormatter | None = None) -> None:
        self.logger = logging.getLogger(logger_name)
        self.formatter = formatter

    def log(self, record: LogRecord) -> None:
        level = record.severity.stdlib_level
        if not self.logger.isEnabledFor(level):
            return
        msg = self.formatter.format(record) if self.formatter else record.message
        # Error messages already carry the trace text when one was supplied.
        exc_info = None
        if isinstance(record.error, BaseException) and record.stack_trace is None:
            exc_info = record.error
        self.logger.log(
            level,
            msg,
            exc_info=exc_info,
            extra={
                "du_tag": record.tag,
                "du_caller": record.caller,
                "du_context": dict(record.context or {}),
            },
        )
