"""Severity levels used by the logging facade."""

from __future__ import annotations

import logging
from enum import IntEnum


class Severity(IntEnum):
    """Ordered severity levels; the value is the priority."""

    TRACE = 0
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50
    VERBOSE = 60

    @property
    def priority(self) -> int:
        return int(self.value)

    @property
    def label(self) -> str:
        """Upper-case display label (e.g. ``WARNING``)."""
        return self.name

    @property
    def stdlib_level(self) -> int:
        """Closest level of the standard ``logging`` module."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, name: str) -> Severity:
        """Look up a severity by name, case-insensitively."""
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError as exc:
            allowed = ", ".join(s.name for s in cls)
            raise ValueError(f"Invalid severity {name!r}. Allowed: {allowed}") from exc


TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.TRACE: TRACE_LEVEL,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    # Verbose sits above fatal in priority but is chatty output, not an alarm.
    Severity.VERBOSE: logging.DEBUG,
}
