"""Sink that discards everything."""

from __future__ import annotations

from ..core.models import LogRecord


class SilentSink:
    """Release-mode default: accepts records, does nothing."""

    def log(self, record: LogRecord) -> None:
        return None
