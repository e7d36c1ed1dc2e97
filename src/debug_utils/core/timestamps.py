"""Timestamp providers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class TimestampProvider(Protocol):
    """Yields "now" as an ISO-8601 string."""

    def current_timestamp(self) -> str:
        ...


@dataclass(frozen=True, slots=True)
class DefaultTimestampProvider:
    """Wall clock, local time with UTC offset."""

    timespec: str = "auto"

    def current_timestamp(self) -> str:
        return datetime.now().astimezone().isoformat(timespec=self.timespec)


@dataclass(frozen=True, slots=True)
class FixedTimestampProvider:
    """Always returns the same timestamp (deterministic tests)."""

    value: str = "1970-01-01T00:00:00+00:00"

    def current_timestamp(self) -> str:
        return self.value
