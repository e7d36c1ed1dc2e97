"""Runtime log filter (severity threshold + tag allow-list)."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from .severity import Severity


class LogFilter:
    """Decides whether a severity/tag pair should be recorded.

    An empty tag set means "no tag restriction". Once any tag is enabled,
    untagged records are rejected.
    """

    def __init__(
        self,
        min_severity: Severity = Severity.TRACE,
        enabled_tags: Iterable[str] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._min_severity = min_severity
        self._enabled_tags = frozenset(enabled_tags or ())

    @property
    def min_severity(self) -> Severity:
        with self._lock:
            return self._min_severity

    @property
    def enabled_tags(self) -> frozenset[str]:
        with self._lock:
            return self._enabled_tags

    def configure(
        self,
        *,
        min_severity: Severity | None = None,
        enabled_tags: Iterable[str] | None = None,
    ) -> None:
        """Replace the threshold and/or the tag set (the tag set is not merged)."""
        new_tags = frozenset(enabled_tags) if enabled_tags is not None else None
        with self._lock:
            if min_severity is not None:
                self._min_severity = min_severity
            if new_tags is not None:
                self._enabled_tags = new_tags

    def should_log(self, severity: Severity, tag: str | None) -> bool:
        with self._lock:
            minimum = self._min_severity
            tags = self._enabled_tags
        if severity.priority < minimum.priority:
            return False
        if not tags:
            return True
        return bool(tag) and tag in tags

    def __repr__(self) -> str:
        return (
            f"LogFilter(min_severity={self.min_severity.name}, "
            f"enabled_tags={sorted(self.enabled_tags)!r})"
        )
