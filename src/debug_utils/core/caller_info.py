"""Caller-site extraction from captured stack traces.

Resolving ``function@file:line`` means walking (and usually formatting) a
stack, which is too slow to repeat on every call from a hot loop. Results are
kept in a bounded LRU cache keyed by the trace's full text.
"""

from __future__ import annotations

import logging
import os
import threading
import traceback
from collections import OrderedDict
from collections.abc import Callable, Iterable, Sequence
from types import FrameType, TracebackType
from typing import Any, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

UNKNOWN_CALLER = "UNKNOWN_CALLER"
DEFAULT_CACHE_SIZE = 1000

# Logging API method names plus our own entry point. Matched as
# case-insensitive substrings, so e.g. ``debug_payment_flow`` is skipped too.
DEFAULT_EXCLUDED_MEMBERS: tuple[str, ...] = (
    "log",
    "debug",
    "info",
    "warning",
    "error",
    "trace",
    "breakpoint",
    "fatal",
    "verbose",
    "extract",
)

K = TypeVar("K")
V = TypeVar("V")


class FrameLike(Protocol):
    name: str
    filename: str
    lineno: int | None


FrameWalker = Callable[[Any], Iterable[FrameLike]]


class CallerInfoExtractor(Protocol):
    """Resolves a captured trace to a short caller string."""

    def extract(self, trace: Any) -> str | None:
        ...


class LRUCache(Generic[K, V]):
    """Thread-safe bounded mapping with least-recently-used eviction."""

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self._data: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: K) -> V | None:
        """Return the cached value and mark it most recently used."""
        with self._lock:
            try:
                self._data.move_to_end(key)
            except KeyError:
                return None
            return self._data[key]

    def put(self, key: K, value: V) -> None:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
            elif len(self._data) >= self.max_size:
                self._data.popitem(last=False)
            self._data[key] = value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[K]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def _as_stack_summary(trace: Any) -> Sequence[FrameLike]:
    """Normalize supported trace shapes to frames ordered oldest call first."""
    if isinstance(trace, TracebackType):
        return traceback.extract_tb(trace)
    if isinstance(trace, FrameType):
        return traceback.extract_stack(trace)
    if isinstance(trace, BaseException):
        return traceback.extract_tb(trace.__traceback__)
    return list(trace)


def trace_text(trace: Any) -> str:
    """Full textual representation of a trace (also used as the cache key)."""
    if isinstance(trace, str):
        return trace
    if isinstance(trace, traceback.StackSummary):
        return "".join(trace.format())
    if isinstance(trace, (TracebackType, FrameType, BaseException)):
        return "".join(traceback.format_list(_as_stack_summary(trace)))
    if isinstance(trace, (list, tuple)) and all(
        isinstance(f, traceback.FrameSummary) for f in trace
    ):
        return "".join(traceback.format_list(list(trace)))
    return str(trace)


def walk_frames(trace: Any) -> Iterable[FrameLike]:
    """Yield frames from the most recent call outward."""
    return reversed(_as_stack_summary(trace))


def format_caller(frame: FrameLike) -> str:
    return f"{frame.name}@{os.path.basename(frame.filename)}:{frame.lineno}"


class DefaultCallerInfoExtractor:
    """Extract ``function@file:line`` for the first non-logging frame."""

    def __init__(
        self,
        *,
        max_cache_size: int = DEFAULT_CACHE_SIZE,
        excluded_members: Iterable[str] = DEFAULT_EXCLUDED_MEMBERS,
        frame_walker: FrameWalker | None = None,
    ) -> None:
        self.cache: LRUCache[str, str] = LRUCache(max_cache_size)
        self.excluded_members = tuple(m.lower() for m in excluded_members)
        self._walk = frame_walker or walk_frames

    def _is_excluded(self, member: str) -> bool:
        lowered = member.lower()
        return any(ex in lowered for ex in self.excluded_members)

    def extract(self, trace: Any) -> str:
        """Resolve the call site; never raises."""
        try:
            key = trace_text(trace)
        except Exception:
            logger.debug("could not render trace for caller lookup", exc_info=True)
            return UNKNOWN_CALLER

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        caller = UNKNOWN_CALLER
        try:
            for frame in self._walk(trace):
                member = frame.name or ""
                if not self._is_excluded(member):
                    caller = format_caller(frame)
                    break
        except Exception:
            logger.debug("caller extraction failed", exc_info=True)
            caller = UNKNOWN_CALLER

        self.cache.put(key, caller)
        return caller
