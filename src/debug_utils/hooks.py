"""Process-wide exception hooks: capture, chain, restore.

Two slots are handled. ``sys.excepthook`` sees uncaught exceptions on the main
thread (reported with the ``PlatformError`` tag) and ``threading.excepthook``
sees those escaping a thread's ``run`` (``ThreadError`` tag). Each replacement
calls the hook it displaced first, then reports the exception.
"""

from __future__ import annotations

import logging
import sys
import threading
import traceback
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Protocol

logger = logging.getLogger(__name__)

PLATFORM_ERROR_TAG = "PlatformError"
THREAD_ERROR_TAG = "ThreadError"


class ErrorReporter(Protocol):
    def __call__(
        self,
        message: str,
        *,
        tag: str | None = None,
        error: object | None = None,
        stack_trace: Any | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ...


@dataclass(frozen=True, slots=True)
class HookSlot:
    """Get/set access to one process-wide hook."""

    name: str
    tag: str
    get: Callable[[], Any]
    set: Callable[[Any], None]


def _set_sys_excepthook(hook: Any) -> None:
    sys.excepthook = hook


def _set_threading_excepthook(hook: Any) -> None:
    threading.excepthook = hook


PLATFORM_HOOK = HookSlot(
    name="sys.excepthook",
    tag=PLATFORM_ERROR_TAG,
    get=lambda: sys.excepthook,
    set=_set_sys_excepthook,
)
THREAD_HOOK = HookSlot(
    name="threading.excepthook",
    tag=THREAD_ERROR_TAG,
    get=lambda: threading.excepthook,
    set=_set_threading_excepthook,
)


def describe_exception(exc_type: type[BaseException] | None, exc_value: BaseException | None) -> str:
    """One-line ``Type: message`` description."""
    if exc_type is None:
        return repr(exc_value)
    return "".join(traceback.format_exception_only(exc_type, exc_value)).strip()


class GlobalErrorHandlers:
    """Installs replacement hooks that funnel into ``report``."""

    def __init__(
        self,
        report: ErrorReporter,
        *,
        platform_slot: HookSlot = PLATFORM_HOOK,
        thread_slot: HookSlot = THREAD_HOOK,
    ) -> None:
        self._report = report
        self.platform_slot = platform_slot
        self.thread_slot = thread_slot
        self._previous: list[tuple[HookSlot, Any]] = []

    @property
    def installed(self) -> bool:
        return bool(self._previous)

    def previous(self, slot: HookSlot) -> Any:
        for s, hook in self._previous:
            if s is slot:
                return hook
        return None

    def install(self) -> None:
        if self._previous:
            return
        prev_platform = self.platform_slot.get()
        prev_thread = self.thread_slot.get()
        self._previous = [(self.platform_slot, prev_platform), (self.thread_slot, prev_thread)]
        self.platform_slot.set(self._make_platform_hook(prev_platform))
        self.thread_slot.set(self._make_thread_hook(prev_thread))
        logger.debug("installed %s and %s", self.platform_slot.name, self.thread_slot.name)

    def restore(self) -> None:
        """Put back exactly the hooks captured by ``install``; idempotent."""
        previous, self._previous = self._previous, []
        for slot, hook in previous:
            slot.set(hook)
            logger.debug("restored %s", slot.name)

    def _report_safely(self, tag: str, message: str, **kwargs: Any) -> None:
        try:
            self._report(message, tag=tag, **kwargs)
        except Exception:
            logger.exception("failed to record uncaught exception (%s)", tag)

    def _make_platform_hook(self, previous: Any) -> Callable[..., bool]:
        tag = self.platform_slot.tag

        def platform_hook(
            exc_type: type[BaseException],
            exc_value: BaseException,
            exc_tb: TracebackType | None,
        ) -> bool:
            try:
                if previous is not None:
                    previous(exc_type, exc_value, exc_tb)
            finally:
                self._report_safely(
                    tag,
                    describe_exception(exc_type, exc_value),
                    error=exc_value,
                    stack_trace=exc_tb,
                )
            return True

        return platform_hook

    def _make_thread_hook(self, previous: Any) -> Callable[[Any], None]:
        tag = self.thread_slot.tag

        def thread_hook(args: Any) -> None:
            try:
                if previous is not None:
                    previous(args)
            finally:
                thread = getattr(args, "thread", None)
                self._report_safely(
                    tag,
                    describe_exception(args.exc_type, args.exc_value),
                    error=args.exc_value,
                    stack_trace=args.exc_traceback,
                    context={"thread": thread.name} if thread is not None else None,
                )

        return thread_hook
