"""Lifecycle errors raised by the logging facade."""

from __future__ import annotations


class LoggerStateError(RuntimeError):
    """The facade was used in a way its lifecycle does not allow."""


class AlreadyInitializedError(LoggerStateError):
    def __init__(self) -> None:
        super().__init__("AppLogger is already initialized")


class NotInitializedError(LoggerStateError):
    def __init__(self) -> None:
        super().__init__("AppLogger is not initialized; call AppLogger.init() first")
