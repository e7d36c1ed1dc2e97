"""Core data models for the logging pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .severity import Severity


@dataclass(frozen=True, slots=True)
class LogRecord:
    """One fully enriched log occurrence, handed to sinks."""

    severity: Severity
    message: str
    caller: str
    timestamp: str
    tag: str | None = None
    error: object | None = None  # opaque; passed through untouched
    stack_trace: Any | None = None  # raw trace as supplied by the caller
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.context is not None:
            object.__setattr__(self, "context", MappingProxyType(dict(self.context)))

    @property
    def label(self) -> str:
        return self.severity.label
