"""Record formatters."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, Field
from pydantic_core import to_jsonable_python

from .models import LogRecord


class LogFormatter(Protocol):
    """Renders a record into a single output string."""

    def format(self, record: LogRecord) -> str:
        ...


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _fallback_context(context: Mapping[str, Any]) -> str:
    return "{" + ", ".join(f"{k}={_safe_str(v)}" for k, v in context.items()) + "}"


def format_context(context: Mapping[str, Any] | None) -> str:
    """Render context as compact JSON, or ``{k=v, ...}`` if not serializable."""
    if not context:
        return ""
    try:
        return json.dumps(dict(context), separators=(",", ":"), ensure_ascii=False)
    except Exception:
        return _fallback_context(context)


class DefaultLogFormatter:
    """``[timestamp][LEVEL][caller] message {context-json}``."""

    def format(self, record: LogRecord) -> str:
        line = f"[{record.timestamp}][{record.label}][{record.caller}] {record.message}"
        ctx = format_context(record.context)
        if ctx:
            line = f"{line} {ctx}"
        return line


class StructuredRecord(BaseModel):
    """JSON shape of a record as emitted by ``JsonLogFormatter``."""

    timestamp: str
    level: str
    caller: str
    message: str
    tag: str | None = None
    error: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: LogRecord) -> StructuredRecord:
        context = {
            str(k): to_jsonable_python(v, fallback=str)
            for k, v in (record.context or {}).items()
        }
        return cls(
            timestamp=record.timestamp,
            level=record.label,
            caller=record.caller,
            message=record.message,
            tag=record.tag,
            error=repr(record.error) if record.error is not None else None,
            context=context,
        )


class JsonLogFormatter:
    """One JSON object per record."""

    def format(self, record: LogRecord) -> str:
        return StructuredRecord.from_record(record).model_dump_json(exclude_none=True)
