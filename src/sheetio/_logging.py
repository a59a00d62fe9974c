"""Logging setup for sheetio.

Library modules only call get_logger(__name__). Applications that want the
structured output call setup_logging once at startup.
"""

from __future__ import annotations

import json
import logging
import os
import socket
import sys
import time
from typing import Literal, TypedDict

LogFormat = Literal["json", "text"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

JSONScalar = str | int | float | bool | None

# Structured fields attached via ``extra=`` by the reader and exporter.
_STANDARD_FIELDS: tuple[str, ...] = (
    "sheet",
    "row",
    "column",
    "field",
    "format_hint",
    "rows_written",
    "row_window",
)


class LogEventFields(TypedDict, total=False):
    """Optional structured fields for sheetio log events."""

    sheet: str
    row: int
    column: int
    field: str
    format_hint: str
    rows_written: int
    row_window: int


def _get_record_scalar(record: logging.LogRecord, field_name: str) -> JSONScalar | None:
    raw = record.__dict__.get(field_name)
    if isinstance(raw, (str, int, float, bool)):
        return raw
    return None


class JsonFormatter(logging.Formatter):
    """JSON formatter producing one object per record.

    Fields:
    - ISO8601 timestamp (UTC)
    - level, logger, message
    - static fields (service, instance_id)
    - configured and standard extra fields when present on the record
    - exception info if present
    """

    def __init__(
        self,
        *,
        static_fields: dict[str, str],
        extra_field_names: list[str],
    ) -> None:
        super().__init__()
        self._static = static_fields
        self._extra_fields = extra_field_names

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, JSONScalar] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in self._static:
            payload[key] = self._static[key]

        for field_name in (*self._extra_fields, *_STANDARD_FIELDS):
            if field_name in payload:
                continue
            value = _get_record_scalar(record, field_name)
            if value is None:
                continue
            payload[field_name] = value

        if record.exc_info is not None:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter.

    Format: [timestamp] [LEVEL] [logger] [extra_fields] message
    """

    def __init__(self, *, extra_fields: list[str]) -> None:
        super().__init__()
        self._extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        parts: list[str] = [
            f"[{timestamp}]",
            f"[{record.levelname}]",
            f"[{record.name}]",
        ]

        for field_name in self._extra_fields:
            value = _get_record_scalar(record, field_name)
            if value is not None:
                parts.append(f"{field_name}={value}")

        parts.append(record.getMessage())
        line = " ".join(parts)

        if record.exc_info is not None:
            line = line + "\n" + self.formatException(record.exc_info)

        return line


def _compute_instance_id() -> str:
    """Generate a stable instance ID from hostname and PID."""
    host = socket.gethostname().split(".")[0]
    return f"{host}-{os.getpid()}"


def _level_to_int(level: LogLevel) -> int:
    level_map: dict[LogLevel, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map[level]


def setup_logging(
    *,
    level: LogLevel,
    format_mode: LogFormat,
    service_name: str,
    instance_id: str | None,
    extra_fields: list[str] | None,
) -> logging.Logger:
    """Configure the root logger with JSON or text output on stdout.

    Clears existing handlers to ensure clean state.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_mode: "json" for production, "text" for development.
        service_name: Name included in every JSON record.
        instance_id: Instance ID (auto-generated if None).
        extra_fields: Extra record attributes to render (empty if None).

    Returns:
        Configured root logger.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level_to_int(level))

    computed_instance_id = instance_id if instance_id is not None else _compute_instance_id()
    static_fields: dict[str, str] = {
        "service": service_name,
        "instance_id": computed_instance_id,
    }
    extra_field_names = extra_fields if extra_fields is not None else []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    if format_mode == "json":
        handler.setFormatter(
            JsonFormatter(static_fields=static_fields, extra_field_names=extra_field_names)
        )
    else:
        handler.setFormatter(TextFormatter(extra_fields=extra_field_names))
    root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name (typically __name__)."""
    return logging.getLogger(name)


__all__ = [
    "JsonFormatter",
    "LogEventFields",
    "LogFormat",
    "LogLevel",
    "TextFormatter",
    "get_logger",
    "setup_logging",
]
