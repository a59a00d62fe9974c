"""Environment-driven settings for sheetio."""

from __future__ import annotations

from typing import TypedDict

from sheetio._logging import LogFormat, LogLevel
from sheetio.config._utils import (
    _parse_log_format,
    _parse_log_level,
    _parse_positive_int,
    _parse_str,
)

DEFAULT_ROW_WINDOW = 5000
DEFAULT_DATE_PATTERN = "%Y-%m-%d"


class SheetIOSettings(TypedDict):
    row_window: int
    date_pattern: str
    log_level: LogLevel
    log_format: LogFormat


def load_sheetio_settings() -> SheetIOSettings:
    """Read settings from SHEETIO_* environment variables.

    Raises:
        ValueError: If SHEETIO_ROW_WINDOW is not a positive integer or
            SHEETIO_LOG_FORMAT is not "json"/"text".
    """
    return {
        "row_window": _parse_positive_int("SHEETIO_ROW_WINDOW", DEFAULT_ROW_WINDOW),
        "date_pattern": _parse_str("SHEETIO_DATE_PATTERN", DEFAULT_DATE_PATTERN),
        "log_level": _parse_log_level("SHEETIO_LOG_LEVEL", "INFO"),
        "log_format": _parse_log_format("SHEETIO_LOG_FORMAT", "text"),
    }


__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_ROW_WINDOW",
    "SheetIOSettings",
    "load_sheetio_settings",
]
