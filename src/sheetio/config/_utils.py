from __future__ import annotations

from sheetio._logging import LogFormat, LogLevel
from sheetio.config import _test_hooks


def _optional_env_str(key: str) -> str | None:
    value = _test_hooks.get_env(key)
    if value is None:
        return None
    trimmed = value.strip()
    if trimmed == "":
        return None
    return trimmed


def _parse_str(key: str, default: str) -> str:
    val = _optional_env_str(key)
    return val if val is not None else default


def _parse_int(key: str, default: int) -> int:
    val = _optional_env_str(key)
    if val is None:
        return default
    return int(val)


def _parse_positive_int(key: str, default: int) -> int:
    parsed = _parse_int(key, default)
    if parsed < 1:
        raise ValueError(f"{key} must be >= 1, got {parsed}")
    return parsed


def _parse_log_level(key: str, default: LogLevel) -> LogLevel:
    val = _optional_env_str(key)
    if val is None:
        return default
    upper_val = val.upper()
    if upper_val == "DEBUG":
        return "DEBUG"
    if upper_val == "INFO":
        return "INFO"
    if upper_val == "WARNING":
        return "WARNING"
    if upper_val == "ERROR":
        return "ERROR"
    if upper_val == "CRITICAL":
        return "CRITICAL"
    return default


def _parse_log_format(key: str, default: LogFormat) -> LogFormat:
    val = _optional_env_str(key)
    if val is None:
        return default
    lowered: str = val.lower()
    if lowered == "json":
        return "json"
    if lowered == "text":
        return "text"
    raise ValueError(f"Invalid log format for {key}: {val!r}")


__all__ = [
    "_optional_env_str",
    "_parse_int",
    "_parse_log_format",
    "_parse_log_level",
    "_parse_positive_int",
    "_parse_str",
]
