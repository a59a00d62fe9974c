"""Cell coercion engine.

Maps one RawCell to exactly one CanonicalValue. The mapping is a pure
function of the cell: no caches, no locale, no timezone lookups. Dates
come back as naive datetimes in UTC wall-clock time.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta

from sheetio._protocols.openpyxl import _date_epoch, _from_excel, _is_date_format
from sheetio.types.cells import RawCell, RawContent
from sheetio.types.values import (
    CanonicalValue,
    boolean_value,
    date_value,
    error_value,
    null_value,
    number_value,
    text_value,
)

# Formats under which a number is rendered as integer text. Keeps long
# identifiers (account numbers, phone numbers) exact.
_TEXT_FORMAT = "@"
_GENERAL_FORMAT = "general"


def is_date_format(number_format: str) -> bool:
    """Check whether a display format renders its number as a date/time."""
    if number_format == "" or number_format.lower() == _GENERAL_FORMAT:
        return False
    return _is_date_format(number_format)


def _is_integer_text_format(number_format: str) -> bool:
    return number_format == _TEXT_FORMAT or number_format.lower() == _GENERAL_FORMAT


def _as_number(value: RawContent) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _serial_to_datetime(serial: float, date1904: bool) -> datetime | None:
    """Convert a serial to a datetime, or None when out of range."""
    try:
        converted = _from_excel(serial, date1904)
    except (OverflowError, ValueError):
        return None
    if isinstance(converted, datetime):
        return converted
    if isinstance(converted, time):
        return datetime.combine(_date_epoch(date1904).date(), converted)
    if isinstance(converted, timedelta):
        return _date_epoch(date1904) + converted
    return None


def _format_integer_text(number: float) -> str:
    """Render a number with zero decimal places, rounding half to even."""
    return f"{number:.0f}"


def _coerce_numeric(cell: RawCell) -> CanonicalValue:
    number = _as_number(cell["value"])
    if number is None:
        return null_value()

    number_format = cell["number_format"]
    if is_date_format(number_format):
        converted = _serial_to_datetime(number, cell["date1904"])
        if converted is not None:
            return date_value(converted)
        return number_value(number)

    if _is_integer_text_format(number_format):
        rendered = _format_integer_text(number)
        if rendered.strip() == "":
            return null_value()
        return text_value(rendered)

    return number_value(number)


def _coerce_formula(cell: RawCell) -> CanonicalValue:
    # Only the cached numeric result is reported. Text or boolean results
    # read as null.
    number = _as_number(cell["value"])
    if number is None:
        return null_value()
    return number_value(number)


def _coerce_text(cell: RawCell) -> CanonicalValue:
    raw = cell["value"]
    if raw is None:
        return null_value()
    text = raw if isinstance(raw, str) else str(raw)
    if text.strip() == "":
        return null_value()
    return text_value(text)


def _coerce_boolean(cell: RawCell) -> CanonicalValue:
    raw = cell["value"]
    if raw is None:
        return null_value()
    return boolean_value(bool(raw))


def _coerce_error(cell: RawCell) -> CanonicalValue:
    raw = cell["value"]
    return error_value("" if raw is None else str(raw))


def coerce(cell: RawCell | None) -> CanonicalValue:
    """Map one raw cell to its canonical value.

    Args:
        cell: Decoded cell, or None for an absent cell.

    Returns:
        Exactly one CanonicalValue. Never raises.
    """
    if cell is None:
        return null_value()

    kind = cell["kind"]
    if kind == "blank":
        return null_value()
    if kind == "boolean":
        return _coerce_boolean(cell)
    if kind == "error":
        return _coerce_error(cell)
    if kind == "formula":
        return _coerce_formula(cell)
    if kind == "numeric":
        return _coerce_numeric(cell)
    if kind == "text":
        return _coerce_text(cell)
    return null_value()


__all__ = [
    "coerce",
    "is_date_format",
]
