"""Canonical value domain.

Every cell read from a sheet is normalised into exactly one of these
tagged shapes. The ``kind`` key is the discriminator.

All types are TypedDicts; construct them through the helper functions.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Literal, TypedDict


class NullValue(TypedDict):
    """Absent or blank cell."""

    kind: Literal["null"]


class BooleanValue(TypedDict):
    kind: Literal["boolean"]
    value: bool


class NumberValue(TypedDict):
    kind: Literal["number"]
    value: float


class DateValue(TypedDict):
    """Date/time cell.

    Attributes:
        value: Naive datetime, interpreted as UTC wall-clock time.
    """

    kind: Literal["date"]
    value: datetime


class TextValue(TypedDict):
    kind: Literal["text"]
    value: str


class ErrorValue(TypedDict):
    """Spreadsheet error marker.

    Attributes:
        code: Raw error indicator from the source cell (e.g. "#DIV/0!").
    """

    kind: Literal["error"]
    code: str


CanonicalValue = NullValue | BooleanValue | NumberValue | DateValue | TextValue | ErrorValue

ValueKind = Literal["null", "boolean", "number", "date", "text", "error"]

# Plain Python rendering of a canonical value
PythonValue = bool | float | datetime | str | None


def null_value() -> NullValue:
    return NullValue(kind="null")


def boolean_value(value: bool) -> BooleanValue:
    return BooleanValue(kind="boolean", value=value)


def number_value(value: float) -> NumberValue:
    return NumberValue(kind="number", value=float(value))


def date_value(value: datetime) -> DateValue:
    return DateValue(kind="date", value=value)


def text_value(value: str) -> TextValue:
    return TextValue(kind="text", value=value)


def error_value(code: str) -> ErrorValue:
    return ErrorValue(kind="error", code=code)


def is_null(value: CanonicalValue) -> bool:
    """Check whether a canonical value carries no content.

    Empty text counts as null so that hand-built values follow the same
    blankness rule as coerced ones.
    """
    if value["kind"] == "null":
        return True
    if value["kind"] == "text":
        return value["value"] == ""
    return False


def to_python(value: CanonicalValue) -> PythonValue:
    """Unwrap a canonical value into a plain Python object.

    Error markers are returned as their code string.
    """
    if value["kind"] == "null":
        return None
    if value["kind"] == "error":
        return value["code"]
    return value["value"]


def unwrap_rows(rows: Sequence[Sequence[CanonicalValue]]) -> list[list[PythonValue]]:
    """Unwrap every value of a read result into plain Python objects."""
    return [[to_python(v) for v in row] for row in rows]


__all__ = [
    "BooleanValue",
    "CanonicalValue",
    "DateValue",
    "ErrorValue",
    "NullValue",
    "NumberValue",
    "PythonValue",
    "TextValue",
    "ValueKind",
    "boolean_value",
    "date_value",
    "error_value",
    "is_null",
    "null_value",
    "number_value",
    "text_value",
    "to_python",
    "unwrap_rows",
]
