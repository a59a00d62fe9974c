"""Tests for types.values module."""

from __future__ import annotations

from datetime import datetime

from sheetio.types.values import (
    CanonicalValue,
    boolean_value,
    date_value,
    error_value,
    is_null,
    null_value,
    number_value,
    text_value,
    to_python,
    unwrap_rows,
)


def test_constructors_tag_kind() -> None:
    assert null_value() == {"kind": "null"}
    assert boolean_value(True) == {"kind": "boolean", "value": True}
    assert number_value(2) == {"kind": "number", "value": 2.0}
    assert text_value("x") == {"kind": "text", "value": "x"}
    assert error_value("#N/A") == {"kind": "error", "code": "#N/A"}
    when = datetime(2024, 1, 2, 3, 4)
    assert date_value(when) == {"kind": "date", "value": when}


def test_number_value_is_float() -> None:
    value = number_value(3)
    assert type(value["value"]) is float


def test_is_null() -> None:
    assert is_null(null_value()) is True
    assert is_null(text_value("")) is True
    assert is_null(text_value(" ")) is False
    assert is_null(number_value(0.0)) is False
    assert is_null(boolean_value(False)) is False
    assert is_null(error_value("#REF!")) is False


def test_to_python() -> None:
    when = datetime(2020, 5, 6)
    assert to_python(null_value()) is None
    assert to_python(boolean_value(False)) is False
    assert to_python(number_value(1.5)) == 1.5
    assert to_python(date_value(when)) == when
    assert to_python(text_value("abc")) == "abc"
    assert to_python(error_value("#DIV/0!")) == "#DIV/0!"


def test_unwrap_rows() -> None:
    rows: list[list[CanonicalValue]] = [
        [text_value("a"), null_value()],
        [number_value(1.0), boolean_value(True)],
    ]
    assert unwrap_rows(rows) == [["a", None], [1.0, True]]


def test_unwrap_rows_empty() -> None:
    assert unwrap_rows([]) == []
