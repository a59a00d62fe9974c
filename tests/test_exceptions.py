"""Tests for _exceptions module."""

from __future__ import annotations

from sheetio._exceptions import (
    IllegalCharacterWarning,
    MissingKeyWarning,
    RangeError,
    RowFieldError,
    SheetExportError,
    SheetIOError,
    SheetIOWarning,
    TruncationWarning,
    UnsupportedFormatError,
)


def test_sheetio_error_message() -> None:
    err = SheetIOError("test error")
    assert str(err) == "test error"


def test_unsupported_format_error() -> None:
    err = UnsupportedFormatError("ods", "Unsupported spreadsheet format")
    assert "ods" in str(err)
    assert "Unsupported spreadsheet format" in str(err)
    assert err.format_hint == "ods"
    assert err.message == "Unsupported spreadsheet format"
    assert isinstance(err, SheetIOError)


def test_range_error() -> None:
    err = RangeError("End row 9 exceeds physical row count 3")
    assert str(err) == "End row 9 exceeds physical row count 3"
    assert err.message == "End row 9 exceeds physical row count 3"
    assert isinstance(err, SheetIOError)


def test_row_field_error() -> None:
    err = RowFieldError(4, "total", "ValueError: bad")
    assert err.row_index == 4
    assert err.field == "total"
    assert err.message == "ValueError: bad"
    assert "row 4" in str(err)
    assert "'total'" in str(err)
    assert not isinstance(err, SheetIOWarning)


def test_sheet_export_error() -> None:
    err = SheetExportError("Orders", "RuntimeError: boom")
    assert err.sheet_name == "Orders"
    assert err.message == "RuntimeError: boom"
    assert "'Orders'" in str(err)


def test_missing_key_warning() -> None:
    warning = MissingKeyWarning(2, "b")
    assert warning.row_index == 2
    assert warning.key == "b"
    assert "'b'" in str(warning)
    assert isinstance(warning, SheetIOWarning)
    assert isinstance(warning, SheetIOError)


def test_truncation_warning() -> None:
    warning = TruncationWarning(1, 3, 40000)
    assert warning.row_index == 1
    assert warning.column == 3
    assert warning.length == 40000
    assert "40000" in str(warning)
    assert isinstance(warning, SheetIOWarning)


def test_illegal_character_warning() -> None:
    warning = IllegalCharacterWarning(4, 2, 3)
    assert warning.row_index == 4
    assert warning.column == 2
    assert warning.removed == 3
    assert "3 illegal" in str(warning)
    assert isinstance(warning, SheetIOWarning)
