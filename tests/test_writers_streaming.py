"""Tests for writers.streaming module."""

from __future__ import annotations

import pytest

from sheetio._exceptions import RangeError, SheetIOError
from sheetio.readers.excel import read
from sheetio.types.values import unwrap_rows
from sheetio.workbook import decode
from sheetio.writers.streaming import StreamingWorkbook


def test_invalid_window_raises() -> None:
    with pytest.raises(ValueError):
        StreamingWorkbook(0)


def test_resident_rows_never_exceed_window() -> None:
    window = 100
    total = 50_000
    with StreamingWorkbook(window) as workbook:
        sheet = workbook.create_sheet("Big")
        peak = 0
        for index in range(total):
            cursor = sheet.create_row(index)
            cursor.set_cell(0, index)
            cursor.set_cell(1, f"row-{index}")
            peak = max(peak, sheet.resident_row_count)
        assert peak == window
        assert sheet.flushed_row_count == total - window
        data = workbook.encode()

    with decode(data, "xlsx") as decoded:
        sheet_out = decoded.sheet_at(0)
        assert sheet_out.physical_row_count == total
        last = sheet_out.get_row(total - 1)
        assert last is not None
        assert last[1]["value"] == f"row-{total - 1}"


def test_flushed_rows_are_unreadable() -> None:
    with StreamingWorkbook(3) as workbook:
        sheet = workbook.create_sheet("S")
        for index in range(5):
            sheet.create_row(index).set_cell(0, str(index))
        assert sheet.get_row(0) is None
        assert sheet.get_row(1) is None
        resident = sheet.get_row(4)
        assert resident is not None
        assert resident.get_cell(0) == "4"


def test_rows_must_ascend() -> None:
    with StreamingWorkbook(10) as workbook:
        sheet = workbook.create_sheet("S")
        sheet.create_row(5)
        with pytest.raises(RangeError):
            sheet.create_row(5)
        with pytest.raises(RangeError):
            sheet.create_row(2)


def test_negative_column_raises() -> None:
    with StreamingWorkbook(10) as workbook:
        cursor = workbook.create_sheet("S").create_row(0)
        with pytest.raises(RangeError):
            cursor.set_cell(-1, "x")


def test_duplicate_sheet_name_raises() -> None:
    with StreamingWorkbook(10) as workbook:
        workbook.create_sheet("S")
        with pytest.raises(SheetIOError):
            workbook.create_sheet("S")


def test_values_round_trip_by_type() -> None:
    with StreamingWorkbook(2) as workbook:
        sheet = workbook.create_sheet("Types")
        cursor = sheet.create_row(0)
        cursor.set_cell(0, "text")
        cursor.set_cell(1, True)
        cursor.set_cell(2, 2.5)
        cursor.set_cell(3, float("nan"))
        cursor.set_cell(5, None)
        data = workbook.encode()

    with decode(data, "xlsx") as decoded:
        result = unwrap_rows(read(decoded))
    assert result == [["text", True, "2", "nan"]]


def test_sheet_gaps_preserved() -> None:
    with StreamingWorkbook(1) as workbook:
        sheet = workbook.create_sheet("Gaps")
        sheet.create_row(0).set_cell(0, "a")
        sheet.create_row(3).set_cell(2, "b")
        data = workbook.encode()

    with decode(data, "xlsx") as decoded:
        out = decoded.sheet_at(0)
        assert out.get_row(1) is None
        row = out.get_row(3)
        assert row is not None
        assert sorted(row) == [2]


def test_encode_without_sheets() -> None:
    with StreamingWorkbook(5) as workbook:
        data = workbook.encode()
    with decode(data, "xlsx") as decoded:
        assert len(decoded) == 1


def test_encode_closes_workbook() -> None:
    workbook = StreamingWorkbook(5)
    workbook.create_sheet("S")
    workbook.encode()
    with pytest.raises(SheetIOError):
        workbook.encode()
    with pytest.raises(SheetIOError):
        workbook.create_sheet("T")
    workbook.close()


def test_close_is_idempotent() -> None:
    workbook = StreamingWorkbook(5)
    workbook.close()
    workbook.close()


def test_properties() -> None:
    with StreamingWorkbook(7) as workbook:
        sheet = workbook.create_sheet("Named")
        assert workbook.format_hint == "xlsx"
        assert workbook.row_window == 7
        assert sheet.row_window == 7
        assert sheet.name == "Named"
        assert workbook.sheets == [sheet]
