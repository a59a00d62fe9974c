"""Tests for sheet module."""

from __future__ import annotations

from sheetio.sheet import Sheet
from sheetio.types.cells import SheetRow, make_cell


def _row(*texts: str) -> SheetRow:
    return {i: make_cell("text", t) for i, t in enumerate(texts)}


def test_sheet_name() -> None:
    assert Sheet("Data", {}).name == "Data"


def test_physical_row_count_counts_rows_with_content() -> None:
    rows: dict[int, SheetRow] = {
        0: _row("a", "b"),
        1: {0: make_cell("blank", None)},
        4: _row("c"),
    }
    sheet = Sheet("S", rows)
    assert sheet.physical_row_count == 2


def test_first_row_cell_count() -> None:
    rows: dict[int, SheetRow] = {
        0: {0: make_cell("text", "a"), 1: make_cell("blank", None), 3: make_cell("text", "d")},
    }
    assert Sheet("S", rows).first_row_cell_count == 2


def test_first_row_cell_count_without_row_zero() -> None:
    assert Sheet("S", {2: _row("a")}).first_row_cell_count == 0


def test_empty_rows_are_dropped() -> None:
    sheet = Sheet("S", {0: _row("a"), 1: {}})
    assert len(sheet) == 1
    assert sheet.get_row(1) is None


def test_get_row() -> None:
    sheet = Sheet("S", {0: _row("a")})
    row = sheet.get_row(0)
    assert row is not None
    assert row[0]["value"] == "a"
    assert sheet.get_row(7) is None


def test_iter_rows_ascending() -> None:
    sheet = Sheet("S", {5: _row("f"), 0: _row("a"), 2: _row("c")})
    assert [index for index, _ in sheet.iter_rows()] == [0, 2, 5]
