"""Shared test fixtures for sheetio tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Generator, Mapping, Sequence

import pytest
import xlwt

from sheetio._protocols.openpyxl import _create_workbook, _date_epoch
from sheetio.config import _test_hooks
from sheetio.sheet import Sheet
from sheetio.types.cells import SheetRow, make_cell

FixtureValue = str | int | float | bool | None
# A fixture cell: a plain value, or (value, number_format)
FixtureCell = FixtureValue | tuple[FixtureValue, str]
FixtureSheets = Mapping[str, Sequence[Sequence[FixtureCell]]]
XlsxBuilder = Callable[..., bytes]
XlsBuilder = Callable[[FixtureSheets], bytes]


def _build_xlsx(sheets: FixtureSheets, date1904: bool = False) -> bytes:
    """Build .xlsx bytes with openpyxl; None cells are left unwritten."""
    wb = _create_workbook()
    wb.remove(wb.active)
    if date1904:
        wb.epoch = _date_epoch(True)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row_idx, row in enumerate(rows, start=1):
            for col_idx, item in enumerate(row, start=1):
                if isinstance(item, tuple):
                    value, number_format = item
                    cell = ws.cell(row=row_idx, column=col_idx, value=value)
                    cell.number_format = number_format
                elif item is not None:
                    ws.cell(row=row_idx, column=col_idx, value=item)
    out = io.BytesIO()
    wb.save(out)
    wb.close()
    return out.getvalue()


def _build_xls(sheets: FixtureSheets) -> bytes:
    """Build .xls bytes with xlwt; None cells are left unwritten."""
    wb = xlwt.Workbook(encoding="utf-8")
    for name, rows in sheets.items():
        ws = wb.add_sheet(name)
        for row_idx, row in enumerate(rows):
            for col_idx, item in enumerate(row):
                if isinstance(item, tuple):
                    value, number_format = item
                    ws.write(row_idx, col_idx, value, xlwt.easyxf(num_format_str=number_format))
                elif item is not None:
                    ws.write(row_idx, col_idx, item)
    out = io.BytesIO()
    wb.save(out)
    return out.getvalue()


def _text_sheet(name: str, rows: Sequence[Sequence[str | None]]) -> Sheet:
    """Build an in-memory Sheet of text cells; None leaves a gap."""
    grid: dict[int, SheetRow] = {}
    for row_idx, row in enumerate(rows):
        cells: SheetRow = {}
        for col_idx, text in enumerate(row):
            if text is not None:
                cells[col_idx] = make_cell("text", text)
        grid[row_idx] = cells
    return Sheet(name, grid)


@pytest.fixture(autouse=True)
def _restore_config_hooks() -> Generator[None, None, None]:
    """Restore config hooks after each test."""
    original_get_env = _test_hooks.get_env
    yield
    _test_hooks.get_env = original_get_env


@pytest.fixture
def build_xlsx() -> XlsxBuilder:
    """Return the .xlsx payload builder."""
    return _build_xlsx


@pytest.fixture
def build_xls() -> XlsBuilder:
    """Return the .xls payload builder."""
    return _build_xls


@pytest.fixture
def text_sheet() -> Callable[[str, Sequence[Sequence[str | None]]], Sheet]:
    """Return the in-memory text sheet builder."""
    return _text_sheet


@pytest.fixture
def grid_sheet() -> Sheet:
    """Three rows by five columns of text, header first."""
    return _text_sheet(
        "Grid",
        [
            ["h0", "h1", "h2", "h3", "h4"],
            ["a0", "a1", "a2", "a3", "a4"],
            ["b0", "b1", "b2", "b3", "b4"],
        ],
    )


@pytest.fixture
def sample_xlsx(build_xlsx: XlsxBuilder) -> bytes:
    """Two-sheet workbook with mixed cell types."""
    return build_xlsx(
        {
            "Data": [
                ["name", "count", "when", "ok"],
                ["alpha", (3, "0"), (45000, "yyyy-mm-dd"), True],
                [None, None, None, None],
                ["beta", (2.5, "0.00"), None, False],
            ],
            "Notes": [
                ["note"],
                ["first"],
            ],
        }
    )


@pytest.fixture
def sample_xls(build_xls: XlsBuilder) -> bytes:
    """Legacy workbook with a General integer, a 0.00 number, a date and a blank row."""
    return build_xls(
        {
            "Data": [
                ["name", "count", "when", "ok"],
                ["alpha", 1234, (45000, "yyyy-mm-dd"), True],
                [None, None, None, None],
                ["beta", (2.5, "0.00"), None, False],
            ],
        }
    )
