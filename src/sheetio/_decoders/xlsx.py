"""Decoder for the XML container family (.xlsx) via openpyxl.

The workbook is loaded once with formulas. Cached formula results live in
a second, values-only view that is loaded the first time a formula cell
is met.
"""

from __future__ import annotations

import io
from datetime import date, datetime, time, timedelta

from sheetio._logging import get_logger
from sheetio._protocols.openpyxl import (
    CellProtocol,
    OpenpyxlValue,
    WorkbookProtocol,
    WorksheetProtocol,
    _date_epoch,
    _load_workbook,
    _to_excel,
)
from sheetio.sheet import Sheet
from sheetio.types.cells import RawCell, RawContent, SheetRow, make_cell

_logger = get_logger(__name__)


def _to_raw_content(value: OpenpyxlValue, date1904: bool) -> RawContent:
    """Narrow an openpyxl value; date/time values go back to serials."""
    if isinstance(value, (datetime, date, time, timedelta)):
        return _to_excel(value, date1904)
    return value


def _decode_cell(cell: CellProtocol, date1904: bool, cached: OpenpyxlValue) -> RawCell | None:
    """Decode one openpyxl cell, or None when it holds nothing."""
    value = cell.value
    if value is None:
        return None

    data_type = cell.data_type
    number_format = cell.number_format
    if data_type == "f":
        return make_cell("formula", _to_raw_content(cached, date1904), number_format, date1904)
    if data_type == "b":
        return make_cell("boolean", bool(value), number_format, date1904)
    if data_type == "e":
        return make_cell("error", str(value), number_format, date1904)
    if data_type in ("n", "d"):
        return make_cell("numeric", _to_raw_content(value, date1904), number_format, date1904)
    return make_cell("text", str(value), number_format, date1904)


class XlsxSource:
    """Lazily decodes sheets of an .xlsx payload."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._wb: WorkbookProtocol = _load_workbook(io.BytesIO(data), data_only=False)
        self._cached_wb: WorkbookProtocol | None = None
        self._date1904 = self._wb.epoch == _date_epoch(True)

    @property
    def sheet_names(self) -> list[str]:
        return list(self._wb.sheetnames)

    def _cached_value(self, title: str, row: int, column: int) -> OpenpyxlValue:
        if self._cached_wb is None:
            _logger.debug("loading cached formula values")
            self._cached_wb = _load_workbook(io.BytesIO(self._data), data_only=True)
        return self._cached_wb[title].cell(row=row, column=column).value

    def _decode_worksheet(self, ws: WorksheetProtocol) -> Sheet:
        rows: dict[int, SheetRow] = {}
        for row_idx, cells in enumerate(
            ws.iter_rows(min_row=1, max_row=ws.max_row, min_col=1, max_col=ws.max_column)
        ):
            decoded: SheetRow = {}
            for col_idx, cell in enumerate(cells):
                cached: OpenpyxlValue = None
                if cell.data_type == "f":
                    cached = self._cached_value(ws.title, row_idx + 1, col_idx + 1)
                raw = _decode_cell(cell, self._date1904, cached)
                if raw is not None:
                    decoded[col_idx] = raw
            if decoded:
                rows[row_idx] = decoded
        return Sheet(ws.title, rows)

    def load_sheet(self, index: int) -> Sheet:
        name = self._wb.sheetnames[index]
        return self._decode_worksheet(self._wb[name])

    def close(self) -> None:
        self._wb.close()
        if self._cached_wb is not None:
            self._cached_wb.close()
            self._cached_wb = None


__all__ = [
    "XlsxSource",
]
