"""Fully-buffered legacy .xls export workbook via xlwt.

The BIFF8 container cannot be written incrementally, so every row stays
resident until encode(). Sheets are limited to 65536 rows and 256 columns;
the legacy family is unsuitable for very large datasets.
"""

from __future__ import annotations

import io
import math
from types import TracebackType

from sheetio._exceptions import RangeError, SheetIOError
from sheetio._protocols.xlwt import (
    XLS_MAX_COLUMNS,
    XLS_MAX_ROWS,
    XlwtWorkbookProtocol,
    XlwtWorksheetProtocol,
    _create_xls_workbook,
)
from sheetio.writers.base import CellWrite, ColumnWidths, RowCursor

# xlwt column widths are in 1/256ths of a character
_WIDTH_UNITS = 256


def _write_value(ws: XlwtWorksheetProtocol, row: int, col: int, value: CellWrite) -> None:
    if value is None:
        return
    if isinstance(value, float) and not math.isfinite(value):
        ws.write(row, col, str(value))
    else:
        ws.write(row, col, value)


class BufferedXlsSheet:
    """Sheet of a legacy workbook; rows remain addressable until encode()."""

    def __init__(self, worksheet: XlwtWorksheetProtocol) -> None:
        self._ws = worksheet
        self._rows: dict[int, RowCursor] = {}
        self._widths = ColumnWidths()

    @property
    def name(self) -> str:
        return self._ws.name

    def create_row(self, index: int) -> RowCursor:
        """Create (or replace) the row at a zero-based index.

        Raises:
            RangeError: If index is negative or past the 65536-row limit.
        """
        if index < 0 or index >= XLS_MAX_ROWS:
            raise RangeError(f"Row index {index} outside the .xls limit of {XLS_MAX_ROWS} rows")
        cursor = RowCursor(index, self._widths, column_limit=XLS_MAX_COLUMNS)
        self._rows[index] = cursor
        return cursor

    def get_row(self, index: int) -> RowCursor | None:
        return self._rows.get(index)

    def auto_size_columns(self, count: int) -> None:
        for col in range(min(count, XLS_MAX_COLUMNS)):
            self._ws.col(col).width = int(self._widths.width(col) * _WIDTH_UNITS)

    def _write_cells(self) -> None:
        for index in sorted(self._rows):
            for col, value in self._rows[index].cells.items():
                _write_value(self._ws, index, col, value)


class BufferedXlsWorkbook:
    """Export workbook for the legacy .xls family (xlwt)."""

    def __init__(self) -> None:
        self._wb: XlwtWorkbookProtocol = _create_xls_workbook()
        self._sheets: list[BufferedXlsSheet] = []
        self._closed = False

    @property
    def format_hint(self) -> str:
        return "xls"

    @property
    def sheets(self) -> list[BufferedXlsSheet]:
        return list(self._sheets)

    def _default_name(self) -> str:
        taken = {sheet.name.lower() for sheet in self._sheets}
        number = len(self._sheets) + 1
        while f"sheet{number}" in taken:
            number += 1
        return f"Sheet{number}"

    def create_sheet(self, name: str | None = None) -> BufferedXlsSheet:
        """Create a new sheet.

        Sheet names compare case-insensitively, as in Excel.

        Raises:
            SheetIOError: If the workbook is closed or the name is taken.
        """
        if self._closed:
            raise SheetIOError("Workbook is closed")
        title = name if name is not None else self._default_name()
        if title.lower() in {sheet.name.lower() for sheet in self._sheets}:
            raise SheetIOError(f"Duplicate sheet name: {title!r}")
        sheet = BufferedXlsSheet(self._wb.add_sheet(title, cell_overwrite_ok=True))
        self._sheets.append(sheet)
        return sheet

    def encode(self) -> bytes:
        """Serialize the workbook to .xls bytes."""
        if self._closed:
            raise SheetIOError("Workbook is closed")
        if not self._sheets:
            self.create_sheet()
        for sheet in self._sheets:
            sheet._write_cells()
        out = io.BytesIO()
        self._wb.save(out)
        return out.getvalue()

    def close(self) -> None:
        # xlwt holds no external resources; closing only blocks further use.
        self._closed = True

    def __enter__(self) -> BufferedXlsWorkbook:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = [
    "BufferedXlsSheet",
    "BufferedXlsWorkbook",
]
