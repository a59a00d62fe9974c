"""Fully-buffered export workbook via openpyxl.

Every row stays resident until encode(). Suitable for small and medium
exports; large exports should use the streaming writer.
"""

from __future__ import annotations

import io
from types import TracebackType

from sheetio._exceptions import SheetIOError
from sheetio._protocols.openpyxl import (
    WorkbookProtocol,
    WorksheetProtocol,
    _create_workbook,
    _get_column_letter,
)
from sheetio.writers.base import ColumnWidths, RowCursor


class BufferedSheet:
    """Sheet whose rows all remain addressable until the workbook is encoded."""

    def __init__(self, worksheet: WorksheetProtocol) -> None:
        self._ws = worksheet
        self._rows: dict[int, RowCursor] = {}
        self._widths = ColumnWidths()

    @property
    def name(self) -> str:
        return self._ws.title

    def create_row(self, index: int) -> RowCursor:
        """Create (or replace) the row at a zero-based index."""
        cursor = RowCursor(index, self._widths)
        self._rows[index] = cursor
        return cursor

    def get_row(self, index: int) -> RowCursor | None:
        return self._rows.get(index)

    def auto_size_columns(self, count: int) -> None:
        for col in range(count):
            letter = _get_column_letter(col + 1)
            self._ws.column_dimensions[letter].width = self._widths.width(col)

    def _write_cells(self) -> None:
        for index in sorted(self._rows):
            for col, value in self._rows[index].cells.items():
                if value is None:
                    continue
                self._ws.cell(row=index + 1, column=col + 1, value=value)


class BufferedWorkbook:
    """Export workbook holding all sheets in memory (openpyxl)."""

    def __init__(self) -> None:
        self._wb: WorkbookProtocol = _create_workbook()
        # Drop the default sheet; sheets are created explicitly.
        self._wb.remove(self._wb.active)
        self._sheets: list[BufferedSheet] = []
        self._closed = False

    @property
    def format_hint(self) -> str:
        return "xlsx"

    @property
    def sheets(self) -> list[BufferedSheet]:
        return list(self._sheets)

    def create_sheet(self, name: str | None = None) -> BufferedSheet:
        """Create a new sheet.

        Raises:
            SheetIOError: If the workbook is closed or the name is taken.
        """
        if self._closed:
            raise SheetIOError("Workbook is closed")
        if name is not None and name in self._wb.sheetnames:
            raise SheetIOError(f"Duplicate sheet name: {name!r}")
        sheet = BufferedSheet(self._wb.create_sheet(title=name))
        self._sheets.append(sheet)
        return sheet

    def encode(self) -> bytes:
        """Serialize the workbook to .xlsx bytes."""
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
        if self._closed:
            return
        self._closed = True
        self._wb.close()

    def __enter__(self) -> BufferedWorkbook:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = [
    "BufferedSheet",
    "BufferedWorkbook",
]
