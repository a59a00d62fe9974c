"""Workbook-level reading by sheet selector, from bytes or files.

A selector is either a zero-based sheet index or a sheet name. An unknown
name reads as an empty result; an out-of-range index raises IndexError.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from sheetio._logging import get_logger
from sheetio.readers.range import Rows, read_range, read_sheet
from sheetio.sheet import Sheet
from sheetio.workbook import Workbook, decode, format_hint_from_path

_logger = get_logger(__name__)

SheetSelector = int | str


def _select(workbook: Workbook, selector: SheetSelector) -> Sheet | None:
    if isinstance(selector, str):
        return workbook.sheet_by_name(selector)
    return workbook.sheet_at(selector)


def read(
    workbook: Workbook,
    selector: SheetSelector = 0,
    *,
    start_row: int | None = None,
    end_row: int | None = None,
    start_col: int | None = None,
    end_col: int | None = None,
) -> Rows:
    """Read rows of one sheet, optionally restricted to a window.

    With no window arguments the whole sheet is read. When any window
    argument is given, missing starts default to 0 and missing ends to the
    sheet's physical row count and first-row cell count.

    Raises:
        IndexError: If an integer selector is out of range.
        RangeError: If the window is out of bounds.
    """
    sheet = _select(workbook, selector)
    if sheet is None:
        _logger.info("sheet not found", extra={"sheet": str(selector)})
        return []

    if start_row is None and end_row is None and start_col is None and end_col is None:
        return read_sheet(sheet)

    return read_range(
        sheet,
        start_row if start_row is not None else 0,
        end_row if end_row is not None else sheet.physical_row_count,
        start_col if start_col is not None else 0,
        end_col if end_col is not None else sheet.first_row_cell_count,
    )


class ExcelReader:
    """Reader for spreadsheet bytes and files.

    Every call opens its own workbook and closes it before returning,
    including when reading fails.
    """

    def read_bytes(
        self,
        data: bytes | BinaryIO,
        format_hint: str,
        selector: SheetSelector = 0,
        *,
        start_row: int | None = None,
        end_row: int | None = None,
        start_col: int | None = None,
        end_col: int | None = None,
    ) -> Rows:
        """Decode a payload and read one sheet of it."""
        with decode(data, format_hint) as workbook:
            return read(
                workbook,
                selector,
                start_row=start_row,
                end_row=end_row,
                start_col=start_col,
                end_col=end_col,
            )

    def read_path(
        self,
        path: Path,
        selector: SheetSelector = 0,
        *,
        start_row: int | None = None,
        end_row: int | None = None,
        start_col: int | None = None,
        end_col: int | None = None,
    ) -> Rows:
        """Read one sheet of a file; the format hint is the file suffix."""
        return self.read_bytes(
            path.read_bytes(),
            format_hint_from_path(path),
            selector,
            start_row=start_row,
            end_row=end_row,
            start_col=start_col,
            end_col=end_col,
        )

    def list_sheets(self, path: Path) -> list[str]:
        """List sheet names of a file in workbook order."""
        with decode(path.read_bytes(), format_hint_from_path(path)) as workbook:
            return workbook.sheet_names

    def read_all(self, path: Path) -> dict[str, Rows]:
        """Read every sheet of a file, keyed by sheet name."""
        with decode(path.read_bytes(), format_hint_from_path(path)) as workbook:
            return {sheet.name: read_sheet(sheet) for sheet in workbook.sheets()}


__all__ = [
    "ExcelReader",
    "SheetSelector",
    "read",
]
