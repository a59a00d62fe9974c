"""Range reader: validated row/column windows over one sheet.

Windows are half-open on both axes: [start_row, end_row) and
[start_col, end_col). Rows are returned in ascending order and blank rows
are skipped, with or without a window.
"""

from __future__ import annotations

from sheetio._exceptions import RangeError
from sheetio.rows import is_blank_row, row_values
from sheetio.sheet import Sheet
from sheetio.types.values import CanonicalValue

Rows = list[list[CanonicalValue]]


def read_sheet(sheet: Sheet) -> Rows:
    """Read every non-blank row of a sheet.

    Each row spans columns 0 through its last present column.
    """
    return [row_values(row) for _, row in sheet.iter_rows() if not is_blank_row(row)]


def _validate_window(
    sheet: Sheet, start_row: int, end_row: int, start_col: int, end_col: int
) -> None:
    if start_row < 0 or start_col < 0:
        raise RangeError(
            f"Window start must be >= 0, got row {start_row}, column {start_col}"
        )
    row_count = sheet.physical_row_count
    if end_row > row_count:
        raise RangeError(
            f"End row {end_row} exceeds physical row count {row_count} of sheet {sheet.name!r}"
        )
    col_count = sheet.first_row_cell_count
    if end_col > col_count:
        raise RangeError(
            f"End column {end_col} exceeds first-row column count {col_count} "
            f"of sheet {sheet.name!r}"
        )


def read_range(
    sheet: Sheet,
    start_row: int,
    end_row: int,
    start_col: int,
    end_col: int,
) -> Rows:
    """Read the window [start_row, end_row) x [start_col, end_col).

    A reversed window (start after end) is a no-op and returns [].

    Raises:
        RangeError: If a start is negative, end_row exceeds the sheet's
            physical row count, or end_col exceeds the cell count of the
            first row.
    """
    if start_row > end_row or start_col > end_col:
        return []
    _validate_window(sheet, start_row, end_row, start_col, end_col)

    result: Rows = []
    for index in range(start_row, end_row):
        row = sheet.get_row(index)
        if row is None or is_blank_row(row):
            continue
        result.append(row_values(row, start_col, end_col))
    return result


def read_from(sheet: Sheet, start_row: int, start_col: int) -> Rows:
    """Read from (start_row, start_col) to the sheet's physical extents."""
    return read_range(
        sheet,
        start_row,
        sheet.physical_row_count,
        start_col,
        sheet.first_row_cell_count,
    )


__all__ = [
    "Rows",
    "read_from",
    "read_range",
    "read_sheet",
]
