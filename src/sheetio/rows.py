"""Row extraction: ordered canonical values for one sheet row.

Blank rows are skipped by the reader; blank columns never are. Absent
cells inside the extracted span come back as nulls so that column
positions stay aligned across rows.
"""

from __future__ import annotations

from sheetio.coercion import coerce
from sheetio.types.cells import SheetRow
from sheetio.types.values import CanonicalValue, is_null


def row_values(
    row: SheetRow,
    start_col: int | None = None,
    end_col: int | None = None,
) -> list[CanonicalValue]:
    """Extract canonical values from a row.

    Without a window, columns 0 through the last present column are
    returned. With a window, exactly one value per index of the half-open
    range [start_col, end_col) is returned.

    Args:
        row: Cells keyed by zero-based column index.
        start_col: First column (inclusive). Requires end_col.
        end_col: Last column (exclusive). Requires start_col.

    Returns:
        Canonical values in column order.
    """
    if start_col is None or end_col is None:
        if not row:
            return []
        last = max(row)
        return [coerce(row.get(col)) for col in range(last + 1)]
    return [coerce(row.get(col)) for col in range(start_col, end_col)]


def is_blank_row(row: SheetRow | None) -> bool:
    """Check whether every cell of the row coerces to null (or empty text)."""
    if row is None:
        return True
    return all(is_null(coerce(cell)) for cell in row.values())


__all__ = [
    "is_blank_row",
    "row_values",
]
