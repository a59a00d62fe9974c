"""In-memory read model of one decoded sheet."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from sheetio.types.cells import RawCell, SheetRow


def _has_content(cell: RawCell) -> bool:
    if cell["kind"] == "blank" or cell["value"] is None:
        return False
    return not (isinstance(cell["value"], str) and cell["value"] == "")


class Sheet:
    """A named, sparse grid of raw cells.

    Rows are keyed by zero-based index; a row appears only when it holds at
    least one cell. The physical row count and the cell count of the first
    row are the bounds used to validate read windows.
    """

    def __init__(self, name: str, rows: Mapping[int, SheetRow]) -> None:
        self._name = name
        self._rows: dict[int, SheetRow] = {idx: rows[idx] for idx in sorted(rows) if rows[idx]}

    @property
    def name(self) -> str:
        return self._name

    @property
    def physical_row_count(self) -> int:
        """Number of rows holding at least one cell with content."""
        return sum(
            1 for row in self._rows.values() if any(_has_content(c) for c in row.values())
        )

    @property
    def first_row_cell_count(self) -> int:
        """Number of cells with content in row 0 (0 when row 0 is absent)."""
        first = self._rows.get(0)
        if first is None:
            return 0
        return sum(1 for cell in first.values() if _has_content(cell))

    def get_row(self, index: int) -> SheetRow | None:
        """Return the row at ``index``, or None when the row is absent."""
        return self._rows.get(index)

    def iter_rows(self) -> Iterator[tuple[int, SheetRow]]:
        """Yield (index, row) pairs in ascending row order."""
        yield from self._rows.items()

    def __len__(self) -> int:
        return len(self._rows)


__all__ = [
    "Sheet",
]
