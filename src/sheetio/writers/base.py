"""Protocol definitions for export workbooks.

Defines the typed contracts that the buffered and streaming writers
fulfil, plus the row cursor and column-width tracking they share.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Protocol

from sheetio._exceptions import RangeError

# Values a row cursor accepts. Strings are written as text, bool as
# boolean, int/float as numbers; None leaves the cell unset.
CellWrite = str | int | float | bool | None

_MIN_WIDTH = 8
_MAX_WIDTH = 50
_WIDTH_PADDING = 2


class ColumnWidths:
    """Tracks the widest rendered value per column as cells are written.

    Tracking at write time keeps widths correct for rows that a streaming
    writer has already flushed.
    """

    def __init__(self) -> None:
        self._longest: dict[int, int] = {}

    def observe(self, column: int, value: CellWrite) -> None:
        if value is None:
            return
        length = len(str(value))
        if length > self._longest.get(column, 0):
            self._longest[column] = length

    def width(self, column: int) -> float:
        """Width with padding (min 8, max 50)."""
        longest = self._longest.get(column, 0)
        return float(min(max(longest + _WIDTH_PADDING, _MIN_WIDTH), _MAX_WIDTH))


class RowCursor:
    """Write handle for one row of an export sheet."""

    def __init__(
        self, index: int, widths: ColumnWidths, column_limit: int | None = None
    ) -> None:
        self._index = index
        self._widths = widths
        self._column_limit = column_limit
        self._cells: dict[int, CellWrite] = {}

    @property
    def index(self) -> int:
        return self._index

    @property
    def cells(self) -> Mapping[int, CellWrite]:
        return self._cells

    def set_cell(self, column: int, value: CellWrite) -> None:
        """Set the value at a zero-based column.

        Raises:
            RangeError: If column is negative or beyond the sheet's column limit.
        """
        if column < 0:
            raise RangeError(f"Column index must be >= 0, got {column}")
        if self._column_limit is not None and column >= self._column_limit:
            raise RangeError(
                f"Column index {column} exceeds the sheet limit of {self._column_limit} columns"
            )
        self._cells[column] = value
        self._widths.observe(column, value)

    def get_cell(self, column: int) -> CellWrite:
        return self._cells.get(column)


class ExportSheetProtocol(Protocol):
    """Protocol for one sheet of an export workbook."""

    @property
    def name(self) -> str: ...

    def create_row(self, index: int) -> RowCursor: ...

    def get_row(self, index: int) -> RowCursor | None: ...

    def auto_size_columns(self, count: int) -> None: ...


class ExportWorkbookProtocol(Protocol):
    """Protocol for export workbooks (buffered or streaming).

    Implementations must release their resources in close(), which is
    safe to call more than once.
    """

    @property
    def format_hint(self) -> str: ...

    def create_sheet(self, name: str | None = None) -> ExportSheetProtocol: ...

    def encode(self) -> bytes: ...

    def close(self) -> None: ...

    def __enter__(self) -> ExportWorkbookProtocol: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


__all__ = [
    "CellWrite",
    "ColumnWidths",
    "ExportSheetProtocol",
    "ExportWorkbookProtocol",
    "RowCursor",
]
