"""Row-windowed streaming export workbook via xlsxwriter.

Each sheet keeps at most ``row_window`` rows resident. Creating a row
beyond the window flushes the oldest resident row to xlsxwriter's
constant-memory writer, after which that row can no longer be read or
changed. Rows must therefore be created in ascending order.
"""

from __future__ import annotations

import io
import math
from types import TracebackType

from sheetio._exceptions import RangeError, SheetIOError
from sheetio._logging import get_logger
from sheetio._protocols.xlsxwriter import (
    XlsxWorkbookProtocol,
    XlsxWorksheetProtocol,
    _create_streaming_workbook,
)
from sheetio.writers.base import CellWrite, ColumnWidths, RowCursor

_logger = get_logger(__name__)


def _write_value(ws: XlsxWorksheetProtocol, row: int, col: int, value: CellWrite) -> None:
    if value is None:
        return
    if isinstance(value, bool):
        ws.write_boolean(row, col, value)
    elif isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            ws.write_string(row, col, str(value))
        else:
            ws.write_number(row, col, value)
    else:
        ws.write_string(row, col, value)


class StreamingSheet:
    """Sheet that flushes rows older than the window to the output."""

    def __init__(self, worksheet: XlsxWorksheetProtocol, row_window: int) -> None:
        self._ws = worksheet
        self._window = row_window
        # Insertion order equals row order since indices only ascend.
        self._resident: dict[int, RowCursor] = {}
        self._last_index = -1
        self._flushed_count = 0
        self._widths = ColumnWidths()

    @property
    def name(self) -> str:
        return self._ws.name

    @property
    def row_window(self) -> int:
        return self._window

    @property
    def resident_row_count(self) -> int:
        return len(self._resident)

    @property
    def flushed_row_count(self) -> int:
        return self._flushed_count

    def create_row(self, index: int) -> RowCursor:
        """Create the row at a zero-based index.

        Raises:
            RangeError: If index does not come after the last created row.
        """
        if index <= self._last_index:
            raise RangeError(
                f"Row {index} must be created after row {self._last_index} in streaming mode"
            )
        cursor = RowCursor(index, self._widths)
        self._resident[index] = cursor
        self._last_index = index
        while len(self._resident) > self._window:
            self._flush_oldest()
        return cursor

    def get_row(self, index: int) -> RowCursor | None:
        """Return a resident row, or None when absent or already flushed."""
        return self._resident.get(index)

    def auto_size_columns(self, count: int) -> None:
        for col in range(count):
            self._ws.set_column(col, col, self._widths.width(col))

    def _flush_oldest(self) -> None:
        index = next(iter(self._resident))
        cursor = self._resident.pop(index)
        for col in sorted(cursor.cells):
            _write_value(self._ws, index, col, cursor.cells[col])
        self._flushed_count += 1

    def flush_all(self) -> None:
        """Flush every resident row."""
        while self._resident:
            self._flush_oldest()


class StreamingWorkbook:
    """Export workbook bounding resident rows per sheet (xlsxwriter)."""

    def __init__(self, row_window: int) -> None:
        if row_window < 1:
            raise ValueError(f"row_window must be >= 1, got {row_window}")
        self._window = row_window
        self._out = io.BytesIO()
        self._wb: XlsxWorkbookProtocol = _create_streaming_workbook(self._out)
        self._sheets: list[StreamingSheet] = []
        self._names: set[str] = set()
        self._closed = False

    @property
    def format_hint(self) -> str:
        return "xlsx"

    @property
    def row_window(self) -> int:
        return self._window

    @property
    def sheets(self) -> list[StreamingSheet]:
        return list(self._sheets)

    def create_sheet(self, name: str | None = None) -> StreamingSheet:
        """Create a new sheet.

        Raises:
            SheetIOError: If the workbook is closed or the name is taken.
        """
        if self._closed:
            raise SheetIOError("Workbook is closed")
        if name is not None and name in self._names:
            raise SheetIOError(f"Duplicate sheet name: {name!r}")
        sheet = StreamingSheet(self._wb.add_worksheet(name), self._window)
        self._names.add(sheet.name)
        self._sheets.append(sheet)
        return sheet

    def encode(self) -> bytes:
        """Flush all rows, finalize the container and return .xlsx bytes.

        The workbook is closed afterwards.
        """
        if self._closed:
            raise SheetIOError("Workbook is closed")
        for sheet in self._sheets:
            sheet.flush_all()
        self._closed = True
        self._wb.close()
        _logger.debug(
            "streaming workbook encoded",
            extra={"row_window": self._window, "rows_written": self._total_flushed()},
        )
        return self._out.getvalue()

    def _total_flushed(self) -> int:
        return sum(sheet.flushed_row_count for sheet in self._sheets)

    def close(self) -> None:
        """Release temporary row files without producing output."""
        if self._closed:
            return
        self._closed = True
        self._wb.close()

    def __enter__(self) -> StreamingWorkbook:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = [
    "StreamingSheet",
    "StreamingWorkbook",
]
