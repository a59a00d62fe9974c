"""Decoder for the legacy BIFF container family (.xls) via xlrd.

xlrd exposes formula cells as their cached results, so .xls sheets never
produce formula-kind cells.
"""

from __future__ import annotations

from sheetio._protocols.xlrd import (
    XL_CELL_BLANK,
    XL_CELL_BOOLEAN,
    XL_CELL_DATE,
    XL_CELL_EMPTY,
    XL_CELL_ERROR,
    XL_CELL_NUMBER,
    XL_CELL_TEXT,
    XlrdBookProtocol,
    XlrdCellProtocol,
    _error_text,
    _open_workbook,
)
from sheetio.sheet import Sheet
from sheetio.types.cells import RawCell, SheetRow, make_cell

_GENERAL = "General"


def _number_format(book: XlrdBookProtocol, xf_index: int | None) -> str:
    """Resolve a cell's XF record to its number format string."""
    if xf_index is None or xf_index >= len(book.xf_list):
        return _GENERAL
    fmt = book.format_map.get(book.xf_list[xf_index].format_key)
    if fmt is None:
        return _GENERAL
    return fmt.format_str


def _decode_cell(book: XlrdBookProtocol, cell: XlrdCellProtocol, date1904: bool) -> RawCell | None:
    ctype = cell.ctype
    if ctype == XL_CELL_EMPTY:
        return None
    number_format = _number_format(book, cell.xf_index)
    if ctype == XL_CELL_BLANK:
        return make_cell("blank", None, number_format, date1904)
    if ctype == XL_CELL_TEXT:
        return make_cell("text", str(cell.value), number_format, date1904)
    if ctype in (XL_CELL_NUMBER, XL_CELL_DATE):
        value = cell.value
        number = float(value) if isinstance(value, (int, float)) else None
        return make_cell("numeric", number, number_format, date1904)
    if ctype == XL_CELL_BOOLEAN:
        return make_cell("boolean", bool(cell.value), number_format, date1904)
    if ctype == XL_CELL_ERROR:
        value = cell.value
        code = _error_text(value) if isinstance(value, int) else str(value)
        return make_cell("error", code, number_format, date1904)
    return None


class XlsSource:
    """Lazily decodes sheets of an .xls payload."""

    def __init__(self, data: bytes) -> None:
        self._book = _open_workbook(data)
        self._date1904 = self._book.datemode == 1

    @property
    def sheet_names(self) -> list[str]:
        return list(self._book.sheet_names())

    def load_sheet(self, index: int) -> Sheet:
        sh = self._book.sheet_by_index(index)
        rows: dict[int, SheetRow] = {}
        for row_idx in range(sh.nrows):
            decoded: SheetRow = {}
            for col_idx in range(sh.row_len(row_idx)):
                raw = _decode_cell(self._book, sh.cell(row_idx, col_idx), self._date1904)
                if raw is not None:
                    decoded[col_idx] = raw
            if decoded:
                rows[row_idx] = decoded
        return Sheet(sh.name, rows)

    def close(self) -> None:
        self._book.release_resources()


__all__ = [
    "XlsSource",
]
