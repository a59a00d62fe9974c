"""Protocol definitions for xlrd library.

xlrd 2.x reads only the legacy BIFF (.xls) container, which is exactly
what it is used for here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

# xlrd cell type codes (xlrd.biffh.XL_CELL_*)
XL_CELL_EMPTY = 0
XL_CELL_TEXT = 1
XL_CELL_NUMBER = 2
XL_CELL_DATE = 3
XL_CELL_BOOLEAN = 4
XL_CELL_ERROR = 5
XL_CELL_BLANK = 6


class XlrdCellProtocol(Protocol):
    """Protocol for xlrd.sheet.Cell."""

    @property
    def ctype(self) -> int: ...

    @property
    def value(self) -> str | float | int: ...

    @property
    def xf_index(self) -> int | None: ...


class XlrdFormatProtocol(Protocol):
    """Protocol for xlrd.formatting.Format."""

    @property
    def format_str(self) -> str: ...


class XlrdXFProtocol(Protocol):
    """Protocol for xlrd.formatting.XF."""

    @property
    def format_key(self) -> int: ...


class XlrdSheetProtocol(Protocol):
    """Protocol for xlrd.sheet.Sheet."""

    @property
    def name(self) -> str: ...

    @property
    def nrows(self) -> int: ...

    def row_len(self, rowx: int) -> int: ...

    def cell(self, rowx: int, colx: int) -> XlrdCellProtocol: ...


class XlrdBookProtocol(Protocol):
    """Protocol for xlrd.book.Book."""

    @property
    def datemode(self) -> int: ...

    @property
    def xf_list(self) -> Sequence[XlrdXFProtocol]: ...

    @property
    def format_map(self) -> Mapping[int, XlrdFormatProtocol]: ...

    def sheet_names(self) -> list[str]: ...

    def sheet_by_index(self, sheetx: int) -> XlrdSheetProtocol: ...

    def release_resources(self) -> None: ...


class _OpenWorkbookFn(Protocol):
    """Protocol for xlrd.open_workbook function."""

    def __call__(
        self,
        *,
        file_contents: bytes,
        formatting_info: bool = False,
        on_demand: bool = False,
    ) -> XlrdBookProtocol: ...


def _open_workbook(data: bytes) -> XlrdBookProtocol:
    """Open an .xls workbook from bytes, keeping formatting records.

    Formatting info is required to recover each cell's number format.
    """
    xlrd_mod = __import__("xlrd")
    open_fn: _OpenWorkbookFn = xlrd_mod.open_workbook
    return open_fn(file_contents=data, formatting_info=True, on_demand=True)


def _error_text(code: int) -> str:
    """Translate an xlrd error code into its display text (e.g. "#DIV/0!")."""
    biffh_mod = __import__("xlrd.biffh", fromlist=["error_text_from_code"])
    table: Mapping[int, str] = biffh_mod.error_text_from_code
    return table.get(code, f"#ERR{code}")


__all__ = [
    "XL_CELL_BLANK",
    "XL_CELL_BOOLEAN",
    "XL_CELL_DATE",
    "XL_CELL_EMPTY",
    "XL_CELL_ERROR",
    "XL_CELL_NUMBER",
    "XL_CELL_TEXT",
    "XlrdBookProtocol",
    "XlrdCellProtocol",
    "XlrdFormatProtocol",
    "XlrdSheetProtocol",
    "XlrdXFProtocol",
    "_error_text",
    "_open_workbook",
]
