"""Protocol definitions for xlwt library.

Only the subset used to build legacy .xls (BIFF8) workbooks is described.
xlwt keeps the whole workbook in memory and serializes it on save().
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

# BIFF8 sheet limits
XLS_MAX_ROWS = 65536
XLS_MAX_COLUMNS = 256

XlwtValue = str | int | float | bool


class XlwtColumnProtocol(Protocol):
    """Protocol for xlwt.Column.Column."""

    # Width in 1/256ths of the zero character
    width: int


class XlwtWorksheetProtocol(Protocol):
    """Protocol for xlwt.Worksheet.Worksheet."""

    @property
    def name(self) -> str:
        """Return worksheet name."""
        ...

    def write(self, r: int, c: int, label: XlwtValue = "") -> None:
        """Write a value at (r, c), 0-based, with the default style."""
        ...

    def col(self, indx: int) -> XlwtColumnProtocol:
        """Get or create the column at a 0-based index."""
        ...


class XlwtWorkbookProtocol(Protocol):
    """Protocol for xlwt.Workbook."""

    def add_sheet(self, sheetname: str, cell_overwrite_ok: bool = False) -> XlwtWorksheetProtocol:
        """Add a worksheet; raises on duplicate or invalid names."""
        ...

    def save(self, filename_or_stream: BinaryIO) -> None:
        """Serialize the workbook to a binary stream."""
        ...


class _WorkbookCtor(Protocol):
    """Protocol for xlwt.Workbook constructor."""

    def __call__(self, encoding: str = "ascii") -> XlwtWorkbookProtocol: ...


def _create_xls_workbook() -> XlwtWorkbookProtocol:
    """Create a new xlwt Workbook storing text as UTF-8."""
    xlwt_mod = __import__("xlwt")
    ctor: _WorkbookCtor = xlwt_mod.Workbook
    return ctor(encoding="utf-8")


__all__ = [
    "XLS_MAX_COLUMNS",
    "XLS_MAX_ROWS",
    "XlwtColumnProtocol",
    "XlwtValue",
    "XlwtWorkbookProtocol",
    "XlwtWorksheetProtocol",
    "_create_xls_workbook",
]
