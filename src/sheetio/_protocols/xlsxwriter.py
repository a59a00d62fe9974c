"""Protocol definitions for xlsxwriter library.

Only the constant-memory subset used by the streaming writer is described.
In that mode rows must be written in ascending order and column widths may
be set at any point before close().
"""

from __future__ import annotations

from typing import BinaryIO, Protocol


class XlsxWorksheetProtocol(Protocol):
    """Protocol for xlsxwriter.worksheet.Worksheet."""

    @property
    def name(self) -> str: ...

    def write_string(self, row: int, col: int, string: str) -> int: ...

    def write_number(self, row: int, col: int, number: float) -> int: ...

    def write_boolean(self, row: int, col: int, boolean: bool) -> int: ...

    def set_column(self, first_col: int, last_col: int, width: float) -> int: ...


class XlsxWorkbookProtocol(Protocol):
    """Protocol for xlsxwriter.Workbook."""

    def add_worksheet(self, name: str | None = None) -> XlsxWorksheetProtocol: ...

    def close(self) -> None: ...


class _WorkbookCtor(Protocol):
    """Protocol for xlsxwriter.Workbook constructor."""

    def __call__(
        self, filename: BinaryIO, options: dict[str, bool]
    ) -> XlsxWorkbookProtocol: ...


def _create_streaming_workbook(out: BinaryIO) -> XlsxWorkbookProtocol:
    """Create an xlsxwriter Workbook in constant-memory mode writing to ``out``.

    constant_memory keeps a single row per worksheet in memory and spools
    finished rows to a temporary file until close().
    """
    xlsxwriter_mod = __import__("xlsxwriter")
    ctor: _WorkbookCtor = xlsxwriter_mod.Workbook
    return ctor(out, {"constant_memory": True})


__all__ = [
    "XlsxWorkbookProtocol",
    "XlsxWorksheetProtocol",
    "_create_streaming_workbook",
]
