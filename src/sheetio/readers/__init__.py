"""Sheet readers."""

from __future__ import annotations

from sheetio.readers.excel import ExcelReader, SheetSelector, read
from sheetio.readers.range import Rows, read_from, read_range, read_sheet

__all__ = [
    "ExcelReader",
    "Rows",
    "SheetSelector",
    "read",
    "read_from",
    "read_range",
    "read_sheet",
]
