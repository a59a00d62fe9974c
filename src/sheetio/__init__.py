"""Typed spreadsheet IO for tabular records.

This library provides:
- Decoding of .xlsx (via openpyxl) and .xls (via xlrd) workbooks
- Cell coercion into a closed set of canonical values
- Whole-sheet and range-bounded row reading by sheet index or name
- Export of mappings, tuples, lists and structured records to .xlsx,
  buffered (openpyxl) or row-windowed streaming (xlsxwriter), and to
  legacy .xls (xlwt)

All data structures use TypedDicts for strict typing.
"""

from __future__ import annotations

# Errors
from sheetio._exceptions import (
    IllegalCharacterWarning,
    MissingKeyWarning,
    RangeError,
    RowFieldError,
    SheetExportError,
    SheetIOError,
    SheetIOWarning,
    TruncationWarning,
    UnsupportedFormatError,
)

# Logging
from sheetio._logging import get_logger, setup_logging

# Config
from sheetio.config import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_ROW_WINDOW,
    SheetIOSettings,
    load_sheetio_settings,
)

# Coercion
from sheetio.coercion import coerce, is_date_format

# Readers
from sheetio.readers import (
    ExcelReader,
    SheetSelector,
    read,
    read_from,
    read_range,
    read_sheet,
)
from sheetio.rows import is_blank_row, row_values
from sheetio.sheet import Sheet

# Types
from sheetio.types import (
    CanonicalValue,
    ExportableRecord,
    ExportReport,
    NamedDataset,
    RawCell,
    SheetRow,
    make_cell,
    to_python,
    unwrap_rows,
)

# Workbooks
from sheetio.workbook import (
    Workbook,
    decode,
    format_hint_from_path,
    new_for_export,
)

# Writers
from sheetio.writers import (
    BufferedWorkbook,
    BufferedXlsWorkbook,
    ExportWorkbookProtocol,
    StreamingWorkbook,
    write_header,
    write_row,
)
from sheetio.writers.excel import (
    ExcelExporter,
    encode,
    export,
    export_sheets,
    export_table,
    save,
)

__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_ROW_WINDOW",
    "BufferedWorkbook",
    "BufferedXlsWorkbook",
    "CanonicalValue",
    "ExcelExporter",
    "ExcelReader",
    "ExportReport",
    "ExportWorkbookProtocol",
    "ExportableRecord",
    "IllegalCharacterWarning",
    "MissingKeyWarning",
    "NamedDataset",
    "RangeError",
    "RawCell",
    "RowFieldError",
    "Sheet",
    "SheetExportError",
    "SheetIOError",
    "SheetIOSettings",
    "SheetIOWarning",
    "SheetRow",
    "SheetSelector",
    "StreamingWorkbook",
    "TruncationWarning",
    "UnsupportedFormatError",
    "Workbook",
    "coerce",
    "decode",
    "encode",
    "export",
    "export_sheets",
    "export_table",
    "format_hint_from_path",
    "get_logger",
    "is_blank_row",
    "is_date_format",
    "load_sheetio_settings",
    "make_cell",
    "new_for_export",
    "read",
    "read_from",
    "read_range",
    "read_sheet",
    "row_values",
    "save",
    "setup_logging",
    "to_python",
    "unwrap_rows",
    "write_header",
    "write_row",
]
