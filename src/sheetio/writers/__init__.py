"""Export-side workbooks and row serialization.

Orchestration lives in sheetio.writers.excel, which depends on the
workbook factory and is therefore not imported here.
"""

from __future__ import annotations

from sheetio.writers.base import (
    CellWrite,
    ExportSheetProtocol,
    ExportWorkbookProtocol,
    RowCursor,
)
from sheetio.writers.buffered import BufferedSheet, BufferedWorkbook
from sheetio.writers.buffered_xls import BufferedXlsSheet, BufferedXlsWorkbook
from sheetio.writers.serializer import classify_record, write_header, write_row
from sheetio.writers.streaming import StreamingSheet, StreamingWorkbook

__all__ = [
    "BufferedSheet",
    "BufferedWorkbook",
    "BufferedXlsSheet",
    "BufferedXlsWorkbook",
    "CellWrite",
    "ExportSheetProtocol",
    "ExportWorkbookProtocol",
    "RowCursor",
    "StreamingSheet",
    "StreamingWorkbook",
    "classify_record",
    "write_header",
    "write_row",
]
