"""Type definitions for sheetio."""

from __future__ import annotations

from sheetio.types.cells import CellKind, RawCell, RawContent, SheetRow, make_cell
from sheetio.types.export import (
    ExportableRecord,
    ExportReport,
    FieldAccessor,
    HeaderAccessors,
    NamedDataset,
)
from sheetio.types.values import (
    BooleanValue,
    CanonicalValue,
    DateValue,
    ErrorValue,
    NullValue,
    NumberValue,
    PythonValue,
    TextValue,
    ValueKind,
    boolean_value,
    date_value,
    error_value,
    is_null,
    null_value,
    number_value,
    text_value,
    to_python,
    unwrap_rows,
)

__all__ = [
    "BooleanValue",
    "CanonicalValue",
    "CellKind",
    "DateValue",
    "ErrorValue",
    "ExportReport",
    "ExportableRecord",
    "FieldAccessor",
    "HeaderAccessors",
    "NamedDataset",
    "NullValue",
    "NumberValue",
    "PythonValue",
    "RawCell",
    "RawContent",
    "SheetRow",
    "TextValue",
    "ValueKind",
    "boolean_value",
    "date_value",
    "error_value",
    "is_null",
    "make_cell",
    "null_value",
    "number_value",
    "text_value",
    "to_python",
    "unwrap_rows",
]
