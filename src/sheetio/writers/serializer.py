"""Row serializer: one logical record to cell writes.

A record is classified once into a tagged shape and then written by the
handler for that shape:

- mapping: values looked up by header, placed at the header's column
- array (tuple) / list: element i written at column i
- record: fields from ``export_fields()``, dataclass fields, or a
  caller-supplied header -> accessor mapping, encoded by runtime type

Problems are isolated to the smallest unit. A missing key or a failing
field is reported and the cell left empty; the row and the export go on.
Text holding control characters that spreadsheet XML cannot store is
written with those characters removed and a warning recorded.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping, Sequence
from datetime import date, datetime, time
from functools import partial
from typing import Literal, TypedDict

from sheetio._exceptions import (
    IllegalCharacterWarning,
    MissingKeyWarning,
    RowFieldError,
    SheetIOError,
    TruncationWarning,
)
from sheetio._logging import get_logger
from sheetio._protocols.openpyxl import _strip_illegal_characters
from sheetio.types.export import ExportableRecord, FieldAccessor, HeaderAccessors
from sheetio.writers.base import CellWrite, ExportSheetProtocol, RowCursor

_logger = get_logger(__name__)

# Maximum characters in one cell (both container families)
MAX_CELL_TEXT = 32767

# Integers beyond this magnitude lose precision as IEEE doubles and are
# written as text instead.
_MAX_EXACT_INT = 2**53


class MappingShape(TypedDict):
    kind: Literal["mapping"]
    data: Mapping[str, object]


class ArrayShape(TypedDict):
    kind: Literal["array"]
    items: tuple[object, ...]


class ListShape(TypedDict):
    kind: Literal["list"]
    items: list[object]


class StructuredShape(TypedDict):
    kind: Literal["record"]
    record: object


RecordShape = MappingShape | ArrayShape | ListShape | StructuredShape


def classify_record(record: object) -> RecordShape:
    """Classify a record into its tagged shape.

    Precedence: mapping, then tuple (positional array), then list, and
    everything else is a structured record.
    """
    if isinstance(record, Mapping):
        return MappingShape(kind="mapping", data=record)
    if isinstance(record, tuple):
        return ArrayShape(kind="array", items=record)
    if isinstance(record, list):
        return ListShape(kind="list", items=record)
    return StructuredShape(kind="record", record=record)


def _stringify(value: object) -> str:
    return "" if value is None else str(value)


def _set_text(cursor: RowCursor, column: int, text: str, issues: list[SheetIOError]) -> None:
    """Write text without XML-illegal characters, truncated to MAX_CELL_TEXT."""
    cleaned, removed = _strip_illegal_characters(text)
    if removed:
        illegal = IllegalCharacterWarning(cursor.index, column, removed)
        _logger.warning(str(illegal), extra={"row": cursor.index, "column": column})
        issues.append(illegal)
        text = cleaned
    if len(text) > MAX_CELL_TEXT:
        warning = TruncationWarning(cursor.index, column, len(text))
        _logger.warning(str(warning), extra={"row": cursor.index, "column": column})
        issues.append(warning)
        text = text[:MAX_CELL_TEXT]
    cursor.set_cell(column, text)


def _set_encoded(
    cursor: RowCursor, column: int, value: CellWrite, issues: list[SheetIOError]
) -> None:
    if isinstance(value, str):
        _set_text(cursor, column, value, issues)
    else:
        cursor.set_cell(column, value)


def _encode_field_value(value: object, date_pattern: str | None) -> CellWrite:
    """Encode a structured-record field by its runtime type.

    Raises:
        ValueError: If the value is a date/time and no pattern was given.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value if abs(value) <= _MAX_EXACT_INT else str(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if isinstance(value, (datetime, date, time)):
        if date_pattern is None:
            raise ValueError("date pattern required to write date/time values")
        return value.strftime(date_pattern)
    return str(value)


def _write_mapping(
    cursor: RowCursor,
    headers: Sequence[str],
    data: Mapping[str, object],
    issues: list[SheetIOError],
) -> None:
    for column, key in enumerate(headers):
        if key not in data:
            warning = MissingKeyWarning(cursor.index, key)
            _logger.warning(str(warning), extra={"row": cursor.index, "field": key})
            issues.append(warning)
            continue
        _set_text(cursor, column, _stringify(data[key]), issues)


def _write_sequence(
    cursor: RowCursor, items: Sequence[object], issues: list[SheetIOError]
) -> None:
    for column, value in enumerate(items):
        _set_text(cursor, column, _stringify(value), issues)


def _field_error(row: int, field: str, message: str) -> RowFieldError:
    error = RowFieldError(row, field, message)
    _logger.error(str(error), extra={"row": row, "field": field})
    return error


def _bind_accessor(getter: object, record: object) -> FieldAccessor | None:
    if not callable(getter):
        return None
    return partial(getter, record)


def _resolve_fields(
    row: int,
    record: object,
    headers: Sequence[str],
    accessors: HeaderAccessors | None,
    issues: list[SheetIOError],
) -> list[tuple[int, str, FieldAccessor | None]]:
    """Resolve (column, field name, accessor) triples for a record.

    An accessor of None marks a field that could not be resolved.
    """
    if accessors is not None:
        return [
            (column, header, _bind_accessor(accessors.get(header), record))
            for column, header in enumerate(headers)
        ]
    if isinstance(record, ExportableRecord):
        try:
            declared = list(record.export_fields())
        except Exception as exc:
            issues.append(_field_error(row, "*", f"export_fields() failed: {exc}"))
            return []
        return [(column, name, accessor) for column, (name, accessor) in enumerate(declared)]
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return [
            (column, field.name, partial(getattr, record, field.name))
            for column, field in enumerate(dataclasses.fields(record))
        ]
    issues.append(
        _field_error(row, "*", f"cannot export record of type {type(record).__name__}")
    )
    return []


def _write_structured(
    cursor: RowCursor,
    headers: Sequence[str],
    record: object,
    date_pattern: str | None,
    accessors: HeaderAccessors | None,
    issues: list[SheetIOError],
) -> None:
    for column, name, accessor in _resolve_fields(
        cursor.index, record, headers, accessors, issues
    ):
        if accessor is None:
            issues.append(_field_error(cursor.index, name, "no accessor for field"))
            continue
        try:
            encoded = _encode_field_value(accessor(), date_pattern)
        except Exception as exc:
            issues.append(_field_error(cursor.index, name, f"{type(exc).__name__}: {exc}"))
            continue
        _set_encoded(cursor, column, encoded, issues)


def write_row(
    cursor: RowCursor,
    headers: Sequence[str],
    record: object,
    date_pattern: str | None,
    *,
    accessors: HeaderAccessors | None = None,
) -> list[SheetIOError]:
    """Serialize one record into the row behind ``cursor``.

    Args:
        cursor: Row to write.
        headers: Sheet headers; define column positions for mappings and
            caller-supplied accessors.
        record: Mapping, tuple, list or structured record.
        date_pattern: strftime pattern for date/time fields of structured
            records. None makes such fields fail with RowFieldError.
        accessors: Optional header -> accessor mapping used for structured
            records instead of their declared fields.

    Returns:
        Recovered issues for this row (empty when the row is clean).
    """
    issues: list[SheetIOError] = []
    shape = classify_record(record)
    if shape["kind"] == "mapping":
        _write_mapping(cursor, headers, shape["data"], issues)
    elif shape["kind"] == "array":
        _write_sequence(cursor, shape["items"], issues)
    elif shape["kind"] == "list":
        _write_sequence(cursor, shape["items"], issues)
    else:
        _write_structured(cursor, headers, shape["record"], date_pattern, accessors, issues)
    return issues


def write_header(
    sheet: ExportSheetProtocol,
    headers: Sequence[str],
    issues: list[SheetIOError] | None = None,
) -> RowCursor:
    """Write the header row (row 0).

    Header text is cleaned and truncated like any other text cell. Warnings
    are appended to ``issues`` when a list is given.
    """
    recorded: list[SheetIOError] = issues if issues is not None else []
    cursor = sheet.create_row(0)
    for column, header in enumerate(headers):
        _set_text(cursor, column, header, recorded)
    return cursor


__all__ = [
    "MAX_CELL_TEXT",
    "ArrayShape",
    "ListShape",
    "MappingShape",
    "RecordShape",
    "StructuredShape",
    "classify_record",
    "write_header",
    "write_row",
]
