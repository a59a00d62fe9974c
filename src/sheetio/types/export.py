"""Export-side type definitions.

NamedDataset describes one sheet to export; ExportableRecord is the
capability interface for records whose fields are not a mapping or a
sequence; ExportReport collects the recovered problems of one export.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Protocol, TypedDict, runtime_checkable

from sheetio._exceptions import SheetIOError, SheetIOWarning

# Accessor bound to one record: returns the field value when called.
FieldAccessor = Callable[[], object]

# Caller-supplied header -> accessor mapping for structured records.
HeaderAccessors = Mapping[str, Callable[[object], object]]


@runtime_checkable
class ExportableRecord(Protocol):
    """Record that declares its exported fields in order."""

    def export_fields(self) -> Sequence[tuple[str, FieldAccessor]]:
        """Return (field name, accessor) pairs in column order."""
        ...


class NamedDataset(TypedDict):
    """One sheet of a multi-sheet export.

    Attributes:
        sheet_name: Name for the worksheet.
        headers: Column headers, written verbatim as row 0.
        records: Records to write; mappings, tuples, lists or structured
            records.
    """

    sheet_name: str
    headers: Sequence[str]
    records: Iterable[object]


class ExportReport:
    """Outcome of one export call.

    Attributes:
        issues: Recovered errors and warnings, in the order they occurred.
        sheets_written: Sheets that completed.
        rows_written: Data rows written (header rows excluded).
    """

    def __init__(self) -> None:
        self.issues: list[SheetIOError] = []
        self.sheets_written = 0
        self.rows_written = 0

    @property
    def warnings(self) -> list[SheetIOWarning]:
        return [issue for issue in self.issues if isinstance(issue, SheetIOWarning)]

    @property
    def errors(self) -> list[SheetIOError]:
        return [issue for issue in self.issues if not isinstance(issue, SheetIOWarning)]

    @property
    def ok(self) -> bool:
        """True when the export completed without any recovered issue."""
        return not self.issues

    def __repr__(self) -> str:
        return (
            f"ExportReport(sheets_written={self.sheets_written}, "
            f"rows_written={self.rows_written}, issues={len(self.issues)})"
        )


__all__ = [
    "ExportReport",
    "ExportableRecord",
    "FieldAccessor",
    "HeaderAccessors",
    "NamedDataset",
]
