"""Protocol definitions for openpyxl library.

Provides type-safe interfaces to openpyxl Workbook, Worksheet, and Cell
classes without importing openpyxl directly.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from datetime import date, datetime, time, timedelta
from typing import BinaryIO, Protocol

OpenpyxlValue = str | int | float | bool | date | datetime | time | timedelta | None


class CellProtocol(Protocol):
    """Protocol for openpyxl Cell."""

    @property
    def value(self) -> OpenpyxlValue:
        """Return cell value (formula text when loaded without data_only)."""
        ...

    @property
    def data_type(self) -> str:
        """Return openpyxl type code: n, s, b, e, f, d, inlineStr, str."""
        ...

    # Applied number format string; settable when building workbooks
    number_format: str


class ColumnDimensionProtocol(Protocol):
    """Protocol for openpyxl ColumnDimension."""

    width: float


class WorksheetProtocol(Protocol):
    """Protocol for openpyxl Worksheet."""

    def cell(
        self, row: int, column: int, value: str | int | float | bool | None = None
    ) -> CellProtocol:
        """Get or create cell at (row, column), 1-based."""
        ...

    def iter_rows(
        self,
        min_row: int | None = None,
        max_row: int | None = None,
        min_col: int | None = None,
        max_col: int | None = None,
    ) -> Iterator[tuple[CellProtocol, ...]]:
        """Iterate rows of cells."""
        ...

    @property
    def column_dimensions(self) -> MutableMapping[str, ColumnDimensionProtocol]:
        """Return column dimensions mapping."""
        ...

    @property
    def max_row(self) -> int:
        """Return maximum row number with data."""
        ...

    @property
    def max_column(self) -> int:
        """Return maximum column number with data."""
        ...

    @property
    def title(self) -> str:
        """Return worksheet title."""
        ...


class WorkbookProtocol(Protocol):
    """Protocol for openpyxl Workbook."""

    @property
    def sheetnames(self) -> list[str]:
        """Return list of sheet names."""
        ...

    # Date epoch: WINDOWS_EPOCH (1900 system) or MAC_EPOCH (1904 system)
    epoch: datetime

    @property
    def active(self) -> WorksheetProtocol:
        """Return active worksheet."""
        ...

    def __getitem__(self, name: str) -> WorksheetProtocol:
        """Get worksheet by name."""
        ...

    def create_sheet(self, title: str | None = None) -> WorksheetProtocol:
        """Create a new worksheet."""
        ...

    def remove(self, ws: WorksheetProtocol) -> None:
        """Remove a worksheet."""
        ...

    def save(self, filename: BinaryIO) -> None:
        """Save workbook to a binary stream."""
        ...

    def close(self) -> None:
        """Close workbook."""
        ...


class _LoadWorkbookFn(Protocol):
    """Protocol for openpyxl load_workbook function."""

    def __call__(
        self, filename: BinaryIO, read_only: bool = False, data_only: bool = False
    ) -> WorkbookProtocol: ...


class _WorkbookCtor(Protocol):
    """Protocol for openpyxl.Workbook constructor."""

    def __call__(self) -> WorkbookProtocol: ...


class _GetColumnLetterFn(Protocol):
    """Protocol for openpyxl.utils.get_column_letter function."""

    def __call__(self, col_idx: int) -> str: ...


class _IsDateFormatFn(Protocol):
    """Protocol for openpyxl.styles.numbers.is_date_format function."""

    def __call__(self, fmt: str | None) -> bool: ...


class _FromExcelFn(Protocol):
    """Protocol for openpyxl.utils.datetime.from_excel function."""

    def __call__(
        self, value: float, epoch: datetime = ..., timedelta: bool = False
    ) -> datetime | time | timedelta | None: ...


class _ToExcelFn(Protocol):
    """Protocol for openpyxl.utils.datetime.to_excel function."""

    def __call__(self, dt: date | datetime | time | timedelta, epoch: datetime = ...) -> float: ...


class _PatternProtocol(Protocol):
    """Protocol for the compiled openpyxl.cell.cell.ILLEGAL_CHARACTERS_RE."""

    def subn(self, repl: str, string: str) -> tuple[str, int]: ...


def _load_workbook(stream: BinaryIO, data_only: bool = False) -> WorkbookProtocol:
    """Load workbook from a binary stream with proper typing via Protocol.

    Args:
        stream: Seekable binary stream holding the .xlsx container.
        data_only: Read cached formula results instead of formula text.

    Returns:
        WorkbookProtocol for the loaded workbook.
    """
    openpyxl_mod = __import__("openpyxl")
    load_fn: _LoadWorkbookFn = openpyxl_mod.load_workbook
    return load_fn(stream, read_only=False, data_only=data_only)


def _create_workbook() -> WorkbookProtocol:
    """Create a new openpyxl Workbook with strict typing."""
    openpyxl_mod = __import__("openpyxl")
    ctor: _WorkbookCtor = openpyxl_mod.Workbook
    return ctor()


def _get_column_letter(col_idx: int) -> str:
    """Get Excel column letter via typed Protocol.

    Args:
        col_idx: 1-based column index.

    Returns:
        Column letter (e.g., "A", "B", "AA").
    """
    utils_mod = __import__("openpyxl.utils", fromlist=["get_column_letter"])
    fn: _GetColumnLetterFn = utils_mod.get_column_letter
    return fn(col_idx)


def _is_date_format(fmt: str) -> bool:
    """Check whether a number format string renders dates or times."""
    numbers_mod = __import__("openpyxl.styles.numbers", fromlist=["is_date_format"])
    fn: _IsDateFormatFn = numbers_mod.is_date_format
    return fn(fmt)


def _date_epoch(date1904: bool) -> datetime:
    """Return the serial-number epoch for the 1900 or 1904 date system."""
    dt_mod = __import__("openpyxl.utils.datetime", fromlist=["WINDOWS_EPOCH"])
    windows_epoch: datetime = dt_mod.WINDOWS_EPOCH
    mac_epoch: datetime = dt_mod.MAC_EPOCH
    return mac_epoch if date1904 else windows_epoch


def _from_excel(value: float, date1904: bool) -> datetime | time | timedelta | None:
    """Convert an Excel serial number to a date/time object."""
    dt_mod = __import__("openpyxl.utils.datetime", fromlist=["from_excel"])
    fn: _FromExcelFn = dt_mod.from_excel
    return fn(value, epoch=_date_epoch(date1904))


def _strip_illegal_characters(text: str) -> tuple[str, int]:
    """Remove control characters openpyxl refuses to store in worksheet XML.

    Returns:
        Cleaned text and the number of characters removed.
    """
    cell_mod = __import__("openpyxl.cell.cell", fromlist=["ILLEGAL_CHARACTERS_RE"])
    pattern: _PatternProtocol = cell_mod.ILLEGAL_CHARACTERS_RE
    return pattern.subn("", text)


def _to_excel(value: date | datetime | time | timedelta, date1904: bool) -> float:
    """Convert a date/time object back to its Excel serial number."""
    dt_mod = __import__("openpyxl.utils.datetime", fromlist=["to_excel"])
    fn: _ToExcelFn = dt_mod.to_excel
    return float(fn(value, epoch=_date_epoch(date1904)))


__all__ = [
    "CellProtocol",
    "ColumnDimensionProtocol",
    "OpenpyxlValue",
    "WorkbookProtocol",
    "WorksheetProtocol",
    "_create_workbook",
    "_date_epoch",
    "_from_excel",
    "_get_column_letter",
    "_is_date_format",
    "_load_workbook",
    "_strip_illegal_characters",
    "_to_excel",
]
