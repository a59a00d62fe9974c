"""Exception hierarchy for sheetio library.

Fatal errors (UnsupportedFormatError, RangeError) propagate to the caller.
Export problems (RowFieldError, SheetExportError and the warnings) are
recovered where they happen and collected on the ExportReport instead of
being raised.
"""

from __future__ import annotations


class SheetIOError(Exception):
    """Base exception for sheetio library.

    All library exceptions inherit from this base class.
    """


class UnsupportedFormatError(SheetIOError):
    """Raised when a format hint does not match a supported container.

    Attributes:
        format_hint: The hint that was rejected.
        message: Description of why the format is unsupported.
    """

    def __init__(self, format_hint: str, message: str) -> None:
        self.format_hint = format_hint
        self.message = message
        super().__init__(f"{message}: {format_hint!r}")


class RangeError(SheetIOError):
    """Raised when a row or column window is invalid for a sheet.

    Attributes:
        message: Description of the violated bound.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RowFieldError(SheetIOError):
    """A structured record field could not be read or encoded.

    Recorded on the export report; the cell is left empty.

    Attributes:
        row_index: Zero-based sheet row being written.
        field: Field (or header) name.
        message: Description of the failure.
    """

    def __init__(self, row_index: int, field: str, message: str) -> None:
        self.row_index = row_index
        self.field = field
        self.message = message
        super().__init__(f"row {row_index}, field {field!r}: {message}")


class SheetExportError(SheetIOError):
    """A whole sheet failed during a multi-sheet export.

    Attributes:
        sheet_name: Name of the failed sheet.
        message: Description of the failure.
    """

    def __init__(self, sheet_name: str, message: str) -> None:
        self.sheet_name = sheet_name
        self.message = message
        super().__init__(f"sheet {sheet_name!r}: {message}")


class SheetIOWarning(SheetIOError):
    """Base class for recovered, non-fatal export conditions."""


class MissingKeyWarning(SheetIOWarning):
    """A header has no matching key in a mapping-shaped record.

    Attributes:
        row_index: Zero-based sheet row being written.
        key: The missing header key.
    """

    def __init__(self, row_index: int, key: str) -> None:
        self.row_index = row_index
        self.key = key
        super().__init__(f"row {row_index}: key {key!r} not present in record")


class IllegalCharacterWarning(SheetIOWarning):
    """A text value held control characters that spreadsheet XML cannot store.

    The characters are removed and the rest of the text is written.

    Attributes:
        row_index: Zero-based sheet row being written.
        column: Zero-based column index.
        removed: Number of characters removed.
    """

    def __init__(self, row_index: int, column: int, removed: int) -> None:
        self.row_index = row_index
        self.column = column
        self.removed = removed
        super().__init__(
            f"row {row_index}, column {column}: {removed} illegal character(s) removed"
        )


class TruncationWarning(SheetIOWarning):
    """A text value exceeded the maximum cell length and was truncated.

    Attributes:
        row_index: Zero-based sheet row being written.
        column: Zero-based column index.
        length: Original text length.
    """

    def __init__(self, row_index: int, column: int, length: int) -> None:
        self.row_index = row_index
        self.column = column
        self.length = length
        super().__init__(
            f"row {row_index}, column {column}: text of length {length} truncated"
        )


__all__ = [
    "IllegalCharacterWarning",
    "MissingKeyWarning",
    "RangeError",
    "RowFieldError",
    "SheetExportError",
    "SheetIOError",
    "SheetIOWarning",
    "TruncationWarning",
    "UnsupportedFormatError",
]
