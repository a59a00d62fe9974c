"""Workbook factory: decode input bytes and create export workbooks.

Dispatch is purely on the format hint; the payload is never sniffed.

- "xlsx": decoded with openpyxl; exported with the streaming writer
  (or the buffered writer when the expected row count fits the window)
- "xls": decoded with xlrd; exported with the fully-buffered xlwt writer
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Protocol

from sheetio._decoders.xls import XlsSource
from sheetio._decoders.xlsx import XlsxSource
from sheetio._exceptions import UnsupportedFormatError
from sheetio._logging import get_logger
from sheetio.config import DEFAULT_ROW_WINDOW, load_sheetio_settings
from sheetio.sheet import Sheet
from sheetio.writers.base import ExportWorkbookProtocol
from sheetio.writers.buffered import BufferedWorkbook
from sheetio.writers.buffered_xls import BufferedXlsWorkbook
from sheetio.writers.streaming import StreamingWorkbook

_logger = get_logger(__name__)

XLSX = "xlsx"
XLS = "xls"
SUPPORTED_FORMATS: frozenset[str] = frozenset({XLSX, XLS})


class _SheetSource(Protocol):
    """Backend that decodes sheets of one container on demand."""

    @property
    def sheet_names(self) -> list[str]: ...

    def load_sheet(self, index: int) -> Sheet: ...

    def close(self) -> None: ...


def normalize_format_hint(format_hint: str) -> str:
    """Lower-case a hint and strip a leading dot (".XLSX" -> "xlsx")."""
    return format_hint.strip().lower().lstrip(".")


def format_hint_from_path(path: Path | str) -> str:
    """Return the format hint implied by a file name's suffix."""
    return normalize_format_hint(Path(path).suffix)


class Workbook:
    """Decoded workbook: an ordered sequence of named sheets.

    Sheets are decoded on first access and cached. Use as a context
    manager, or call close(), to release the underlying library objects.
    """

    def __init__(self, format_hint: str, source: _SheetSource) -> None:
        self._format_hint = format_hint
        self._source = source
        self._names = source.sheet_names
        self._cache: dict[int, Sheet] = {}

    @property
    def format_hint(self) -> str:
        return self._format_hint

    @property
    def sheet_names(self) -> list[str]:
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def sheet_at(self, index: int) -> Sheet:
        """Return the sheet at a zero-based index.

        Raises:
            IndexError: If index is out of range.
        """
        position = range(len(self._names))[index]
        cached = self._cache.get(position)
        if cached is None:
            cached = self._source.load_sheet(position)
            self._cache[position] = cached
        return cached

    def sheet_by_name(self, name: str) -> Sheet | None:
        """Return the named sheet, or None when no sheet has that name."""
        if name not in self._names:
            return None
        return self.sheet_at(self._names.index(name))

    def sheets(self) -> Iterator[Sheet]:
        """Yield every sheet in workbook order."""
        for index in range(len(self._names)):
            yield self.sheet_at(index)

    def close(self) -> None:
        self._source.close()
        self._cache.clear()

    def __enter__(self) -> Workbook:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _read_payload(data: bytes | BinaryIO) -> bytes:
    if isinstance(data, bytes):
        return data
    return data.read()


def decode(data: bytes | BinaryIO, format_hint: str) -> Workbook:
    """Decode a spreadsheet container into a Workbook.

    Args:
        data: Container bytes or a binary stream positioned at its start.
        format_hint: File extension naming the container family.

    Returns:
        Workbook over the decoded sheets.

    Raises:
        UnsupportedFormatError: If the hint names no supported family.
    """
    hint = normalize_format_hint(format_hint)
    if hint not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(format_hint, "Unsupported spreadsheet format")
    payload = _read_payload(data)
    _logger.debug("decoding workbook", extra={"format_hint": hint})
    source: _SheetSource = XlsxSource(payload) if hint == XLSX else XlsSource(payload)
    return Workbook(hint, source)


def new_for_export(
    format_hint: str,
    *,
    expected_rows: int | None = None,
    row_window: int | None = None,
) -> ExportWorkbookProtocol:
    """Create an empty export workbook for a container family.

    The XML family gets the streaming writer with a fixed row window
    unless ``expected_rows`` is known and fits inside the window, in which
    case the simpler fully-buffered writer is used. The legacy family is
    always fully buffered: its container cannot be written incrementally,
    so ``expected_rows`` and ``row_window`` do not apply to it.

    Args:
        format_hint: File extension naming the container family.
        expected_rows: Largest number of rows any one sheet will hold, if known.
        row_window: Resident rows per sheet for streaming; defaults to the
            SHEETIO_ROW_WINDOW setting (5000).

    Raises:
        UnsupportedFormatError: If the hint names no supported family.
    """
    hint = normalize_format_hint(format_hint)
    if hint == XLS:
        return BufferedXlsWorkbook()
    if hint != XLSX:
        raise UnsupportedFormatError(format_hint, "Unsupported spreadsheet format")

    window = row_window if row_window is not None else load_sheetio_settings()["row_window"]
    if expected_rows is not None and expected_rows <= window:
        return BufferedWorkbook()
    return StreamingWorkbook(window)


__all__ = [
    "DEFAULT_ROW_WINDOW",
    "SUPPORTED_FORMATS",
    "XLS",
    "XLSX",
    "Workbook",
    "decode",
    "format_hint_from_path",
    "new_for_export",
    "normalize_format_hint",
]
