"""Export orchestration: datasets to spreadsheet files or streams.

Each export creates one export workbook, writes a header row and one row
per record on each sheet, auto-sizes the header columns and emits the
encoded bytes to the target. The workbook is closed on every exit path.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Sized
from pathlib import Path
from typing import BinaryIO

from sheetio._exceptions import SheetExportError, UnsupportedFormatError
from sheetio._logging import get_logger
from sheetio.config import load_sheetio_settings
from sheetio.types.export import ExportReport, HeaderAccessors, NamedDataset
from sheetio.workbook import format_hint_from_path, new_for_export, normalize_format_hint
from sheetio.writers.base import ExportSheetProtocol, ExportWorkbookProtocol
from sheetio.writers.serializer import write_header, write_row

_logger = get_logger(__name__)

# File path (format taken from its suffix) or writable binary stream.
ExportTarget = Path | str | BinaryIO

DEFAULT_SHEET_NAME = "Sheet1"


def _resolve_target_hint(target: ExportTarget, format_hint: str | None) -> str:
    """Return the format hint for a target.

    Raises:
        UnsupportedFormatError: If the target is a stream and no hint was given.
    """
    if format_hint is not None:
        return normalize_format_hint(format_hint)
    if isinstance(target, (str, Path)):
        return format_hint_from_path(target)
    raise UnsupportedFormatError("", "Format hint required when exporting to a stream")


def _emit(data: bytes, target: ExportTarget) -> None:
    if isinstance(target, (str, Path)):
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    else:
        target.write(data)


def _expected_rows(records: Iterable[object]) -> int | None:
    """Row count including the header row, when the record count is known."""
    if isinstance(records, Sized):
        return len(records) + 1
    return None


def encode(workbook: ExportWorkbookProtocol) -> bytes:
    """Encode an export workbook to container bytes."""
    return workbook.encode()


def save(workbook: ExportWorkbookProtocol, target: ExportTarget) -> None:
    """Encode an export workbook and write it to a path or stream."""
    _emit(workbook.encode(), target)


def _write_dataset(
    sheet: ExportSheetProtocol,
    headers: Sequence[str],
    records: Iterable[object],
    date_pattern: str,
    accessors: HeaderAccessors | None,
    report: ExportReport,
) -> None:
    write_header(sheet, headers, report.issues)
    for index, record in enumerate(records, start=1):
        cursor = sheet.create_row(index)
        report.issues.extend(
            write_row(cursor, headers, record, date_pattern, accessors=accessors)
        )
        report.rows_written += 1
    sheet.auto_size_columns(len(headers))


class ExcelExporter:
    """Exporter for datasets to .xlsx (openpyxl or xlsxwriter) or .xls (xlwt).

    For .xlsx, small datasets with a known length are written with the
    buffered writer; everything else streams through a fixed row window.
    .xls output is always fully buffered.

    Recovered problems (missing keys, failing fields, truncated text and,
    for multi-sheet exports, failed sheets) are collected on the returned
    ExportReport. Format and I/O errors are raised.
    """

    def __init__(self, date_pattern: str | None = None, row_window: int | None = None) -> None:
        """Initialize the exporter.

        Args:
            date_pattern: strftime pattern for date/time fields of structured
                records. Defaults to the SHEETIO_DATE_PATTERN setting.
            row_window: Resident rows per sheet when streaming. Defaults to
                the SHEETIO_ROW_WINDOW setting.
        """
        settings = load_sheetio_settings()
        self._date_pattern = date_pattern if date_pattern is not None else settings["date_pattern"]
        self._row_window = row_window if row_window is not None else settings["row_window"]

    @property
    def date_pattern(self) -> str:
        return self._date_pattern

    @property
    def row_window(self) -> int:
        return self._row_window

    def export(
        self,
        headers: Sequence[str],
        dataset: Iterable[object],
        target: ExportTarget,
        *,
        date_pattern: str | None = None,
        format_hint: str | None = None,
        sheet_name: str | None = None,
        accessors: HeaderAccessors | None = None,
    ) -> ExportReport:
        """Export one dataset as a single sheet.

        Args:
            headers: Column headers, written verbatim as row 0.
            dataset: Records: mappings, tuples, lists or structured records.
            target: Output path or binary stream.
            date_pattern: Overrides the exporter's date pattern.
            format_hint: Container format; required for stream targets.
            sheet_name: Worksheet name (default "Sheet1").
            accessors: Header -> accessor mapping for structured records.

        Returns:
            ExportReport with recovered issues and counts.

        Raises:
            UnsupportedFormatError: If the format is unknown or unsupported.
        """
        hint = _resolve_target_hint(target, format_hint)
        pattern = date_pattern if date_pattern is not None else self._date_pattern
        name = sheet_name if sheet_name is not None else DEFAULT_SHEET_NAME
        report = ExportReport()

        with new_for_export(
            hint, expected_rows=_expected_rows(dataset), row_window=self._row_window
        ) as workbook:
            sheet = workbook.create_sheet(name)
            _write_dataset(sheet, headers, dataset, pattern, accessors, report)
            report.sheets_written = 1
            save(workbook, target)

        _logger.info(
            "export complete",
            extra={"sheet": name, "rows_written": report.rows_written, "format_hint": hint},
        )
        return report

    def export_sheets(
        self,
        datasets: Sequence[NamedDataset],
        target: ExportTarget,
        *,
        date_pattern: str | None = None,
        format_hint: str | None = None,
    ) -> ExportReport:
        """Export several datasets, one sheet each, in the given order.

        An empty dataset list produces no output. A sheet that fails is
        recorded as SheetExportError and the remaining sheets are still
        written.

        Raises:
            UnsupportedFormatError: If the format is unknown or unsupported.
        """
        report = ExportReport()
        if not datasets:
            _logger.info("no datasets to export")
            return report

        hint = _resolve_target_hint(target, format_hint)
        pattern = date_pattern if date_pattern is not None else self._date_pattern

        sizes = [_expected_rows(dataset["records"]) for dataset in datasets]
        expected = None if None in sizes else max(size for size in sizes if size is not None)

        with new_for_export(hint, expected_rows=expected, row_window=self._row_window) as workbook:
            for dataset in datasets:
                name = dataset["sheet_name"]
                try:
                    sheet = workbook.create_sheet(name)
                    _write_dataset(
                        sheet, dataset["headers"], dataset["records"], pattern, None, report
                    )
                except Exception as exc:
                    error = SheetExportError(name, f"{type(exc).__name__}: {exc}")
                    _logger.exception("sheet export failed", extra={"sheet": name})
                    report.issues.append(error)
                    continue
                report.sheets_written += 1
            save(workbook, target)

        _logger.info(
            "export complete",
            extra={"rows_written": report.rows_written, "format_hint": hint},
        )
        return report

    def export_table(
        self,
        rows: Sequence[Sequence[str]],
        target: ExportTarget,
        *,
        format_hint: str | None = None,
        sheet_name: str | None = None,
    ) -> ExportReport:
        """Export a grid of strings without a header row.

        Columns are auto-sized to the width of the first row.
        """
        hint = _resolve_target_hint(target, format_hint)
        name = sheet_name if sheet_name is not None else DEFAULT_SHEET_NAME
        report = ExportReport()

        with new_for_export(hint, expected_rows=len(rows), row_window=self._row_window) as workbook:
            sheet = workbook.create_sheet(name)
            for index, row in enumerate(rows):
                cursor = sheet.create_row(index)
                report.issues.extend(write_row(cursor, [], list(row), None))
                report.rows_written += 1
            if rows:
                sheet.auto_size_columns(len(rows[0]))
            report.sheets_written = 1
            save(workbook, target)

        return report


def export(
    headers: Sequence[str],
    dataset: Iterable[object],
    target: ExportTarget,
    *,
    date_pattern: str | None = None,
    format_hint: str | None = None,
    sheet_name: str | None = None,
    accessors: HeaderAccessors | None = None,
) -> ExportReport:
    """Export one dataset with a default-configured ExcelExporter."""
    return ExcelExporter().export(
        headers,
        dataset,
        target,
        date_pattern=date_pattern,
        format_hint=format_hint,
        sheet_name=sheet_name,
        accessors=accessors,
    )


def export_sheets(
    datasets: Sequence[NamedDataset],
    target: ExportTarget,
    *,
    date_pattern: str | None = None,
    format_hint: str | None = None,
) -> ExportReport:
    """Export several named datasets with a default-configured ExcelExporter."""
    return ExcelExporter().export_sheets(
        datasets, target, date_pattern=date_pattern, format_hint=format_hint
    )


def export_table(
    rows: Sequence[Sequence[str]],
    target: ExportTarget,
    *,
    format_hint: str | None = None,
) -> ExportReport:
    """Export a grid of strings with a default-configured ExcelExporter."""
    return ExcelExporter().export_table(rows, target, format_hint=format_hint)


__all__ = [
    "DEFAULT_SHEET_NAME",
    "ExcelExporter",
    "ExportTarget",
    "encode",
    "export",
    "export_sheets",
    "export_table",
    "save",
]
