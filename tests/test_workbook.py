"""Tests for workbook module."""

from __future__ import annotations

import io
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from sheetio._exceptions import UnsupportedFormatError
from sheetio.workbook import (
    SUPPORTED_FORMATS,
    Workbook,
    decode,
    format_hint_from_path,
    new_for_export,
    normalize_format_hint,
)
from sheetio.writers.buffered import BufferedWorkbook
from sheetio.writers.buffered_xls import BufferedXlsWorkbook
from sheetio.writers.streaming import StreamingWorkbook

XlsxBuilder = Callable[..., bytes]


def test_supported_formats() -> None:
    assert frozenset({"xlsx", "xls"}) == SUPPORTED_FORMATS


def test_normalize_format_hint() -> None:
    assert normalize_format_hint(".XLSX") == "xlsx"
    assert normalize_format_hint("xls") == "xls"
    assert normalize_format_hint(" .Xls ") == "xls"


def test_format_hint_from_path() -> None:
    assert format_hint_from_path(Path("out/report.XLSX")) == "xlsx"
    assert format_hint_from_path("legacy.xls") == "xls"
    assert format_hint_from_path("noext") == ""


class TestDecode:
    """Tests for decode."""

    def test_unknown_hint_raises(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            decode(b"a,b\n", "csv")
        assert exc_info.value.format_hint == "csv"

    def test_hint_is_not_sniffed(self, sample_xlsx: bytes) -> None:
        with pytest.raises(UnsupportedFormatError):
            decode(sample_xlsx, "ods")

    def test_decode_bytes(self, sample_xlsx: bytes) -> None:
        with decode(sample_xlsx, "xlsx") as workbook:
            assert isinstance(workbook, Workbook)
            assert workbook.format_hint == "xlsx"
            assert workbook.sheet_names == ["Data", "Notes"]
            assert len(workbook) == 2

    def test_decode_stream_with_dotted_hint(self, sample_xlsx: bytes) -> None:
        with decode(io.BytesIO(sample_xlsx), ".XLSX") as workbook:
            assert workbook.sheet_names == ["Data", "Notes"]

    def test_sheet_at(self, sample_xlsx: bytes) -> None:
        with decode(sample_xlsx, "xlsx") as workbook:
            assert workbook.sheet_at(1).name == "Notes"
            assert workbook.sheet_at(-1).name == "Notes"

    def test_sheet_at_caches(self, sample_xlsx: bytes) -> None:
        with decode(sample_xlsx, "xlsx") as workbook:
            assert workbook.sheet_at(0) is workbook.sheet_at(0)

    def test_sheet_at_out_of_range_raises(self, sample_xlsx: bytes) -> None:
        with decode(sample_xlsx, "xlsx") as workbook, pytest.raises(IndexError):
            workbook.sheet_at(2)

    def test_sheet_by_name(self, sample_xlsx: bytes) -> None:
        with decode(sample_xlsx, "xlsx") as workbook:
            sheet = workbook.sheet_by_name("Notes")
            assert sheet is not None
            assert sheet.physical_row_count == 2
            assert workbook.sheet_by_name("Missing") is None

    def test_sheets_in_order(self, sample_xlsx: bytes) -> None:
        with decode(sample_xlsx, "xlsx") as workbook:
            assert [sheet.name for sheet in workbook.sheets()] == ["Data", "Notes"]

    def test_codec_errors_propagate(self) -> None:
        with pytest.raises(zipfile.BadZipFile):
            decode(b"not a zip file", "xlsx")

    def test_decode_sheet_shape(self, build_xlsx: XlsxBuilder) -> None:
        payload = build_xlsx({"S": [["a", "b", "c"], [None, "y"], ["z"]]})
        with decode(payload, "xlsx") as workbook:
            sheet = workbook.sheet_at(0)
            assert sheet.physical_row_count == 3
            assert sheet.first_row_cell_count == 3
            row = sheet.get_row(1)
            assert row is not None
            assert sorted(row) == [1]


class TestNewForExport:
    """Tests for new_for_export."""

    def test_xlsx_defaults_to_streaming(self) -> None:
        with new_for_export("xlsx") as workbook:
            assert isinstance(workbook, StreamingWorkbook)
            assert workbook.row_window == 5000

    def test_small_known_size_is_buffered(self) -> None:
        with new_for_export("xlsx", expected_rows=10) as workbook:
            assert isinstance(workbook, BufferedWorkbook)

    def test_size_equal_to_window_is_buffered(self) -> None:
        with new_for_export("xlsx", expected_rows=5, row_window=5) as workbook:
            assert isinstance(workbook, BufferedWorkbook)

    def test_size_over_window_is_streaming(self) -> None:
        with new_for_export("xlsx", expected_rows=6, row_window=5) as workbook:
            assert isinstance(workbook, StreamingWorkbook)
            assert workbook.row_window == 5

    def test_window_from_settings(self) -> None:
        from sheetio.config import _test_hooks

        _test_hooks.get_env = lambda key: "250" if key == "SHEETIO_ROW_WINDOW" else None
        with new_for_export(".xlsx") as workbook:
            assert isinstance(workbook, StreamingWorkbook)
            assert workbook.row_window == 250

    def test_xls_export_is_buffered(self) -> None:
        with new_for_export(".XLS", expected_rows=100_000, row_window=5) as workbook:
            assert isinstance(workbook, BufferedXlsWorkbook)
            assert workbook.format_hint == "xls"

    def test_xls_export_round_trip(self) -> None:
        with new_for_export("xls") as workbook:
            row = workbook.create_sheet("Legacy").create_row(0)
            row.set_cell(0, "v")
            row.set_cell(1, 2.5)
            data = workbook.encode()
        with decode(data, "xls") as decoded:
            assert decoded.sheet_names == ["Legacy"]
            cells = decoded.sheet_at(0).get_row(0)
        assert cells is not None
        assert cells[0]["value"] == "v"
        assert cells[1]["value"] == 2.5

    def test_unknown_hint_raises(self) -> None:
        with pytest.raises(UnsupportedFormatError):
            new_for_export("pdf")

    def test_format_hint_property(self) -> None:
        with new_for_export("xlsx", expected_rows=1) as workbook:
            assert workbook.format_hint == "xlsx"
