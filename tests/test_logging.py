"""Tests for _logging module."""

from __future__ import annotations

import json
import logging
import os
import sys

import pytest

from sheetio._logging import (
    JsonFormatter,
    TextFormatter,
    _compute_instance_id,
    _level_to_int,
    get_logger,
    setup_logging,
)


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="sheetio.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_basic() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=[])
    parsed = json.loads(formatter.format(_record("hello")))
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "sheetio.test"
    assert parsed["message"] == "hello"
    assert "timestamp" in parsed


def test_json_formatter_static_fields() -> None:
    formatter = JsonFormatter(
        static_fields={"service": "exports", "instance_id": "host-1"},
        extra_field_names=[],
    )
    parsed = json.loads(formatter.format(_record()))
    assert parsed["service"] == "exports"
    assert parsed["instance_id"] == "host-1"


def test_json_formatter_standard_fields() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=[])
    record = _record()
    record.sheet = "Orders"
    record.row = 12
    record.field = "total"
    parsed = json.loads(formatter.format(record))
    assert parsed["sheet"] == "Orders"
    assert parsed["row"] == 12
    assert parsed["field"] == "total"
    assert "column" not in parsed


def test_json_formatter_configured_extra_fields() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=["job_id"])
    record = _record()
    record.job_id = "j-9"
    parsed = json.loads(formatter.format(record))
    assert parsed["job_id"] == "j-9"


def test_json_formatter_skips_non_scalar_extras() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=["payload"])
    record = _record()
    record.payload = {"nested": True}
    parsed = json.loads(formatter.format(record))
    assert "payload" not in parsed


def test_json_formatter_exception() -> None:
    formatter = JsonFormatter(static_fields={}, extra_field_names=[])
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord(
            name="sheetio.test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )
    parsed = json.loads(formatter.format(record))
    assert "ValueError: bad" in parsed["exc_info"]


def test_text_formatter() -> None:
    formatter = TextFormatter(extra_fields=["sheet"])
    record = _record("written")
    record.sheet = "Orders"
    line = formatter.format(record)
    assert "[INFO]" in line
    assert "[sheetio.test]" in line
    assert "sheet=Orders" in line
    assert line.endswith("written")


def test_level_to_int() -> None:
    assert _level_to_int("DEBUG") == logging.DEBUG
    assert _level_to_int("CRITICAL") == logging.CRITICAL


def test_compute_instance_id_includes_pid() -> None:
    assert _compute_instance_id().endswith(f"-{os.getpid()}")


def test_get_logger() -> None:
    assert get_logger("sheetio.x").name == "sheetio.x"


def test_setup_logging_json(capsys: pytest.CaptureFixture[str]) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(
            level="INFO",
            format_mode="json",
            service_name="sheetio-test",
            instance_id="i-1",
            extra_fields=None,
        )
        get_logger("sheetio.export").info("done", extra={"rows_written": 3})
        captured = capsys.readouterr()
        parsed = json.loads(captured.out.strip().splitlines()[-1])
        assert parsed["service"] == "sheetio-test"
        assert parsed["instance_id"] == "i-1"
        assert parsed["rows_written"] == 3
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_text_sets_level() -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        configured = setup_logging(
            level="WARNING",
            format_mode="text",
            service_name="sheetio-test",
            instance_id=None,
            extra_fields=["sheet"],
        )
        assert configured is root
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
