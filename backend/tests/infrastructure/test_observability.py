"""Structured Logging — JSON formatter surfaces extra fields and exceptions."""

import json
import logging
import sys

from showcase.config import Settings
from showcase.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "showcase.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "showcase.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_surfaces_known_extra_fields_only():
    log = json.loads(JSONFormatter().format(
        _record(resource="blogpost", count=3, unrelated="x"),
    ))
    assert log["resource"] == "blogpost"
    assert log["count"] == 3
    assert "unrelated" not in log


def test_includes_exception_text():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


def test_timestamp_is_record_creation_time():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter().format(record))
    assert log["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        settings = Settings(log_level="warning", log_format="json")
        setup_logging(settings)
        handler = setup_logging(settings)

        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert ours == [handler]
        assert isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_text_format():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        handler = setup_logging(Settings(log_format="text"))
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
