"""Tests for logging setup."""
import io
import json
import logging

from activity_system.utils.logging import JsonFormatter, setup_logging


def test_json_formatter():
    record = logging.LogRecord("activity_system.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.activity = "triangle"

    data = json.loads(JsonFormatter().format(record))
    assert data["message"] == "hello world"
    assert data["level"] == "INFO"
    assert data["logger"] == "activity_system.test"
    assert data["activity"] == "triangle"
    assert "timestamp" in data


def test_setup_logging_text_stream():
    stream = io.StringIO()
    setup_logging(level="INFO", format_type="text", stream=stream)

    logging.getLogger("activity_system.test").info("menu opened")
    assert "menu opened" in stream.getvalue()
    assert "INFO" in stream.getvalue()


def test_setup_logging_level_filters():
    stream = io.StringIO()
    setup_logging(level="WARNING", stream=stream)

    logging.getLogger("activity_system.test").info("hidden")
    assert stream.getvalue() == ""


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(level="INFO", log_file=str(log_file), format_type="json", stream=io.StringIO())

    logging.getLogger("activity_system.test").warning("written")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert json.loads(log_file.read_text().splitlines()[0])["message"] == "written"


def test_setup_logging_disabled():
    setup_logging(enabled=False)
    try:
        assert logging.getLogger("activity_system.test").isEnabledFor(logging.CRITICAL) is False
    finally:
        logging.disable(logging.NOTSET)
