"""Tests for decorator utilities."""
import logging

import pytest

from activity_system.utils.decorators import log_execution


def test_log_execution(caplog):
    """Test log_execution decorator."""
    caplog.set_level(logging.INFO, logger="activity_system.utils.decorators")

    @log_execution("adder", log_result=True)
    def logged_function(x, y):
        return x + y

    assert logged_function(2, 3) == 5
    messages = [r.getMessage() for r in caplog.records]
    assert "Starting adder" in messages
    assert "Completed adder" in messages
    completed = [r for r in caplog.records if r.getMessage() == "Completed adder"][0]
    assert completed.activity == "adder"
    assert completed.result == "5"


def test_log_execution_defaults_to_function_name(caplog):
    caplog.set_level(logging.INFO, logger="activity_system.utils.decorators")

    @log_execution()
    def unnamed():
        return None

    unnamed()
    assert "Starting unnamed" in caplog.text


def test_log_execution_reraises(caplog):
    """Failures are logged and propagated unchanged."""
    caplog.set_level(logging.INFO, logger="activity_system.utils.decorators")

    @log_execution("broken")
    def broken():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        broken()
    assert "Failed broken" in caplog.text


def test_log_execution_end_of_input_is_not_a_failure(caplog):
    caplog.set_level(logging.INFO, logger="activity_system.utils.decorators")

    @log_execution("reader")
    def closed():
        raise EOFError("closed")

    with pytest.raises(EOFError):
        closed()
    assert "Input closed during reader" in caplog.text
    assert "Failed reader" not in caplog.text
