"""
Tests for the logging helpers.
"""

import logging

import pytest

from ahoc.utils.logging_config import (
    PerformanceTimer, get_logger, get_performance_logger, setup_logging
)


def test_get_logger_namespaces_under_package():
    assert get_logger("ahoc.matcher.node").name == "ahoc.matcher.node"
    assert get_logger("ahoc").name == "ahoc"
    assert get_logger("scripts.load").name == "ahoc.scripts.load"
    assert get_performance_logger().name == "ahoc.performance"


def test_performance_timer_logs_duration(caplog):
    logger = logging.getLogger("tests.timer")
    with caplog.at_level(logging.DEBUG, logger="tests.timer"):
        with PerformanceTimer("scan", logger=logger) as timer:
            pass

    assert timer.duration is not None and timer.duration >= 0
    messages = [record.getMessage() for record in caplog.records]
    assert "Starting scan" in messages
    assert any(message.startswith("scan completed in") for message in messages)


def test_performance_timer_reraises(caplog):
    logger = logging.getLogger("tests.timer")
    with caplog.at_level(logging.DEBUG, logger="tests.timer"):
        with pytest.raises(ValueError):
            with PerformanceTimer("build", logger=logger):
                raise ValueError("boom")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "build failed after" in warnings[0].getMessage()
    assert "boom" in warnings[0].getMessage()


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "ahoc.log"
    try:
        setup_logging(log_level="DEBUG", log_file=str(log_file), enable_console=False)
        get_logger("tests.file").debug("written to file")
        for handler in logging.getLogger("ahoc").handlers:
            handler.flush()

        assert log_file.exists()
        assert "written to file" in log_file.read_text(encoding="utf8")
    finally:
        for handler in logging.getLogger("ahoc").handlers:
            handler.close()
        setup_logging(log_level="INFO")
