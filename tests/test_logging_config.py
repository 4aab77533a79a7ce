"""
Tests for logging setup.
"""

import json
import logging
import sys

import pytest
import structlog

from petclinic.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_logging():
    """Put the root logger and structlog back after reconfiguring them"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    """Test logging configuration"""

    def test_logs_go_to_stderr(self, restore_logging):
        """Test log records are written to stderr, not to the report stream"""
        setup_logging("INFO", "json")

        streams = [h.stream for h in logging.getLogger().handlers]
        assert streams == [sys.stderr]

    def test_json_lines_stay_out_of_stdout(self, restore_logging, capsys):
        """Test JSON log lines are rendered on stderr only"""
        setup_logging("INFO", "json")
        get_logger("petclinic.test").info("Owner registered", owner_id=11)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "Owner registered"
        assert record["owner_id"] == 11
        assert record["level"] == "info"

    def test_level_filters_records(self, restore_logging, capsys):
        """Test records below the configured level are dropped"""
        setup_logging("WARNING", "console")
        get_logger("petclinic.test").info("Not shown")

        assert "Not shown" not in capsys.readouterr().err
