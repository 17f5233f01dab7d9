"""Tests for JSONL system logging."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from authgate.telemetry import configure_system_logging, get_system_logger
from authgate.telemetry.models.system import SystemEvent
from authgate.telemetry.system_logger import JsonlFormatter, get_system_log_path


def _record(msg, level: int = logging.WARNING) -> logging.LogRecord:
    return logging.LogRecord("authgate.system", level, __file__, 1, msg, None, None)


class TestJsonlFormatter:
    """Tests for JsonlFormatter."""

    def test_dict_message(self):
        """Given a dict message, fields are kept and time/level added."""
        # Act
        line = JsonlFormatter().format(_record({"event": "provider_config_problem"}))
        data = json.loads(line)

        # Assert
        assert data["event"] == "provider_config_problem"
        assert data["level"] == "WARNING"
        assert "time" in data
        assert list(data)[0] == "time"

    def test_plain_message_wrapped(self):
        """Given a string message, it is wrapped as a generic log event."""
        data = json.loads(JsonlFormatter().format(_record("hello", logging.INFO)))
        assert data["event"] == "log"
        assert data["message"] == "hello"
        assert data["level"] == "INFO"


class TestConfigureSystemLogging:
    """Tests for handler setup."""

    def test_writes_jsonl_file(self, tmp_path: Path):
        """Given a log_dir, events are appended to system.jsonl."""
        # Arrange
        logger = configure_system_logging("INFO", log_dir=tmp_path, console=False)

        # Act
        logger.warning(SystemEvent(event="provider_config_problem", message="m").model_dump(exclude_none=True))
        for handler in logger.handlers:
            handler.flush()

        # Assert
        lines = get_system_log_path(tmp_path).read_text().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == "m"

    def test_reconfigure_replaces_handlers(self, tmp_path: Path):
        """Given repeated configuration, handlers don't stack."""
        # Act
        configure_system_logging("INFO", log_dir=tmp_path)
        logger = configure_system_logging("DEBUG", log_dir=tmp_path)

        # Assert
        marked = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(marked) == 2
        assert logger.level == logging.DEBUG

    def test_unconfigured_logger_is_silent(self):
        """Before configuration, the logger only has a NullHandler."""
        logger = get_system_logger()
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
