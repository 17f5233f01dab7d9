"""System logger writing JSON lines.

Events are logged as dicts (usually SystemEvent.model_dump output) and
serialized one per line by JsonlFormatter:

    _system_logger = get_system_logger()
    _system_logger.warning(
        SystemEvent(event="provider_problem", message=msg).model_dump(exclude_none=True)
    )

Plain string messages are wrapped as {"event": "log", "message": ...}.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from authgate.constants import LOG_SUBDIR, SYSTEM_LOG_FILENAME

__all__ = [
    "JsonlFormatter",
    "SYSTEM_LOGGER_NAME",
    "configure_system_logging",
    "get_system_log_path",
    "get_system_logger",
]

SYSTEM_LOGGER_NAME = "authgate.system"

# Marks handlers installed by configure_system_logging so reconfiguring
# replaces them instead of stacking duplicates.
_HANDLER_MARKER = "_authgate_handler"


class JsonlFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            data = dict(record.msg)
        else:
            data = {"event": "log", "message": record.getMessage()}

        data.setdefault("level", record.levelname)
        data = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            **data,
        }
        return json.dumps(data, default=str)


def get_system_logger() -> logging.Logger:
    """Return the shared system logger.

    Silent until configure_system_logging attaches handlers.
    """
    logger = logging.getLogger(SYSTEM_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def get_system_log_path(log_dir: str | Path) -> Path:
    """Path of system.jsonl under a user-specified log directory."""
    return Path(log_dir).expanduser() / LOG_SUBDIR / SYSTEM_LOG_FILENAME


def configure_system_logging(
    log_level: str = "INFO",
    log_dir: str | Path | None = None,
    console: bool = True,
) -> logging.Logger:
    """Attach JSONL handlers to the system logger.

    Safe to call repeatedly; handlers from a previous call are replaced.

    Args:
        log_level: Minimum level name ("DEBUG", "INFO", "WARNING").
        log_dir: If set, also append events to <log_dir>/authgate_logs/system.jsonl.
        console: Write events to stderr.

    Returns:
        The configured system logger.
    """
    logger = get_system_logger()
    logger.setLevel(log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = JsonlFormatter()
    handlers: list[logging.Handler] = []

    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_dir is not None:
        log_path = get_system_log_path(log_dir)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)

    return logger
