"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest

from authgate.telemetry.system_logger import SYSTEM_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_system_logger():
    """Undo configure_system_logging so records reach caplog in every test."""
    yield
    logger = logging.getLogger(SYSTEM_LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
