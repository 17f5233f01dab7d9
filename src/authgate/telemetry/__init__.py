"""Telemetry for authgate: structured system logging."""

from authgate.telemetry.system_logger import configure_system_logging, get_system_logger

__all__ = [
    "configure_system_logging",
    "get_system_logger",
]
