"""Pydantic models for log events."""

from authgate.telemetry.models.system import SystemEvent

__all__ = ["SystemEvent"]
