"""System log event model (system.jsonl)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SystemEvent(BaseModel):
    """One system log entry.

    Inspired by OCSF Application Error (6008): error_type, error_message.
    Validation problems are logged as WARNING events, one per problem.
    """

    # --- core ---
    time: str | None = Field(
        None,
        description="ISO 8601 timestamp, added by formatter during serialization",
    )
    level: str | None = None  # filled from the log record when omitted
    event: str  # machine-friendly event name
    message: str | None = None  # human-readable description

    # --- context ---
    component: str | None = None  # "validation", "cli"
    provider_id: str | None = None
    provider_type: str | None = None
    config_path: str | None = None

    # --- error details ---
    error_type: str | None = None
    error_message: str | None = None

    details: dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow")
