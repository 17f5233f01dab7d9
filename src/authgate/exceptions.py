"""Exceptions raised by authgate."""

from __future__ import annotations

__all__ = [
    "AuthgateError",
    "ConfigValidationError",
]


class AuthgateError(Exception):
    """Base class for authgate errors."""


class ConfigValidationError(AuthgateError, ValueError):
    """Provider configuration failed preflight validation.

    Carries every problem found in one pass so operators can fix them
    together.

    Attributes:
        messages: Problem descriptions in the order they were found.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__(self._format(self.messages))

    @staticmethod
    def _format(messages: list[str]) -> str:
        lines = "\n".join(f"  {msg}" for msg in messages)
        return f"invalid configuration:\n{lines}"
