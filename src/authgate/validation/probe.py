"""Read-only filesystem and environment probe.

Validation rules never touch os/pathlib directly; they ask a probe. Tests
can pass a stub probe, and the default LocalProbe never raises: every
I/O failure is reported as False / "".
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable

__all__ = [
    "EnvironmentProbe",
    "LocalProbe",
]


@runtime_checkable
class EnvironmentProbe(Protocol):
    """Read-only view of the host filesystem and environment."""

    def path_exists(self, path: str) -> bool:
        """Return True if something exists at path (stat succeeds)."""
        ...

    def getenv(self, name: str) -> str:
        """Return the environment variable's value, or "" when unset."""
        ...

    def can_read(self, path: str) -> bool:
        """Return True if the file at path can be opened and read."""
        ...


class LocalProbe:
    """Probe backed by the local process environment and filesystem."""

    def path_exists(self, path: str) -> bool:
        if not path:
            return False
        try:
            os.stat(path)
        except (OSError, ValueError):
            # ValueError: embedded null byte
            return False
        return True

    def getenv(self, name: str) -> str:
        return os.environ.get(name, "")

    def can_read(self, path: str) -> bool:
        if not path:
            return False
        try:
            Path(path).read_bytes()
        except (OSError, ValueError):
            return False
        return True
