"""Tests for LocalProbe."""

from __future__ import annotations

from pathlib import Path

import pytest

from authgate.validation.probe import EnvironmentProbe, LocalProbe


@pytest.fixture
def probe() -> LocalProbe:
    return LocalProbe()


class TestLocalProbe:
    """Tests for the default filesystem/environment probe."""

    def test_satisfies_protocol(self, probe: LocalProbe):
        """LocalProbe implements EnvironmentProbe."""
        assert isinstance(probe, EnvironmentProbe)

    def test_path_exists_for_file(self, probe: LocalProbe, tmp_path: Path):
        """Given an existing file, path_exists is True."""
        # Arrange
        path = tmp_path / "f"
        path.write_text("x")

        # Act / Assert
        assert probe.path_exists(str(path)) is True

    @pytest.mark.parametrize("path", ["", "/definitely/not/here", "bad\x00path"])
    def test_path_exists_false_without_raising(self, probe: LocalProbe, path: str):
        """Given missing, empty or malformed paths, path_exists is False."""
        assert probe.path_exists(path) is False

    def test_getenv_unset_is_empty(self, probe: LocalProbe, monkeypatch: pytest.MonkeyPatch):
        """Given an unset variable, getenv returns an empty string."""
        # Arrange
        monkeypatch.delenv("AUTHGATE_TEST_VAR", raising=False)

        # Act / Assert
        assert probe.getenv("AUTHGATE_TEST_VAR") == ""

    def test_getenv_returns_value(self, probe: LocalProbe, monkeypatch: pytest.MonkeyPatch):
        """Given a set variable, getenv returns its value."""
        # Arrange
        monkeypatch.setenv("AUTHGATE_TEST_VAR", "/var/run/token")

        # Act / Assert
        assert probe.getenv("AUTHGATE_TEST_VAR") == "/var/run/token"

    def test_can_read_file(self, probe: LocalProbe, tmp_path: Path):
        """Given a regular file, can_read is True."""
        # Arrange
        path = tmp_path / "token"
        path.write_bytes(b"\x00\x01")

        # Act / Assert
        assert probe.can_read(str(path)) is True

    @pytest.mark.parametrize("name", ["missing", ""])
    def test_can_read_false_for_missing(self, probe: LocalProbe, tmp_path: Path, name: str):
        """Given a missing file, can_read is False."""
        path = str(tmp_path / name) if name else ""
        assert probe.can_read(path) is False

    def test_can_read_false_for_directory(self, probe: LocalProbe, tmp_path: Path):
        """Given a directory, can_read is False."""
        assert probe.can_read(str(tmp_path)) is False
