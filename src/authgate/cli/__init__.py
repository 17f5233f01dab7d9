"""Command-line interface for authgate.

Provides commands for validating provider configuration and inspecting
the config file.
"""

from .main import cli, main

__all__ = ["cli", "main"]
