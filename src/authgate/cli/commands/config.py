"""Config commands for authgate CLI."""

import json
import sys
from pathlib import Path

import click

from authgate.config import GatewayConfig
from authgate.constants import DEFAULT_CONFIG_PATH

from ._options import config_option


@click.group()
def config() -> None:
    """Configuration commands."""


@config.command()
def path() -> None:
    """Show the default config file path."""
    click.echo(DEFAULT_CONFIG_PATH)


@config.command()
@config_option
def show(config_path: Path) -> None:
    """Display the loaded configuration as JSON.

    Secrets are masked.
    """
    try:
        loaded_config = GatewayConfig.load_from_files(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    data = loaded_config.model_dump()
    for provider in data["providers"]:
        if provider.get("client_secret"):
            provider["client_secret"] = "********"

    click.echo(json.dumps(data, indent=2))
