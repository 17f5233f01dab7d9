"""Options shared by several commands."""

from pathlib import Path

import click

from authgate.constants import DEFAULT_CONFIG_PATH

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the gateway config file",
)
