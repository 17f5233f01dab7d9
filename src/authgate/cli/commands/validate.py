"""Validate command for authgate CLI.

Checks identity provider configuration and lists every problem found.
Intended to run before the gateway starts (e.g. in an init container or
a deploy pipeline).
"""

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from authgate.config import GatewayConfig
from authgate.exceptions import ConfigValidationError
from authgate.telemetry.models.system import SystemEvent
from authgate.telemetry.system_logger import configure_system_logging, get_system_logger
from authgate.validation import validate_config

from ._options import config_option

# Exit code when the config file itself can't be loaded
EXIT_CONFIG_UNREADABLE = 2


def _exit_unreadable(
    error: Exception,
    event: str,
    config_path: Path,
    json_output: bool,
    verbose: bool,
) -> NoReturn:
    """Report a config or log setup failure and exit with EXIT_CONFIG_UNREADABLE."""
    # Logging settings live in the config we failed to use
    configure_system_logging("INFO", console=verbose)
    get_system_logger().error(
        SystemEvent(
            event=event,
            component="cli",
            config_path=str(config_path),
            error_type=type(error).__name__,
            error_message=str(error),
        ).model_dump(exclude_none=True)
    )
    if json_output:
        click.echo(json.dumps({"valid": False, "problems": [], "error": str(error)}, indent=2))
    else:
        click.echo(f"Error: {error}", err=True)
    sys.exit(EXIT_CONFIG_UNREADABLE)


@click.command()
@config_option
@click.option("--json", "json_output", is_flag=True, help="Print result as JSON on stdout")
@click.option("--verbose", is_flag=True, help="Stream validation events (JSONL) to stderr")
def validate(config_path: Path, json_output: bool, verbose: bool) -> None:
    """Validate identity provider configuration.

    Exits 0 if valid, 1 if problems were found, 2 if the config file
    could not be loaded or its log directory could not be used.
    """
    try:
        loaded_config = GatewayConfig.load_from_files(config_path)
    except (FileNotFoundError, ValueError) as e:
        _exit_unreadable(e, "config_load_failed", config_path, json_output, verbose)

    try:
        configure_system_logging(
            "DEBUG" if verbose else loaded_config.logging.log_level,
            log_dir=loaded_config.logging.log_dir,
            console=verbose,
        )
    except OSError as e:
        log_dir_error = OSError(f"Cannot use log_dir {loaded_config.logging.log_dir}: {e}")
        _exit_unreadable(log_dir_error, "log_setup_failed", config_path, json_output, verbose)

    problems: list[str] = []
    try:
        validate_config(loaded_config)
    except ConfigValidationError as e:
        problems = e.messages

    if json_output:
        click.echo(json.dumps({"valid": not problems, "problems": problems}, indent=2))
    elif problems:
        click.echo(f"Invalid configuration ({len(problems)} problem(s)):", err=True)
        for problem in problems:
            click.echo(f"  - {problem}", err=True)
    else:
        count = len(loaded_config.providers)
        click.echo(f"Configuration valid: {count} provider(s)", err=True)

    if problems:
        sys.exit(1)
