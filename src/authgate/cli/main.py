"""Main CLI entry point for authgate.

Defines the CLI group and registers all subcommands.

Commands:
    validate  - Check identity provider configuration before startup
    config    - Configuration commands
        show - Display current configuration
        path - Show config file path

Usage:
    authgate -h, --help          Show help message
    authgate -v, --version       Show version
    authgate validate            Validate the default config file
    authgate validate --json     Machine-readable result on stdout
    authgate config show         Display configuration
    authgate config path         Show config file path
"""

import sys

import click

from authgate import __version__

from .commands.config import config
from .commands.validate import validate


class ReorderedGroup(click.Group):
    """Custom group that shows commands before custom help text."""

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Add extra help after commands section."""
        formatter.write(
            """
Exit Codes (validate):
  0   Configuration valid
  1   Configuration has problems (all are listed)
  2   Configuration file missing or unreadable
"""
        )


@click.group(
    cls=ReorderedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """authgate: identity provider preflight for authentication gateways."""
    if version:
        click.echo(f"authgate {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(validate)
cli.add_command(config)


def main() -> None:
    """CLI entry point."""
    cli()
