"""Main CLI entry point for cachecompat.

Defines the CLI group and registers all subcommands.

Commands:
    validate - Check a test input file against the wire contract
    show     - Print a test input file with passwords redacted

Usage:
    cachecompat -h, --help                Show help message
    cachecompat -v, --version             Show version
    cachecompat validate PATH             Validate a test input file
    cachecompat show PATH                 Display a test input file

Subcommand help:
    cachecompat COMMAND -h                Show help for a specific command
"""

import sys

import click

from cachecompat import __version__
from cachecompat.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL
from cachecompat.telemetry import configure_logging

from .commands.inputs import show, validate


class ReorderedGroup(click.Group):
    """Custom group that shows commands before custom help text."""

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Add extra help after commands section."""
        formatter.write(
            """
Examples:
  cachecompat validate input.json                   Check a test input
  cachecompat validate input.json --require-users   Require at least one account
  cachecompat show input.json                       Print it (passwords redacted)

Environment:
  CACHECOMPAT_REQUIRE_USERS   Default for --require-users (1/true/yes/on)
  CACHECOMPAT_STRICT_UPN      Default for --strict-upn (1/true/yes/on)
  CACHECOMPAT_LOG_LEVEL       Default for --log-level
"""
        )


@click.group(
    cls=ReorderedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option(
    "--log-level",
    envvar=ENV_LOG_LEVEL,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for messages on stderr",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, log_level: str) -> None:
    """cachecompat: Test input contract for token cache compatibility runs."""
    if version:
        click.echo(f"cachecompat {__version__}")
        sys.exit(0)
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(validate)
cli.add_command(show)


def main() -> None:
    """CLI entry point."""
    cli()
