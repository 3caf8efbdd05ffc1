"""Test input commands for cachecompat CLI.

Loads a test input file the way a harness does at start-up.
"""

import json
import sys
from pathlib import Path

import click

from cachecompat.config import LoaderOptions
from cachecompat.exceptions import InputFileError, TestInputError
from cachecompat.loader import load_file
from cachecompat.models import TestInputDescriptor
from cachecompat.telemetry import redact_descriptor


def _resolve_options(require_users: bool | None, strict_upn: bool | None) -> LoaderOptions:
    """Environment defaults, overridden by any flag given on the command line."""
    options = LoaderOptions.from_env()
    overrides = {
        name: value
        for name, value in (("require_users", require_users), ("strict_upn", strict_upn))
        if value is not None
    }
    return options.model_copy(update=overrides) if overrides else options


def _load_or_exit(path: Path, options: LoaderOptions) -> TestInputDescriptor:
    try:
        return load_file(path, options)
    except (InputFileError, TestInputError) as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


_input_path = click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
_require_users = click.option(
    "--require-users/--allow-no-users",
    default=None,
    help="Reject input without accounts (default: allow, or CACHECOMPAT_REQUIRE_USERS)",
)
_strict_upn = click.option(
    "--strict-upn/--lenient-upn",
    default=None,
    help="Reject UPNs not shaped local-part@domain (default: warn, or CACHECOMPAT_STRICT_UPN)",
)


@click.command("validate")
@_input_path
@_require_users
@_strict_upn
def validate(path: Path, require_users: bool | None, strict_upn: bool | None) -> None:
    """Validate a test input file.

    Checks the file for:
    - Valid JSON syntax
    - Required fields present and non-empty
    - Field types (strings, LabUserDatas array, Authority URL)

    Exit codes:
        0: Test input is valid
        1: Test input is invalid or unreadable
    """
    descriptor = _load_or_exit(path, _resolve_options(require_users, strict_upn))
    account_count = len(descriptor.users)
    click.echo(f"✓ Test input valid: {path}")
    click.echo(f"  Scope: {descriptor.scope}")
    click.echo(f"  Cache file: {descriptor.cache_file_path}")
    click.echo(f"  Results file: {descriptor.results_file_path}")
    click.echo(f"  {account_count} account{'s' if account_count != 1 else ''} defined")


@click.command("show")
@_input_path
@_require_users
@_strict_upn
def show(path: Path, require_users: bool | None, strict_upn: bool | None) -> None:
    """Display a test input file with passwords redacted.

    Output uses the same keys as the input file.
    """
    descriptor = _load_or_exit(path, _resolve_options(require_users, strict_upn))
    click.echo(json.dumps(redact_descriptor(descriptor), indent=2))
