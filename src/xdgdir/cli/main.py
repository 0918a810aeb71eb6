import contextlib
import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from xdgdir.cli.shared_flags import output_options
from xdgdir.core.domain.entities import BaseDir
from xdgdir.core.services.error_codes import ErrorCode, XdgdirError
from xdgdir.core.services.exit_codes import exit_code_for_error
from xdgdir.core.services.observability import emit, get_current_run_id, log_resolution
from xdgdir.core.services.resolver import resolve_for_app, resolve_global


@contextlib.contextmanager
def command_output_handler():
    """Report failures on stderr and exit with the mapped status."""
    try:
        yield
    except XdgdirError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(exit_code_for_error(e.code))
    except Exception as e:
        click.echo("Error: An unexpected internal error occurred.", err=True)
        # Always log the real error to stderr for operators
        click.echo(f"INTERNAL ERROR: {e}", err=True)
        raise SystemExit(exit_code_for_error(ErrorCode.UNKNOWN_ERROR))


def render_text(dirs: BaseDir) -> None:
    for key, value in dirs.to_dict().items():
        if value is not None:
            click.echo(f"{key}={value}")


def render_json(dirs: BaseDir) -> None:
    click.echo(json.dumps(dirs.to_dict(), separators=(",", ":")))


def render_table(dirs: BaseDir, no_color: bool) -> None:
    table = Table(title="XDG base directories")
    table.add_column("Directory", style="cyan", no_wrap=True)
    table.add_column("Path", overflow="fold")
    for key, value in dirs.to_dict().items():
        table.add_row(key, Text(value) if value is not None else Text("(not set)", style="dim"))
    Console(no_color=no_color, soft_wrap=False).print(table)


@click.command()
@click.version_option(package_name="xdgdir", prog_name="xdgdir")
@click.argument("app_name", required=False)
@click.option(
    "--global",
    "global_dirs",
    is_flag=True,
    default=False,
    help="Print the base directories without appending APP_NAME.",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable ANSI colors in table output.")
@output_options()
def cli(app_name: Optional[str], global_dirs: bool, no_color: bool, format: str, verbose: bool):
    """Print the XDG base directories for APP_NAME as key=value lines.

    Reads HOME and the XDG_* variables from the environment. Nothing is
    created on disk.
    """
    if app_name is None and not global_dirs:
        raise click.UsageError("Missing argument 'APP_NAME'.")

    run_id = get_current_run_id()
    with command_output_handler():
        with log_resolution(None if global_dirs else app_name, run_id=run_id):
            dirs = resolve_global() if global_dirs else resolve_for_app(app_name)
        emit("resolved_dirs", level="debug", run_id=run_id, **dirs.to_dict())

    if format == "json":
        render_json(dirs)
    elif format == "table":
        render_table(dirs, no_color)
    else:
        render_text(dirs)


if __name__ == "__main__":
    cli()
