"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from treesift import __version__
from treesift.cli.commands import find, profile
from treesift.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="treesift",
    help="Find files and directories with composable filters.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treesift version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Without --verbose only errors are logged; problems the user needs to
    see are printed by the commands themselves.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """treesift - find files and directories with composable filters.

    Combine name, path, size, depth and type filters; directories that
    can never contain a match are not entered at all.
    """
    _configure_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command("find")(find.find_entries)
app.add_typer(profile.app, name="profile")


if __name__ == "__main__":
    app()
