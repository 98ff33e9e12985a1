"""Saved profile management commands.

Provides commands to list, show, save and delete search profiles
stored in profiles.toml.
"""

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from treesift.cli.types import (
    IgnoreDotsOption,
    IgnoreVcsOption,
    MaxDepthOption,
    MaxSizeOption,
    MinDepthOption,
    MinSizeOption,
    NameOption,
    NotNameOption,
    NotPathOption,
    NotRegexOption,
    PathOption,
    RegexOption,
    RootsArgument,
    TypeOption,
    profile_from_options,
)
from treesift.profiles import (
    ProfileError,
    build_finder,
    delete_profile,
    get_profile,
    load_profiles,
    save_profile,
)
from treesift.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Manage saved search profiles.",
    no_args_is_help=True,
)

NameArgument = Annotated[str, typer.Argument(help="Profile name.")]


@app.command("list")
def list_profiles() -> None:
    """List saved profiles."""
    try:
        profiles = load_profiles().profiles
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if not profiles:
        print_info("No saved profiles.")
        return

    table = Table(title="Saved Profiles", header_style="bold_header", border_style="border")
    table.add_column("Name", style="bold")
    table.add_column("Roots")
    table.add_column("Filters", style="dim")
    for name, profile in sorted(profiles.items()):
        filters = build_finder(profile).describe()
        table.add_row(
            escape(name),
            escape(", ".join(profile.roots) or "."),
            escape("; ".join(filters) or "-"),
        )
    console.print(table)


@app.command("show")
def show_profile(name: NameArgument) -> None:
    """Show a saved profile as JSON."""
    try:
        profile = get_profile(name)
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    console.print_json(profile.model_dump_json(exclude_defaults=True))


@app.command("save")
def save(
    name: NameArgument,
    roots: RootsArgument = None,
    names: NameOption = None,
    not_names: NotNameOption = None,
    regexes: RegexOption = None,
    not_regexes: NotRegexOption = None,
    paths: PathOption = None,
    not_paths: NotPathOption = None,
    entry_type: TypeOption = None,
    min_depth: MinDepthOption = None,
    max_depth: MaxDepthOption = None,
    min_size: MinSizeOption = None,
    max_size: MaxSizeOption = None,
    ignore_vcs: IgnoreVcsOption = None,
    ignore_dots: IgnoreDotsOption = None,
) -> None:
    """Save filters as a named profile (replacing any existing one)."""
    try:
        profile = profile_from_options(
            roots=roots,
            names=names,
            not_names=not_names,
            regexes=regexes,
            not_regexes=not_regexes,
            paths=paths,
            not_paths=not_paths,
            entry_type=entry_type,
            min_depth=min_depth,
            max_depth=max_depth,
            min_size=min_size,
            max_size=max_size,
            ignore_vcs=ignore_vcs,
            ignore_dots=ignore_dots,
        )
    except ValidationError as e:
        print_error(f"Invalid filter options: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    # Refuse to store patterns that would only fail later
    setup_errors = build_finder(profile).setup_errors
    if setup_errors:
        for error in setup_errors:
            print_error(escape(str(error)))
        raise typer.Exit(code=1)

    try:
        if name in load_profiles().profiles:
            print_warning(f"Replacing existing profile '{escape(name)}'")
        path = save_profile(name, profile)
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    print_success(f"Saved profile '{escape(name)}' to {escape(str(path))}")


@app.command("delete")
def delete(name: NameArgument) -> None:
    """Delete a saved profile."""
    try:
        delete_profile(name)
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    print_success(f"Deleted profile '{escape(name)}'")
