"""Find command implementation.

Searches one or more directories and prints the matching entries.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

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
from treesift.finder import Candidate, FinderError, SortKey
from treesift.profiles import ProfileError, SearchProfile, build_finder, get_profile
from treesift.utils.formatting import (
    console,
    create_results_table,
    format_candidate_row,
    format_size,
    print_error,
    print_info,
    print_success,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


def find_entries(
    ctx: typer.Context,
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
    profile_name: Annotated[
        str | None,
        typer.Option("--profile", "-p", help="Start from a saved profile."),
    ] = None,
    sort: Annotated[
        SortKey | None,
        typer.Option(
            "--sort",
            "-s",
            help="Sort results instead of traversal order.",
            case_sensitive=False,
        ),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="Reverse the sort order."),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of results shown."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Find files and directories matching the given filters."""
    obj = ctx.obj or {}
    verbose = bool(obj.get("verbose"))
    quiet = bool(obj.get("quiet"))

    base = _load_base_profile(profile_name)
    try:
        overrides = profile_from_options(
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
        profile = base.extend(overrides)
    except ValidationError as e:
        print_error(f"Invalid filter options: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    finder = build_finder(profile)
    if verbose:
        print_info(f"Searching {escape(', '.join(finder.roots))}")
        for line in finder.describe():
            print_info(f"  {escape(line)}")

    result = finder.find()
    items = result.items
    if sort is not None:
        items.sort_by(sort, reverse=reverse)
    shown = items[:limit] if limit else list(items)

    if output_format == OutputFormat.JSON:
        _print_json(shown)
    elif output_format == OutputFormat.PLAIN:
        for candidate in shown:
            typer.echo(candidate.path)
    elif shown:
        table = create_results_table()
        for candidate in shown:
            table.add_row(*format_candidate_row(candidate))
        console.print(table)

    if output_format == OutputFormat.TABLE and not quiet:
        _print_summary(len(items), len(shown), items.total_size())

    if not result.ok:
        _print_errors(result.errors)
        raise typer.Exit(code=1)


def _load_base_profile(profile_name: str | None) -> SearchProfile:
    if profile_name is None:
        return SearchProfile()
    try:
        return get_profile(profile_name)
    except ProfileError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _print_summary(total: int, shown: int, total_size: int) -> None:
    if total == 0:
        print_info("No matching entries found.")
        return
    print_success(f"Found {total} entries ({format_size(total_size)} total)")
    if shown < total:
        console.print(f"[dim](showing {shown} of {total})[/dim]")


def _print_json(candidates: list[Candidate]) -> None:
    data = [
        {
            "path": c.path,
            "rel_path": c.rel_path,
            "name": c.name,
            "type": "dir" if c.is_dir else "file",
            "size": c.size,
            "depth": c.depth,
            "modified": c.mtime.isoformat(),
        }
        for c in candidates
    ]
    console.print_json(json.dumps(data))


def _print_errors(errors: list[FinderError]) -> None:
    for error in errors:
        print_error(escape(str(error)))
