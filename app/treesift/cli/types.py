"""Shared option types and helpers for CLI commands.

The filter options are declared once here so that ``find`` and
``profile save`` accept exactly the same flags.
"""

from pathlib import Path
from typing import Annotated

import typer

from treesift.finder.models import EntryType
from treesift.profiles.models import SearchProfile

RootsArgument = Annotated[
    list[Path] | None,
    typer.Argument(help="Directories to search.", show_default=False),
]
NameOption = Annotated[
    list[str] | None,
    typer.Option("--name", "-n", help="Glob the base name must match (repeatable)."),
]
NotNameOption = Annotated[
    list[str] | None,
    typer.Option("--not-name", "-N", help="Glob the base name must not match (repeatable)."),
]
RegexOption = Annotated[
    list[str] | None,
    typer.Option("--regex", "-r", help="Regex searched in the base name (repeatable)."),
]
NotRegexOption = Annotated[
    list[str] | None,
    typer.Option("--not-regex", "-R", help="Regex excluding base names (repeatable)."),
]
PathOption = Annotated[
    list[str] | None,
    typer.Option("--path", help="Only search beneath directories matching this glob."),
]
NotPathOption = Annotated[
    list[str] | None,
    typer.Option("--not-path", help="Skip directories matching this glob."),
]
TypeOption = Annotated[
    EntryType | None,
    typer.Option(
        "--type",
        "-t",
        help="Entry kinds to return (default: all).",
        case_sensitive=False,
        show_default=False,
    ),
]
MinDepthOption = Annotated[
    int | None,
    typer.Option("--min-depth", min=0, help="Minimum depth (1 = direct children)."),
]
MaxDepthOption = Annotated[
    int | None,
    typer.Option("--max-depth", min=0, help="Maximum depth; deeper directories are not entered."),
]
MinSizeOption = Annotated[
    int | None,
    typer.Option("--min-size", min=0, help="Minimum size in bytes."),
]
MaxSizeOption = Annotated[
    int | None,
    typer.Option("--max-size", min=0, help="Maximum size in bytes."),
]
IgnoreVcsOption = Annotated[
    bool | None,
    typer.Option(
        "--ignore-vcs/--include-vcs",
        help=(
            "Skip .git, .hg, .svn, CVS and similar directories. With --type files the"
            " directories are only rejected, so the files inside them are still listed."
        ),
        show_default=False,
    ),
]
IgnoreDotsOption = Annotated[
    bool | None,
    typer.Option(
        "--ignore-dots/--include-dots",
        help="Skip entries whose name starts with a dot.",
        show_default=False,
    ),
]


def profile_from_options(
    *,
    roots: list[Path] | None = None,
    names: list[str] | None = None,
    not_names: list[str] | None = None,
    regexes: list[str] | None = None,
    not_regexes: list[str] | None = None,
    paths: list[str] | None = None,
    not_paths: list[str] | None = None,
    entry_type: EntryType | None = None,
    min_depth: int | None = None,
    max_depth: int | None = None,
    min_size: int | None = None,
    max_size: int | None = None,
    ignore_vcs: bool | None = None,
    ignore_dots: bool | None = None,
) -> SearchProfile:
    """Build a SearchProfile from parsed command-line options.

    Options the user did not give stay unset on the profile, so that
    SearchProfile.extend only overrides what was given on the command line.

    Raises:
        pydantic.ValidationError: If a range is inverted.
    """
    given = {
        "roots": [str(r) for r in roots] if roots else None,
        "names": list(names or []),
        "not_names": list(not_names or []),
        "name_regexes": list(regexes or []),
        "not_name_regexes": list(not_regexes or []),
        "paths": list(paths or []),
        "not_paths": list(not_paths or []),
        "entry_type": entry_type,
        "min_depth": min_depth,
        "max_depth": max_depth,
        "min_size": min_size,
        "max_size": max_size,
        "ignore_vcs": ignore_vcs,
        "ignore_dots": ignore_dots,
    }
    return SearchProfile(**{key: value for key, value in given.items() if value not in (None, [])})
