"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from treesift.core.theme import get_theme

if TYPE_CHECKING:
    from treesift.finder.models import Candidate


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_results_table(title: str = "Matching Entries") -> Table:
    """Create a pre-configured table for displaying search results.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for candidate display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Type", style="muted", width=5)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")
    return table


def format_candidate_row(candidate: Candidate) -> tuple[str, str, str, str]:
    """Format a candidate as a table row with markup.

    Directories are highlighted and have no size shown.

    Returns:
        Tuple of (path, type, size, modified) with Rich markup.
    """
    path = escape(candidate.path)
    if candidate.is_dir:
        return (
            f"[entry.dir]{path}[/]",
            "dir",
            "-",
            candidate.mtime.strftime("%Y-%m-%d %H:%M"),
        )
    return (
        f"[entry.file]{path}[/]",
        "file",
        format_size(candidate.size),
        candidate.mtime.strftime("%Y-%m-%d %H:%M"),
    )


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
