"""Console styles for the treesift CLI.

The palette lives in ``ThemeColors``. A ``[colors]`` table in the user
theme file replaces individual entries; a broken file is reported and
ignored.
"""

import logging
import tomllib
from functools import cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from treesift.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


def _color(default: str) -> Any:
    return Field(default=default, pattern=HEX_COLOR)


class ThemeColors(BaseModel):
    """Palette used by the results table and status messages."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    muted: str = _color("#8a939b")
    accent: str = _color("#5fb3a1")
    border: str = _color("#3a5a73")
    success: str = _color("#2fb36b")
    warning: str = _color("#e0a83a")
    error: str = _color("#e0506a")
    info: str = _color("#3ab4d6")
    directory: str = _color("#4a8fe0")
    file: str = _color("#e8e8e8")


class ThemeFile(BaseModel):
    """Contents of theme.toml. Tables other than ``colors`` are ignored."""

    model_config = ConfigDict(extra="ignore")

    colors: ThemeColors = ThemeColors()


def load_theme(path: Path | None = None) -> ThemeColors:
    """Read the palette from ``path`` (the user theme file by default).

    A missing file gives the default palette, as does an unreadable or
    invalid one, which is logged as a warning.
    """
    path = path or get_user_theme_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return ThemeColors()

    try:
        colors = ThemeFile.model_validate(data).colors
    except ValidationError as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return ThemeColors()
    logger.debug("Loaded theme colors from %s", path)
    return colors


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Map a palette onto the style names used in markup and tables."""
    return Theme(
        {
            "dim": colors.muted,
            "muted": colors.muted,
            "bold_header": f"bold {colors.accent}",
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "entry.dir": f"bold {colors.directory}",
            "entry.file": colors.file,
        }
    )


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, built once per process."""
    return get_rich_theme(load_theme())
