"""Loading and saving search profiles.

Profiles live in a single TOML file (by default
~/.config/treesift/profiles.toml) with one table per profile::

    [profiles.logs]
    roots = ["/var/log"]
    names = ["*.log"]
    entry_type = "files"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from treesift.core.paths import get_profiles_path
from treesift.profiles.models import ProfileFile, SearchProfile

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Base exception for profile storage errors."""


class ProfileNotFoundError(ProfileError):
    """Raised when a named profile does not exist."""


class ProfileParseError(ProfileError):
    """Raised when the profiles file cannot be parsed."""


def load_profiles(path: Path | None = None) -> ProfileFile:
    """Load all profiles from a TOML file.

    A missing file is treated as an empty set of profiles.

    Args:
        path: Path to the profiles file. If None, uses the default path.

    Returns:
        Validated ProfileFile.

    Raises:
        ProfileParseError: If the TOML syntax is invalid.
        ProfileError: If the file cannot be read or does not match the schema.
    """
    profiles_path = path or get_profiles_path()

    if not profiles_path.exists():
        logger.debug("No profiles file at %s", profiles_path)
        return ProfileFile()

    try:
        with open(profiles_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ProfileParseError(f"Invalid TOML syntax in {profiles_path}: {e}") from e
    except OSError as e:
        raise ProfileError(f"Failed to read profiles: {e}") from e

    try:
        return ProfileFile.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ProfileError(f"Invalid profiles content in {profiles_path}: {e}") from e


def get_profile(name: str, path: Path | None = None) -> SearchProfile:
    """Load a single profile by name.

    Raises:
        ProfileNotFoundError: If no profile with that name exists.
        ProfileError: If the profiles file cannot be loaded.
    """
    profiles = load_profiles(path).profiles
    if name not in profiles:
        raise ProfileNotFoundError(f"Profile not found: {name}")
    return profiles[name]


def save_profile(name: str, profile: SearchProfile, path: Path | None = None) -> Path:
    """Add or replace a profile and write the file atomically.

    Args:
        name: Profile name.
        profile: Profile to store.
        path: Path to the profiles file. If None, uses the default path.

    Returns:
        Path where the profiles were saved.

    Raises:
        ProfileError: If the file cannot be loaded or written.
    """
    profiles_path = path or get_profiles_path()
    current = load_profiles(profiles_path)
    current.profiles[name] = profile
    _write(current, profiles_path)
    logger.debug("Saved profile %r to %s", name, profiles_path)
    return profiles_path


def delete_profile(name: str, path: Path | None = None) -> Path:
    """Remove a profile and write the file atomically.

    Raises:
        ProfileNotFoundError: If no profile with that name exists.
        ProfileError: If the file cannot be loaded or written.
    """
    profiles_path = path or get_profiles_path()
    current = load_profiles(profiles_path)
    if name not in current.profiles:
        raise ProfileNotFoundError(f"Profile not found: {name}")
    del current.profiles[name]
    _write(current, profiles_path)
    return profiles_path


def _write(profiles: ProfileFile, profiles_path: Path) -> None:
    """Serialize profiles to TOML via a temporary file and os.replace()."""
    data = {
        "profiles": {
            name: profile.model_dump(mode="json", exclude_defaults=True)
            for name, profile in profiles.profiles.items()
        }
    }

    tmp_path: Path | None = None
    try:
        profiles_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=profiles_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(profiles_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ProfileError(f"Failed to write profiles: {e}") from e
