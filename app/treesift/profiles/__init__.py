"""Saved search profiles.

This module provides the profile models, TOML storage and the builder
that turns a profile into a configured Finder.
"""

from treesift.profiles.builder import build_finder
from treesift.profiles.models import ProfileFile, SearchProfile
from treesift.profiles.store import (
    ProfileError,
    ProfileNotFoundError,
    ProfileParseError,
    delete_profile,
    get_profile,
    load_profiles,
    save_profile,
)

__all__ = [
    "ProfileError",
    "ProfileFile",
    "ProfileNotFoundError",
    "ProfileParseError",
    "SearchProfile",
    "build_finder",
    "delete_profile",
    "get_profile",
    "load_profiles",
    "save_profile",
]
