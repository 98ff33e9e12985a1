"""Finder domain models.

This module defines the candidate representation of a visited
filesystem entry, the verdicts the predicate engine can reach, and the
ordered result list returned by a search.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Verdict(str, Enum):
    """Decision of the predicate engine for one candidate.

    Attributes:
        ACCEPT: The candidate is part of the result.
        REJECT: The candidate is not part of the result; descent continues.
        PRUNE: Nothing at or beneath this candidate can match.
    """

    ACCEPT = "accept"
    REJECT = "reject"
    PRUNE = "prune"


class EntryType(str, Enum):
    """Which kinds of entries a search returns."""

    ALL = "all"
    FILES = "files"
    DIRS = "dirs"


@dataclass(frozen=True, slots=True)
class Candidate:
    """A filesystem entry visited during a search.

    Attributes:
        name: Base name of the entry.
        rel_path: Path relative to the search root.
        root: Search root the entry was found under.
        is_dir: True for directories.
        size: Size in bytes as reported by lstat.
        mtime: Last modification time (UTC).
    """

    name: str
    rel_path: str
    root: str
    is_dir: bool
    size: int
    mtime: datetime

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.rel_path:
            msg = "Relative path cannot be empty"
            raise ValueError(msg)

    @property
    def path(self) -> str:
        """Root joined with the relative path."""
        return os.path.join(self.root, self.rel_path)

    @property
    def depth(self) -> int:
        """Depth below the root; direct children of the root are at depth 1."""
        return self.rel_path.count(os.sep) + 1

    @property
    def parent_rel_path(self) -> str:
        """Relative path of the containing directory ("." at the root)."""
        return os.path.dirname(self.rel_path) or "."

    @property
    def extension(self) -> str:
        """Suffix of the name including the dot, or an empty string."""
        return os.path.splitext(self.name)[1]

    def __str__(self) -> str:
        return self.path


def by_name(candidate: Candidate) -> str:
    return candidate.name


def by_path(candidate: Candidate) -> str:
    return candidate.path


def by_size(candidate: Candidate) -> int:
    return candidate.size


def by_modified(candidate: Candidate) -> datetime:
    return candidate.mtime


def by_extension(candidate: Candidate) -> str:
    return candidate.extension


class SortKey(str, Enum):
    """Sort orders available for a CandidateList."""

    NAME = "name"
    PATH = "path"
    SIZE = "size"
    MODIFIED = "modified"
    EXTENSION = "extension"


_SORT_KEYS: dict[SortKey, Callable[[Candidate], Any]] = {
    SortKey.NAME: by_name,
    SortKey.PATH: by_path,
    SortKey.SIZE: by_size,
    SortKey.MODIFIED: by_modified,
    SortKey.EXTENSION: by_extension,
}


class CandidateList(list[Candidate]):
    """Ordered list of accepted candidates."""

    def total_size(self) -> int:
        """Sum of the sizes of all non-directory entries."""
        return sum(c.size for c in self if not c.is_dir)

    def paths(self) -> list[str]:
        """Joined paths of all entries, in list order."""
        return [c.path for c in self]

    def sort_by(self, key: SortKey, *, reverse: bool = False) -> None:
        """Sort in place using one of the predefined sort keys.

        The sort is stable, so entries that compare equal keep their
        traversal order.
        """
        self.sort(key=_SORT_KEYS[key], reverse=reverse)
