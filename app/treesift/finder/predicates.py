"""Predicates evaluated by the finder engine.

A predicate is a pure function from Candidate to bool, tagged with the
category that decides how the engine combines it with its siblings.
Factories in this module compile patterns eagerly and raise
PatternError for malformed input; the Finder turns those into setup
errors.
"""

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from treesift.finder.models import Candidate
from treesift.finder.patterns import compile_glob, compile_regex

# Directory names used by common version control systems.
VCS_DIR_NAMES: frozenset[str] = frozenset(
    {
        ".svn",
        "_svn",
        "CVS",
        "_darcs",
        ".arch-params",
        ".monotone",
        ".bzr",
        ".git",
        ".hg",
    }
)


class Category(str, Enum):
    """Predicate categories, combined as described in PredicateEngine."""

    NAME_INCLUDE = "name_include"
    NAME_EXCLUDE = "name_exclude"
    PATH_INCLUDE = "path_include"
    PATH_EXCLUDE = "path_exclude"
    SIZE = "size"
    DEPTH = "depth"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Predicate:
    """A categorised test against a candidate.

    Attributes:
        category: Category the predicate belongs to.
        test: Function deciding whether a candidate satisfies the predicate.
        description: Human-readable summary, e.g. ``name "*.log"``.
    """

    category: Category
    test: Callable[[Candidate], bool]
    description: str

    def __call__(self, candidate: Candidate) -> bool:
        return self.test(candidate)


def name_glob(pattern: str, *, exclude: bool = False) -> Predicate:
    """Match the base name against a glob."""
    glob = compile_glob(pattern)

    def test(c: Candidate) -> bool:
        return glob.matches(c.name)

    return _tagged(
        Category.NAME_EXCLUDE if exclude else Category.NAME_INCLUDE,
        test,
        f'{"not-name" if exclude else "name"} "{pattern}"',
    )


def name_regex(pattern: str, *, exclude: bool = False) -> Predicate:
    """Search the base name with a regular expression."""
    regex = compile_regex(pattern)

    def test(c: Candidate) -> bool:
        return regex.matches(c.name)

    return _tagged(
        Category.NAME_EXCLUDE if exclude else Category.NAME_INCLUDE,
        test,
        f'{"not-name-regex" if exclude else "name-regex"} "{pattern}"',
    )


def path_glob(pattern: str, *, exclude: bool = False) -> Predicate:
    """Match a relative directory path against a glob.

    Directories are tested with their own relative path, files with the
    relative path of their containing directory. Include predicates also
    accept any ancestor of that path, so everything beneath a matching
    directory counts as being under it.
    """
    glob = compile_glob(pattern)

    if exclude:

        def test(c: Candidate) -> bool:
            return glob.matches(c.rel_path if c.is_dir else c.parent_rel_path)

        return _tagged(Category.PATH_EXCLUDE, test, f'not-path "{pattern}"')

    def test_include(c: Candidate) -> bool:
        start = c.rel_path if c.is_dir else c.parent_rel_path
        return any(glob.matches(p) for p in _self_and_ancestors(start))

    return _tagged(Category.PATH_INCLUDE, test_include, f'path "{pattern}"')


def size_range(min_size: int, max_size: int) -> Predicate:
    """Match sizes in ``[min_size, max_size]``; ``max_size < min_size`` means unbounded."""

    def test(c: Candidate) -> bool:
        return _in_range(c.size, min_size, max_size)

    return _tagged(Category.SIZE, test, f"size {_range_text(min_size, max_size)}")


def depth_range(min_depth: int, max_depth: int) -> Predicate:
    """Match depths in ``[min_depth, max_depth]``; ``max_depth < min_depth`` means unbounded."""

    def test(c: Candidate) -> bool:
        return _in_range(c.depth, min_depth, max_depth)

    return _tagged(Category.DEPTH, test, f"depth {_range_text(min_depth, max_depth)}")


def custom(test: Callable[[Candidate], bool], description: str | None = None) -> Predicate:
    """Wrap a caller-supplied function."""
    name = getattr(test, "__name__", "filter")
    return _tagged(Category.CUSTOM, test, description or f"filter {name}")


def vcs_dirs() -> Predicate:
    """Exclusion matching version control directories by name."""

    def test(c: Candidate) -> bool:
        return c.is_dir and c.name in VCS_DIR_NAMES

    return _tagged(Category.PATH_EXCLUDE, test, "ignore-vcs")


def dot_entries() -> Predicate:
    """Exclusion matching any entry whose name starts with a dot."""

    def test(c: Candidate) -> bool:
        return c.name.startswith(".")

    return _tagged(Category.PATH_EXCLUDE, test, "ignore-dots")


def _tagged(category: Category, test: Callable[[Candidate], bool], description: str) -> Predicate:
    return Predicate(category=category, test=test, description=description)


def _in_range(value: int, low: int, high: int) -> bool:
    return value >= low and (high < low or value <= high)


def _range_text(low: int, high: int) -> str:
    if high < low:
        return f">= {low}"
    return f"{low}..{high}"


def _self_and_ancestors(rel_path: str) -> Iterator[str]:
    yield rel_path
    while os.sep in rel_path:
        rel_path = os.path.dirname(rel_path)
        yield rel_path
