"""File and directory search engine.

This module provides the fluent Finder, the predicate engine that
decides whether each visited entry is accepted, rejected or pruned, and
the walk primitive the finder drives.
"""

from treesift.finder.engine import PredicateEngine
from treesift.finder.errors import FinderError, SetupError, TraversalError, format_errors
from treesift.finder.finder import Finder, SearchResult
from treesift.finder.models import (
    Candidate,
    CandidateList,
    EntryType,
    SortKey,
    Verdict,
    by_extension,
    by_modified,
    by_name,
    by_path,
    by_size,
)
from treesift.finder.patterns import PatternError, compile_glob, compile_regex
from treesift.finder.predicates import VCS_DIR_NAMES, Category, Predicate
from treesift.finder.walker import WalkDecision, WalkEntry, iter_walk

__all__ = [
    "VCS_DIR_NAMES",
    "Candidate",
    "CandidateList",
    "Category",
    "EntryType",
    "Finder",
    "FinderError",
    "PatternError",
    "Predicate",
    "PredicateEngine",
    "SearchResult",
    "SetupError",
    "SortKey",
    "TraversalError",
    "Verdict",
    "WalkDecision",
    "WalkEntry",
    "by_extension",
    "by_modified",
    "by_name",
    "by_path",
    "by_size",
    "compile_glob",
    "compile_regex",
    "format_errors",
    "iter_walk",
]
