"""Fluent finder: assembles predicates and drives the walk.

A Finder is configured through chained calls and can then be run any
number of times. Each run builds a fresh PredicateEngine snapshot, walks
every root in the order given, and maps the engine's verdict for each
entry onto the walk's decision:

- ACCEPT: report the candidate, keep walking
- REJECT: keep walking
- PRUNE: skip the entry's subtree

Example:
    >>> result = Finder().in_("src").files().name("*.py").not_path("build").find()
    >>> result.ok
    True
"""

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Self

from treesift.finder import predicates
from treesift.finder.engine import PredicateEngine
from treesift.finder.errors import FinderError, SetupError, TraversalError
from treesift.finder.models import Candidate, CandidateList, EntryType, Verdict
from treesift.finder.patterns import PatternError
from treesift.finder.predicates import Predicate
from treesift.finder.walker import WalkDecision, WalkEntry, Walker, iter_walk

logger = logging.getLogger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=UTC)


@dataclass(slots=True)
class SearchResult:
    """Outcome of a complete search.

    Attributes:
        items: Accepted candidates in traversal order.
        errors: Setup errors followed by traversal errors.
    """

    items: CandidateList = field(default_factory=CandidateList)
    errors: list[FinderError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no error of any kind was reported."""
        return len(self.errors) == 0


class Finder:
    """File and directory search with include/exclude predicates.

    By default both files and directories are returned. Malformed
    patterns do not raise; they are recorded as setup errors, the
    offending predicate is dropped, and the errors are returned with the
    results of every run.

    Args:
        walker: Walk primitive to use. Defaults to iter_walk.
    """

    def __init__(self, *, walker: Walker = iter_walk) -> None:
        self._walker = walker
        self._roots: list[str] = []
        self._predicates: list[Predicate] = []
        self._setup_errors: list[SetupError] = []
        self._entry_type = EntryType.ALL
        self._max_depth: int | None = None
        self._depth_unbounded = False

    # === Configuration ===

    def in_(self, *roots: str | os.PathLike[str]) -> Self:
        """Search the given directories, in order."""
        self._roots.extend(os.fspath(r) for r in roots)
        return self

    def path(self, pattern: str) -> Self:
        """Only search beneath directories whose relative path matches a glob."""
        return self._add_pattern(predicates.path_glob, pattern, "glob")

    def not_path(self, pattern: str) -> Self:
        """Skip directories whose relative path matches a glob."""
        return self._add_pattern(predicates.path_glob, pattern, "glob", exclude=True)

    def name(self, pattern: str) -> Self:
        """Match the base name against a glob."""
        return self._add_pattern(predicates.name_glob, pattern, "glob")

    def not_name(self, pattern: str) -> Self:
        """Exclude base names matching a glob."""
        return self._add_pattern(predicates.name_glob, pattern, "glob", exclude=True)

    def name_regex(self, pattern: str) -> Self:
        """Match the base name against a regular expression."""
        return self._add_pattern(predicates.name_regex, pattern, "regex")

    def not_name_regex(self, pattern: str) -> Self:
        """Exclude base names matching a regular expression."""
        return self._add_pattern(predicates.name_regex, pattern, "regex", exclude=True)

    def ignore_vcs(self) -> Self:
        """Skip directories used by common version control systems."""
        self._predicates.append(predicates.vcs_dirs())
        return self

    def ignore_dots(self) -> Self:
        """Skip entries whose name starts with a dot, and everything beneath them."""
        self._predicates.append(predicates.dot_entries())
        return self

    def files(self) -> Self:
        """Return files only."""
        return self.types(EntryType.FILES)

    def dirs(self) -> Self:
        """Return directories only."""
        return self.types(EntryType.DIRS)

    def types(self, entry_type: EntryType) -> Self:
        """Set which kinds of entries are returned; the last call wins."""
        self._entry_type = entry_type
        return self

    def depth(self, min_depth: int, max_depth: int) -> Self:
        """Filter on depth below the root, one-based.

        ``max_depth`` is ignored when it is lower than ``min_depth``::

            depth(1, 1)   # direct children of the root only
            depth(2, -1)  # anything deeper than that
        """
        self._predicates.append(predicates.depth_range(min_depth, max_depth))
        if max_depth < min_depth:
            self._depth_unbounded = True
        elif self._max_depth is None or max_depth > self._max_depth:
            self._max_depth = max_depth
        return self

    def size(self, min_size: int, max_size: int) -> Self:
        """Filter on size in bytes.

        ``max_size`` is ignored when it is lower than ``min_size``::

            size(0, 1024)     # <= 1 KiB
            size(1024, 1024)  # exactly 1 KiB
            size(1024, -1)    # >= 1 KiB
        """
        self._predicates.append(predicates.size_range(min_size, max_size))
        return self

    def filter(self, test: Callable[[Candidate], bool], description: str | None = None) -> Self:
        """Filter with a caller-supplied function; any one filter must accept."""
        self._predicates.append(predicates.custom(test, description))
        return self

    # === Inspection ===

    @property
    def roots(self) -> tuple[str, ...]:
        return tuple(self._roots)

    @property
    def setup_errors(self) -> tuple[SetupError, ...]:
        """Pattern errors recorded while configuring this finder."""
        return tuple(self._setup_errors)

    def describe(self) -> list[str]:
        """Human-readable summary of the active filters."""
        lines = [p.description for p in self._predicates]
        if self._entry_type is not EntryType.ALL:
            lines.insert(0, f"type {self._entry_type.value}")
        return lines

    def engine(self) -> PredicateEngine:
        """Snapshot the current configuration as a PredicateEngine."""
        return PredicateEngine(
            self._predicates,
            entry_type=self._entry_type,
            max_depth=None if self._depth_unbounded else self._max_depth,
        )

    # === Running ===

    def each(self, on_accept: Callable[[Candidate], None]) -> list[FinderError]:
        """Call ``on_accept`` for every matching entry.

        Args:
            on_accept: Called once per accepted candidate, in traversal order.

        Returns:
            Setup errors followed by traversal errors; empty on success.
        """
        errors: list[FinderError] = []
        for candidate in self.iter(errors):
            on_accept(candidate)
        return errors

    def find(self) -> SearchResult:
        """Collect every matching entry into a SearchResult."""
        result = SearchResult()
        result.errors = self.each(result.items.append)
        return result

    def iter(self, errors: list[FinderError] | None = None) -> Iterator[Candidate]:
        """Stream matching entries.

        Closing the iterator early stops the walk and releases its
        directory handles.

        Args:
            errors: Optional list that receives setup errors up front and
                traversal errors as they occur.

        Yields:
            Accepted candidates in traversal order.
        """
        sink: list[FinderError] = errors if errors is not None else []
        sink.extend(self._setup_errors)
        engine = self.engine()
        for root in self._roots:
            yield from self._search_root(root, engine, sink)

    def _search_root(
        self,
        root: str,
        engine: PredicateEngine,
        errors: list[FinderError],
    ) -> Iterator[Candidate]:
        """Walk one root, yielding accepted candidates.

        An I/O error anywhere in the walk is recorded and ends this root.
        """
        walk = self._walker(root)
        decision: WalkDecision | None = None
        is_root = True
        matched = 0
        try:
            while True:
                try:
                    entry = walk.send(decision)
                except StopIteration:
                    break

                if entry.error is not None:
                    error = TraversalError(entry.path, entry.error)
                    logger.warning("%s", error)
                    errors.append(error)
                    decision = WalkDecision.ABORT
                    continue

                if is_root:
                    is_root = False
                    decision = WalkDecision.CONTINUE
                    continue

                candidate = _to_candidate(root, entry)
                verdict = engine.evaluate(candidate)
                if verdict is Verdict.ACCEPT:
                    matched += 1
                    yield candidate
                decision = _walk_decision(verdict, candidate, engine)
        finally:
            walk.close()
        logger.debug("Searched %s: %d match(es)", root, matched)

    def _add_pattern(
        self,
        factory: Callable[..., Predicate],
        pattern: str,
        kind: str,
        *,
        exclude: bool = False,
    ) -> Self:
        try:
            self._predicates.append(factory(pattern, exclude=exclude))
        except PatternError as e:
            error = SetupError(pattern, kind, str(e))
            logger.warning("%s", error)
            self._setup_errors.append(error)
        return self


def _to_candidate(root: str, entry: WalkEntry) -> Candidate:
    return Candidate(
        name=entry.name,
        rel_path=os.path.relpath(entry.path, root),
        root=root,
        is_dir=entry.is_dir,
        size=entry.size,
        mtime=entry.mtime or _EPOCH,
    )


def _walk_decision(verdict: Verdict, candidate: Candidate, engine: PredicateEngine) -> WalkDecision:
    if verdict is Verdict.PRUNE:
        return WalkDecision.SKIP_SUBTREE
    if candidate.is_dir and not engine.can_descend(candidate):
        return WalkDecision.SKIP_SUBTREE
    return WalkDecision.CONTINUE
