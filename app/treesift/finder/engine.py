"""Predicate engine deciding the verdict for each visited entry.

Categories are evaluated in a fixed order. Cheap, high-rejection checks
run first, and every check that can prune a directory (depth, path
include, path exclude) runs before the name checks, which can only ever
discard a single entry.
"""

import logging
from collections.abc import Iterable

from treesift.finder.models import Candidate, EntryType, Verdict
from treesift.finder.predicates import Category, Predicate

logger = logging.getLogger(__name__)


class PredicateEngine:
    """Immutable set of categorised predicates.

    Args:
        predicates: Predicates in registration order; each is filed under
            its own category.
        entry_type: Restrict results to files, directories or both.
        max_depth: Largest depth any depth predicate can accept, or None
            when some depth predicate is unbounded (or none exist).
    """

    def __init__(
        self,
        predicates: Iterable[Predicate] = (),
        *,
        entry_type: EntryType = EntryType.ALL,
        max_depth: int | None = None,
    ) -> None:
        grouped: dict[Category, list[Predicate]] = {category: [] for category in Category}
        for predicate in predicates:
            grouped[predicate.category].append(predicate)

        self._groups: dict[Category, tuple[Predicate, ...]] = {
            category: tuple(items) for category, items in grouped.items()
        }
        self._entry_type = entry_type
        self._max_depth = max_depth if self._groups[Category.DEPTH] else None

    @property
    def entry_type(self) -> EntryType:
        return self._entry_type

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    def predicates(self, category: Category) -> tuple[Predicate, ...]:
        """Predicates registered under a category, in registration order."""
        return self._groups[category]

    def evaluate(self, candidate: Candidate) -> Verdict:
        """Decide whether a candidate is accepted, rejected or pruned.

        Args:
            candidate: Entry to evaluate.

        Returns:
            ACCEPT if every active category is satisfied, PRUNE if the
            candidate's subtree cannot contain a match, REJECT otherwise.
        """
        if not self._matches_type(candidate):
            return Verdict.REJECT

        for check in (
            self._check_depth,
            self._check_size,
            self._check_custom,
            self._check_path_include,
            self._check_path_exclude,
            self._check_name_include,
            self._check_name_exclude,
        ):
            verdict = check(candidate)
            if verdict is not Verdict.ACCEPT:
                return verdict
        return Verdict.ACCEPT

    def can_descend(self, candidate: Candidate) -> bool:
        """Check whether children of a directory could still match.

        Returns False once a directory sits at the maximum depth bound,
        since every child would lie beyond it.
        """
        if not candidate.is_dir:
            return False
        return self._max_depth is None or candidate.depth < self._max_depth

    def _matches_type(self, candidate: Candidate) -> bool:
        if self._entry_type is EntryType.FILES:
            return not candidate.is_dir
        if self._entry_type is EntryType.DIRS:
            return candidate.is_dir
        return True

    def _check_depth(self, candidate: Candidate) -> Verdict:
        depths = self._groups[Category.DEPTH]
        if not depths:
            return Verdict.ACCEPT
        if self._max_depth is not None and candidate.depth > self._max_depth:
            logger.debug(
                "Pruning %s: depth %d > %d", candidate.path, candidate.depth, self._max_depth
            )
            return Verdict.PRUNE
        return _any_or_reject(depths, candidate)

    def _check_size(self, candidate: Candidate) -> Verdict:
        return _any_or_reject(self._groups[Category.SIZE], candidate)

    def _check_custom(self, candidate: Candidate) -> Verdict:
        return _any_or_reject(self._groups[Category.CUSTOM], candidate)

    def _check_path_include(self, candidate: Candidate) -> Verdict:
        paths = self._groups[Category.PATH_INCLUDE]
        if not paths:
            return Verdict.ACCEPT
        if candidate.is_dir:
            for predicate in paths:
                if not predicate(candidate):
                    logger.debug("Pruning %s: outside %s", candidate.path, predicate.description)
                    return Verdict.PRUNE
            return Verdict.ACCEPT
        return _any_or_reject(paths, candidate)

    def _check_path_exclude(self, candidate: Candidate) -> Verdict:
        for predicate in self._groups[Category.PATH_EXCLUDE]:
            if predicate(candidate):
                if candidate.is_dir:
                    logger.debug("Pruning %s: %s", candidate.path, predicate.description)
                    return Verdict.PRUNE
                return Verdict.REJECT
        return Verdict.ACCEPT

    def _check_name_include(self, candidate: Candidate) -> Verdict:
        return _any_or_reject(self._groups[Category.NAME_INCLUDE], candidate)

    def _check_name_exclude(self, candidate: Candidate) -> Verdict:
        for predicate in self._groups[Category.NAME_EXCLUDE]:
            if predicate(candidate):
                return Verdict.REJECT
        return Verdict.ACCEPT


def _any_or_reject(predicates: tuple[Predicate, ...], candidate: Candidate) -> Verdict:
    """OR semantics: an empty group passes, otherwise one match is required."""
    if not predicates or any(p(candidate) for p in predicates):
        return Verdict.ACCEPT
    return Verdict.REJECT
