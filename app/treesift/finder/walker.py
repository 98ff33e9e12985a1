"""Depth-first directory walk driven by per-entry decisions.

``iter_walk`` is a generator: it yields one WalkEntry per visited path
in pre-order, siblings sorted by name, and receives a WalkDecision for
that entry through ``send()``. Plain ``next()`` counts as CONTINUE.
Symlinks are reported with their own lstat data and never followed.

Unreadable paths are yielded as entries carrying the OSError; the
consumer decides whether to skip them or abort the walk.
"""

import os
import stat
from collections.abc import Callable, Generator
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum


class WalkDecision(str, Enum):
    """Instruction sent back to the walk after each entry."""

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"
    ABORT = "abort"


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """One path visited by the walk.

    Attributes:
        path: Path as built from the root (root joined with names).
        name: Base name.
        is_dir: True for directories (symlinks to directories are not).
        size: Size in bytes from lstat (0 when unavailable).
        mtime: Modification time (UTC), None when unavailable.
        error: OSError raised while reading this path, if any.
    """

    path: str
    name: str
    is_dir: bool = False
    size: int = 0
    mtime: datetime | None = None
    error: OSError | None = None


WalkGenerator = Generator[WalkEntry, WalkDecision | None, None]
Walker = Callable[[str], WalkGenerator]


def iter_walk(root: str) -> WalkGenerator:
    """Walk ``root`` depth-first, starting with the root itself.

    Args:
        root: Directory (or file) to walk.

    Yields:
        WalkEntry for the root and every descendant.
    """
    name = os.path.basename(os.path.normpath(root))
    try:
        st = os.lstat(root)
    except OSError as e:
        yield WalkEntry(path=root, name=name, error=e)
        return

    entry = _entry_from_stat(root, name, st)
    decision = yield entry
    if not entry.is_dir or decision in (WalkDecision.SKIP_SUBTREE, WalkDecision.ABORT):
        return
    yield from _walk_dir(root)


def _walk_dir(path: str) -> Generator[WalkEntry, WalkDecision | None, bool]:
    """Yield the children of ``path`` recursively.

    Returns:
        True if the consumer aborted the walk.
    """
    try:
        with os.scandir(path) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        decision = yield WalkEntry(path=path, name=os.path.basename(path), is_dir=True, error=e)
        return decision is WalkDecision.ABORT

    for child in children:
        try:
            st = child.stat(follow_symlinks=False)
        except OSError as e:
            decision = yield WalkEntry(path=child.path, name=child.name, error=e)
            if decision is WalkDecision.ABORT:
                return True
            continue

        entry = _entry_from_stat(child.path, child.name, st)
        decision = yield entry
        if decision is WalkDecision.ABORT:
            return True
        if entry.is_dir and decision is not WalkDecision.SKIP_SUBTREE:
            aborted = yield from _walk_dir(child.path)
            if aborted:
                return True
    return False


def _entry_from_stat(path: str, name: str, st: os.stat_result) -> WalkEntry:
    return WalkEntry(
        path=path,
        name=name,
        is_dir=stat.S_ISDIR(st.st_mode),
        size=st.st_size,
        mtime=datetime.fromtimestamp(st.st_mtime, tz=UTC),
    )
