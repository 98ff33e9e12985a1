"""Tests for the decision-driven directory walk."""

import os
from pathlib import Path
from unittest.mock import patch

from treesift.finder.walker import WalkDecision, WalkEntry, iter_walk


def _drive(root: Path, decide=None) -> list[WalkEntry]:
    """Run iter_walk, sending decide(entry) back for every entry."""
    visited: list[WalkEntry] = []
    walk = iter_walk(str(root))
    decision: WalkDecision | None = None
    try:
        while True:
            try:
                entry = walk.send(decision)
            except StopIteration:
                break
            visited.append(entry)
            decision = decide(entry) if decide else WalkDecision.CONTINUE
    finally:
        walk.close()
    return visited


def _rel(root: Path, entries: list[WalkEntry]) -> list[str]:
    return [os.path.relpath(e.path, root).replace(os.sep, "/") for e in entries]


class TestIterWalk:
    """Tests for iter_walk ordering and metadata."""

    def test_preorder_lexical(self, fixture_tree: Path) -> None:
        """Entries come parent first, siblings sorted by name."""
        entries = _drive(fixture_tree)
        assert _rel(fixture_tree, entries) == [".", "1.log", "1.txt", "CVS", "CVS/.config", "CVS/1"]

    def test_root_entry_first(self, fixture_tree: Path) -> None:
        """The root itself is the first entry."""
        root = _drive(fixture_tree)[0]
        assert root.path == str(fixture_tree)
        assert root.name == "test-fixtures"
        assert root.is_dir is True

    def test_metadata(self, fixture_tree: Path) -> None:
        """Entries carry size, type and modification time."""
        by_name = {e.name: e for e in _drive(fixture_tree)}
        assert by_name["1.txt"].size == 1
        assert by_name["1.txt"].is_dir is False
        assert by_name["CVS"].is_dir is True
        assert by_name["1.log"].mtime is not None
        assert by_name["1.log"].mtime.tzinfo is not None
        assert by_name["1.log"].error is None

    def test_plain_next_continues(self, fixture_tree: Path) -> None:
        """Iterating without send() visits everything."""
        assert len(list(iter_walk(str(fixture_tree)))) == 6

    def test_skip_subtree(self, fixture_tree: Path) -> None:
        """SKIP_SUBTREE on a directory skips its children."""

        def decide(entry: WalkEntry) -> WalkDecision:
            if entry.name == "CVS":
                return WalkDecision.SKIP_SUBTREE
            return WalkDecision.CONTINUE

        assert _rel(fixture_tree, _drive(fixture_tree, decide)) == [".", "1.log", "1.txt", "CVS"]

    def test_skip_subtree_on_root(self, fixture_tree: Path) -> None:
        """Skipping the root yields nothing else."""
        entries = _drive(fixture_tree, lambda e: WalkDecision.SKIP_SUBTREE)
        assert len(entries) == 1

    def test_abort(self, fixture_tree: Path) -> None:
        """ABORT stops the walk immediately."""

        def decide(entry: WalkEntry) -> WalkDecision:
            if entry.name == "1.txt":
                return WalkDecision.ABORT
            return WalkDecision.CONTINUE

        assert _rel(fixture_tree, _drive(fixture_tree, decide)) == [".", "1.log", "1.txt"]

    def test_abort_inside_subdirectory(self, fixture_tree: Path) -> None:
        """ABORT from a nested entry ends the whole walk."""
        (fixture_tree / "zzz").write_text("")

        def decide(entry: WalkEntry) -> WalkDecision:
            if entry.name == ".config":
                return WalkDecision.ABORT
            return WalkDecision.CONTINUE

        names = [e.name for e in _drive(fixture_tree, decide)]
        assert names[-1] == ".config"
        assert "zzz" not in names

    def test_symlinks_not_followed(self, fixture_tree: Path, tmp_path: Path) -> None:
        """A symlink to a directory is reported but not entered."""
        target = tmp_path / "elsewhere"
        target.mkdir()
        (target / "hidden").write_text("")
        (fixture_tree / "link").symlink_to(target, target_is_directory=True)

        by_name = {e.name: e for e in _drive(fixture_tree)}
        assert by_name["link"].is_dir is False
        assert "hidden" not in by_name


class TestIterWalkErrors:
    """Tests for error reporting."""

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root yields a single error entry."""
        entries = list(iter_walk(str(tmp_path / "missing")))
        assert len(entries) == 1
        assert isinstance(entries[0].error, FileNotFoundError)

    def test_unreadable_directory(self, fixture_tree: Path) -> None:
        """A directory that cannot be listed yields an error entry."""
        real_scandir = os.scandir
        cvs = str(fixture_tree / "CVS")

        def scandir(path: str):  # type: ignore[no-untyped-def]
            if path == cvs:
                raise PermissionError(13, "Permission denied", path)
            return real_scandir(path)

        with patch("treesift.finder.walker.os.scandir", side_effect=scandir):
            entries = _drive(fixture_tree)

        errors = [e for e in entries if e.error is not None]
        assert len(errors) == 1
        assert errors[0].path == cvs
        assert isinstance(errors[0].error, PermissionError)

    def test_closing_early_releases_walk(self, fixture_tree: Path) -> None:
        """Closing the generator mid-walk stops it cleanly."""
        walk = iter_walk(str(fixture_tree))
        next(walk)
        next(walk)
        walk.close()
        assert list(walk) == []
