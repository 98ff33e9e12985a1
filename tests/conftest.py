"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def fixture_tree(tmp_path: Path) -> Path:
    """Create the standard search fixture and return its root.

    Layout (sizes in bytes)::

        test-fixtures/
            1.log        0
            1.txt        1
            CVS/
                .config  0
                1        0

    Modification times increase in the order 1.log, 1.txt, CVS/1,
    CVS/.config, CVS.
    """
    root = tmp_path / "test-fixtures"
    cvs = root / "CVS"
    cvs.mkdir(parents=True)
    (root / "1.log").write_text("")
    (root / "1.txt").write_text("x")
    (cvs / "1").write_text("")
    (cvs / ".config").write_text("")

    base = 1_700_000_000
    for offset, path in enumerate(
        [root / "1.log", root / "1.txt", cvs / "1", cvs / ".config", cvs]
    ):
        os.utime(path, (base + offset * 60, base + offset * 60))
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a tree with a matching and a non-matching subdirectory.

    Layout::

        root/
            D/a
            D/sub/b
            other/c
    """
    root = tmp_path / "root"
    (root / "D" / "sub").mkdir(parents=True)
    (root / "other").mkdir()
    (root / "D" / "a").write_text("a")
    (root / "D" / "sub" / "b").write_text("bb")
    (root / "other" / "c").write_text("ccc")
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """Create a five-level chain of directories, each holding one file.

    Layout::

        deep/l1/f1, deep/l1/l2/f2, ..., deep/l1/l2/l3/l4/l5/f5
    """
    root = tmp_path / "deep"
    current = root
    for level in range(1, 6):
        current = current / f"l{level}"
        current.mkdir(parents=True)
        (current / f"f{level}").write_text("x" * level)
    return root
