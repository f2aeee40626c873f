"""Tests for locating the enclosing repository."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from git_prompt_branch.fs import find_repo_root, inside_metadata_dir


class FindRepoRootTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / ".git").mkdir()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_finds_marker_in_starting_directory(self) -> None:
        self.assertEqual(find_repo_root(self.root), self.root)

    def test_finds_marker_in_ancestor(self) -> None:
        nested = self.root / "src" / "deep" / "nested"
        nested.mkdir(parents=True)

        self.assertEqual(find_repo_root(nested), self.root)

    def test_nearest_marker_wins(self) -> None:
        inner = self.root / "vendor" / "lib"
        (inner / ".git").mkdir(parents=True)

        (inner / "src").mkdir()

        self.assertEqual(find_repo_root(inner / "src"), inner)

    def test_marker_file_counts(self) -> None:
        worktree = self.root / "worktree"
        worktree.mkdir()
        (worktree / ".git").write_text("gitdir: /elsewhere\n")

        self.assertEqual(find_repo_root(worktree), worktree)

    def test_returns_none_when_no_ancestor_has_marker(self) -> None:
        self.assertIsNone(find_repo_root(self.root, marker=".no-such-marker-4f2c"))


class InsideMetadataDirTests(unittest.TestCase):
    def test_detects_marker_component(self) -> None:
        self.assertTrue(inside_metadata_dir(Path("/home/me/project/.git")))
        self.assertTrue(inside_metadata_dir(Path("/home/me/project/.git/refs/heads")))

    def test_ignores_similar_names(self) -> None:
        self.assertFalse(inside_metadata_dir(Path("/home/me/project/.github/workflows")))
        self.assertFalse(inside_metadata_dir(Path("/home/me/project.git")))

    def test_custom_marker(self) -> None:
        self.assertTrue(inside_metadata_dir(Path("/repo/.hg/store"), marker=".hg"))


if __name__ == "__main__":
    unittest.main()
