"""walk_diff against real pygit2 diffs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pygit2

from gitdraft.changes import collect_changes, walk_diff


class CountingVisitor:
    def __init__(self) -> None:
        self.files: list[str] = []
        self.hunks = 0
        self.origins: list[str] = []

    def visit_file(self, delta: Any) -> None:
        self.files.append(delta.new_file.path)

    def visit_hunk(self, delta: Any, hunk: Any) -> None:
        self.hunks += 1

    def visit_line(self, delta: Any, hunk: Any, line: Any) -> None:
        self.origins.append(line.origin)


def _repo_with_edit(tmp_path: Path) -> pygit2.Repository:
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    (repo_path / "notes.txt").write_text("alpha\nbeta\ngamma\n")
    repo.index.add("notes.txt")
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    repo.create_commit("HEAD", sig, sig, "Initial commit", tree, [])
    (repo_path / "notes.txt").write_text("alpha\nBETA\ngamma\n")
    return repo


class TestWalkRealDiff:
    """Hook calls line up with pygit2's own structure."""

    def test_visits_every_level(self, tmp_path: Path) -> None:
        repo = _repo_with_edit(tmp_path)
        diff = repo.diff()
        visitor = CountingVisitor()

        walk_diff(diff, visitor)

        assert visitor.files == ["notes.txt"]
        assert visitor.hunks == 1
        assert visitor.origins == [" ", "-", "+", " "]

    def test_collect_from_real_diff(self, tmp_path: Path) -> None:
        repo = _repo_with_edit(tmp_path)

        changes = collect_changes(repo.diff())

        assert changes["notes.txt"].summaries == ["Removed: beta", "Added: BETA"]
