"""Test fixtures for git module."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

CommitAll = Callable[[pygit2.Repository, str], pygit2.Oid]


def _commit_all(repo: pygit2.Repository, message: str) -> pygit2.Oid:
    """Stage every file in the working tree and commit it on HEAD."""
    repo.index.add_all()
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    parents = [] if repo.head_is_unborn else [repo.head.target]
    return repo.create_commit("HEAD", sig, sig, message, tree, parents)


@pytest.fixture
def commit_all() -> CommitAll:
    return _commit_all


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")

    # Configure user
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    (repo_path / "README.md").write_text("# Test Repo\n")
    _commit_all(repo, "Initial commit")

    yield repo


@pytest.fixture
def unborn_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Freshly initialized repository without any commits."""
    repo_path = tmp_path / "unborn"
    repo_path.mkdir()
    yield pygit2.init_repository(str(repo_path), initial_head="main")


@pytest.fixture
def repo_with_uncommitted(temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Repository with staged, unstaged and untracked changes."""
    workdir = Path(temp_repo.workdir)

    # Staged change
    (workdir / "staged.txt").write_text("staged content\n")
    temp_repo.index.add("staged.txt")
    temp_repo.index.write()

    # Modified (unstaged)
    (workdir / "README.md").write_text("# Test Repo\nmore docs\n")

    # Untracked
    (workdir / "untracked.txt").write_text("untracked\n")

    return temp_repo
