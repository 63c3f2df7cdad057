"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

from pathlib import Path

import pygit2

from gitdraft.git._internal.errors import state_operation
from gitdraft.git.errors import NotARepositoryError, RepositoryStateError


class RepoAccess:
    """Wraps a pygit2.Repository and provides normalized, read-only access to repo state.

    A repository opened from a path is owned and freed on close(); one passed
    in by the caller is left open.
    """

    def __init__(self, repo: pygit2.Repository | Path | str) -> None:
        if isinstance(repo, pygit2.Repository):
            self._path = Path(repo.workdir or repo.path)
            self._repo = repo
            self._owned = False
            return
        self._path = Path(repo)
        self._owned = True
        try:
            self._repo = pygit2.Repository(str(self._path))
        except (pygit2.GitError, KeyError) as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def path(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else self._path

    # =========================================================================
    # Repository State Facts
    # =========================================================================

    @property
    def is_unborn(self) -> bool:
        """True while HEAD names a branch that has no commits yet."""
        with state_operation("read HEAD"):
            return self._repo.head_is_unborn

    @property
    def index(self) -> pygit2.Index:
        with state_operation("read index"):
            return self._repo.index  # type: ignore[no-any-return]

    def head_tree(self) -> pygit2.Tree | None:
        if self.is_unborn:
            return None
        with state_operation("resolve HEAD tree"):
            return self._repo.head.peel(pygit2.Tree)

    def must_head_tree(self) -> pygit2.Tree:
        tree = self.head_tree()
        if tree is None:
            raise RepositoryStateError("HEAD has no tree (unborn branch)")
        return tree

    def close(self) -> None:
        """Release handles to the object database if this instance opened them."""
        if self._owned:
            self._repo.free()
