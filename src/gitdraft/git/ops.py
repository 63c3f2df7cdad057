"""Structured change extraction via pygit2."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pygit2
import structlog

from gitdraft.changes import ChangeSet, collect_changes, format_changes
from gitdraft.config.constants import CONTEXT_LINES_DEFAULT, SUMMARY_WIDTH_DEFAULT
from gitdraft.git._internal import DiffPlanner, RepoAccess
from gitdraft.git._internal.errors import diff_operation

log = structlog.get_logger(__name__)


class GitRepo:
    """Read-only view of a repository that knows how to summarize pending changes.

    Usable as a context manager; the repository handle is released on exit.
    """

    def __init__(
        self,
        repo: pygit2.Repository | Path | str,
        *,
        context_lines: int = CONTEXT_LINES_DEFAULT,
        detect_renames: bool = True,
        summary_width: int = SUMMARY_WIDTH_DEFAULT,
    ) -> None:
        self._access = RepoAccess(repo)
        self._diff_planner = DiffPlanner(self._access)
        self._context_lines = context_lines
        self._detect_renames = detect_renames
        self._summary_width = summary_width

    @property
    def repo(self) -> pygit2.Repository:
        """Direct access to the underlying pygit2 Repository."""
        return self._access.repo

    @property
    def path(self) -> Path:
        """Repository root path."""
        return self._access.path

    def diff(self, include_unstaged: bool = True) -> pygit2.Diff:
        """Compute the raw diff the summary is built from."""
        plan = self._diff_planner.plan(include_unstaged)
        return self._diff_planner.execute(
            plan,
            context_lines=self._context_lines,
            detect_renames=self._detect_renames,
        )

    def collect_changes(self, include_unstaged: bool = True) -> ChangeSet:
        """Collect one FileChange per touched path.

        Raises:
            RepositoryStateError: HEAD or the index cannot be resolved.
            DiffComputationError: The diff or one of its patches cannot be computed.
        """
        diff = self.diff(include_unstaged)
        return collect_changes(
            diff,
            self._summary_width,
            render_guard=lambda: diff_operation("render diff"),
        )

    def structured_changes(self, include_unstaged: bool = True) -> str:
        """Text block describing pending changes; "" when there are none."""
        changes = self.collect_changes(include_unstaged)
        log.debug("structured_changes", path=str(self.path), files=len(changes))
        return format_changes(changes)

    def close(self) -> None:
        self._access.close()

    def __enter__(self) -> GitRepo:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def get_structured_changes(
    repo: pygit2.Repository,
    include_unstaged: bool = True,
    *,
    context_lines: int = CONTEXT_LINES_DEFAULT,
    detect_renames: bool = True,
    summary_width: int = SUMMARY_WIDTH_DEFAULT,
) -> str:
    """Summarize pending changes of an already-open repository."""
    git_repo = GitRepo(
        repo,
        context_lines=context_lines,
        detect_renames=detect_renames,
        summary_width=summary_width,
    )
    return git_repo.structured_changes(include_unstaged)
