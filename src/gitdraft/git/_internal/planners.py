"""Decision planners that separate "what to diff" from "how to diff it"."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygit2
import structlog

from gitdraft.config.constants import CONTEXT_LINES_DEFAULT
from gitdraft.git._internal.access import RepoAccess
from gitdraft.git._internal.constants import DIFF_NORMAL, DIFF_UNTRACKED, FIND_SIMILAR
from gitdraft.git._internal.errors import diff_operation

log = structlog.get_logger(__name__)


class DiffType(Enum):
    """Which two snapshots get compared."""

    INDEX_TO_WORKDIR = auto()  # unborn HEAD: index is the only baseline
    TREE_TO_WORKDIR = auto()  # HEAD tree vs. staged + unstaged changes
    TREE_TO_INDEX = auto()  # HEAD tree vs. staged changes only


@dataclass(frozen=True, slots=True)
class DiffPlan:
    """Plan for executing a diff operation."""

    diff_type: DiffType
    include_untracked: bool

    @property
    def flags(self) -> int:
        return DIFF_UNTRACKED if self.include_untracked else DIFF_NORMAL


class DiffPlanner:
    """Resolves the snapshot pair from repository state and computes the diff."""

    def __init__(self, access: RepoAccess) -> None:
        self._access = access

    def plan(self, include_unstaged: bool) -> DiffPlan:
        """Pick baseline and target.

        An unborn HEAD always compares index to working tree with untracked
        files, since the first commit has to surface everything new. Otherwise
        HEAD's tree is the baseline, and untracked files are only included
        when unstaged changes are (they can never be staged).

        Raises:
            RepositoryStateError: HEAD cannot be read.
        """
        if self._access.is_unborn:
            plan = DiffPlan(DiffType.INDEX_TO_WORKDIR, include_untracked=True)
        elif include_unstaged:
            plan = DiffPlan(DiffType.TREE_TO_WORKDIR, include_untracked=True)
        else:
            plan = DiffPlan(DiffType.TREE_TO_INDEX, include_untracked=False)
        log.debug(
            "diff_planned",
            diff_type=plan.diff_type.name,
            include_untracked=plan.include_untracked,
        )
        return plan

    def execute(
        self,
        plan: DiffPlan,
        *,
        context_lines: int = CONTEXT_LINES_DEFAULT,
        detect_renames: bool = True,
    ) -> pygit2.Diff:
        """Execute a diff plan.

        Raises:
            RepositoryStateError: HEAD tree or index cannot be loaded.
            DiffComputationError: libgit2 fails to produce the diff.
        """
        if plan.diff_type == DiffType.INDEX_TO_WORKDIR:
            index = self._access.index
            with diff_operation("diff index to workdir"):
                diff = index.diff_to_workdir(flags=plan.flags, context_lines=context_lines)

        elif plan.diff_type == DiffType.TREE_TO_WORKDIR:
            tree = self._access.must_head_tree()
            with diff_operation("diff HEAD to workdir"):
                diff = tree.diff_to_workdir(flags=plan.flags, context_lines=context_lines)

        else:  # TREE_TO_INDEX
            tree = self._access.must_head_tree()
            index = self._access.index
            with diff_operation("diff HEAD to index"):
                diff = tree.diff_to_index(index, flags=plan.flags, context_lines=context_lines)

        if detect_renames:
            with diff_operation("detect renames"):
                diff.find_similar(flags=FIND_SIMILAR)

        log.debug("diff_computed", diff_type=plan.diff_type.name, deltas=len(diff))
        return diff
