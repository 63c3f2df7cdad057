"""Internal components for git operations - not part of public API."""

from gitdraft.git._internal.access import RepoAccess
from gitdraft.git._internal.planners import DiffPlan, DiffPlanner, DiffType

__all__ = [
    "DiffPlan",
    "DiffPlanner",
    "DiffType",
    "RepoAccess",
]
