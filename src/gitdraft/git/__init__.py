"""Git operations module."""

from gitdraft.git.errors import (
    DiffComputationError,
    GitError,
    NotARepositoryError,
    RepositoryStateError,
)
from gitdraft.git.ops import GitRepo, get_structured_changes

__all__ = [
    # Main API
    "GitRepo",
    "get_structured_changes",
    # Errors
    "GitError",
    "NotARepositoryError",
    "RepositoryStateError",
    "DiffComputationError",
]
