"""Centralized error mapping for pygit2 exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

import pygit2
import structlog

from gitdraft.git.errors import DiffComputationError, RepositoryStateError

log = structlog.get_logger(__name__)


class ErrorMapper:
    """Maps pygit2 exceptions to domain errors."""

    @staticmethod
    @contextmanager
    def guard_state(operation: str) -> Iterator[None]:
        """Translate failures while reading HEAD/index into RepositoryStateError."""
        try:
            yield
        except (pygit2.GitError, KeyError, ValueError) as e:
            log.error("repository_state_failed", operation=operation, error=str(e))
            raise RepositoryStateError(f"{operation}: {e}") from e

    @staticmethod
    @contextmanager
    def guard_diff(operation: str) -> Iterator[None]:
        """Translate failures while computing a diff into DiffComputationError."""
        try:
            yield
        except (pygit2.GitError, KeyError, ValueError) as e:
            log.error("diff_failed", operation=operation, error=str(e))
            raise DiffComputationError(operation, str(e)) from e


def state_operation(operation: str) -> AbstractContextManager[None]:
    return ErrorMapper.guard_state(operation)


def diff_operation(operation: str) -> AbstractContextManager[None]:
    return ErrorMapper.guard_diff(operation)
