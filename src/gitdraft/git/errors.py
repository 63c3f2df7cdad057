"""Git module error types."""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path is not a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class RepositoryStateError(GitError):
    """HEAD cannot be resolved for a reason other than an unborn branch."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Cannot resolve repository state: {reason}")
        self.reason = reason


class DiffComputationError(GitError):
    """The underlying diff could not be computed."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason
