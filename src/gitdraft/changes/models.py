"""Per-file change records accumulated from a diff."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from pygit2.enums import DeltaStatus


class ChangeKind(StrEnum):
    """How a file changed. Closed set; see from_status for the fallback."""

    ADDED = "Added"
    DELETED = "Deleted"
    MODIFIED = "Modified"
    RENAMED = "Renamed"
    COPIED = "Copied"

    @classmethod
    def from_status(cls, status: int) -> ChangeKind:
        """Map a libgit2 delta status; anything unlisted counts as Modified."""
        return _STATUS_KINDS.get(status, cls.MODIFIED)


_STATUS_KINDS: dict[int, ChangeKind] = {
    DeltaStatus.ADDED: ChangeKind.ADDED,
    DeltaStatus.DELETED: ChangeKind.DELETED,
    DeltaStatus.MODIFIED: ChangeKind.MODIFIED,
    DeltaStatus.RENAMED: ChangeKind.RENAMED,
    DeltaStatus.COPIED: ChangeKind.COPIED,
}


@dataclass(slots=True)
class FileChange:
    """One touched path, its kind, and one summary per informative line."""

    path: str
    kind: ChangeKind
    summaries: list[str] = field(default_factory=list)


class ChangeSet:
    """Insertion-ordered mapping of path -> FileChange.

    The first observation of a path fixes its kind; later observations
    only append summaries.
    """

    def __init__(self) -> None:
        self._changes: dict[str, FileChange] = {}

    def record(self, path: str, kind: ChangeKind) -> FileChange:
        """Return the record for path, creating it with kind if unseen."""
        change = self._changes.get(path)
        if change is None:
            change = FileChange(path, kind)
            self._changes[path] = change
        return change

    def __getitem__(self, path: str) -> FileChange:
        return self._changes[path]

    def __contains__(self, path: object) -> bool:
        return path in self._changes

    def __iter__(self) -> Iterator[FileChange]:
        return iter(self._changes.values())

    def __len__(self) -> int:
        return len(self._changes)

    @property
    def paths(self) -> list[str]:
        return list(self._changes)
