"""Aggregate a diff into one FileChange per path."""

from __future__ import annotations

from contextlib import nullcontext
from typing import TYPE_CHECKING

import structlog

from gitdraft.changes.models import ChangeKind, ChangeSet
from gitdraft.changes.summarizer import summarize_line
from gitdraft.changes.visitor import RenderGuard, walk_diff
from gitdraft.config.constants import SUMMARY_WIDTH_DEFAULT, UNKNOWN_FILE

if TYPE_CHECKING:
    import pygit2

log = structlog.get_logger(__name__)


def delta_path(delta: pygit2.DiffDelta) -> str:
    """New path, else old path (deletions), else the UNKNOWN_FILE sentinel."""
    for diff_file in (delta.new_file, delta.old_file):
        path = getattr(diff_file, "path", None)
        if path:
            return path
    return UNKNOWN_FILE


class ChangeCollector:
    """DiffVisitor that builds a ChangeSet.

    Records are created at file level, so files without +/- lines (pure
    renames, mode changes, binaries) still show up with no summaries.
    Lines are attributed through their owning delta, never through hunk
    boundaries.
    """

    def __init__(self, summary_width: int = SUMMARY_WIDTH_DEFAULT) -> None:
        self.changes = ChangeSet()
        self._summary_width = summary_width

    def visit_file(self, delta: pygit2.DiffDelta) -> None:
        self.changes.record(delta_path(delta), ChangeKind.from_status(delta.status))

    def visit_hunk(self, delta: pygit2.DiffDelta, hunk: pygit2.DiffHunk) -> None:
        pass

    def visit_line(
        self, delta: pygit2.DiffDelta, hunk: pygit2.DiffHunk, line: pygit2.DiffLine
    ) -> None:
        change = self.changes.record(delta_path(delta), ChangeKind.from_status(delta.status))
        summary = summarize_line(line.origin, line.raw_content, self._summary_width)
        if summary:
            change.summaries.append(summary)


def collect_changes(
    diff: pygit2.Diff,
    summary_width: int = SUMMARY_WIDTH_DEFAULT,
    *,
    render_guard: RenderGuard = nullcontext,
) -> ChangeSet:
    collector = ChangeCollector(summary_width)
    walk_diff(diff, collector, render_guard=render_guard)
    log.debug("changes_collected", files=len(collector.changes))
    return collector.changes
