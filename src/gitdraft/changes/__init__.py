"""Diff traversal, line summaries and change-set formatting."""

from gitdraft.changes.collector import ChangeCollector, collect_changes, delta_path
from gitdraft.changes.formatter import format_changes
from gitdraft.changes.models import ChangeKind, ChangeSet, FileChange
from gitdraft.changes.summarizer import summarize_line, truncate
from gitdraft.changes.visitor import DiffVisitor, walk_diff

__all__ = [
    # Models
    "ChangeKind",
    "ChangeSet",
    "FileChange",
    # Traversal
    "ChangeCollector",
    "DiffVisitor",
    "collect_changes",
    "delta_path",
    "walk_diff",
    # Rendering
    "format_changes",
    "summarize_line",
    "truncate",
]
