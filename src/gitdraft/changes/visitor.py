"""Depth-first traversal of a diff: file delta -> hunk -> line."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import pygit2

RenderGuard = Callable[[], AbstractContextManager[object]]


class DiffVisitor(Protocol):
    """Hooks called in strict hierarchical order by walk_diff."""

    def visit_file(self, delta: pygit2.DiffDelta) -> None: ...

    def visit_hunk(self, delta: pygit2.DiffDelta, hunk: pygit2.DiffHunk) -> None: ...

    def visit_line(
        self, delta: pygit2.DiffDelta, hunk: pygit2.DiffHunk, line: pygit2.DiffLine
    ) -> None: ...


def walk_diff(
    diff: pygit2.Diff,
    visitor: DiffVisitor,
    *,
    render_guard: RenderGuard = nullcontext,
) -> None:
    """Visit every delta, hunk and line of diff. There is no early exit.

    Patches are rendered lazily by libgit2; render_guard wraps only that
    rendering, never the visitor hooks.
    """
    for idx, delta in enumerate(diff.deltas):
        visitor.visit_file(delta)
        with render_guard():
            # libgit2 hands back no patch for deltas without text content
            patch = diff[idx]
            hunks = list(patch.hunks) if patch is not None else []
        for hunk in hunks:
            visitor.visit_hunk(delta, hunk)
            for line in hunk.lines:
                visitor.visit_line(delta, hunk, line)
