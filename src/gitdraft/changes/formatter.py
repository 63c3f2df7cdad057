"""Render a ChangeSet as the Markdown-ish block fed to the prompt."""

from __future__ import annotations

from gitdraft.changes.models import ChangeSet


def format_changes(changes: ChangeSet) -> str:
    """Render changes sorted by path; "" means nothing to summarize.

    Paths and summaries are emitted verbatim, so a literal ``**`` in either
    shows up unescaped.
    """
    lines: list[str] = []
    for change in sorted(changes, key=lambda c: c.path):
        lines.append(f"- **{change.path}**: {change.kind}\n")
        lines.extend(f"  - {summary}\n" for summary in change.summaries)
    return "".join(lines)
