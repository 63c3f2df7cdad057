"""Internal pygit2 constants - keeps trivia out of public modules."""

from __future__ import annotations

from pygit2.enums import DiffFind, DiffOption

# Diff flags
DIFF_NORMAL = DiffOption.NORMAL
DIFF_UNTRACKED = (
    DiffOption.INCLUDE_UNTRACKED
    | DiffOption.RECURSE_UNTRACKED_DIRS
    | DiffOption.SHOW_UNTRACKED_CONTENT
)

# Similarity detection (untracked files may be the new side of a rename)
FIND_SIMILAR = DiffFind.FIND_RENAMES | DiffFind.FIND_COPIES | DiffFind.FIND_FOR_UNTRACKED
