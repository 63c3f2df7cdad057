"""Configuration constants.

Fixed values of the change summary format. For configurable values, see
models.py (ChangesConfig, PromptConfig).
"""

SUMMARY_WIDTH_DEFAULT = 80
"""Maximum characters of line content kept in a summary."""

ELLIPSIS = "..."
"""Marker appended to truncated line content."""

SUMMARY_WIDTH_MIN = len(ELLIPSIS) + 1
"""Smallest width that still keeps at least one character of content."""

UNKNOWN_FILE = "Unknown file"
"""Path used when a delta carries neither a new nor an old path."""

CONTEXT_LINES_DEFAULT = 3
"""Unchanged lines git keeps around each hunk."""

DEFAULT_MODEL = "gpt-4"
"""Model name written into rendered chat requests."""
