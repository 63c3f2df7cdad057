"""One-line annotations for added and removed diff lines."""

from __future__ import annotations

from gitdraft.config.constants import ELLIPSIS, SUMMARY_WIDTH_DEFAULT

_PREFIXES = {
    "+": "Added: ",
    "-": "Removed: ",
}


def truncate(text: str, limit: int = SUMMARY_WIDTH_DEFAULT) -> str:
    """Cut text to at most limit characters, marking the cut with an ellipsis.

    Slicing a str works on code points, so multi-byte characters are never split.
    """
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def decode_content(raw: bytes) -> str:
    """Decode line bytes as UTF-8, replacing invalid sequences, and strip whitespace."""
    return raw.decode("utf-8", errors="replace").strip()


def summarize_line(origin: str, raw: bytes, limit: int = SUMMARY_WIDTH_DEFAULT) -> str:
    """Summarize a changed line, or return "" for context/header/EOF lines.

    >>> summarize_line("+", b"hello world\\n")
    'Added: hello world'
    >>> summarize_line(" ", b"unchanged\\n")
    ''
    """
    prefix = _PREFIXES.get(origin)
    if prefix is None:
        return ""
    return prefix + truncate(decode_content(raw), limit)
