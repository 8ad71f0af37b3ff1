# topmark:header:start
#
#   project      : SetterScan
#   file         : markers.py
#   file_relpath : src/setterscan/setters/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recognize setter comment markers and normalize setter names."""

from __future__ import annotations

from setterscan.constants import SETTER_COMMENT_IDENTIFIER


def extract_setter_pattern(line_comment: str | None) -> str | None:
    """Return the setter pattern carried by a line comment.

    Args:
        line_comment (str | None): The comment attached to a field, including its ``#``.

    Returns:
        str | None: The text after ``# kpt-set: ``, trimmed of surrounding
            whitespace, or ``None`` if the comment is not a setter marker (or
            the marker is followed by nothing).

    Examples:
        >>> extract_setter_pattern("# kpt-set: ${image}:${tag}")
        '${image}:${tag}'
        >>> extract_setter_pattern("# just a comment") is None
        True
    """
    if not line_comment or not line_comment.startswith(SETTER_COMMENT_IDENTIFIER):
        return None
    pattern: str = line_comment[len(SETTER_COMMENT_IDENTIFIER) :].strip()
    return pattern or None


def clean(text: str) -> str:
    """Strip surrounding whitespace and one enclosing ``${`` ... ``}`` from ``text``."""
    text = text.strip()
    if text.startswith("${"):
        text = text[2:]
    if text.endswith("}"):
        text = text[:-1]
    return text
