# topmark:header:start
#
#   project      : SetterScan
#   file         : patterns.py
#   file_relpath : src/setterscan/setters/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recover setter bindings from a templated pattern and an observed value.

A pattern such as ``my-app-layer.${stage}.${domain}.${tld}`` is split into
literal and placeholder segments. Literal segments are escaped, each
placeholder becomes a greedy capture group, and the resulting expression must
match the *whole* value::

    >>> resolve("my-app-layer.${stage}.${domain}.${tld}", "my-app-layer.dev.example.com")
    {'stage': 'dev', 'domain': 'example', 'tld': 'com'}

Resolution is all-or-nothing. When the value does not fit the pattern, or any
placeholder would bind to an empty string, no binding at all is returned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from setterscan.config.logging import get_logger
from setterscan.setters.markers import clean

if TYPE_CHECKING:
    from setterscan.config.logging import SetterscanLogger

logger: SetterscanLogger = get_logger(__name__)

PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"\$\{([^}]*)\}")

CAPTURE_GROUP: Final[str] = "(.*)"


@dataclass(frozen=True, slots=True)
class PatternSegment:
    """A literal run of text, or a ``${name}`` placeholder occurrence."""

    text: str
    placeholder: bool = False

    @property
    def name(self) -> str:
        """Return the setter name of a placeholder segment."""
        return clean(self.text)


def tokenize(pattern: str) -> list[PatternSegment]:
    """Split ``pattern`` into literal and placeholder segments, left to right.

    Repeated placeholders yield one segment per occurrence. Empty literal runs
    are omitted.

    Examples:
        >>> [s.text for s in tokenize("foo-${image}:${tag}")]
        ['foo-', '${image}', ':', '${tag}']
    """
    segments: list[PatternSegment] = []
    pos = 0
    for match in PLACEHOLDER_RE.finditer(pattern):
        if match.start() > pos:
            segments.append(PatternSegment(pattern[pos : match.start()]))
        segments.append(PatternSegment(match.group(0), placeholder=True))
        pos = match.end()
    if pos < len(pattern):
        segments.append(PatternSegment(pattern[pos:]))
    return segments


def has_placeholders(pattern: str) -> bool:
    """Return True if ``pattern`` contains at least one ``${...}`` placeholder."""
    return PLACEHOLDER_RE.search(pattern) is not None


def build_matcher(segments: list[PatternSegment]) -> re.Pattern[str] | None:
    """Compile segments into an expression with one capture group per placeholder.

    Returns:
        re.Pattern[str] | None: The compiled expression, or ``None`` if it cannot
            be compiled.
    """
    expression: str = "".join(
        CAPTURE_GROUP if segment.placeholder else re.escape(segment.text) for segment in segments
    )
    try:
        return re.compile(expression, re.DOTALL)
    except re.error as exc:
        logger.debug("Cannot compile matcher %r: %s", expression, exc)
        return None


def resolve(pattern: str, value: str) -> dict[str, str]:
    """Derive setter values from ``pattern`` and the field ``value``.

    Args:
        pattern (str): Setter pattern, e.g. ``${image}:${tag}``.
        value (str): Literal value of the field carrying the pattern.

    Returns:
        dict[str, str]: Setter name to bound value. Empty when the pattern has
            no placeholders, the value does not match, or any placeholder would
            bind to an empty string. A placeholder repeated in the pattern
            takes its last captured value.
    """
    segments: list[PatternSegment] = tokenize(pattern)
    placeholders: list[PatternSegment] = [s for s in segments if s.placeholder]
    if not placeholders:
        return {}

    matcher: re.Pattern[str] | None = build_matcher(segments)
    if matcher is None:
        return {}
    match: re.Match[str] | None = matcher.fullmatch(value)
    if match is None:
        logger.trace("Value %r does not match pattern %r", value, pattern)
        return {}

    captured: tuple[str, ...] = match.groups()
    if len(captured) != len(placeholders):
        return {}
    if any(c == "" for c in captured):
        # Partial bindings are never reported; all values must be resolved.
        logger.trace("Empty capture for pattern %r and value %r", pattern, value)
        return {}

    bindings: dict[str, str] = {}
    for segment, captured_value in zip(placeholders, captured):
        bindings[segment.name] = captured_value
    return bindings


def bare_setter_name(pattern: str) -> str | None:
    """Return the setter name of a pattern that names a single setter outright.

    ``replicas`` and ``${replicas}`` both name ``replicas``; a pattern that mixes
    placeholders with literal text (or holds several) names no single setter.

    Examples:
        >>> bare_setter_name("${environments}")
        'environments'
        >>> bare_setter_name("${image}:${tag}") is None
        True
    """
    segments: list[PatternSegment] = tokenize(pattern.strip())
    if len(segments) == 1 and segments[0].placeholder:
        return segments[0].name
    if any(segment.placeholder for segment in segments):
        return None
    return clean(pattern)
