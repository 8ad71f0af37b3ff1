# topmark:header:start
#
#   project      : SetterScan
#   file         : strategies_setterscan.py
#   file_relpath : tests/strategies_setterscan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for setter patterns and the values they render to.

Patterns are built from distinct setter names separated by a single separator
character. Setter values are drawn from an alphabet disjoint from the separator
alphabet, so every rendered value has exactly one way to resolve back.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

NAME_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz"
VALUE_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz0123456789"
SEPARATOR_ALPHABET: str = ".-:/@_="


@dataclass(frozen=True)
class RenderedPattern:
    """A setter pattern, the bindings used to render it, and the rendered value."""

    pattern: str
    bindings: dict[str, str]
    value: str


def render(pattern_parts: list[tuple[str, str | None]], bindings: dict[str, str]) -> str:
    """Substitute ``bindings`` into ``(literal, name)`` parts."""
    return "".join(literal + (bindings[name] if name else "") for literal, name in pattern_parts)


s_setter_name: st.SearchStrategy[str] = st.text(NAME_ALPHABET, min_size=1, max_size=8)
s_setter_value: st.SearchStrategy[str] = st.text(VALUE_ALPHABET, min_size=1, max_size=12)
s_separator: st.SearchStrategy[str] = st.sampled_from(SEPARATOR_ALPHABET)
s_edge_literal: st.SearchStrategy[str] = st.text(SEPARATOR_ALPHABET + "xyz", max_size=5)


@st.composite
def s_pattern_parts(draw: Draw, *, max_placeholders: int = 4) -> list[tuple[str, str | None]]:
    """Return ``(literal, name)`` parts of a pattern with distinct placeholder names.

    The final part carries the trailing literal and no name.
    """
    names: list[str] = draw(
        st.lists(s_setter_name, min_size=1, max_size=max_placeholders, unique=True)
    )
    parts: list[tuple[str, str | None]] = []
    for index, name in enumerate(names):
        literal: str = draw(s_edge_literal) if index == 0 else draw(s_separator)
        parts.append((literal, name))
    parts.append((draw(s_edge_literal), None))
    return parts


@st.composite
def s_rendered_pattern(draw: Draw) -> RenderedPattern:
    """Return a pattern together with bindings and the value they render to."""
    parts: list[tuple[str, str | None]] = draw(s_pattern_parts())
    bindings: dict[str, str] = {name: draw(s_setter_value) for _, name in parts if name}
    pattern: str = "".join(literal + ("${" + name + "}" if name else "") for literal, name in parts)
    return RenderedPattern(pattern=pattern, bindings=bindings, value=render(parts, bindings))


@st.composite
def s_pattern_and_parts(draw: Draw) -> tuple[str, list[tuple[str, str | None]]]:
    """Return a pattern string together with its ``(literal, name)`` parts."""
    parts: list[tuple[str, str | None]] = draw(s_pattern_parts())
    pattern: str = "".join(literal + ("${" + name + "}" if name else "") for literal, name in parts)
    return pattern, parts
