# topmark:header:start
#
#   project      : SetterScan
#   file         : model.py
#   file_relpath : src/setterscan/resources/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable document tree used by setter discovery.

Each parsed resource is represented as a tree of frozen nodes. Mapping fields
are `Field` triples ``(key, value, key_comment)`` so the walker can decide which
comment carries a setter marker without touching the parser's own objects:

- a scalar value carries its own end-of-line comment (``image: nginx # ...``);
- a block sequence is marked by the comment on its key line (``args: # ...``);
- a flow sequence carries the comment written after it (``args: [a, b] # ...``).

Scalars always keep their literal source text, so ``3``, ``true`` and ``1.10``
are compared exactly as written.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """A scalar leaf holding its literal text and end-of-line comment."""

    value: str
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class SequenceNode:
    """A sequence node; ``flow`` is True for the single-line ``[a, b]`` style."""

    items: tuple[Node, ...] = ()
    comment: str | None = None
    flow: bool = False

    def scalar_values(self) -> list[str]:
        """Return the literal text of the scalar elements, in document order."""
        return [item.value for item in self.items if isinstance(item, ScalarNode)]


@dataclass(frozen=True, slots=True)
class Field:
    """One mapping entry: key, value and the comment trailing the key line."""

    key: str
    value: Node
    key_comment: str | None = None

    @property
    def array_comment(self) -> str | None:
        """Return the comment that marks this field as an array setter.

        The key comment is used unless the value is a flow-style sequence, in
        which case the comment written after the sequence wins.
        """
        if isinstance(self.value, SequenceNode) and self.value.flow:
            return self.value.comment
        return self.key_comment


@dataclass(frozen=True, slots=True)
class MappingNode:
    """A mapping node; fields keep their document order."""

    fields: tuple[Field, ...] = ()

    def get(self, key: str) -> Node | None:
        """Return the value of the first field named ``key``, if any."""
        for entry in self.fields:
            if entry.key == key:
                return entry.value
        return None

    def get_mapping(self, *path: str) -> MappingNode | None:
        """Follow ``path`` through nested mappings; ``None`` if any step is missing."""
        node: Node | None = self
        for key in path:
            if not isinstance(node, MappingNode):
                return None
            node = node.get(key)
        return node if isinstance(node, MappingNode) else None

    def get_scalar(self, key: str) -> str | None:
        """Return the literal text of scalar field ``key``, if present."""
        node: Node | None = self.get(key)
        return node.value if isinstance(node, ScalarNode) else None

    def to_string_map(self) -> dict[str, str]:
        """Return the scalar fields of this mapping as a ``name -> text`` dict."""
        return {
            entry.key: entry.value.value
            for entry in self.fields
            if isinstance(entry.value, ScalarNode)
        }


Node: TypeAlias = "ScalarNode | SequenceNode | MappingNode"


@dataclass(frozen=True, slots=True)
class Resource:
    """A single parsed document and its file identity.

    Attributes:
        root (MappingNode): Top-level mapping of the document.
        path (str): Package-relative POSIX path identifying the source file.
        index (int): Position of the document within its file.
    """

    root: MappingNode
    path: str
    index: int = 0

    @property
    def kind(self) -> str | None:
        """Return the resource ``kind``, if declared."""
        return self.root.get_scalar("kind")

    @property
    def data(self) -> dict[str, str]:
        """Return the ``data`` section as a string map (empty when absent)."""
        data: MappingNode | None = self.root.get_mapping("data")
        return data.to_string_map() if data is not None else {}
