# topmark:header:start
#
#   project      : SetterScan
#   file         : walker.py
#   file_relpath : src/setterscan/setters/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Depth-first walk of a resource tree, recording setter markers in a registry.

Two visitor rules apply:

- **Mapping fields** whose value is a sequence and whose marker comment names a
  single setter record an *array* setter with the sorted scalar elements;
  templated patterns are not supported on sequences.
- **Scalar leaves** whose own comment carries a marker record *scalar* setters:
  a pattern with ``${...}`` placeholders is resolved against the literal value,
  a bare name binds the whole value.

Every mapping field and scalar leaf is visited exactly once, in document order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from setterscan.config.logging import get_logger
from setterscan.errors import MalformedResourceError
from setterscan.resources.model import MappingNode, ScalarNode, SequenceNode
from setterscan.setters.markers import clean, extract_setter_pattern
from setterscan.setters.patterns import bare_setter_name, has_placeholders, resolve

if TYPE_CHECKING:
    from setterscan.config.logging import SetterscanLogger
    from setterscan.resources.model import Node, Resource
    from setterscan.setters.registry import SetterRegistry

logger: SetterscanLogger = get_logger(__name__)


def current_setter_values(pattern: str, value: str) -> dict[str, str]:
    """Return the setter bindings a scalar field contributes.

    Args:
        pattern (str): Setter pattern from the field's marker comment.
        value (str): Literal value of the field.

    Returns:
        dict[str, str]: ``{name: value}`` for a bare setter name, otherwise the
            bindings recovered by `resolve` (possibly empty).
    """
    if not has_placeholders(pattern):
        return {clean(pattern): value}
    return resolve(pattern, value)


class SetterWalker:
    """Visitor feeding setter markers of resource trees into a `SetterRegistry`.

    Args:
        registry (SetterRegistry): The session's registry, updated in place.
    """

    def __init__(self, registry: SetterRegistry) -> None:
        self.registry = registry
        self._path: str = ""

    def walk(self, resource: Resource) -> None:
        """Visit every mapping field and scalar leaf of ``resource``.

        Raises:
            MalformedResourceError: If the tree contains an object that is not a node.
        """
        self._path = resource.path
        logger.trace("Walking %s (document %d)", resource.path, resource.index)
        self._accept(resource.root)

    def _accept(self, node: Node) -> None:
        if isinstance(node, MappingNode):
            self.visit_mapping(node)
            for entry in node.fields:
                self._accept(entry.value)
        elif isinstance(node, SequenceNode):
            for item in node.items:
                self._accept(item)
        elif isinstance(node, ScalarNode):
            self.visit_scalar(node)
        else:
            raise MalformedResourceError(
                f"{self._path}: unreadable field of type {type(node).__name__}"
            )

    def visit_mapping(self, node: MappingNode) -> None:
        """Record array setters for sequence-valued fields carrying a marker."""
        for entry in node.fields:
            if not isinstance(entry.value, SequenceNode):
                continue
            pattern: str | None = extract_setter_pattern(entry.array_comment)
            if pattern is None:
                continue
            name: str | None = bare_setter_name(pattern)
            if name is None:
                logger.debug(
                    "%s: array field %r has a templated pattern %r; skipped",
                    self._path,
                    entry.key,
                    pattern,
                )
                continue
            values: list[str] = sorted(entry.value.scalar_values())
            logger.trace("%s: array setter %r on field %r", self._path, name, entry.key)
            self.registry.record_array(name, values)

    def visit_scalar(self, node: ScalarNode) -> None:
        """Record scalar setters bound by a scalar carrying a marker."""
        pattern: str | None = extract_setter_pattern(node.comment)
        if pattern is None:
            return
        bindings: dict[str, str] = current_setter_values(pattern, node.value)
        if not bindings:
            logger.debug(
                "%s: value %r does not resolve pattern %r", self._path, node.value, pattern
            )
        for name, value in bindings.items():
            self.registry.record_scalar(name, value)
