# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/resources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource documents: the immutable node tree, the YAML loader and the ResourceList codec."""

from __future__ import annotations

from setterscan.resources.model import (
    Field,
    MappingNode,
    Node,
    Resource,
    ScalarNode,
    SequenceNode,
)

__all__ = [
    "Field",
    "MappingNode",
    "Node",
    "Resource",
    "ScalarNode",
    "SequenceNode",
]
