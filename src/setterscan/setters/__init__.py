# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/setters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Setter discovery engine.

Submodules, leaves first:
    - `markers`: recognize ``# kpt-set:`` comments.
    - `patterns`: recover ``${name}`` bindings from a pattern and a value.
    - `registry`: create-or-increment store of scalar and array setters.
    - `manifest`: read setters declared in the Kptfile pipeline.
    - `walker`: visit resource trees and feed the registry.
    - `discovery`: one discovery session producing a `DiscoveryReport`.
"""

from __future__ import annotations

from setterscan.setters.discovery import DiscoveryReport, SetterDiscovery, discover_setters
from setterscan.setters.registry import ArraySetter, ScalarSetter, SetterRegistry, SetterResult

__all__ = [
    "ArraySetter",
    "DiscoveryReport",
    "ScalarSetter",
    "SetterDiscovery",
    "SetterRegistry",
    "SetterResult",
    "discover_setters",
]
