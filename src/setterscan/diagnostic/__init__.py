# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - During config loading and setter discovery, diagnostics are accumulated
      in a mutable `DiagnosticLog`.
    - Reports and frozen configs store them as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from setterscan.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "FrozenDiagnosticLog",
]
