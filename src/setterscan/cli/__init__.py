# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan CLI package.

This package groups the Click command definitions and supporting utilities
for the ``setterscan`` command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        setterscan = "setterscan.cli.main:cli"

All subcommands live in `setterscan.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
