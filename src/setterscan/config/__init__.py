# topmark:header:start
#
#   project      : SetterScan
#   file         : __init__.py
#   file_relpath : src/setterscan/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for SetterScan.

Submodules:
    - `setterscan.config.logging`: TRACE-aware logging setup.
    - `setterscan.config.keys`: TOML schema constants.
    - `setterscan.config.io`: tomlkit-based loading and typed getters.
    - `setterscan.config.model`: `MutableConfig` builder and frozen `Config`.

This package initializer stays import-light: the logging module is imported by
nearly every other module, so it must not pull in the config model.
"""

from __future__ import annotations
