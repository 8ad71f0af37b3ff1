# topmark:header:start
#
#   project      : SetterScan
#   file         : keys.py
#   file_relpath : src/setterscan/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SetterScan configuration.

These constants are the external configuration schema as it appears in
``setterscan.toml`` and in ``[tool.setterscan]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SetterScan configuration."""

    # [discovery]
    SECTION_DISCOVERY: Final[str] = "discovery"

    KEY_MANIFEST: Final[str] = "manifest"
    KEY_SETTER_FUNCTION: Final[str] = "setter_function"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"

    @classmethod
    def known_keys(cls) -> dict[str, frozenset[str]]:
        """Return the known keys per section, used to flag unknown entries."""
        return {
            cls.SECTION_DISCOVERY: frozenset({cls.KEY_MANIFEST, cls.KEY_SETTER_FUNCTION}),
            cls.SECTION_FILES: frozenset({cls.KEY_INCLUDE, cls.KEY_EXCLUDE}),
        }
