# topmark:header:start
#
#   project      : SetterScan
#   file         : constants.py
#   file_relpath : src/setterscan/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    SETTERSCAN_VERSION: str = get_version("setterscan")
except PackageNotFoundError:  # running from a source checkout
    SETTERSCAN_VERSION = "0.0.0"

# Comment prefix (trailing space included) that marks a setter-controlled field.
SETTER_COMMENT_IDENTIFIER: Final[str] = "# kpt-set: "

# Package manifest and the pipeline function that declares setter values.
KPTFILE_NAME: Final[str] = "Kptfile"
APPLY_SETTERS_IMAGE: Final[str] = "apply-setters"

# Resource annotations carrying the originating file of a resource.
PATH_ANNOTATION: Final[str] = "config.kubernetes.io/path"
LEGACY_PATH_ANNOTATION: Final[str] = "internal.config.kubernetes.io/path"
INDEX_ANNOTATION: Final[str] = "config.kubernetes.io/index"
LEGACY_INDEX_ANNOTATION: Final[str] = "internal.config.kubernetes.io/index"

# Result type tags.
ARRAY_SETTER_TYPE: Final[str] = "list"
SCALAR_SETTER_TYPE: Final[str] = "string"

# Per-package configuration file names, in lookup order.
SETTERSCAN_TOML_NAME: Final[str] = "setterscan.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "setterscan"
