# topmark:header:start
#
#   project      : SetterScan
#   file         : errors.py
#   file_relpath : src/setterscan/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SetterScan engine.

Two tiers exist:

- `SetterDiscoveryWarning` is *recoverable*: the discovery session catches it
  and records its message as a warning diagnostic, then carries on with the
  field-level markers only.
- Every other `SetterscanError` is *fatal*: it aborts the discovery pass and
  propagates to the caller (the CLI maps these onto exit codes).
"""

from __future__ import annotations


class SetterscanError(Exception):
    """Base class for all SetterScan errors."""


class SetterDiscoveryWarning(SetterscanError):
    """A recoverable problem found while reading setters from the Kptfile."""


class ResourceLoadError(SetterscanError):
    """A package file could not be read or is not valid YAML."""


class MalformedResourceError(SetterscanError):
    """A document does not have the shape of a KRM resource."""


class ManifestReadError(SetterscanError):
    """The Kptfile was found but its contents cannot be interpreted."""


class ConfigPathNotFoundError(SetterscanError):
    """The ``configPath`` of the setter function names a file that is not in the package."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f'file {path} doesn\'t exist, please ensure the file specified in "configPath" '
            "exists and retry"
        )
        self.path = path
