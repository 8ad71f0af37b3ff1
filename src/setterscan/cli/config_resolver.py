# topmark:header:start
#
#   project      : SetterScan
#   file         : config_resolver.py
#   file_relpath : src/setterscan/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the SetterScan configuration from Click parameters.

Bridges CLI parsing and `setterscan.config.model`: builds the overrides
namespace from command options and merges it over the configuration found in
the package directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypedDict

from setterscan.cli.errors import SetterscanConfigError
from setterscan.config.logging import get_logger
from setterscan.config.model import MutableConfig
from setterscan.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from setterscan.config.logging import SetterscanLogger
    from setterscan.config.model import Config

logger: SetterscanLogger = get_logger(__name__)


class ArgsNamespace(TypedDict, total=False):
    """CLI overrides understood by `MutableConfig.apply_args`.

    Attributes:
        manifest (str | None): Path identity of the package manifest.
        setter_function (str | None): Setter function image substring.
        include_patterns (list[str]): Include patterns replacing the configured ones.
        exclude_patterns (list[str]): Exclude patterns replacing the configured ones.
    """

    manifest: str | None
    setter_function: str | None
    include_patterns: list[str]
    exclude_patterns: list[str]


def build_args_namespace(
    *,
    manifest: str | None = None,
    setter_function: str | None = None,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
) -> ArgsNamespace:
    """Return the overrides namespace for the given option values."""
    return {
        "manifest": manifest,
        "setter_function": setter_function,
        "include_patterns": list(include_patterns),
        "exclude_patterns": list(exclude_patterns),
    }


def resolve_config_from_click(
    *,
    root: Path | None,
    config_paths: Sequence[str] = (),
    no_config: bool = False,
    args: ArgsNamespace | None = None,
) -> Config:
    """Build a frozen `Config` from Click parameters.

    Resolution order (lowest to highest precedence): defaults,
    ``pyproject.toml`` and ``setterscan.toml`` in ``root`` (unless ``no_config``),
    ``--config`` files in order, then ``args``.

    Raises:
        SetterscanConfigError: If a configuration file could not be loaded.
    """
    merged: MutableConfig = MutableConfig.load_merged(
        root,
        config_files=[Path(p) for p in config_paths],
        no_config=no_config,
        args=args,
    )
    if merged.diagnostics.has_error():
        errors: list[str] = merged.diagnostics.freeze().messages(DiagnosticLevel.ERROR)
        raise SetterscanConfigError("; ".join(errors))
    config: Config = merged.freeze()
    logger.debug("Resolved config: %s", config)
    return config
