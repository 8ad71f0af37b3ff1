# topmark:header:start
#
#   project      : SetterScan
#   file         : api.py
#   file_relpath : src/setterscan/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public SetterScan API (stable surface).

Integrations that want setter discovery without going through the CLI use the
functions here. They accept either a frozen `Config` or a plain mapping that
mirrors the TOML shape, and always run against an immutable snapshot:

```python
from setterscan import api

report = api.list_setters(
    "path/to/package",
    config={"discovery": {"setter_function": "apply-setters"}},
)
for result in report.results:
    print(result)
```

Fatal problems raise `SetterscanError` subclasses; recoverable ones are
returned in `DiscoveryReport.warnings`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from setterscan.config.logging import get_logger
from setterscan.config.model import Config, MutableConfig
from setterscan.constants import SETTERSCAN_VERSION
from setterscan.file_resolver import resolve_package_files
from setterscan.resources.loader import load_resource_files, parse_resources
from setterscan.setters.discovery import DiscoveryReport, discover_setters

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from setterscan.config.logging import SetterscanLogger
    from setterscan.resources.model import Resource

logger: SetterscanLogger = get_logger(__name__)

__all__: list[str] = [
    "DiscoveryReport",
    "list_setters",
    "list_setters_in_resources",
    "list_setters_in_text",
    "load_package",
    "version",
]


def _ensure_config(config: Mapping[str, Any] | Config | None, root: Path | None) -> Config:
    """Normalize the ``config`` argument into a frozen snapshot.

    A mapping is treated as the highest-precedence TOML layer on top of the
    configuration discovered in ``root``.
    """
    if isinstance(config, Config):
        return config
    merged: MutableConfig = MutableConfig.load_merged(root)
    if config is not None:
        merged.merge_with(MutableConfig.from_toml_dict(dict(config)))
    return merged.freeze()


def load_package(path: Path | str, config: Config | None = None) -> list[Resource]:
    """Read every selected file of the package at ``path`` into resources.

    ``path`` may also name a single YAML file.

    Raises:
        ResourceLoadError: If a file cannot be read or parsed.
        MalformedResourceError: If a document is not a mapping.
    """
    root = Path(path)
    snapshot: Config = config or Config.from_defaults()
    files: list[Path] = resolve_package_files(root, snapshot)
    base: Path = root.parent if root.is_file() else root
    return load_resource_files(files, root=base)


def list_setters_in_resources(
    resources: Iterable[Resource],
    *,
    config: Mapping[str, Any] | Config | None = None,
) -> DiscoveryReport:
    """Discover setters in already-loaded resources."""
    return discover_setters(resources, _ensure_config(config, None))


def list_setters_in_text(
    text: str,
    *,
    path: str = "resources.yaml",
    config: Mapping[str, Any] | Config | None = None,
) -> DiscoveryReport:
    """Discover setters in a (multi-document) YAML text.

    Documents without a path annotation are identified by ``path``.
    """
    return list_setters_in_resources(parse_resources(text, path=path), config=config)


def list_setters(
    path: Path | str,
    *,
    config: Mapping[str, Any] | Config | None = None,
) -> DiscoveryReport:
    """Discover setters in the package directory at ``path``.

    Args:
        path (Path | str): Package directory (or a single YAML file).
        config (Mapping[str, Any] | Config | None): Frozen config, or a TOML-shaped
            mapping layered over the configuration found in the package.

    Returns:
        DiscoveryReport: Name-sorted results and Kptfile warnings.

    Raises:
        SetterscanError: On any fatal loading or discovery error.
    """
    root = Path(path)
    snapshot: Config = _ensure_config(config, root if root.is_dir() else None)
    resources: list[Resource] = load_package(root, snapshot)
    logger.debug("Listing setters for %s", root)
    return discover_setters(resources, snapshot)


def version() -> str:
    """Return the installed SetterScan version."""
    return SETTERSCAN_VERSION
