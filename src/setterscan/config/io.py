# topmark:header:start
#
#   project      : SetterScan
#   file         : io.py
#   file_relpath : src/setterscan/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Two families of getters exist:
- *Unchecked* getters return defaults and only emit **debug** logs.
- *Checked* getters validate the expected shape and record **warnings** in a
  `DiagnosticLog` (and also log a warning).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from setterscan.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from setterscan.config.logging import SetterscanLogger
    from setterscan.diagnostic.model import DiagnosticLog

TomlTable: TypeAlias = dict[str, Any]

logger: SetterscanLogger = get_logger(__name__)


class TomlLoadError(Exception):
    """Raised when a TOML document cannot be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``setterscan.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        TomlLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise TomlLoadError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise TomlLoadError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict when missing or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Value for %r is not a table: %r", key, value)
    return {}


def get_string_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Extract an optional string value, recording a warning on a type mismatch.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location (e.g. ``"[discovery]"``) for messages.
        diagnostics (DiagnosticLog): Log receiving a warning for non-string values.

    Returns:
        str | None: The string value, or ``None`` when absent or invalid.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    message = f"{where}: '{key}' must be a string, got {type(value).__name__}; ignored"
    logger.warning(message)
    diagnostics.add_warning(message)
    return None


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Extract an optional list of strings, dropping (and reporting) invalid entries.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location for messages.
        diagnostics (DiagnosticLog): Log receiving warnings for invalid values.

    Returns:
        list[str] | None: The string entries, or ``None`` when the key is absent
            or its value is not a list.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        message = f"{where}: '{key}' must be a list of strings; ignored"
        logger.warning(message)
        diagnostics.add_warning(message)
        return None
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            message = f"{where}: ignoring non-string entry {item!r} in '{key}'"
            logger.warning(message)
            diagnostics.add_warning(message)
    return out


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as TOML text."""
    return tomlkit.dumps(data)
