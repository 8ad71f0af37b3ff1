# topmark:header:start
#
#   project      : SetterScan
#   file         : model.py
#   file_relpath : src/setterscan/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by setter discovery.
    - `MutableConfig`: a mutable builder used while loading and merging
      layers; it can be frozen into `Config` and thawed back for edits.

Layers, lowest precedence first:
    1. Built-in defaults (`MutableConfig.from_defaults`).
    2. ``[tool.setterscan]`` in the package's ``pyproject.toml``.
    3. ``setterscan.toml`` in the package directory.
    4. Explicit config files, in the order given.
    5. CLI / API overrides (`MutableConfig.apply_args`).

A value of ``None`` on a builder means "inherit"; list-valued settings replace
(never extend) the inherited list.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from setterscan.config.io import (
    TomlLoadError,
    get_string_list_value_checked,
    get_string_value_checked,
    get_table_value,
    load_toml_dict,
)
from setterscan.config.keys import Toml
from setterscan.config.logging import get_logger
from setterscan.constants import (
    APPLY_SETTERS_IMAGE,
    KPTFILE_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    SETTERSCAN_TOML_NAME,
)
from setterscan.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from setterscan.config.io import TomlTable
    from setterscan.config.logging import SetterscanLogger

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: SetterscanLogger = get_logger(__name__)

DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = ("*.yaml", "*.yml", KPTFILE_NAME)
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (".git/",)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for SetterScan.

    Attributes:
        manifest_name (str): Path identity of the package manifest (``Kptfile``).
        setter_function (str): Substring identifying the setter-applying function
            image in the manifest pipeline.
        include_patterns (tuple[str, ...]): Gitwildmatch patterns selecting package files.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns removing package files.
        config_files (tuple[Path, ...]): Config sources that contributed to this snapshot.
        diagnostics (FrozenDiagnosticLog): Warnings or errors encountered while loading
            or merging config.
    """

    manifest_name: str
    setter_function: str
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    config_files: tuple[Path, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in defaults as a frozen snapshot."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        diagnostics = DiagnosticLog()
        diagnostics.extend(self.diagnostics)
        return MutableConfig(
            manifest_name=self.manifest_name,
            setter_function=self.setter_function,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
            diagnostics=diagnostics,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict."""
        return {
            Toml.SECTION_DISCOVERY: {
                Toml.KEY_MANIFEST: self.manifest_name,
                Toml.KEY_SETTER_FUNCTION: self.setter_function,
            },
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE: list(self.include_patterns),
                Toml.KEY_EXCLUDE: list(self.exclude_patterns),
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder used while merging configuration layers."""

    manifest_name: str | None = None
    setter_function: str | None = None
    include_patterns: list[str] | None = None
    exclude_patterns: list[str] | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            manifest_name=KPTFILE_NAME,
            setter_function=APPLY_SETTERS_IMAGE,
            include_patterns=list(DEFAULT_INCLUDE_PATTERNS),
            exclude_patterns=list(DEFAULT_EXCLUDE_PATTERNS),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed ``setterscan`` TOML table.

        Unknown sections and keys are reported as warnings and otherwise ignored.

        Args:
            data (TomlTable): The parsed table (already unwrapped from ``[tool.setterscan]``).
            source (Path | None): Where the table was read from, recorded in ``config_files``.

        Returns:
            MutableConfig: A builder holding only the values present in ``data``.
        """
        draft = cls()
        if source is not None:
            draft.config_files.append(source)
        label: str = str(source) if source is not None else "<config>"

        known: dict[str, frozenset[str]] = Toml.known_keys()
        for section, table in data.items():
            if section not in known:
                draft.diagnostics.add_warning(f"{label}: unknown section [{section}] ignored")
                continue
            if not isinstance(table, dict):
                draft.diagnostics.add_warning(f"{label}: [{section}] must be a table; ignored")
                continue
            for key in table:
                if key not in known[section]:
                    draft.diagnostics.add_warning(
                        f"{label}: unknown key '{key}' in [{section}] ignored"
                    )

        discovery: TomlTable = get_table_value(data, Toml.SECTION_DISCOVERY)
        where = f"{label} [{Toml.SECTION_DISCOVERY}]"
        draft.manifest_name = get_string_value_checked(
            discovery, Toml.KEY_MANIFEST, where=where, diagnostics=draft.diagnostics
        )
        draft.setter_function = get_string_value_checked(
            discovery, Toml.KEY_SETTER_FUNCTION, where=where, diagnostics=draft.diagnostics
        )

        files: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        where = f"{label} [{Toml.SECTION_FILES}]"
        draft.include_patterns = get_string_list_value_checked(
            files, Toml.KEY_INCLUDE, where=where, diagnostics=draft.diagnostics
        )
        draft.exclude_patterns = get_string_list_value_checked(
            files, Toml.KEY_EXCLUDE, where=where, diagnostics=draft.diagnostics
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``setterscan.toml`` or a ``pyproject.toml``.

        For ``pyproject.toml`` only the ``[tool.setterscan]`` table is used; a
        pyproject without that table yields ``None``.

        Args:
            path (Path): The TOML file to read.

        Returns:
            MutableConfig | None: The layer, or ``None`` if the file holds no
                SetterScan configuration.

        Raises:
            TomlLoadError: If the file cannot be read or parsed.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool: TomlTable = get_table_value(data, "tool")
            if PYPROJECT_TOOL_SECTION not in tool:
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = get_table_value(tool, PYPROJECT_TOOL_SECTION)
        logger.debug("Loaded config layer from %s", path)
        return cls.from_toml_dict(data, source=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` onto this builder (``other`` wins where set).

        Args:
            other (MutableConfig): Higher-precedence layer.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if other.manifest_name is not None:
            self.manifest_name = other.manifest_name
        if other.setter_function is not None:
            self.setter_function = other.setter_function
        if other.include_patterns is not None:
            self.include_patterns = list(other.include_patterns)
        if other.exclude_patterns is not None:
            self.exclude_patterns = list(other.exclude_patterns)
        self.config_files.extend(other.config_files)
        self.diagnostics.extend(other.diagnostics)
        return self

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides; missing or ``None`` entries are ignored.

        Recognized keys: ``manifest``, ``setter_function``, ``include_patterns``,
        ``exclude_patterns``. Empty pattern sequences mean "not given".
        """
        manifest: str | None = args.get("manifest")
        if manifest:
            self.manifest_name = manifest
        setter_function: str | None = args.get("setter_function")
        if setter_function:
            self.setter_function = setter_function
        include: Iterable[str] | None = args.get("include_patterns")
        if include:
            self.include_patterns = list(include)
        exclude: Iterable[str] | None = args.get("exclude_patterns")
        if exclude:
            self.exclude_patterns = list(exclude)
        return self

    def freeze(self) -> Config:
        """Return an immutable snapshot, filling unset values with defaults."""
        return Config(
            manifest_name=self.manifest_name or KPTFILE_NAME,
            setter_function=self.setter_function or APPLY_SETTERS_IMAGE,
            include_patterns=tuple(
                self.include_patterns
                if self.include_patterns is not None
                else DEFAULT_INCLUDE_PATTERNS
            ),
            exclude_patterns=tuple(
                self.exclude_patterns
                if self.exclude_patterns is not None
                else DEFAULT_EXCLUDE_PATTERNS
            ),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    @classmethod
    def load_merged(
        cls,
        root: Path | None = None,
        *,
        config_files: Iterable[Path] = (),
        no_config: bool = False,
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build the effective configuration from all layers.

        Args:
            root (Path | None): Package directory searched for ``pyproject.toml``
                and ``setterscan.toml``; ``None`` skips discovery.
            config_files (Iterable[Path]): Explicit config files, applied in order.
            no_config (bool): If True, skip the files discovered in ``root``.
            args (ArgsLike | None): CLI/API overrides applied last.

        Returns:
            MutableConfig: The merged builder; call `freeze` for a runtime snapshot.
        """
        merged: MutableConfig = cls.from_defaults()

        candidates: list[Path] = []
        if root is not None and not no_config:
            for name in (PYPROJECT_TOML_NAME, SETTERSCAN_TOML_NAME):
                path = root / name
                if path.is_file():
                    candidates.append(path)
        candidates.extend(config_files)

        for path in candidates:
            try:
                layer: MutableConfig | None = cls.from_toml_file(path)
            except TomlLoadError as exc:
                merged.diagnostics.add_error(f"{exc}; configuration file skipped")
                continue
            if layer is not None:
                merged.merge_with(layer)

        if args is not None:
            merged.apply_args(args)
        logger.debug("Effective config layers: %s", [str(p) for p in merged.config_files])
        return merged
