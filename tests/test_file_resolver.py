# topmark:header:start
#
#   project      : SetterScan
#   file         : test_file_resolver.py
#   file_relpath : tests/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for selecting package files with include and exclude patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from setterscan.file_resolver import resolve_package_files
from tests.conftest import make_config, write_package

if TYPE_CHECKING:
    from pathlib import Path


def _names(files: list[Path], root: Path) -> list[str]:
    return [f.relative_to(root).as_posix() for f in files]


def test_default_patterns(tmp_path: Path) -> None:
    """YAML files and the Kptfile are selected at any depth; .git is skipped."""
    root = write_package(
        tmp_path,
        {
            "Kptfile": "",
            "a.yaml": "",
            "sub/b.yml": "",
            "README.md": "",
            ".git/config.yaml": "",
        },
    )
    files = resolve_package_files(root, make_config())
    assert _names(files, root) == ["Kptfile", "a.yaml", "sub/b.yml"]


def test_include_and_exclude_overrides(tmp_path: Path) -> None:
    """Exclusions are subtracted from the included set."""
    root = write_package(tmp_path, {"a.yaml": "", "skip/b.yaml": "", "c.json": ""})
    config = make_config(include_patterns=["*.yaml", "*.json"], exclude_patterns=["skip/"])
    assert _names(resolve_package_files(root, config), root) == ["a.yaml", "c.json"]


def test_single_file_and_missing_path(tmp_path: Path) -> None:
    """A file path is returned as-is; a missing path selects nothing."""
    root = write_package(tmp_path, {"notes.txt": ""})
    assert resolve_package_files(root / "notes.txt", make_config()) == [root / "notes.txt"]
    assert resolve_package_files(root / "absent", make_config()) == []
