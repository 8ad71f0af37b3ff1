# topmark:header:start
#
#   project      : SetterScan
#   file         : test_dump_config.py
#   file_relpath : tests/cli/test_dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `dump-config` prints the effective configuration as TOML."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from tests.cli.conftest import assert_FILE_NOT_FOUND, assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_dump_defaults(tmp_path: Path) -> None:
    """An unconfigured directory dumps the built-in defaults."""
    result = run_cli(["dump-config", str(tmp_path)])
    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["discovery"] == {"manifest": "Kptfile", "setter_function": "apply-setters"}
    assert data["files"]["exclude"] == [".git/"]


@mark_cli
def test_dump_merges_files_and_options(tmp_path: Path) -> None:
    """Package config and CLI options are merged, options last."""
    (tmp_path / "setterscan.toml").write_text(
        '[discovery]\nmanifest = "deploy/Kptfile"\n', encoding="utf-8"
    )
    result = run_cli(
        ["dump-config", str(tmp_path), "--setter-function", "my-setters", "-i", "*.yml"]
    )
    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["discovery"] == {"manifest": "deploy/Kptfile", "setter_function": "my-setters"}
    assert data["files"]["include"] == ["*.yml"]


@mark_cli
def test_dump_missing_directory(tmp_path: Path) -> None:
    """A missing directory exits with FILE_NOT_FOUND."""
    assert_FILE_NOT_FOUND(run_cli(["dump-config", str(tmp_path / "absent")]))
