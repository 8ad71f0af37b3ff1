# topmark:header:start
#
#   project      : SetterScan
#   file         : dump_config.py
#   file_relpath : src/setterscan/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan `dump-config` command.

Prints the effective configuration for a package directory as TOML, after
merging defaults, discovered config files, ``--config`` files and CLI options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from setterscan.cli.cmd_common import get_console, report_config_diagnostics
from setterscan.cli.config_resolver import build_args_namespace, resolve_config_from_click
from setterscan.cli.errors import SetterscanFileNotFoundError
from setterscan.cli.options import (
    common_config_options,
    common_discovery_options,
    common_file_filtering_options,
)
from setterscan.config.io import to_toml

if TYPE_CHECKING:
    from setterscan.config.model import Config


@click.command(
    name="dump-config",
    help="Print the effective configuration for a package as TOML.",
)
@click.argument(
    "pkg_dir",
    required=False,
    default=".",
    type=click.Path(path_type=Path),
)
@common_config_options
@common_discovery_options
@common_file_filtering_options
def dump_config_command(
    *,
    pkg_dir: Path,
    config_paths: tuple[str, ...],
    no_config: bool,
    manifest: str | None,
    setter_function: str | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
) -> None:
    """Print the effective configuration for PKG_DIR."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if not pkg_dir.is_dir():
        raise SetterscanFileNotFoundError(f"No such directory: {pkg_dir}")

    config: Config = resolve_config_from_click(
        root=pkg_dir,
        config_paths=config_paths,
        no_config=no_config,
        args=build_args_namespace(
            manifest=manifest,
            setter_function=setter_function,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
        ),
    )
    report_config_diagnostics(ctx, config)
    console.print(to_toml(config.to_toml_dict()), nl=False)
