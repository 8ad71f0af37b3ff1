# topmark:header:start
#
#   project      : SetterScan
#   file         : list_setters.py
#   file_relpath : src/setterscan/cli/commands/list_setters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan `list` command.

Discovers the setters of a kpt package directory and prints one row per
setter (name, value, type, count). Kptfile warnings go to stderr in the
default format and into the payload in machine formats; they never change the
exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from setterscan.api import load_package
from setterscan.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    report_config_diagnostics,
)
from setterscan.cli.config_resolver import build_args_namespace, resolve_config_from_click
from setterscan.cli.emitters import emit_report
from setterscan.cli.errors import SetterscanFileNotFoundError, to_cli_error
from setterscan.cli.options import (
    OutputFormat,
    common_config_options,
    common_discovery_options,
    common_file_filtering_options,
    output_format_option,
)
from setterscan.config.logging import get_logger
from setterscan.errors import SetterscanError
from setterscan.setters.discovery import discover_setters

if TYPE_CHECKING:
    from setterscan.config.logging import SetterscanLogger
    from setterscan.config.model import Config
    from setterscan.resources.model import Resource
    from setterscan.setters.discovery import DiscoveryReport

logger: SetterscanLogger = get_logger(__name__)


@click.command(
    name="list",
    help="List the setters of a kpt package (default: the current directory).",
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
@output_format_option
def list_command(
    *,
    pkg_dir: Path,
    config_paths: tuple[str, ...],
    no_config: bool,
    manifest: str | None,
    setter_function: str | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """List the setters of the package at PKG_DIR."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not pkg_dir.exists():
        raise SetterscanFileNotFoundError(f"No such file or directory: {pkg_dir}")

    config: Config = resolve_config_from_click(
        root=pkg_dir if pkg_dir.is_dir() else pkg_dir.parent,
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

    try:
        resources: list[Resource] = load_package(pkg_dir, config)
        report: DiscoveryReport = discover_setters(resources, config)
    except SetterscanError as exc:
        logger.debug("Discovery failed for %s: %s", pkg_dir, exc)
        raise to_cli_error(exc) from exc

    emit_report(console, report, output_format or OutputFormat.DEFAULT, verbosity=vlevel)
