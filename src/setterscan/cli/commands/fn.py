# topmark:header:start
#
#   project      : SetterScan
#   file         : fn.py
#   file_relpath : src/setterscan/cli/commands/fn.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan `fn` command.

Runs as a KRM function: reads a ``ResourceList`` on stdin and writes it back
to stdout with a ``results`` list holding one ``info`` entry per setter and one
``warning`` entry per Kptfile warning. Items are passed through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from setterscan.cli.cmd_common import get_console
from setterscan.cli.config_resolver import build_args_namespace, resolve_config_from_click
from setterscan.cli.errors import to_cli_error
from setterscan.cli.options import common_discovery_options
from setterscan.errors import SetterscanError
from setterscan.resources.resource_list import read_resource_list, write_resource_list
from setterscan.setters.discovery import discover_setters

if TYPE_CHECKING:
    from setterscan.config.model import Config
    from setterscan.resources.resource_list import ResourceListDocument
    from setterscan.setters.discovery import DiscoveryReport


@click.command(
    name="fn",
    help="Read a ResourceList on stdin and write it back with the discovered setters.",
)
@common_discovery_options
def fn_command(*, manifest: str | None, setter_function: str | None) -> None:
    """Run setter discovery as a KRM function."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    config: Config = resolve_config_from_click(
        root=None,
        args=build_args_namespace(manifest=manifest, setter_function=setter_function),
    )
    text: str = click.get_text_stream("stdin").read()
    try:
        document: ResourceListDocument = read_resource_list(text)
        report: DiscoveryReport = discover_setters(document.resources, config)
    except SetterscanError as exc:
        raise to_cli_error(exc) from exc

    console.print(write_resource_list(document, report), nl=False)
