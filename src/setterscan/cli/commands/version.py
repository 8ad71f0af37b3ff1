# topmark:header:start
#
#   project      : SetterScan
#   file         : version.py
#   file_relpath : src/setterscan/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SetterScan `version` command.

Prints the SetterScan version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from setterscan.cli.cmd_common import get_console, get_effective_verbosity
from setterscan.cli.options import OutputFormat, output_format_option
from setterscan.constants import SETTERSCAN_VERSION


@click.command(
    name="version",
    help="Show the current version of SetterScan.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SetterScan."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": SETTERSCAN_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# SetterScan Version\n")
        console.print(f"**SetterScan version: {SETTERSCAN_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("SetterScan version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SETTERSCAN_VERSION, bold=True)}")
    else:
        console.print(console.styled(SETTERSCAN_VERSION, bold=True))
