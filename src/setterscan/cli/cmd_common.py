# topmark:header:start
#
#   project      : SetterScan
#   file         : cmd_common.py
#   file_relpath : src/setterscan/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the SetterScan subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from setterscan.cli.console import ClickConsole
from setterscan.cli.emitters import emit_diagnostics

if TYPE_CHECKING:
    import click

    from setterscan.cli.console import ConsoleLike
    from setterscan.config.model import Config


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console set up by the group, or a default one."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the group (``0`` if unset)."""
    ctx.ensure_object(dict)
    return cast("int", ctx.obj.get("verbosity_level", 0))


def report_config_diagnostics(ctx: click.Context, config: Config) -> None:
    """Write the warnings collected while loading ``config`` to stderr."""
    if get_effective_verbosity(ctx) < 0:
        return
    emit_diagnostics(get_console(ctx), config.diagnostics)
