# topmark:header:start
#
#   project      : SetterScan
#   file         : errors.py
#   file_relpath : src/setterscan/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SetterScan CLI.

Usage:
    Commands run the engine and translate its fatal `SetterscanError`s into the
    `click.ClickException` subclasses below via `to_cli_error`, so that each
    failure class maps to a stable exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from setterscan.cli.exit_codes import ExitCode
from setterscan.errors import (
    ConfigPathNotFoundError,
    MalformedResourceError,
    ManifestReadError,
    ResourceLoadError,
    SetterscanError,
)


class SetterscanCliError(click.ClickException):
    """Base class for all SetterScan CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Unlike Click's default, this method does not add color; colorization is
        applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SetterscanUsageError(SetterscanCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SetterscanDataError(SetterscanCliError):
    """Error for package content that cannot be read or interpreted."""

    exit_code = ExitCode.DATA_ERROR


class SetterscanFileNotFoundError(SetterscanCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SetterscanConfigError(SetterscanCliError):
    """Error for configuration errors (unreadable or malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SetterscanUnexpectedError(SetterscanCliError):
    """Error for internal failures (last-resort)."""

    exit_code = ExitCode.SOFTWARE_ERROR


def to_cli_error(exc: SetterscanError) -> SetterscanCliError:
    """Return the CLI error matching a fatal engine error."""
    message: str = str(exc)
    if isinstance(exc, ConfigPathNotFoundError):
        return SetterscanFileNotFoundError(message)
    if isinstance(exc, (ResourceLoadError, MalformedResourceError, ManifestReadError)):
        return SetterscanDataError(message)
    return SetterscanUnexpectedError(message)
