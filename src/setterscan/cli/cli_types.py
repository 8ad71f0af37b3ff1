# topmark:header:start
#
#   project      : SetterScan
#   file         : cli_types.py
#   file_relpath : src/setterscan/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for the SetterScan CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import click
from click.shell_completion import CompletionItem

if TYPE_CHECKING:
    from collections.abc import Mapping

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice among the string values of an Enum.

    The converted value is the Enum member, so commands compare against
    ``OutputFormat.JSON`` rather than ``"json"``.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self._by_value: Mapping[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Return the accepted values, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices as ``[a|b|c]`` in help output."""
        return "[" + "|".join(self.choices) + "]"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        """Return the Enum member for ``value``; members pass through unchanged."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the Enum values starting with ``incomplete``.

        Bash: `eval "$(_SETTERSCAN_COMPLETE=bash_source setterscan)"`
        """
        prefix: str = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
