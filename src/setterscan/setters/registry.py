# topmark:header:start
#
#   project      : SetterScan
#   file         : registry.py
#   file_relpath : src/setterscan/setters/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory aggregate of the setters found during one discovery session.

The registry holds two mappings, scalar setters and array setters, keyed by
setter name. Entries are only ever created or counted:

- The first observation of a name (from the Kptfile or from a field) fixes both
  its kind and its stored value.
- Later observations only increment ``count``, even when the value differs or
  the observation is of the other kind. A name therefore never appears in both
  mappings.

Kptfile-declared setters are seeded with ``count = 0`` so the count reflects
fields only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from setterscan.config.logging import get_logger
from setterscan.constants import ARRAY_SETTER_TYPE, SCALAR_SETTER_TYPE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from setterscan.config.logging import SetterscanLogger

logger: SetterscanLogger = get_logger(__name__)


@dataclass
class ScalarSetter:
    """Name, value and count of a setter controlling single-valued fields."""

    name: str
    value: str
    count: int = 0


@dataclass
class ArraySetter:
    """Name, values and count of a setter controlling sequence fields."""

    name: str
    values: list[str] = field(default_factory=lambda: [])
    count: int = 0


@dataclass(frozen=True, slots=True)
class SetterResult:
    """Read-only projection of one registry entry.

    Attributes:
        name (str): Setter name.
        value (str): Display value: the literal for scalars, ``[a b]`` for arrays.
        type (str): ``"string"`` or ``"list"``.
        count (int): Number of fields controlled by the setter.
        values (tuple[str, ...]): Sorted elements of an array setter (empty for scalars).
    """

    name: str
    value: str
    type: str
    count: int
    values: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"Name: {self.name}, Value: {self.value}, Type: {self.type}, Count: {self.count}"

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this result."""
        out: dict[str, object] = {
            "name": self.name,
            "value": self.value,
            "type": self.type,
            "count": self.count,
        }
        if self.type == ARRAY_SETTER_TYPE:
            out["values"] = list(self.values)
        return out


def format_array_value(values: Iterable[str]) -> str:
    """Render array setter values as ``[a b c]`` (sorted, space separated)."""
    return "[" + " ".join(sorted(values)) + "]"


class SetterRegistry:
    """Create-or-increment store of scalar and array setters.

    Not safe for concurrent writers; use one registry per discovery session.
    """

    def __init__(self) -> None:
        self.scalar_setters: dict[str, ScalarSetter] = {}
        self.array_setters: dict[str, ArraySetter] = {}

    def __contains__(self, name: object) -> bool:
        return name in self.scalar_setters or name in self.array_setters

    def __len__(self) -> int:
        return len(self.scalar_setters) + len(self.array_setters)

    def _increment(self, name: str) -> bool:
        """Count one more field for an existing setter of either kind."""
        existing: ScalarSetter | ArraySetter | None = self.scalar_setters.get(
            name
        ) or self.array_setters.get(name)
        if existing is None:
            return False
        existing.count += 1
        logger.trace("Setter %r count -> %d", name, existing.count)
        return True

    def seed_scalar(self, name: str, value: str) -> None:
        """Declare a scalar setter with ``count = 0`` unless ``name`` is already known."""
        if name in self:
            logger.debug("Setter %r already declared; seed ignored", name)
            return
        self.scalar_setters[name] = ScalarSetter(name=name, value=value, count=0)

    def seed_array(self, name: str, values: Iterable[str]) -> None:
        """Declare an array setter with ``count = 0`` unless ``name`` is already known."""
        if name in self:
            logger.debug("Setter %r already declared; seed ignored", name)
            return
        self.array_setters[name] = ArraySetter(name=name, values=list(values), count=0)

    def record_scalar(self, name: str, value: str) -> None:
        """Record one field bound to scalar setter ``name``.

        Args:
            name (str): Setter name.
            value (str): Value bound by the field; stored only if ``name`` is new.
        """
        if self._increment(name):
            if name in self.array_setters:
                logger.debug("Setter %r is an array setter; scalar match only counted", name)
            return
        self.scalar_setters[name] = ScalarSetter(name=name, value=value, count=1)
        logger.trace("New scalar setter %r = %r", name, value)

    def record_array(self, name: str, values: Iterable[str]) -> None:
        """Record one sequence field bound to array setter ``name``.

        Args:
            name (str): Setter name.
            values (Iterable[str]): Field elements; stored sorted only if ``name`` is new.
        """
        if self._increment(name):
            if name in self.scalar_setters:
                logger.debug("Setter %r is a scalar setter; array match only counted", name)
            return
        self.array_setters[name] = ArraySetter(name=name, values=sorted(values), count=1)
        logger.trace("New array setter %r = %r", name, self.array_setters[name].values)

    def results(self) -> list[SetterResult]:
        """Return all setters as results sorted by name."""
        out: list[SetterResult] = [
            SetterResult(
                name=setter.name,
                value=format_array_value(setter.values),
                type=ARRAY_SETTER_TYPE,
                count=setter.count,
                values=tuple(sorted(setter.values)),
            )
            for setter in self.array_setters.values()
        ]
        out.extend(
            SetterResult(
                name=setter.name,
                value=setter.value,
                type=SCALAR_SETTER_TYPE,
                count=setter.count,
            )
            for setter in self.scalar_setters.values()
        )
        out.sort(key=lambda r: r.name)
        return out
