"""Display units and unit groups.

Values inside a ValueModel are always canonical (SI). A Unit converts between
the canonical value and the number a user sees, and owns the rounding and
stepping rules for that display:

    canonical = (display + offset) * multiplier
    display   = canonical / multiplier - offset

A UnitGroup is the set of units a quantity may be shown in, plus the default
one. The models only depend on the methods used here, so any object with the
same shape can stand in for these classes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Unit:
    """A display unit with linear conversion and a step grid."""

    symbol: str
    multiplier: float = 1.0
    offset: float = 0.0
    step: float = 1.0
    decimals: int = 3

    def to_display(self, value: float) -> float:
        """Convert a canonical value into this unit."""
        return value / self.multiplier - self.offset

    def to_canonical(self, value: float) -> float:
        """Convert a value in this unit into canonical units."""
        return (value + self.offset) * self.multiplier

    def round(self, value: float) -> float:
        """Round a display value to the precision shown for this unit."""
        if math.isinf(value) or math.isnan(value):
            return value
        return round(value, self.decimals)

    def next_step(self, value: float) -> float:
        """Return the next multiple of ``step`` strictly above ``value``."""
        index = math.floor(round(value / self.step, 9)) + 1
        return self.round(index * self.step)

    def previous_step(self, value: float) -> float:
        """Return the previous multiple of ``step`` strictly below ``value``."""
        index = math.ceil(round(value / self.step, 9)) - 1
        return self.round(index * self.step)

    def __str__(self) -> str:
        return self.symbol


class UnitGroup:
    """The units one quantity can be displayed in."""

    def __init__(self, name: str, units: list[Unit], default_index: int = 0) -> None:
        if not units:
            raise ValueError(f"Unit group '{name}' needs at least one unit")
        self.name = name
        self._units = list(units)
        self._default = self._units[default_index]

    @property
    def default_unit(self) -> Unit:
        return self._default

    def contains(self, unit: Unit) -> bool:
        return unit in self._units

    def find_unit(self, symbol: str) -> Unit | None:
        """Look a unit up by its symbol."""
        for unit in self._units:
            if unit.symbol == symbol:
                return unit
        return None

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        symbols = ", ".join(u.symbol or "-" for u in self._units)
        return f"UnitGroup({self.name}: {symbols})"


UNITS_NONE = UnitGroup("none", [Unit("")])

UNITS_LENGTH = UnitGroup(
    "length",
    [
        Unit("cm", 0.01, step=0.1),
        Unit("m", 1.0, step=0.01),
        Unit("mm", 0.001, step=1.0),
        Unit("in", 0.0254, step=0.1),
        Unit("ft", 0.3048, step=0.1),
    ],
)

UNITS_ANGLE = UnitGroup(
    "angle",
    [
        Unit("°", math.pi / 180.0, step=1.0, decimals=1),
        Unit("rad", 1.0, step=0.01, decimals=4),
    ],
)

UNITS_TEMPERATURE = UnitGroup(
    "temperature",
    [
        Unit("K", 1.0, step=1.0, decimals=2),
        Unit("°C", 1.0, offset=273.15, step=1.0, decimals=2),
        Unit("°F", 5.0 / 9.0, offset=459.67, step=1.0, decimals=2),
    ],
    default_index=1,
)

UNITS_MASS = UnitGroup(
    "mass",
    [
        Unit("g", 0.001, step=1.0),
        Unit("kg", 1.0, step=0.01),
        Unit("oz", 0.028349523125, step=0.1),
        Unit("lb", 0.45359237, step=0.01),
    ],
)

UNITS_RELATIVE = UnitGroup(
    "relative",
    [
        Unit("%", 0.01, step=1.0, decimals=1),
        Unit("", 1.0, step=0.01, decimals=4),
    ],
)
