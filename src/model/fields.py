"""Observable components built from field descriptors.

A Component is an object whose numeric properties can be mirrored by a
ValueModel. Its properties are declared with descriptors that both store the
value and carry metadata (label, unit group, bounds), and assigning a new
value fires the component's change notification:

    class Tube(Component):
        radius = ValueField(0.05, label="Radius", unit_group=UNITS_LENGTH, min_value=0.0)
        radius_automatic = FlagField(False)
        length = ValueField(0.3, label="Length", unit_group=UNITS_LENGTH, min_value=0.0)

    tube = Tube(radius=0.04)
    tube.radius = 0.06           # fires Tube's change listeners
    Tube.radius.label            # "Radius" (class access returns the descriptor)

    model = tube.value_model("radius")   # bound ValueModel using the metadata

FlagField named ``<name>_automatic`` is what ValueModel picks up as the
automatic flag of ``<name>``.
"""

from __future__ import annotations

import math
from typing import Any

from model.change_source import ChangeSource
from model.units import UNITS_NONE, UnitGroup
from model.value_model import ValueModel


class ValueField:
    """Descriptor for a numeric component property with display metadata.

    When accessed on the class, returns the ValueField itself (with metadata).
    When accessed on an instance, returns the actual value.
    """

    def __init__(
        self,
        default: float,
        *,
        label: str = "",
        unit_group: UnitGroup = UNITS_NONE,
        min_value: float = -math.inf,
        max_value: float = math.inf,
    ):
        """Create a ValueField descriptor.

        Args:
            default: Default value in canonical units
            label: Short label for editors
            unit_group: Units the value may be displayed in
            min_value: Advisory lower bound (canonical units)
            max_value: Advisory upper bound (canonical units)
        """
        self.default = float(default)
        self.label = label
        self.unit_group = unit_group
        self.min_value = min_value
        self.max_value = max_value
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.name = name
        if "_value_fields" not in owner.__dict__:
            owner._value_fields = dict(getattr(owner, "_value_fields", {}))
        owner._value_fields[name] = self
        if not self.label:
            self.label = name.replace("_", " ").capitalize()

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj: Any, value: float) -> None:
        old = obj.__dict__.get(self.name, self.default)
        obj.__dict__[self.name] = float(value)
        if old != value:
            obj.field_changed(self.name)


class FlagField:
    """Descriptor for a boolean component property, such as an automatic flag."""

    def __init__(self, default: bool = False):
        self.default = default
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if "_flag_fields" not in owner.__dict__:
            owner._flag_fields = dict(getattr(owner, "_flag_fields", {}))
        owner._flag_fields[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj: Any, value: bool) -> None:
        old = obj.__dict__.get(self.name, self.default)
        obj.__dict__[self.name] = bool(value)
        if old != bool(value):
            obj.field_changed(self.name)


class Component(ChangeSource):
    """Base class for observable objects declared with ValueField/FlagField."""

    _value_fields: dict[str, ValueField]
    _flag_fields: dict[str, FlagField]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the component with optional field values."""
        super().__init__()
        all_fields = {**self.get_value_fields(), **self.get_flag_fields()}
        for name, value in kwargs.items():
            if name not in all_fields:
                raise TypeError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)

    @classmethod
    def get_value_fields(cls) -> dict[str, ValueField]:
        """Get all ValueField descriptors for this class."""
        return getattr(cls, "_value_fields", {})

    @classmethod
    def get_flag_fields(cls) -> dict[str, FlagField]:
        """Get all FlagField descriptors for this class."""
        return getattr(cls, "_flag_fields", {})

    def field_changed(self, name: str) -> None:
        """Called after field ``name`` took a new value; notifies listeners."""
        self.fire_state_changed()

    def value_model(self, name: str, multiplier: float = 1.0) -> ValueModel:
        """Build a ValueModel bound to field ``name`` using its metadata."""
        field = self.get_value_fields().get(name)
        if field is None:
            raise KeyError(f"{type(self).__name__} has no value field '{name}'")
        return ValueModel.for_property(
            self,
            name,
            multiplier=multiplier,
            unit_group=field.unit_group,
            min_value=field.min_value * multiplier,
            max_value=field.max_value * multiplier,
        )
