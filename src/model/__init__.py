"""Model classes for quantity-models."""

from model.errors import BindingError, InvalidArgumentError, UnsupportedOperationError
from model.change_source import ChangeEvent, ChangeListener, ChangeSource, ReentrancyGuard
from model.units import (
    UNITS_ANGLE,
    UNITS_LENGTH,
    UNITS_MASS,
    UNITS_NONE,
    UNITS_RELATIVE,
    UNITS_TEMPERATURE,
    Unit,
    UnitGroup,
)
from model.binding import (
    AutomaticBinding,
    Binding,
    resolve_automatic_binding,
    resolve_binding,
)
from model.value_model import ValueModel
from model.fields import Component, FlagField, ValueField

__all__ = [
    "BindingError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "ChangeEvent",
    "ChangeListener",
    "ChangeSource",
    "ReentrancyGuard",
    "UNITS_ANGLE",
    "UNITS_LENGTH",
    "UNITS_MASS",
    "UNITS_NONE",
    "UNITS_RELATIVE",
    "UNITS_TEMPERATURE",
    "Unit",
    "UnitGroup",
    "AutomaticBinding",
    "Binding",
    "resolve_automatic_binding",
    "resolve_binding",
    "ValueModel",
    "Component",
    "FlagField",
    "ValueField",
]
