"""UI module containing the textual widgets for value models."""

from ui.widgets import (
    AutomaticCheckbox,
    PropertyEditor,
    UnitSelect,
    ValueSlider,
    ValueSpinner,
)
from ui.helpers import format_value, parse_value
from ui import ids

__all__ = [
    # Widgets
    "AutomaticCheckbox",
    "PropertyEditor",
    "UnitSelect",
    "ValueSlider",
    "ValueSpinner",
    # Helpers
    "format_value",
    "parse_value",
    "ids",
]
