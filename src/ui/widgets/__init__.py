"""Widget package: one module per view adapter, plus the editor combining them."""

from ui.widgets.automatic import AutomaticCheckbox
from ui.widgets.editor import PropertyEditor
from ui.widgets.slider import ValueSlider
from ui.widgets.spinner import ValueSpinner
from ui.widgets.units import UnitSelect

__all__ = [
    "AutomaticCheckbox",
    "PropertyEditor",
    "UnitSelect",
    "ValueSlider",
    "ValueSpinner",
]
