"""Controller layer: view adapters between value models and widgets.

This package contains:
- spinner: SteppedViewAdapter, bounded stepping in display units
- slider: RangeViewAdapter and SliderCurve, the 0..RANGE_MAX projection
- automatic: ToggleViewAdapter, the automatic/manual flag as an action
"""

from controller.automatic import PropertyChangeEvent, ToggleViewAdapter
from controller.slider import RangeViewAdapter, SliderCurve
from controller.spinner import SteppedViewAdapter

__all__ = [
    "PropertyChangeEvent",
    "RangeViewAdapter",
    "SliderCurve",
    "SteppedViewAdapter",
    "ToggleViewAdapter",
]
