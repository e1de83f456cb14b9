"""Property editor row: PropertyEditor."""

from __future__ import annotations

import logging
import math

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Static

from constants import DEFAULT_BREAKPOINT
from model.value_model import BoundValue, ValueModel, resolve_bound
from ui.widgets.automatic import AutomaticCheckbox
from ui.widgets.slider import ValueSlider
from ui.widgets.spinner import ValueSpinner
from ui.widgets.units import UnitSelect
import ui.ids as ids

log = logging.getLogger(__name__)


class PropertyEditor(Container):
    """One model shown as spinner, unit selector, automatic toggle and slider.

    All parts are views of the same ValueModel, so an edit in any of them is
    reflected in the others through the model's change notification.

    The slider is only shown when the range is finite: by default it spans
    the model's bounds, or ``low``/``high`` when given.
    """

    DEFAULT_CSS = """
    PropertyEditor {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }
    PropertyEditor .editor-row {
        height: auto;
    }
    PropertyEditor .editor-label {
        width: 16;
        padding: 1 1;
    }
    PropertyEditor AutomaticCheckbox {
        margin-left: 1;
    }
    """

    def __init__(
        self,
        model: ValueModel,
        label: str,
        *,
        low: BoundValue | None = None,
        high: BoundValue | None = None,
        mid: float | None = None,
        breakpoint: float = DEFAULT_BREAKPOINT,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.model = model
        self.label = label
        self.spinner = model.get_spinner_model()
        self.automatic = model.get_automatic_action()

        low = low if low is not None else model.min_bound
        high = high if high is not None else model.max_bound
        if math.isfinite(resolve_bound(low)) and math.isfinite(resolve_bound(high)):
            self.slider = model.get_slider_model(low, high, mid=mid, breakpoint=breakpoint)
        else:
            log.debug(f"{model!r}: unbounded, no slider")
            self.slider = None

    def compose(self) -> ComposeResult:
        with Horizontal(classes=ids.EDITOR_ROW):
            yield Static(self.label, classes=ids.EDITOR_LABEL)
            yield ValueSpinner(self.spinner)
            if len(self.model.get_unit_group()) > 1:
                yield UnitSelect(self.model, classes=ids.UNIT_SELECT)
            yield AutomaticCheckbox(self.automatic, classes=ids.AUTOMATIC_CHECKBOX)
        if self.slider is not None:
            yield ValueSlider(self.slider, classes=ids.VALUE_SLIDER)

    def on_unmount(self) -> None:
        self.automatic.dispose()
        if self.slider is not None:
            self.slider.dispose()
