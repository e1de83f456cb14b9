"""Spinner widget: ValueSpinner."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Static

from controller.spinner import SteppedViewAdapter
from model.change_source import ChangeEvent
from model.errors import BindingError, UnsupportedOperationError
from ui.helpers import format_value, parse_value
from ui.ids import cls
import ui.ids as ids

log = logging.getLogger(__name__)


class ValueSpinner(Horizontal):
    """An input with -/+ buttons and a unit label, driven by a SteppedViewAdapter."""

    DEFAULT_CSS = """
    ValueSpinner {
        height: 3;
        width: auto;
    }
    ValueSpinner > Button {
        min-width: 5;
        width: 5;
    }
    ValueSpinner > Input {
        width: 16;
    }
    ValueSpinner > .spinner-unit {
        width: 6;
        padding: 1 1;
    }
    """

    def __init__(self, adapter: SteppedViewAdapter, **kwargs) -> None:
        super().__init__(**kwargs)
        self.adapter = adapter

    def compose(self) -> ComposeResult:
        unit = self.adapter.model.get_current_unit()
        yield Button("-", classes=ids.SPINNER_DOWN)
        yield Input(value=self.display_text(), classes=ids.SPINNER_INPUT)
        yield Button("+", classes=ids.SPINNER_UP)
        yield Static(unit.symbol, classes=ids.SPINNER_UNIT)

    def on_mount(self) -> None:
        self.adapter.add_change_listener(self._model_changed)

    def on_unmount(self) -> None:
        self.adapter.remove_change_listener(self._model_changed)

    def display_text(self) -> str:
        return format_value(self.adapter.get_value(), self.adapter.model.get_current_unit())

    def refresh_from_model(self) -> None:
        """Show the model's current value and unit."""
        try:
            self.query_one(cls(ids.SPINNER_INPUT), Input).value = self.display_text()
            unit = self.adapter.model.get_current_unit()
            self.query_one(cls(ids.SPINNER_UNIT), Static).update(unit.symbol)
        except NoMatches:
            log.debug("Spinner parts not mounted")

    def _model_changed(self, event: ChangeEvent) -> None:
        self.refresh_from_model()

    def commit(self, value: float) -> None:
        """Write a display value to the model; the view snaps back if rejected."""
        try:
            self.adapter.set_value(value)
        except (UnsupportedOperationError, BindingError) as e:
            log.warning(f"Rejected value {value}: {e}")
            self.app.bell()
        self.refresh_from_model()

    @on(Button.Pressed, cls(ids.SPINNER_UP))
    def on_up_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        value = self.adapter.next_value()
        if value is not None:
            self.commit(value)

    @on(Button.Pressed, cls(ids.SPINNER_DOWN))
    def on_down_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        value = self.adapter.previous_value()
        if value is not None:
            self.commit(value)

    @on(Input.Submitted, cls(ids.SPINNER_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        value = parse_value(event.value)
        if value is None:
            self.refresh_from_model()
            return
        self.commit(value)
