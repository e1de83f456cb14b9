"""Slider widget: ValueSlider."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.widget import Widget

from constants import RANGE_MAX, SLIDER_KEY_STEP
from controller.slider import RangeViewAdapter
from model.change_source import ChangeEvent
from model.errors import BindingError, UnsupportedOperationError

log = logging.getLogger(__name__)


class ValueSlider(Widget, can_focus=True):
    """A horizontal bar showing a RangeViewAdapter position.

    Left/right move by SLIDER_KEY_STEP positions, home/end jump to the ends,
    clicking moves to the clicked position and dragging keeps the adapter
    flagged as adjusting until the button is released.
    """

    DEFAULT_CSS = """
    ValueSlider {
        height: 1;
        width: 1fr;
        margin: 0 1;
    }
    ValueSlider:focus {
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("left", "step(-1)", "Decrease", show=False),
        Binding("right", "step(1)", "Increase", show=False),
        Binding("home", "jump(0)", "Minimum", show=False),
        Binding("end", f"jump({RANGE_MAX})", "Maximum", show=False),
    ]

    def __init__(self, adapter: RangeViewAdapter, **kwargs) -> None:
        super().__init__(**kwargs)
        self.adapter = adapter

    def on_mount(self) -> None:
        self.adapter.add_change_listener(self._model_changed)

    def on_unmount(self) -> None:
        self.adapter.remove_change_listener(self._model_changed)

    def _model_changed(self, event: ChangeEvent) -> None:
        self.refresh()

    def render(self) -> Text:
        width = max(self.size.width, 2)
        filled = round(self.adapter.get_value() / RANGE_MAX * width)
        bar = Text("━" * filled, style="bold")
        bar.append("─" * (width - filled), style="dim")
        return bar

    def move_to(self, position: int) -> None:
        """Move the slider to ``position`` (clamped to the range)."""
        position = min(max(position, 0), RANGE_MAX)
        try:
            self.adapter.set_value(position)
        except (UnsupportedOperationError, BindingError) as e:
            log.warning(f"Slider move to {position} rejected: {e}")
            self.app.bell()
        self.refresh()

    def action_step(self, direction: int) -> None:
        self.move_to(self.adapter.get_value() + direction * SLIDER_KEY_STEP)

    def action_jump(self, position: int) -> None:
        self.move_to(position)

    def _position_at(self, x: int) -> int:
        width = max(self.size.width - 1, 1)
        return round(x / width * RANGE_MAX)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.capture_mouse()
        self.adapter.set_value_is_adjusting(True)
        self.move_to(self._position_at(event.x))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.adapter.get_value_is_adjusting():
            self.move_to(self._position_at(event.x))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        self.adapter.set_value_is_adjusting(False)
