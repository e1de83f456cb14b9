"""Automatic toggle widget: AutomaticCheckbox."""

from __future__ import annotations

import logging

from textual.widgets import Checkbox

from controller.automatic import PropertyChangeEvent, ToggleViewAdapter

log = logging.getLogger(__name__)


class AutomaticCheckbox(Checkbox):
    """A checkbox mirroring a ToggleViewAdapter; disabled without automatic support."""

    def __init__(self, adapter: ToggleViewAdapter, label: str = "Automatic", **kwargs) -> None:
        super().__init__(label, value=adapter.is_selected(), disabled=not adapter.is_enabled(), **kwargs)
        self.adapter = adapter

    def on_mount(self) -> None:
        self.adapter.add_property_change_listener(self._selected_changed)

    def on_unmount(self) -> None:
        self.adapter.remove_property_change_listener(self._selected_changed)

    def _selected_changed(self, event: PropertyChangeEvent) -> None:
        self.value = event.new_value

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        if event.value == self.adapter.is_selected():
            return
        self.adapter.set_selected(event.value)
