"""Unit selection widget: UnitSelect."""

from __future__ import annotations

from textual.widgets import Select

from model.change_source import ChangeEvent
from model.units import Unit
from model.value_model import ValueModel


class UnitSelect(Select[Unit]):
    """Drop-down of a model's unit group; selecting changes the model's current unit."""

    DEFAULT_CSS = """
    UnitSelect {
        width: 12;
    }
    """

    def __init__(self, model: ValueModel, **kwargs) -> None:
        options = [(unit.symbol or "-", unit) for unit in model.get_unit_group()]
        super().__init__(options, value=model.get_current_unit(), allow_blank=False, **kwargs)
        self.model = model

    def on_mount(self) -> None:
        self.model.add_change_listener(self._model_changed)

    def on_unmount(self) -> None:
        self.model.remove_change_listener(self._model_changed)

    def _model_changed(self, event: ChangeEvent) -> None:
        unit = self.model.get_current_unit()
        if self.value != unit:
            self.value = unit

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        if isinstance(event.value, Unit):
            self.model.set_current_unit(event.value)
