"""ToggleViewAdapter: the automatic/manual toggle of a ValueModel."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from model.change_source import ChangeEvent

if TYPE_CHECKING:
    from model.value_model import ValueModel

log = logging.getLogger(__name__)

SELECTED = "selected"


@dataclass(frozen=True)
class PropertyChangeEvent:
    """A named property of ``source`` went from ``old_value`` to ``new_value``."""

    source: Any
    name: str
    old_value: Any
    new_value: Any


PropertyChangeListener = Callable[[PropertyChangeEvent], None]


class ToggleViewAdapter:
    """Observable boolean action mirroring the model's automatic flag.

    ``selected`` follows ``model.is_automatic()``; ``enabled`` is whether the
    model supports automatic setting at all. Property-change listeners only
    hear about real flips of the flag, not about every model notification.
    """

    def __init__(self, model: ValueModel) -> None:
        self.model = model
        self._listeners: list[PropertyChangeListener] = []
        self._selected = model.is_automatic()
        model.add_change_listener(self._model_changed)

    def is_enabled(self) -> bool:
        return self.model.is_automatic_available()

    def is_selected(self) -> bool:
        self._selected = self.model.is_automatic()
        return self._selected

    def set_selected(self, selected: bool) -> None:
        """Switch automatic on or off, unless the model is notifying."""
        if self.model.is_notifying():
            log.debug(f"{self.model!r}: automatic write {selected} ignored during notification")
            return
        self._selected = selected
        self.model.set_automatic(selected)

    def add_property_change_listener(self, listener: PropertyChangeListener) -> None:
        self._listeners.append(listener)

    def remove_property_change_listener(self, listener: PropertyChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _model_changed(self, event: ChangeEvent) -> None:
        selected = self.model.is_automatic()
        if selected == self._selected:
            return
        change = PropertyChangeEvent(self, SELECTED, self._selected, selected)
        self._selected = selected
        for listener in list(self._listeners):
            listener(change)

    def dispose(self) -> None:
        """Stop following the model."""
        self.model.remove_change_listener(self._model_changed)
