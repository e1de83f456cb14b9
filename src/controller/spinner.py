"""SteppedViewAdapter: the spinner projection of a ValueModel."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from constants import EQUALITY_EPSILON
from model.change_source import ChangeListener

if TYPE_CHECKING:
    from model.value_model import ValueModel

log = logging.getLogger(__name__)


def _at_bound(value: float, bound: float) -> bool:
    return math.isclose(value, bound, rel_tol=EQUALITY_EPSILON, abs_tol=EQUALITY_EPSILON / 2)


class SteppedViewAdapter:
    """Bounded, unit-aware value for spinner widgets.

    All values going in and out are in the model's current display unit.
    Bounds are converted on every call so unit switches and model-backed
    bounds show up immediately.
    """

    def __init__(self, model: ValueModel) -> None:
        self.model = model

    def get_value(self) -> float:
        return self.model.get_current_unit().to_display(self.model.get_value())

    def set_value(self, value: float) -> None:
        """Write a display value into the model, unless the model is notifying."""
        if self.model.is_notifying():
            log.debug(f"{self.model!r}: spinner write {value} ignored during notification")
            return
        self.model.set_value(self.model.get_current_unit().to_canonical(value))

    def minimum(self) -> float:
        return self.model.get_current_unit().to_display(self.model.get_minimum())

    def maximum(self) -> float:
        return self.model.get_current_unit().to_display(self.model.get_maximum())

    def next_value(self) -> float | None:
        """One step up in display units, or None when already at the maximum."""
        unit = self.model.get_current_unit()
        value = self.get_value()
        maximum = self.maximum()
        if _at_bound(value, maximum):
            return None
        return min(unit.next_step(value), maximum)

    def previous_value(self) -> float | None:
        """One step down in display units, or None when already at the minimum."""
        unit = self.model.get_current_unit()
        value = self.get_value()
        minimum = self.minimum()
        if _at_bound(value, minimum):
            return None
        return max(unit.previous_step(value), minimum)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self.model.add_change_listener(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        self.model.remove_change_listener(listener)
