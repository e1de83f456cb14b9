"""Sample component for the demo editor: a tube with an automatic radius."""

from __future__ import annotations

import logging

from model.fields import Component, ValueField
from model.units import UNITS_ANGLE, UNITS_LENGTH, UNITS_MASS

log = logging.getLogger(__name__)

# Automatic radius as a fraction of the tube length
AUTO_RADIUS_RATIO = 0.1


class Tube(Component):
    """A tube whose radius can follow its length automatically.

    The automatic flag is exposed through ``is_radius_automatic()`` /
    ``set_radius_automatic()``. Editing the radius by hand turns it off.
    """

    length = ValueField(0.3, label="Length", unit_group=UNITS_LENGTH, min_value=0.0, max_value=2.0)
    radius = ValueField(0.025, label="Radius", unit_group=UNITS_LENGTH, min_value=0.0, max_value=0.25)
    cant = ValueField(0.0, label="Cant angle", unit_group=UNITS_ANGLE, min_value=-0.26, max_value=0.26)
    mass = ValueField(0.1, label="Mass", unit_group=UNITS_MASS, min_value=0.0, max_value=5.0)

    def __init__(self, **kwargs) -> None:
        self._radius_automatic = False
        self._updating = False
        super().__init__(**kwargs)

    def is_radius_automatic(self) -> bool:
        return self._radius_automatic

    def set_radius_automatic(self, automatic: bool) -> None:
        if automatic == self._radius_automatic:
            return
        self._radius_automatic = automatic
        if automatic:
            self._apply_automatic_radius()
        self.fire_state_changed()

    def _apply_automatic_radius(self) -> None:
        self._updating = True
        try:
            self.radius = self.length * AUTO_RADIUS_RATIO
        finally:
            self._updating = False

    def field_changed(self, name: str) -> None:
        if name == "length" and self._radius_automatic:
            self._apply_automatic_radius()
        elif name == "radius" and self._radius_automatic and not self._updating:
            log.debug("Radius edited by hand, automatic radius off")
            self._radius_automatic = False
        super().field_changed(name)
