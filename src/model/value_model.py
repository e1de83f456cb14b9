"""ValueModel: one numeric property, held in canonical units, observable.

A ValueModel is either a constant (it stores the value itself) or bound to a
property of another object through a Binding. In bound mode the other object
stays the source of truth: reads go straight to its reader and writes to its
writer, and the model learns about changes through the source's own change
notifications.

Architecture Overview
---------------------

          ┌──────────────────┐   get_/set_<name>    ┌─────────────────┐
          │ source object    │ ◄─────────────────── │   ValueModel    │
          │ (ChangeSource)   │ ───────────────────► │  canonical (SI) │
          └──────────────────┘   change events      └────────┬────────┘
                                                             │ fire_state_changed()
                         ┌───────────────────────────────────┼────────────────────┐
                         ▼                                   ▼                    ▼
               SteppedViewAdapter                  RangeViewAdapter      ToggleViewAdapter
               (spinner, display unit)             (slider, 0..1000)     (automatic flag)

Each adapter listens to the model to refresh its projection and writes user
edits back into the model. A write-back attempted while the model is
notifying is discarded by the adapter, which is what keeps two adapters on the
same model from feeding each other forever.

Usage
-----
Constant model:

    model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
    spinner = model.get_spinner_model()
    spinner.next_value()        # 6.0

Bound model (``tube.get_radius()`` / ``tube.set_radius()``), shown as diameter:

    model = ValueModel.for_property(tube, "radius", multiplier=2.0, unit_group=UNITS_LENGTH)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Union

from constants import DEFAULT_BREAKPOINT
from model.binding import (
    AutomaticBinding,
    Binding,
    check_change_source,
    resolve_automatic_binding,
    resolve_binding,
)
from model.change_source import ChangeEvent, ChangeListener, ChangeSource
from model.errors import BindingError, InvalidArgumentError, UnsupportedOperationError
from model.units import UNITS_NONE, Unit, UnitGroup

if TYPE_CHECKING:
    from controller.automatic import ToggleViewAdapter
    from controller.slider import RangeViewAdapter
    from controller.spinner import SteppedViewAdapter

log = logging.getLogger(__name__)

# A bound may be a fixed number or another model whose value moves
BoundValue = Union[float, "ValueModel"]


def resolve_bound(bound: BoundValue) -> float:
    """Current numeric value of a fixed or model-backed bound."""
    if isinstance(bound, ValueModel):
        return bound.get_value()
    return float(bound)


class ValueModel(ChangeSource):
    """Observable numeric value in canonical units, constant or bound."""

    def __init__(
        self,
        value: float = 0.0,
        unit_group: UnitGroup = UNITS_NONE,
        min_value: BoundValue = -math.inf,
        max_value: BoundValue = math.inf,
        *,
        binding: Binding | None = None,
        automatic: AutomaticBinding | None = None,
        source: Any = None,
        name: str | None = None,
        multiplier: float = 1.0,
    ) -> None:
        """Create a model.

        Args:
            value: Initial value of a constant model (ignored when bound)
            unit_group: Units the value may be displayed in
            min_value: Advisory lower bound, number or ValueModel (canonical units)
            max_value: Advisory upper bound, number or ValueModel (canonical units)
            binding: Accessor pair of the mirrored property; None for a constant
            automatic: Accessor pair of the property's automatic flag, if any
            source: Object whose change notifications signal external edits
            name: Property name, used in messages
            multiplier: Scale from raw accessor values to canonical units
        """
        super().__init__()
        if multiplier == 0:
            raise InvalidArgumentError(f"Multiplier of '{name}' must not be zero")
        if source is not None:
            check_change_source(source)

        self._binding = binding
        self._automatic = automatic
        self._source = source
        self._name = name if name is not None else ("Constant value" if binding is None else "value")
        self._multiplier = multiplier
        self._unit_group = unit_group
        self._current_unit = unit_group.default_unit
        self._min_value = min_value
        self._max_value = max_value
        self._subscribed = False

        self._value = float(value)
        self.last_value = self._value if binding is None else 0.0
        self.last_automatic = False

    @classmethod
    def for_property(
        cls,
        source: Any,
        name: str,
        multiplier: float = 1.0,
        unit_group: UnitGroup = UNITS_NONE,
        min_value: BoundValue = -math.inf,
        max_value: BoundValue = math.inf,
    ) -> ValueModel:
        """Bind a model to property ``name`` of ``source``.

        The accessors are resolved here, once.

        Raises:
            BindingError: if the property has no reader or the source is not observable
        """
        check_change_source(source)
        return cls(
            unit_group=unit_group,
            min_value=min_value,
            max_value=max_value,
            binding=resolve_binding(source, name),
            automatic=resolve_automatic_binding(source, name),
            source=source,
            name=name,
            multiplier=multiplier,
        )

    # ---- value ----

    @property
    def name(self) -> str:
        return self._name

    @property
    def multiplier(self) -> float:
        return self._multiplier

    def is_bound(self) -> bool:
        return self._binding is not None

    def is_writable(self) -> bool:
        return self._binding is None or self._binding.writable

    def get_value(self) -> float:
        """Return the value in canonical units."""
        if self._binding is None:
            return self._value
        try:
            raw = self._binding.read()
        except Exception as e:
            raise BindingError(f"Unable to read {self!r}") from e
        return raw * self._multiplier

    def set_value(self, value: float) -> None:
        """Set the value (canonical units). Bounds are not enforced here.

        Raises:
            UnsupportedOperationError: if the bound property has no writer
        """
        if self._binding is None:
            self._value = value
            self.last_value = value
            self.fire_state_changed()
            return

        if self._binding.write is None:
            raise UnsupportedOperationError(f"{self!r}: read-only property '{self._name}'")
        try:
            self._binding.write(value / self._multiplier)
        except Exception as e:
            raise BindingError(f"Unable to write {self!r}") from e
        if self._source is None:
            # Nothing else will tell the listeners
            self.fire_state_changed()

    # ---- automatic flag ----

    def is_automatic_available(self) -> bool:
        return self._automatic is not None

    def is_automatic(self) -> bool:
        """Whether the value is currently computed automatically.

        False when automatic setting is unsupported or the flag cannot be read.
        """
        if self._automatic is None:
            return False
        try:
            return bool(self._automatic.read())
        except Exception:
            log.exception(f"{self!r}: reading the automatic flag failed")
            return False

    def set_automatic(self, automatic: bool) -> None:
        """Set the automatic flag; only notifies when automatic is unsupported."""
        if self._automatic is None:
            self.fire_state_changed()
            return
        try:
            self._automatic.write(automatic)
        except Exception:
            log.exception(f"{self!r}: writing the automatic flag failed")
            self.fire_state_changed()
            return
        if self._source is None:
            self.fire_state_changed()

    # ---- units and bounds ----

    def get_unit_group(self) -> UnitGroup:
        return self._unit_group

    def get_current_unit(self) -> Unit:
        """The unit views display in; the group's default until changed."""
        return self._current_unit

    def set_current_unit(self, unit: Unit) -> None:
        """Select the display unit for every view of this model.

        Raises:
            InvalidArgumentError: if ``unit`` is not part of the model's unit group
        """
        if unit == self._current_unit:
            return
        if not self._unit_group.contains(unit):
            raise InvalidArgumentError(f"Unit '{unit}' is not in {self._unit_group!r}")
        self._current_unit = unit
        self.fire_state_changed()

    def get_minimum(self) -> float:
        return resolve_bound(self._min_value)

    def get_maximum(self) -> float:
        return resolve_bound(self._max_value)

    @property
    def min_bound(self) -> BoundValue:
        """Lower bound as given: a number or a ValueModel read live."""
        return self._min_value

    @property
    def max_bound(self) -> BoundValue:
        """Upper bound as given: a number or a ValueModel read live."""
        return self._max_value

    # ---- listeners ----

    def add_change_listener(self, listener: ChangeListener) -> None:
        """Register a listener; the first one subscribes the model to its source."""
        if self._source is not None and not self._subscribed:
            # Snapshot first: a failing reader must leave the model detached
            self.last_value = self.get_value()
            self.last_automatic = self.is_automatic()
            self._source.add_change_listener(self._source_changed)
            self._subscribed = True
            log.debug(f"{self!r}: subscribed to source")
        super().add_change_listener(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        """Unregister a listener; the last one unsubscribes from the source."""
        super().remove_change_listener(listener)
        if self._subscribed and not self.has_listeners():
            self._source.remove_change_listener(self._source_changed)
            self._subscribed = False
            log.debug(f"{self!r}: unsubscribed from source")

    def _source_changed(self, event: ChangeEvent) -> None:
        """Forward a source change only if this property actually changed."""
        try:
            value = self.get_value()
        except BindingError:
            log.exception(f"{self!r}: ignoring change notification, value unreadable")
            return
        automatic = self.is_automatic()
        if value == self.last_value and automatic == self.last_automatic:
            return
        self.last_value = value
        self.last_automatic = automatic
        self.fire_state_changed()

    # ---- view adapters ----

    def get_spinner_model(self) -> SteppedViewAdapter:
        """Stepped projection in the current display unit."""
        from controller.spinner import SteppedViewAdapter

        return SteppedViewAdapter(self)

    def get_slider_model(
        self,
        low: BoundValue,
        high: BoundValue,
        mid: float | None = None,
        breakpoint: float = DEFAULT_BREAKPOINT,
    ) -> RangeViewAdapter:
        """Slider projection onto 0..RANGE_MAX.

        Without ``mid`` the scale is linear from ``low`` to ``high``, which may
        be models. With ``mid`` the scale is linear up to ``breakpoint`` and
        quadratic above it.
        """
        from controller.slider import RangeViewAdapter

        return RangeViewAdapter(self, low, high, mid=mid, breakpoint=breakpoint)

    def get_automatic_action(self) -> ToggleViewAdapter:
        """Boolean projection of the automatic flag."""
        from controller.automatic import ToggleViewAdapter

        return ToggleViewAdapter(self)

    def __repr__(self) -> str:
        if self._binding is None:
            return f"ValueModel[constant={self._value}]"
        if self._source is None:
            return f"ValueModel[binding:{self._name}]"
        return f"ValueModel[{type(self._source).__name__}:{self._name}]"
