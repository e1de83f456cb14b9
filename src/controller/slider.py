"""RangeViewAdapter: the slider projection of a ValueModel.

The slider works on integer positions 0..RANGE_MAX. A position is first
normalized to x in [0, 1] and then mapped onto the value range with a curve
that is linear up to the breakpoint and quadratic above it:

    x <= p:   value = min + (mid - min) / p * x
    x >  p:   value = q2 * x**2 + q1 * x + q0

The quadratic coefficients are solved once so that the curve is continuous in
value and slope at x = p and ends exactly at max:

    f(p) = mid,   f(1) = max,   f'(p) = (mid - min) / p

This gives fine control over the low part of a wide range (e.g. 0-50 mm over
the first half of the slider, 50-1000 mm over the second half).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from constants import DEFAULT_BREAKPOINT, RANGE_MAX
from model.change_source import ChangeEvent, ChangeListener
from model.errors import InvalidArgumentError
from model.value_model import BoundValue, ValueModel

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SliderCurve:
    """Quadratic part of the slider scale: value = q2*x^2 + q1*x + q0."""

    breakpoint: float
    q2: float = 0.0
    q1: float = 0.0
    q0: float = 0.0

    @classmethod
    def solve(cls, low: float, breakpoint: float, mid: float, high: float) -> SliderCurve:
        """Solve the coefficients for continuity at ``breakpoint``.

        Raises:
            InvalidArgumentError: unless low < mid <= high and 0 < breakpoint < 1
        """
        if not (low < mid <= high and 0 < breakpoint < 1):
            raise InvalidArgumentError(
                f"Bad arguments for slider scale min={low} mid={mid} max={high} pos={breakpoint}"
            )
        p = breakpoint
        delta = (mid - low) / p
        denominator = (p - 1) ** 2
        return cls(
            breakpoint=p,
            q2=(high - mid - delta + delta * p) / denominator,
            q1=(delta + 2 * (mid - high) * p - delta * p * p) / denominator,
            q0=(mid - (2 * mid + delta) * p + (high + delta) * p * p) / denominator,
        )

    @classmethod
    def linear(cls) -> SliderCurve:
        """Curve that never leaves the linear segment."""
        return cls(breakpoint=1.0)

    def quadratic(self, x: float) -> float:
        return self.q2 * x * x + self.q1 * x + self.q0

    def quadratic_slope(self, x: float) -> float:
        return 2 * self.q2 * x + self.q1

    def invert_quadratic(self, value: float) -> float:
        """Position x on the quadratic segment where the curve reaches ``value``."""
        if self.q2 == 0:
            return (value - self.q0) / self.q1
        discriminant = max(self.q1 * self.q1 - 4 * self.q2 * (self.q0 - value), 0.0)
        return (math.sqrt(discriminant) - self.q1) / (2 * self.q2)


def _as_model(bound: BoundValue) -> ValueModel:
    if isinstance(bound, ValueModel):
        return bound
    return ValueModel(float(bound))


class RangeViewAdapter:
    """Bounded integer range 0..RANGE_MAX for slider widgets.

    Behaves like a bounded-range model with a fixed range, zero extent and a
    drag-in-progress ("adjusting") flag kept locally.
    """

    def __init__(
        self,
        model: ValueModel,
        low: BoundValue,
        high: BoundValue,
        mid: float | None = None,
        breakpoint: float = DEFAULT_BREAKPOINT,
    ) -> None:
        """Create a slider projection of ``model``.

        Args:
            model: The model being projected
            low: Value at position 0 (number or model)
            high: Value at position RANGE_MAX (number or model)
            mid: Value at the breakpoint; None for a purely linear scale
            breakpoint: Fraction of the range that is linear (0 < breakpoint < 1)

        Raises:
            InvalidArgumentError: if mid is given and the scale is inconsistent
        """
        self.model = model
        self.low = _as_model(low)
        self.high = _as_model(high)
        if mid is None:
            self.mid = self.high
            self.curve = SliderCurve.linear()
        else:
            self.curve = SliderCurve.solve(self.low.get_value(), breakpoint, mid, self.high.get_value())
            self.mid = ValueModel(mid)
        self._adjusting = False

        self.low.add_change_listener(self._bounds_changed)
        self.high.add_change_listener(self._bounds_changed)

    @property
    def breakpoint(self) -> float:
        return self.curve.breakpoint

    def value_at(self, x: float) -> float:
        """Curve value at normalized position ``x``."""
        low = self.low.get_value()
        if x <= self.curve.breakpoint:
            return (self.mid.get_value() - low) / self.curve.breakpoint * x + low
        # A steep mid can bend the quadratic above high before x = 1
        return min(self.curve.quadratic(x), self.high.get_value())

    def position_of(self, value: float) -> float:
        """Normalized position of ``value``, clamped to [0, 1]."""
        if math.isnan(value):
            return 0.0
        low = self.low.get_value()
        if value <= low:
            return 0.0
        if value >= self.high.get_value():
            return 1.0
        mid = self.mid.get_value()
        if value <= mid:
            return (value - low) * self.curve.breakpoint / (mid - low)
        return min(max(self.curve.invert_quadratic(value), 0.0), 1.0)

    def get_value(self) -> int:
        """Slider position of the model's current value."""
        return int(self.position_of(self.model.get_value()) * RANGE_MAX)

    def set_value(self, position: int) -> None:
        """Move the model to the value at ``position``, unless the model is notifying."""
        if self.model.is_notifying():
            log.debug(f"{self.model!r}: slider write {position} ignored during notification")
            return
        value = self.value_at(position / RANGE_MAX)
        unit = self.model.get_current_unit()
        self.model.set_value(unit.to_canonical(unit.round(unit.to_display(value))))

    # Fixed range; the setters are no-ops

    def get_extent(self) -> int:
        return 0

    def get_minimum(self) -> int:
        return 0

    def get_maximum(self) -> int:
        return RANGE_MAX

    def set_extent(self, extent: int) -> None:
        pass

    def set_minimum(self, minimum: int) -> None:
        pass

    def set_maximum(self, maximum: int) -> None:
        pass

    def get_value_is_adjusting(self) -> bool:
        return self._adjusting

    def set_value_is_adjusting(self, adjusting: bool) -> None:
        self._adjusting = adjusting

    def set_range_properties(
        self, value: int, extent: int, minimum: int, maximum: int, adjusting: bool
    ) -> None:
        self.set_value_is_adjusting(adjusting)
        self.set_value(value)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self.model.add_change_listener(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        self.model.remove_change_listener(listener)

    def _bounds_changed(self, event: ChangeEvent) -> None:
        # Same value, different position: tell the model's listeners
        if not self.model.is_notifying():
            self.model.fire_state_changed()

    def dispose(self) -> None:
        """Stop listening to the range bounds."""
        self.low.remove_change_listener(self._bounds_changed)
        self.high.remove_change_listener(self._bounds_changed)
