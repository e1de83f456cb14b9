"""Tests for Unit and UnitGroup."""

import math

import pytest

from model.units import (
    UNITS_ANGLE,
    UNITS_LENGTH,
    UNITS_MASS,
    UNITS_NONE,
    UNITS_RELATIVE,
    UNITS_TEMPERATURE,
    Unit,
    UnitGroup,
)

ALL_GROUPS = [UNITS_NONE, UNITS_LENGTH, UNITS_ANGLE, UNITS_TEMPERATURE, UNITS_MASS, UNITS_RELATIVE]


class TestUnitConversion:
    """Test to_display() / to_canonical()."""

    def test_centimeters(self):
        """0.05 m is shown as 5 cm."""
        cm = UNITS_LENGTH.find_unit("cm")
        assert cm.to_display(0.05) == pytest.approx(5.0)
        assert cm.to_canonical(5.0) == pytest.approx(0.05)

    def test_celsius_offset(self):
        """Celsius is Kelvin shifted by 273.15."""
        celsius = UNITS_TEMPERATURE.find_unit("°C")
        assert celsius.to_display(273.15) == pytest.approx(0.0)
        assert celsius.to_canonical(100.0) == pytest.approx(373.15)

    def test_fahrenheit(self):
        """Freezing point is 32 °F."""
        fahrenheit = UNITS_TEMPERATURE.find_unit("°F")
        assert fahrenheit.to_display(273.15) == pytest.approx(32.0)
        assert fahrenheit.to_canonical(212.0) == pytest.approx(373.15)

    def test_degrees(self):
        """pi radians is 180 degrees."""
        degrees = UNITS_ANGLE.default_unit
        assert degrees.to_display(math.pi) == pytest.approx(180.0)

    @pytest.mark.parametrize("group", ALL_GROUPS, ids=lambda g: g.name)
    def test_round_trip_every_unit(self, group):
        """Converting to display and back returns the canonical value."""
        for unit in group:
            for value in (-12.5, 0.0, 0.001, 3.7, 1234.5):
                assert unit.to_canonical(unit.to_display(value)) == pytest.approx(value, abs=1e-9)


class TestUnitRoundAndStep:
    """Test round(), next_step() and previous_step()."""

    def test_round_to_decimals(self):
        """Values are rounded to the unit's decimals."""
        assert Unit("", decimals=2).round(1.23456) == 1.23

    def test_round_keeps_infinity(self):
        """Infinite bounds survive rounding."""
        assert Unit("").round(math.inf) == math.inf

    def test_next_step_from_grid_point(self):
        """From 5 the next step of 1 is 6."""
        assert Unit("").next_step(5.0) == 6.0

    def test_next_step_snaps_to_grid(self):
        """From 5.3 the next step of 1 is 6."""
        assert Unit("").next_step(5.3) == 6.0

    def test_previous_step_snaps_to_grid(self):
        """From 5.3 the previous step of 1 is 5."""
        assert Unit("").previous_step(5.3) == 5.0

    def test_previous_step_from_grid_point(self):
        """From 5 the previous step of 1 is 4."""
        assert Unit("").previous_step(5.0) == 4.0

    def test_fractional_step(self):
        """Steps of 0.1 do not accumulate float noise."""
        unit = Unit("cm", 0.01, step=0.1)
        assert unit.next_step(0.2) == 0.3
        assert unit.previous_step(0.3) == 0.2

    def test_negative_values(self):
        """Stepping works below zero."""
        unit = Unit("")
        assert unit.next_step(-2.5) == -2.0
        assert unit.previous_step(-2.5) == -3.0


class TestUnitGroup:
    """Test UnitGroup membership and lookup."""

    def test_default_unit(self):
        """Default is the first unit unless told otherwise."""
        assert UNITS_LENGTH.default_unit.symbol == "cm"
        assert UNITS_TEMPERATURE.default_unit.symbol == "°C"

    def test_contains(self):
        """Only the group's own units are members."""
        assert UNITS_LENGTH.contains(UNITS_LENGTH.find_unit("mm"))
        assert not UNITS_LENGTH.contains(UNITS_MASS.find_unit("kg"))
        assert UNITS_MASS.find_unit("kg") in UNITS_MASS

    def test_find_unknown_symbol(self):
        """Unknown symbols give None."""
        assert UNITS_LENGTH.find_unit("parsec") is None

    def test_len_and_iter(self):
        """Groups iterate their units in order."""
        assert len(UNITS_ANGLE) == 2
        assert [u.symbol for u in UNITS_ANGLE] == ["°", "rad"]

    def test_empty_group_rejected(self):
        """A group needs at least one unit."""
        with pytest.raises(ValueError):
            UnitGroup("empty", [])
