"""Shared fixtures for quantity-models tests."""

import pytest

from model import UNITS_LENGTH, UNITS_NONE, ValueModel
from sources import Part, Recorder


@pytest.fixture
def part():
    """A Part with radius 5 cm and mass 1.2 kg."""
    return Part()


@pytest.fixture
def radius_model(part):
    """ValueModel bound to part.radius, in length units."""
    return ValueModel.for_property(part, "radius", unit_group=UNITS_LENGTH, min_value=0.0, max_value=1.0)


@pytest.fixture
def constant_model():
    """Constant model: value 5 within [0, 10], no units."""
    return ValueModel(5.0, UNITS_NONE, 0.0, 10.0)


@pytest.fixture
def recorder():
    """A fresh recording listener."""
    return Recorder()
