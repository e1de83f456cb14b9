"""UI helper functions for quantity-models."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from model.units import Unit

log = logging.getLogger(__name__)


def format_value(value: float, unit: Unit) -> str:
    """Format a display value at the unit's precision, without trailing zeros.

    Examples:
        format_value(5.0, Unit(""))          -> "5"
        format_value(2.54, Unit("cm"))       -> "2.54"
        format_value(math.inf, Unit(""))     -> "∞"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    text = f"{unit.round(value):.{unit.decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def parse_value(text: str) -> float | None:
    """Parse user input into a display value; None if it is not a number.

    Accepts a trailing unit symbol separated by whitespace ("12.5 cm").
    """
    stripped = text.strip()
    if not stripped:
        return None
    number = stripped.split()[0].replace(",", ".")
    try:
        value = float(number)
    except ValueError:
        log.debug(f"Not a number: {text!r}")
        return None
    return value if math.isfinite(value) else None
