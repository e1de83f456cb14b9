"""Shared constants for quantity-models."""

APP_NAME = "quantity-models"
APP_VERSION = "0.1.0"

# Discrete range of the slider projection: positions run 0..RANGE_MAX
RANGE_MAX = 1000

# Fraction of the slider range that is linear when a mid value is given
DEFAULT_BREAKPOINT = 0.5

# Relative tolerance for "display value is already at the bound"
EQUALITY_EPSILON = 1e-8

# Slider positions moved per left/right key press in the TUI
SLIDER_KEY_STEP = 10
