"""Widget ID and class constants for the TUI.

Using constants prevents typos and makes refactoring easier. Editors can be
mounted more than once, so their parts are tagged with classes and queried
with ``cls()``; app-level singletons use IDs and ``css()``.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def cls(class_name: str) -> str:
    """Return a CSS selector for a widget class name."""
    return f".{class_name}"


# App-level IDs
HEADER_TITLE = "header-title"
EDITOR_LIST = "editor-list"
STATUS_BAR = "status-bar"

# Property editor parts (classes)
EDITOR_LABEL = "editor-label"
EDITOR_ROW = "editor-row"
SPINNER_DOWN = "spinner-down"
SPINNER_UP = "spinner-up"
SPINNER_INPUT = "spinner-input"
SPINNER_UNIT = "spinner-unit"
UNIT_SELECT = "unit-select"
AUTOMATIC_CHECKBOX = "automatic-checkbox"
VALUE_SLIDER = "value-slider"
