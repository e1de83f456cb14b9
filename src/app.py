"""Main TUI application for quantity-models."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Footer, Static

from constants import APP_NAME, APP_VERSION, DEFAULT_BREAKPOINT
from model.change_source import ChangeEvent
from model.value_model import BoundValue, ValueModel
from ui import PropertyEditor
from ui.helpers import format_value
from ui.ids import css
import ui.ids as ids


# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / APP_NAME
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{APP_NAME}.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = """
#header-title {
    height: 1;
    padding: 0 1;
    background: $primary;
    color: $text;
}
#editor-list {
    height: 1fr;
}
#status-bar {
    height: 1;
    padding: 0 1;
    background: $panel;
}
"""


@dataclass
class EditorSpec:
    """One editor row: the model plus its label and slider scale."""

    model: ValueModel
    label: str
    low: BoundValue | None = None
    high: BoundValue | None = None
    mid: float | None = None
    breakpoint: float = DEFAULT_BREAKPOINT


class QuantityEditorApp(App):
    """TUI showing every model as a set of synchronized views."""

    TITLE = "Quantity editor"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, specs: list[EditorSpec]) -> None:
        super().__init__()
        self.specs = specs

    def compose(self) -> ComposeResult:
        yield Static(f"{APP_NAME} {APP_VERSION}", id=ids.HEADER_TITLE)
        with VerticalScroll(id=ids.EDITOR_LIST):
            for spec in self.specs:
                yield PropertyEditor(
                    spec.model,
                    spec.label,
                    low=spec.low,
                    high=spec.high,
                    mid=spec.mid,
                    breakpoint=spec.breakpoint,
                )
        yield Static("", id=ids.STATUS_BAR)
        yield Footer()

    def on_mount(self) -> None:
        for spec in self.specs:
            spec.model.add_change_listener(self._model_changed)
        self._update_status()

    def on_unmount(self) -> None:
        for spec in self.specs:
            spec.model.remove_change_listener(self._model_changed)

    def _model_changed(self, event: ChangeEvent) -> None:
        self._update_status()

    def status_text(self) -> str:
        """One-line summary of every model in its current unit."""
        parts = []
        for spec in self.specs:
            unit = spec.model.get_current_unit()
            text = f"{spec.label} = {format_value(unit.to_display(spec.model.get_value()), unit)}"
            if unit.symbol:
                text += f" {unit.symbol}"
            if spec.model.is_automatic():
                text += " (auto)"
            parts.append(text)
        return " | ".join(parts)

    def _update_status(self) -> None:
        """Set status bar message."""
        try:
            self.query_one(css(ids.STATUS_BAR), Static).update(self.status_text())
        except NoMatches:
            log.debug("Status bar not mounted")
