"""Change notification substrate shared by models, adapters and components.

A ChangeSource keeps an ordered list of listeners (plain callables taking a
ChangeEvent) and dispatches to a copy of that list, so listeners may add or
remove listeners while being notified without affecting the burst in flight.

Every ChangeSource owns a ReentrancyGuard that is active for the whole
dispatch. Listeners are allowed to read the source while it is notifying, but
view adapters check ``is_notifying()`` before writing back: a write arriving
during the guarded window is the echo of a refresh, not a user edit.

    source = ChangeSource()
    source.add_change_listener(lambda event: print(event.source))
    source.fire_state_changed()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    """Notification that the state of ``source`` has changed."""

    source: Any


ChangeListener = Callable[[ChangeEvent], None]


class ReentrancyGuard:
    """Counts nested notification bursts.

    Used as a context manager around dispatch:

        with guard:
            for listener in listeners:
                listener(event)
    """

    def __init__(self) -> None:
        self._depth = 0

    def __enter__(self) -> ReentrancyGuard:
        self._depth += 1
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._depth -= 1

    @property
    def depth(self) -> int:
        return self._depth

    def is_notifying(self) -> bool:
        return self._depth > 0


class ChangeSource:
    """Base class for anything that change listeners can subscribe to."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []
        self._guard = ReentrancyGuard()

    def add_change_listener(self, listener: ChangeListener) -> None:
        """Register a listener. Adding the same listener twice notifies it twice."""
        self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        """Unregister one registration of ``listener``; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            log.debug(f"{self!r}: remove of unregistered listener {listener!r}")

    def has_listeners(self) -> bool:
        return bool(self._listeners)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def is_notifying(self) -> bool:
        """True while this source is dispatching a change notification."""
        return self._guard.is_notifying()

    def fire_state_changed(self) -> None:
        """Notify every listener registered when the call starts, in order."""
        listeners = list(self._listeners)
        event = ChangeEvent(self)
        with self._guard:
            for listener in listeners:
                listener(event)
