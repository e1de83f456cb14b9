"""Tests for ChangeSource and ReentrancyGuard."""

import pytest

from model.change_source import ChangeEvent, ChangeSource, ReentrancyGuard


class TestReentrancyGuard:
    """Test the nesting counter."""

    def test_idle_by_default(self):
        """A new guard is not notifying."""
        assert ReentrancyGuard().is_notifying() is False

    def test_nested_depth(self):
        """Nested entries count up and back down."""
        guard = ReentrancyGuard()
        with guard:
            with guard:
                assert guard.depth == 2
            assert guard.is_notifying()
        assert guard.depth == 0

    def test_released_on_exception(self):
        """An exception inside the block still releases the guard."""
        guard = ReentrancyGuard()
        with pytest.raises(RuntimeError):
            with guard:
                raise RuntimeError("boom")
        assert guard.is_notifying() is False


class TestChangeSource:
    """Test listener registration and dispatch."""

    def test_notifies_in_insertion_order(self):
        """Listeners are called in the order they were added."""
        source = ChangeSource()
        calls = []
        source.add_change_listener(lambda e: calls.append("a"))
        source.add_change_listener(lambda e: calls.append("b"))
        source.fire_state_changed()
        assert calls == ["a", "b"]

    def test_event_carries_source(self, recorder):
        """The event names the source that fired."""
        source = ChangeSource()
        source.add_change_listener(recorder)
        source.fire_state_changed()
        assert recorder.events == [ChangeEvent(source)]

    def test_duplicate_listener_notified_twice(self, recorder):
        """Adding the same listener twice gives two notifications."""
        source = ChangeSource()
        source.add_change_listener(recorder)
        source.add_change_listener(recorder)
        source.fire_state_changed()
        assert recorder.count == 2

    def test_remove_one_registration(self, recorder):
        """Removing drops a single registration."""
        source = ChangeSource()
        source.add_change_listener(recorder)
        source.add_change_listener(recorder)
        source.remove_change_listener(recorder)
        source.fire_state_changed()
        assert recorder.count == 1

    def test_remove_unknown_listener_is_noop(self, recorder):
        """Removing a listener that was never added does nothing."""
        source = ChangeSource()
        source.remove_change_listener(recorder)
        assert source.has_listeners() is False

    def test_is_notifying_during_dispatch(self):
        """Listeners see the source as notifying."""
        source = ChangeSource()
        seen = []
        source.add_change_listener(lambda e: seen.append(source.is_notifying()))
        source.fire_state_changed()
        assert seen == [True]
        assert source.is_notifying() is False

    def test_listener_added_during_dispatch_waits(self, recorder):
        """A listener added while notifying is not called in that burst."""
        source = ChangeSource()
        source.add_change_listener(lambda e: source.add_change_listener(recorder))
        source.fire_state_changed()
        assert recorder.count == 0
        source.fire_state_changed()
        assert recorder.count == 1

    def test_listener_removed_during_dispatch_still_called(self, recorder):
        """Removal during a burst does not affect the burst in flight."""
        source = ChangeSource()
        source.add_change_listener(lambda e: source.remove_change_listener(recorder))
        source.add_change_listener(recorder)
        source.fire_state_changed()
        assert recorder.count == 1
        source.fire_state_changed()
        assert recorder.count == 1

    def test_guard_released_when_listener_raises(self):
        """A failing listener propagates and leaves the source idle."""
        source = ChangeSource()

        def failing(event):
            raise ValueError("listener bug")

        source.add_change_listener(failing)
        with pytest.raises(ValueError):
            source.fire_state_changed()
        assert source.is_notifying() is False
