"""Tests for UI event handling: widget events must reach the models.

These tests catch wiring problems where event decorators don't register
properly, and check that every view follows edits made through the others.
"""

import pytest

from textual.widgets import Button, Input

from app import EditorSpec, QuantityEditorApp
from demo import Tube
from model import UNITS_LENGTH, UNITS_NONE, ValueModel
from ui.ids import cls
from ui.widgets import AutomaticCheckbox, UnitSelect, ValueSlider
import ui.ids as ids


def make_app(model, **kwargs):
    return QuantityEditorApp([EditorSpec(model, "Value", **kwargs)])


class TestSpinnerEvents:
    """Test spinner event handlers."""

    @pytest.mark.asyncio
    async def test_up_button_steps_value(self):
        """Pressing + moves the model one step up."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            app.query_one(cls(ids.SPINNER_UP), Button).press()
            await pilot.pause()
            assert model.get_value() == 6.0
            assert app.query_one(cls(ids.SPINNER_INPUT), Input).value == "6"

    @pytest.mark.asyncio
    async def test_down_button_stops_at_minimum(self):
        """Pressing - at the minimum leaves the value alone."""
        model = ValueModel(0.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            app.query_one(cls(ids.SPINNER_DOWN), Button).press()
            await pilot.pause()
            assert model.get_value() == 0.0

    @pytest.mark.asyncio
    async def test_input_submit_sets_value(self):
        """Submitting the input writes the typed value."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            spinner_input = app.query_one(cls(ids.SPINNER_INPUT), Input)
            spinner_input.value = "7.5"
            await spinner_input.action_submit()
            await pilot.pause()
            assert model.get_value() == 7.5

    @pytest.mark.asyncio
    async def test_invalid_input_snaps_back(self):
        """Submitting text that is not a number restores the model value."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            spinner_input = app.query_one(cls(ids.SPINNER_INPUT), Input)
            spinner_input.value = "lots"
            await spinner_input.action_submit()
            await pilot.pause()
            assert model.get_value() == 5.0
            assert spinner_input.value == "5"

    @pytest.mark.asyncio
    async def test_external_change_updates_input(self):
        """Changing the model elsewhere refreshes the input."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            model.set_value(3.0)
            await pilot.pause()
            assert app.query_one(cls(ids.SPINNER_INPUT), Input).value == "3"
            assert app.status_text() == "Value = 3"


class TestSliderEvents:
    """Test slider key bindings."""

    @pytest.mark.asyncio
    async def test_arrow_keys_move_value(self):
        """Right arrow moves the slider one key step."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            slider = app.query_one(ValueSlider)
            slider.focus()
            await pilot.pause()
            await pilot.press("right")
            await pilot.pause()
            assert model.get_value() == pytest.approx(5.1)
            await pilot.press("left", "left")
            await pilot.pause()
            assert model.get_value() == pytest.approx(4.9)

    @pytest.mark.asyncio
    async def test_home_and_end(self):
        """Home and End jump to the ends of the range."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            app.query_one(ValueSlider).focus()
            await pilot.pause()
            await pilot.press("end")
            await pilot.pause()
            assert model.get_value() == pytest.approx(10.0)
            await pilot.press("home")
            await pilot.pause()
            assert model.get_value() == 0.0

    @pytest.mark.asyncio
    async def test_slider_updates_spinner(self):
        """A slider move shows up in the spinner input."""
        model = ValueModel(5.0, UNITS_NONE, 0.0, 10.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            app.query_one(ValueSlider).move_to(200)
            await pilot.pause()
            assert app.query_one(cls(ids.SPINNER_INPUT), Input).value == "2"

    @pytest.mark.asyncio
    async def test_unbounded_model_has_no_slider(self):
        """Models without finite bounds get no slider."""
        app = make_app(ValueModel(5.0))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert len(app.query(ValueSlider)) == 0

    @pytest.mark.asyncio
    async def test_model_bounds_read_live(self):
        """A slider spanning model-backed bounds follows later bound changes."""
        upper = ValueModel(10.0)
        model = ValueModel(5.0, UNITS_NONE, 0.0, upper)
        app = make_app(model)
        async with app.run_test() as pilot:
            slider = app.query_one(ValueSlider)
            assert slider.adapter.get_value() == 500
            upper.set_value(20.0)
            await pilot.pause()
            assert slider.adapter.get_value() == 250

    @pytest.mark.asyncio
    async def test_explicit_range_gives_slider(self):
        """An unbounded model gets a slider when a range is given."""
        model = ValueModel(5.0)
        app = make_app(model, low=0.0, high=20.0, mid=10.0)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one(ValueSlider).adapter.get_value() == 250


class TestAutomaticEvents:
    """Test the automatic checkbox."""

    @pytest.mark.asyncio
    async def test_checkbox_turns_automatic_on(self):
        """Checking the box sets the automatic flag and updates the value."""
        tube = Tube(length=0.4)
        model = tube.value_model("radius")
        app = make_app(model)
        async with app.run_test() as pilot:
            checkbox = app.query_one(AutomaticCheckbox)
            assert not checkbox.disabled
            checkbox.value = True
            await pilot.pause()
            assert tube.is_radius_automatic()
            assert app.query_one(cls(ids.SPINNER_INPUT), Input).value == "4"
            assert app.status_text() == "Value = 4 cm (auto)"

    @pytest.mark.asyncio
    async def test_manual_edit_unchecks_box(self):
        """A manual edit of an automatic radius clears the checkbox."""
        tube = Tube()
        tube.set_radius_automatic(True)
        model = tube.value_model("radius")
        app = make_app(model)
        async with app.run_test() as pilot:
            checkbox = app.query_one(AutomaticCheckbox)
            assert checkbox.value is True
            app.query_one(cls(ids.SPINNER_UP), Button).press()
            await pilot.pause()
            assert not tube.is_radius_automatic()
            assert checkbox.value is False

    @pytest.mark.asyncio
    async def test_checkbox_disabled_without_automatic(self):
        """Constant models show a disabled checkbox."""
        app = make_app(ValueModel(5.0, UNITS_NONE, 0.0, 10.0))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one(AutomaticCheckbox).disabled


class TestUnitEvents:
    """Test the unit selector."""

    @pytest.mark.asyncio
    async def test_select_changes_unit(self):
        """Choosing a unit converts the spinner display."""
        model = ValueModel(0.05, UNITS_LENGTH, 0.0, 1.0)
        app = make_app(model)
        async with app.run_test() as pilot:
            assert app.query_one(cls(ids.SPINNER_INPUT), Input).value == "5"
            app.query_one(UnitSelect).value = UNITS_LENGTH.find_unit("mm")
            await pilot.pause()
            assert model.get_current_unit().symbol == "mm"
            assert app.query_one(cls(ids.SPINNER_INPUT), Input).value == "50"
            assert model.get_value() == pytest.approx(0.05)

    @pytest.mark.asyncio
    async def test_single_unit_has_no_select(self):
        """Unit groups with one unit get no selector."""
        app = make_app(ValueModel(5.0, UNITS_NONE, 0.0, 10.0))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert len(app.query(UnitSelect)) == 0
