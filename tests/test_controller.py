import logging

import pytest

from conftest import key_named
from on_screen_keyboard.config import KeyboardConfig
from on_screen_keyboard.controller import KeyboardController
from on_screen_keyboard.modifier_state import KeyLabels
from on_screen_keyboard.text_editor import MemoryBuffer


class DummyField:
    def __init__(self, controller):
        self.controller = controller
        self.deselected = 0

    def deselect(self):
        self.deselected += 1
        self.controller.hide()


@pytest.fixture
def controller(keyboard, view):
    return KeyboardController(keyboard, view)


def press(controller, keyboard, *names):
    for name in names:
        controller.on_key_press(key_named(keyboard, name))


def test_typing_inserts_resolved_characters(controller, keyboard):
    buf = MemoryBuffer()
    controller.show(buf)
    press(controller, keyboard, "a", "b", "1")
    assert buf.text == "ab1"
    assert buf.caret == 3


def test_shift_is_released_after_one_character(controller, keyboard):
    buf = MemoryBuffer()
    controller.show(buf)
    press(controller, keyboard, "Shift", "a", "a")
    assert buf.text == "Aa"
    assert controller.state.shift_armed is False


def test_shift_survives_special_keys(controller, keyboard):
    buf = MemoryBuffer.at("xy")
    controller.show(buf)
    press(controller, keyboard, "Shift", "Back", "<", "Space")
    assert controller.state.shift_armed is True
    press(controller, keyboard, "1")
    assert buf.text == " !x"
    assert controller.state.shift_armed is False


def test_press_without_shift_leaves_state(controller, keyboard):
    controller.show(MemoryBuffer())
    press(controller, keyboard, "a")
    assert controller.state.shift_armed is False


def test_caps_then_shift_gives_lowercase_once(controller, keyboard):
    buf = MemoryBuffer()
    controller.show(buf)
    press(controller, keyboard, "Caps", "Shift", "a", "a")
    assert buf.text == "aA"
    assert controller.state.caps_on is True


def test_special_keys_edit_buffer(controller, keyboard):
    buf = MemoryBuffer.at("abc", 1)
    controller.show(buf)
    press(controller, keyboard, "Delete")
    assert buf.text == "ac"
    press(controller, keyboard, ">", "Back")
    assert buf.text == "a"
    press(controller, keyboard, "Space")
    assert buf.text == "a "
    assert buf.caret == 2


def test_labels_refresh_on_modifier_changes(controller, keyboard, view):
    controller.show(MemoryBuffer())
    assert view.labels["1"] == KeyLabels("1", "!", True)
    assert view.labels["a"] == KeyLabels("a", "", False)

    press(controller, keyboard, "Shift")
    assert view.labels["1"] == KeyLabels("!", "1", True)
    assert view.labels["a"].primary == "A"

    press(controller, keyboard, "a")
    assert view.labels["1"] == KeyLabels("1", "!", True)

    press(controller, keyboard, "Caps")
    assert view.labels["a"].primary == "A"


def test_ignored_keys_are_not_relabelled(controller, view):
    controller.show(MemoryBuffer())
    for name in ("Shift", "Caps", "Enter", "Delete", "Back", "Space"):
        assert name not in view.labels


def test_custom_ignore_list(keyboard, view):
    controller = KeyboardController(keyboard, view, config=KeyboardConfig(ignore_key_names=["1"]))
    controller.show(MemoryBuffer())
    assert "1" not in view.labels
    assert "Shift" in view.labels


def test_show_resets_modifiers_and_focuses_first_key(controller, keyboard, view):
    controller.state.caps_on = True
    controller.state.shift_armed = True
    controller.show(MemoryBuffer())
    assert controller.active
    assert view.visible
    assert (controller.state.caps_on, controller.state.shift_armed) == (False, False)
    assert view.focused == [keyboard[0][0]]


def test_focus_is_deferred_with_scheduler(keyboard, view, root):
    controller = KeyboardController(keyboard, view, scheduler=root)
    controller.show(MemoryBuffer())
    assert view.focused == []
    assert root.scheduled[0][0] == 150
    root.run_pending()
    assert view.focused == [keyboard[0][0]]


def test_hide_cancels_pending_focus(keyboard, view, root):
    controller = KeyboardController(keyboard, view, scheduler=root)
    controller.show(MemoryBuffer())
    controller.hide()
    root.run_pending()
    assert view.focused == []
    assert not view.visible
    assert not controller.active


def test_presses_ignored_when_inactive(controller, keyboard, caplog):
    with caplog.at_level(logging.DEBUG, logger="on_screen_keyboard.controller"):
        press(controller, keyboard, "Shift", "a")
    assert controller.state.shift_armed is False
    assert any("not bound" in r.message for r in caplog.records)


def test_enter_deselects_owning_field(controller, keyboard, view):
    field = DummyField(controller)
    controller.show(MemoryBuffer(), field)
    press(controller, keyboard, "Enter")
    assert field.deselected == 1
    assert not controller.active
    assert not view.visible


def test_enter_without_field_hides(controller, keyboard, view):
    controller.show(MemoryBuffer())
    press(controller, keyboard, "Enter")
    assert not controller.active
    assert not view.visible
