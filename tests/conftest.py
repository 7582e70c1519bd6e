import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from on_screen_keyboard.kb_layout_io import keyboard_from_blueprint


class DummyRoot:
    def __init__(self):
        self.scheduled = []
        self.cancelled = []

    def after(self, ms, func):
        self.scheduled.append((ms, func))
        return f"id{len(self.scheduled)}"

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)
        self.scheduled.clear()

    def run_pending(self):
        pending, self.scheduled = self.scheduled, []
        for _, func in pending:
            func()


class DummyView:
    def __init__(self):
        self.visible = False
        self.labels = {}
        self.focused = []

    def set_visible(self, visible):
        self.visible = visible

    def render_label(self, key, labels):
        self.labels[key.primary] = labels

    def focus_key(self, key):
        self.focused.append(key)


SMALL_LAYOUT = {
    "rows": [
        {"keys": [
            {"primary": "1", "secondary": "!"},
            {"primary": "2", "secondary": "@"},
            {"primary": "Back", "action": "back"},
        ]},
        {"keys": [
            {"primary": "a"},
            {"primary": "b"},
            {"primary": "Delete", "action": "delete"},
            {"primary": "Enter", "action": "enter"},
        ]},
        {"keys": [
            {"primary": "Shift", "action": "shift"},
            {"primary": "Caps", "action": "caps"},
            {"primary": "<", "action": "left"},
            {"primary": "Space", "action": "space"},
            {"primary": ">", "action": "right"},
        ]},
    ]
}


@pytest.fixture
def keyboard():
    return keyboard_from_blueprint(SMALL_LAYOUT)


@pytest.fixture
def view():
    return DummyView()


@pytest.fixture
def root():
    return DummyRoot()


def key_named(keyboard, primary):
    for key in keyboard.keys():
        if key.primary == primary:
            return key
    raise LookupError(primary)
