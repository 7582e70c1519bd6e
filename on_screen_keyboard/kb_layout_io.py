import json
from importlib import resources

from .kb_layout import Key, KeyboardRow, Keyboard
from .key_types import Action

DEFAULT_LAYOUT = 'qwerty.json'


def load_keyboard(path: str | None = None) -> Keyboard:
    """Load a :class:`Keyboard` definition from ``path`` or package data."""
    if path:
        with open(path, 'r', encoding='utf-8') as file:
            blueprint = json.load(file)
    else:
        with resources.files('on_screen_keyboard.resources.layouts').joinpath(DEFAULT_LAYOUT).open('r', encoding='utf-8') as file:
            blueprint = json.load(file)

    return keyboard_from_blueprint(blueprint)


def keyboard_from_blueprint(blueprint: dict) -> Keyboard:
    row_objects = []
    for row in blueprint['rows']:
        key_objects = []
        for key in row['keys']:
            action = key.get('action')
            key_objects.append(
                Key(
                    key['primary'],
                    key.get('secondary') or "",
                    Action.from_name(action) if action else None,
                )
            )
        row_objects.append(
            KeyboardRow(
                key_objects,
                stretch=row.get('stretch', True),
            )
        )

    return Keyboard(row_objects)
