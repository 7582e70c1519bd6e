from typing import Callable

from .interfaces import KeyboardView
from .kb_layout import Key, Keyboard


class KeyNavigator:
    """Directional focus over the key grid, for gamepad or arrow-key input."""

    def __init__(
        self,
        keyboard: Keyboard,
        view: KeyboardView,
        on_activate: Callable[[Key], None],
    ) -> None:
        self.keyboard = keyboard
        self.view = view
        self.on_activate = on_activate

        self.row = 0
        self.column = 0

    @property
    def focused_key(self) -> Key:
        return self.keyboard[self.row][self.column]

    def focus_first(self) -> None:
        self.row = 0
        self.column = 0
        self.view.focus_key(self.focused_key)

    def sync(self, key: Key) -> bool:
        """Record that ``key`` already holds focus; return False if it is not on the keyboard."""
        for r_idx, row in enumerate(self.keyboard):
            for c_idx, candidate in enumerate(row):
                if candidate is key:
                    self.row, self.column = r_idx, c_idx
                    return True
        return False

    def move(self, dx: int = 0, dy: int = 0) -> Key:
        """Shift focus by ``dx`` keys and ``dy`` rows, stopping at the edges."""
        row = max(0, min(self.row + dy, len(self.keyboard) - 1))
        column = self.column + dx
        # rows differ in length; keep the column inside the target row
        column = max(0, min(column, len(self.keyboard[row]) - 1))

        self.row, self.column = row, column
        key = self.focused_key
        self.view.focus_key(key)
        return key

    def activate(self) -> None:
        """Press the focused key."""
        self.on_activate(self.focused_key)
