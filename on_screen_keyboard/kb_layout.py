from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Optional

from .key_types import Action, SPECIAL_KEY_NAMES


@dataclass(frozen=True, slots=True)
class Key:
    primary: str
    secondary: str = ""        # empty → no distinct secondary character
    action: Optional[Action] = None

    def __post_init__(self):
        if not self.primary:
            raise ValueError("'primary' must be a non-empty string")
        if self.secondary is None:
            object.__setattr__(self, "secondary", "")

    @property
    def is_special(self) -> bool:
        """``True`` for function keys (Back, Enter, Shift, arrows, ...)."""
        return self.action is not None or self.primary.lower() in SPECIAL_KEY_NAMES

    @property
    def is_letter(self) -> bool:
        return len(self.primary) == 1 and self.primary.isalpha()


class KeyboardRow(Sequence[Key]):
    def __init__(self, keys: List[Key], *, stretch: bool = True):
        if not keys:
            raise ValueError("KeyboardRow must contain at least one Key")
        self._keys = keys
        self.stretch = stretch

    def __len__(self) -> int:
        return len(self._keys)

    def __getitem__(self, index):
        return self._keys[index]


class Keyboard(Sequence[KeyboardRow]):
    def __init__(self, rows: List[KeyboardRow]):
        if not rows:
            raise ValueError("Keyboard must contain at least one row")
        self._rows = rows

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index):
        return self._rows[index]

    def keys(self) -> list[Key]:
        """Return every key, row by row."""
        return [key for row in self._rows for key in row]

    def find(self, action: Action) -> Optional[Key]:
        """Return the first key bound to ``action``, if any."""
        for key in self.keys():
            if key.action == action:
                return key
        return None
