from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .kb_layout import Key


class KeyLabels(NamedTuple):
    primary: str
    secondary: str
    secondary_visible: bool


@dataclass
class ModifierState:
    caps_on: bool = False  # Caps Lock active
    shift_armed: bool = False  # one-shot Shift

    def toggle_shift(self) -> bool:
        """Toggle Shift; return True if now armed."""
        self.shift_armed = not self.shift_armed
        return self.shift_armed

    def toggle_caps_lock(self) -> bool:
        """Toggle Caps Lock and drop any armed Shift; return True if now on."""
        self.caps_on = not self.caps_on
        self.shift_armed = False
        return self.caps_on

    def release_shift(self) -> bool:
        """Clear a one-shot Shift; return True if it was armed."""
        was_armed = self.shift_armed
        self.shift_armed = False
        return was_armed

    def reset(self) -> None:
        self.caps_on = False
        self.shift_armed = False

    # ───────── character resolution ────────────────────────────────────────
    def _fold(self, value: str) -> str:
        return _case(value, upper=self.caps_on)

    def _shift_letter(self, key: Key) -> str:
        if key.is_letter:
            return _case(key.primary, upper=not self.caps_on)
        return key.primary

    def resolve_char(self, key: Key) -> str:
        """Return the text a press of ``key`` inserts in the current state.

        Special keys resolve to ``""``; they are handled by dedicated actions.
        """
        if key.is_special:
            return ""
        if self.shift_armed:
            if not key.secondary:
                return self._shift_letter(key)
            return key.secondary
        return self._fold(key.primary)

    def resolve_labels(self, key: Key) -> KeyLabels:
        """Return the labels shown on ``key`` so they match :meth:`resolve_char`.

        With Shift armed and a secondary value present the two labels trade
        places: the secondary glyph moves to the main slot and the unshifted
        label moves to the corner.
        """
        secondary_visible = not (key.is_letter or key.is_special)
        if key.is_special:
            return KeyLabels(key.primary, key.secondary, secondary_visible)

        if self.shift_armed:
            if not key.secondary:
                return KeyLabels(self._shift_letter(key), "", secondary_visible)
            return KeyLabels(key.secondary, self._fold(key.primary), secondary_visible)

        return KeyLabels(self._fold(key.primary), key.secondary, secondary_visible)


def _case(value: str, upper: bool) -> str:
    folded = value.upper() if upper else value.lower()
    # "ß".upper() is "SS"; a key never turns into more characters than it shows
    return folded if len(folded) == len(value) else value
