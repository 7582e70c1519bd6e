from enum import Enum, auto


# Authoritative list of special key actions. Any new function key must be added here.
class Action(str, Enum):
    def _generate_next_value_(name, *_):
        return name

    back   = auto()  # delete the character before the caret
    delete = auto()  # delete the character at the caret
    enter  = auto()  # submit and close the keyboard
    space  = auto()
    left   = auto()
    right  = auto()
    shift  = auto()  # one-shot
    caps   = auto()  # toggle

    @classmethod
    def from_name(cls, name: str) -> "Action":
        """Look up an action by name, case-insensitively.

        Layout files use the labels printed on the keys ("Back", "Caps", ...),
        so ``<`` and ``>`` are accepted as the arrow keys as well.
        """
        lowered = name.strip().lower()
        lowered = _ALIASES.get(lowered, lowered)
        try:
            return cls[lowered]
        except KeyError:
            raise ValueError(f"Unknown key action {name!r}") from None


_ALIASES = {
    "<": "left",
    ">": "right",
    "backspace": "back",
    "leftarrow": "left",
    "rightarrow": "right",
    "caps_lock": "caps",
    "capslock": "caps",
}

# Primary values that mark a key as special even when no action is given.
SPECIAL_KEY_NAMES = frozenset(
    {"back", "enter", "delete", "caps", "space", ">", "<", "shift"}
)

# Keys whose labels are never remapped by the modifier state.
DEFAULT_IGNORED_KEYS = (
    "Shift",
    "Caps",
    "Enter",
    "Delete",
    "Back",
    "Space",
    "LeftArrow",
    "RightArrow",
)
