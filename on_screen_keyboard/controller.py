"""Key-press dispatch and show/hide lifecycle for one on-screen keyboard."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from . import text_editor
from .config import KeyboardConfig
from .deferred import DeferredAction
from .interfaces import KeyboardView, Scheduler, TextBuffer
from .kb_layout import Key, Keyboard
from .key_types import Action
from .modifier_state import ModifierState
from .navigation import KeyNavigator

log = logging.getLogger(__name__)


class KeyboardController:
    """Route key presses to the modifier state and the bound text buffer.

    One instance is created per keyboard and handed to every
    :class:`~.managed_field.ManagedField` that may use it. Handlers are wired
    once; while no buffer is bound (:attr:`active` is false) presses are
    ignored.
    """

    def __init__(
        self,
        keyboard: Keyboard,
        view: KeyboardView,
        *,
        state: ModifierState | None = None,
        config: KeyboardConfig | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.keyboard = keyboard
        self.view = view
        # single source of truth for modifier state
        self.state = state or ModifierState()
        self.config = config or KeyboardConfig()
        self.ignore_key_names = set(self.config.ignore_key_names)

        self.buffer: TextBuffer | None = None
        self.field: Any = None

        self.navigator = KeyNavigator(keyboard, view, self.on_key_press)
        self._auto_focus = DeferredAction(
            scheduler, self.config.auto_select_delay_ms, self.navigator.focus_first
        )
        self._actions: dict[Action, Callable[[], None]] = {
            Action.enter: self.submit,
            Action.back: self.delete_backward,
            Action.delete: self.delete_forward,
            Action.space: lambda: self.insert(" "),
            Action.left: lambda: self.move_caret(-1),
            Action.right: lambda: self.move_caret(1),
            Action.shift: self.toggle_shift,
            Action.caps: self.toggle_caps_lock,
        }

    @property
    def active(self) -> bool:
        return self.buffer is not None

    # ───────── lifecycle ───────────────────────────────────────────────────
    def show(self, buffer: TextBuffer, field: Any = None) -> None:
        """Bind ``buffer`` and display the keyboard in its initial state."""
        self.buffer = buffer
        self.field = field
        self.state.reset()
        self.view.set_visible(True)
        self.refresh_labels()
        self._auto_focus.schedule()
        log.info("Keyboard shown")

    def hide(self) -> None:
        self._auto_focus.cancel()
        was_active = self.active
        self.buffer = None
        self.field = None
        self.view.set_visible(False)
        if was_active:
            log.info("Keyboard hidden")

    def submit(self) -> None:
        """Finish editing: deselect the owning field, or just hide."""
        field = self.field
        if field is not None and hasattr(field, "deselect"):
            field.deselect()
        else:
            self.hide()

    # ───────── key dispatch ────────────────────────────────────────────────
    def on_key_press(self, key: Key) -> None:
        if not self.active:
            log.debug("Ignoring %r: keyboard is not bound to a field", key.primary)
            return

        if key.is_special:
            handler = self._actions.get(_action_for(key))
            if handler is None:
                log.warning("No handler for special key %r", key.primary)
                return
            handler()
            return

        chars = self.state.resolve_char(key)
        self.insert(chars)

        # one-shot Shift ends right after a real character
        if chars and self.state.release_shift():
            self.refresh_labels()

    # ───────── modifiers ───────────────────────────────────────────────────
    def toggle_shift(self) -> None:
        self.state.toggle_shift()
        self.refresh_labels()

    def toggle_caps_lock(self) -> None:
        self.state.toggle_caps_lock()
        self.refresh_labels()

    def refresh_labels(self) -> None:
        for key in self.keyboard.keys():
            if key.primary in self.ignore_key_names:
                continue
            self.view.render_label(key, self.state.resolve_labels(key))

    # ───────── editing ─────────────────────────────────────────────────────
    def insert(self, chars: str) -> None:
        if self.buffer is not None:
            text_editor.insert(self.buffer, chars)

    def delete_backward(self) -> None:
        if self.buffer is not None:
            text_editor.delete_backward(self.buffer)

    def delete_forward(self) -> None:
        if self.buffer is not None:
            text_editor.delete_forward(self.buffer)

    def move_caret(self, direction: int) -> None:
        if self.buffer is not None:
            text_editor.move_caret(self.buffer, direction)


def _action_for(key: Key) -> Optional[Action]:
    if key.action is not None:
        return key.action
    try:
        return Action.from_name(key.primary)
    except ValueError:
        return None
