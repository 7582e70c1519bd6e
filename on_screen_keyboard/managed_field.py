from __future__ import annotations

import logging
from typing import Optional

from .controller import KeyboardController
from .deferred import DeferredAction
from .interfaces import FieldState, FieldView, Scheduler, TextBuffer

log = logging.getLogger(__name__)


class ManagedField:
    """Tie one host text field to a shared :class:`KeyboardController`.

    The field stays read-only until selected. Selecting it through navigation
    shows the keyboard; selecting it with the pointer only makes it editable
    so the user can type on a physical keyboard.
    """

    def __init__(
        self,
        view: FieldView,
        buffer: TextBuffer,
        keyboard: KeyboardController,
    ) -> None:
        self.view = view
        self.buffer = buffer
        self.keyboard = keyboard

        self.selected = False
        self.from_pointer = False
        self._auto_select: Optional[DeferredAction] = None

        self.view.set_editable(False)
        self.view.set_visual_state(FieldState.NORMAL)

    # ───────── events ──────────────────────────────────────────────────────
    def highlight(self, on: bool) -> None:
        """Navigation focus arrived on (or left) the field."""
        if self.selected:
            return
        self.view.set_visual_state(FieldState.ACTIVE if on else FieldState.NORMAL)

    def select(self, from_pointer: bool = False) -> None:
        self._cancel_auto_select()
        self.selected = True
        self.from_pointer = from_pointer
        self.view.set_editable(True)
        self.view.set_visual_state(FieldState.NORMAL)

        # keyboard only for non-pointer input
        if not from_pointer:
            self.keyboard.show(self.buffer, self)
        log.debug("Field selected (pointer=%s)", from_pointer)

    def on_pointer_click(self) -> None:
        if not self.selected:
            self.select(from_pointer=True)
            self.view.request_focus()

    def deselect(self) -> None:
        self._cancel_auto_select()
        if self.keyboard.field is self:
            self.keyboard.hide()
        self.selected = False
        self.from_pointer = False
        self.view.set_editable(False)
        self.view.set_visual_state(FieldState.NORMAL)
        self.view.request_focus()
        log.debug("Field deselected")

    # ───────── select-on-start ─────────────────────────────────────────────
    def enable_auto_select(self, scheduler: Optional[Scheduler], delay_ms: int) -> None:
        """Select the field after ``delay_ms`` unless the user acts first."""
        self._auto_select = DeferredAction(scheduler, delay_ms, self._auto_select_fire)
        self._auto_select.schedule()

    def _auto_select_fire(self) -> None:
        if not self.selected:
            self.select()

    def _cancel_auto_select(self) -> None:
        if self._auto_select is not None:
            self._auto_select.cancel()
