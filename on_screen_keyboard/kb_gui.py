import logging
import tkinter as tk
from typing import Optional

from .config import KeyboardConfig
from .interfaces import FieldState
from .kb_layout import Key, Keyboard
from .modifier_state import KeyLabels

log = logging.getLogger(__name__)


class VirtualKeyboard:
    """Render a Keyboard as buttons with a primary and a corner label."""

    def __init__(
        self,
        keyboard: Keyboard,
        root: Optional[tk.Misc] = None,
        config: Optional[KeyboardConfig] = None,
    ):
        self.keyboard = keyboard
        self.config = config or KeyboardConfig()
        self.visible = False
        self.key_widgets: dict[int, tuple[tk.Button, Optional[tk.Label]]] = {}

        if root is None:
            root = tk.Tk()
            self.root = root
            self.root.title("On-screen keyboard")
            try:
                self.root.attributes("-topmost", True)
            except tk.TclError:
                # Attributes may fail on some platforms (e.g. dummy Tk during tests).
                pass
        else:
            self.root = root

        self.frame = tk.Frame(root)
        self.render()

    # ───────── KeyboardView ────────────────────────────────────────────────
    def set_visible(self, visible: bool) -> None:
        if visible and not self.visible:
            self.frame.pack(side=tk.BOTTOM, padx=5, pady=5)
        elif not visible and self.visible:
            self.frame.pack_forget()
        self.visible = visible

    def render_label(self, key: Key, labels: KeyLabels) -> None:
        widgets = self.key_widgets.get(id(key))
        if widgets is None:
            log.debug("No widget for key %r", key.primary)
            return
        button, corner = widgets
        button.config(text=labels.primary)
        # keys without a corner label just show the primary text
        if corner is None:
            return
        if labels.secondary_visible:
            corner.config(text=labels.secondary)
            corner.place(x=2, y=0)
        else:
            corner.place_forget()

    def focus_key(self, key: Key) -> None:
        widgets = self.key_widgets.get(id(key))
        if widgets is not None:
            widgets[0].focus_set()

    # ───────── wiring ──────────────────────────────────────────────────────
    def bind(self, controller) -> None:
        """Connect every button to ``controller`` once."""
        navigator = controller.navigator
        moves = {"<Left>": (-1, 0), "<Right>": (1, 0), "<Up>": (0, -1), "<Down>": (0, 1)}

        for key in self.keyboard.keys():
            button, _ = self.key_widgets[id(key)]
            button.config(command=lambda k=key: controller.on_key_press(k))
            # Tab moves Tk focus without the navigator, so every binding syncs first
            button.bind("<FocusIn>", lambda _e, k=key: navigator.sync(k))
            for sequence, (dx, dy) in moves.items():
                button.bind(sequence, lambda _e, k=key, dx=dx, dy=dy: _nav(navigator, k, dx, dy))
            button.bind("<Return>", lambda _e, k=key: _activate(navigator, k))
            button.bind("<Escape>", lambda _e: _submit(controller))

    def render(self) -> None:
        for child in self.frame.winfo_children():
            child.destroy()
        self.key_widgets.clear()

        max_len = max(len(r) for r in self.keyboard)
        base_width = 4

        for row in self.keyboard:
            row_frame = tk.Frame(self.frame)
            row_frame.pack(fill=tk.X)

            stretch = row.stretch and len(row) < max_len
            width = int(base_width * max_len / len(row)) if stretch else base_width

            for key in row:
                button = tk.Button(
                    row_frame,
                    text=key.primary,
                    width=width,
                    relief=tk.RAISED,
                    bd=2,
                    fg=self.config.primary_text_color,
                    font=("TkDefaultFont", self.config.primary_font_size),
                    takefocus=1,
                )
                button.pack(side=tk.LEFT, expand=stretch, fill=tk.X)

                corner = None
                if not key.is_special:
                    corner = tk.Label(
                        button,
                        text=key.secondary,
                        fg=self.config.secondary_text_color,
                        font=("TkDefaultFont", self.config.secondary_font_size),
                    )
                    if not key.is_letter:
                        corner.place(x=2, y=0)
                self.key_widgets[id(key)] = (button, corner)

    # ---------- main loop ----------
    def run(self):
        self.root.mainloop()


def _nav(navigator, key: Key, dx: int, dy: int) -> str:
    navigator.sync(key)
    navigator.move(dx, dy)
    return "break"


def _activate(navigator, key: Key) -> str:
    navigator.sync(key)
    navigator.activate()
    return "break"


def _submit(controller) -> str:
    controller.submit()
    return "break"


class EntryBuffer:
    """Expose a ``tk.Entry`` as a :class:`~.interfaces.TextBuffer`."""

    def __init__(self, entry: tk.Entry):
        self.entry = entry

    @property
    def text(self) -> str:
        return self.entry.get()

    @text.setter
    def text(self, value: str) -> None:
        self.entry.delete(0, tk.END)
        self.entry.insert(0, value)

    @property
    def caret(self) -> int:
        return int(self.entry.index(tk.INSERT))

    @caret.setter
    def caret(self, value: int) -> None:
        self.entry.icursor(value)

    def _selection(self) -> tuple[int, int]:
        if not self.entry.selection_present():
            caret = self.caret
            return caret, caret
        first = int(self.entry.index(tk.SEL_FIRST))
        last = int(self.entry.index(tk.SEL_LAST))
        if int(self.entry.index(tk.ANCHOR)) == last:
            return last, first
        return first, last

    def _set_selection(self, anchor: int, focus: int) -> None:
        if anchor == focus:
            self.entry.selection_clear()
        else:
            self.entry.selection_range(min(anchor, focus), max(anchor, focus))

    @property
    def selection_start(self) -> int:
        return self._selection()[0]

    @selection_start.setter
    def selection_start(self, value: int) -> None:
        self._set_selection(value, self._selection()[1])

    @property
    def selection_end(self) -> int:
        return self._selection()[1]

    @selection_end.setter
    def selection_end(self, value: int) -> None:
        self._set_selection(self._selection()[0], value)


class EntryField:
    """:class:`~.interfaces.FieldView` over a ``tk.Entry``."""

    def __init__(self, entry: tk.Entry, config: Optional[KeyboardConfig] = None):
        self.entry = entry
        self.config = config or KeyboardConfig()

    def set_editable(self, editable: bool) -> None:
        self.entry.config(state=tk.NORMAL if editable else tk.DISABLED)

    def set_visual_state(self, state: FieldState) -> None:
        color = (
            self.config.selected_color
            if state == FieldState.ACTIVE
            else self.config.normal_color
        )
        self.entry.config(disabledbackground=color)

    def request_focus(self) -> None:
        self.entry.focus_set()

    def bind(self, field) -> None:
        """Forward entry events to a :class:`~.managed_field.ManagedField`."""
        self.entry.bind("<FocusIn>", lambda _e: field.highlight(True))
        self.entry.bind("<FocusOut>", lambda _e: field.highlight(False))
        self.entry.bind("<Button-1>", lambda _e: field.on_pointer_click())
        self.entry.bind("<Return>", lambda _e: _select(field))
        self.entry.bind("<Escape>", lambda _e: _deselect(field))


def _select(field) -> str:
    if not field.selected:
        field.select()
    return "break"


def _deselect(field) -> None:
    if field.selected:
        field.deselect()
