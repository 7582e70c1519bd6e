"""Interface definitions to decouple core components from the GUI toolkit."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable


class FieldState(str, Enum):
    NORMAL = "normal"
    ACTIVE = "active"


@runtime_checkable
class TextBuffer(Protocol):
    """Editable text owned by the host field.

    ``selection_start``/``selection_end`` are the anchor and focus offsets and
    are not guaranteed to be ordered.
    """

    text: str
    selection_start: int
    selection_end: int
    caret: int


@runtime_checkable
class KeyboardView(Protocol):
    """What the controller needs from the rendered keyboard."""

    def set_visible(self, visible: bool) -> None:
        ...

    def render_label(self, key: Any, labels: Any) -> None:
        """Show ``labels`` (a :class:`~.modifier_state.KeyLabels`) on ``key``."""
        ...

    def focus_key(self, key: Any) -> None:
        """Move navigation focus to ``key``."""
        ...


@runtime_checkable
class FieldView(Protocol):
    """Host text field as seen by :class:`~.managed_field.ManagedField`."""

    def set_editable(self, editable: bool) -> None:
        ...

    def set_visual_state(self, state: FieldState) -> None:
        ...

    def request_focus(self) -> None:
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Minimal timer API; a ``tkinter`` root satisfies it."""

    def after(self, ms: int, func: Callable[[], None]) -> Any:
        ...

    def after_cancel(self, after_id: Any) -> None:
        ...
