"""Selection-aware editing operations on a :class:`~.interfaces.TextBuffer`.

Every operation normalises the anchor/focus pair with ``min``/``max`` and
clamps offsets to the buffer, so out-of-range input degrades to a no-op
instead of raising. After an edit the caret and both selection endpoints
are collapsed to the same position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .interfaces import TextBuffer

log = logging.getLogger(__name__)


@dataclass
class MemoryBuffer:
    """Plain in-memory :class:`TextBuffer`."""

    text: str = ""
    selection_start: int = 0
    selection_end: int = 0
    caret: int = 0

    @classmethod
    def at(cls, text: str, caret: int | None = None) -> "MemoryBuffer":
        pos = len(text) if caret is None else caret
        return cls(text, pos, pos, pos)


def _clamp(value: int, text: str) -> int:
    return max(0, min(value, len(text)))


def _span(buffer: TextBuffer) -> tuple[int, int]:
    text = buffer.text
    a = _clamp(buffer.selection_start, text)
    b = _clamp(buffer.selection_end, text)
    return min(a, b), max(a, b)


def _collapse(buffer: TextBuffer, position: int) -> None:
    buffer.caret = position
    buffer.selection_start = position
    buffer.selection_end = position


def insert(buffer: TextBuffer, chars: str) -> None:
    """Replace the selection with ``chars`` or splice them in at the caret."""
    if not chars:
        return

    text = buffer.text
    start, end = _span(buffer)
    if start != end:
        buffer.text = text[:start] + chars + text[end:]
        caret = start + len(chars)
    else:
        pos = _clamp(buffer.caret, text)
        buffer.text = text[:pos] + chars + text[pos:]
        caret = pos + len(chars)

    _collapse(buffer, caret)
    log.debug("caret position: %d", caret)


def delete_backward(buffer: TextBuffer) -> None:
    text = buffer.text
    start, end = _span(buffer)
    if start != end:
        buffer.text = text[:start] + text[end:]
        _collapse(buffer, start)
        return

    pos = _clamp(buffer.caret, text)
    if pos > 0:
        buffer.text = text[: pos - 1] + text[pos:]
        pos -= 1
    _collapse(buffer, pos)


def delete_forward(buffer: TextBuffer) -> None:
    text = buffer.text
    start, end = _span(buffer)
    if start != end:
        buffer.text = text[:start] + text[end:]
        _collapse(buffer, start)
        return

    pos = _clamp(buffer.caret, text)
    if pos < len(text):
        buffer.text = text[:pos] + text[pos + 1 :]
    _collapse(buffer, pos)


def move_caret(buffer: TextBuffer, direction: int) -> None:
    """Step the caret by ``direction``.

    An active selection collapses to its start whichever way the caret moves.
    """
    start, end = _span(buffer)
    if start != end:
        position = start
    else:
        position = _clamp(buffer.caret + direction, buffer.text)

    _collapse(buffer, position)
    log.debug("caret position: %d", position)
