"""Logging helpers for the package."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


_DEFAULT_LOG = Path.home() / ".on_screen_keyboard.log"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Return a numeric level for ``level`` (``"debug"``, ``"INFO"``, 20, ...)."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def setup(level: int | str = logging.INFO, log_file: str | Path | None = None) -> None:
    """Configure logging for the keyboard application.

    Parameters
    ----------
    level:
        Minimum severity level, as a number or a level name.
    log_file:
        Optional path to the log file.  If not provided,
        ``~/.on_screen_keyboard.log`` is used.
    """

    log_file = _DEFAULT_LOG if log_file is None else Path(log_file)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError:
        # Fall back to console-only logging if the file can't be opened.
        pass

    logging.basicConfig(
        level=resolve_level(level),
        format=_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )

    def _excepthook(exc_type, exc, tb) -> None:
        logging.getLogger("on_screen_keyboard").critical(
            "Unhandled exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _excepthook
