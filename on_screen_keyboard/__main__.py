"""Command line entry point: a text field with the on-screen keyboard."""

from __future__ import annotations

import argparse
import json
import logging
import os
import tkinter as tk

from . import logging as kb_logging
from .config import CONFIG_FILE, load_config
from .controller import KeyboardController
from .kb_gui import EntryBuffer, EntryField, VirtualKeyboard
from .kb_layout_io import load_keyboard
from .managed_field import ManagedField

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Launch a demo window with one managed text field."""
    parser = argparse.ArgumentParser(
        description="Type into a text field with the on-screen keyboard",
    )
    parser.add_argument(
        "--layout",
        default=os.getenv("LAYOUT_PATH"),
        help="Path to keyboard layout JSON",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_FILE,
        help="Path to keyboard settings JSON",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--auto-select",
        action="store_true",
        help="Select the text field shortly after start-up",
    )
    args = parser.parse_args(argv)

    try:
        kb_logging.setup(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    cfg = load_config(args.config)
    try:
        keyboard = load_keyboard(args.layout)
    except FileNotFoundError:
        parser.error(f"Layout file '{args.layout}' not found")
    except json.JSONDecodeError as exc:
        parser.error(f"Invalid JSON in layout file '{args.layout}': {exc.msg}")
    except (KeyError, ValueError) as exc:
        parser.error(f"Invalid layout file '{args.layout}': {exc}")

    vk = VirtualKeyboard(keyboard, config=cfg)
    root = vk.root

    def _report(exc_type, exc, tb) -> None:
        log.critical("Unhandled exception in Tk callback", exc_info=(exc_type, exc, tb))

    root.report_callback_exception = _report

    entry = tk.Entry(root, width=40, takefocus=1)
    entry.pack(padx=10, pady=10, fill=tk.X)

    controller = KeyboardController(keyboard, vk, config=cfg, scheduler=root)
    vk.bind(controller)

    entry_view = EntryField(entry, cfg)
    field = ManagedField(entry_view, EntryBuffer(entry), controller)
    entry_view.bind(field)

    entry.focus_set()
    if args.auto_select:
        field.enable_auto_select(root, cfg.auto_select_delay_ms)

    vk.run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
