from dataclasses import dataclass, asdict, field
import json
import os

from .key_types import DEFAULT_IGNORED_KEYS


@dataclass
class KeyboardConfig:
    ignore_key_names: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_KEYS))
    auto_select_delay_ms: int = 150
    normal_color: str = "#ffffff"
    selected_color: str = "#b0d4ff"
    primary_text_color: str = "#000000"
    secondary_text_color: str = "#606060"
    primary_font_size: int = 18
    secondary_font_size: int = 10


CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".on_screen_keyboard")
CONFIG_FILE = os.path.join(CONFIG_DIR, "keyboard.json")


def load_config(path: str = CONFIG_FILE) -> "KeyboardConfig":
    """Return saved keyboard settings or defaults if unavailable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return KeyboardConfig(**data)
    except Exception:
        return KeyboardConfig()


def save_config(config: "KeyboardConfig", path: str = CONFIG_FILE) -> None:
    """Persist ``config`` to ``path`` in JSON format."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f)
