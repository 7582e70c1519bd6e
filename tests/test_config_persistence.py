from on_screen_keyboard.config import KeyboardConfig, save_config, load_config


def test_save_and_load(tmp_path):
    cfg = KeyboardConfig(ignore_key_names=["Shift"], auto_select_delay_ms=300, selected_color="#ff0000")
    path = tmp_path / "keyboard.json"
    save_config(cfg, path=str(path))
    loaded = load_config(path=str(path))
    assert loaded == cfg


def test_missing_or_broken_file_gives_defaults(tmp_path):
    assert load_config(path=str(tmp_path / "missing.json")) == KeyboardConfig()
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_config(path=str(broken)) == KeyboardConfig()


def test_default_ignore_list():
    cfg = KeyboardConfig()
    assert "Shift" in cfg.ignore_key_names
    assert cfg.auto_select_delay_ms == 150
