"""Tests for configuration management."""

import copy

from filetimes import config
from filetimes.config import DEFAULT_CONFIG, _merge_config, get_defaults, load_config, save_defaults


def test_default_config_not_mutated():
    """DEFAULT_CONFIG stays intact when a loaded config is modified."""
    original_default = copy.deepcopy(DEFAULT_CONFIG)

    loaded = load_config()
    loaded["defaults"]["time_format"] = "%s"

    assert DEFAULT_CONFIG == original_default
    assert load_config()["defaults"]["time_format"] == "%FT%T.%3N"


def test_merge_keeps_user_values_and_missing_defaults():
    merged = _merge_config(DEFAULT_CONFIG, {"defaults": {"utc": True}, "extra": {"x": 1}})
    assert merged["defaults"]["utc"] is True
    assert merged["defaults"]["item_format"] == "%m  %a  %p%n"
    assert merged["extra"] == {"x": 1}
    assert DEFAULT_CONFIG["defaults"]["utc"] is False


def test_save_and_load_defaults():
    save_defaults({"time_format": "%F", "sort": "mtime"})
    assert config.CONFIG_FILE.exists()
    defaults = get_defaults()
    assert defaults["time_format"] == "%F"
    assert defaults["sort"] == "mtime"
    assert defaults["item_format"] == "%m  %a  %p%n"


def test_save_preserves_other_sections():
    config.CONFIG_FILE.write_text('[notes]\nowner = "me"\n', encoding="utf-8")
    save_defaults({"utc": True})
    loaded = load_config()
    assert loaded["notes"] == {"owner": "me"}
    assert loaded["defaults"]["utc"] is True


def test_corrupt_config_falls_back_to_defaults(caplog):
    config.CONFIG_FILE.write_text("defaults = [not toml", encoding="utf-8")
    assert load_config() == DEFAULT_CONFIG
    assert "ignoring unreadable configuration" in caplog.text
