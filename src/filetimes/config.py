"""Configuration file management for filetimes."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

import tomli_w

logger = logging.getLogger(__name__)

# Default configuration file location
CONFIG_FILE = Path(os.environ.get("FILETIMES_CONFIG", Path.home() / ".filetimes.toml"))

# Default configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    "defaults": {
        "item_format": "%m  %a  %p%n",
        "time_format": "%FT%T.%3N",
        "utc": False,
        "sort": "none",
        "reverse": False,
        "follow_symlinks": True,
    },
}


def load_config() -> Dict[str, Any]:
    """Load configuration from file or return defaults."""
    if not CONFIG_FILE.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(CONFIG_FILE, "rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as err:
        # If config is corrupted, return defaults
        logger.warning("ignoring unreadable configuration %s: %s", CONFIG_FILE, err)
        return copy.deepcopy(DEFAULT_CONFIG)
    # Merge with defaults to ensure all keys exist
    return _merge_config(DEFAULT_CONFIG, config)


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "wb") as f:
            tomli_w.dump(config, f)
    except OSError as err:
        logger.warning("failed to save configuration to %s: %s", CONFIG_FILE, err)


def _merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge user config with defaults, preserving user values."""
    result = copy.deepcopy(default)
    for key, value in user.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value
    return result


def get_defaults() -> Dict[str, Any]:
    """Get the option defaults section."""
    config = load_config()
    return config.get("defaults", copy.deepcopy(DEFAULT_CONFIG["defaults"]))


def save_defaults(defaults: Dict[str, Any]) -> None:
    """Store option defaults, keeping any other sections of the file."""
    config = load_config()
    config["defaults"] = _merge_config(config.get("defaults", {}), defaults)
    save_config(config)


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    "get_defaults",
    "save_defaults",
]
