"""Persistent JSON preferences.

Stores the color mode, the name of the color-rule environment variable, and
the log level. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .colors.rules import DEFAULT_COLOR_ENV
from .terminal import ColorMode

APP_NAME = "colortree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_color_mode() -> ColorMode:
    """Return the configured color mode, ``auto`` when unset or unknown."""
    value = load_config().get("color")
    if not isinstance(value, str):
        return ColorMode.AUTO
    try:
        return ColorMode(value.strip().lower())
    except ValueError:
        return ColorMode.AUTO


def load_color_env_name() -> str:
    """Return the environment variable name holding color rules."""
    value = load_config().get("color_env")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_COLOR_ENV
    return value.strip()


def load_log_level() -> int:
    """Return the configured ``logging`` level number."""
    value = load_config().get("log_level")
    name = value.strip().upper() if isinstance(value, str) else DEFAULT_LOG_LEVEL
    if name not in _LOG_LEVELS:
        name = DEFAULT_LOG_LEVEL
    return getattr(logging, name)


__all__ = [
    "CONFIG_PATH",
    "load_color_env_name",
    "load_color_mode",
    "load_config",
    "load_log_level",
]
