"""JSON-based settings persistence for the Persian calendar tool."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".persian-calendar-settings.json")

_DEFAULTS = {
    "debug": False,
    "months_before": 0,
    "months_after": 0,
    "log_file": None,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if "debug" in stored and isinstance(stored["debug"], bool):
            settings["debug"] = stored["debug"]
        for key in ("months_before", "months_after"):
            value = stored.get(key)
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                settings[key] = value
        if isinstance(stored.get("log_file"), str):
            settings["log_file"] = stored["log_file"]
    except FileNotFoundError:
        pass
    except (json.JSONDecodeError, AttributeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", _SETTINGS_PATH)
