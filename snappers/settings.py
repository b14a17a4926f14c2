"""
Settings Module for Snappers Solver

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from .solver import DEFAULT_STRATEGY

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": DEFAULT_STRATEGY,
    "max_taps": 3,
    "timeout_sec": None,
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read (default: SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE

    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            raise ValueError("top-level JSON value must be an object")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        _drop_invalid_values(result)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def _drop_invalid_values(settings: Dict[str, Any]) -> None:
    """Reset entries whose type does not match the defaults, with a warning."""
    checks = {
        "debug_enabled": lambda v: isinstance(v, bool),
        "strategy_name": lambda v: isinstance(v, str),
        "max_taps": lambda v: isinstance(v, int) and not isinstance(v, bool),
        "timeout_sec": lambda v: v is None or (
            isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0
        ),
    }
    for key, is_valid in checks.items():
        if not is_valid(settings[key]):
            logger.warning(f"Ignoring invalid setting {key}={settings[key]!r}, using {DEFAULT_SETTINGS[key]!r}")
            settings[key] = DEFAULT_SETTINGS[key]


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (default: SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
