from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory. Missing or corrupted files fall back to defaults, and stored
values are merged over the defaults so new keys always exist.
"""

import json
import logging
import os
from typing import Any, Dict

from dirsim.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_ID_SEED,
    DEFAULT_LOCALE,
    DEFAULT_ROOT_NAME,
)
from dirsim.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime settings.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Namespace
        "root_name": DEFAULT_ROOT_NAME,
        "id_seed": DEFAULT_ID_SEED,

        # Presentation
        "locale": DEFAULT_LOCALE,

        # Diagnostics
        "log_level": "INFO",
        "save_log_file": False,
    }


def get_default_app_state() -> Dict[str, Any]:
    """Full structure written to config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "settings": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    stored = data.get("settings", {})
    if isinstance(stored, dict):
        # Unknown keys are dropped
        for key in state["settings"]:
            if key in stored:
                state["settings"][key] = stored[key]

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the stored settings merged over the defaults."""
    return dict(load_app_state()["settings"])


def save_config(config: Dict[str, Any]) -> None:
    """Store the provided settings."""
    state = load_app_state()
    state["settings"] = config
    save_app_state(state)
