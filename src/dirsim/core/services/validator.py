from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted settings (config file, CLI flags) and the
namespace engine. Coerces values to the expected types, fills missing keys
with domain defaults and collects a warning for every correction made.
"""

import logging
from typing import Any, Dict, List, Tuple

from dirsim.domain.config import get_default_config
from dirsim.domain.constants import SUPPORTED_LOCALES
from dirsim.infra.logging.config import LEVEL_NAMES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided settings dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of
                falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["root_name"] = _as_str(merged.get("root_name"), defaults["root_name"], "root_name", warnings, strict)
    merged["locale"] = _as_str(merged.get("locale"), defaults["locale"], "locale", warnings, strict)
    merged["log_level"] = _as_str(merged.get("log_level"), defaults["log_level"], "log_level", warnings, strict)
    merged["id_seed"] = _as_int(merged.get("id_seed"), defaults["id_seed"], "id_seed", warnings, strict)
    merged["save_log_file"] = _as_bool(
        merged.get("save_log_file"), defaults["save_log_file"], "save_log_file", warnings, strict
    )

    # Domain-specific constraints
    if merged["id_seed"] < 0:
        _reject(f"Invalid id_seed {merged['id_seed']}: must be non-negative.", warnings, strict)
        merged["id_seed"] = defaults["id_seed"]

    locale = merged["locale"].lower()
    if locale not in SUPPORTED_LOCALES:
        _reject(f"Unsupported locale '{merged['locale']}'.", warnings, strict)
        locale = defaults["locale"]
    merged["locale"] = locale

    level = merged["log_level"].upper()
    if level not in LEVEL_NAMES:
        _reject(f"Unknown log level '{merged['log_level']}'.", warnings, strict)
        level = defaults["log_level"]
    merged["log_level"] = level

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept integers and, outside strict mode, numeric strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None:
        return fallback
    if isinstance(value, str) and not strict:
        try:
            converted = int(value.strip())
        except ValueError:
            warnings.append(f"Invalid field '{field}': '{value}' is not an integer. Using fallback.")
            return fallback
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return converted

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "si", "sí"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
