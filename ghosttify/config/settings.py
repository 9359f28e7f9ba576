"""Configuration utilities for ghosttify."""

import math
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ghosttify.exceptions import ConfigurationError

from .constants import (
    BUNDLED_MAPPING_FILE,
    DCONF_TIMEOUT_SECONDS,
    DEFAULT_CONFIG_HOME,
    ENV_VAR_DEFINITIONS,
    GHOSTTY_CONFIG_DIR_NAME,
)


def get_ghostty_config_dir(override: Optional[Path] = None) -> Path:
    """Get the Ghostty configuration directory.

    Precedence: explicit override, GHOSTTIFY_CONFIG_DIR, $XDG_CONFIG_HOME/ghostty,
    then ~/.config/ghostty. The directory is not created.
    """
    if override is not None:
        return Path(override).expanduser()

    configured = os.environ.get("GHOSTTIFY_CONFIG_DIR")
    if configured:
        return Path(configured).expanduser()

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else DEFAULT_CONFIG_HOME
    return base / GHOSTTY_CONFIG_DIR_NAME


def get_mapping_path(override: Optional[Path] = None) -> Path:
    """Get the mapping table path, falling back to the bundled table."""
    if override is not None:
        return Path(override).expanduser()

    configured = os.environ.get("GHOSTTIFY_MAPPING_FILE")
    if configured:
        return Path(configured).expanduser()

    return BUNDLED_MAPPING_FILE


def get_dconf_timeout() -> float:
    """Get the dconf timeout in seconds.

    Raises:
        ConfigurationError: If GHOSTTIFY_DCONF_TIMEOUT is not a positive number.
    """
    try:
        value = get_env_var("GHOSTTIFY_DCONF_TIMEOUT")
    except ValueError as e:
        raise ConfigurationError(str(e), setting="GHOSTTIFY_DCONF_TIMEOUT") from e
    if value is None:
        return float(DCONF_TIMEOUT_SECONDS)
    return float(value)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    definition = ENV_VAR_DEFINITIONS[name]

    if definition.get("numeric"):
        try:
            number = float(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected a number"
        if not math.isfinite(number) or number <= 0:
            return False, f"Invalid value '{value}' for {name}. Must be a positive finite number"
        return True, None

    valid_values = definition.get("valid_values")
    if valid_values is None:
        return True, None

    if value.upper() not in [v.upper() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all ghosttify environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ValueError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ValueError(error)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_env_info() -> Dict[str, Dict]:
    """Get information about all ghosttify environment variables."""
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)
        info[name] = {
            "description": definition.get("description", ""),
            "value": value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
        }
    return info
