"""
Centralized constants for ghosttify.

File names, directive keywords and defaults used by the translator, the
Ghostty config resolver and the merger live here so the pieces agree on them.
"""

from pathlib import Path

# =============================================================================
# GNOME TERMINAL (SOURCE)
# =============================================================================

DCONF_BINARY = "dconf"
GNOME_TERMINAL_DCONF_PATH = "/org/gnome/terminal/"
GNOME_KEYBINDINGS_SECTION = "legacy/keybindings"
DCONF_TIMEOUT_SECONDS = 10  # dconf reads a local store, should be near-instant

# Bracket characters delimiting modifier tokens, e.g. <Primary><Shift>c
GNOME_TOKEN_DELIMITERS = "<>"

# =============================================================================
# MAPPING TABLE
# =============================================================================

# Sentinel value meaning "unsupported in Ghostty" (same effect as an empty value)
DISABLED_SENTINEL = "disabled"

BUNDLED_MAPPING_FILE = Path(__file__).parent.parent / "mapping" / "gnome_to_ghostty.yaml"

# =============================================================================
# GHOSTTY (TARGET)
# =============================================================================

GHOSTTY_ROOT_CONFIG = "config"
OVERRIDE_FILE_NAME = "gnome-shortcuts"
OVERRIDE_MARKER = "# Added by ghosttify"

KEYBIND_KEYWORD = "keybind"
INCLUDE_KEYWORD = "config-file"
GHOSTTY_KEY_DELIMITER = "+"

DEFAULT_CONFIG_HOME = Path.home() / ".config"
GHOSTTY_CONFIG_DIR_NAME = "ghostty"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "GHOSTTIFY_CONFIG_DIR": {
        "description": "Ghostty configuration directory to read and update",
        "default": None,
        "valid_values": None,
    },
    "GHOSTTIFY_MAPPING_FILE": {
        "description": "YAML mapping table used instead of the bundled one",
        "default": None,
        "valid_values": None,
    },
    "GHOSTTIFY_DCONF_TIMEOUT": {
        "description": "Seconds to wait for `dconf dump` before giving up",
        "default": str(DCONF_TIMEOUT_SECONDS),
        "valid_values": None,
        "numeric": True,
    },
    "GHOSTTIFY_LOG_LEVEL": {
        "description": "Log level for ghosttify's own loggers",
        "default": "WARNING",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
