"""
GNOME Terminal shortcut reader.

GNOME Terminal keeps its shortcuts in dconf. ``dconf dump /org/gnome/terminal/``
prints an INI-like document whose ``[legacy/keybindings]`` section holds
``action-id='<Primary><Shift>c'`` entries. Only shortcuts changed from their
defaults are present; an unbound shortcut has the value ``'disabled'``.
"""

import configparser
import logging
import subprocess
from pathlib import Path
from typing import Optional

from ghosttify.config.constants import (
    DCONF_BINARY,
    GNOME_KEYBINDINGS_SECTION,
    GNOME_TERMINAL_DCONF_PATH,
)
from ghosttify.config.settings import get_dconf_timeout
from ghosttify.exceptions import (
    ExternalToolError,
    MalformedSourceDataError,
    SourceReadError,
)
from ghosttify.models import ShortcutSet

logger = logging.getLogger(__name__)


def run_dconf_dump(
    path: str = GNOME_TERMINAL_DCONF_PATH,
    timeout: Optional[float] = None,
) -> str:
    """Run ``dconf dump`` and return its output.

    Raises:
        ExternalToolError: dconf is missing, exits non-zero or times out.
        MalformedSourceDataError: dconf printed something that is not UTF-8.
    """
    cmd = [DCONF_BINARY, "dump", path]
    command = " ".join(cmd)
    if timeout is None:
        timeout = get_dconf_timeout()

    logger.debug(f"Running {command}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise ExternalToolError(
            "dconf is not installed; GNOME Terminal shortcuts cannot be read",
            command=command,
        ) from e
    except subprocess.TimeoutExpired as e:
        raise ExternalToolError(
            f"dconf did not answer within {timeout:g}s", command=command
        ) from e
    except UnicodeDecodeError as e:
        raise MalformedSourceDataError(f"dconf output is not UTF-8 text: {e}") from e

    if result.returncode != 0:
        raise ExternalToolError(
            "dconf dump failed",
            command=command,
            exit_code=result.returncode,
            stderr=result.stderr,
        )

    return result.stdout


def _unquote(value: str) -> str:
    """Strip GVariant string quoting: 'value' -> value."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_keybindings(text: str, section: str = GNOME_KEYBINDINGS_SECTION) -> ShortcutSet:
    """Parse the keybindings section of a dconf dump.

    Raises:
        MalformedSourceDataError: The text is not key-value INI.
    """
    parser = configparser.ConfigParser(delimiters=("=",), interpolation=None, strict=False)
    # Action ids are case sensitive
    parser.optionxform = str

    try:
        parser.read_string(text, source="dconf dump")
    except configparser.Error as e:
        raise MalformedSourceDataError(
            f"dconf output is not valid key-value text: {e}"
        ) from e

    if not parser.has_section(section):
        logger.info(f"No [{section}] section in dconf dump; all shortcuts are at their defaults")
        return {}

    shortcuts = {action: _unquote(binding) for action, binding in parser.items(section)}
    logger.debug(f"Read {len(shortcuts)} GNOME Terminal shortcuts")
    return shortcuts


def read_gnome_shortcuts(dump_file: Optional[Path] = None) -> ShortcutSet:
    """Read GNOME Terminal shortcuts from dconf, or from a saved dump file."""
    if dump_file is None:
        return parse_keybindings(run_dconf_dump())

    try:
        text = Path(dump_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path=str(dump_file)) from e
    return parse_keybindings(text)
