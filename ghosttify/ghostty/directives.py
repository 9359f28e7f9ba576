"""
Ghostty configuration directives.

Only two directives matter here:

    config-file = other-file          (also "other-file" and ?other-file)
    keybind = ctrl+shift+c=copy_to_clipboard

Anything else (comments, unrelated settings) is ignored.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ghosttify.config.constants import INCLUDE_KEYWORD, KEYBIND_KEYWORD
from ghosttify.models import ActionBinding

_INCLUDE_RE = re.compile(rf"^\s*{re.escape(INCLUDE_KEYWORD)}\s*=\s*(?P<value>.*?)\s*$")
_KEYBIND_RE = re.compile(rf"^\s*{re.escape(KEYBIND_KEYWORD)}\s*=\s*(?P<value>.*?)\s*$")

# An "=" right after one of these is the key itself, not the separator
_KEY_PREFIX_CHARS = "+>"


@dataclass(frozen=True)
class IncludeDirective:
    """A config-file directive."""

    name: str
    optional: bool = False

    def target(self, including_file: Path) -> Path:
        """Path of the included file; relative names resolve next to the includer."""
        path = Path(self.name).expanduser()
        if not path.is_absolute():
            path = including_file.parent / path
        return path


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_include(line: str) -> Optional[IncludeDirective]:
    """Parse a config-file directive, or return None."""
    match = _INCLUDE_RE.match(line)
    if not match:
        return None

    value = match.group("value")
    optional = False
    if value.startswith("?"):
        optional, value = True, value[1:]
    value = _unquote(value)
    if value.startswith("?"):
        optional, value = True, value[1:]

    # A bare "config-file =" resets the list; there is nothing to follow
    if not value:
        return None
    return IncludeDirective(value, optional)


def split_keybind_value(value: str) -> Optional[ActionBinding]:
    """Split ``trigger=action`` on the separating "=".

    The separator is the first "=" that is not itself the trigger's key, so
    ``ctrl+==increase_font_size:1`` binds ctrl+= and ``==x`` binds a bare "=".
    """
    for index, char in enumerate(value):
        if char != "=":
            continue
        if index == 0 or value[index - 1] in _KEY_PREFIX_CHARS:
            continue
        trigger = value[:index].strip()
        action = value[index + 1 :].strip()
        if trigger and action:
            return ActionBinding(action, trigger)
        return None
    return None


def parse_keybind(line: str) -> Optional[ActionBinding]:
    """Parse a keybind directive into (action, trigger), or return None."""
    match = _KEYBIND_RE.match(line)
    if not match:
        return None
    return split_keybind_value(match.group("value"))


def format_keybind(binding: str, action: str) -> str:
    return f"{KEYBIND_KEYWORD} = {binding}={action}"


def format_include(name: str) -> str:
    return f"{INCLUDE_KEYWORD} = {name}"
