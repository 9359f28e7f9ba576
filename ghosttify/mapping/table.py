"""
Mapping table loader.

The table ships as YAML next to this module (gnome_to_ghostty.yaml) with two
sections:

    keys:       GNOME accelerator token -> Ghostty key name
    actions:    GNOME Terminal action id -> Ghostty action

An entry mapped to an empty string or to "disabled" drops the whole shortcut.
A token missing from the table passes through unchanged.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from ghosttify.config.constants import DISABLED_SENTINEL
from ghosttify.config.settings import get_mapping_path
from ghosttify.exceptions import MappingError

logger = logging.getLogger(__name__)


class MappingEffect(str, Enum):
    """What a table lookup does to a token or action."""

    RENAME = "rename"
    IDENTITY = "identity"
    DROP = "drop"


def classify_entry(source: str, mapped: Optional[str]) -> MappingEffect:
    """Classify a table entry; None means the source is absent from the table."""
    if mapped is None:
        return MappingEffect.IDENTITY
    if mapped == "" or mapped == DISABLED_SENTINEL:
        return MappingEffect.DROP
    if mapped == source:
        return MappingEffect.IDENTITY
    return MappingEffect.RENAME


@dataclass(frozen=True)
class MappingTable:
    """Read-only key and action maps.

    Build instances with from_dicts() so the "disabled" token is always
    routed to the drop rule.
    """

    keys: Mapping[str, str]
    actions: Mapping[str, str]

    @classmethod
    def from_dicts(cls, keys: Dict[str, str], actions: Dict[str, str]) -> "MappingTable":
        key_map = dict(keys)
        # GNOME stores an unbound shortcut as the bare value "disabled"
        key_map.setdefault(DISABLED_SENTINEL, "")
        return cls(keys=MappingProxyType(key_map), actions=MappingProxyType(dict(actions)))

    def lookup_key(self, token: str) -> Tuple[MappingEffect, str]:
        """Resolve a GNOME token to (effect, Ghostty token)."""
        mapped = self.keys.get(token)
        effect = classify_entry(token, mapped)
        if effect is MappingEffect.RENAME:
            return effect, mapped
        return effect, token if effect is MappingEffect.IDENTITY else ""

    def lookup_action(self, action: str) -> Optional[str]:
        """Resolve a GNOME action to its Ghostty action, or None if unsupported.

        Unlike keys, actions have no pass-through: the two emulators use
        unrelated action namespaces.
        """
        mapped = self.actions.get(action)
        if mapped is None or classify_entry(action, mapped) is MappingEffect.DROP:
            return None
        return mapped


def _coerce_section(data: Dict[str, Any], name: str, path: Path) -> Dict[str, str]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise MappingError(f"Section '{name}' must be a mapping", path=path)

    result = {}
    for source, target in section.items():
        # YAML turns bare digits and yes/no into non-strings
        result[str(source)] = "" if target is None else str(target)
    return result


def parse_mapping_table(text: str, path: Path) -> MappingTable:
    """Parse YAML mapping text into a MappingTable."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise MappingError("Mapping table is not valid YAML", path=path) from e

    if not isinstance(data, dict):
        raise MappingError("Mapping table must be a mapping with 'keys' and 'actions'", path=path)

    keys = _coerce_section(data, "keys", path)
    actions = _coerce_section(data, "actions", path)
    logger.debug(f"Loaded mapping table from {path}: {len(keys)} keys, {len(actions)} actions")
    return MappingTable.from_dicts(keys, actions)


@lru_cache(maxsize=None)
def _load_cached(path: Path) -> MappingTable:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MappingError("Could not read mapping table", path=path) from e
    return parse_mapping_table(text, path)


def load_mapping_table(path: Optional[Path] = None) -> MappingTable:
    """Load the mapping table once per process.

    Args:
        path: Alternative YAML table; defaults to GHOSTTIFY_MAPPING_FILE or the
            bundled table.
    """
    return _load_cached(get_mapping_path(path).resolve())
