"""
GNOME accelerator to Ghostty trigger translation.

A GNOME accelerator such as ``<Primary><Shift>c`` is split on the angle
brackets into tokens, each token is looked up in the key map and the
survivors are joined with ``+``:

    translate("copy", "<Primary><Shift>c", table)
    -> ActionBinding(action="copy_to_clipboard", binding="ctrl+shift+c")

Token order is preserved, never sorted. One dropped token drops the whole
shortcut, and so does an action Ghostty has no equivalent for.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ghosttify.config.constants import GHOSTTY_KEY_DELIMITER, GNOME_TOKEN_DELIMITERS
from ghosttify.mapping.table import MappingEffect, MappingTable
from ghosttify.models import ActionBinding, ShortcutSet

logger = logging.getLogger(__name__)

_TOKEN_SPLIT_RE = re.compile(f"[{re.escape(GNOME_TOKEN_DELIMITERS)}]")


@dataclass
class TranslationResult:
    """Translated shortcuts plus the source actions that produced nothing."""

    shortcuts: ShortcutSet = field(default_factory=dict)
    untranslated: List[str] = field(default_factory=list)


def split_gnome_binding(binding: str) -> List[str]:
    """Split a GNOME accelerator into its tokens, in source order."""
    return [token for token in _TOKEN_SPLIT_RE.split(binding) if token]


def translate(action: str, binding: str, table: MappingTable) -> Optional[ActionBinding]:
    """Translate one GNOME (action, accelerator) pair into Ghostty syntax.

    Returns None when the action or any key token is unsupported, or when no
    tokens are left.
    """
    ghostty_action = table.lookup_action(action)
    if ghostty_action is None:
        return None

    tokens = []
    for token in split_gnome_binding(binding):
        effect, mapped = table.lookup_key(token)
        if effect is MappingEffect.DROP:
            return None
        tokens.append(mapped)

    if not tokens:
        return None

    return ActionBinding(ghostty_action, GHOSTTY_KEY_DELIMITER.join(tokens))


def translate_all(shortcuts: ShortcutSet, table: MappingTable) -> TranslationResult:
    """Translate a whole GNOME shortcut set.

    Source actions are processed in sorted order, so when two of them map to
    the same Ghostty action the alphabetically last one wins.
    """
    result = TranslationResult()

    for action in sorted(shortcuts):
        translated = translate(action, shortcuts[action], table)
        if translated is None:
            logger.debug(f"No Ghostty equivalent for {action}={shortcuts[action]!r}")
            result.untranslated.append(action)
            continue

        previous = result.shortcuts.get(translated.action)
        if previous is not None and previous != translated.binding:
            logger.info(
                f"{action} overrides an earlier binding for {translated.action} "
                f"({previous} -> {translated.binding})"
            )
        result.shortcuts[translated.action] = translated.binding

    return result
