"""Core data types shared by the translator, resolver and merger."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, NamedTuple

# action identifier -> serialized binding
ShortcutSet = Dict[str, str]


class ActionBinding(NamedTuple):
    """A single action paired with its serialized binding."""

    action: str
    binding: str


@dataclass
class ConfigNode:
    """One Ghostty configuration file and the files it includes."""

    path: Path
    lines: List[str] = field(default_factory=list)
    includes: List[Path] = field(default_factory=list)
    readable: bool = True


@dataclass
class ConfigTree:
    """Every file reachable from the root, in breadth-first discovery order."""

    root: Path
    nodes: List[ConfigNode] = field(default_factory=list)

    @property
    def paths(self) -> List[Path]:
        return [node.path for node in self.nodes]

    @property
    def root_exists(self) -> bool:
        return bool(self.nodes)


def build_conflict_index(shortcuts: ShortcutSet) -> Dict[str, str]:
    """Reverse an effective shortcut set into binding -> action.

    When several actions share one binding the alphabetically last action is
    kept; only membership matters to the merger.
    """
    return {binding: action for action, binding in sorted(shortcuts.items())}


def sorted_shortcuts(shortcuts: ShortcutSet) -> List[ActionBinding]:
    """Return shortcuts as ActionBindings ordered by action for display."""
    return [ActionBinding(action, shortcuts[action]) for action in sorted(shortcuts)]
