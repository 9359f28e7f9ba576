"""
Ghostty configuration tree resolver.

Starting at the root ``config`` file, every ``config-file`` directive is
followed breadth-first. Each file's ``keybind`` directives are then folded
into one action -> trigger map in discovery order, so the definition seen
last wins, exactly as Ghostty composes included files.
"""

import logging
from collections import deque
from pathlib import Path
from typing import List

from ghosttify.exceptions import UnreadableConfigFileError
from ghosttify.models import ConfigNode, ConfigTree, ShortcutSet

from .directives import parse_include, parse_keybind

logger = logging.getLogger(__name__)


def read_config_lines(path: Path, errors: str = "strict") -> List[str]:
    """Read a config file as lines.

    ``errors`` is passed to the UTF-8 decoder; "replace" lets callers that
    only look for ASCII directives read files with stray non-UTF-8 bytes.

    Raises:
        UnreadableConfigFileError: The file exists but cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8", errors=errors).splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableConfigFileError(path=str(path)) from e


def load_config_node(path: Path) -> ConfigNode:
    """Read one config file and collect the includes that exist on disk.

    An unreadable file yields a node with no lines and no includes.
    """
    try:
        lines = read_config_lines(path)
    except UnreadableConfigFileError as e:
        logger.warning(f"Skipping unreadable config file {path}: {e.__cause__}")
        return ConfigNode(path=path, readable=False)

    node = ConfigNode(path=path, lines=lines)
    for line in lines:
        include = parse_include(line)
        if include is None:
            continue
        target = include.target(path)
        if target.exists():
            node.includes.append(target)
        elif include.optional:
            logger.debug(f"Optional include {include.name} not found (from {path})")
        else:
            logger.info(f"Include {include.name} not found, skipping (from {path})")
    return node


def discover(root: Path) -> ConfigTree:
    """Find every file reachable from ``root`` in breadth-first order.

    Files are identified by their canonical path; a file already queued is
    never queued again, which also breaks include cycles.
    """
    tree = ConfigTree(root=root)
    if not root.exists():
        logger.info(f"Ghostty config {root} does not exist")
        return tree

    start = root.resolve()
    seen = {start}
    queue = deque([start])

    while queue:
        node = load_config_node(queue.popleft())
        tree.nodes.append(node)

        for include in node.includes:
            canonical = include.resolve()
            if canonical in seen:
                logger.debug(f"{canonical} already included, not following again")
                continue
            seen.add(canonical)
            queue.append(canonical)

    logger.debug(f"Discovered {len(tree.nodes)} Ghostty config file(s)")
    return tree


def collect_shortcuts(tree: ConfigTree) -> ShortcutSet:
    """Fold the keybind directives of a tree into the effective shortcut set."""
    shortcuts: ShortcutSet = {}
    for node in tree.nodes:
        for line in node.lines:
            keybind = parse_keybind(line)
            if keybind is not None:
                shortcuts[keybind.action] = keybind.binding
    return shortcuts


def resolve(root: Path) -> ShortcutSet:
    """Return the Ghostty shortcuts currently in effect for ``root``."""
    return collect_shortcuts(discover(root))
