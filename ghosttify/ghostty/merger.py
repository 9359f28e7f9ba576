"""
Merge translated shortcuts into the Ghostty configuration.

Translated bindings go into a dedicated override file (``gnome-shortcuts``)
next to the root config, which is wired in with a single ``config-file``
directive. Both files are only ever appended to.

Repeated runs do not pile up identical lines: a binding that is already the
last one the override file sets for its action is reported as unchanged
instead of being appended again.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ghosttify.config.constants import (
    GHOSTTY_ROOT_CONFIG,
    OVERRIDE_FILE_NAME,
    OVERRIDE_MARKER,
)
from ghosttify.exceptions import (
    ConfigWriteError,
    MissingRootConfigError,
    UnreadableConfigFileError,
)
from ghosttify.models import ShortcutSet, build_conflict_index

from .directives import format_include, format_keybind, parse_include, parse_keybind
from .resolver import read_config_lines

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Outcome of a merge (or of a dry-run plan)."""

    written: ShortcutSet = field(default_factory=dict)
    skipped: ShortcutSet = field(default_factory=dict)
    unchanged: ShortcutSet = field(default_factory=dict)
    include_added: bool = False
    override_path: Optional[Path] = None


def partition_shortcuts(
    translated: ShortcutSet,
    effective: ShortcutSet,
    avoid_conflict: bool,
    already_written: Optional[ShortcutSet] = None,
) -> MergeResult:
    """Decide which translated shortcuts to write.

    With avoid_conflict, a shortcut is skipped when its action is already
    bound, or when its binding already belongs to another action. A shortcut
    whose binding is the one already in effect in the override file is
    unchanged.
    """
    already_written = already_written or {}
    conflict_index = build_conflict_index(effective) if avoid_conflict else {}
    result = MergeResult()

    for action in sorted(translated):
        binding = translated[action]
        if already_written.get(action) == binding:
            result.unchanged[action] = binding
        elif avoid_conflict and (action in effective or binding in conflict_index):
            result.skipped[action] = binding
        else:
            result.written[action] = binding

    return result


class ConfigMerger:
    """Appends translated shortcuts to the override file of a Ghostty config dir."""

    def __init__(
        self,
        config_dir: Path,
        root_name: str = GHOSTTY_ROOT_CONFIG,
        override_name: str = OVERRIDE_FILE_NAME,
    ):
        self.config_dir = Path(config_dir)
        self.root_path = self.config_dir / root_name
        self.override_name = override_name
        self.override_path = self.config_dir / override_name

    def _require_root(self) -> None:
        if not self.root_path.exists():
            raise MissingRootConfigError(path=str(self.root_path))

    def has_include(self) -> bool:
        """Check whether the root config already includes the override file."""
        self._require_root()
        try:
            # The include directive is ASCII; undecodable bytes elsewhere do not matter
            lines = read_config_lines(self.root_path, errors="replace")
        except UnreadableConfigFileError as e:
            raise ConfigWriteError("Cannot read Ghostty config", path=str(self.root_path)) from e

        override = self.override_path.resolve()
        for line in lines:
            include = parse_include(line)
            if include is not None and include.target(self.root_path).resolve() == override:
                return True
        return False

    def ensure_include(self) -> bool:
        """Wire the override file into the root config once.

        Returns:
            True if the include directive was appended, False if already present
        """
        if self.has_include():
            return False

        block = f"\n{OVERRIDE_MARKER}\n{format_include(self.override_name)}\n"
        try:
            with open(self.root_path, "a", encoding="utf-8") as f:
                f.write(block)
        except OSError as e:
            raise ConfigWriteError(path=str(self.root_path)) from e

        logger.info(f"Added {self.override_name} include to {self.root_path}")
        return True

    def existing_bindings(self) -> ShortcutSet:
        """Keybinds in effect from the override file, last line winning."""
        if not self.override_path.exists():
            return {}
        try:
            lines = read_config_lines(self.override_path)
        except UnreadableConfigFileError:
            logger.warning(f"Could not read {self.override_path}; duplicates will not be detected")
            return {}

        bindings: ShortcutSet = {}
        for keybind in map(parse_keybind, lines):
            if keybind is not None:
                bindings[keybind.action] = keybind.binding
        return bindings

    def plan(
        self,
        translated: ShortcutSet,
        effective: ShortcutSet,
        avoid_conflict: bool = False,
    ) -> MergeResult:
        """Compute what merge() would do without touching disk."""
        result = partition_shortcuts(
            translated, effective, avoid_conflict, self.existing_bindings()
        )
        result.override_path = self.override_path
        return result

    def merge(
        self,
        translated: ShortcutSet,
        effective: ShortcutSet,
        avoid_conflict: bool = False,
    ) -> MergeResult:
        """Append translated shortcuts to the override file.

        Raises:
            MissingRootConfigError: There is no root config to include from.
            ConfigWriteError: The root or override file cannot be appended to.
                Lines written before the failure stay on disk.
        """
        self._require_root()
        include_added = self.ensure_include()

        result = self.plan(translated, effective, avoid_conflict)
        result.include_added = include_added

        try:
            # Append mode creates the file on the first run
            with open(self.override_path, "a", encoding="utf-8") as f:
                for action, binding in result.written.items():
                    f.write(format_keybind(binding, action) + "\n")
        except OSError as e:
            raise ConfigWriteError(path=str(self.override_path)) from e

        logger.info(
            f"Wrote {len(result.written)} keybind(s) to {self.override_path} "
            f"({len(result.skipped)} skipped, {len(result.unchanged)} unchanged)"
        )
        return result
