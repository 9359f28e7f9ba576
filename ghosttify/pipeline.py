"""
End-to-end conversion: read GNOME shortcuts, translate them, resolve the
current Ghostty configuration and merge (or preview merging) the result.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ghosttify.config.constants import GHOSTTY_ROOT_CONFIG, OVERRIDE_FILE_NAME
from ghosttify.exceptions import ConfigWriteError
from ghosttify.ghostty.merger import ConfigMerger, MergeResult
from ghosttify.ghostty.resolver import collect_shortcuts, discover
from ghosttify.mapping.table import MappingTable
from ghosttify.models import ConfigTree, ShortcutSet
from ghosttify.sources.gnome import read_gnome_shortcuts
from ghosttify.translate import TranslationResult, translate_all

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything a run produced, for display."""

    source: ShortcutSet
    translation: TranslationResult
    tree: ConfigTree
    effective: ShortcutSet
    merge: MergeResult
    applied: bool = False
    avoid_conflict: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "applied": self.applied,
            "avoid_conflict": self.avoid_conflict,
            "config_files": [str(path) for path in self.tree.paths],
            "override_file": str(self.merge.override_path) if self.merge.override_path else None,
            "include_added": self.merge.include_added,
            "gnome": dict(sorted(self.source.items())),
            "translated": dict(sorted(self.translation.shortcuts.items())),
            "untranslated": self.translation.untranslated,
            "ghostty": dict(sorted(self.effective.items())),
            "written": self.merge.written,
            "skipped": self.merge.skipped,
            "unchanged": self.merge.unchanged,
        }


@dataclass
class Pipeline:
    """Sequences the reader, translator, resolver and merger."""

    config_dir: Path
    table: MappingTable
    dump_file: Optional[Path] = None
    root_name: str = GHOSTTY_ROOT_CONFIG
    override_name: str = OVERRIDE_FILE_NAME
    source_reader: Callable[[Optional[Path]], ShortcutSet] = field(default=read_gnome_shortcuts)

    @property
    def root_path(self) -> Path:
        return Path(self.config_dir) / self.root_name

    def run(self, apply: bool = False, avoid_conflict: bool = False) -> PipelineResult:
        """Run the conversion.

        Without ``apply`` nothing is written and a missing root config is
        treated as an empty configuration.
        """
        source = self.source_reader(self.dump_file)
        translation = translate_all(source, self.table)
        logger.info(
            f"Translated {len(translation.shortcuts)} of {len(source)} GNOME Terminal shortcut(s)"
        )

        tree = discover(self.root_path)
        effective = collect_shortcuts(tree)

        merger = ConfigMerger(self.config_dir, self.root_name, self.override_name)
        if apply:
            merge = merger.merge(translation.shortcuts, effective, avoid_conflict)
        else:
            merge = merger.plan(translation.shortcuts, effective, avoid_conflict)
            # In a preview, include_added means "would be added"
            if tree.root_exists:
                try:
                    merge.include_added = not merger.has_include()
                except ConfigWriteError as e:
                    logger.warning(f"Cannot tell whether the include is present: {e}")

        return PipelineResult(
            source=source,
            translation=translation,
            tree=tree,
            effective=effective,
            merge=merge,
            applied=apply,
            avoid_conflict=avoid_conflict,
        )
