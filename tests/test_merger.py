"""Tests for merging translated shortcuts into the Ghostty config."""

import pytest

from ghosttify.exceptions import ConfigWriteError, MissingRootConfigError
from ghosttify.ghostty.merger import ConfigMerger, partition_shortcuts
from ghosttify.ghostty.resolver import resolve


def _lines(path):
    return path.read_text().splitlines()


class TestPartitionShortcuts:
    """Write / skip decisions."""

    def test_without_avoid_conflict_everything_is_written(self):
        result = partition_shortcuts(
            {"paste": "ctrl+shift+v", "copy": "ctrl+v"}, {"paste": "ctrl+v"}, False
        )
        assert result.written == {"copy": "ctrl+v", "paste": "ctrl+shift+v"}
        assert result.skipped == {}

    def test_action_already_bound_is_skipped(self):
        result = partition_shortcuts({"paste": "ctrl+shift+v"}, {"paste": "ctrl+v"}, True)
        assert result.written == {}
        assert result.skipped == {"paste": "ctrl+shift+v"}

    def test_binding_claimed_by_other_action_is_skipped(self):
        result = partition_shortcuts({"copy": "ctrl+v"}, {"paste": "ctrl+v"}, True)
        assert result.skipped == {"copy": "ctrl+v"}

    def test_free_shortcut_is_written(self):
        result = partition_shortcuts({"new_tab": "ctrl+shift+t"}, {"paste": "ctrl+v"}, True)
        assert result.written == {"new_tab": "ctrl+shift+t"}

    def test_binding_match_is_exact_string(self):
        result = partition_shortcuts({"copy": "shift+ctrl+v"}, {"paste": "ctrl+shift+v"}, True)
        assert result.written == {"copy": "shift+ctrl+v"}

    def test_already_written_is_unchanged(self):
        result = partition_shortcuts(
            {"copy": "ctrl+c", "paste": "ctrl+v"},
            {},
            False,
            {"copy": "ctrl+c"},
        )
        assert result.unchanged == {"copy": "ctrl+c"}
        assert result.written == {"paste": "ctrl+v"}

    def test_earlier_binding_for_action_is_not_unchanged(self):
        result = partition_shortcuts({"copy": "ctrl+c"}, {}, False, {"copy": "ctrl+shift+c"})
        assert result.written == {"copy": "ctrl+c"}
        assert result.unchanged == {}

    def test_written_in_action_order(self):
        result = partition_shortcuts({"b": "2", "a": "1", "c": "3"}, {}, False)
        assert list(result.written) == ["a", "b", "c"]


class TestEnsureInclude:
    """Wiring the override file into the root config."""

    def test_appends_marker_and_include(self, ghostty_dir):
        merger = ConfigMerger(ghostty_dir)

        assert merger.ensure_include() is True
        assert _lines(ghostty_dir / "config") == [
            "font-size = 12",
            "",
            "# Added by ghosttify",
            "config-file = gnome-shortcuts",
        ]

    def test_is_idempotent(self, ghostty_dir):
        merger = ConfigMerger(ghostty_dir)
        merger.ensure_include()

        assert merger.ensure_include() is False
        includes = [line for line in _lines(ghostty_dir / "config") if "config-file" in line]
        assert includes == ["config-file = gnome-shortcuts"]

    @pytest.mark.parametrize(
        "line",
        ["config-file=gnome-shortcuts", 'config-file = "gnome-shortcuts"', "config-file = ?gnome-shortcuts"],
    )
    def test_recognizes_existing_include(self, ghostty_dir, write_config, line):
        write_config("config", "font-size = 12", line)
        assert ConfigMerger(ghostty_dir).ensure_include() is False

    def test_commented_include_does_not_count(self, ghostty_dir, write_config):
        write_config("config", "# config-file = gnome-shortcuts")
        assert ConfigMerger(ghostty_dir).has_include() is False

    def test_root_without_trailing_newline(self, ghostty_dir):
        (ghostty_dir / "config").write_text("font-size = 12")
        ConfigMerger(ghostty_dir).ensure_include()

        assert "config-file = gnome-shortcuts" in _lines(ghostty_dir / "config")
        assert _lines(ghostty_dir / "config")[0] == "font-size = 12"

    def test_missing_root(self, tmp_path):
        with pytest.raises(MissingRootConfigError):
            ConfigMerger(tmp_path).ensure_include()


class TestMerge:
    """Appending to the override file."""

    def test_first_run_creates_override(self, ghostty_dir):
        result = ConfigMerger(ghostty_dir).merge({"copy_to_clipboard": "ctrl+shift+c"}, {})

        assert result.include_added is True
        assert result.written == {"copy_to_clipboard": "ctrl+shift+c"}
        assert _lines(ghostty_dir / "gnome-shortcuts") == [
            "keybind = ctrl+shift+c=copy_to_clipboard"
        ]

    def test_creates_override_even_when_nothing_to_write(self, ghostty_dir):
        ConfigMerger(ghostty_dir).merge({}, {})
        assert (ghostty_dir / "gnome-shortcuts").read_text() == ""

    def test_second_run_does_not_duplicate(self, ghostty_dir):
        merger = ConfigMerger(ghostty_dir)
        translated = {"copy_to_clipboard": "ctrl+shift+c", "new_tab": "ctrl+shift+t"}
        merger.merge(translated, {})

        result = merger.merge(translated, {})

        assert result.include_added is False
        assert result.written == {}
        assert result.unchanged == translated
        assert len(_lines(ghostty_dir / "gnome-shortcuts")) == 2
        config_lines = _lines(ghostty_dir / "config")
        assert config_lines.count("config-file = gnome-shortcuts") == 1

    def test_changed_binding_is_appended(self, ghostty_dir):
        merger = ConfigMerger(ghostty_dir)
        merger.merge({"copy_to_clipboard": "ctrl+shift+c"}, {})
        merger.merge({"copy_to_clipboard": "ctrl+c"}, {})

        assert _lines(ghostty_dir / "gnome-shortcuts") == [
            "keybind = ctrl+shift+c=copy_to_clipboard",
            "keybind = ctrl+c=copy_to_clipboard",
        ]

    def test_reverting_to_an_overridden_binding_is_appended(self, ghostty_dir):
        merger = ConfigMerger(ghostty_dir)
        merger.merge({"copy_to_clipboard": "ctrl+c"}, {})
        merger.merge({"copy_to_clipboard": "ctrl+shift+c"}, {})

        result = merger.merge({"copy_to_clipboard": "ctrl+c"}, {})

        assert result.written == {"copy_to_clipboard": "ctrl+c"}
        assert result.unchanged == {}
        assert _lines(ghostty_dir / "gnome-shortcuts")[-1] == "keybind = ctrl+c=copy_to_clipboard"
        assert resolve(ghostty_dir / "config")["copy_to_clipboard"] == "ctrl+c"

    def test_root_with_non_utf8_bytes(self, ghostty_dir):
        (ghostty_dir / "config").write_bytes(b"# caf\xe9\nconfig-file = gnome-shortcuts\n")
        merger = ConfigMerger(ghostty_dir)

        assert merger.has_include() is True
        assert merger.merge({"new_tab": "ctrl+t"}, {}).include_added is False

    def test_existing_content_is_preserved(self, ghostty_dir, write_config):
        write_config("gnome-shortcuts", "# my notes", "keybind = ctrl+q=quit")
        ConfigMerger(ghostty_dir).merge({"new_tab": "ctrl+t"}, {})

        assert _lines(ghostty_dir / "gnome-shortcuts") == [
            "# my notes",
            "keybind = ctrl+q=quit",
            "keybind = ctrl+t=new_tab",
        ]

    def test_avoid_conflict(self, ghostty_dir):
        result = ConfigMerger(ghostty_dir).merge(
            {"paste": "ctrl+shift+v", "copy": "ctrl+v", "new_tab": "ctrl+t"},
            {"paste": "ctrl+v"},
            avoid_conflict=True,
        )

        assert result.skipped == {"copy": "ctrl+v", "paste": "ctrl+shift+v"}
        assert _lines(ghostty_dir / "gnome-shortcuts") == ["keybind = ctrl+t=new_tab"]

    def test_missing_root(self, tmp_path):
        with pytest.raises(MissingRootConfigError):
            ConfigMerger(tmp_path).merge({"copy": "ctrl+c"}, {})
        assert not (tmp_path / "gnome-shortcuts").exists()

    def test_unwritable_override(self, ghostty_dir):
        (ghostty_dir / "gnome-shortcuts").mkdir()

        with pytest.raises(ConfigWriteError) as exc_info:
            ConfigMerger(ghostty_dir).merge({"copy": "ctrl+c"}, {})

        assert exc_info.value.context["path"].endswith("gnome-shortcuts")

    def test_custom_names(self, ghostty_dir, write_config):
        write_config("main.conf", "font-size = 10")
        merger = ConfigMerger(ghostty_dir, root_name="main.conf", override_name="imported")
        merger.merge({"copy": "ctrl+c"}, {})

        assert "config-file = imported" in _lines(ghostty_dir / "main.conf")
        assert _lines(ghostty_dir / "imported") == ["keybind = ctrl+c=copy"]


class TestPlan:
    """Dry runs."""

    def test_plan_does_not_touch_disk(self, ghostty_dir):
        before = (ghostty_dir / "config").read_text()
        result = ConfigMerger(ghostty_dir).plan({"copy": "ctrl+c"}, {})

        assert result.written == {"copy": "ctrl+c"}
        assert result.override_path == ghostty_dir / "gnome-shortcuts"
        assert (ghostty_dir / "config").read_text() == before
        assert not (ghostty_dir / "gnome-shortcuts").exists()

    def test_plan_reports_existing_lines(self, ghostty_dir, write_config):
        write_config("gnome-shortcuts", "keybind = ctrl+c = copy")
        result = ConfigMerger(ghostty_dir).plan({"copy": "ctrl+c"}, {})

        assert result.unchanged == {"copy": "ctrl+c"}
        assert result.written == {}
