"""Shared pytest fixtures for ghosttify tests."""

import logging
from pathlib import Path

import pytest

from ghosttify.config.constants import ENV_VAR_DEFINITIONS
from ghosttify.mapping.table import MappingTable, _load_cached

SAMPLE_DUMP = """[legacy]
theme-variant='dark'

[legacy/keybindings]
copy='<Primary><Shift>c'
paste='<Primary><Shift>v'
new-tab='<Primary><Shift>t'
find='<Primary><Shift>f'
help='disabled'

[legacy/profiles:]
default='b1dcc9dd-5262-4d8d-a863-c897e6d979b9'
"""


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep GHOSTTIFY_* settings and logger state from leaking between tests."""
    for name in ENV_VAR_DEFINITIONS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    _load_cached.cache_clear()

    yield

    logger = logging.getLogger("ghosttify")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def table():
    """A small mapping table, independent of the bundled data."""
    return MappingTable.from_dicts(
        keys={"Primary": "ctrl", "Shift": "shift", "Hyper": "disabled", "Menu": ""},
        actions={
            "copy": "copy_to_clipboard",
            "paste": "paste_from_clipboard",
            "new-tab": "new_tab",
            "find": "",
        },
    )


@pytest.fixture
def ghostty_dir(tmp_path):
    """An empty Ghostty config directory with a root config file."""
    config_dir = tmp_path / "ghostty"
    config_dir.mkdir()
    (config_dir / "config").write_text("font-size = 12\n")
    return config_dir


@pytest.fixture
def write_config(ghostty_dir):
    """Write a file into the Ghostty config dir from a list of lines."""

    def _write(name: str, *lines: str) -> Path:
        path = ghostty_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{line}\n" for line in lines))
        return path

    return _write


@pytest.fixture
def dump_file(tmp_path):
    """A saved dconf dump of GNOME Terminal settings."""
    path = tmp_path / "gnome-terminal.dconf"
    path.write_text(SAMPLE_DUMP)
    return path
