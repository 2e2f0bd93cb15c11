"""Shared fixtures: throwaway i3 configs under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from i3bind.config import BindingEditor

SAMPLE_CONFIG = """\
# i3 config file (v4)
set $mod Mod4
font pango:monospace 8

# Launchers:
bindsym $mod+d exec dmenu_run
# open terminal
bindsym $mod+Return exec alacritty
bindsym $mod+Shift+q kill # close window

# Layout:
bindsym $mod+f fullscreen toggle
bindsym $mod+Shift+space floating toggle

bar {
    status_command i3status
}
"""


@pytest.fixture
def config_path(tmp_path) -> Path:
    path = tmp_path / "config"
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture
def editor(config_path) -> BindingEditor:
    return BindingEditor(config_path)


@pytest.fixture
def make_editor(tmp_path):
    """Build an editor over a config with the given content."""

    def _make(content: str) -> BindingEditor:
        path = tmp_path / "config"
        path.write_text(content)
        return BindingEditor(path)

    return _make
