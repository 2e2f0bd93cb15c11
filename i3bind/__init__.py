"""Manage i3 window manager keybindings from the command line."""

__version__ = "1.0.0"
