"""Exceptions raised by config loading, parsing and editing."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Binding


class I3BindError(Exception):
    """Base class for every error the CLI reports and exits on."""


class NotFoundError(I3BindError):
    """Something the operation needs does not exist."""


class ConfigNotFoundError(NotFoundError):
    """The i3 config file is missing."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"i3 config file not found at {path}")


class BindingNotFoundError(NotFoundError):
    """No bindsym line declares the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Keybinding {key} not found")


class ConfigReadError(I3BindError):
    """The config file exists but could not be read."""


class BackupError(I3BindError):
    """The pre-edit backup could not be written."""


class ConfigWriteError(I3BindError):
    """The edited config could not be written."""


class DuplicateKeyError(I3BindError):
    """A binding for the key already exists."""

    def __init__(self, existing: "Binding"):
        self.existing = existing
        super().__init__(f"Keybinding {existing.key} already exists")


class PickerError(I3BindError):
    """The fuzzy picker failed."""


class PickerUnavailableError(PickerError):
    """fzf is not installed."""

    def __init__(self):
        super().__init__(
            "Interactive mode requires `fzf` to be installed "
            "(e.g. sudo pacman -S fzf, or your package manager)"
        )


class InvalidCommentError(I3BindError):
    """The comment text cannot be stored as a per-binding comment."""


class InvalidBindingError(I3BindError):
    """The key or action cannot form a bindsym line."""
