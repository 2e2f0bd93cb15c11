"""Config parsing and editing."""

from .editor import BindingEditor
from .errors import (
    BackupError,
    BindingNotFoundError,
    ConfigNotFoundError,
    ConfigReadError,
    ConfigWriteError,
    DuplicateKeyError,
    I3BindError,
    InvalidBindingError,
    InvalidCommentError,
    NotFoundError,
    PickerError,
    PickerUnavailableError,
)
from .models import Binding
from .parser import parse_bindings
from .store import ConfigStore

__all__ = [
    "BackupError",
    "Binding",
    "BindingEditor",
    "BindingNotFoundError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "ConfigStore",
    "ConfigWriteError",
    "DuplicateKeyError",
    "I3BindError",
    "InvalidBindingError",
    "InvalidCommentError",
    "NotFoundError",
    "PickerError",
    "PickerUnavailableError",
    "parse_bindings",
]
