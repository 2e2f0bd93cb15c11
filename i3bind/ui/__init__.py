"""Terminal output and interactive selection."""

from .console import Output
from .interactive import run_interactive
from .picker import FzfPicker

__all__ = ["FzfPicker", "Output", "run_interactive"]
