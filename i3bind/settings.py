"""Runtime settings passed to every command."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


def default_config_path() -> Path:
    """Get the default i3 config location (~/.config/i3/config)."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config) if xdg_config else Path.home() / ".config"
    return base / "i3" / "config"


class Settings(BaseModel):
    """Explicit context for one invocation."""

    config_path: Path = Field(default_factory=default_config_path)
    color: bool = Field(default=True, description="Colored terminal output")
    debug: bool = Field(default=False, description="Debug logging to stderr")

    @classmethod
    def resolve(
        cls,
        config_path: Optional[Path] = None,
        no_color: bool = False,
        debug: bool = False,
    ) -> "Settings":
        """Build settings from CLI flags and the environment.

        Args:
            config_path: Explicit config path, or None for the default
            no_color: Disable colors (NO_COLOR in the environment does too)
            debug: Enable debug logging

        Returns:
            Settings instance
        """
        return cls(
            config_path=(config_path.expanduser() if config_path else default_config_path()),
            color=not (no_color or os.environ.get("NO_COLOR")),
            debug=debug,
        )
