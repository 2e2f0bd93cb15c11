"""Reading and writing the i3 config file with a backup."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .errors import (
    BackupError,
    ConfigNotFoundError,
    ConfigReadError,
    ConfigWriteError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

# surrogateescape lets undecodable bytes survive a load/save round trip
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class ConfigStore:
    """Line-oriented access to a config file."""

    def __init__(self, config_path: Path):
        """Initialize the store.

        Args:
            config_path: Path to the i3 config file
        """
        self.config_path = Path(config_path)

    @property
    def backup_path(self) -> Path:
        """Sibling file holding the content from before the last save."""
        return self.config_path.with_name(self.config_path.name + ".backup")

    def load(self) -> list[str]:
        """Read the config as a list of lines.

        A trailing newline yields a final empty line, so joining the result
        with '\\n' gives back the exact file content.

        Returns:
            Lines of the config file
        """
        try:
            content = self.config_path.read_bytes().decode(ENCODING, ERRORS)
        except FileNotFoundError as e:
            raise ConfigNotFoundError(self.config_path) from e
        except OSError as e:
            raise ConfigReadError(f"failed to read config file: {e}") from e

        lines = content.split("\n")
        logger.debug("Loaded %d lines from %s", len(lines), self.config_path)
        return lines

    def save(self, lines: list[str]) -> None:
        """Write lines back to the config, backing up the current file first.

        Args:
            lines: New content of the config

        Raises:
            BackupError: The backup failed; the config was not touched
            ConfigWriteError: The new content could not be written
        """
        content = "\n".join(lines).encode(ENCODING, ERRORS)

        self.backup()
        self._write(content)
        logger.debug("Wrote %d lines to %s", len(lines), self.config_path)

    def backup(self) -> Path:
        """Copy the on-disk config to the backup path.

        Returns:
            Path to the backup file
        """
        try:
            shutil.copy2(self.config_path, self.backup_path)
        except OSError as e:
            raise BackupError(f"failed to create backup: {e}") from e

        logger.debug("Backed up %s to %s", self.config_path, self.backup_path)
        return self.backup_path

    def restore(self) -> Path:
        """Put the backup back in place of the config.

        Returns:
            Path to the backup that was restored
        """
        try:
            content = self.backup_path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"No backup found at {self.backup_path}") from e
        except OSError as e:
            raise ConfigReadError(f"failed to read backup: {e}") from e

        self._write(content)
        logger.debug("Restored %s from %s", self.config_path, self.backup_path)
        return self.backup_path

    def _write(self, content: bytes) -> None:
        """Replace the config content via a temporary sibling file."""
        try:
            # Resolve so a symlinked config (e.g. into a dotfiles repo) stays a symlink
            target = self.config_path.resolve()
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(content)
                if target.exists():
                    shutil.copymode(target, tmp_name)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ConfigWriteError(f"failed to write config file: {e}") from e
