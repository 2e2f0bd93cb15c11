"""fzf-based binding picker."""

import logging
import subprocess
from typing import Optional

from iterfzf import iterfzf

from ..config.errors import PickerError, PickerUnavailableError
from ..config.models import Binding

logger = logging.getLogger(__name__)

PREVIEW_COMMAND = (
    'echo "Key: {4}"; echo "Action: {5}"; '
    'if [ -n "{6}" ]; then echo "Comment: {6}"; fi'
)

FZF_OPTIONS = [
    "--header=i3-bind: Select a keybinding to manage (Ctrl+C to exit)",
    "--with-nth=1,2",
    "--delimiter=\t",
    "--preview-window=up:3",
    "--bind=enter:accept",
    "--height=40%",
]


class FzfPicker:
    """Let the user pick one binding with fzf."""

    def select(self, bindings: list[Binding]) -> Optional[Binding]:
        """Show the picker and wait for a choice.

        Args:
            bindings: Bindings to choose from

        Returns:
            The chosen binding, or None if the user cancelled

        Raises:
            PickerUnavailableError: fzf could not be started
            PickerError: fzf failed
        """
        records = [b.to_fzf_record() for b in bindings]

        try:
            selected = iterfzf(records, preview=PREVIEW_COMMAND, __extra__=FZF_OPTIONS)
        except KeyboardInterrupt:
            logger.debug("fzf interrupted, nothing selected")
            return None
        except FileNotFoundError as e:
            raise PickerUnavailableError() from e
        except (OSError, subprocess.CalledProcessError) as e:
            raise PickerError(f"fzf error: {e}") from e

        if selected is None:
            logger.debug("fzf closed without a selection")
            return None

        return self.parse_selection(selected, bindings)

    def parse_selection(self, selected: str, bindings: list[Binding]) -> Optional[Binding]:
        """Map the chosen fzf record back to the binding it came from."""
        if not selected.strip():
            return None

        key = selected.split("\t", 1)[0]
        for binding in bindings:
            if binding.key == key:
                return binding

        raise PickerError(f"Error parsing selected line: {selected!r}")
