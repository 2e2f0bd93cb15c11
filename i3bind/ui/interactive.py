"""Interactive mode: pick a binding with fzf, then act on it."""

from typing import Optional

from rich.prompt import Prompt
from rich.text import Text

from ..config.editor import BindingEditor
from .console import KEY_STYLE, Output
from .picker import FzfPicker

MENU = """
What would you like to do?
1. Remove this keybinding
2. Add/Update comment
3. Show details
4. Cancel"""


def run_interactive(
    editor: BindingEditor,
    output: Output,
    picker: Optional[FzfPicker] = None,
) -> None:
    """Run one pick-and-act round.

    Args:
        editor: Editor for the config being managed
        output: Where to print results
        picker: Picker to use, defaults to fzf
    """
    picker = picker or FzfPicker()

    bindings = editor.bindings()
    if not bindings:
        output.line("No keybindings found in config file")
        return

    selected = picker.select(bindings)
    if selected is None:
        return

    output.out.print(Text("\nSelected keybinding: ").append(selected.key, style=KEY_STYLE))
    output.line(MENU)

    choice = _ask(output, "\nEnter your choice", choices=["1", "2", "3", "4"])

    if choice == "1":
        removed = editor.remove(selected.key)
        output.success("Removed keybinding", removed)
    elif choice == "2":
        comment = _ask(output, "Enter comment", default="", show_default=False)
        if comment is None:
            output.line("Cancelled")
        elif comment.strip():
            updated = editor.comment(selected.key, comment.strip())
            output.success("Added comment to keybinding", updated)
    elif choice == "3":
        output.details(selected)
    else:
        output.line("Cancelled")


def _ask(output: Output, prompt: str, **kwargs) -> Optional[str]:
    """Prompt for input; None when stdin is closed."""
    try:
        return Prompt.ask(prompt, console=output.out, **kwargs)
    except EOFError:
        return None
