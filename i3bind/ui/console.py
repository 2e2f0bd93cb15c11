"""Colored terminal output."""

import json

from rich.console import Console
from rich.text import Text

from ..config.models import Binding

KEY_STYLE = "bold cyan"
ACTION_STYLE = "green"
COMMENT_STYLE = "yellow"
LINE_STYLE = "bold bright_black"
ERROR_STYLE = "bold red"
SUCCESS_STYLE = "bold green"


def binding_text(binding: Binding, show_line: bool = False) -> Text:
    """Render 'key -> action # comment (line N)'.

    Built from Text parts rather than markup, since keys like '$mod+bracketleft'
    or actions containing '[class=...]' criteria would otherwise be parsed as
    rich markup.
    """
    text = Text.assemble((binding.key, KEY_STYLE), " -> ", (binding.action, ACTION_STYLE))
    if binding.comment:
        text.append(" ")
        text.append(f"# {binding.comment}", style=COMMENT_STYLE)
    if show_line:
        text.append(" ")
        text.append(f"(line {binding.line})", style=LINE_STYLE)
    return text


class Output:
    """Writes results to stdout and errors to stderr."""

    def __init__(self, color: bool = True):
        self.out = Console(no_color=not color, highlight=False, soft_wrap=True)
        self.err = Console(
            stderr=True, no_color=not color, highlight=False, soft_wrap=True
        )

    def line(self, message: str = "") -> None:
        self.out.print(Text(message))

    def success(self, message: str, binding: Binding) -> None:
        """Print a check-marked confirmation followed by the binding."""
        text = Text(f"✓ {message}: ", style=SUCCESS_STYLE)
        text.append_text(binding_text(binding))
        self.out.print(text)

    def error(self, message: str) -> None:
        self.err.print(Text(f"Error: {message}", style=ERROR_STYLE))

    def bindings(self, bindings: list[Binding], show_line: bool = False) -> None:
        for binding in bindings:
            self.out.print(Text("  ").append_text(binding_text(binding, show_line)))

    def details(self, binding: Binding) -> None:
        """Print every field of a binding."""
        self.out.print("\nKeybinding Details:")
        self.out.print(Text("  Key: ").append(binding.key, style=KEY_STYLE))
        self.out.print(Text("  Action: ").append(binding.action, style=ACTION_STYLE))
        if binding.comment:
            self.out.print(
                Text("  Comment: ").append(binding.comment, style=COMMENT_STYLE)
            )
        self.out.print(Text(f"  Line: {binding.line}"))
        self.out.print(Text(f"  Raw: {binding.raw}"))

    def tsv(self, bindings: list[Binding]) -> None:
        """Print key, action, comment and line as tab-separated rows."""
        # Plain writes: rich would expand the tabs into spaces
        for b in bindings:
            print(f"{b.key}\t{b.action}\t{b.comment}\t{b.line}", file=self.out.file)

    def json(self, bindings: list[Binding]) -> None:
        data = [b.model_dump(exclude={"raw"}) for b in bindings]
        print(json.dumps(data, indent=2), file=self.out.file)
