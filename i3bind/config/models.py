"""Pydantic models for i3 keybindings."""

from pydantic import BaseModel, Field


def escape_preview(text: str) -> str:
    """Escape text for interpolation into a double-quoted shell string."""
    text = text.replace("\\", "\\\\")
    text = text.replace('"', '\\"')
    return text.replace("$", "\\$")


class Binding(BaseModel):
    """Represents a single bindsym declaration recovered from the config."""

    key: str = Field(description="The key combo as written (e.g., '$mod+Return')")
    action: str = Field(description="The i3 command run by the binding")
    comment: str = Field(default="", description="Inline or inherited annotation")
    line: int = Field(default=0, description="1-based line number at parse time")
    raw: str = Field(default="", description="Original line from config")

    def matches_key(self, key: str) -> bool:
        """Check key identity, ignoring case."""
        return self.key.lower() == key.lower()

    def matches_term(self, term: str) -> bool:
        """Check if the term occurs in the key, action or comment."""
        term = term.lower()
        return (
            term in self.key.lower()
            or term in self.action.lower()
            or term in self.comment.lower()
        )

    def to_line(self) -> str:
        """Render as a config line (comments are kept on the line above)."""
        return f"bindsym {self.key} {self.action}"

    def to_fzf_record(self) -> str:
        """Render the tab-delimited record fed to the picker.

        Columns 1-3 are for display, 4-6 are escaped copies for the preview
        command.
        """
        return "\t".join(
            [
                self.key,
                self.action,
                self.comment,
                escape_preview(self.key),
                escape_preview(self.action),
                escape_preview(self.comment),
            ]
        )
