"""Parser for bindsym lines in i3 configuration files."""

import re
from typing import Optional

from .models import Binding

# bindsym <key> <action> [# comment]; the first '#' after the action starts the comment
BINDSYM_PATTERN = re.compile(r"^\s*bindsym\s+(\S+)\s+(\S.*?)(?:\s*#\s*(.*))?$")


def key_line_pattern(key: str) -> re.Pattern:
    """Build the pattern matching the bindsym line(s) for a key.

    Anchored like BINDSYM_PATTERN and, like it, requires an action after the
    key. Only the key is matched ignoring case, so 'mod4+Q' finds a line
    declared as 'bindsym mod4+q ...'.

    Args:
        key: The key combo as given by the user

    Returns:
        Compiled pattern
    """
    return re.compile(rf"^\s*bindsym\s+(?i:{re.escape(key)})\s+\S")


def comment_text(line: str) -> Optional[str]:
    """Return the text of a '#' comment line, or None for other lines."""
    stripped = line.strip()
    if not stripped.startswith("#"):
        return None
    return stripped[1:].strip()


def is_section_heading(line: str) -> bool:
    """Check if a line is a heading comment like '# Launchers:'."""
    text = comment_text(line)
    return text is not None and text.endswith(":")


def inherited_comment(lines: list[str], index: int) -> str:
    """Get the per-binding comment written on the line above lines[index].

    Section headings are never inherited.
    """
    if index <= 0:
        return ""
    text = comment_text(lines[index - 1])
    if text is None or text.endswith(":"):
        return ""
    return text


def parse_bind_line(line: str) -> Optional[tuple[str, str, str]]:
    """Parse a single bindsym line.

    Returns:
        Tuple of (key, action, inline comment) or None if the line is not a
        binding
    """
    match = BINDSYM_PATTERN.match(line)
    if not match:
        return None
    key, action, comment = match.groups()
    return key, action.strip(), (comment or "").strip()


def parse_bindings(lines: list[str]) -> list[Binding]:
    """Parse every bindsym line in a config.

    Args:
        lines: The config file split into lines

    Returns:
        Bindings in file order
    """
    bindings: list[Binding] = []

    for i, line in enumerate(lines):
        parsed = parse_bind_line(line)
        if parsed is None:
            continue

        key, action, comment = parsed
        if not comment:
            comment = inherited_comment(lines, i)

        bindings.append(
            Binding(key=key, action=action, comment=comment, line=i + 1, raw=line)
        )

    return bindings
