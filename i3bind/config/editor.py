"""Add, remove and annotate keybindings in an i3 configuration.

Comments are persisted on the line directly above the binding. The parser
prefers an inline '# ...' suffix over that line, so comment() also drops any
inline suffix from the binding it annotates; otherwise the new comment would
never be the one read back.
"""

import logging
from pathlib import Path
from typing import Optional

from .errors import (
    BindingNotFoundError,
    DuplicateKeyError,
    InvalidBindingError,
    InvalidCommentError,
)
from .models import Binding
from .parser import (
    BINDSYM_PATTERN,
    comment_text,
    key_line_pattern,
    parse_bind_line,
    parse_bindings,
)
from .queries import find_bindings, lookup, sort_bindings
from .store import ConfigStore

logger = logging.getLogger(__name__)


def check_comment(text: str) -> str:
    """Validate comment text before it is written above a binding.

    Returns:
        The stripped text

    Raises:
        InvalidCommentError: The text spans lines or would read as a heading
    """
    text = text.strip()
    if "\n" in text or "\r" in text:
        raise InvalidCommentError("Comment must be a single line")
    if text.endswith(":"):
        raise InvalidCommentError(
            "Comment must not end with ':' (reserved for section headings)"
        )
    return text


class BindingEditor:
    """Edit bindsym lines in an i3 config.

    Every call re-reads and re-parses the file; nothing is cached between
    calls.
    """

    def __init__(self, config_path: Path):
        """Initialize the editor.

        Args:
            config_path: Path to the i3 config file
        """
        self.store = ConfigStore(config_path)

    @property
    def config_path(self) -> Path:
        return self.store.config_path

    def bindings(self) -> list[Binding]:
        """Parse the current bindings in file order."""
        return parse_bindings(self.store.load())

    def list_bindings(self) -> list[Binding]:
        """Get all bindings sorted by key."""
        return sort_bindings(self.bindings())

    def find(self, term: str) -> list[Binding]:
        """Search key, action and comment for a term, ignoring case.

        Args:
            term: Substring to look for; empty matches every binding

        Returns:
            Matching bindings in file order
        """
        return find_bindings(self.bindings(), term)

    def get(self, key: str) -> Binding:
        """Look up the binding for a key, ignoring case."""
        binding = lookup(self.bindings(), key)
        if binding is None:
            raise BindingNotFoundError(key)
        return binding

    def add(self, key: str, action: str, comment: Optional[str] = None) -> Binding:
        """Add a new keybinding after the last existing one.

        Args:
            key: The key combo (e.g., "$mod+Return")
            action: The i3 command
            comment: Optional comment written on the line above

        Returns:
            The binding that was added

        Raises:
            DuplicateKeyError: A binding for the key already exists
            InvalidBindingError: The key or action is malformed
            InvalidCommentError: The comment cannot be stored
        """
        if not key or any(c.isspace() for c in key):
            raise InvalidBindingError(
                f"Invalid key {key!r}: must be one token without spaces"
            )
        if not action.strip():
            raise InvalidBindingError(f"Missing action for {key}")
        if "\n" in action or "\r" in action:
            raise InvalidBindingError("Action must be a single line")
        if comment:
            comment = check_comment(comment)

        lines = self.store.load()

        existing = lookup(parse_bindings(lines), key)
        if existing is not None:
            raise DuplicateKeyError(existing)

        binding = Binding(key=key, action=action.strip(), comment=comment or "")
        parsed = parse_bind_line(binding.to_line())
        if parsed is None or parsed[:2] != (binding.key, binding.action):
            raise InvalidBindingError(
                f"Action {binding.action!r} would not read back unchanged "
                "('#' starts a comment)"
            )
        new_lines = [binding.to_line()]
        if comment:
            new_lines.insert(0, f"# {comment}")

        insert_at = self._insert_index(lines)
        lines[insert_at:insert_at] = new_lines
        self.store.save(lines)

        logger.debug("Inserted %r at line %d", binding.to_line(), insert_at + 1)
        return binding.model_copy(
            update={"line": insert_at + len(new_lines), "raw": binding.to_line()}
        )

    def _insert_index(self, lines: list[str]) -> int:
        """Find where a new binding goes.

        Right after the last line mentioning bindsym, otherwise at the end of
        the file (before the empty element left by a trailing newline).
        """
        for i in range(len(lines) - 1, -1, -1):
            if "bindsym" in lines[i]:
                return i + 1

        if lines and lines[-1] == "":
            return len(lines) - 1
        return len(lines)

    def remove(self, key: str) -> Binding:
        """Remove every bindsym line for a key.

        Comment lines above the binding are left in place.

        Args:
            key: The key combo, matched ignoring case

        Returns:
            The binding as it was before removal

        Raises:
            BindingNotFoundError: No binding uses the key
        """
        lines = self.store.load()

        removed = lookup(parse_bindings(lines), key)
        if removed is None:
            raise BindingNotFoundError(key)

        pattern = key_line_pattern(key)
        new_lines = [line for line in lines if not pattern.match(line)]

        logger.debug("Removing %d line(s) for %s", len(lines) - len(new_lines), key)
        self.store.save(new_lines)
        return removed

    def comment(self, key: str, text: str) -> Binding:
        """Add or replace the comment above a keybinding.

        An existing per-binding comment on the previous line is replaced. A
        section heading ('# Something:') is never touched; the comment is
        inserted below it instead.

        Args:
            key: The key combo, matched ignoring case
            text: The comment text

        Returns:
            The binding with its new comment

        Raises:
            BindingNotFoundError: No binding uses the key
            InvalidCommentError: The comment cannot be stored
        """
        text = check_comment(text)
        lines = self.store.load()

        binding = lookup(parse_bindings(lines), key)
        if binding is None:
            raise BindingNotFoundError(key)

        index = self._find_binding_line(lines, key)
        comment_line = f"# {text}"

        # An inline comment would shadow the line above, so drop it
        match = BINDSYM_PATTERN.match(lines[index])
        if match and match.group(3) is not None:
            lines[index] = lines[index][: match.end(2)]

        previous = comment_text(lines[index - 1]) if index > 0 else None
        if previous is not None and not previous.endswith(":"):
            logger.debug("Replacing comment on line %d", index)
            lines[index - 1] = comment_line
        else:
            logger.debug("Inserting comment above line %d", index + 1)
            lines.insert(index, comment_line)

        self.store.save(lines)
        return binding.model_copy(update={"comment": text})

    def _find_binding_line(self, lines: list[str], key: str) -> int:
        """Index of the first bindsym line declaring the key."""
        pattern = key_line_pattern(key)
        for i, line in enumerate(lines):
            if pattern.match(line) and parse_bind_line(line) is not None:
                return i
        raise BindingNotFoundError(key)

    def restore_backup(self) -> Path:
        """Restore the config from its backup.

        Returns:
            Path to the backup file
        """
        return self.store.restore()
