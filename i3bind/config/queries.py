"""Read-only lookups over parsed bindings."""

from typing import Optional

from .models import Binding


def sort_bindings(bindings: list[Binding]) -> list[Binding]:
    """Sort by key using plain codepoint order; ties keep file order."""
    return sorted(bindings, key=lambda b: b.key)


def find_bindings(bindings: list[Binding], term: str) -> list[Binding]:
    """Get bindings whose key, action or comment contains the term.

    Matching ignores case and an empty term matches everything.
    """
    return [b for b in bindings if b.matches_term(term)]


def lookup(bindings: list[Binding], key: str) -> Optional[Binding]:
    """Get the first binding for a key, ignoring case."""
    for binding in bindings:
        if binding.matches_key(key):
            return binding
    return None
