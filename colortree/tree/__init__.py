"""Directory listing and tree rendering.

Listing filters hidden names and orders children byte-wise; rendering walks
the tree depth-first with a shared directory/file counter.
"""

from __future__ import annotations

from .fs import list_entries, sort_key
from .types import Counter, Entry, EntryKind


def render(*args, **kwargs):
    """Lazily import the walker to keep ``colortree.colors`` importable first."""
    from .walk import render as _render

    return _render(*args, **kwargs)


__all__ = [
    "Counter",
    "Entry",
    "EntryKind",
    "list_entries",
    "render",
    "sort_key",
]
