"""Directory listing for the tree walker: hidden filter and byte-wise order."""

from __future__ import annotations

import os
from pathlib import Path

from .types import Entry, EntryKind


def sort_key(entry: Entry) -> bytes:
    """Byte-wise ordering key, independent of locale collation."""
    return os.fsencode(entry.name)


def list_entries(directory: str | Path) -> tuple[list[Entry], OSError | None]:
    """List visible children of ``directory`` sorted by name bytes.

    Returns ``(entries, scan_error)``. ``scan_error`` is set, with no entries,
    when the directory cannot be opened or iterated. Names starting with ``.``
    are dropped before sorting. Symlinks are reported as non-directories.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(Entry(name, EntryKind.DIRECTORY if is_dir else EntryKind.OTHER))
    except OSError as exc:
        return [], exc

    entries.sort(key=sort_key)
    return entries, None


__all__ = ["list_entries", "sort_key"]
