"""Resolve the display style of one directory entry."""

from __future__ import annotations

import os

from ..tree.types import EntryKind
from .rules import DIRECTORY_KEY, ColorRuleTable, StyleRule

EXTENSION_KEY_BYTES = 4
DEFAULT_STYLE = StyleRule()


def extension_key(name: str) -> str | None:
    """Return the last four bytes of ``name`` as a lookup key.

    Names of four bytes or fewer have no key. The bytes are not required to
    start with a dot, so ``eight`` keys as ``ight``.
    """
    encoded = os.fsencode(name)
    if len(encoded) <= EXTENSION_KEY_BYTES:
        return None
    return os.fsdecode(encoded[-EXTENSION_KEY_BYTES:])


def resolve_style(name: str, kind: EntryKind, table: ColorRuleTable) -> StyleRule:
    """Return the style for an entry; directories never consult extension keys."""
    if kind is EntryKind.DIRECTORY:
        return table.get(DIRECTORY_KEY, DEFAULT_STYLE)
    key = extension_key(name)
    if key is None:
        return DEFAULT_STYLE
    return table.get(key, DEFAULT_STYLE)


__all__ = ["DEFAULT_STYLE", "EXTENSION_KEY_BYTES", "extension_key", "resolve_style"]
