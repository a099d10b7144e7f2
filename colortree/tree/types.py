"""Datatypes shared by the listing step and the tree walker."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EntryKind(enum.Enum):
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One visible child of a directory: bare name plus kind."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class Counter:
    """Running directory/file tally shared by every frame of one walk."""

    dirs: int = 0
    files: int = 0

    def summary(self) -> str:
        return f"{self.dirs} directories, {self.files} files"


__all__ = ["Counter", "Entry", "EntryKind"]
