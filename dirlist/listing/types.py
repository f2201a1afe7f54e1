"""Domain datatypes for one directory listing."""

from __future__ import annotations

import enum
import stat
from dataclasses import dataclass
from pathlib import Path


class SortKey(enum.Enum):
    """Column a listing can be ordered by."""

    NAME = "name"
    SIZE = "size"
    DATE = "date"

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class EntryMetadata:
    """Permission bits plus resolved owner/group labels for one entry."""

    mode: int
    owner: str
    group: str

    @property
    def permissions(self) -> str:
        """Render ``mode`` the way ``ls -l`` does, e.g. ``-rw-r--r--``."""
        return stat.filemode(self.mode)


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory."""

    name: str
    path: Path
    is_dir: bool
    size: int = 0
    mtime_ns: int | None = None
    metadata: EntryMetadata | None = None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


__all__ = [
    "SortKey",
    "EntryMetadata",
    "DirectoryEntry",
]
