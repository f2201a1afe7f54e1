"""Filter, sort, and total steps applied to raw directory entries."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .types import DirectoryEntry, SortKey


def filter_entries(
    entries: Iterable[DirectoryEntry],
    extension: str | None = None,
    show_hidden: bool = False,
) -> list[DirectoryEntry]:
    """Keep visible entries whose name ends with ``extension``.

    Dotfiles are dropped unless ``show_hidden``. The extension is a plain
    case-sensitive suffix and applies to directories as well as files.
    """
    kept: list[DirectoryEntry] = []
    for entry in entries:
        if not show_hidden and entry.is_hidden:
            continue
        if extension and not entry.name.endswith(extension):
            continue
        kept.append(entry)
    return kept


_SORT_KEYS: dict[SortKey, Callable[[DirectoryEntry], object]] = {
    SortKey.NAME: lambda entry: entry.name,
    SortKey.SIZE: lambda entry: entry.size,
    SortKey.DATE: lambda entry: entry.mtime_ns if entry.mtime_ns is not None else 0,
}


def sort_entries(entries: Iterable[DirectoryEntry], sort_key: SortKey | None = None) -> list[DirectoryEntry]:
    """Return entries ascending by ``sort_key``; ``None`` keeps scan order."""
    if sort_key is None:
        return list(entries)
    return sorted(entries, key=_SORT_KEYS[sort_key])


def total_size(entries: Iterable[DirectoryEntry]) -> int:
    return sum(entry.size for entry in entries)


__all__ = [
    "filter_entries",
    "sort_entries",
    "total_size",
]
