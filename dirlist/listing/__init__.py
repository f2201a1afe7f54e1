"""Domain model and pipeline for single-directory listings.

This package contains the non-UI listing steps:
- entry/metadata datatypes and sort keys
- filesystem scanning of one directory's children
- hidden/extension filtering, stable sorting, and size totals
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryMetadata, SortKey
from .fs import read_directory, read_entry_metadata
from .pipeline import filter_entries, sort_entries, total_size

__all__ = [
    "DirectoryEntry",
    "EntryMetadata",
    "SortKey",
    "read_directory",
    "read_entry_metadata",
    "filter_entries",
    "sort_entries",
    "total_size",
]
