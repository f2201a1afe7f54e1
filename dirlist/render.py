"""Row and total-line formatting for directory listings.

Sizes are summed as raw bytes and rescaled only for display, so the total
line always agrees with the entries it summarizes.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from datetime import datetime, timezone

from .listing import DirectoryEntry
from .ui_theme import PLAIN_THEME, UITheme

SIZE_DIVISOR = 1024
SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
SIZE_DECIMALS = 1
NAME_COLUMN_WIDTH = 30
SIZE_COLUMN_WIDTH = 10
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_COLUMN_WIDTH = 19
PERMISSIONS_COLUMN_WIDTH = 10
OWNER_COLUMN_WIDTH = 12
UNAVAILABLE = "unavailable"
NOT_APPLICABLE = "N/A"
DIRECTORY_SIZE_LABEL = "-"


def display_text(text: str) -> str:
    """Return ``text`` encodable as UTF-8; undecodable filename bytes print as ``\\xNN``."""
    return os.fsencode(text).decode("utf-8", errors="backslashreplace")


def human_readable_size(size: int) -> str:
    """Rescale ``size`` to the largest unit keeping the value in ``[1, 1024)``."""
    if size < SIZE_DIVISOR:
        return f"{size} {SIZE_UNITS[0]}"

    value = float(size)
    unit_idx = 0
    while unit_idx < len(SIZE_UNITS) - 1 and round(value, SIZE_DECIMALS) >= SIZE_DIVISOR:
        value /= SIZE_DIVISOR
        unit_idx += 1
    return f"{value:.{SIZE_DECIMALS}f} {SIZE_UNITS[unit_idx]}"


def format_size(size: int, human_readable: bool) -> str:
    if human_readable:
        return human_readable_size(size)
    return str(size)


def format_mtime(mtime_ns: int | None) -> str:
    """Render a modification time as UTC ``YYYY-MM-DD HH:MM:SS``."""
    if mtime_ns is None:
        return NOT_APPLICABLE
    stamp = datetime.fromtimestamp(mtime_ns / 1_000_000_000, tz=timezone.utc)
    return stamp.strftime(DATE_FORMAT)


def _paint(text: str, color: str, theme: UITheme) -> str:
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


def _name_color(entry: DirectoryEntry, theme: UITheme) -> str:
    if entry.is_dir:
        return theme.entry_dir
    if entry.is_hidden:
        return theme.entry_hidden
    return theme.entry_file


def _detail_columns(entry: DirectoryEntry, theme: UITheme) -> str:
    metadata = entry.metadata
    if metadata is None:
        cells = [
            (UNAVAILABLE, PERMISSIONS_COLUMN_WIDTH),
            (UNAVAILABLE, OWNER_COLUMN_WIDTH),
            (UNAVAILABLE, 0),
        ]
        color = theme.placeholder
    else:
        cells = [
            (metadata.permissions, PERMISSIONS_COLUMN_WIDTH),
            (metadata.owner, OWNER_COLUMN_WIDTH),
            (metadata.group, 0),
        ]
        color = theme.details
    return " ".join(_paint(text.ljust(width), color, theme) for text, width in cells)


def format_entry_line(
    entry: DirectoryEntry,
    human_readable: bool = False,
    details: bool = False,
    theme: UITheme = PLAIN_THEME,
) -> str:
    """Render one listing row: name, size, modified time, optional details."""
    size_text = DIRECTORY_SIZE_LABEL if entry.is_dir else format_size(entry.size, human_readable)
    columns = [
        _paint(display_text(entry.name).ljust(NAME_COLUMN_WIDTH), _name_color(entry, theme), theme),
        _paint(size_text.rjust(SIZE_COLUMN_WIDTH), theme.size, theme),
        _paint(format_mtime(entry.mtime_ns).ljust(DATE_COLUMN_WIDTH), theme.date, theme),
    ]
    if details:
        columns.append(_detail_columns(entry, theme))
    return " ".join(columns).rstrip()


def format_total_line(total: int, human_readable: bool = False, theme: UITheme = PLAIN_THEME) -> str:
    return _paint(f"Total: {format_size(total, human_readable)}", theme.total, theme)


def render_listing(
    entries: Iterable[DirectoryEntry],
    total: int,
    human_readable: bool = False,
    details: bool = False,
    theme: UITheme = PLAIN_THEME,
) -> list[str]:
    """Return every output line of a listing, total line last."""
    lines = [format_entry_line(entry, human_readable, details, theme) for entry in entries]
    lines.append(format_total_line(total, human_readable, theme))
    return lines


__all__ = [
    "display_text",
    "human_readable_size",
    "format_size",
    "format_mtime",
    "format_entry_line",
    "format_total_line",
    "render_listing",
]
