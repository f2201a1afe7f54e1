"""Filesystem scanning for one directory's immediate children.

``read_directory`` maps open failures onto the ``DirectoryReadError`` family
and tolerates per-child stat failures. Owner/group lookups go through the
POSIX account database when the platform has one.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import DirectoryNotFound, DirectoryReadError, MetadataUnavailable, NotADirectory, PermissionDenied
from .types import DirectoryEntry, EntryMetadata

try:
    import grp
    import pwd
except ImportError:  # not available on Windows
    grp = None
    pwd = None

logger = logging.getLogger(__name__)


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def read_entry_metadata(stat_result: os.stat_result) -> EntryMetadata:
    """Build permission/owner/group metadata from a stat result.

    Raises ``MetadataUnavailable`` when the platform has no account database.
    Unknown ids fall back to their numeric form.
    """
    if pwd is None or grp is None:
        raise MetadataUnavailable("owner and group lookups are not supported on this platform")
    return EntryMetadata(
        mode=stat_result.st_mode,
        owner=_owner_name(stat_result.st_uid),
        group=_group_name(stat_result.st_gid),
    )


def read_directory(directory: Path, include_metadata: bool = False) -> list[DirectoryEntry]:
    """List every child of ``directory`` in scan order, hidden entries included.

    Directories carry ``size=0``. Children whose stat fails are still listed
    with ``mtime_ns=None``. Metadata is only gathered when requested.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                size = 0
                mtime_ns: int | None = None
                metadata: EntryMetadata | None = None
                try:
                    child_stat = child.stat(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("stat failed for %s: %s", child.path, exc)
                    child_stat = None

                if child_stat is not None:
                    mtime_ns = int(child_stat.st_mtime_ns)
                    if not is_dir:
                        size = int(child_stat.st_size)
                    if include_metadata:
                        try:
                            metadata = read_entry_metadata(child_stat)
                        except MetadataUnavailable as exc:
                            logger.debug("metadata unavailable for %s: %s", child.path, exc)

                entries.append(
                    DirectoryEntry(
                        name=child.name,
                        path=Path(child.path),
                        is_dir=is_dir,
                        size=size,
                        mtime_ns=mtime_ns,
                        metadata=metadata,
                    )
                )
    except PermissionError as exc:
        raise PermissionDenied(directory) from exc
    except NotADirectoryError as exc:
        raise NotADirectory(directory) from exc
    except FileNotFoundError as exc:
        raise DirectoryNotFound(directory) from exc
    except OSError as exc:
        raise DirectoryReadError(directory, exc.strerror or str(exc)) from exc

    logger.debug("read %d entries from %s", len(entries), directory)
    return entries


__all__ = [
    "read_entry_metadata",
    "read_directory",
]
