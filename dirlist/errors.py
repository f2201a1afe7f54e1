"""Error taxonomy for directory listing and file actions.

Directory read failures are fatal and surface at the CLI as ``Error: ...``.
``MetadataUnavailable`` is recovered per entry by the reader.
"""

from __future__ import annotations

from pathlib import Path


class DirlistError(Exception):
    """Base class for every error the CLI reports to the user."""


class DirectoryReadError(DirlistError):
    """Target directory could not be listed."""

    reason = "cannot read directory"

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        self.detail = detail
        message = f"{self.reason}: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class DirectoryNotFound(DirectoryReadError):
    reason = "directory not found"


class NotADirectory(DirectoryReadError):
    reason = "not a directory"


class PermissionDenied(DirectoryReadError):
    reason = "permission denied"


class MetadataUnavailable(DirlistError):
    """Owner/group/permission metadata cannot be resolved on this platform."""


class FileOperationError(DirlistError):
    """A copy/move/delete, view, or edit action failed."""


__all__ = [
    "DirlistError",
    "DirectoryReadError",
    "DirectoryNotFound",
    "NotADirectory",
    "PermissionDenied",
    "MetadataUnavailable",
    "FileOperationError",
]
