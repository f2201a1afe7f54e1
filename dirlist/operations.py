"""Single-shot copy/move/delete actions on files and directory trees."""

from __future__ import annotations

import enum
import logging
import shutil
from pathlib import Path

from .errors import FileOperationError

logger = logging.getLogger(__name__)


class FileOperation(enum.Enum):
    COPY = "copy"
    MOVE = "move"
    DELETE = "delete"

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @property
    def needs_destination(self) -> bool:
        return self is not FileOperation.DELETE


def _copy(source: Path, destination: Path) -> None:
    if source.is_dir() and not source.is_symlink():
        if destination.is_dir():
            destination = destination / source.name
        shutil.copytree(source, destination, symlinks=True)
    else:
        shutil.copy2(source, destination, follow_symlinks=False)


def _delete(source: Path) -> None:
    if source.is_dir() and not source.is_symlink():
        shutil.rmtree(source)
    else:
        source.unlink()


def perform_file_operation(operation: FileOperation, source: Path, destination: Path | None = None) -> None:
    """Run ``operation`` on ``source``.

    ``copy`` and ``move`` into an existing directory place the source inside
    it, like ``cp -r`` and ``mv``. Any filesystem failure is re-raised as
    ``FileOperationError``.
    """
    if not source.exists() and not source.is_symlink():
        raise FileOperationError(f"Failed to {operation.value} {source}: no such file or directory")
    if operation.needs_destination and destination is None:
        raise FileOperationError(f"Cannot {operation.value} {source}: no destination given")

    logger.debug("%s %s -> %s", operation.value, source, destination)
    try:
        if operation is FileOperation.COPY:
            _copy(source, destination)
        elif operation is FileOperation.MOVE:
            shutil.move(str(source), str(destination))
        else:
            _delete(source)
    except OSError as exc:
        raise FileOperationError(f"Failed to perform file operation: {exc}") from exc


__all__ = [
    "FileOperation",
    "perform_file_operation",
]
