"""Editor launch helper for ``--edit``.

Runs ``$EDITOR`` on the target file and waits for it to exit.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path

from .errors import FileOperationError

logger = logging.getLogger(__name__)


def launch_editor(target: Path) -> None:
    editor_env = os.environ.get("EDITOR", "").strip()
    if not editor_env:
        raise FileOperationError("Cannot edit: $EDITOR is not set.")
    cmd = shlex.split(editor_env)
    if not cmd:
        raise FileOperationError("Cannot edit: $EDITOR is empty.")

    logger.debug("launching editor %r for %s", cmd, target)
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except OSError as exc:
        raise FileOperationError(f"Failed to launch editor: {exc}") from exc
