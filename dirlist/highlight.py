"""Source loading, sanitization, and syntax highlighting for ``--view``.

Highlighting uses Pygments' terminal formatter with a lexer picked from the
file name. Terminal control bytes are escaped before anything is printed.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .errors import FileOperationError

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return pygments_highlight(source, lexer, _formatter_for_style(normalize_style(style)))


def render_file(path: Path, color: bool, style: str = DEFAULT_STYLE) -> str:
    """Load ``path`` and return printable text, highlighted when ``color``."""
    if not path.is_file():
        raise FileOperationError(f"cannot view {path}: not a file")
    try:
        source = sanitize_terminal_text(read_text(path))
    except OSError as exc:
        raise FileOperationError(f"cannot view {path}: {exc.strerror or exc}") from exc
    if not color:
        return source
    return colorize_source(source, path, style)


__all__ = [
    "DEFAULT_STYLE",
    "read_text",
    "sanitize_terminal_text",
    "normalize_style",
    "colorize_source",
    "render_file",
]
