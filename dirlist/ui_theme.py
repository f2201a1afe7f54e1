"""UI theme definitions and selection helpers.

Themes are ANSI palettes for listing rows. The plain theme is used whenever
colour is disabled, so renderers never need to branch on colour mode.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    entry_dir: str
    entry_file: str
    entry_hidden: str
    size: str
    date: str
    details: str
    placeholder: str
    total: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_hidden="\033[2;38;5;250m",
    size="\033[38;5;109m",
    date="\033[38;5;245m",
    details="\033[38;5;180m",
    placeholder="\033[2;38;5;244m",
    total="\033[1m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_hidden="\033[2;38;5;110m",
    size="\033[38;5;73m",
    date="\033[38;5;110m",
    details="\033[38;5;153m",
    placeholder="\033[2;38;5;24m",
    total="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    entry_dir="",
    entry_file="",
    entry_hidden="",
    size="",
    date="",
    details="",
    placeholder="",
    total="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
