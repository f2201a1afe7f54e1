"""Resolved per-run listing configuration."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from .listing import SortKey
from .ui_theme import normalize_theme_name


@dataclass(frozen=True)
class ListingOptions:
    """Everything one listing run needs, folded from parsed CLI arguments."""

    directory: Path
    sort_key: SortKey | None = None
    extension: str | None = None
    show_hidden: bool = False
    human_readable: bool = False
    details: bool = False
    color: bool = False
    theme_name: str = "default"

    @classmethod
    def from_args(cls, args: argparse.Namespace, default_path: Path, color: bool) -> "ListingOptions":
        """Build options from ``args``; ``--dir`` beats the positional path."""
        raw_directory = args.dir or args.directory
        return cls(
            directory=Path(raw_directory) if raw_directory else default_path,
            sort_key=SortKey(args.sort) if args.sort else None,
            extension=args.filter or None,
            show_hidden=args.hidden,
            human_readable=args.human_readable,
            details=args.details,
            color=color,
            theme_name=normalize_theme_name(args.theme),
        )
