"""Command-line front door for dirlist.

Parses CLI options, runs any requested file action, otherwise lists the
target directory: read, filter, sort, render, total.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .editor import launch_editor
from .errors import DirlistError
from .highlight import DEFAULT_STYLE, render_file
from .listing import SortKey, filter_entries, read_directory, sort_entries, total_size
from .operations import FileOperation, perform_file_operation
from .options import ListingOptions
from .render import display_text, render_listing
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; ``-h`` means ``--hidden`` so help is ``--help`` only."""
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="List a directory's entries with filtering, sorting, and size totals.",
        add_help=False,
    )
    parser.add_argument("directory", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-d", "--dir", metavar="DIR", default=None, help="Directory to list (overrides positional).")
    parser.add_argument("-s", "--sort", choices=SortKey.choices(), default=None, help="Sort by name, size, or date.")
    parser.add_argument("-f", "--filter", metavar="EXT", default=None, help="Only show entries ending with EXT.")
    parser.add_argument("-h", "--hidden", action="store_true", help="Show hidden files and directories.")
    parser.add_argument("-hr", "--human-readable", action="store_true", help="Print sizes as KB/MB/GB.")
    parser.add_argument("-dt", "--details", action="store_true", help="Show permissions, owner, and group.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for --view.")
    parser.add_argument("-o", "--operation", choices=FileOperation.choices(), default=None, help="File operation to perform.")
    parser.add_argument("--source", metavar="SRC", default=None, help="Source file or directory for --operation.")
    parser.add_argument("--destination", metavar="DST", default=None, help="Destination for copy/move.")
    parser.add_argument("-v", "--view", metavar="FILE", default=None, help="Print FILE with syntax highlighting.")
    parser.add_argument("-e", "--edit", metavar="FILE", default=None, help="Open FILE in $EDITOR.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("dirlist").setLevel(level)


def _run_file_action(args: argparse.Namespace, parser: argparse.ArgumentParser, color: bool) -> bool:
    """Run operation/view/edit if one was requested; return whether one ran."""
    if args.operation is not None:
        operation = FileOperation(args.operation)
        if args.source is None:
            parser.error("--operation requires --source")
        if operation.needs_destination and args.destination is None:
            parser.error(f"--operation {operation.value} requires --destination")
        destination = Path(args.destination) if args.destination is not None else None
        perform_file_operation(operation, Path(args.source), destination)
        return True

    if args.view is not None:
        sys.stdout.write(render_file(Path(args.view), color, args.style))
        return True

    if args.edit is not None:
        launch_editor(Path(args.edit))
        return True

    return False


def run_listing(options: ListingOptions) -> list[str]:
    """Read, filter, sort, and render one directory; return output lines."""
    logger.debug("listing %s", options.directory)
    raw_entries = read_directory(options.directory, include_metadata=options.details)
    visible = filter_entries(raw_entries, extension=options.extension, show_hidden=options.show_hidden)
    logger.debug("%d of %d entries kept", len(visible), len(raw_entries))
    ordered = sort_entries(visible, options.sort_key)
    theme = resolve_theme(options.theme_name, no_color=not options.color)
    return render_listing(
        ordered,
        total_size(visible),
        human_readable=options.human_readable,
        details=options.details,
        theme=theme,
    )


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments, run the requested action, and return an exit code.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed. Failures print ``Error: ...`` to stderr and return 1.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    color = not args.no_color and sys.stdout.isatty()
    try:
        if _run_file_action(args, parser, color):
            return 0

        if default_path is None:
            default_path = Path.cwd()
        options = ListingOptions.from_args(args, default_path, color)
        lines = run_listing(options)
    except DirlistError as exc:
        print(f"Error: {display_text(str(exc))}", file=sys.stderr)
        return 1

    for line in lines:
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
