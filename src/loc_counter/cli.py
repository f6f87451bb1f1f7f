from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from loc_counter.models.archive import ArchiveError
from loc_counter.services.archive_analysis import (
    count_lines_from_archive,
    scan_extensions_from_archive,
)
from loc_counter.utils.display import display_count_result, display_extensions
from loc_counter.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``loc-counter`` command."""
    parser = argparse.ArgumentParser(
        prog="loc-counter",
        description="Count lines of code in a zipped project, broken down by extension.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="List extensions of text files in an archive")
    scan.add_argument("archive", type=Path, help="Path to a .zip archive")

    count = subparsers.add_parser("count", help="Count lines for selected extensions")
    count.add_argument("archive", type=Path, help="Path to a .zip archive")
    count.add_argument(
        "-e",
        "--ext",
        dest="extensions",
        action="append",
        default=[],
        help="Extension to include, e.g. .py (repeatable)",
    )
    count.add_argument(
        "--top", type=int, default=20, help="Number of top files to display (default: 20)"
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--no-reload", action="store_true", help="Disable auto-reload")

    return parser


def _read_archive(path: Path) -> bytes:
    if not path.is_file():
        raise ArchiveError(f"Archive not found: {path}")
    return path.read_bytes()


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run the CLI workflow for the parsed command.

    Returns:
        Exit code (0 for success, 2 for a rejected archive).
    """
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    if args.command == "serve":
        from loc_counter.api.main import main as serve_main

        serve_main(reload=not args.no_reload)
        return 0

    print(f"\n📦 Processing: {args.archive.name}")
    try:
        data = _read_archive(args.archive)
        if args.command == "scan":
            display_extensions(scan_extensions_from_archive(data))
        else:
            display_count_result(count_lines_from_archive(data, args.extensions), top=args.top)
    except ArchiveError as exc:
        print(f"\n❌ {exc}")
        return 2

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        logger.debug("Unexpected CLI failure", exc_info=True)
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
