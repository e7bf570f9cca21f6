"""Changelog parser and Markdown-to-HTML renderer for the contribution portal."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from changelog2html.exporters.handlers import RenderContext, load_default_handlers
from changelog2html.sync import EXPORTERS, sync_changelog

logger = logging.getLogger(__name__)

DRY_RUN_ENV = "CHANGELOG2HTML_DRY_RUN"
DEFAULT_DESTINATIONS = {"settings": "site_settings.json", "html": "."}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sync a Markdown changelog into site settings and render it"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser(
        "sync", help="parse a changelog and export the update log"
    )
    sync_parser.add_argument(
        "source",
        help="changelog Markdown file, or JSON settings / update log file",
    )
    sync_parser.add_argument(
        "destination",
        nargs="?",
        help="settings file (default: site_settings.json) or output directory",
    )
    sync_parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(EXPORTERS),
        default="settings",
        help="export target (default: settings)",
    )
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        help=f"parse but don't write anything (also set by {DRY_RUN_ENV}=1)",
    )
    sync_parser.add_argument(
        "--overwrite",
        action="store_true",
        help="write output even when unchanged or already existing",
    )
    sync_parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with 1 when the changelog produced warnings",
    )
    sync_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )

    render_parser = subparsers.add_parser(
        "render", help="render Markdown-dialect text to HTML on stdout"
    )
    render_parser.add_argument("source", help="text file, or - for stdin")
    render_parser.add_argument(
        "--mode",
        choices=load_default_handlers().modes(),
        default="document",
        help="render mode (default: document)",
    )
    return parser


def _env_dry_run() -> bool:
    return os.environ.get(DRY_RUN_ENV, "").strip().lower() == "1"


def _run_render(source: str, mode: str) -> int:
    if source == "-":
        text = sys.stdin.read()
    else:
        source_path = Path(source)
        if not source_path.is_file():
            logger.error("Source not found: %s", source)
            return 2
        text = source_path.read_text(encoding="utf-8")

    html = load_default_handlers().render(mode, text, RenderContext())
    print(html or "")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for changelog2html CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 warnings under --strict, 2 fatal error)
    """
    args = _build_parser().parse_args(argv)

    # configures logging
    if args.verbose:
        level = logging.DEBUG
    elif getattr(args, "quiet", False):
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    try:
        if args.command == "render":
            return _run_render(args.source, args.mode)

        # validates source path exists
        source_path = Path(args.source)
        if not source_path.exists():
            logger.error("Source not found: %s", args.source)
            return 2

        destination = args.destination or DEFAULT_DESTINATIONS[args.output_format]
        return sync_changelog(
            source=source_path,
            destination=destination,
            output_format=args.output_format,
            dry_run=args.dry_run or _env_dry_run(),
            overwrite=args.overwrite,
            strict=args.strict,
            quiet=args.quiet,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Fatal error: %s", e)
        return 2
