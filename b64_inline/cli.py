"""Command-line entry point for the base64 inliner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from .assets import list_assets
from .config import ASSETS_DIR_ENV, ConverterConfig
from .converter import restore_backups, run_conversion
from .reporting import format_restore_summary, format_summary, usage_epilog
from .utils import format_size_kb

logger = logging.getLogger("b64_inline.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b64-inline",
        description=(
            "Inline images and videos referenced by local HTML files as base64 data URIs."
        ),
        epilog=usage_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "-r",
        "--restore",
        action="store_true",
        help="Restore HTML files from their .backup copies",
    )
    parser.add_argument(
        "--list-assets",
        action="store_true",
        help="List the supported media found in the assets directory and exit",
    )
    parser.add_argument(
        "--html-dir",
        type=Path,
        default=None,
        help="Directory containing the HTML files (default: current directory)",
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        default=None,
        help=(
            "Directory containing the media files "
            f"(default: ${ASSETS_DIR_ENV} or <html-dir>/../assets)"
        ),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Tuple[argparse.Namespace, List[str]]:
    """Parse known options; unrecognised ones are returned rather than rejected."""
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    return parser.parse_known_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _run_list_assets(config: ConverterConfig) -> int:
    if not config.assets_dir.is_dir():
        logger.error("Assets directory not found: %s", config.assets_dir)
        return EXIT_FAILURE
    try:
        assets = list_assets(config.assets_dir)
    except OSError as exc:
        logger.error("Failed to list assets in %s: %s", config.assets_dir, exc)
        return EXIT_FAILURE
    for asset in assets:
        sys.stdout.write(f"{asset.name}\t{asset.mime_type}\t{format_size_kb(asset.size)}\n")
    sys.stdout.flush()
    return EXIT_OK


def _run_restore(config: ConverterConfig) -> int:
    report = restore_backups(config)
    sys.stdout.write(format_restore_summary(report))
    sys.stdout.flush()
    return EXIT_OK if report.ok else EXIT_FAILURE


def _run_convert(config: ConverterConfig) -> int:
    report = run_conversion(config)
    sys.stdout.write(format_summary(report))
    sys.stdout.flush()
    return EXIT_OK if report.ok else EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    args, unknown = parse_args(argv)
    _configure_logging(args)
    if unknown:
        logger.warning("Ignoring unrecognised arguments: %s", " ".join(unknown))

    config = ConverterConfig(
        html_dir=args.html_dir or Path.cwd(),
        assets_dir=args.assets_dir,
    )
    logger.debug("HTML directory: %s | assets directory: %s", config.html_dir, config.assets_dir)

    if args.restore:
        return _run_restore(config)
    if args.help:
        build_parser().print_help()
        return EXIT_OK
    if args.list_assets:
        return _run_list_assets(config)
    return _run_convert(config)


if __name__ == "__main__":
    sys.exit(main())
