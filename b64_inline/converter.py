"""High-level orchestration for converting and restoring HTML files."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from .assets import list_assets
from .config import ConverterConfig
from .models import ProcessingReport, RestoreReport
from .rewriter import rewrite_document
from .utils import format_size_kb

logger = logging.getLogger("b64_inline")


def find_html_files(html_dir: Path) -> List[Path]:
    """Return regular ``.html`` files directly inside ``html_dir``."""
    try:
        entries = list(html_dir.iterdir())
    except OSError as exc:
        logger.error("Failed to list HTML files in %s: %s", html_dir, exc)
        return []
    return [entry for entry in entries if entry.name.endswith(".html") and entry.is_file()]


def process_html_file(
    html_path: Path,
    config: ConverterConfig,
    report: ProcessingReport,
) -> bool:
    """Inline the media of one HTML file, backing it up before the first write.

    Returns True when the file was rewritten. Read and write failures are
    logged and recorded on the report; they never propagate.
    """
    logger.info("Processing %s", html_path.name)
    try:
        with html_path.open("r", encoding="utf-8", newline="") as handle:
            html = handle.read()
        result = rewrite_document(html, config.assets_dir, report, config.tags)
        if not result.modified:
            logger.info("  No images or videos to convert")
            return False

        backup_path = config.backup_path(html_path)
        if not backup_path.exists():
            shutil.copyfile(html_path, backup_path)
            logger.info("  Backup created: %s", backup_path.name)

        with html_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(result.html)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to process %s: %s", html_path, exc)
        report.errors.append(f"Error in {html_path}: {exc}")
        return False

    logger.info("  Updated %s (%d reference(s) inlined)", html_path.name, result.converted)
    report.processed.append(html_path)
    return True


def _abort(report: ProcessingReport, reason: str) -> ProcessingReport:
    logger.error(reason)
    report.aborted = reason
    return report


def run_conversion(config: ConverterConfig) -> ProcessingReport:
    """Convert every HTML file in ``config.html_dir`` and return the report."""
    report = ProcessingReport()
    assets_dir = config.assets_dir

    if not assets_dir.is_dir():
        return _abort(report, f"Assets directory not found: {assets_dir}")

    try:
        assets = list_assets(assets_dir)
    except OSError as exc:
        return _abort(report, f"Failed to list assets in {assets_dir}: {exc}")
    if not assets:
        return _abort(report, f"No supported images or videos found in {assets_dir}")

    logger.info("Available assets in %s:", assets_dir)
    for asset in assets:
        logger.info("  %s (%s)", asset.name, format_size_kb(asset.size))

    html_files = find_html_files(config.html_dir)
    if not html_files:
        return _abort(report, f"No HTML files found in {config.html_dir}")

    logger.info("Found %d HTML file(s):", len(html_files))
    for html_path in html_files:
        logger.info("  %s", html_path.name)

    for html_path in html_files:
        process_html_file(html_path, config, report)
    return report


def restore_backups(config: ConverterConfig) -> RestoreReport:
    """Copy each ``.backup`` sibling back over its HTML file."""
    report = RestoreReport()
    logger.info("Restoring files from backups in %s", config.html_dir)

    for html_path in find_html_files(config.html_dir):
        backup_path = config.backup_path(html_path)
        if not backup_path.exists():
            continue
        try:
            shutil.copyfile(backup_path, html_path)
        except OSError as exc:
            logger.error("Failed to restore %s: %s", html_path.name, exc)
            report.errors.append(f"Error in {html_path}: {exc}")
            continue
        logger.info("Restored %s", html_path.name)
        report.restored.append(html_path)
    return report
