"""Human-readable summaries for conversion and restore runs."""

from __future__ import annotations

from typing import List

from .config import MEDIA_TYPES
from .models import ProcessingReport, RestoreReport

RULE = "=" * 32


def supported_formats() -> str:
    return ", ".join(ext.lstrip(".").upper() for ext in MEDIA_TYPES)


def format_summary(report: ProcessingReport) -> str:
    """Render the end-of-run summary for a conversion."""
    lines: List[str] = ["PROCESSING SUMMARY", RULE]
    if report.aborted:
        lines.append(f"Aborted: {report.aborted}")
        return "\n".join(lines) + "\n"

    lines.append(f"Files processed successfully: {len(report.processed)}")
    if report.processed:
        lines.append("")
        lines.append("Modified files:")
        lines.extend(f"  - {path.name}" for path in report.processed)

    if report.warnings:
        lines.append("")
        lines.append(f"Warnings: {len(report.warnings)}")
        lines.extend(f"  - {warning}" for warning in report.warnings)

    if report.errors:
        lines.append("")
        lines.append(f"Errors: {len(report.errors)}")
        lines.extend(f"  - {error}" for error in report.errors)

    lines.append("")
    lines.append("Notes:")
    lines.append("  - Originals were backed up once as .backup files")
    lines.append("  - Only media with supported extensions was inlined")
    lines.append("  - Sources already in base64 were left unchanged")
    lines.append("")
    if report.processed:
        lines.append("Conversion completed.")
    else:
        lines.append("No files were changed.")
    return "\n".join(lines) + "\n"


def format_restore_summary(report: RestoreReport) -> str:
    """Render the end-of-run summary for a restore."""
    lines: List[str] = [f"Files restored: {len(report.restored)}"]
    lines.extend(f"  - {path.name}" for path in report.restored)
    if report.errors:
        lines.append(f"Errors: {len(report.errors)}")
        lines.extend(f"  - {error}" for error in report.errors)
    if report.restored:
        lines.append("Restore completed.")
    else:
        lines.append("No backups found to restore.")
    return "\n".join(lines) + "\n"


def usage_epilog() -> str:
    return (
        f"Supported formats: {supported_formats()}\n\n"
        "The tool:\n"
        "  - looks for .html files in the HTML directory (not recursive)\n"
        "  - inlines media referenced from ./assets/, ../assets/ or assets/\n"
        "  - handles <img>, <video> and <source> tags\n"
        "  - writes a .backup of each file before its first modification"
    )
