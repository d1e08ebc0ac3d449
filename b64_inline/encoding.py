"""MIME lookup and base64 data URI encoding for media assets."""

from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Optional

from filetype import guess

from .config import FALLBACK_MIME, MEDIA_TYPES, SUPPORTED_EXTENSIONS
from .models import ProcessingReport

logger = logging.getLogger("b64_inline")

SIGNATURE_BYTES = 262


def is_supported(path: Path) -> bool:
    """Return True when the file extension is in the media table."""
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def mime_for_path(path: Path) -> str:
    """Look up the MIME type for a file by extension, case-insensitively."""
    return MEDIA_TYPES.get(path.suffix.lower(), FALLBACK_MIME)


def detect_mime(path: Path) -> Optional[str]:
    """Sniff the MIME type from the file signature using filetype.

    Returns None for formats without a binary signature (SVG) or unreadable
    files. Only used for diagnostics; data URIs always use the extension.
    """
    try:
        with path.open("rb") as handle:
            header = handle.read(SIGNATURE_BYTES)
    except OSError as exc:
        logger.debug("Could not read signature of %s: %s", path, exc)
        return None
    kind = guess(header)
    if kind is None:
        return None
    return kind.mime


def encode_bytes(data: bytes, mime_type: str) -> str:
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def to_data_uri(path: Path, report: Optional[ProcessingReport] = None) -> Optional[str]:
    """Read a media file and return it as a ``data:`` URI.

    A missing file or a read failure is a soft failure: it is logged, noted on
    the report when one is given, and None is returned.
    """
    try:
        if not path.exists():
            logger.warning("Asset not found: %s", path)
            if report is not None:
                report.warnings.append(f"Asset not found: {path}")
            return None
        data = path.read_bytes()
    except OSError as exc:
        logger.error("Failed to encode %s: %s", path, exc)
        if report is not None:
            report.errors.append(f"Error in {path}: {exc}")
        return None

    return encode_bytes(data, mime_for_path(path))
