"""Asset path resolution and discovery."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import List

from .encoding import detect_mime, is_supported, mime_for_path
from .models import AssetInfo

logger = logging.getLogger("b64_inline")

ASSET_PREFIXES = ("./assets/", "../assets/", "assets/")


def resolve_asset_path(src: str, assets_dir: Path) -> Path:
    """Map a ``src`` attribute value onto a file inside ``assets_dir``.

    The first matching prefix from ``ASSET_PREFIXES`` is stripped and the
    remainder joined onto the assets directory. Any other reference is looked
    up by its base filename only. No existence check happens here.
    """
    src = src.strip()
    for prefix in ASSET_PREFIXES:
        if src.startswith(prefix):
            return assets_dir / src[len(prefix):]
    return assets_dir / PurePosixPath(src).name


def list_assets(assets_dir: Path) -> List[AssetInfo]:
    """Return supported media files in ``assets_dir`` in listing order.

    Raises OSError when the directory cannot be listed.
    """
    assets: List[AssetInfo] = []
    for entry in assets_dir.iterdir():
        if not entry.is_file() or not is_supported(entry):
            continue
        mime_type = mime_for_path(entry)
        detected = detect_mime(entry)
        if detected and detected != mime_type:
            logger.warning(
                "%s has a %s extension but its content looks like %s",
                entry.name,
                mime_type,
                detected,
            )
        assets.append(
            AssetInfo(
                name=entry.name,
                path=entry,
                size=entry.stat().st_size,
                mime_type=mime_type,
                detected_mime=detected,
            )
        )
    return assets
