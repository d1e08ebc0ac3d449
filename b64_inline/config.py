"""Configuration objects and constants for the converter."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

logger = logging.getLogger("b64_inline")

MEDIA_TYPES: Dict[str, str] = {
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
    ".bmp": "image/bmp",
    ".mp4": "video/mp4",
}
SUPPORTED_EXTENSIONS = frozenset(MEDIA_TYPES)
FALLBACK_MIME = "image/png"

DEFAULT_TAGS: Tuple[str, ...] = ("img", "video", "source")
BACKUP_SUFFIX = ".backup"
ASSETS_DIR_ENV = "B64_INLINE_ASSETS_DIR"


def _resolve_env_assets_dir() -> Optional[Path]:
    override = os.getenv(ASSETS_DIR_ENV)
    if not override:
        return None
    override_path = Path(override).expanduser()
    if override_path.is_dir():
        logger.debug("%s override detected at %s", ASSETS_DIR_ENV, override_path)
        return override_path
    logger.warning(
        "%s is set to %s but the directory does not exist; using the default",
        ASSETS_DIR_ENV,
        override_path,
    )
    return None


def default_assets_dir(html_dir: Path) -> Path:
    """Return the assets directory used when none is given explicitly."""
    env_override = _resolve_env_assets_dir()
    if env_override:
        return env_override.resolve()
    return (html_dir / ".." / "assets").resolve()


@dataclass
class ConverterConfig:
    """Settings that control where HTML and media assets are looked up."""

    html_dir: Path = field(default_factory=Path.cwd)
    assets_dir: Optional[Path] = None
    backup_suffix: str = BACKUP_SUFFIX
    tags: Tuple[str, ...] = DEFAULT_TAGS

    def __post_init__(self) -> None:
        self.html_dir = Path(self.html_dir).resolve()
        if self.assets_dir is None:
            self.assets_dir = default_assets_dir(self.html_dir)
        else:
            self.assets_dir = Path(self.assets_dir).expanduser().resolve()

    def backup_path(self, html_path: Path) -> Path:
        return html_path.with_name(html_path.name + self.backup_suffix)
