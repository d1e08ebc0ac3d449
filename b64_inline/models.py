"""Data models shared by the conversion and restore pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class TagKind(str, Enum):
    """HTML tags whose ``src`` attribute may be inlined."""

    IMG = "img"
    VIDEO = "video"
    SOURCE = "source"


@dataclass
class RewriteResult:
    """Outcome of a single tag rewrite pass over an HTML document."""

    html: str
    modified: bool
    converted: int = 0


@dataclass
class AssetInfo:
    """Media file discovered in the assets directory."""

    name: str
    path: Path
    size: int
    mime_type: str
    detected_mime: Optional[str] = None


@dataclass
class ProcessingReport:
    """Accumulated results of a conversion run."""

    processed: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    aborted: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.errors and self.aborted is None


@dataclass
class RestoreReport:
    """Accumulated results of a restore run."""

    restored: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
