"""Regex-based rewriting of media ``src`` attributes into data URIs."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Union

from .assets import resolve_asset_path
from .config import DEFAULT_TAGS
from .encoding import is_supported, to_data_uri
from .models import ProcessingReport, RewriteResult, TagKind
from .utils import preview

logger = logging.getLogger("b64_inline")


@lru_cache(maxsize=None)
def tag_pattern(tag: str) -> re.Pattern[str]:
    """Compile the pattern matching ``<tag ... src="..." ...>`` for a tag name."""
    return re.compile(
        rf"<{re.escape(tag)}([^>]*)\ssrc=[\"']([^\"']+)[\"']([^>]*)>",
        re.IGNORECASE,
    )


def rewrite_tags(
    html: str,
    tag: Union[TagKind, str],
    assets_dir: Path,
    report: Optional[ProcessingReport] = None,
) -> RewriteResult:
    """Replace the ``src`` of every matching tag with an inline data URI.

    Tags already pointing at a ``data:`` URI, referencing an unsupported
    extension, or whose asset cannot be encoded are left exactly as found.
    """
    name = tag.value if isinstance(tag, TagKind) else str(tag)
    converted = 0

    def _replace(match: "re.Match[str]") -> str:
        nonlocal converted
        before, src, after = match.group(1), match.group(2), match.group(3)

        if src.startswith("data:"):
            logger.debug("  Already inlined: %s", preview(src))
            return match.group(0)

        asset_path = resolve_asset_path(src, assets_dir)
        if not is_supported(asset_path):
            logger.info("  Unsupported extension: %r (%s)", asset_path.suffix, src)
            return match.group(0)

        logger.info("  Converting <%s> %s", name, asset_path.name)
        data_uri = to_data_uri(asset_path, report)
        if data_uri is None:
            logger.info("  Could not convert: %s", src)
            return match.group(0)

        converted += 1
        return f'<{name}{before} src="{data_uri}"{after}>'

    updated = tag_pattern(name).sub(_replace, html)
    return RewriteResult(html=updated, modified=converted > 0, converted=converted)


def rewrite_document(
    html: str,
    assets_dir: Path,
    report: Optional[ProcessingReport] = None,
    tags: Iterable[Union[TagKind, str]] = DEFAULT_TAGS,
) -> RewriteResult:
    """Run one rewrite pass per tag kind, each over the previous pass's output."""
    modified = False
    converted = 0
    for tag in tags:
        result = rewrite_tags(html, tag, assets_dir, report)
        html = result.html
        modified = modified or result.modified
        converted += result.converted
    return RewriteResult(html=html, modified=modified, converted=converted)
