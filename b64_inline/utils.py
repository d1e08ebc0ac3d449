"""Utility helpers for console-friendly formatting."""

from __future__ import annotations

PREVIEW_CHARS = 50


def format_size_kb(size: int) -> str:
    """Render a byte count as whole kilobytes, rounded to the nearest KB."""
    return f"{int(size / 1024 + 0.5)} KB"


def preview(value: str, limit: int = PREVIEW_CHARS) -> str:
    """Shorten long attribute values (such as data URIs) for log output."""
    if len(value) <= limit:
        return value
    return value[:limit] + "..."
