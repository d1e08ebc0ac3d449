"""Shared fixtures: a site with a pages directory and a sibling assets directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from b64_inline.config import ConverterConfig

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 17
LOGO_BYTES = b"0123456789"


@pytest.fixture
def site(tmp_path: Path):
    pages = tmp_path / "pages"
    assets = tmp_path / "assets"
    pages.mkdir()
    assets.mkdir()
    return pages, assets


@pytest.fixture
def config(site) -> ConverterConfig:
    pages, assets = site
    return ConverterConfig(html_dir=pages, assets_dir=assets)
