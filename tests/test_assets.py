"""Tests for asset path resolution and discovery."""

import logging
from pathlib import Path

import pytest

from b64_inline.assets import list_assets, resolve_asset_path

from .conftest import PNG_BYTES


@pytest.mark.parametrize(
    "src",
    ["./assets/x.png", "../assets/x.png", "assets/x.png", "  ./assets/x.png  "],
)
def test_known_prefixes_resolve_to_same_path(tmp_path: Path, src: str):
    assert resolve_asset_path(src, tmp_path) == tmp_path / "x.png"


def test_nested_path_after_prefix_is_kept(tmp_path: Path):
    assert resolve_asset_path("assets/icons/x.svg", tmp_path) == tmp_path / "icons" / "x.svg"


def test_other_references_use_basename_only(tmp_path: Path):
    assert resolve_asset_path("sub/dir/x.png", tmp_path) == tmp_path / "x.png"
    assert resolve_asset_path("/static/assets/x.png", tmp_path) == tmp_path / "x.png"
    assert resolve_asset_path("x.png", tmp_path) == tmp_path / "x.png"


def test_resolution_does_not_check_existence(tmp_path: Path):
    resolved = resolve_asset_path("assets/nowhere.gif", tmp_path)
    assert resolved == tmp_path / "nowhere.gif"
    assert not resolved.exists()


def test_list_assets_filters_supported_files(tmp_path: Path):
    (tmp_path / "logo.PNG").write_bytes(PNG_BYTES)
    (tmp_path / "clip.mp4").write_bytes(b"\x00" * 8)
    (tmp_path / "notes.txt").write_text("skip me")
    (tmp_path / "folder.png").mkdir()

    assets = {asset.name: asset for asset in list_assets(tmp_path)}

    assert set(assets) == {"logo.PNG", "clip.mp4"}
    assert assets["logo.PNG"].mime_type == "image/png"
    assert assets["logo.PNG"].detected_mime == "image/png"
    assert assets["logo.PNG"].size == len(PNG_BYTES)
    assert assets["clip.mp4"].mime_type == "video/mp4"


def test_list_assets_warns_on_signature_mismatch(tmp_path: Path, caplog):
    (tmp_path / "photo.jpg").write_bytes(PNG_BYTES)

    with caplog.at_level(logging.WARNING, logger="b64_inline"):
        assets = list_assets(tmp_path)

    assert assets[0].mime_type == "image/jpeg"
    assert assets[0].detected_mime == "image/png"
    assert "photo.jpg" in caplog.text
