"""Tests for MIME lookup and data URI encoding."""

import base64
from pathlib import Path

import pytest

from b64_inline.encoding import is_supported, mime_for_path, to_data_uri
from b64_inline.models import ProcessingReport

EXPECTED_MIME = {
    "a.gif": "image/gif",
    "a.webp": "image/webp",
    "a.png": "image/png",
    "a.jpg": "image/jpeg",
    "a.jpeg": "image/jpeg",
    "a.svg": "image/svg+xml",
    "a.bmp": "image/bmp",
    "a.mp4": "video/mp4",
}


@pytest.mark.parametrize("name,mime", sorted(EXPECTED_MIME.items()))
def test_data_uri_prefix_matches_extension(tmp_path: Path, name: str, mime: str):
    path = tmp_path / name
    path.write_bytes(b"payload")

    uri = to_data_uri(path)

    assert uri == f"data:{mime};base64,{base64.b64encode(b'payload').decode('ascii')}"


def test_mime_lookup_is_case_insensitive():
    assert mime_for_path(Path("PHOTO.JPEG")) == "image/jpeg"
    assert is_supported(Path("Clip.MP4"))


def test_unknown_extension_falls_back_to_png():
    assert not is_supported(Path("doc.tiff"))
    assert mime_for_path(Path("doc.tiff")) == "image/png"


def test_payload_is_not_line_wrapped(tmp_path: Path):
    path = tmp_path / "big.bmp"
    path.write_bytes(bytes(range(256)) * 40)

    uri = to_data_uri(path)

    assert "\n" not in uri
    assert base64.b64decode(uri.split(",", 1)[1]) == path.read_bytes()


def test_missing_file_is_a_soft_failure(tmp_path: Path):
    report = ProcessingReport()

    assert to_data_uri(tmp_path / "missing.png", report) is None
    assert report.errors == []
    assert len(report.warnings) == 1
    assert "missing.png" in report.warnings[0]


def test_read_error_is_recorded(tmp_path: Path):
    unreadable = tmp_path / "folder.png"
    unreadable.mkdir()
    report = ProcessingReport()

    assert to_data_uri(unreadable, report) is None
    assert len(report.errors) == 1
    assert report.errors[0].startswith(f"Error in {unreadable}")
