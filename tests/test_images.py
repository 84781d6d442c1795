import base64

import pytest

from whisperer.errors import ValidationError
from whisperer.images import accept_image_data_url, decode_data_url, image_to_data_url


def test_accepts_png(png_data_url, png_bytes):
    assert accept_image_data_url(png_data_url) == png_data_url
    assert decode_data_url(png_data_url) == png_bytes


@pytest.mark.parametrize("value", [
    None,
    "",
    123,
    "https://example.com/screenshot.png",
    "data:text/plain;base64,aGVsbG8=",
    "data:image/png,rawbytes",
    "data:image/png;base64,!!!not-base64!!!",
    "data:image/png;base64," + base64.b64encode(b"plain text, not pixels").decode("ascii"),
])
def test_ignored_values(value):
    assert accept_image_data_url(value) is None


def test_oversized_image_is_ignored(png_data_url, png_bytes):
    assert accept_image_data_url(png_data_url, max_bytes=len(png_bytes) - 1) is None


def test_image_to_data_url(tmp_path, png_bytes):
    path = tmp_path / "screen.png"
    path.write_bytes(png_bytes)
    url = image_to_data_url(str(path))
    assert url.startswith("data:image/png;base64,")
    assert accept_image_data_url(url) == url


def test_image_to_data_url_rejects_non_images(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("not an image")
    with pytest.raises(ValidationError, match="Please upload an image file."):
        image_to_data_url(str(path))


def test_image_to_data_url_rejects_large_files(tmp_path, png_bytes):
    path = tmp_path / "screen.png"
    path.write_bytes(png_bytes)
    with pytest.raises(ValidationError, match="Image too large"):
        image_to_data_url(str(path), max_bytes=10)
