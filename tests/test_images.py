"""Tests for resizing uploads before they are sent to the model."""
import io

import pytest
from PIL import Image

from bim_schedule.core.errors import InvalidImageError
from bim_schedule.ingestion.images import bounded_size, compress_image


def _open(data: bytes) -> Image.Image:
    return Image.open(io.BytesIO(data))


def test_landscape_png_is_bounded_by_width_and_stays_png(make_image):
    result = compress_image(make_image((2048, 1024), "PNG"), "image/png")

    assert result.mime_type == "image/png"
    assert (result.width, result.height) == (1024, 512)
    assert _open(result.data).format == "PNG"


def test_portrait_jpeg_is_bounded_by_height(make_image):
    result = compress_image(make_image((800, 1600), "JPEG"), "image/jpeg")

    assert result.mime_type == "image/jpeg"
    assert (result.width, result.height) == (512, 1024)
    assert _open(result.data).size == (512, 1024)


def test_small_images_are_not_upscaled(make_image):
    result = compress_image(make_image((300, 200), "JPEG"), "image/jpeg")

    assert (result.width, result.height) == (300, 200)


def test_non_png_uploads_are_reencoded_as_jpeg(make_image):
    rgba_png = make_image((120, 80), "PNG", mode="RGBA")

    result = compress_image(rgba_png, "image/webp")

    assert result.mime_type == "image/jpeg"
    assert _open(result.data).format == "JPEG"


def test_undecodable_bytes_raise_invalid_image():
    with pytest.raises(InvalidImageError):
        compress_image(b"definitely not an image", "image/jpeg")


@pytest.mark.parametrize(
    "size, expected",
    [
        ((2000, 2000), (1024, 1024)),
        ((4000, 1000), (1024, 256)),
        ((1000, 4000), (256, 1024)),
        ((1024, 700), (1024, 700)),
    ],
)
def test_bounded_size(size, expected):
    assert bounded_size(*size, max_width=1024, max_height=1024) == expected
