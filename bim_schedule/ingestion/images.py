"""Resize and re-encode uploaded photos before sending them to the model."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image, ImageOps, UnidentifiedImageError

from bim_schedule.core.errors import InvalidImageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 1024
DEFAULT_QUALITY = 0.8


@dataclass
class CompressedImage:
    """Encoded image bytes ready for upload."""

    data: bytes
    mime_type: str
    width: int
    height: int


def bounded_size(width: int, height: int, max_width: int, max_height: int) -> tuple[int, int]:
    """Scale dimensions down to the bounding box, keeping the aspect ratio.

    Landscape images are bounded by width, everything else by height.
    """

    if width > height:
        if width > max_width:
            height = round(height * max_width / width)
            width = max_width
    elif height > max_height:
        width = round(width * max_height / height)
        height = max_height
    return max(width, 1), max(height, 1)


def compress_image(
    data: bytes,
    mime_type: str | None = None,
    max_width: int = DEFAULT_MAX_WIDTH,
    max_height: int = DEFAULT_MAX_HEIGHT,
    quality: float = DEFAULT_QUALITY,
) -> CompressedImage:
    """Return a downsized copy of ``data``.

    PNG input stays PNG; every other format is re-encoded as JPEG using
    ``quality`` (0 to 1) as the encoder quality.
    """

    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise InvalidImageError(f"Could not decode uploaded image: {exc}") from exc

    image = ImageOps.exif_transpose(image)
    original_size = image.size
    target_size = bounded_size(image.width, image.height, max_width, max_height)
    if target_size != original_size:
        image = image.resize(target_size, Image.LANCZOS)

    buffer = io.BytesIO()
    if mime_type == "image/png":
        output_type = "image/png"
        image.save(buffer, format="PNG", optimize=True)
    else:
        output_type = "image/jpeg"
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        image.save(buffer, format="JPEG", quality=int(round(quality * 100)), optimize=True)

    logger.info(
        "Compressed image %sx%s -> %sx%s (%d -> %d bytes)",
        original_size[0],
        original_size[1],
        image.width,
        image.height,
        len(data),
        buffer.tell(),
    )
    return CompressedImage(data=buffer.getvalue(), mime_type=output_type, width=image.width, height=image.height)
