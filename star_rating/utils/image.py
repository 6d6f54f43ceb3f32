"""Small Pillow helpers used by the strip compositor."""

import io
import math
from typing import Tuple

from PIL import Image


def partial_width(width: int, fraction: float) -> int:
    """Return ``floor(width * fraction)``, the column count of a partial star."""
    return int(math.floor(width * fraction))


def crop_left(image: Image.Image, width: int) -> Image.Image:
    """Return the left ``width`` columns of ``image`` at full height."""
    return image.crop((0, 0, width, image.height))


def scaled_size(size: Tuple[int, int], factor: float) -> Tuple[int, int]:
    """Multiply both dimensions by ``factor``, truncating, never below 1px."""
    width, height = size
    return max(1, int(width * factor)), max(1, int(height * factor))


def scale_image(image: Image.Image, factor: float) -> Image.Image:
    """Resize ``image`` uniformly by ``factor``; identity when ``factor == 1``."""
    if factor == 1:
        return image
    return image.resize(
        scaled_size(image.size, factor), resample=Image.Resampling.BICUBIC
    )


def encode_png(image: Image.Image) -> bytes:
    """Encode ``image`` losslessly as PNG with Pillow's default compression."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
