"""Star strip composition.

Lays ``count`` stars out left to right with ``space`` pixels between cells.
Every cell gets the blank star first; the filled star is then composited on
top according to how much of the rating falls in that cell:

* ``rate - i >= 1``: the whole filled star.
* ``0 < rate - i < 1``: the filled star cropped to its left
    ``floor(width * (rate - i))`` columns.
* ``rate - i <= 0``: nothing.

Canvas size is ``((blank.width + space) * count - space, blank.height)``; there
is no trailing gap after the last star. A non-unit ``scale`` resizes the whole
finished strip.
"""

import logging
import time
from typing import Tuple

from PIL import Image

from star_rating.errors import ImageEncodeError
from star_rating.params import RenderParameters
from star_rating.renderer.assets import load_stars
from star_rating.types import ContentRoot, PngBytes, StarKind
from star_rating.utils.image import crop_left, encode_png, partial_width, scale_image


logger = logging.getLogger(__name__)


def strip_size(star_size: Tuple[int, int], space: int, count: int) -> Tuple[int, int]:
    """Return the unscaled canvas size for ``count`` stars of ``star_size``."""
    width, height = star_size
    return (width + space) * count - space, height


def cell_origin(index: int, star_width: int, space: int) -> Tuple[int, int]:
    """Top-left corner of the ``index``-th star cell."""
    return index * (star_width + space), 0


def render_strip(
    blank: Image.Image, filled: Image.Image, params: RenderParameters
) -> Image.Image:
    """Compose the star strip for ``params`` from already loaded stars.

    Args:
        blank: ``RGBA`` background star, drawn in every cell.
        filled: ``RGBA`` overlay star, drawn fully or partially up to the rate.
        params: Normalized render parameters.

    Returns:
        Image.Image: ``RGBA`` strip, already scaled by ``params.scale``.

    Raises:
        ImageEncodeError: Pillow failed while cropping, compositing or
            resizing.
    """
    try:
        canvas = Image.new(
            "RGBA", strip_size(blank.size, params.space, params.count), (0, 0, 0, 0)
        )
        for i in range(params.count):
            origin = cell_origin(i, blank.width, params.space)
            canvas.alpha_composite(blank, origin)

            remaining = params.rate - i
            if remaining <= 0:
                continue
            if remaining >= 1:
                canvas.alpha_composite(filled, origin)
                continue

            width = partial_width(filled.width, remaining)
            if width > 0:
                canvas.alpha_composite(crop_left(filled, width), origin)

        return scale_image(canvas, params.scale)
    except (ValueError, OSError) as e:
        raise ImageEncodeError(f"Failed to compose star strip for {params}") from e


def render_stars(content_root: ContentRoot, params: RenderParameters) -> Image.Image:
    """Load both star assets from ``content_root`` and compose the strip."""
    stars = load_stars(content_root)
    return render_strip(stars[StarKind.BLANK], stars[StarKind.FILLED], params)


def render_stars_png(content_root: ContentRoot, params: RenderParameters) -> PngBytes:
    """Render the strip for ``params`` and return it PNG-encoded.

    Raises:
        AssetMissingError: A star asset is missing.
        AssetDecodeError: A star asset could not be decoded.
        ImageEncodeError: Composition or PNG encoding failed.
    """
    started = time.perf_counter()
    image = render_stars(content_root, params)
    try:
        data = encode_png(image)
    except (ValueError, OSError) as e:
        raise ImageEncodeError(f"Failed to encode star strip for {params}") from e
    logger.debug(
        "Rendered %s (%dx%d, %d bytes) in %.1f ms",
        params,
        image.width,
        image.height,
        len(data),
        (time.perf_counter() - started) * 1000,
    )
    return data


class StripRenderer:
    """Renders star strips from the assets under a fixed content root."""

    content_root: ContentRoot

    def __init__(self, content_root: ContentRoot):
        self.content_root = content_root

    def render(self, params: RenderParameters) -> Image.Image:
        return render_stars(self.content_root, params)

    def render_png(self, params: RenderParameters) -> PngBytes:
        return render_stars_png(self.content_root, params)
