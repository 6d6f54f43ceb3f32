"""Star asset loading.

Both assets live in a fixed ``Images`` directory under the content root and
are reloaded on every render; decoded images are not shared between requests.
"""

import logging
import os
from typing import Dict

from PIL import Image, UnidentifiedImageError

from star_rating.errors import AssetDecodeError, AssetMissingError
from star_rating.types import ContentRoot, StarKind


ASSET_DIR = "Images"

STAR_ASSET_MAP: Dict[StarKind, str] = {
    StarKind.FILLED: "star-fill.png",
    StarKind.BLANK: "star-blank.png",
}

logger = logging.getLogger(__name__)


def asset_path(content_root: ContentRoot, kind: StarKind) -> str:
    """Return the filesystem path of the asset for ``kind``."""
    return os.path.join(os.fspath(content_root), ASSET_DIR, STAR_ASSET_MAP[kind])


def load_star(content_root: ContentRoot, kind: StarKind) -> Image.Image:
    """Load one star asset as an ``RGBA`` image.

    Args:
        content_root: Directory containing the ``Images`` folder.
        kind: Which star to load.

    Returns:
        Image.Image: Fully decoded ``RGBA`` copy, detached from the file.

    Raises:
        AssetMissingError: The file does not exist.
        AssetDecodeError: The file exists but is not a readable image.
    """
    path = asset_path(content_root, kind)
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except FileNotFoundError as e:
        raise AssetMissingError(path) from e
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
    ) as e:
        raise AssetDecodeError(path, str(e)) from e


def load_stars(content_root: ContentRoot) -> Dict[StarKind, Image.Image]:
    """Load every star kind from ``content_root``."""
    logger.debug("Loading star assets from %s", content_root)
    return {kind: load_star(content_root, kind) for kind in STAR_ASSET_MAP}
