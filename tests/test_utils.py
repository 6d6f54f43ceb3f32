import os
from pathlib import Path
from typing import Tuple

from PIL import Image

from star_rating.renderer.assets import ASSET_DIR, STAR_ASSET_MAP
from star_rating.types import StarKind

RGBA = Tuple[int, int, int, int]

STAR_SIZE: Tuple[int, int] = (20, 10)
BLANK_COLOR: RGBA = (200, 200, 200, 255)
FILLED_COLOR: RGBA = (255, 200, 0, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)

REPO_ROOT = Path(__file__).resolve().parents[1]


def make_star(color: RGBA, size: Tuple[int, int] = STAR_SIZE) -> Image.Image:
    """Solid opaque stand-in for a star asset, so composites are exact."""
    return Image.new("RGBA", size, color)


def write_star_assets(
    root: Path,
    size: Tuple[int, int] = STAR_SIZE,
    blank_color: RGBA = BLANK_COLOR,
    filled_color: RGBA = FILLED_COLOR,
) -> Path:
    """Write both star assets under ``root/Images`` and return ``root``."""
    images = root / ASSET_DIR
    os.makedirs(images, exist_ok=True)
    make_star(blank_color, size).save(images / STAR_ASSET_MAP[StarKind.BLANK])
    make_star(filled_color, size).save(images / STAR_ASSET_MAP[StarKind.FILLED])
    return root
