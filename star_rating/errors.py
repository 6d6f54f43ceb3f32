"""Error types raised while producing a star strip.

Invalid request values never surface as errors: they are clamped by
:func:`star_rating.params.normalize_params`. Everything below is fatal for the
request that hit it and is reported to the client as a server error.
"""

from typing import Optional


class StarRatingError(Exception):
    """Base class for rendering failures."""


class AssetMissingError(StarRatingError):
    """A star asset file does not exist under the content root."""

    def __init__(self, path: str):
        super().__init__(f"Star asset not found: {path}")
        self.path = path


class AssetDecodeError(StarRatingError):
    """A star asset exists but could not be decoded as an image."""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Failed to decode star asset: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class ImageEncodeError(StarRatingError):
    """Composing, resizing or PNG-encoding the strip failed."""
