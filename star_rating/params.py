"""Render parameters and request normalization.

:class:`RenderParameters` is both the compositor input and the cache key, so
it is a frozen dataclass: two requests share a cache entry exactly when all
four fields compare equal.

Bounds after normalization:

* ``1 <= count <= 10``
* ``0 <= rate <= count``
* ``0.1 <= scale <= 10``
* ``0 <= space <= 100``
"""

import math
from dataclasses import dataclass
from typing import Optional, TypeVar


DEFAULT_RATE = 0.0
DEFAULT_SCALE = 1.0
DEFAULT_SPACE = 0
DEFAULT_COUNT = 5

MIN_COUNT, MAX_COUNT = 1, 10
MIN_SCALE, MAX_SCALE = 0.1, 10.0
MIN_SPACE, MAX_SPACE = 0, 100

Number = TypeVar("Number", int, float)


@dataclass(frozen=True)
class RenderParameters:
    """Canonical, in-range star strip configuration.

    Attributes:
        rate: Rating to draw, ``0 <= rate <= count``. Fractions produce a
            partially filled star.
        space: Horizontal gap in pixels between adjacent stars.
        scale: Uniform resize factor applied to the finished strip.
        count: Number of stars in the strip.
    """

    rate: float = DEFAULT_RATE
    space: int = DEFAULT_SPACE
    scale: float = DEFAULT_SCALE
    count: int = DEFAULT_COUNT


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Return ``value`` limited to the closed interval ``[low, high]``."""
    return max(low, min(value, high))


def _finite_or(value: Optional[float], default: float) -> float:
    if value is None or math.isnan(value):
        return default
    return float(value)


def normalize_params(
    rate: Optional[float] = None,
    scale: Optional[float] = None,
    space: Optional[int] = None,
    count: Optional[int] = None,
) -> RenderParameters:
    """Default and clamp raw request values into a :class:`RenderParameters`.

    Never raises. ``rate`` is clamped against the already clamped ``count`` so
    the rating can never exceed the number of stars drawn. ``NaN`` floats are
    treated as absent.

    Args:
        rate: Requested rating.
        scale: Requested resize factor.
        space: Requested gap between stars in pixels.
        count: Requested number of stars.

    Returns:
        RenderParameters: Values satisfying the module-level bounds.
    """
    clamped_count = clamp(
        DEFAULT_COUNT if count is None else int(count), MIN_COUNT, MAX_COUNT
    )
    clamped_rate = clamp(_finite_or(rate, DEFAULT_RATE), 0.0, float(clamped_count))
    clamped_scale = clamp(_finite_or(scale, DEFAULT_SCALE), MIN_SCALE, MAX_SCALE)
    clamped_space = clamp(
        DEFAULT_SPACE if space is None else int(space), MIN_SPACE, MAX_SPACE
    )
    return RenderParameters(
        rate=clamped_rate,
        space=clamped_space,
        scale=clamped_scale,
        count=clamped_count,
    )
