"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from os import PathLike
from typing import Union


ContentRoot = Union[str, "PathLike[str]"]
PngBytes = bytes


class StarKind(StrEnum):
    """Which of the two star assets to draw."""

    FILLED = auto()
    BLANK = auto()
