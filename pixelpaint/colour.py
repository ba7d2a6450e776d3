"""RGBA colours, the standard palette and HSV conversion."""

from __future__ import annotations

import math
from typing import NamedTuple


class Colour(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


LIGHTGRAY = Colour(200, 200, 200)
GRAY = Colour(130, 130, 130)
DARKGRAY = Colour(80, 80, 80)
YELLOW = Colour(253, 249, 0)
ORANGE = Colour(255, 161, 0)
RED = Colour(230, 41, 55)
GREEN = Colour(0, 228, 48)
BLUE = Colour(0, 121, 241)
PURPLE = Colour(200, 122, 255)
WHITE = Colour(255, 255, 255)
BLACK = Colour(0, 0, 0)
TRANSPARENT = Colour(0, 0, 0, 0)

_NAMED_COLOURS = (
    ("RED", RED),
    ("ORANGE", ORANGE),
    ("YELLOW", YELLOW),
    ("GREEN", GREEN),
    ("BLUE", BLUE),
    ("PURPLE", PURPLE),
    ("WHITE", WHITE),
    ("BLACK", BLACK),
)


def colour_from_hsv(hue: float, saturation: float, value: float) -> Colour:
    """Convert hue (degrees), saturation and value (0..1) to an opaque colour."""

    def channel(shift: float) -> int:
        k = math.fmod(shift + hue / 60.0, 6.0)
        k = max(0.0, min(4.0 - k, k, 1.0))
        level = (value - value * saturation * k) * 255.0
        return max(0, min(255, int(level)))

    return Colour(channel(5.0), channel(3.0), channel(1.0), 255)


def colour_name(colour: tuple[int, int, int, int]) -> str:
    """Return the palette name of a colour, or "UNKNOWN"."""
    target = Colour(*colour)
    for name, named in _NAMED_COLOURS:
        if target == named:
            return name
    return "UNKNOWN"