"""RGBA colour value returned by every pixel read."""

from typing import NamedTuple


class Color(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int = 255


# Boundary value for reads outside the raster
TRANSPARENT = Color(0, 0, 0, 0)
