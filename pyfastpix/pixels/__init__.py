"""
Pixel access module for PyFastPix.

Provides the Color value type, the PixelSource read contract with its two
backings (structured ARGB words and raw RGBA bytes), and the DecodedImage
container handed to the resampling engine.

Author: B.G.
"""

from .color import TRANSPARENT, Color
from .image import DecodedImage
from .sources import PixelSource, RawPixelSource, StructuredPixelSource

__all__ = [
    "Color",
    "TRANSPARENT",
    "PixelSource",
    "StructuredPixelSource",
    "RawPixelSource",
    "DecodedImage",
]
