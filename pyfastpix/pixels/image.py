"""
Decoded raster container.

A DecodedImage is what the decode collaborator hands to the engine: the
raster dimensions plus a pixel source. Either backing can be derived from the
other through the interleaved RGBA bytes, so the engine can swap backings
without re-decoding.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from ..errors import check_dimensions
from .sources import PixelSource, RawPixelSource, StructuredPixelSource


class DecodedImage:
    """Immutable decoded raster.

    Args:
        width: Raster width in pixels (>= 1)
        height: Raster height in pixels (>= 1)
        pixels: PixelSource over the raster
    """

    def __init__(self, width: int, height: int, pixels: PixelSource):
        check_dimensions(width, height)
        if (pixels.width, pixels.height) != (width, height):
            raise ValueError(
                f"pixel source is {pixels.width}x{pixels.height}, "
                f"image is {width}x{height}"
            )
        self.width = int(width)
        self.height = int(height)
        self.pixels = pixels

    @classmethod
    def from_rgba(cls, rgba, width: int, height: int, raw: bool = False):
        """Build an image from interleaved RGBA bytes.

        The structured backing is used unless ``raw`` is True.
        """
        if raw:
            pixels = RawPixelSource(rgba, width, height)
        else:
            pixels = StructuredPixelSource.from_rgba(rgba, width, height)
        return cls(width, height, pixels)

    @classmethod
    def from_array(cls, array, raw: bool = False):
        """Build an image from a (H, W, 3) or (H, W, 4) uint8 array.

        RGB arrays get an opaque alpha channel.
        """
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError("array must have shape (H, W, 3) or (H, W, 4)")
        height, width = arr.shape[:2]
        if arr.shape[2] == 3:
            alpha = np.full((height, width, 1), cte.OPAQUE, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        rgba = np.ascontiguousarray(arr, dtype=np.uint8).tobytes()
        return cls.from_rgba(rgba, width, height, raw=raw)

    def rgba(self) -> bytes:
        return self.pixels.to_rgba()

    def structured(self) -> StructuredPixelSource:
        if isinstance(self.pixels, StructuredPixelSource):
            return self.pixels
        return StructuredPixelSource.from_rgba(self.rgba(), self.width, self.height)

    def raw(self) -> RawPixelSource:
        if isinstance(self.pixels, RawPixelSource):
            return self.pixels
        return RawPixelSource(self.rgba(), self.width, self.height)

    def to_array(self) -> np.ndarray:
        """Return the raster as a (H, W, 4) uint8 array."""
        return np.frombuffer(self.rgba(), dtype=np.uint8).reshape(
            self.height, self.width, cte.CHANNELS
        )

    def __repr__(self):
        return f"DecodedImage({self.width}x{self.height}, {type(self.pixels).__name__})"
