"""
Pixel sources for PyFastPix.

A pixel source answers ``read(x, y) -> Color`` over a decoded raster. Two
backings share that contract:

- StructuredPixelSource keeps one ARGB-packed 32-bit word per pixel and
  unpacks a Color on every read.
- RawPixelSource keeps the flat RGBA byte buffer and slices four bytes per
  read.

Reads outside the raster return fully transparent black and are not an
error. Reads further than ``OOB_WARN_MARGIN`` pixels outside are logged as
unusual. The blur sampler skips taps outside the raster, so no sampler in
this package produces them whatever the kernel size.

Author: B.G.
"""

import logging

import numpy as np

from .. import constants as cte
from ..errors import BufferLengthMismatch, check_dimensions
from .color import TRANSPARENT, Color

logger = logging.getLogger(__name__)


def _check_buffer_length(length, width, height):
    expected = cte.CHANNELS * width * height
    if length != expected:
        raise BufferLengthMismatch(
            f"RGBA buffer holds {length} bytes, expected {expected} "
            f"for a {width}x{height} raster"
        )


class PixelSource:
    """Read-only, bounds-checked lookup over a raster's pixels.

    Subclasses provide ``read`` and ``to_rgba``.
    """

    def __init__(self, width: int, height: int):
        check_dimensions(width, height)
        self.width = int(width)
        self.height = int(height)

    def read(self, x: int, y: int) -> Color:  # pragma: no cover - interface
        raise NotImplementedError

    def to_rgba(self) -> bytes:  # pragma: no cover - interface
        raise NotImplementedError

    def _out_of_bounds(self, x, y) -> Color:
        m = cte.OOB_WARN_MARGIN
        if x < -m or x >= self.width + m or y < -m or y >= self.height + m:
            logger.warning(
                "read(%d, %d) far outside %dx%d raster", x, y, self.width, self.height
            )
        return TRANSPARENT

    def __repr__(self):
        return f"{type(self).__name__}({self.width}x{self.height})"


class StructuredPixelSource(PixelSource):
    """One 0xAARRGGBB word per pixel, row-major, stride = width."""

    def __init__(self, words, width: int, height: int):
        super().__init__(width, height)
        words = np.asarray(words, dtype=np.uint32).reshape(-1)
        if words.size != self.width * self.height:
            raise BufferLengthMismatch(
                f"{words.size} pixel words for a {self.width}x{self.height} raster"
            )
        # Python ints are much cheaper to index than numpy scalars
        self._words = words.tolist()

    @classmethod
    def from_rgba(cls, rgba, width: int, height: int):
        """Pack an interleaved RGBA byte buffer into ARGB words."""
        check_dimensions(width, height)
        _check_buffer_length(len(rgba), width, height)
        px = np.frombuffer(bytes(rgba), dtype=np.uint8).reshape(-1, 4).astype(np.uint32)
        words = (px[:, 3] << 24) | (px[:, 0] << 16) | (px[:, 1] << 8) | px[:, 2]
        return cls(words, width, height)

    def read(self, x: int, y: int) -> Color:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return self._out_of_bounds(x, y)
        word = self._words[self.width * y + x]
        return Color(
            (word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF, (word >> 24) & 0xFF
        )

    def to_rgba(self) -> bytes:
        words = np.asarray(self._words, dtype=np.uint32)
        px = np.empty((words.size, 4), dtype=np.uint8)
        px[:, 0] = (words >> 16) & 0xFF
        px[:, 1] = (words >> 8) & 0xFF
        px[:, 2] = words & 0xFF
        px[:, 3] = (words >> 24) & 0xFF
        return px.tobytes()


class RawPixelSource(PixelSource):
    """Flat RGBA byte buffer, 4 bytes per pixel, stride = 4 * width."""

    def __init__(self, buffer, width: int, height: int):
        super().__init__(width, height)
        _check_buffer_length(len(buffer), self.width, self.height)
        self._buffer = bytes(buffer)
        self._stride = cte.CHANNELS * self.width

    def read(self, x: int, y: int) -> Color:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return self._out_of_bounds(x, y)
        o = self._stride * y + 4 * x
        buf = self._buffer
        return Color(buf[o], buf[o + 1], buf[o + 2], buf[o + 3])

    def to_rgba(self) -> bytes:
        return self._buffer


__all__ = ["PixelSource", "StructuredPixelSource", "RawPixelSource"]
