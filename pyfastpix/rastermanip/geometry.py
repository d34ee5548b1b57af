"""
Cover-scaling geometry shared by every fixed-canvas downscale.

The source is scaled so it fully covers the target canvas and the excess is
cropped symmetrically. Cropping is done by the scan bounds: destination
columns walk ``x_offset, x_offset + 1, ...`` while below
``scaled_width - x_offset`` (rows likewise), and each position maps back to
the source through ``/ scale``. Offsets can be half-integers when the excess
is odd.

Author: B.G.
"""

import math

from .. import constants as cte
from ..errors import InvalidDimensions, check_dimensions


class CoverGeometry:
    """Scale, scaled size and crop offsets for one source/target pair."""

    def __init__(self, source_width, source_height, target_width, target_height):
        check_dimensions(source_width, source_height, "source")
        check_dimensions(target_width, target_height, "target")
        self.source_width = source_width
        self.source_height = source_height
        self.target_width = target_width
        self.target_height = target_height

        self.scale = max(target_width / source_width, target_height / source_height)
        self.scaled_width = int(math.floor(source_width * self.scale + 0.5))
        self.scaled_height = int(math.floor(source_height * self.scale + 0.5))
        self.x_offset = max(0, self.scaled_width - target_width) / 2
        self.y_offset = max(0, self.scaled_height - target_height) / 2

    def _axis(self, offset, scaled, expected):
        coords = []
        pos = offset
        while pos < scaled - offset:
            coords.append(pos / self.scale)
            pos += 1
        assert len(coords) == expected, (
            f"scan produced {len(coords)} samples, expected {expected}"
        )
        return coords

    def columns(self):
        """Source x coordinate of every destination column, left to right."""
        return self._axis(self.x_offset, self.scaled_width, self.target_width)

    def rows(self):
        """Source y coordinate of every destination row, top to bottom."""
        return self._axis(self.y_offset, self.scaled_height, self.target_height)

    def __repr__(self):
        return (
            f"CoverGeometry({self.source_width}x{self.source_height} -> "
            f"{self.target_width}x{self.target_height}, scale={self.scale:.6g}, "
            f"offset=({self.x_offset}, {self.y_offset}))"
        )


def cover_geometry(source_width, source_height, size=cte.TARGET_SIZE) -> CoverGeometry:
    """
    Compute the cover geometry for scaling a source onto a target canvas.

    Args:
        source_width: Source width in pixels (>= 1)
        source_height: Source height in pixels (>= 1)
        size: (width, height) of the target canvas

    Returns:
        CoverGeometry

    Raises:
        InvalidDimensions: If any dimension is < 1

    Example:
        g = cover_geometry(512, 256)
        g.scale, g.x_offset, g.y_offset  # (1.0, 128.0, 0.0)
    """
    try:
        target_width, target_height = size
    except (TypeError, ValueError):
        raise InvalidDimensions(f"size must be a (width, height) pair, got {size!r}")
    return CoverGeometry(source_width, source_height, int(target_width), int(target_height))


__all__ = ["CoverGeometry", "cover_geometry"]
