"""
Per-pixel samplers for PyFastPix.

All three samplers take source-space coordinates and a PixelSource, and
return an opaque Color:

- bilinear: area-weighted blend of the four neighbouring samples
- gaussian_blur_at: kernel-weighted sum around an integer coordinate
- bilinear_antialiased: bilinear blend of four Gaussian-blurred corners

The antialiased sampler blurs only the four corners it needs rather than the
whole source. Adjacent destination pixels therefore re-blur shared corners.

Channels are rounded half away from zero. Every accumulated value is
non-negative, so that is floor(v + 0.5).

Author: B.G.
"""

import math

from .. import constants as cte
from ..pixels.color import Color


def _round(v: float) -> int:
    return int(math.floor(v + 0.5))


def _corners(fx, fy, width, height):
    """Clamp (fx, fy) into the raster and return the bilinear cell."""
    fx = min(max(fx, 0), width - 1)
    fy = min(max(fy, 0), height - 1)
    x0 = math.floor(fx)
    x1 = math.ceil(fx)
    y0 = math.floor(fy)
    y1 = math.ceil(fy)
    return x0, x1, y0, y1, fx - x0, fy - y0


def _blend(c00, c10, c01, c11, dx, dy) -> Color:
    dx1 = 1.0 - dx
    dy1 = 1.0 - dy

    def lerp(v00, v10, v01, v11):
        return _round(v00 * dx1 * dy1 + v10 * dx * dy1 + v01 * dx1 * dy + v11 * dx * dy)

    return Color(
        lerp(c00[0], c10[0], c01[0], c11[0]),
        lerp(c00[1], c10[1], c01[1], c11[1]),
        lerp(c00[2], c10[2], c01[2], c11[2]),
        cte.OPAQUE,
    )


def bilinear(fx: float, fy: float, source) -> Color:
    """
    Bilinear interpolation at a fractional source coordinate.

    Coordinates are clamped to [0, width-1] x [0, height-1]. At integral
    coordinates the floor and ceil corners coincide and the blend reproduces
    the stored sample.

    Args:
        fx: Source x coordinate
        fy: Source y coordinate
        source: PixelSource to read from

    Returns:
        Color with alpha forced to 255
    """
    x0, x1, y0, y1, dx, dy = _corners(fx, fy, source.width, source.height)
    read = source.read
    return _blend(read(x0, y0), read(x1, y0), read(x0, y1), read(x1, y1), dx, dy)


def gaussian_blur_at(x: int, y: int, source, kernel) -> Color:
    """
    Convolve the kernel around integer coordinate (x, y).

    Taps falling outside the raster count as transparent black, which
    darkens the blurred border slightly. They are skipped rather than read,
    so a kernel of any radius never trips the far out-of-bounds warning.

    Args:
        x: Source column
        y: Source row
        source: PixelSource to read from
        kernel: GaussianKernel

    Returns:
        Color with alpha forced to 255
    """
    read = source.read
    width = source.width
    height = source.height
    r = kernel.radius
    red = green = blue = 0.0
    for ky, row in enumerate(kernel.rows):
        py = y - r + ky
        if py < 0 or py >= height:
            continue
        for kx, weight in enumerate(row):
            px = x - r + kx
            if px < 0 or px >= width:
                continue
            c = read(px, py)
            red += c[0] * weight
            green += c[1] * weight
            blue += c[2] * weight
    return Color(_round(red), _round(green), _round(blue), cte.OPAQUE)


def bilinear_antialiased(fx: float, fy: float, source, kernel) -> Color:
    """
    Bilinear interpolation over Gaussian-blurred corners.

    Same geometry as ``bilinear`` but each of the four corners comes from
    ``gaussian_blur_at`` (blur, then interpolate).

    Args:
        fx: Source x coordinate
        fy: Source y coordinate
        source: PixelSource to read from
        kernel: GaussianKernel

    Returns:
        Color with alpha forced to 255
    """
    x0, x1, y0, y1, dx, dy = _corners(fx, fy, source.width, source.height)
    return _blend(
        gaussian_blur_at(x0, y0, source, kernel),
        gaussian_blur_at(x1, y0, source, kernel),
        gaussian_blur_at(x0, y1, source, kernel),
        gaussian_blur_at(x1, y1, source, kernel),
        dx,
        dy,
    )


__all__ = ["bilinear", "gaussian_blur_at", "bilinear_antialiased"]
