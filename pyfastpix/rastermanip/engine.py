"""
Whole-image operations for PyFastPix.

Every operation takes a DecodedImage and returns a freshly allocated buffer.
Raster outputs are interleaved RGBA ``bytearray`` objects, row-major, with
alpha forced to 255. ``normalize_for_model`` returns a channel-planar float32
array instead.

Fixed-canvas operations share the cover geometry from ``geometry``; the
same-size operations (blur, greenify) walk the source raster directly.

Author: B.G.
"""

import logging
from functools import partial

import numpy as np

from .. import constants as cte
from ..filters import build_gaussian_kernel
from .geometry import cover_geometry
from .sampling import bilinear, bilinear_antialiased, gaussian_blur_at

logger = logging.getLogger(__name__)


def _scan(source, geometry, sample):
    """Evaluate ``sample(fx, fy, source)`` over the cropped scaled raster."""
    xs = geometry.columns()
    ys = geometry.rows()
    out = bytearray(cte.CHANNELS * geometry.target_width * geometry.target_height)
    i = 0
    for fy in ys:
        for fx in xs:
            c = sample(fx, fy, source)
            out[i] = c[0]
            out[i + 1] = c[1]
            out[i + 2] = c[2]
            out[i + 3] = cte.OPAQUE
            i += 4
    return out


def plain_downscale(image, size=cte.TARGET_SIZE) -> bytearray:
    """
    Cover-scale an image onto a fixed canvas with bilinear sampling.

    Args:
        image: DecodedImage
        size: (width, height) of the output canvas (default: 256x256)

    Returns:
        bytearray: 4 * width * height RGBA bytes

    Example:
        out = plain_downscale(image)
        len(out)  # 262144
    """
    geometry = cover_geometry(image.width, image.height, size)
    logger.debug("plain_downscale %r", geometry)
    return _scan(image.pixels, geometry, bilinear)


def blur(image, sigma=cte.DEFAULT_SIGMA, kernel_size=cte.KERNEL_SIZE) -> bytearray:
    """
    Gaussian-blur every pixel, keeping the image size.

    Args:
        image: DecodedImage
        sigma: Gaussian standard deviation (> 0)
        kernel_size: Odd kernel side length (default: 5)

    Returns:
        bytearray: 4 * image.width * image.height RGBA bytes
    """
    kernel = build_gaussian_kernel(kernel_size, sigma)
    source = image.pixels
    out = bytearray(cte.CHANNELS * image.width * image.height)
    i = 0
    for y in range(image.height):
        for x in range(image.width):
            c = gaussian_blur_at(x, y, source, kernel)
            out[i] = c[0]
            out[i + 1] = c[1]
            out[i + 2] = c[2]
            out[i + 3] = cte.OPAQUE
            i += 4
    return out


def _antialiased(source, image, sigma, size, kernel_size):
    kernel = build_gaussian_kernel(kernel_size, sigma)
    geometry = cover_geometry(image.width, image.height, size)
    logger.debug("antialiased_downscale %r via %r, %r", geometry, source, kernel)
    return _scan(source, geometry, partial(bilinear_antialiased, kernel=kernel))


def antialiased_downscale(
    image, sigma=cte.DEFAULT_SIGMA, size=cte.TARGET_SIZE, kernel_size=cte.KERNEL_SIZE
) -> bytearray:
    """
    Cover-scale with blur-then-interpolate sampling to limit aliasing.

    Reads through the structured (ARGB word) pixel backing.

    Args:
        image: DecodedImage
        sigma: Gaussian standard deviation (> 0)
        size: (width, height) of the output canvas (default: 256x256)
        kernel_size: Odd kernel side length (default: 5)

    Returns:
        bytearray: 4 * width * height RGBA bytes
    """
    return _antialiased(image.structured(), image, sigma, size, kernel_size)


def antialiased_downscale_fast(
    image, sigma=cte.DEFAULT_SIGMA, size=cte.TARGET_SIZE, kernel_size=cte.KERNEL_SIZE
) -> bytearray:
    """
    Same as ``antialiased_downscale`` but reads the raw RGBA byte backing.

    The output is byte-identical to ``antialiased_downscale`` for the same
    image and parameters.
    """
    return _antialiased(image.raw(), image, sigma, size, kernel_size)


def normalize_for_model(image, size=cte.TARGET_SIZE) -> np.ndarray:
    """
    Cover-scale with bilinear sampling into a planar float buffer.

    Args:
        image: DecodedImage
        size: (width, height) of the output canvas (default: 256x256)

    Returns:
        numpy.ndarray: float32 array of 3 * width * height values laid out as
        all red, then all green, then all blue, each in [0, 1]
    """
    geometry = cover_geometry(image.width, image.height, size)
    xs = geometry.columns()
    ys = geometry.rows()
    n = geometry.target_width * geometry.target_height
    planes = np.empty((3, n), dtype=np.float32)
    source = image.pixels
    i = 0
    for fy in ys:
        for fx in xs:
            c = bilinear(fx, fy, source)
            planes[0, i] = c[0] / 255.0
            planes[1, i] = c[1] / 255.0
            planes[2, i] = c[2] / 255.0
            i += 1
    return planes.reshape(-1)


def greenify(image, boost=cte.GREEN_BOOST) -> bytearray:
    """
    Raise the green channel of every pixel, saturating at 255.

    Args:
        image: DecodedImage
        boost: Amount added to green (default: 50)

    Returns:
        bytearray: 4 * image.width * image.height RGBA bytes
    """
    source = image.pixels
    out = bytearray(cte.CHANNELS * image.width * image.height)
    i = 0
    for y in range(image.height):
        for x in range(image.width):
            c = source.read(x, y)
            out[i] = c[0]
            out[i + 1] = min(max(c[1] + boost, 0), 255)
            out[i + 2] = c[2]
            out[i + 3] = cte.OPAQUE
            i += 4
    return out


__all__ = [
    "plain_downscale",
    "blur",
    "antialiased_downscale",
    "antialiased_downscale_fast",
    "normalize_for_model",
    "greenify",
]
