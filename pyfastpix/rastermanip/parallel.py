"""
Data-parallel downscaling for PyFastPix.

Runs the cover-scale scan of ``engine.plain_downscale`` and
``engine.antialiased_downscale`` as a Taichi kernel, one thread per
destination pixel, reading straight from the raw RGBA byte buffer. Every
destination pixel depends only on the source and the kernel weights, so the
scan needs no synchronisation.

Arithmetic is float64 and follows the same order as the Python samplers, but
the compiled backend may still differ by one level on a rounding boundary.

Author: B.G.
"""

import logging

import numpy as np
import taichi as ti

from .. import constants as cte
from ..filters import build_gaussian_kernel
from .geometry import cover_geometry

logger = logging.getLogger(__name__)


def init_backend(arch=None, **kwargs):
    """
    Initialise Taichi for the parallel scan.

    Args:
        arch: Taichi arch (default: ti.cpu)
        **kwargs: Extra options forwarded to ti.init
    """
    options = dict(default_fp=ti.f64, fast_math=False, offline_cache=False)
    options.update(kwargs)
    ti.init(arch=ti.cpu if arch is None else arch, **options)


@ti.func
def _read_rgb(src: ti.template(), x: ti.i32, y: ti.i32, width: ti.i32, height: ti.i32):
    rgb = ti.Vector([0.0, 0.0, 0.0], dt=ti.f64)
    if 0 <= x < width and 0 <= y < height:
        base = 4 * (y * width + x)
        rgb = ti.Vector(
            [
                ti.cast(src[base], ti.f64),
                ti.cast(src[base + 1], ti.f64),
                ti.cast(src[base + 2], ti.f64),
            ],
            dt=ti.f64,
        )
    return rgb


@ti.func
def _blur_at(
    src: ti.template(),
    weights: ti.template(),
    x: ti.i32,
    y: ti.i32,
    width: ti.i32,
    height: ti.i32,
    ksize: ti.i32,
):
    radius = ksize // 2
    acc = ti.Vector([0.0, 0.0, 0.0], dt=ti.f64)
    for ky in range(ksize):
        for kx in range(ksize):
            acc += _read_rgb(src, x - radius + kx, y - radius + ky, width, height) * weights[ky, kx]
    return ti.floor(acc + 0.5)


@ti.func
def _corner(
    src: ti.template(),
    weights: ti.template(),
    x: ti.i32,
    y: ti.i32,
    width: ti.i32,
    height: ti.i32,
    ksize: ti.i32,
    use_blur: ti.i32,
):
    rgb = ti.Vector([0.0, 0.0, 0.0], dt=ti.f64)
    if use_blur:
        rgb = _blur_at(src, weights, x, y, width, height, ksize)
    else:
        rgb = _read_rgb(src, x, y, width, height)
    return rgb


@ti.kernel
def downscale_kernel(
    src: ti.types.ndarray(dtype=ti.u8, ndim=1),
    dst: ti.types.ndarray(dtype=ti.u8, ndim=1),
    weights: ti.types.ndarray(dtype=ti.f64, ndim=2),
    width: ti.i32,
    height: ti.i32,
    out_w: ti.i32,
    out_h: ti.i32,
    scale: ti.f64,
    x_offset: ti.f64,
    y_offset: ti.f64,
    ksize: ti.i32,
    use_blur: ti.i32,
):
    for j, i in ti.ndrange(out_h, out_w):
        fx = ti.min(ti.max((x_offset + i) / scale, 0.0), width - 1.0)
        fy = ti.min(ti.max((y_offset + j) / scale, 0.0), height - 1.0)
        x0 = ti.floor(fx, dtype=ti.i32)
        x1 = ti.ceil(fx, dtype=ti.i32)
        y0 = ti.floor(fy, dtype=ti.i32)
        y1 = ti.ceil(fy, dtype=ti.i32)
        dx = fx - x0
        dy = fy - y0
        dx1 = 1.0 - dx
        dy1 = 1.0 - dy

        c00 = _corner(src, weights, x0, y0, width, height, ksize, use_blur)
        c10 = _corner(src, weights, x1, y0, width, height, ksize, use_blur)
        c01 = _corner(src, weights, x0, y1, width, height, ksize, use_blur)
        c11 = _corner(src, weights, x1, y1, width, height, ksize, use_blur)

        rgb = ti.floor(c00 * dx1 * dy1 + c10 * dx * dy1 + c01 * dx1 * dy + c11 * dx * dy + 0.5)

        o = 4 * (j * out_w + i)
        for c in ti.static(range(3)):
            dst[o + c] = ti.cast(rgb[c], ti.u8)
        dst[o + 3] = ti.cast(255, ti.u8)


def parallel_downscale(
    image, sigma=None, size=cte.TARGET_SIZE, kernel_size=cte.KERNEL_SIZE
) -> bytearray:
    """
    Cover-scale an image onto a fixed canvas with a Taichi kernel.

    Call ``init_backend`` (or ``ti.init``) before the first use.

    Args:
        image: DecodedImage
        sigma: Gaussian standard deviation for blur-then-interpolate sampling.
               None gives plain bilinear sampling (default: None)
        size: (width, height) of the output canvas (default: 256x256)
        kernel_size: Odd kernel side length (default: 5)

    Returns:
        bytearray: 4 * width * height RGBA bytes

    Example:
        init_backend()
        out = parallel_downscale(image, sigma=2.0)
    """
    geometry = cover_geometry(image.width, image.height, size)
    if sigma is None:
        weights = np.ones((1, 1), dtype=np.float64)
        use_blur = 0
    else:
        weights = np.array(build_gaussian_kernel(kernel_size, sigma).weights, dtype=np.float64)
        use_blur = 1
    ksize = weights.shape[0]

    # ndarray arguments do not specialise the kernel, so it compiles only once
    src = np.frombuffer(image.raw().to_rgba(), dtype=np.uint8).copy()
    out_w = geometry.target_width
    out_h = geometry.target_height
    dst = np.zeros(cte.CHANNELS * out_w * out_h, dtype=np.uint8)

    logger.debug("parallel_downscale %r blur=%s", geometry, bool(use_blur))
    downscale_kernel(
        src,
        dst,
        weights,
        image.width,
        image.height,
        out_w,
        out_h,
        geometry.scale,
        float(geometry.x_offset),
        float(geometry.y_offset),
        ksize,
        use_blur,
    )
    return bytearray(dst.tobytes())


__all__ = ["init_backend", "parallel_downscale", "downscale_kernel"]
