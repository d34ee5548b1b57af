"""
Byte-to-byte image processing flows for PyFastPix.

Each ``process_*`` function decodes compressed image bytes, runs one engine
operation and encodes the result as PNG, reporting the duration of the
decode, process and encode phases to an observer (``log_phase`` by default,
pass ``observer=None`` to disable).

Author: B.G.
"""

from . import constants as cte
from .diagnostics import log_phase, timed_phase
from .io import decode, encode
from .rastermanip import engine


def _run(data, operation, observer, raw=False):
    with timed_phase("decode", observer):
        image = decode(data, raw=raw)
    with timed_phase("process", observer):
        rgba, width, height = operation(image)
    with timed_phase("encode", observer):
        png = encode(rgba, width, height)
    return png


def process_downscale_image(data: bytes, size=cte.TARGET_SIZE, observer=log_phase) -> bytes:
    """Decode, cover-scale onto ``size`` with bilinear sampling, encode as PNG."""
    return _run(data, lambda im: (engine.plain_downscale(im, size=size), *size), observer)


def process_blur_image(
    data: bytes, sigma=cte.DEFAULT_SIGMA, kernel_size=cte.KERNEL_SIZE, observer=log_phase
) -> bytes:
    """Decode, Gaussian-blur at full size, encode as PNG."""
    return _run(
        data,
        lambda im: (engine.blur(im, sigma, kernel_size), im.width, im.height),
        observer,
    )


def process_downscale_antialias(
    data: bytes, sigma=cte.DEFAULT_SIGMA, size=cte.TARGET_SIZE, observer=log_phase
) -> bytes:
    """Decode, cover-scale with blur-then-interpolate sampling, encode as PNG."""
    return _run(
        data,
        lambda im: (engine.antialiased_downscale(im, sigma, size=size), *size),
        observer,
    )


def process_downscale_antialias_fast(
    data: bytes, sigma=cte.DEFAULT_SIGMA, size=cte.TARGET_SIZE, observer=log_phase
) -> bytes:
    """Same output as ``process_downscale_antialias``, reading raw RGBA bytes."""
    return _run(
        data,
        lambda im: (engine.antialiased_downscale_fast(im, sigma, size=size), *size),
        observer,
        raw=True,
    )


def process_downscale_antialias_parallel(
    data: bytes, sigma=cte.DEFAULT_SIGMA, size=cte.TARGET_SIZE, observer=log_phase
) -> bytes:
    """
    Same flow as ``process_downscale_antialias`` on the Taichi kernel.

    Taichi must already be initialised (``rastermanip.parallel.init_backend``).
    Output matches the Python flows to within one level per channel.
    """
    from .rastermanip import parallel

    return _run(
        data,
        lambda im: (parallel.parallel_downscale(im, sigma=sigma, size=size), *size),
        observer,
        raw=True,
    )


def process_greenify_image(data: bytes, boost=cte.GREEN_BOOST, observer=log_phase) -> bytes:
    """Decode, boost the green channel, encode as PNG."""
    return _run(
        data,
        lambda im: (engine.greenify(im, boost), im.width, im.height),
        observer,
    )


def preprocess_for_model(data: bytes, size=cte.TARGET_SIZE, observer=log_phase):
    """
    Decode and turn an image into a planar float32 model input.

    Returns:
        numpy.ndarray: 3 * width * height float32 values (see
        ``engine.normalize_for_model``)
    """
    with timed_phase("decode", observer):
        image = decode(data)
    with timed_phase("process", observer):
        planes = engine.normalize_for_model(image, size=size)
    return planes


__all__ = [
    "process_downscale_image",
    "process_blur_image",
    "process_downscale_antialias",
    "process_downscale_antialias_fast",
    "process_downscale_antialias_parallel",
    "process_greenify_image",
    "preprocess_for_model",
]
