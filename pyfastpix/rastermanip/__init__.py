"""
Raster manipulation module for PyFastPix.

Provides the per-pixel samplers (bilinear, Gaussian blur, blur-then-
interpolate), the cover-scaling geometry, and the whole-image operations
built on them. The Taichi-backed ``parallel_downscale`` lives in
``pyfastpix.rastermanip.parallel`` and is imported lazily so the pure Python
engine does not pull in Taichi.

Author: B.G.
"""

from .engine import (
    antialiased_downscale,
    antialiased_downscale_fast,
    blur,
    greenify,
    normalize_for_model,
    plain_downscale,
)
from .geometry import CoverGeometry, cover_geometry
from .sampling import bilinear, bilinear_antialiased, gaussian_blur_at

__all__ = [
    "bilinear",
    "gaussian_blur_at",
    "bilinear_antialiased",
    "CoverGeometry",
    "cover_geometry",
    "plain_downscale",
    "blur",
    "antialiased_downscale",
    "antialiased_downscale_fast",
    "normalize_for_model",
    "greenify",
    "parallel_downscale",
    "init_backend",
]


def __getattr__(name):
    if name in ("parallel_downscale", "init_backend"):
        from . import parallel  # lazy, imports taichi

        return getattr(parallel, name)
    raise AttributeError(name)
