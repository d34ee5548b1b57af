"""
PyFastPix: bilinear and Gaussian image resampling.

Takes a decoded RGBA raster and produces a new raster through bilinear
interpolation, optionally antialiased by blurring the interpolation corners,
plus a planar float conversion for numeric consumers.

Submodules:
- pixels: Color, pixel sources (structured and raw) and DecodedImage
- filters: Gaussian kernel builder
- rastermanip: samplers, cover geometry, whole-image operations,
  Taichi parallel scan
- io: Pillow decode/encode collaborators
- diagnostics: phase timing observers
- pipeline: bytes -> decode -> process -> encode flows
- visu: matplotlib comparison figures (lazy)
- cli: command line interface (lazy)

Usage:
    import pyfastpix as pf

    image = pf.io.load_image("photo.jpg")
    rgba = pf.rastermanip.antialiased_downscale(image, sigma=2.0)
    pf.io.save_png(rgba, 256, 256, "small.png")

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import errors
from . import pixels
from . import filters
from . import rastermanip
from . import io
from . import diagnostics
from . import pipeline

__all__ = [
    "constants",
    "errors",
    "pixels",
    "filters",
    "rastermanip",
    "io",
    "diagnostics",
    "pipeline",
    "visu",
    "cli",
]


def __getattr__(name):
    if name in ("visu", "cli"):
        import importlib

        mod = importlib.import_module(f".{name}", __name__)
        globals()[name] = mod
        return mod
    raise AttributeError(name)
