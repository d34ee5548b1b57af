"""
Command Line Interface for PyFastPix

Command line utilities for the resampling engine, usable without writing
Python scripts.

Available Commands:
- image_downscale: Cover-scale onto a fixed canvas (pfp-downscale)
- image_blur: Full-size Gaussian blur (pfp-blur)
- image_antialias: Antialiased downscale (pfp-antialias)
- image_greenify: Green channel boost (pfp-greenify)
- image_normalize: Planar float32 model input (pfp-normalize)

Author: B.G.
"""

_CLI_SUBMODULES = {
    "image_downscale": (".image_commands", "image_downscale"),
    "image_blur": (".image_commands", "image_blur"),
    "image_antialias": (".image_commands", "image_antialias"),
    "image_greenify": (".image_commands", "image_greenify"),
    "image_normalize": (".image_commands", "image_normalize"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
