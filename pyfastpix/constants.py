"""
Global constants for PyFastPix.

Single place where the fixed parameters of the resampling engine live.
Every operation accepts keyword overrides; these are only the defaults.

Author: B.G.
"""

# Canvas produced by every fixed-size downscale operation
TARGET_WIDTH = 256
TARGET_HEIGHT = 256
TARGET_SIZE = (TARGET_WIDTH, TARGET_HEIGHT)

# Gaussian blur
KERNEL_SIZE = 5
DEFAULT_SIGMA = 200.0

# Reads further than this outside the raster are reported as unusual
OOB_WARN_MARGIN = 2

# Bytes per pixel of every interleaved buffer (R, G, B, A)
CHANNELS = 4
OPAQUE = 255

# Green channel boost used by the greenify filter
GREEN_BOOST = 50
