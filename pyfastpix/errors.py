"""
Exception types raised by PyFastPix.

Author: B.G.
"""


class InvalidDimensions(ValueError):
    """Zero-sized raster, bad target size or non-positive/even kernel size."""


class BufferLengthMismatch(AssertionError):
    """Raw pixel buffer does not hold exactly 4 * width * height bytes.

    This is a caller contract violation rather than a recoverable error, so it
    derives from AssertionError. It is raised unconditionally, unlike a bare
    ``assert`` statement that disappears under ``python -O``.
    """


class DecodeFailure(RuntimeError):
    """Compressed image bytes could not be turned into a raster."""


class EncodeFailure(RuntimeError):
    """Raster could not be turned into PNG bytes."""


def check_dimensions(width, height, what="image"):
    """Raise InvalidDimensions unless both dimensions are positive integers."""
    if int(width) < 1 or int(height) < 1:
        raise InvalidDimensions(
            f"{what} dimensions must be >= 1, got ({width}, {height})"
        )


__all__ = [
    "InvalidDimensions",
    "BufferLengthMismatch",
    "DecodeFailure",
    "EncodeFailure",
    "check_dimensions",
]
