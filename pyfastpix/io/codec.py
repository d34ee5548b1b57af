"""
Decode and encode collaborators for PyFastPix.

Pillow turns compressed bytes (JPEG, PNG, anything it can open) into an RGBA
DecodedImage, and interleaved RGBA buffers back into PNG bytes. Any Pillow
failure fails the whole operation; a partially decoded image is never
resampled.

Author: B.G.
"""

import io
import logging
from pathlib import Path

from PIL import Image

from .. import constants as cte
from ..errors import BufferLengthMismatch, DecodeFailure, EncodeFailure, check_dimensions
from ..pixels import DecodedImage

logger = logging.getLogger(__name__)


def decode(data: bytes, raw: bool = False) -> DecodedImage:
    """
    Decode compressed image bytes into an RGBA DecodedImage.

    Args:
        data: Compressed image bytes
        raw: If True, back the image with the raw byte source instead of the
             structured one (default: False)

    Returns:
        DecodedImage

    Raises:
        DecodeFailure: If Pillow cannot read the bytes
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            rgba_img = img.convert("RGBA")
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeFailure(f"Could not decode image: {e}") from e

    width, height = rgba_img.size
    logger.debug("decoded %dx%d image", width, height)
    return DecodedImage.from_rgba(rgba_img.tobytes(), width, height, raw=raw)


def encode(rgba, width: int, height: int) -> bytes:
    """
    Encode an interleaved RGBA buffer as PNG.

    Args:
        rgba: 4 * width * height bytes, row-major RGBA
        width: Image width
        height: Image height

    Returns:
        bytes: PNG file contents

    Raises:
        InvalidDimensions: If width or height < 1
        BufferLengthMismatch: If the buffer length is not 4 * width * height
        EncodeFailure: If Pillow cannot write the image
    """
    check_dimensions(width, height)
    expected = cte.CHANNELS * width * height
    if len(rgba) != expected:
        raise BufferLengthMismatch(
            f"RGBA buffer holds {len(rgba)} bytes, expected {expected}"
        )
    out = io.BytesIO()
    try:
        Image.frombytes("RGBA", (width, height), bytes(rgba)).save(out, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeFailure(f"Could not encode PNG: {e}") from e
    return out.getvalue()


def load_image(path, raw: bool = False) -> DecodedImage:
    """Read and decode an image file."""
    return decode(Path(path).read_bytes(), raw=raw)


def save_png(rgba, width: int, height: int, path):
    """Encode an RGBA buffer and write it to ``path``."""
    Path(path).write_bytes(encode(rgba, width, height))


__all__ = ["decode", "encode", "load_image", "save_png"]
