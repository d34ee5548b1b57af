"""
Image I/O for PyFastPix.

Available Functions:
- decode: Compressed bytes -> DecodedImage
- encode: RGBA buffer -> PNG bytes
- load_image: File path -> DecodedImage
- save_png: RGBA buffer -> PNG file

Author: B.G.
"""

from .codec import decode, encode, load_image, save_png

__all__ = ["decode", "encode", "load_image", "save_png"]
