"""
Pytest configuration and fixtures for PyFastPix test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import io
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "slow", "gpu", "importtest"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark Taichi tests
        if "gpu" in item.keywords or "taichi" in str(item.function).lower():
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


class ImageFactory:
    """Helper class for building synthetic test images."""

    @staticmethod
    def gradient(width=40, height=30):
        """Smooth RGB gradient with a constant blue channel."""
        x = np.linspace(0, 255, width)
        y = np.linspace(0, 255, height)
        X, Y = np.meshgrid(x, y)
        rgb = np.stack([X, Y, np.full_like(X, 96.0)], axis=2)
        return np.round(rgb).astype(np.uint8)

    @staticmethod
    def noise(width=24, height=18, seed=42):
        """Random RGBA image, including non-opaque alpha."""
        rng = np.random.default_rng(seed)
        return rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)

    @staticmethod
    def checkerboard(width=32, height=32, cell=1):
        """Black/white checkerboard, the worst case for aliasing."""
        yy, xx = np.mgrid[0:height, 0:width]
        on = ((xx // cell + yy // cell) % 2).astype(np.uint8) * 255
        return np.stack([on, on, on], axis=2)

    @staticmethod
    def png_bytes(array):
        """Encode an (H, W, 3|4) uint8 array as PNG bytes."""
        from PIL import Image

        array = np.ascontiguousarray(array, dtype=np.uint8)
        mode = "RGBA" if array.shape[2] == 4 else "RGB"
        buf = io.BytesIO()
        Image.frombytes(mode, (array.shape[1], array.shape[0]), array.tobytes()).save(
            buf, format="PNG"
        )
        return buf.getvalue()


@pytest.fixture
def image_factory():
    """Provide access to synthetic image builders."""
    return ImageFactory()


@pytest.fixture
def quad_image():
    """2x2 image: red, green / blue, yellow (row-major)."""
    from pyfastpix.pixels import DecodedImage

    arr = np.array(
        [[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [255, 255, 0]]], dtype=np.uint8
    )
    return DecodedImage.from_array(arr)


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    try:
        from pyfastpix.rastermanip import parallel

        parallel.init_backend()
        return True
    except Exception:
        pytest.skip("Taichi not available or initialization failed")
