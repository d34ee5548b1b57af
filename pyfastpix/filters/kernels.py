"""
Gaussian convolution kernels for PyFastPix.

The kernel is built once per filtering operation and then only read, so it is
safe to share between any number of pixel evaluations.

Author: B.G.
"""

import math

import numpy as np

from ..errors import InvalidDimensions


class GaussianKernel:
    """
    Normalised square Gaussian kernel.

    Attributes:
        size: Side length (odd)
        radius: size // 2
        sigma: Standard deviation used to build the weights
        weights: Read-only (size, size) float64 array, sums to 1
        rows: Same weights as a tuple of tuples, indexed [ky][kx]
    """

    def __init__(self, weights, sigma: float):
        weights = np.array(weights, dtype=np.float64)
        if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
            raise InvalidDimensions("kernel weights must be a square matrix")
        _check_size(weights.shape[0])
        weights.setflags(write=False)
        self.size = weights.shape[0]
        self.radius = self.size // 2
        self.sigma = float(sigma)
        self.weights = weights
        # Plain floats for the per-pixel loops
        self.rows = tuple(tuple(row) for row in weights.tolist())

    def __repr__(self):
        return f"GaussianKernel(size={self.size}, sigma={self.sigma})"


def _check_size(size):
    if size < 1 or size % 2 == 0:
        raise InvalidDimensions(f"kernel size must be a positive odd integer, got {size}")


def build_gaussian_kernel(size: int, sigma: float) -> GaussianKernel:
    """
    Build a normalised 2D Gaussian kernel.

    Each cell gets ``exp(-(dx^2 + dy^2) / (2 sigma^2)) / (2 pi sigma^2)`` with
    (dx, dy) its offset from the centre cell, then every cell is divided by the
    total so the weights sum to one and a blur keeps the overall brightness.

    Args:
        size: Side length, positive and odd
        sigma: Standard deviation, must be > 0

    Returns:
        GaussianKernel

    Raises:
        InvalidDimensions: If size is not a positive odd integer
        ValueError: If sigma <= 0

    Example:
        kernel = build_gaussian_kernel(5, 1.5)
        kernel.weights.sum()  # 1.0
    """
    _check_size(size)
    if not sigma > 0:
        raise ValueError(f"sigma must be > 0, got {sigma}")

    center = size // 2
    two_sigma_sq = 2.0 * sigma * sigma
    norm = 1.0 / (math.pi * two_sigma_sq)

    weights = np.zeros((size, size), dtype=np.float64)
    total = 0.0
    for y in range(size):
        for x in range(size):
            dx = x - center
            dy = y - center
            g = norm * math.exp(-(dx * dx + dy * dy) / two_sigma_sq)
            weights[y, x] = g
            total += g

    weights /= total
    return GaussianKernel(weights, sigma)


__all__ = ["GaussianKernel", "build_gaussian_kernel"]
