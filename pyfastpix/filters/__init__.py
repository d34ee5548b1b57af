"""
Filter kernels for PyFastPix.

Available Functions:
- build_gaussian_kernel: Normalised square Gaussian kernel

Author: B.G.
"""

from .kernels import GaussianKernel, build_gaussian_kernel

__all__ = ["GaussianKernel", "build_gaussian_kernel"]
