"""
Test suite for PyFastPix package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for kernels, pixel sources, samplers, geometry and operations
- Integration tests for the byte-to-byte pipelines and the CLI
- Taichi parallel backend tests

Run with: pytest
"""
