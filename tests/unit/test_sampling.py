"""Unit tests for the bilinear, blur and antialiased samplers."""

import numpy as np
import pytest

from pyfastpix.filters import build_gaussian_kernel
from pyfastpix.pixels import DecodedImage
from pyfastpix.rastermanip import bilinear, bilinear_antialiased, gaussian_blur_at


@pytest.mark.unit
def test_bilinear_center_of_quad(quad_image):
    c = bilinear(0.5, 0.5, quad_image.pixels)
    assert c.red in (127, 128)
    assert c.green in (127, 128)
    assert c.blue in (63, 64)
    assert c.alpha == 255


@pytest.mark.unit
def test_bilinear_rounds_half_away_from_zero(quad_image):
    # 255 * 0.25 * 2 = 127.5 in red and green
    assert bilinear(0.5, 0.5, quad_image.pixels)[:3] == (128, 128, 64)


@pytest.mark.unit
def test_bilinear_along_top_edge(quad_image):
    # red -> green, a quarter of the way
    assert bilinear(0.25, 0.0, quad_image.pixels)[:3] == (191, 64, 0)


@pytest.mark.unit
def test_bilinear_integral_reproduces_source(image_factory):
    image = DecodedImage.from_array(image_factory.noise(9, 6))
    src = image.pixels
    for y in range(6):
        for x in range(9):
            assert bilinear(float(x), float(y), src)[:3] == src.read(x, y)[:3]
            assert bilinear(x, y, src).alpha == 255


@pytest.mark.unit
def test_bilinear_clamps_coordinates(image_factory):
    image = DecodedImage.from_array(image_factory.noise(5, 4))
    src = image.pixels
    assert bilinear(-3.7, 100.0, src)[:3] == src.read(0, 3)[:3]
    assert bilinear(4.9, -0.1, src)[:3] == src.read(4, 0)[:3]


@pytest.mark.unit
def test_bilinear_backing_agnostic(image_factory):
    arr = image_factory.noise(8, 8)
    structured = DecodedImage.from_array(arr).pixels
    raw = DecodedImage.from_array(arr, raw=True).pixels
    for fx, fy in [(0.3, 0.7), (3.5, 2.25), (6.99, 0.01), (7.0, 7.0)]:
        assert bilinear(fx, fy, structured) == bilinear(fx, fy, raw)


@pytest.mark.unit
def test_blur_with_unit_kernel_is_identity(image_factory):
    image = DecodedImage.from_array(image_factory.noise(6, 5))
    kernel = build_gaussian_kernel(1, 1.0)
    for y in range(5):
        for x in range(6):
            assert gaussian_blur_at(x, y, image.pixels, kernel)[:3] == image.pixels.read(x, y)[:3]


@pytest.mark.unit
def test_blur_preserves_uniform_interior():
    arr = np.full((9, 9, 3), (200, 100, 50), dtype=np.uint8)
    image = DecodedImage.from_array(arr)
    kernel = build_gaussian_kernel(5, 1.5)
    assert gaussian_blur_at(4, 4, image.pixels, kernel) == (200, 100, 50, 255)


@pytest.mark.unit
def test_blur_darkens_edges():
    arr = np.full((9, 9, 3), 200, dtype=np.uint8)
    image = DecodedImage.from_array(arr)
    kernel = build_gaussian_kernel(5, 1.5)
    corner = gaussian_blur_at(0, 0, image.pixels, kernel)
    edge = gaussian_blur_at(4, 0, image.pixels, kernel)
    assert corner.red < edge.red < 200
    expected = round(200 * kernel.weights[2:, 2:].sum())
    assert abs(corner.red - expected) <= 1


@pytest.mark.unit
def test_antialiased_with_unit_kernel_matches_bilinear(image_factory):
    image = DecodedImage.from_array(image_factory.noise(7, 7))
    kernel = build_gaussian_kernel(1, 1.0)
    for fx, fy in [(0.5, 0.5), (2.2, 5.9), (6.0, 3.0)]:
        assert bilinear_antialiased(fx, fy, image.pixels, kernel) == bilinear(fx, fy, image.pixels)


@pytest.mark.unit
def test_antialiased_is_blur_then_interpolate(image_factory):
    image = DecodedImage.from_array(image_factory.noise(10, 10))
    src = image.pixels
    kernel = build_gaussian_kernel(5, 1.0)
    # at an integral coordinate only one corner contributes
    assert bilinear_antialiased(3.0, 4.0, src, kernel) == gaussian_blur_at(3, 4, src, kernel)

    fx, fy = 3.25, 4.5
    corners = [
        gaussian_blur_at(3, 4, src, kernel),
        gaussian_blur_at(4, 4, src, kernel),
        gaussian_blur_at(3, 5, src, kernel),
        gaussian_blur_at(4, 5, src, kernel),
    ]
    result = bilinear_antialiased(fx, fy, src, kernel)
    for ch in range(3):
        v = (
            corners[0][ch] * 0.75 * 0.5
            + corners[1][ch] * 0.25 * 0.5
            + corners[2][ch] * 0.75 * 0.5
            + corners[3][ch] * 0.25 * 0.5
        )
        assert abs(result[ch] - v) <= 0.5 + 1e-9
