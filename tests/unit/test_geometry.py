"""Unit tests for the cover-scaling geometry."""

import pytest

from pyfastpix.errors import InvalidDimensions
from pyfastpix.rastermanip import cover_geometry


@pytest.mark.unit
def test_wide_image_crops_columns():
    g = cover_geometry(512, 256)
    assert g.scale == 1.0
    assert (g.scaled_width, g.scaled_height) == (512, 256)
    assert (g.x_offset, g.y_offset) == (128, 0)
    cols = g.columns()
    assert len(cols) == 256
    assert cols[0] == 128.0
    assert cols[-1] == 383.0
    assert g.rows() == [float(y) for y in range(256)]


@pytest.mark.unit
def test_odd_excess_gives_half_pixel_offset():
    g = cover_geometry(1000, 600)
    assert g.scaled_height == 256
    assert g.scaled_width == 427
    assert g.x_offset == 85.5
    cols = g.columns()
    assert len(cols) == 256
    assert cols[0] == pytest.approx(85.5 / g.scale)


@pytest.mark.unit
def test_upscale_tall_image():
    g = cover_geometry(10, 20)
    assert g.scale == pytest.approx(25.6)
    assert (g.scaled_width, g.scaled_height) == (256, 512)
    assert g.y_offset == 128
    assert len(g.rows()) == 256
    assert len(g.columns()) == 256


@pytest.mark.unit
@pytest.mark.parametrize(
    "sw,sh",
    [(1, 1), (3, 7), (255, 257), (640, 480), (480, 640), (1920, 1080), (333, 999), (257, 2)],
)
def test_scan_always_covers_target(sw, sh):
    g = cover_geometry(sw, sh)
    assert len(g.columns()) == 256
    assert len(g.rows()) == 256


@pytest.mark.unit
def test_custom_target_size():
    g = cover_geometry(100, 50, size=(20, 10))
    assert g.scale == pytest.approx(0.2)
    assert len(g.columns()) == 20
    assert len(g.rows()) == 10


@pytest.mark.unit
@pytest.mark.parametrize("sw,sh,size", [(0, 10, (256, 256)), (10, 0, (256, 256)), (10, 10, (0, 4))])
def test_zero_dimensions_rejected(sw, sh, size):
    with pytest.raises(InvalidDimensions):
        cover_geometry(sw, sh, size=size)


@pytest.mark.unit
def test_malformed_size_rejected():
    with pytest.raises(InvalidDimensions):
        cover_geometry(10, 10, size=256)
