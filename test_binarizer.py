#!/usr/bin/env python3
"""
Tests for raster binarization
"""

import numpy as np
import pytest

from glyph_recognition import Pixel, RasterFormatError, binarize, binarize_buffer


def test_samples_top_left_of_each_block():
    raster = np.zeros((8, 8), dtype=np.uint8)
    raster[0, 4] = 255   # top-left of block (0, 1)
    raster[5, 1] = 255   # inside block (1, 0), not sampled
    raster[4, 4] = 255   # top-left of block (1, 1)

    grid = binarize(raster, scale=4)

    assert grid == [[Pixel.OFF, Pixel.ON], [Pixel.OFF, Pixel.ON]]


def test_gray_outside_sample_points_is_ignored():
    raster = np.full((4, 4), 255, dtype=np.uint8)
    raster[1:, 1:] = 128

    assert binarize(raster, scale=4) == [[Pixel.ON]]


def test_gray_sample_is_rejected():
    raster = np.zeros((8, 8), dtype=np.uint8)
    raster[4, 0] = 17

    with pytest.raises(RasterFormatError) as excinfo:
        binarize(raster, scale=4)

    assert "17" in str(excinfo.value)
    assert "(0, 4)" in str(excinfo.value)


def test_partial_trailing_block_still_produces_cells():
    raster = np.full((5, 9), 255, dtype=np.uint8)

    grid = binarize(raster, scale=4)

    assert len(grid) == 2
    assert all(len(row) == 3 for row in grid)


def test_scale_one_keeps_every_pixel():
    raster = np.array([[0, 255], [255, 0]], dtype=np.uint8)

    assert binarize(raster, scale=1) == [[Pixel.OFF, Pixel.ON], [Pixel.ON, Pixel.OFF]]


def test_non_2d_raster_is_rejected():
    with pytest.raises(RasterFormatError):
        binarize(np.zeros((4, 4, 3), dtype=np.uint8))


@pytest.mark.parametrize("scale", [0, -4])
def test_scale_must_be_positive(scale):
    with pytest.raises(ValueError):
        binarize(np.zeros((4, 4), dtype=np.uint8), scale=scale)


def test_buffer_is_read_row_major():
    samples = bytes([255, 0, 0, 0,
                     0, 0, 0, 255])

    grid = binarize_buffer(samples, width=4, height=2, scale=1)

    assert grid[0][0] is Pixel.ON
    assert grid[1][3] is Pixel.ON
    assert grid[0][3] is Pixel.OFF


def test_buffer_length_must_match_dimensions():
    with pytest.raises(RasterFormatError):
        binarize_buffer(bytes(7), width=4, height=2, scale=1)
