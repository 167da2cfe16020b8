"""Tests for 3x3 erode / dilate and their compositions."""

from __future__ import annotations

import numpy as np
import pytest

from contourscope.errors import InvalidInputError
from contourscope.utils.image import ImageBuffer
from contourscope.utils.morphology import (
    apply_kernel,
    boundary_pixels,
    dilate,
    erode,
    morphological_close,
    morphological_open,
)
from tests.conftest import SQUARE, make_image


def test_erode_shrinks_block():
    grid = np.zeros((7, 7), dtype=np.int32)
    grid[2:5, 2:5] = 1
    out = erode(make_image(grid))
    assert int(out.pixels.sum()) == 1
    assert out[3, 3] == 1


def test_dilate_grows_pixel():
    grid = np.zeros((7, 7), dtype=np.int32)
    grid[3, 3] = 1
    out = dilate(make_image(grid))
    assert int(out.pixels.sum()) == 9
    assert np.all(out.pixels[2:5, 2:5] == 1)


def test_border_always_zeroed():
    grid = np.ones((5, 5), dtype=np.int32)
    out = dilate(make_image(grid))
    assert not out.pixels[0, :].any()
    assert not out.pixels[-1, :].any()
    assert not out.pixels[:, 0].any()
    assert not out.pixels[:, -1].any()
    assert np.all(out.pixels[1:4, 1:4] == 1)


def test_destination_takes_source_shape():
    src = ImageBuffer(4, 6)
    dst = ImageBuffer(6, 4, [9] * 24)
    out = apply_kernel(src, dst, np.maximum)
    assert out is dst
    assert (dst.width, dst.height) == (4, 6)
    assert not dst.pixels.any()


def test_destination_size_mismatch():
    with pytest.raises(InvalidInputError):
        erode(ImageBuffer(4, 4), ImageBuffer(3, 3))


def test_source_is_untouched(square_image):
    before = square_image.copy()
    erode(square_image)
    assert square_image == before


def test_custom_reducer_keeps_labels():
    grid = np.zeros((5, 5), dtype=np.int32)
    grid[2, 2] = 3
    out = apply_kernel(make_image(grid), None, np.maximum)
    assert out[1, 1] == 3


def test_open_removes_speck():
    grid = SQUARE.copy()
    grid[1, 7] = 1
    out = morphological_open(make_image(grid))
    assert out[7, 1] == 0
    assert out[4, 4] == 1


def test_close_fills_gap():
    grid = np.zeros((9, 9), dtype=np.int32)
    grid[2:7, 2:7] = 1
    grid[4, 4] = 0
    out = morphological_close(make_image(grid))
    assert out[4, 4] == 1


def test_boundary_pixels_of_square(square_image):
    border = boundary_pixels(square_image)
    assert len(border) == 16
    assert (4, 4) not in border
    assert (2, 2) in border
