"""Tests for frame preparation and point rasterization."""

from __future__ import annotations

import numpy as np
import pytest

from contourscope.errors import InvalidInputError
from contourscope.utils.contour import find_contours
from contourscope.utils.geometry import Point
from contourscope.utils.image import ImageBuffer
from contourscope.utils.rasterizer import (
    binarize,
    image_from_frame,
    pad_image,
    rasterize_points,
    to_grayscale,
)


def test_grayscale_rgba():
    frame = np.zeros((2, 2, 4), dtype=np.uint8)
    frame[0, 0] = [255, 255, 255, 255]
    gray = to_grayscale(frame)
    assert gray.shape == (2, 2)
    assert gray[0, 0] == pytest.approx(255.0)
    assert gray[1, 1] == 0


def test_grayscale_rejects_odd_channels():
    with pytest.raises(InvalidInputError):
        to_grayscale(np.zeros((2, 2, 2)))


def test_binarize_and_invert():
    gray = np.array([[0, 127], [128, 255]])
    assert binarize(gray).tolist() == [[0, 0], [1, 1]]
    assert binarize(gray, invert=True).tolist() == [[1, 1], [0, 0]]


def test_pad_image():
    img = ImageBuffer(2, 2, [1, 1, 1, 1])
    padded = pad_image(img, 2)
    assert (padded.width, padded.height) == (6, 6)
    assert padded.is_padded()
    assert int(padded.pixels.sum()) == 4


def test_frame_to_traceable_image():
    frame = np.zeros((6, 6, 3), dtype=np.uint8)
    frame[0:3, 0:3] = 255  # touches the edge before padding
    image = image_from_frame(frame)
    assert image.is_padded()
    contours = find_contours(image)
    assert len(contours) == 1
    assert contours[0].points[0] == Point(0, 0)


def test_rasterize_points():
    grid = rasterize_points([Point(0, 0), Point(2, 1)], 4, 4)
    assert grid[1, 1] == 1
    assert grid[2, 3] == 1
    assert int(grid.sum()) == 2


def test_rasterize_out_of_range():
    with pytest.raises(InvalidInputError):
        rasterize_points([Point(5, 5)], 4, 4)
