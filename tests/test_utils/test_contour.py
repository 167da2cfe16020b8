"""Tests for border following."""

from __future__ import annotations

import numpy as np
import pytest

from contourscope.errors import InvalidInputError
from contourscope.utils.contour import ContourKind, find_contours
from contourscope.utils.geometry import Point
from contourscope.utils.image import ImageBuffer
from contourscope.utils.morphology import boundary_pixels
from contourscope.utils.rasterizer import rasterize_points
from tests.conftest import DISK, RING, SQUARE, TWO_BLOBS, make_image


def _traced_set(contour) -> set[tuple[int, int]]:
    return {(p.x + 1, p.y + 1) for p in contour.points}


def test_isolated_pixel(isolated_image):
    contours = find_contours(isolated_image)
    assert len(contours) == 1
    assert contours[0].points == [Point(1, 1)]
    assert contours[0].kind is ContourKind.OUTER
    # Marked negative immediately
    assert isolated_image[2, 2] == -contours[0].label


@pytest.mark.parametrize("grid", [SQUARE, DISK], ids=["square", "disk"])
def test_single_blob_traces_its_boundary(grid):
    image = make_image(grid)
    expected = boundary_pixels(make_image(grid))
    contours = find_contours(image)

    assert len(contours) == 1
    assert contours[0].kind is ContourKind.OUTER
    assert _traced_set(contours[0]) == expected


def test_rasterized_contour_matches_boundary(square_image):
    expected = boundary_pixels(make_image(SQUARE))
    contour = find_contours(square_image)[0]
    grid = rasterize_points(contour.points, square_image.width, square_image.height)
    ys, xs = np.nonzero(grid)
    assert {(int(x), int(y)) for x, y in zip(xs, ys)} == expected


def test_square_contour_order(square_image):
    contour = find_contours(square_image)[0]
    assert len(contour) == 16
    assert contour.points[0] == Point(1, 1)
    # Consecutive points are 8-neighbours
    for a, b in zip(contour.points, contour.points[1:] + contour.points[:1]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


def test_ring_has_outer_and_hole(ring_image):
    contours = find_contours(ring_image)
    kinds = sorted(c.kind.value for c in contours)
    assert kinds == ["hole", "outer"]

    hole = next(c for c in contours if c.is_hole)
    # Hole border is the inner ring of pixels around the 3x3 gap
    assert _traced_set(hole) == {
        (x, y) for x in range(3, 8) for y in range(3, 8)
    } - {(x, y) for x in range(4, 7) for y in range(4, 7)} - {(3, 3), (7, 3), (3, 7), (7, 7)}


def test_two_blobs_get_distinct_labels():
    image = make_image(TWO_BLOBS)
    contours = find_contours(image)
    assert len(contours) == 2
    assert contours[0].label != contours[1].label
    assert all(not c.is_hole for c in contours)


def test_labels_written_into_buffer(square_image):
    contour = find_contours(square_image)[0]
    for x, y in _traced_set(contour):
        assert abs(square_image[x, y]) == contour.label
    # Interior untouched
    assert square_image[4, 4] == 1


def test_dimensions_unchanged(disk_image):
    find_contours(disk_image)
    assert (disk_image.width, disk_image.height) == (15, 15)


def test_second_pass_finds_no_new_seeds(square_image):
    find_contours(square_image)
    assert find_contours(square_image) == []


def test_empty_image_has_no_contours():
    assert find_contours(ImageBuffer(6, 6)) == []


def test_unpadded_image_rejected():
    grid = np.zeros((5, 5), dtype=np.int32)
    grid[0, 2] = 1
    with pytest.raises(InvalidInputError):
        find_contours(make_image(grid))


def test_undersized_image_rejected():
    with pytest.raises(InvalidInputError):
        find_contours(ImageBuffer(2, 2))
