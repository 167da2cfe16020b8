"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from contourscope.utils.image import ImageBuffer


def _grid(h: int, w: int) -> np.ndarray:
    return np.zeros((h, w), dtype=np.int32)


# 9x9 with a solid 5x5 block at cols/rows 2..6
SQUARE = _grid(9, 9)
SQUARE[2:7, 2:7] = 1

# 15x15 digital disk of radius 5 centred on (7, 7)
_yy, _xx = np.mgrid[0:15, 0:15]
DISK = ((_xx - 7) ** 2 + (_yy - 7) ** 2 <= 25).astype(np.int32)

# 11x11 ring: 7x7 block at 2..8 with a 3x3 hole at 4..6
RING = _grid(11, 11)
RING[2:9, 2:9] = 1
RING[4:7, 4:7] = 0

# 11x11 "U": 7x7 block with a notch open at the top (cols 4..6, rows 2..5)
U_SHAPE = _grid(11, 11)
U_SHAPE[2:9, 2:9] = 1
U_SHAPE[2:6, 4:7] = 0

# 5x5 with a single foreground pixel at (2, 2)
ISOLATED = _grid(5, 5)
ISOLATED[2, 2] = 1

# Two separate blobs
TWO_BLOBS = _grid(9, 12)
TWO_BLOBS[2:5, 2:5] = 1
TWO_BLOBS[4:7, 7:10] = 1


def make_image(grid: np.ndarray) -> ImageBuffer:
    """Fresh buffer per call; tracing relabels it in place."""
    return ImageBuffer.from_array(grid)


@pytest.fixture
def square_image() -> ImageBuffer:
    return make_image(SQUARE)


@pytest.fixture
def disk_image() -> ImageBuffer:
    return make_image(DISK)


@pytest.fixture
def ring_image() -> ImageBuffer:
    return make_image(RING)


@pytest.fixture
def u_image() -> ImageBuffer:
    return make_image(U_SHAPE)


@pytest.fixture
def isolated_image() -> ImageBuffer:
    return make_image(ISOLATED)
