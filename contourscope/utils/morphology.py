"""Morphological operations — 3x3 erode/dilate over an ImageBuffer."""

from __future__ import annotations

import functools
from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from contourscope.errors import InvalidInputError
from contourscope.utils.image import ImageBuffer

Reducer = Callable[[NDArray[np.int32], NDArray[np.int32]], NDArray[np.int32]]

# 8-neighbour offsets (dx, dy) around the centre pixel
_KERNEL_OFFSETS = [(-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1)]


def apply_kernel(src: ImageBuffer, dst: ImageBuffer | None, reducer: Reducer) -> ImageBuffer:
    """Fold ``reducer`` over each interior pixel and its 8 neighbours.

    The 1-pixel frame of ``dst`` is always zeroed. ``dst`` takes the width and
    height of ``src`` and its samples are fully overwritten. When ``dst`` is
    None a new buffer is allocated.
    """
    if dst is None:
        dst = src.zeros_like()
    elif dst.size != src.size:
        raise InvalidInputError(
            f"Destination holds {dst.size} samples, source needs {src.size}"
        )

    h, w = src.height, src.width
    result = np.zeros((h, w), dtype=np.int32)
    if h > 2 and w > 2:
        grid = src.pixels
        centre = grid[1 : h - 1, 1 : w - 1]
        shifted = [grid[1 + dy : h - 1 + dy, 1 + dx : w - 1 + dx] for dx, dy in _KERNEL_OFFSETS]
        result[1 : h - 1, 1 : w - 1] = functools.reduce(reducer, shifted, centre)

    dst.pixels = dst.pixels.reshape((h, w))
    dst.pixels[...] = result
    return dst


def erode(src: ImageBuffer, dst: ImageBuffer | None = None) -> ImageBuffer:
    return apply_kernel(src, dst, np.minimum)


def dilate(src: ImageBuffer, dst: ImageBuffer | None = None) -> ImageBuffer:
    return apply_kernel(src, dst, np.maximum)


def morphological_open(src: ImageBuffer, iterations: int = 1) -> ImageBuffer:
    """Erode then dilate. Removes specks smaller than the 3x3 kernel."""
    out = src
    for _ in range(iterations):
        out = erode(out)
    for _ in range(iterations):
        out = dilate(out)
    return out


def morphological_close(src: ImageBuffer, iterations: int = 1) -> ImageBuffer:
    """Binary morphological close (dilate then erode) to bridge small gaps."""
    out = src
    for _ in range(iterations):
        out = dilate(out)
    for _ in range(iterations):
        out = erode(out)
    return out


def boundary_pixels(src: ImageBuffer) -> set[tuple[int, int]]:
    """Foreground pixels with at least one 4-connected background neighbour.

    Returns (x, y) coordinates. Pixels on the image edge count as boundary.
    """
    fg = src.pixels != 0
    padded = np.pad(fg, 1, mode="constant", constant_values=False)
    interior = padded[:-2, 1:-1] & padded[2:, 1:-1] & padded[1:-1, :-2] & padded[1:-1, 2:]
    ys, xs = np.nonzero(fg & ~interior)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
