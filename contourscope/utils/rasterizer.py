"""Rasterization utilities — camera frame to traceable binary buffer, points back to a grid."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from contourscope.errors import InvalidInputError
from contourscope.utils.geometry import Point
from contourscope.utils.image import ImageBuffer

# ITU-R BT.601 luma weights, the usual RGB -> gray conversion for camera frames
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

# Mid-gray split for 8-bit frames
DEFAULT_THRESHOLD = 128


def to_grayscale(frame: NDArray[np.number]) -> NDArray[np.float64]:
    """HxW, HxWx3 (RGB) or HxWx4 (RGBA) frame to an HxW luminance array."""
    frame = np.asarray(frame)
    if frame.ndim == 2:
        return frame.astype(np.float64)
    if frame.ndim == 3 and frame.shape[2] in (3, 4):
        return frame[:, :, :3].astype(np.float64) @ _LUMA_WEIGHTS
    raise InvalidInputError(f"Unsupported frame shape {frame.shape}")


def binarize(
    gray: NDArray[np.number],
    threshold: float = DEFAULT_THRESHOLD,
    invert: bool = False,
) -> NDArray[np.int32]:
    """Foreground (1) where ``gray >= threshold``; ``invert`` selects dark pixels instead."""
    gray = np.asarray(gray)
    mask = gray < threshold if invert else gray >= threshold
    return mask.astype(np.int32)


def pad_image(image: ImageBuffer, pad: int = 1) -> ImageBuffer:
    """Surround ``image`` with a ``pad``-pixel background frame."""
    if pad < 0:
        raise InvalidInputError(f"Padding must be non-negative, got {pad}")
    return ImageBuffer.from_array(np.pad(image.pixels, pad, mode="constant", constant_values=0))


def image_from_frame(
    frame: NDArray[np.number],
    threshold: float = DEFAULT_THRESHOLD,
    invert: bool = False,
    pad: int = 1,
) -> ImageBuffer:
    """Grayscale, threshold and pad a camera frame so it can be traced."""
    mask = binarize(to_grayscale(frame), threshold, invert)
    return pad_image(ImageBuffer.from_array(mask), pad)


def rasterize_points(
    points: Iterable[Point],
    width: int,
    height: int,
    offset: int = 1,
) -> NDArray[np.int8]:
    """Draw points into a ``height x width`` 0/1 grid.

    ``offset`` shifts interior-origin contour points back to buffer
    coordinates (the tracer reports pixel (col, row) as (col - 1, row - 1)).
    """
    grid = np.zeros((height, width), dtype=np.int8)
    for p in points:
        x, y = p.x + offset, p.y + offset
        if not (0 <= x < width and 0 <= y < height):
            raise InvalidInputError(f"Point {p} falls outside {width}x{height} grid")
        grid[y, x] = 1
    return grid
