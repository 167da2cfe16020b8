"""ImageBuffer — width/height/row-major samples, the container every stage reads and writes."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from contourscope.errors import InvalidInputError


class ImageBuffer:
    """Single-channel integer raster.

    Samples live in a ``height x width`` int32 array. ``data`` is the flat
    row-major view of the same memory, so writes through either are shared.
    Foreground is any positive value, 0 is background.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        data: Sequence[int] | NDArray[np.integer] | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise InvalidInputError(f"Negative image size {width}x{height}")
        if data is None:
            self.pixels = np.zeros((height, width), dtype=np.int32)
            return
        flat = np.asarray(data, dtype=np.int32).ravel()
        if flat.size != width * height:
            raise InvalidInputError(
                f"Expected {width * height} samples for {width}x{height}, got {flat.size}"
            )
        self.pixels = flat.reshape((height, width)).copy()

    @classmethod
    def from_array(cls, grid: NDArray[np.integer]) -> ImageBuffer:
        """Wrap a 2D array (rows = y, cols = x)."""
        grid = np.asarray(grid)
        if grid.ndim != 2:
            raise InvalidInputError(f"Expected a 2D grid, got shape {grid.shape}")
        h, w = grid.shape
        return cls(w, h, grid)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def data(self) -> NDArray[np.int32]:
        return self.pixels.reshape(-1)

    @property
    def size(self) -> int:
        return int(self.pixels.size)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, xy: tuple[int, int]) -> int:
        x, y = xy
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return int(self.pixels[y, x])

    def __setitem__(self, xy: tuple[int, int], value: int) -> None:
        x, y = xy
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        self.pixels[y, x] = value

    def copy(self) -> ImageBuffer:
        return ImageBuffer.from_array(self.pixels)

    def zeros_like(self) -> ImageBuffer:
        return ImageBuffer(self.width, self.height)

    def is_padded(self) -> bool:
        """True when the outermost ring holds only background."""
        if self.width < 3 or self.height < 3:
            return False
        p = self.pixels
        return not (p[0, :].any() or p[-1, :].any() or p[:, 0].any() or p[:, -1].any())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageBuffer):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and bool(np.array_equal(self.pixels, other.pixels))

    def __repr__(self) -> str:
        return f"ImageBuffer(width={self.width}, height={self.height})"
