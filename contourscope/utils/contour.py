"""Contour extraction — border following (Suzuki-Abe) and Douglas-Peucker polygon approximation."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from contourscope.errors import InvalidInputError
from contourscope.utils.geometry import Point
from contourscope.utils.image import ImageBuffer
from contourscope.utils.math_helpers import CircularSequence

logger = logging.getLogger(__name__)

# 8-neighbour (dx, dy) offsets, counter-clockwise from east in image coordinates
NEIGHBORHOOD: list[tuple[int, int]] = [
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
]

_EAST = 0
_WEST = 4


class ContourKind(enum.Enum):
    OUTER = "outer"
    HOLE = "hole"


@dataclass
class Contour:
    """One traced boundary: ordered points, outer/hole tag, and its label id."""

    points: list[Point] = field(default_factory=list)
    kind: ContourKind = ContourKind.OUTER
    label: int = 0

    @property
    def is_hole(self) -> bool:
        return self.kind is ContourKind.HOLE

    def __len__(self) -> int:
        return len(self.points)


def find_contours(image: ImageBuffer) -> list[Contour]:
    """Trace every outer and hole border of the foreground in ``image``.

    Foreground pixels must be exactly 1 and the image must carry a background
    frame at least one pixel wide. Values above 1 are read as labels left by
    an earlier trace, so binarize grayscale or 0/255 data first. The buffer
    is relabelled in place while tracing: border pixels become the contour's
    label id (or its negative where the border touches background on the
    right), so a pixel is never picked up as a new seed twice. Points are
    reported relative to the interior origin, i.e. pixel (col, row) is
    Point(col - 1, row - 1).
    """
    if image.width < 3 or image.height < 3:
        raise InvalidInputError(
            f"Image {image.width}x{image.height} too small to hold a 1-pixel background frame"
        )
    if not image.is_padded():
        raise InvalidInputError("Foreground touches the image edge; pad with background first")

    src = image.pixels
    contours: list[Contour] = []
    nbd = 1

    for y in range(1, image.height - 1):
        for x in range(1, image.width - 1):
            pix = src[y, x]
            if pix == 0:
                continue

            if pix == 1 and src[y, x - 1] == 0:
                kind = ContourKind.OUTER
            elif pix >= 1 and src[y, x + 1] == 0:
                kind = ContourKind.HOLE
            else:
                continue

            nbd += 1
            contours.append(_border_following(src, x, y, nbd, kind))

    logger.debug(
        "Traced %d contours (%d holes) in %dx%d image",
        len(contours),
        sum(1 for c in contours if c.is_hole),
        image.width,
        image.height,
    )
    return contours


def _border_following(
    src: NDArray[np.int32],
    x0: int,
    y0: int,
    nbd: int,
    kind: ContourKind,
) -> Contour:
    contour = Contour(kind=kind, label=nbd)

    # Clockwise search for the first nonzero neighbour, starting from the
    # background side that made this pixel a seed.
    s_end = _EAST if kind is ContourKind.HOLE else _WEST
    s = s_end
    first: tuple[int, int] | None = None
    for _ in range(len(NEIGHBORHOOD)):
        s = (s - 1) & 7
        dx, dy = NEIGHBORHOOD[s]
        if src[y0 + dy, x0 + dx] != 0:
            first = (x0 + dx, y0 + dy)
            break

    if first is None:
        src[y0, x0] = -nbd
        contour.points.append(Point(x0 - 1, y0 - 1))
        return contour

    x3, y3 = x0, y0
    while True:
        s_end = s
        # Counter-clockwise search starting just past the arrival direction
        while True:
            s += 1
            dx, dy = NEIGHBORHOOD[s & 7]
            x4, y4 = x3 + dx, y3 + dy
            if src[y4, x4] != 0:
                break
        s &= 7

        # Wrapped past east: the right-hand neighbour was examined and is background
        if 0 < s <= s_end:
            src[y3, x3] = -nbd
        elif src[y3, x3] == 1:
            src[y3, x3] = nbd

        contour.points.append(Point(x3 - 1, y3 - 1))

        if (x4, y4) == (x0, y0) and (x3, y3) == first:
            break

        x3, y3 = x4, y4
        s = (s + 4) & 7

    return contour


def approx_poly_dp(contour: Sequence[Point] | Contour, epsilon: float) -> list[Point]:
    """Douglas-Peucker approximation of a closed contour.

    Squared distances throughout. A three-pass farthest-point search picks
    two far-apart vertices and splits the ring into two slices; each slice
    is accepted (its start point emitted) when its farthest point lies
    within ``epsilon`` of the chord, otherwise it is split at that point.
    The result is a subsequence of ``contour`` in ring order.
    """
    if epsilon < 0:
        raise InvalidInputError(f"Epsilon must be non-negative, got {epsilon}")

    points = contour.points if isinstance(contour, Contour) else list(contour)
    n = len(points)
    if n == 0:
        return []

    ring = CircularSequence(points)
    eps2 = epsilon * epsilon

    k = 0
    far = 0
    max_dist = 0
    start_pt = points[0]
    for _ in range(3):
        max_dist = 0
        k = ring.step(k, far)
        start_pt = ring[k]
        k = ring.next_index(k)
        for j in range(1, n):
            pt = ring[k]
            k = ring.next_index(k)
            dx = pt.x - start_pt.x
            dy = pt.y - start_pt.y
            dist = dx * dx + dy * dy
            if dist > max_dist:
                max_dist = dist
                far = j

    if max_dist <= eps2:
        return [start_pt]

    # Slices are (start, end) indices into the unwrapped ring, end may exceed n
    first_start = k
    first_end = far + first_start
    second_start = first_end - n if first_end >= n else first_end
    second_end = first_start
    if second_end < second_start:
        second_end += n

    stack: list[tuple[int, int]] = [(second_start, second_end), (first_start, first_end)]
    poly: list[Point] = []

    while stack:
        start, end = stack.pop()
        end_pt = ring[end]
        start_pt = ring[start]

        split = start
        if end <= start + 1:
            within = True
        else:
            dx = end_pt.x - start_pt.x
            dy = end_pt.y - start_pt.y
            max_cross = 0
            for i in range(start + 1, end):
                pt = ring[i]
                cross = abs((pt.y - start_pt.y) * dx - (pt.x - start_pt.x) * dy)
                if cross > max_cross:
                    max_cross = cross
                    split = i
            within = max_cross * max_cross <= eps2 * (dx * dx + dy * dy)

        if within:
            poly.append(start_pt)
        else:
            stack.append((split, end))
            stack.append((start, split))

    return poly
