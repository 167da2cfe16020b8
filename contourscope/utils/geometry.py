"""Leaf-node geometry helpers — orientation, convex hull, convexity defects, area. No engine imports."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from contourscope.errors import InvalidInputError
from contourscope.utils.math_helpers import CircularSequence, majority_increasing


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class ConvexityDefect:
    """Deepest point of a point-set stretch lying inside one hull edge."""

    start: Point
    end: Point
    depth: float
    depth_point: Point


def position(p1: Point, p2: Point, p3: Point) -> int:
    """Signed cross product of (p2 - p1) and (p3 - p1). Positive = CCW turn."""
    return (p2.x - p1.x) * (p3.y - p1.y) - (p3.x - p1.x) * (p2.y - p1.y)


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Melkman's online hull over a simple polyline (e.g. a traced contour).

    The deque always starts and ends with the most recently inserted hull
    vertex, so the returned ring is closed: ``hull[0] == hull[-1]``.
    Walking it front to back turns counter-clockwise (``position`` > 0).
    """
    if len(points) < 3:
        raise InvalidInputError(f"Convex hull needs at least 3 points, got {len(points)}")

    # A polyline that starts along a straight run is seeded with the far end
    # of that run; the points before it lie on the seed edge.
    p0 = points[0]
    i = 2
    while i < len(points) and position(p0, points[i - 1], points[i]) == 0:
        i += 1
    if i == len(points):
        lo, hi = min(points), max(points)
        return [lo, hi, lo]

    p1, p2 = points[i - 1], points[i]
    dq: deque[Point] = deque([p0, p1] if position(p0, p1, p2) > 0 else [p1, p0])
    dq.append(p2)
    dq.appendleft(p2)

    for point in points[i + 1 :]:
        if position(point, dq[0], dq[1]) < 0 or position(dq[-2], dq[-1], point) < 0:
            while len(dq) > 2 and position(dq[-2], dq[-1], point) <= 0:
                dq.pop()
            dq.append(point)
            while len(dq) > 2 and position(point, dq[0], dq[1]) <= 0:
                dq.popleft()
            dq.appendleft(point)

    return list(dq)


def index_point(points: Sequence[Point], point: Point) -> int:
    """Index of the first entry equal to ``point``; ``len(points)`` if absent."""
    for i, p in enumerate(points):
        if p.x == point.x and p.y == point.y:
            return i
    return len(points)


def convexity_defects(points: Sequence[Point], hull: Sequence[Point]) -> list[ConvexityDefect]:
    """Find the deepest dent between each pair of consecutive hull vertices.

    ``hull`` must be made of members of ``points`` (coordinate equality), as
    returned by ``convex_hull``. The walk direction through ``points`` is a
    majority vote on where the first three hull vertices sit.
    """
    if len(hull) < 3:
        raise InvalidInputError(f"Convexity defects need a hull of at least 3 points, got {len(hull)}")

    indices = [index_point(points, h) for h in hull]
    missing = [hull[i] for i, idx in enumerate(indices) if idx == len(points)]
    if missing:
        raise InvalidInputError(f"Hull vertices not found in point set: {missing}")

    ring = CircularSequence(points)
    inc = 1 if majority_increasing(indices[0], indices[1], indices[2]) else -1

    defects: list[ConvexityDefect] = []
    j = indices[0]
    curr = hull[0]
    for nxt in hull[1:]:
        dx0 = nxt.x - curr.x
        dy0 = nxt.y - curr.y
        chord = math.hypot(dx0, dy0)
        depth = 0.0
        depth_point: Point | None = None

        for j in ring.walk(j, inc):
            point = ring[j]
            if point.x == nxt.x and point.y == nxt.y:
                break
            if chord == 0:
                continue
            dist = abs(-dy0 * (point.x - curr.x) + dx0 * (point.y - curr.y)) / chord
            if dist > depth:
                depth = dist
                depth_point = point

        if depth_point is not None:
            defects.append(ConvexityDefect(start=curr, end=nxt, depth=depth, depth_point=depth_point))
        curr = nxt

    return defects


def bbox(points: Sequence[Point]) -> tuple[int, int, int, int]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0, 0, 0, 0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def area(poly: Sequence[Point]) -> int:
    """Bounding-box pixel area ``(xmax - xmin + 1) * (ymax - ymin + 1)``.

    A coarse estimate, not the enclosed polygon area. 0 for an empty polygon.
    """
    if len(poly) == 0:
        return 0
    xmin, ymin, xmax, ymax = bbox(poly)
    return (xmax - xmin + 1) * (ymax - ymin + 1)
