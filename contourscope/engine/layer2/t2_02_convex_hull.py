"""T2.02 — Convex Hull & Convexity. ★★

Melkman hull over the traced contour points.
Convexity ratio = contour area / hull area. Square: 1.0, "U" shape: ~0.6.
"""

from __future__ import annotations

from shapely.geometry import Polygon

from contourscope.engine.context import PipelineContext
from contourscope.engine.registry import Layer, transform
from contourscope.utils.geometry import convex_hull as melkman_hull


@transform(
    id="T2.02",
    layer=Layer.GEOMETRY,
    dependencies=["T1.01"],
    description="Compute convex hull and convexity ratio",
)
def convex_hull(ctx: PipelineContext) -> None:
    for cd in ctx.contours:
        if len(cd.points) < 3:
            cd.hull = []
            cd.features["hull_vertices"] = 0
            cd.features["convexity"] = 0.0
            cd.features["hull_area"] = 0.0
            continue

        cd.hull = melkman_hull(cd.points)
        # Closed ring: last vertex repeats the first
        cd.features["hull_vertices"] = len(cd.hull) - 1

        try:
            hull_area = float(Polygon(cd.hull).area)
            shape = Polygon(cd.points)
            if not shape.is_valid:
                shape = shape.buffer(0)

            if hull_area > 1e-10:
                cd.features["convexity"] = round(min(float(shape.area) / hull_area, 1.0), 4)
            else:
                cd.features["convexity"] = 0.0

            cd.features["hull_area"] = round(hull_area, 2)
        except Exception:
            cd.features["convexity"] = 0.0
            cd.features["hull_area"] = 0.0
