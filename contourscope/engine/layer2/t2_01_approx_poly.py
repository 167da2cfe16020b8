"""T2.01 — Polygon Simplification.

Douglas-Peucker over each closed contour. Epsilon is absolute when set,
else a fraction of the contour's bounding-box diagonal.
"""

from __future__ import annotations

import math

from contourscope.engine.context import PipelineContext
from contourscope.engine.registry import Layer, transform
from contourscope.utils.contour import approx_poly_dp
from contourscope.utils.geometry import bbox


@transform(
    id="T2.01",
    layer=Layer.GEOMETRY,
    dependencies=["T1.01"],
    description="Simplify contours to polygons",
)
def approx_polygons(ctx: PipelineContext) -> None:
    cfg = ctx.config
    for cd in ctx.contours:
        if cfg.approx_epsilon is not None:
            eps = cfg.approx_epsilon
        else:
            xmin, ymin, xmax, ymax = bbox(cd.points)
            eps = cfg.approx_epsilon_pct * math.hypot(xmax - xmin, ymax - ymin)

        cd.polygon = approx_poly_dp(cd.contour, eps)
        cd.features["approx_epsilon"] = round(eps, 3)
        cd.features["polygon_vertices"] = len(cd.polygon)
