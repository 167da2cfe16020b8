"""T2.04 — Bounding-box Area.

Coarse (w + 1) * (h + 1) pixel area of each simplified polygon.
"""

from __future__ import annotations

from contourscope.engine.context import PipelineContext
from contourscope.engine.registry import Layer, transform
from contourscope.utils.geometry import area, bbox


@transform(
    id="T2.04",
    layer=Layer.GEOMETRY,
    dependencies=["T2.01"],
    description="Estimate bounding-box area",
)
def polygon_area(ctx: PipelineContext) -> None:
    for cd in ctx.contours:
        cd.area = area(cd.polygon)
        cd.features["bbox"] = bbox(cd.polygon)
