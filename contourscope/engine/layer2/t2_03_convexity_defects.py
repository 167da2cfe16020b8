"""T2.03 — Convexity Defects.

Deepest contour point between each pair of consecutive hull vertices.
Defects shallower than ``min_defect_depth`` are dropped.
"""

from __future__ import annotations

import logging

from contourscope.engine.context import PipelineContext
from contourscope.engine.registry import Layer, transform
from contourscope.errors import InvalidInputError
from contourscope.utils.geometry import convexity_defects as find_defects

logger = logging.getLogger(__name__)


@transform(
    id="T2.03",
    layer=Layer.GEOMETRY,
    dependencies=["T2.02"],
    description="Find convexity defects along each hull edge",
)
def convexity_defects(ctx: PipelineContext) -> None:
    min_depth = ctx.config.min_defect_depth
    for cd in ctx.contours:
        cd.defects = []
        if len(cd.hull) >= 3:
            try:
                found = find_defects(cd.points, cd.hull)
            except InvalidInputError as e:
                logger.debug("Contour %d: defects skipped: %s", cd.label, e)
                found = []
            cd.defects = [d for d in found if d.depth > min_depth]

        cd.features["defect_count"] = len(cd.defects)
        cd.features["max_defect_depth"] = round(max((d.depth for d in cd.defects), default=0.0), 3)
