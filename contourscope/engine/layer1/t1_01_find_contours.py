"""T1.01 — Contour Tracing. ★★★ CRITICAL

Suzuki-Abe border following over the (filtered) buffer. One contour per
outer or hole border; the traced buffer is relabelled in place.
"""

from __future__ import annotations

import logging

from contourscope.engine.context import ContourData, PipelineContext
from contourscope.engine.registry import Layer, transform
from contourscope.utils.contour import find_contours

logger = logging.getLogger(__name__)


@transform(
    id="T1.01",
    layer=Layer.TRACING,
    description="Trace outer and hole borders",
)
def trace_contours(ctx: PipelineContext) -> None:
    target = ctx.filtered if ctx.filtered is not None else ctx.image
    traced = find_contours(target)

    cfg = ctx.config
    kept = [
        c
        for c in traced
        if len(c.points) >= cfg.min_contour_points and (cfg.include_holes or not c.is_hole)
    ]
    if len(kept) != len(traced):
        logger.debug("Dropped %d of %d contours", len(traced) - len(kept), len(traced))

    ctx.contours = []
    for contour in kept:
        cd = ContourData(contour=contour)
        cd.features["n_points"] = len(contour.points)
        cd.features["kind"] = contour.kind.value
        ctx.contours.append(cd)
