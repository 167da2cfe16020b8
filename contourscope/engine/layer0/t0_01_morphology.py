"""T0.01 — Morphological pre-filter.

3x3 erode / dilate / open / close over the source buffer before tracing.
Opening drops single-pixel webcam noise; closing bridges one-pixel gaps.
"""

from __future__ import annotations

from contourscope.engine.context import PipelineContext
from contourscope.engine.registry import Layer, transform
from contourscope.utils.morphology import dilate, erode, morphological_close, morphological_open


@transform(
    id="T0.01",
    layer=Layer.PREPROCESSING,
    description="Apply 3x3 morphological filter",
)
def morphology(ctx: PipelineContext) -> None:
    op = ctx.config.morph_op
    n = ctx.config.morph_iterations

    if op == "erode":
        out = ctx.image
        for _ in range(n):
            out = erode(out)
    elif op == "dilate":
        out = ctx.image
        for _ in range(n):
            out = dilate(out)
    elif op == "open":
        out = morphological_open(ctx.image, n)
    elif op == "close":
        out = morphological_close(ctx.image, n)
    else:
        return

    ctx.filtered = out if out is not ctx.image else ctx.image.copy()
