"""POST /api/analyze — trace a binary frame and describe its blobs."""

from __future__ import annotations

import json
import time
from collections.abc import Generator

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from contourscope.engine.context import ContourData, PipelineContext
from contourscope.engine.pipeline import create_pipeline
from contourscope.errors import InvalidInputError
from contourscope.models.requests import AnalyzeRequest
from contourscope.models.responses import AnalyzeResponse, ContourResponse, DefectModel, PointModel
from contourscope.utils.geometry import Point
from contourscope.utils.image import ImageBuffer
from contourscope.utils.rasterizer import binarize, pad_image

router = APIRouter()


def _build_image(req: AnalyzeRequest) -> ImageBuffer:
    """Request body → padded binary buffer, or 422."""
    try:
        image = ImageBuffer(req.width, req.height, req.data)
        if req.threshold is not None:
            mask = binarize(image.pixels, req.threshold, req.invert)
        else:
            # Any positive sample is foreground
            mask = binarize(image.pixels, 1)
        image = ImageBuffer.from_array(mask)
        if req.pad:
            image = pad_image(image, req.pad)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    if not image.is_padded():
        raise HTTPException(
            status_code=422,
            detail="Image needs a background frame at least one pixel wide; set 'pad' to add one",
        )
    return image


def _points(points: list[Point]) -> list[PointModel]:
    return [PointModel(x=p.x, y=p.y) for p in points]


def _contour_response(cd: ContourData) -> ContourResponse:
    return ContourResponse(
        label=cd.label,
        kind=cd.contour.kind.value,
        points=_points(cd.points),
        polygon=_points(cd.polygon),
        hull=_points(cd.hull),
        defects=[
            DefectModel(
                start=PointModel(x=d.start.x, y=d.start.y),
                end=PointModel(x=d.end.x, y=d.end.y),
                depth=round(d.depth, 3),
                depth_point=PointModel(x=d.depth_point.x, y=d.depth_point.y),
            )
            for d in cd.defects
        ],
        area=cd.area,
        features=cd.features,
    )


def _response(ctx: PipelineContext, elapsed_ms: float) -> AnalyzeResponse:
    return AnalyzeResponse(
        width=ctx.image.width,
        height=ctx.image.height,
        contours=[_contour_response(cd) for cd in ctx.contours],
        processing_time_ms=round(elapsed_ms, 3),
        transforms_completed=len(ctx.completed_transforms),
        transforms_failed=len(ctx.errors),
        errors=ctx.errors,
    )


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    start = time.perf_counter()
    image = _build_image(req)

    ctx = PipelineContext(image=image)
    create_pipeline(req.options.to_config()).run(ctx)

    return _response(ctx, (time.perf_counter() - start) * 1000)


def _stream_analyze(image: ImageBuffer, req: AnalyzeRequest) -> Generator[str, None, None]:
    """Yield SSE events: one progress event per stage, then the result."""
    start = time.perf_counter()
    ctx = PipelineContext(image=image)
    pipeline = create_pipeline(req.options.to_config())

    for progress in pipeline.run_streaming(ctx):
        yield f"event: progress\ndata: {json.dumps(progress)}\n\n"

    response = _response(ctx, (time.perf_counter() - start) * 1000)
    yield f"event: result\ndata: {response.model_dump_json()}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/analyze/stream")
def analyze_stream(req: AnalyzeRequest) -> StreamingResponse:
    image = _build_image(req)
    return StreamingResponse(_stream_analyze(image, req), media_type="text/event-stream")
