"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from contourscope.engine.config import PipelineConfig


class AnalyzeOptions(BaseModel):
    morph_op: Literal["none", "erode", "dilate", "open", "close"] = "none"
    morph_iterations: int = Field(default=1, ge=0)
    approx_epsilon: float | None = Field(default=None, ge=0, description="Absolute tolerance in pixels")
    approx_epsilon_pct: float = Field(default=0.02, ge=0, description="Tolerance as a fraction of bbox diagonal")
    min_contour_points: int = Field(default=1, ge=0)
    include_holes: bool = True
    compute_hull: bool = True
    compute_defects: bool = True
    min_defect_depth: float = Field(default=0.0, ge=0)

    def to_config(self) -> PipelineConfig:
        return PipelineConfig(**self.model_dump())


class AnalyzeRequest(BaseModel):
    width: int = Field(..., ge=0, description="Image width in pixels")
    height: int = Field(..., ge=0, description="Image height in pixels")
    data: list[int] = Field(..., description="Row-major samples, width * height long")
    threshold: float | None = Field(
        default=None,
        description="Treat data as grayscale and binarize at this level; otherwise any positive sample is foreground",
    )
    invert: bool = Field(default=False, description="Dark pixels are foreground; only used with threshold")
    pad: int = Field(default=0, ge=0, description="Background frame to add before tracing")
    options: AnalyzeOptions = Field(default_factory=AnalyzeOptions)
