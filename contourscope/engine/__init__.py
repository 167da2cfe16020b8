"""contourscope staged contour pipeline."""

from contourscope.engine.registry import transform, Layer, get_registry, load_transforms
from contourscope.engine.context import PipelineContext, ContourData
from contourscope.engine.config import PipelineConfig
from contourscope.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "PipelineContext",
    "ContourData",
    "PipelineConfig",
    "Pipeline",
    "create_pipeline",
]
