"""PipelineContext — the single mutable state object flowing through all stages.

Per-contour results → ContourData
Run metadata → PipelineContext.completed_transforms / errors
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from contourscope.engine.config import PipelineConfig
from contourscope.utils.contour import Contour
from contourscope.utils.geometry import ConvexityDefect, Point
from contourscope.utils.image import ImageBuffer


@dataclass
class ContourData:
    """Everything computed for one traced contour."""

    contour: Contour
    # Simplified polygon (subsequence of contour.points)
    polygon: list[Point] = field(default_factory=list)
    # Closed convex ring, hull[0] == hull[-1]
    hull: list[Point] = field(default_factory=list)
    defects: list[ConvexityDefect] = field(default_factory=list)
    # Bounding-box area of the polygon
    area: int = 0
    features: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> int:
        return self.contour.label

    @property
    def is_hole(self) -> bool:
        return self.contour.is_hole

    @property
    def points(self) -> list[Point]:
        return self.contour.points


@dataclass
class PipelineContext:
    """Shared state flowing through the entire pipeline."""

    # Source buffer; relabelled in place by the tracing stage
    image: ImageBuffer = field(default_factory=ImageBuffer)
    config: PipelineConfig = field(default_factory=PipelineConfig)
    # Buffer actually traced (after the morphological pre-filter)
    filtered: ImageBuffer | None = None
    contours: list[ContourData] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_contours(self) -> int:
        return len(self.contours)

    @property
    def outer_contours(self) -> list[ContourData]:
        return [c for c in self.contours if not c.is_hole]

    @property
    def hole_contours(self) -> list[ContourData]:
        return [c for c in self.contours if c.is_hole]

    def get_contour(self, label: int) -> ContourData | None:
        for cd in self.contours:
            if cd.label == label:
                return cd
        return None
