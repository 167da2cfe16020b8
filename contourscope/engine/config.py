"""Pipeline configuration — controls which stages run and their tolerances."""

from __future__ import annotations

from dataclasses import dataclass

MORPH_OPS = ("none", "erode", "dilate", "open", "close")


@dataclass
class PipelineConfig:
    """Tunables for one pipeline run."""

    # Morphological pre-filter applied before tracing
    morph_op: str = "none"
    morph_iterations: int = 1

    # Polygon simplification. Absolute epsilon wins; otherwise a fraction
    # of each contour's bounding-box diagonal is used.
    approx_epsilon: float | None = None
    approx_epsilon_pct: float = 0.02  # 2% of bbox diagonal

    # Contours with fewer points are dropped after tracing
    min_contour_points: int = 1
    # Keep hole borders in the results
    include_holes: bool = True

    compute_hull: bool = True
    compute_defects: bool = True
    # Defects shallower than this (pixels) are discarded
    min_defect_depth: float = 0.0

    def __post_init__(self) -> None:
        if self.morph_op not in MORPH_OPS:
            raise ValueError(f"Unknown morph_op {self.morph_op!r}, expected one of {MORPH_OPS}")
