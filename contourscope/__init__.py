"""contourscope — binary-image contour and polygon geometry."""

from contourscope.errors import InvalidInputError
from contourscope.utils.contour import Contour, ContourKind, approx_poly_dp, find_contours
from contourscope.utils.geometry import (
    ConvexityDefect,
    Point,
    area,
    convex_hull,
    convexity_defects,
    position,
)
from contourscope.utils.image import ImageBuffer
from contourscope.utils.morphology import apply_kernel, dilate, erode

__all__ = [
    "InvalidInputError",
    "ImageBuffer",
    "Point",
    "Contour",
    "ContourKind",
    "ConvexityDefect",
    "apply_kernel",
    "erode",
    "dilate",
    "find_contours",
    "approx_poly_dp",
    "position",
    "convex_hull",
    "convexity_defects",
    "area",
]
