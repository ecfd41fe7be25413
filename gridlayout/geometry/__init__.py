"""Grid geometry primitives shared by every layout module."""

from .lib import (
    Rect,
    bounding_extent,
    intervals_overlap,
    rect_within,
    rects_intersect,
)

__all__ = [
    "Rect",
    "bounding_extent",
    "intervals_overlap",
    "rect_within",
    "rects_intersect",
]
