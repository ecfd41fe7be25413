"""Rectangle and interval math on the integer layout grid.

Rectangles are expressed in grid cells. A rectangle covers the half-open
ranges ``[x, x + width)`` and ``[y, y + height)``, so two rectangles that
share only an edge do not intersect.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """Axis-aligned rectangle on the layout grid.

    Negative coordinates and zero sizes are representable; they are
    reported by validation rather than rejected here.

    Attributes:
        x: Left column index.
        y: Top row index.
        width: Number of columns spanned.
        height: Number of rows spanned.
    """

    x: int = Field(..., description="Left column index")
    y: int = Field(..., description="Top row index")
    width: int = Field(..., description="Columns spanned")
    height: int = Field(..., description="Rows spanned")

    @property
    def right(self) -> int:
        """Exclusive right edge (``x + width``)."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge (``y + height``)."""
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """True when either dimension is zero or negative."""
        return self.width <= 0 or self.height <= 0


def intervals_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Check whether half-open intervals ``[a_start, a_end)`` and ``[b_start, b_end)`` overlap."""
    return a_start < b_end and b_start < a_end


def rects_intersect(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles overlap on both axes.

    Touching edges are not an intersection.
    """
    return intervals_overlap(a.x, a.right, b.x, b.right) and intervals_overlap(
        a.y, a.bottom, b.y, b.bottom
    )


def rect_within(rect: Rect, grid_cols: int, grid_rows: int) -> bool:
    """Check whether a rectangle lies fully inside ``[0, cols) x [0, rows)``."""
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.right <= grid_cols
        and rect.bottom <= grid_rows
    )


def bounding_extent(rects: Iterable[Rect]) -> tuple[int, int]:
    """Get the furthest right and bottom edges of a set of rectangles.

    Returns:
        ``(max_right, max_bottom)``; ``(0, 0)`` for no rectangles.
    """
    max_right = 0
    max_bottom = 0
    for rect in rects:
        max_right = max(max_right, rect.right)
        max_bottom = max(max_bottom, rect.bottom)
    return max_right, max_bottom


__all__ = [
    "Rect",
    "bounding_extent",
    "intervals_overlap",
    "rect_within",
    "rects_intersect",
]
