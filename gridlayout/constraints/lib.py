"""Grid constraint analysis for a breakpoint's component set.

Every operation works on effective rectangles (see
``gridlayout.schema.get_effective_rect``). Components without geometry at
the breakpoint do not contribute; that is never an error.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from gridlayout.core import get_logger
from gridlayout.geometry import Rect, bounding_extent, rect_within
from gridlayout.schema import (
    GRID_CONSTRAINTS,
    Component,
    get_effective_rect,
    iter_effective_rects,
)

logger = get_logger("constraints")


@dataclass
class GridSize:
    """Grid dimensions in rows and columns."""

    min_rows: int
    min_cols: int


@dataclass
class AffectedComponent:
    """A component that a grid resize would clip.

    Attributes:
        id: Component id.
        name: Component name.
        current_position: Effective rectangle before the resize.
    """

    id: str
    name: str
    current_position: Rect


@dataclass
class ResizeCheck:
    """Outcome of a prospective grid resize.

    ``reason``, ``affected_components`` and ``minimum_required`` are only
    filled when the resize is unsafe.
    """

    safe: bool
    reason: str | None = None
    affected_components: list[AffectedComponent] = field(default_factory=list)
    minimum_required: GridSize | None = None


@dataclass
class CompactionSuggestion:
    """How many rows and columns could be removed without clipping."""

    can_reduce_rows: int
    can_reduce_cols: int


def calculate_minimum_grid_size(
    components: Iterable[Component], breakpoint: str
) -> GridSize:
    """Get the smallest grid that still contains every component.

    The result never goes below the global minimum grid (2x2), even with no
    contributing components.

    Args:
        components: Components to measure.
        breakpoint: Breakpoint name used to resolve rectangles.

    Returns:
        GridSize: Minimum rows and columns.

    Example:
        >>> calculate_minimum_grid_size([], "mobile")
        GridSize(min_rows=2, min_cols=2)
    """
    max_right, max_bottom = bounding_extent(
        rect for _, rect in iter_effective_rects(components, breakpoint)
    )
    return GridSize(
        min_rows=max(GRID_CONSTRAINTS.min_rows, max_bottom),
        min_cols=max(GRID_CONSTRAINTS.min_cols, max_right),
    )


def _is_clipped(rect: Rect, new_rows: int, new_cols: int) -> bool:
    return rect.right > new_cols or rect.bottom > new_rows


def get_affected_component_ids(
    new_rows: int, new_cols: int, components: Iterable[Component], breakpoint: str
) -> list[str]:
    """List ids of components a resize to ``new_rows x new_cols`` would clip."""
    return [
        component.id
        for component, rect in iter_effective_rects(components, breakpoint)
        if _is_clipped(rect, new_rows, new_cols)
    ]


def is_grid_resize_safe(
    new_rows: int, new_cols: int, components: Iterable[Component], breakpoint: str
) -> ResizeCheck:
    """Check whether resizing the grid would clip any component.

    A component is affected when its right edge exceeds ``new_cols`` or its
    bottom edge exceeds ``new_rows``. Negative origins are not a resize
    concern and are left to validation.

    Args:
        new_rows: Proposed row count.
        new_cols: Proposed column count.
        components: Components placed on the grid.
        breakpoint: Breakpoint name used to resolve rectangles.

    Returns:
        ResizeCheck: ``safe=True`` alone, or the full list of affected
        components with the minimum grid that would keep them.
    """
    components = list(components)
    affected = [
        AffectedComponent(
            id=component.id,
            name=component.name,
            current_position=rect.model_copy(),
        )
        for component, rect in iter_effective_rects(components, breakpoint)
        if _is_clipped(rect, new_rows, new_cols)
    ]

    if not affected:
        return ResizeCheck(safe=True)

    minimum = calculate_minimum_grid_size(components, breakpoint)
    logger.debug(
        f"Resize to {new_rows}x{new_cols} at '{breakpoint}' clips "
        f"{len(affected)} component(s)"
    )
    return ResizeCheck(
        safe=False,
        reason=(
            f"{len(affected)} component(s) would be outside a "
            f"{new_rows}x{new_cols} grid (minimum {minimum.min_rows}x"
            f"{minimum.min_cols})"
        ),
        affected_components=affected,
        minimum_required=minimum,
    )


def suggest_grid_compaction(
    components: Iterable[Component],
    current_rows: int,
    current_cols: int,
    breakpoint: str,
) -> CompactionSuggestion:
    """Suggest how far the grid could shrink without clipping.

    Returns:
        CompactionSuggestion: Removable rows and columns, never negative.
    """
    minimum = calculate_minimum_grid_size(components, breakpoint)
    return CompactionSuggestion(
        can_reduce_rows=max(0, current_rows - minimum.min_rows),
        can_reduce_cols=max(0, current_cols - minimum.min_cols),
    )


def is_component_out_of_bounds(
    component: Component, grid_cols: int, grid_rows: int, breakpoint: str
) -> bool:
    """Check whether a component's effective rectangle leaves the grid.

    A component without geometry at the breakpoint is never out of bounds.
    """
    rect = get_effective_rect(component, breakpoint)
    if rect is None:
        return False
    return not rect_within(rect, grid_cols, grid_rows)


def clamp_grid_size(rows: int, cols: int) -> tuple[int, int]:
    """Bound a requested grid size to the global grid constraints.

    Returns:
        (rows, cols) within 2..24 on each axis.
    """
    return (
        min(max(rows, GRID_CONSTRAINTS.min_rows), GRID_CONSTRAINTS.max_rows),
        min(max(cols, GRID_CONSTRAINTS.min_cols), GRID_CONSTRAINTS.max_cols),
    )


__all__ = [
    "GridSize",
    "AffectedComponent",
    "ResizeCheck",
    "CompactionSuggestion",
    "calculate_minimum_grid_size",
    "get_affected_component_ids",
    "is_grid_resize_safe",
    "suggest_grid_compaction",
    "is_component_out_of_bounds",
    "clamp_grid_size",
]
