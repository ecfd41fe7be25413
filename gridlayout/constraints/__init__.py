"""Grid constraint analysis: minimum size, resize safety and compaction.

Example usage:
    >>> from gridlayout.constraints import is_grid_resize_safe
    >>> check = is_grid_resize_safe(10, 12, components, "desktop")
    >>> check.safe
    False
"""

from .lib import (
    AffectedComponent,
    CompactionSuggestion,
    GridSize,
    ResizeCheck,
    calculate_minimum_grid_size,
    clamp_grid_size,
    get_affected_component_ids,
    is_component_out_of_bounds,
    is_grid_resize_safe,
    suggest_grid_compaction,
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
