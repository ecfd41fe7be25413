"""Smart placement of new components on a breakpoint grid.

This module provides:
- Component templates for insertion
- Role-aware smart positioning
- Row-major empty slot search
- Recommended sizes per semantic tag

Example usage:
    >>> from gridlayout.placement import find_empty_slot
    >>> find_empty_slot([], 12, 8, "desktop", 2, 2)
    Rect(x=0, y=0, width=2, height=2)
"""

from .lib import (
    ComponentTemplate,
    Size,
    TemplateCategory,
    calculate_smart_position,
    find_empty_slot,
    get_recommended_size,
    instantiate_template,
)

__all__ = [
    "TemplateCategory",
    "ComponentTemplate",
    "Size",
    "get_recommended_size",
    "find_empty_slot",
    "calculate_smart_position",
    "instantiate_template",
]
