"""gridlayout: responsive grid layout engine for page component schemas."""

from gridlayout.constraints import (
    calculate_minimum_grid_size,
    is_component_out_of_bounds,
    is_grid_resize_safe,
    suggest_grid_compaction,
)
from gridlayout.geometry import Rect
from gridlayout.normalizer import normalize_schema
from gridlayout.placement import (
    ComponentTemplate,
    calculate_smart_position,
    find_empty_slot,
    get_recommended_size,
)
from gridlayout.schema import (
    Breakpoint,
    Component,
    Layout,
    LayoutSchema,
    SemanticTag,
    create_empty_schema,
    get_effective_rect,
)
from gridlayout.snap import SnapConfig, snap_to_grid
from gridlayout.validation import ValidationResult, is_valid, validate_schema

__version__ = "0.1.0"

__all__ = [
    # Schema
    "Rect",
    "Component",
    "Breakpoint",
    "Layout",
    "LayoutSchema",
    "SemanticTag",
    "create_empty_schema",
    "get_effective_rect",
    # Normalizer
    "normalize_schema",
    # Constraints
    "calculate_minimum_grid_size",
    "is_grid_resize_safe",
    "suggest_grid_compaction",
    "is_component_out_of_bounds",
    # Placement
    "ComponentTemplate",
    "calculate_smart_position",
    "find_empty_slot",
    "get_recommended_size",
    # Snap
    "SnapConfig",
    "snap_to_grid",
    # Validation
    "validate_schema",
    "is_valid",
    "ValidationResult",
]
