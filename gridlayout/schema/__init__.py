"""Schema module - authoritative source for the grid layout data model.

This module provides:
- Semantic tag and layout structure enums
- Component, Breakpoint, Layout and LayoutSchema models
- Effective rectangle resolution per breakpoint
- Grid constants and schema factories

Example usage:
    >>> from gridlayout.schema import create_empty_schema, get_effective_rect
    >>> schema = create_empty_schema()
    >>> [bp.name for bp in schema.breakpoints]
    ['mobile', 'tablet', 'desktop']
"""

from .lib import (
    DEFAULT_GRID_CONFIG,
    GRID_CONSTRAINTS,
    SCHEMA_VERSION,
    Breakpoint,
    Component,
    GridConfig,
    GridConstraints,
    Layout,
    LayoutSchema,
    LayoutStructure,
    SemanticTag,
    coerce_schema,
    create_empty_schema,
    create_schema_with_breakpoint,
    export_json_schema,
    generate_component_id,
    get_effective_rect,
    iter_effective_rects,
    sorted_breakpoints,
)

__all__ = [
    # Enums
    "SemanticTag",
    "LayoutStructure",
    # Models
    "Component",
    "Breakpoint",
    "Layout",
    "LayoutSchema",
    "SCHEMA_VERSION",
    # Grid constants
    "GridConstraints",
    "GridConfig",
    "GRID_CONSTRAINTS",
    "DEFAULT_GRID_CONFIG",
    # Lookups
    "get_effective_rect",
    "iter_effective_rects",
    "sorted_breakpoints",
    "coerce_schema",
    # Factories
    "create_empty_schema",
    "create_schema_with_breakpoint",
    "generate_component_id",
    "export_json_schema",
]
