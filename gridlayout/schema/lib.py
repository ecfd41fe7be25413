"""Authoritative Schema Module for responsive grid layouts.

This module is the single source of truth for the layout data model shared by
the normalizer, constraint analyzer, placement and validation modules. It
provides:
- Semantic tag and layout structure enums
- Pydantic models for components, breakpoints, layouts and the schema
- Effective rectangle resolution per breakpoint
- Grid constants and schema factories

Models accept both the camelCase wire names (``canvasLayout``) and the
snake_case attribute names, and dump camelCase with ``by_alias=True``.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from gridlayout.geometry import Rect

SCHEMA_VERSION = "2.0"


class SemanticTag(str, Enum):
    """HTML5 semantic role of a component.

    The role drives placement heuristics: page chrome (header, nav, footer)
    spans the full width, sidebars hug the edges, main fills what is left,
    and content tags are packed into free space.
    """

    HEADER = "header"
    NAV = "nav"
    MAIN = "main"
    ASIDE = "aside"
    FOOTER = "footer"
    SECTION = "section"
    ARTICLE = "article"
    FORM = "form"
    DIV = "div"


class LayoutStructure(str, Enum):
    """Overall arrangement of a breakpoint's layout."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    SIDEBAR_MAIN = "sidebar-main"
    SIDEBAR_MAIN_SIDEBAR = "sidebar-main-sidebar"
    CUSTOM = "custom"


_MODEL_CONFIG = {
    "populate_by_name": True,
    "use_enum_values": True,
}


class Component(BaseModel):
    """A named, placeable piece of the page.

    Attributes:
        id: Unique, stable identifier.
        name: Component name (PascalCase, checked by validation).
        semantic_tag: Semantic role used for placement.
        positioning: CSS positioning hints, opaque to the layout engine.
        layout: Inner layout hints, opaque to the layout engine.
        canvas_layout: Default rectangle used at every breakpoint.
        responsive_canvas_layout: Per-breakpoint rectangle overrides.
    """

    id: str = Field(..., description="Unique component identifier")
    name: str = Field(..., description="PascalCase component name")
    semantic_tag: SemanticTag = Field(
        ..., alias="semanticTag", description="Semantic HTML role"
    )
    positioning: dict[str, Any] = Field(
        default_factory=dict, description="Positioning hints (static, sticky, ...)"
    )
    layout: dict[str, Any] = Field(
        default_factory=dict, description="Inner layout hints (flex, grid, ...)"
    )
    canvas_layout: Rect | None = Field(
        default=None, alias="canvasLayout", description="Default grid rectangle"
    )
    responsive_canvas_layout: dict[str, Rect] | None = Field(
        default=None,
        alias="responsiveCanvasLayout",
        description="Grid rectangle overrides keyed by breakpoint name",
    )

    model_config = {**_MODEL_CONFIG, "extra": "allow"}


class Breakpoint(BaseModel):
    """A viewport range with its own grid.

    Attributes:
        name: Unique breakpoint name (any case or characters).
        min_width: Viewport width in pixels where this breakpoint starts.
        grid_cols: Number of grid columns.
        grid_rows: Number of grid rows.
    """

    name: str = Field(..., description="Unique breakpoint name")
    min_width: int = Field(..., alias="minWidth", description="Minimum viewport width")
    grid_cols: int = Field(..., alias="gridCols", description="Grid column count")
    grid_rows: int = Field(..., alias="gridRows", description="Grid row count")

    model_config = _MODEL_CONFIG


class Layout(BaseModel):
    """Component ordering and roles for one breakpoint.

    ``components`` is DOM order, not spatial order. An explicitly empty list
    means the breakpoint is intentionally empty.
    """

    structure: LayoutStructure = Field(
        default=LayoutStructure.VERTICAL, description="Overall arrangement"
    )
    components: list[str] = Field(
        default_factory=list, description="Component ids in DOM order"
    )
    roles: dict[str, str] | None = Field(
        default=None, description="Role name to component id"
    )
    container_layout: dict[str, Any] | None = Field(
        default=None,
        alias="containerLayout",
        description="Layout hints for the page container",
    )

    model_config = _MODEL_CONFIG


class LayoutSchema(BaseModel):
    """Complete multi-breakpoint page description."""

    schema_version: str = Field(
        default=SCHEMA_VERSION, alias="schemaVersion", description="Schema version"
    )
    components: list[Component] = Field(default_factory=list)
    breakpoints: list[Breakpoint] = Field(default_factory=list)
    layouts: dict[str, Layout] = Field(
        default_factory=dict, description="Layout keyed by breakpoint name"
    )

    model_config = _MODEL_CONFIG

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def get_breakpoint(self, name: str) -> Breakpoint | None:
        """Look up a breakpoint by name."""
        for breakpoint in self.breakpoints:
            if breakpoint.name == name:
                return breakpoint
        return None

    def get_component(self, component_id: str) -> Component | None:
        """Look up a component by id."""
        for component in self.components:
            if component.id == component_id:
                return component
        return None


# =============================================================================
# Grid constants
# =============================================================================


@dataclass(frozen=True)
class GridConstraints:
    """Global bounds on grid dimensions."""

    min_cols: int = 2
    min_rows: int = 2
    max_cols: int = 24
    max_rows: int = 24


@dataclass(frozen=True)
class GridConfig:
    """Default grid for a named breakpoint."""

    min_width: int
    grid_cols: int
    grid_rows: int


GRID_CONSTRAINTS = GridConstraints()

DEFAULT_GRID_CONFIG: dict[str, GridConfig] = {
    "mobile": GridConfig(min_width=0, grid_cols=4, grid_rows=8),
    "tablet": GridConfig(min_width=768, grid_cols=8, grid_rows=8),
    "desktop": GridConfig(min_width=1024, grid_cols=12, grid_rows=8),
}


# =============================================================================
# Lookups
# =============================================================================


def get_effective_rect(component: Component, breakpoint: str) -> Rect | None:
    """Resolve the rectangle a component occupies at a breakpoint.

    Resolution: responsive override for ``breakpoint`` > default canvas
    layout > None (the component has no geometry and is ignored by every
    grid calculation).

    Args:
        component: Component to resolve.
        breakpoint: Breakpoint name.

    Returns:
        The effective rectangle, or None.
    """
    if component.responsive_canvas_layout:
        override = component.responsive_canvas_layout.get(breakpoint)
        if override is not None:
            return override
    return component.canvas_layout


def iter_effective_rects(
    components: Iterable[Component], breakpoint: str
) -> Iterable[tuple[Component, Rect]]:
    """Yield ``(component, rect)`` for components with geometry at a breakpoint."""
    for component in components:
        rect = get_effective_rect(component, breakpoint)
        if rect is not None:
            yield component, rect


def sorted_breakpoints(breakpoints: Iterable[Breakpoint]) -> list[Breakpoint]:
    """Sort breakpoints ascending by ``min_width`` (the cascade order)."""
    return sorted(breakpoints, key=lambda bp: bp.min_width)


def coerce_schema(schema: LayoutSchema | Mapping[str, Any]) -> LayoutSchema:
    """Accept a schema model or a raw mapping and return a model.

    Raises:
        TypeError: If ``schema`` is None or not a mapping/model.
        pydantic.ValidationError: If the mapping is not a well-formed schema.
    """
    if schema is None:
        raise TypeError("schema must not be None")
    if isinstance(schema, LayoutSchema):
        return schema
    if isinstance(schema, Mapping):
        return LayoutSchema.model_validate(dict(schema))
    raise TypeError(f"Expected LayoutSchema or mapping, got {type(schema).__name__}")


# =============================================================================
# Factories
# =============================================================================


def _default_breakpoint(name: str) -> Breakpoint:
    try:
        config = DEFAULT_GRID_CONFIG[name]
    except KeyError:
        known = ", ".join(DEFAULT_GRID_CONFIG)
        raise ValueError(
            f"Unknown default breakpoint '{name}' (known: {known})"
        ) from None
    return Breakpoint(
        name=name,
        min_width=config.min_width,
        grid_cols=config.grid_cols,
        grid_rows=config.grid_rows,
    )


def create_empty_schema() -> LayoutSchema:
    """Create a schema with no components and the default breakpoints.

    Every default breakpoint gets an empty vertical layout.
    """
    return LayoutSchema(
        schema_version=SCHEMA_VERSION,
        components=[],
        breakpoints=[_default_breakpoint(name) for name in DEFAULT_GRID_CONFIG],
        layouts={name: Layout() for name in DEFAULT_GRID_CONFIG},
    )


def create_schema_with_breakpoint(name: str) -> LayoutSchema:
    """Create an empty schema with a single default breakpoint.

    Args:
        name: One of the DEFAULT_GRID_CONFIG names.

    Raises:
        ValueError: If ``name`` is not a default breakpoint.
    """
    return LayoutSchema(
        schema_version=SCHEMA_VERSION,
        components=[],
        breakpoints=[_default_breakpoint(name)],
        layouts={name: Layout()},
    )


_GENERATED_ID = re.compile(r"^c(\d+)$")


def generate_component_id(components: Iterable[Component]) -> str:
    """Generate the next ``c<N>`` id.

    N is one more than the highest numeric suffix among existing ``c<N>``
    ids; custom ids are ignored.

    Example:
        >>> generate_component_id([])
        'c1'
    """
    highest = 0
    for component in components:
        match = _GENERATED_ID.match(component.id)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"c{highest + 1}"


def export_json_schema() -> dict[str, Any]:
    """Export the JSON Schema of LayoutSchema using wire names."""
    return LayoutSchema.model_json_schema(by_alias=True)


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
