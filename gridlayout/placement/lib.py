"""Role-aware placement of new components on a breakpoint grid.

Placement is a dispatch over the closed set of semantic tags. Page chrome
(header, nav, footer) spans the full width, sidebars hug the left or right
edge, main fills the gap between them, and content tags are packed into
the first free slot by a row-major scan.

Every calculation is made against the effective rectangles of the existing
components at the requested breakpoint. Degenerate grids never raise; the
result is a best-effort rectangle that callers may bounds-check.
"""

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from gridlayout.core import get_logger
from gridlayout.geometry import Rect, rects_intersect
from gridlayout.schema import (
    Component,
    SemanticTag,
    generate_component_id,
    iter_effective_rects,
)

logger = get_logger("placement")


class TemplateCategory(str, Enum):
    """Library grouping of component templates."""

    LAYOUT = "layout"
    NAVIGATION = "navigation"
    CONTENT = "content"
    FORM = "form"


class ComponentTemplate(BaseModel):
    """A reusable component body that can be inserted into a schema.

    Attributes:
        id: Template identifier (not a component id).
        name: Human-readable template name.
        description: Short description for pickers.
        category: Library grouping.
        template: Component body in wire form, without an ``id``. Must carry
            a ``semanticTag``.
    """

    id: str = Field(..., description="Template identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Short description")
    category: TemplateCategory = Field(
        default=TemplateCategory.CONTENT, description="Library grouping"
    )
    template: dict[str, Any] = Field(..., description="Component body without id")

    model_config = {"use_enum_values": True}

    @field_validator("template")
    @classmethod
    def _require_semantic_tag(cls, value: dict[str, Any]) -> dict[str, Any]:
        if "id" in value:
            raise ValueError("template body must not carry an 'id'")
        SemanticTag(value.get("semanticTag"))
        return value

    @property
    def semantic_tag(self) -> SemanticTag:
        return SemanticTag(self.template["semanticTag"])

    @property
    def requested_height(self) -> int | None:
        """Height of the template's own canvas layout, if it declares one."""
        canvas = self.template.get("canvasLayout")
        if not canvas:
            return None
        height = canvas.get("height")
        return height if isinstance(height, int) and height >= 1 else None


@dataclass
class Size:
    """Width and height in grid cells."""

    width: int
    height: int


def get_recommended_size(
    semantic_tag: SemanticTag | str, grid_cols: int, grid_rows: int
) -> Size:
    """Get the default size of a component for its semantic role.

    Both dimensions are floor-rounded and at least 1.

    Example:
        >>> get_recommended_size("aside", 12, 8)
        Size(width=3, height=6)
    """
    tall = max(1, grid_rows - 2)

    match SemanticTag(semantic_tag):
        case SemanticTag.HEADER | SemanticTag.FOOTER | SemanticTag.NAV:
            return Size(width=max(1, grid_cols), height=1)
        case SemanticTag.ASIDE:
            return Size(width=max(1, min(3, grid_cols // 4)), height=tall)
        case SemanticTag.MAIN:
            return Size(width=max(1, grid_cols * 3 // 4), height=tall)
        case SemanticTag.SECTION | SemanticTag.ARTICLE:
            return Size(width=max(1, grid_cols // 2), height=max(1, grid_rows // 3))
        case _:
            return Size(width=1, height=1)


def find_empty_slot(
    existing_components: Iterable[Component],
    grid_cols: int,
    grid_rows: int,
    breakpoint: str,
    width: int,
    height: int,
) -> Rect:
    """Find the top-most, then left-most free rectangle of a given size.

    Candidates are scanned row by row. When nothing fits, including when
    the request is larger than the grid, the rectangle is stacked directly
    below the lowest occupied row and may exceed the grid.

    Args:
        existing_components: Components already on the grid.
        grid_cols: Grid column count.
        grid_rows: Grid row count.
        breakpoint: Breakpoint name used to resolve rectangles.
        width: Requested width in cells.
        height: Requested height in cells.

    Returns:
        Rect: The chosen slot.
    """
    occupied = [
        rect for _, rect in iter_effective_rects(existing_components, breakpoint)
    ]
    if not occupied:
        return Rect(x=0, y=0, width=width, height=height)

    for y in range(grid_rows - height + 1):
        for x in range(grid_cols - width + 1):
            candidate = Rect(x=x, y=y, width=width, height=height)
            if not any(rects_intersect(candidate, rect) for rect in occupied):
                return candidate

    lowest = max(rect.bottom for rect in occupied)
    logger.debug(
        f"No free {width}x{height} slot in {grid_cols}x{grid_rows} grid, "
        f"stacking at row {lowest}"
    )
    return Rect(x=0, y=lowest, width=width, height=height)


def _rects_by_tag(
    existing_components: Iterable[Component], breakpoint: str
) -> dict[SemanticTag, list[Rect]]:
    grouped: dict[SemanticTag, list[Rect]] = {}
    for component, rect in iter_effective_rects(existing_components, breakpoint):
        grouped.setdefault(SemanticTag(component.semantic_tag), []).append(rect)
    return grouped


def _bottom_of(rects: list[Rect]) -> int:
    return max((rect.bottom for rect in rects), default=0)


def calculate_smart_position(
    template: ComponentTemplate | SemanticTag | str,
    grid_cols: int,
    grid_rows: int,
    existing_components: Iterable[Component],
    breakpoint: str,
) -> Rect:
    """Calculate where a new component should go based on its role.

    Args:
        template: Template to place, or a bare semantic tag.
        grid_cols: Grid column count at the breakpoint.
        grid_rows: Grid row count at the breakpoint.
        existing_components: Components already placed.
        breakpoint: Breakpoint name used to resolve rectangles.

    Returns:
        Rect: Proposed rectangle for the new component.

    Example:
        >>> calculate_smart_position(SemanticTag.HEADER, 12, 8, [], "desktop")
        Rect(x=0, y=0, width=12, height=1)
    """
    if isinstance(template, ComponentTemplate):
        tag = template.semantic_tag
        requested_height = template.requested_height
    else:
        tag = SemanticTag(template)
        requested_height = None

    existing_components = list(existing_components)
    by_tag = _rects_by_tag(existing_components, breakpoint)
    size = get_recommended_size(tag, grid_cols, grid_rows)
    chrome_height = requested_height or size.height
    top_offset = _bottom_of(
        by_tag.get(SemanticTag.HEADER, []) + by_tag.get(SemanticTag.NAV, [])
    )

    match tag:
        case SemanticTag.HEADER:
            return Rect(x=0, y=0, width=grid_cols, height=chrome_height)

        case SemanticTag.NAV:
            nav_top = _bottom_of(by_tag.get(SemanticTag.HEADER, []))
            return Rect(x=0, y=nav_top, width=grid_cols, height=chrome_height)

        case SemanticTag.FOOTER:
            return Rect(
                x=0, y=max(0, grid_rows - 1), width=grid_cols, height=chrome_height
            )

        case SemanticTag.ASIDE:
            width = max(1, size.width)
            left_taken = any(rect.x == 0 for rect in by_tag.get(SemanticTag.ASIDE, []))
            return Rect(
                x=grid_cols - width if left_taken else 0,
                y=top_offset,
                width=width,
                height=max(1, grid_rows - top_offset - 1),
            )

        case SemanticTag.MAIN:
            asides = by_tag.get(SemanticTag.ASIDE, [])
            left = max((rect.right for rect in asides if rect.x == 0), default=0)
            right = min((rect.x for rect in asides if rect.x > 0), default=grid_cols)
            bottom_offset = 1 if by_tag.get(SemanticTag.FOOTER) else 0
            return Rect(
                x=left,
                y=top_offset,
                width=max(1, right - left),
                height=max(1, grid_rows - top_offset - bottom_offset),
            )

        case _:
            return find_empty_slot(
                existing_components,
                grid_cols,
                grid_rows,
                breakpoint,
                size.width,
                size.height,
            )


def instantiate_template(
    template: ComponentTemplate,
    existing_components: Iterable[Component],
    grid_cols: int,
    grid_rows: int,
    breakpoint: str,
) -> Component:
    """Create a new component from a template at its smart position.

    The component gets the next sequential ``c<N>`` id and the computed
    rectangle as its default canvas layout. Responsive overrides carried by
    the template body are dropped so the new rectangle is effective.
    """
    existing_components = list(existing_components)
    rect = calculate_smart_position(
        template, grid_cols, grid_rows, existing_components, breakpoint
    )

    body = copy.deepcopy(template.template)
    body.pop("responsiveCanvasLayout", None)
    body["id"] = generate_component_id(existing_components)
    body["canvasLayout"] = rect.model_dump()

    component = Component.model_validate(body)
    logger.debug(f"Instantiated template '{template.id}' as {component.id} at {rect}")
    return component


__all__ = [
    "TemplateCategory",
    "ComponentTemplate",
    "Size",
    "get_recommended_size",
    "find_empty_slot",
    "calculate_smart_position",
    "instantiate_template",
]
