"""Schema normalization: sorting and breakpoint inheritance.

Normalization turns a possibly sparse schema into a fully inherited working
copy. Two cascades run over the breakpoints sorted by ``min_width``:

1. Layout cascade. A breakpoint missing from ``layouts`` adopts a copy of the
   last layout seen. A breakpoint present in ``layouts`` keeps its layout,
   even when its component list is empty, and becomes the new last seen.
2. Canvas cascade. Per component, a breakpoint missing from
   ``responsive_canvas_layout`` adopts a copy of the nearest preceding
   rectangle. Present rectangles are never overwritten.

Missing means "inherit"; empty means "intentionally empty".

The result never shares mutable structure with the input.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from gridlayout.core import get_logger
from gridlayout.geometry import Rect
from gridlayout.schema import (
    Breakpoint,
    Component,
    Layout,
    LayoutSchema,
    coerce_schema,
    sorted_breakpoints,
)

logger = get_logger("normalizer")


def cascade_layouts(
    layouts: dict[str, Layout], breakpoints: Sequence[Breakpoint]
) -> list[str]:
    """Fill missing breakpoint layouts in place from their predecessor.

    ``breakpoints`` must already be sorted by ``min_width``. Breakpoints
    before the first defined layout stay missing.

    Args:
        layouts: Layout map to complete. Mutated.
        breakpoints: Breakpoints in cascade order.

    Returns:
        Names of the breakpoints that inherited a layout.
    """
    inherited: list[str] = []
    last_seen: Layout | None = None

    for breakpoint in breakpoints:
        current = layouts.get(breakpoint.name)
        if current is not None:
            last_seen = current
            continue
        if last_seen is None:
            continue
        layouts[breakpoint.name] = last_seen.model_copy(deep=True)
        inherited.append(breakpoint.name)

    return inherited


def cascade_canvas_layouts(
    component: Component, breakpoints: Sequence[Breakpoint]
) -> list[str]:
    """Fill missing responsive rectangles of one component in place.

    Only the responsive map participates: the default ``canvas_layout`` is
    not a cascade source. A component without a responsive map is left
    untouched.

    Args:
        component: Component to complete. Mutated.
        breakpoints: Breakpoints in cascade order.

    Returns:
        Names of the breakpoints that inherited a rectangle.
    """
    responsive = component.responsive_canvas_layout
    if not responsive:
        return []

    inherited: list[str] = []
    last_seen: Rect | None = None

    for breakpoint in breakpoints:
        current = responsive.get(breakpoint.name)
        if current is not None:
            last_seen = current
            continue
        if last_seen is None:
            continue
        responsive[breakpoint.name] = last_seen.model_copy(deep=True)
        inherited.append(breakpoint.name)

    return inherited


def normalize_schema(schema: LayoutSchema | Mapping[str, Any]) -> LayoutSchema:
    """Produce a sorted, fully inherited, independent copy of a schema.

    The input is never mutated. Normalizing an already normalized schema
    returns an equal schema.

    Args:
        schema: Schema model or raw mapping with wire names.

    Returns:
        LayoutSchema: The normalized copy.

    Raises:
        TypeError: If ``schema`` is None.
        pydantic.ValidationError: If a raw mapping is malformed.

    Example:
        >>> normalized = normalize_schema(schema)
        >>> normalized.layouts["desktop"].components
        ['c1', 'c2']
    """
    source = coerce_schema(schema)
    result = source.model_copy(deep=True)

    result.breakpoints = sorted_breakpoints(result.breakpoints)

    inherited_layouts = cascade_layouts(result.layouts, result.breakpoints)
    if inherited_layouts:
        logger.debug(f"Inherited layouts for breakpoints: {inherited_layouts}")

    for component in result.components:
        inherited_rects = cascade_canvas_layouts(component, result.breakpoints)
        if inherited_rects:
            logger.debug(
                f"Component {component.id} inherited canvas layout for: "
                f"{inherited_rects}"
            )

    return result


__all__ = [
    "cascade_canvas_layouts",
    "cascade_layouts",
    "normalize_schema",
]
