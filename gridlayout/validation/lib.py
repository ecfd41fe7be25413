"""Schema validation and static analysis.

This module checks a layout schema before it is accepted, separating
blocking errors from non-blocking warnings. Validation reports problems as
data: it never raises on malformed geometry and never corrects the schema.
"""

import re
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any

from gridlayout.core import get_logger
from gridlayout.geometry import Rect, rect_within, rects_intersect
from gridlayout.schema import (
    SCHEMA_VERSION,
    Breakpoint,
    LayoutSchema,
    LayoutStructure,
    coerce_schema,
    get_effective_rect,
)

logger = get_logger("validation")

PASCAL_CASE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")


@dataclass
class ValidationError:
    """A problem that makes the schema unusable.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable description.
        field: Dotted path of the offending field, if any.
        component_id: Offending component, if any.
        breakpoint: Breakpoint the problem was found at, if any.
    """

    code: str
    message: str
    field: str | None = None
    component_id: str | None = None
    breakpoint: str | None = None


@dataclass
class ValidationWarning:
    """A suspicious but acceptable condition. Same fields as ValidationError."""

    code: str
    message: str
    field: str | None = None
    component_id: str | None = None
    breakpoint: str | None = None


@dataclass
class ValidationResult:
    """Outcome of validating a schema.

    ``valid`` is True exactly when there are no errors; warnings never make
    a schema invalid.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def validate_schema(schema: LayoutSchema | Mapping[str, Any]) -> ValidationResult:
    """Validate a layout schema.

    Performs the following checks:
        - Schema version
        - Components: presence, unique ids, PascalCase names
        - Breakpoints: presence, unique names and widths, non-negative widths
        - Layouts: one per breakpoint, known component references
        - Canvas geometry per breakpoint: negative origins, zero sizes,
          bounds and overlaps
        - Default canvas origin of components no layout lists
        - Structure hints: horizontal direction and sidebar roles

    Args:
        schema: Schema model or raw mapping with wire names.

    Returns:
        ValidationResult: Errors and warnings found.

    Raises:
        TypeError: If ``schema`` is None.
        pydantic.ValidationError: If a raw mapping is not shaped like a schema.

    Example:
        >>> result = validate_schema(schema)
        >>> if not result.valid:
        ...     for e in result.errors:
        ...         print(f"{e.code}: {e.message}")
    """
    if isinstance(schema, Mapping):
        version = schema.get("schemaVersion")
    else:
        version = getattr(schema, "schema_version", None)
    model = coerce_schema(schema)

    result = ValidationResult()
    _check_version(version, result)
    _check_components(model, result)
    _check_breakpoints(model, result)
    _check_layouts(model, result)
    for breakpoint in model.breakpoints:
        _check_canvas(model, breakpoint, result)
    _check_unlisted_canvas(model, result)
    _check_structures(model, result)

    logger.debug(
        f"Validated schema: {len(result.errors)} error(s), "
        f"{len(result.warnings)} warning(s)"
    )
    return result


def is_valid(schema: LayoutSchema | Mapping[str, Any]) -> bool:
    """Check if a schema is valid.

    Convenience function that returns True if no validation errors exist.
    """
    return validate_schema(schema).valid


def _check_version(version: Any, result: ValidationResult) -> None:
    if version != SCHEMA_VERSION:
        result.errors.append(
            ValidationError(
                code="INVALID_VERSION",
                message=f"Schema version must be '{SCHEMA_VERSION}', got {version!r}",
                field="schemaVersion",
            )
        )


def _check_components(schema: LayoutSchema, result: ValidationResult) -> None:
    if not schema.components:
        result.errors.append(
            ValidationError(
                code="NO_COMPONENTS",
                message="Schema must contain at least one component",
                field="components",
            )
        )
        return

    id_counts = Counter(component.id for component in schema.components)
    for component_id, count in id_counts.items():
        if count > 1:
            result.errors.append(
                ValidationError(
                    code="DUPLICATE_COMPONENT_ID",
                    message=f"Duplicate component id '{component_id}' appears {count} times",
                    field="components",
                    component_id=component_id,
                )
            )

    for component in schema.components:
        if not PASCAL_CASE.match(component.name):
            result.errors.append(
                ValidationError(
                    code="INVALID_COMPONENT_NAME",
                    message=f"Component name '{component.name}' must be PascalCase",
                    field="name",
                    component_id=component.id,
                )
            )


def _check_breakpoints(schema: LayoutSchema, result: ValidationResult) -> None:
    if not schema.breakpoints:
        result.errors.append(
            ValidationError(
                code="NO_BREAKPOINTS",
                message="Schema must contain at least one breakpoint",
                field="breakpoints",
            )
        )
        return

    name_counts = Counter(bp.name for bp in schema.breakpoints)
    for name, count in name_counts.items():
        if count > 1:
            result.errors.append(
                ValidationError(
                    code="DUPLICATE_BREAKPOINT_NAME",
                    message=f"Duplicate breakpoint name '{name}'",
                    field="breakpoints",
                    breakpoint=name,
                )
            )

    width_counts = Counter(bp.min_width for bp in schema.breakpoints)
    for min_width, count in width_counts.items():
        if count > 1:
            result.errors.append(
                ValidationError(
                    code="DUPLICATE_BREAKPOINT_MIN_WIDTH",
                    message=f"{count} breakpoints share minWidth {min_width}",
                    field="breakpoints",
                )
            )

    for bp in schema.breakpoints:
        if bp.min_width < 0:
            result.errors.append(
                ValidationError(
                    code="INVALID_MIN_WIDTH",
                    message=f"Breakpoint '{bp.name}' has negative minWidth {bp.min_width}",
                    field="minWidth",
                    breakpoint=bp.name,
                )
            )


def _check_layouts(schema: LayoutSchema, result: ValidationResult) -> None:
    known_ids = {component.id for component in schema.components}

    for bp in schema.breakpoints:
        if bp.name not in schema.layouts:
            result.errors.append(
                ValidationError(
                    code="MISSING_LAYOUT",
                    message=f"No layout defined for breakpoint '{bp.name}'",
                    field=f"layouts.{bp.name}",
                    breakpoint=bp.name,
                )
            )

    for name, layout in schema.layouts.items():
        for component_id in layout.components:
            if component_id not in known_ids:
                result.errors.append(
                    ValidationError(
                        code="UNKNOWN_COMPONENT_REFERENCE",
                        message=(
                            f"Layout '{name}' references unknown component "
                            f"'{component_id}'"
                        ),
                        field=f"layouts.{name}.components",
                        component_id=component_id,
                        breakpoint=name,
                    )
                )


def _check_canvas(
    schema: LayoutSchema, breakpoint: Breakpoint, result: ValidationResult
) -> None:
    """Check the geometry of the components listed in one breakpoint's layout."""
    layout = schema.layouts.get(breakpoint.name)
    if layout is None:
        return

    placed: list[tuple[str, Rect]] = []
    for component_id in dict.fromkeys(layout.components):
        component = schema.get_component(component_id)
        if component is None:
            continue
        rect = get_effective_rect(component, breakpoint.name)
        if rect is None:
            continue

        if rect.x < 0 or rect.y < 0:
            result.errors.append(
                ValidationError(
                    code="CANVAS_NEGATIVE_COORDINATE",
                    message=(
                        f"Component '{component_id}' has negative position "
                        f"({rect.x}, {rect.y}) at '{breakpoint.name}'"
                    ),
                    field="canvasLayout",
                    component_id=component_id,
                    breakpoint=breakpoint.name,
                )
            )
        if rect.is_empty:
            result.warnings.append(
                ValidationWarning(
                    code="CANVAS_ZERO_SIZE",
                    message=(
                        f"Component '{component_id}' has zero size "
                        f"{rect.width}x{rect.height} at '{breakpoint.name}'"
                    ),
                    field="canvasLayout",
                    component_id=component_id,
                    breakpoint=breakpoint.name,
                )
            )
            continue
        if not rect_within(rect, breakpoint.grid_cols, breakpoint.grid_rows):
            result.warnings.append(
                ValidationWarning(
                    code="CANVAS_OUT_OF_BOUNDS",
                    message=(
                        f"Component '{component_id}' exceeds the "
                        f"{breakpoint.grid_cols}x{breakpoint.grid_rows} grid "
                        f"at '{breakpoint.name}'"
                    ),
                    field="canvasLayout",
                    component_id=component_id,
                    breakpoint=breakpoint.name,
                )
            )
        placed.append((component_id, rect))

    for (a_id, a_rect), (b_id, b_rect) in combinations(placed, 2):
        if rects_intersect(a_rect, b_rect):
            result.warnings.append(
                ValidationWarning(
                    code="CANVAS_COMPONENTS_OVERLAP",
                    message=(
                        f"Components '{a_id}' and '{b_id}' overlap "
                        f"at '{breakpoint.name}'"
                    ),
                    component_id=a_id,
                    breakpoint=breakpoint.name,
                )
            )


def _check_unlisted_canvas(schema: LayoutSchema, result: ValidationResult) -> None:
    """Check the default origin of components that no layout lists."""
    listed = {
        component_id
        for layout in schema.layouts.values()
        for component_id in layout.components
    }

    for component in schema.components:
        rect = component.canvas_layout
        if component.id in listed or rect is None:
            continue
        if rect.x < 0 or rect.y < 0:
            result.errors.append(
                ValidationError(
                    code="CANVAS_NEGATIVE_COORDINATE",
                    message=(
                        f"Component '{component.id}' has negative position "
                        f"({rect.x}, {rect.y})"
                    ),
                    field="canvasLayout",
                    component_id=component.id,
                )
            )


def _container_direction(container_layout: dict[str, Any] | None) -> str | None:
    if not container_layout:
        return None
    flex = container_layout.get("flex")
    if isinstance(flex, Mapping) and "direction" in flex:
        return flex["direction"]
    return container_layout.get("direction")


def _check_structures(schema: LayoutSchema, result: ValidationResult) -> None:
    for name, layout in schema.layouts.items():
        if layout.structure == LayoutStructure.HORIZONTAL:
            direction = _container_direction(layout.container_layout)
            if direction is not None and direction != "row":
                result.warnings.append(
                    ValidationWarning(
                        code="HORIZONTAL_STRUCTURE_NOT_ROW",
                        message=(
                            f"Layout '{name}' is horizontal but its container "
                            f"direction is '{direction}'"
                        ),
                        field=f"layouts.{name}.containerLayout",
                        breakpoint=name,
                    )
                )
        if (
            layout.structure
            in (LayoutStructure.SIDEBAR_MAIN, LayoutStructure.SIDEBAR_MAIN_SIDEBAR)
            and not layout.roles
        ):
            result.warnings.append(
                ValidationWarning(
                    code="SIDEBAR_MAIN_WITHOUT_ROLES",
                    message=(
                        f"Layout '{name}' uses "
                        f"{LayoutStructure(layout.structure).value} without roles"
                    ),
                    field=f"layouts.{name}.roles",
                    breakpoint=name,
                )
            )


__all__ = [
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    "validate_schema",
    "is_valid",
]
