"""Integration tests for an editing session workflow.

Tests the full editing lifecycle on a multi-breakpoint schema:
1. Start from an empty schema -> normalize
2. Insert templates -> smart placement without overlap
3. Add a responsive override -> canvas inheritance on normalize
4. Check a grid resize -> affected components reported
5. Validate -> schema accepted, warnings only
"""

import pytest

from gridlayout.constraints import (
    calculate_minimum_grid_size,
    is_grid_resize_safe,
    suggest_grid_compaction,
)
from gridlayout.geometry import Rect, rects_intersect
from gridlayout.normalizer import normalize_schema
from gridlayout.placement import ComponentTemplate, instantiate_template
from gridlayout.schema import create_empty_schema, get_effective_rect
from gridlayout.validation import validate_schema


def _template(tag: str, name: str) -> ComponentTemplate:
    return ComponentTemplate(
        id=f"{tag}-standard",
        name=name,
        category="layout",
        template={
            "name": name,
            "semanticTag": tag,
            "positioning": {"type": "static"},
            "layout": {"type": "flex"},
        },
    )


@pytest.fixture
def edited_schema():
    """An empty default schema with header, sidebar, main and footer inserted at desktop."""
    schema = normalize_schema(create_empty_schema())
    desktop = schema.get_breakpoint("desktop")

    for tag, name in [
        ("header", "Header"),
        ("aside", "Sidebar"),
        ("footer", "Footer"),
        ("main", "MainContent"),
    ]:
        component = instantiate_template(
            _template(tag, name),
            schema.components,
            desktop.grid_cols,
            desktop.grid_rows,
            "desktop",
        )
        schema.components.append(component)
        for layout in schema.layouts.values():
            layout.components.append(component.id)

    return schema


@pytest.mark.integration
def test_inserted_components_do_not_overlap(edited_schema):
    """Smart placement tiles the desktop grid."""
    rects = [component.canvas_layout for component in edited_schema.components]
    assert [component.id for component in edited_schema.components] == [
        "c1",
        "c2",
        "c3",
        "c4",
    ]
    for i, a in enumerate(rects):
        for b in rects[i + 1 :]:
            assert not rects_intersect(a, b)

    main = edited_schema.get_component("c4")
    assert main.canvas_layout == Rect(x=3, y=1, width=9, height=6)


@pytest.mark.integration
def test_responsive_override_cascades(edited_schema):
    """A mobile override reaches tablet but not the explicit desktop rectangle."""
    sidebar = edited_schema.get_component("c2")
    sidebar.responsive_canvas_layout = {
        "mobile": Rect(x=0, y=1, width=4, height=2),
        "desktop": sidebar.canvas_layout.model_copy(),
    }

    normalized = normalize_schema(edited_schema)
    sidebar = normalized.get_component("c2")

    assert get_effective_rect(sidebar, "tablet") == Rect(x=0, y=1, width=4, height=2)
    assert get_effective_rect(sidebar, "desktop") == Rect(x=0, y=1, width=3, height=6)
    assert edited_schema.get_component("c2").responsive_canvas_layout.get("tablet") is None


@pytest.mark.integration
def test_resize_analysis(edited_schema):
    """Shrinking the desktop grid clips the footer first."""
    components = edited_schema.components

    assert calculate_minimum_grid_size(components, "desktop").min_rows == 8
    check = is_grid_resize_safe(7, 12, components, "desktop")
    assert check.safe is False
    assert [item.id for item in check.affected_components] == ["c3"]

    suggestion = suggest_grid_compaction(components, 10, 12, "desktop")
    assert suggestion.can_reduce_rows == 2


@pytest.mark.integration
def test_edited_schema_validates(edited_schema):
    """Desktop geometry is clean; narrower grids only produce warnings."""
    result = validate_schema(edited_schema)
    assert result.valid is True
    assert {w.breakpoint for w in result.warnings} <= {"mobile", "tablet"}
    assert all(w.code == "CANVAS_OUT_OF_BOUNDS" for w in result.warnings)
