"""Unit tests for the Schema module."""

import pytest
from pydantic import ValidationError

from gridlayout.geometry import Rect
from gridlayout.schema import (
    DEFAULT_GRID_CONFIG,
    GRID_CONSTRAINTS,
    Breakpoint,
    Component,
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


class TestModels:
    """Tests for the pydantic data model."""

    @pytest.mark.unit
    def test_component_accepts_wire_names(self):
        component = Component.model_validate(
            {
                "id": "c1",
                "name": "Header",
                "semanticTag": "header",
                "canvasLayout": {"x": 0, "y": 0, "width": 12, "height": 1},
            }
        )
        assert component.semantic_tag == SemanticTag.HEADER
        assert component.canvas_layout == Rect(x=0, y=0, width=12, height=1)
        assert component.responsive_canvas_layout is None

    @pytest.mark.unit
    def test_component_accepts_python_names(self):
        component = Component(
            id="c1",
            name="Header",
            semantic_tag=SemanticTag.HEADER,
            canvas_layout=Rect(x=0, y=0, width=12, height=1),
        )
        assert component.semantic_tag == "header"

    @pytest.mark.unit
    def test_component_preserves_extra_fields(self):
        component = Component.model_validate(
            {
                "id": "c1",
                "name": "Header",
                "semanticTag": "header",
                "props": {"role": "banner"},
            }
        )
        dumped = component.model_dump(by_alias=True)
        assert dumped["props"] == {"role": "banner"}

    @pytest.mark.unit
    def test_unknown_semantic_tag_rejected(self):
        with pytest.raises(ValidationError):
            Component.model_validate({"id": "c1", "name": "X", "semanticTag": "blink"})

    @pytest.mark.unit
    def test_layout_defaults(self):
        layout = Layout()
        assert layout.structure == LayoutStructure.VERTICAL
        assert layout.components == []
        assert layout.roles is None

    @pytest.mark.unit
    def test_schema_to_dict_uses_wire_names(self, github_style_schema):
        data = github_style_schema.to_dict()
        assert data["schemaVersion"] == "2.0"
        assert data["breakpoints"][0]["gridCols"] == 12
        assert data["components"][0]["canvasLayout"]["width"] == 12
        assert data["layouts"]["desktop"]["structure"] == "sidebar-main"
        assert "responsiveCanvasLayout" not in data["components"][0]

    @pytest.mark.unit
    def test_schema_round_trips_through_dict(self, github_style_schema):
        again = LayoutSchema.model_validate(github_style_schema.to_dict())
        assert again == github_style_schema

    @pytest.mark.unit
    def test_lookup_helpers(self, github_style_schema):
        assert github_style_schema.get_breakpoint("desktop").grid_cols == 12
        assert github_style_schema.get_breakpoint("mobile") is None
        assert github_style_schema.get_component("main").name == "MainContent"
        assert github_style_schema.get_component("nope") is None

    @pytest.mark.unit
    def test_export_json_schema(self):
        schema = export_json_schema()
        assert "schemaVersion" in schema["properties"]
        assert "layouts" in schema["properties"]


class TestEffectiveRect:
    """Tests for effective rectangle resolution."""

    @pytest.mark.unit
    def test_responsive_override_wins(self, make_component):
        component = make_component(
            "c1",
            0,
            0,
            12,
            1,
            responsive={"mobile": {"x": 0, "y": 0, "width": 4, "height": 2}},
        )
        assert get_effective_rect(component, "mobile") == Rect(
            x=0, y=0, width=4, height=2
        )

    @pytest.mark.unit
    def test_falls_back_to_canvas_layout(self, make_component):
        component = make_component(
            "c1",
            0,
            0,
            12,
            1,
            responsive={"mobile": {"x": 0, "y": 0, "width": 4, "height": 2}},
        )
        assert get_effective_rect(component, "desktop") == Rect(
            x=0, y=0, width=12, height=1
        )

    @pytest.mark.unit
    def test_no_geometry(self, make_component):
        component = make_component("c1", x=None)
        assert get_effective_rect(component, "desktop") is None

    @pytest.mark.unit
    def test_iter_skips_components_without_geometry(self, make_component):
        components = [make_component("a", 0, 0, 1, 1), make_component("b", x=None)]
        pairs = list(iter_effective_rects(components, "desktop"))
        assert [component.id for component, _ in pairs] == ["a"]


class TestSortedBreakpoints:
    """Tests for cascade ordering."""

    @pytest.mark.unit
    def test_sorts_by_min_width(self, three_breakpoints):
        unsorted = [Breakpoint.model_validate(bp) for bp in reversed(three_breakpoints)]
        names = [bp.name for bp in sorted_breakpoints(unsorted)]
        assert names == ["mobile", "tablet", "desktop"]


class TestCoerceSchema:
    """Tests for schema input coercion."""

    @pytest.mark.unit
    def test_model_passthrough(self, github_style_schema):
        assert coerce_schema(github_style_schema) is github_style_schema

    @pytest.mark.unit
    def test_mapping_is_validated(self, github_style_schema):
        schema = coerce_schema(github_style_schema.to_dict())
        assert isinstance(schema, LayoutSchema)

    @pytest.mark.unit
    def test_none_is_programmer_error(self):
        with pytest.raises(TypeError):
            coerce_schema(None)

    @pytest.mark.unit
    def test_wrong_type(self):
        with pytest.raises(TypeError, match="list"):
            coerce_schema([])


class TestGridConstants:
    """Tests for grid constants."""

    @pytest.mark.unit
    def test_constraint_values(self):
        assert GRID_CONSTRAINTS.min_cols == 2
        assert GRID_CONSTRAINTS.min_rows == 2
        assert GRID_CONSTRAINTS.max_cols == 24
        assert GRID_CONSTRAINTS.max_rows == 24

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "cols", "rows"),
        [("mobile", 4, 8), ("tablet", 8, 8), ("desktop", 12, 8)],
    )
    def test_default_grid_config(self, name, cols, rows):
        assert DEFAULT_GRID_CONFIG[name].grid_cols == cols
        assert DEFAULT_GRID_CONFIG[name].grid_rows == rows


class TestFactories:
    """Tests for schema factories."""

    @pytest.mark.unit
    def test_create_empty_schema(self):
        schema = create_empty_schema()
        assert schema.schema_version == "2.0"
        assert schema.components == []
        assert [bp.name for bp in schema.breakpoints] == ["mobile", "tablet", "desktop"]
        assert [bp.min_width for bp in schema.breakpoints] == [0, 768, 1024]
        for name in ("mobile", "tablet", "desktop"):
            assert schema.layouts[name].structure == "vertical"
            assert schema.layouts[name].components == []

    @pytest.mark.unit
    def test_empty_schema_layouts_are_independent(self):
        schema = create_empty_schema()
        schema.layouts["mobile"].components.append("c1")
        assert schema.layouts["tablet"].components == []

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "min_width", "cols"),
        [("mobile", 0, 4), ("tablet", 768, 8), ("desktop", 1024, 12)],
    )
    def test_create_schema_with_breakpoint(self, name, min_width, cols):
        schema = create_schema_with_breakpoint(name)
        assert len(schema.breakpoints) == 1
        assert schema.breakpoints[0].min_width == min_width
        assert schema.breakpoints[0].grid_cols == cols
        assert list(schema.layouts) == [name]

    @pytest.mark.unit
    def test_create_schema_with_unknown_breakpoint(self):
        with pytest.raises(ValueError, match="Unknown default breakpoint"):
            create_schema_with_breakpoint("watch")


class TestGenerateComponentId:
    """Tests for sequential id generation."""

    @pytest.mark.unit
    def test_first_id(self):
        assert generate_component_id([]) == "c1"

    @pytest.mark.unit
    def test_next_sequential(self, make_component):
        assert generate_component_id([make_component("c1"), make_component("c2")]) == "c3"

    @pytest.mark.unit
    def test_after_highest(self, make_component):
        assert generate_component_id([make_component("c1"), make_component("c5")]) == "c6"

    @pytest.mark.unit
    def test_ignores_custom_ids(self, make_component):
        components = [
            make_component("c1"),
            make_component("custom-header"),
            make_component("c3"),
        ]
        assert generate_component_id(components) == "c4"
