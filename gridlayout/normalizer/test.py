"""Unit tests for schema normalization."""

import pytest

from gridlayout.geometry import Rect
from gridlayout.normalizer import (
    cascade_canvas_layouts,
    cascade_layouts,
    normalize_schema,
)
from gridlayout.schema import Breakpoint, Layout, LayoutSchema


def _schema(breakpoints, layouts, components=None) -> dict:
    return {
        "schemaVersion": "2.0",
        "components": components
        or [{"id": "c1", "name": "Header", "semanticTag": "header"}],
        "breakpoints": breakpoints,
        "layouts": layouts,
    }


def _bp(name: str, min_width: int, cols: int = 12) -> dict:
    return {"name": name, "minWidth": min_width, "gridCols": cols, "gridRows": 8}


class TestLayoutCascade:
    """Tests for layout inheritance across breakpoints."""

    @pytest.mark.unit
    def test_inherits_from_previous_breakpoint(self, three_breakpoints):
        schema = _schema(
            three_breakpoints,
            {"mobile": {"structure": "vertical", "components": ["c1", "c2"]}},
        )
        normalized = normalize_schema(schema)

        assert normalized.layouts["tablet"].structure == "vertical"
        assert normalized.layouts["tablet"].components == ["c1", "c2"]
        assert normalized.layouts["desktop"].components == ["c1", "c2"]

    @pytest.mark.unit
    def test_does_not_overwrite_existing_layout(self, three_breakpoints):
        schema = _schema(
            three_breakpoints,
            {
                "mobile": {"structure": "vertical", "components": ["c1"]},
                "desktop": {
                    "structure": "sidebar-main",
                    "components": ["c1", "c2"],
                    "roles": {"sidebar": "c1", "main": "c2"},
                },
            },
        )
        normalized = normalize_schema(schema)

        assert normalized.layouts["desktop"].structure == "sidebar-main"
        assert normalized.layouts["desktop"].components == ["c1", "c2"]
        assert normalized.layouts["tablet"].components == ["c1"]

    @pytest.mark.unit
    def test_preserves_intentionally_empty_layout(self, three_breakpoints):
        schema = _schema(
            [three_breakpoints[0], three_breakpoints[2]],
            {
                "mobile": {"structure": "vertical", "components": ["c1"]},
                "desktop": {"structure": "vertical", "components": []},
            },
        )
        normalized = normalize_schema(schema)

        assert normalized.layouts["desktop"].components == []

    @pytest.mark.unit
    def test_missing_after_empty_inherits_empty(self):
        schema = _schema(
            [_bp("bp1", 0), _bp("bp2", 768), _bp("bp3", 1024)],
            {
                "bp1": {"structure": "vertical", "components": ["c1"]},
                "bp2": {"structure": "vertical", "components": []},
            },
        )
        normalized = normalize_schema(schema)

        assert normalized.layouts["bp2"].components == []
        assert normalized.layouts["bp3"].components == []

    @pytest.mark.unit
    def test_inherits_roles(self, three_breakpoints):
        schema = _schema(
            three_breakpoints,
            {
                "mobile": {
                    "structure": "sidebar-main",
                    "components": ["c1"],
                    "roles": {"main": "c1"},
                }
            },
        )
        normalized = normalize_schema(schema)
        assert normalized.layouts["desktop"].roles == {"main": "c1"}

    @pytest.mark.unit
    def test_sorts_before_inheriting(self, three_breakpoints):
        desktop, mobile, tablet = (
            three_breakpoints[2],
            three_breakpoints[0],
            three_breakpoints[1],
        )
        schema = _schema(
            [desktop, mobile, tablet],
            {"mobile": {"structure": "vertical", "components": ["c1"]}},
        )
        normalized = normalize_schema(schema)

        assert [bp.name for bp in normalized.breakpoints] == [
            "mobile",
            "tablet",
            "desktop",
        ]
        assert normalized.layouts["tablet"].components == ["c1"]
        assert normalized.layouts["desktop"].components == ["c1"]

    @pytest.mark.unit
    def test_non_standard_min_widths(self):
        names = [("xs", 0), ("sm", 640), ("md", 768), ("lg", 1024), ("xl", 1280)]
        schema = _schema(
            [_bp(name, width) for name, width in names]
            + [{"name": "2xl", "minWidth": 1536, "gridCols": 14, "gridRows": 10}],
            {"xs": {"structure": "vertical", "components": ["c1"]}},
        )
        normalized = normalize_schema(schema)

        for name in ("sm", "md", "lg", "xl", "2xl"):
            assert normalized.layouts[name].components == ["c1"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "names", [("mobile", "Desktop"), ("Mobile", "LaptopXL"), ("MediumScreen", "LARGE_SCREEN")]
    )
    def test_arbitrary_breakpoint_names(self, names):
        first, second = names
        schema = _schema(
            [_bp(first, 0, 4), _bp(second, 1024)],
            {first: {"structure": "vertical", "components": ["c1"]}},
        )
        normalized = normalize_schema(schema)

        assert normalized.layouts[second].structure == "vertical"
        assert normalized.layouts[second].components == ["c1"]

    @pytest.mark.unit
    def test_breakpoints_before_first_layout_stay_missing(self, three_breakpoints):
        schema = _schema(
            three_breakpoints,
            {"tablet": {"structure": "vertical", "components": ["c1"]}},
        )
        normalized = normalize_schema(schema)

        assert "mobile" not in normalized.layouts
        assert normalized.layouts["desktop"].components == ["c1"]

    @pytest.mark.unit
    def test_cascade_layouts_reports_inherited(self):
        breakpoints = [
            Breakpoint(name="a", min_width=0, grid_cols=4, grid_rows=8),
            Breakpoint(name="b", min_width=10, grid_cols=4, grid_rows=8),
        ]
        layouts = {"a": Layout(components=["x"])}
        assert cascade_layouts(layouts, breakpoints) == ["b"]
        assert layouts["b"] is not layouts["a"]
        assert layouts["b"] == layouts["a"]


class TestCanvasCascade:
    """Tests for responsive canvas layout inheritance."""

    @pytest.mark.unit
    def test_inherits_rectangle_for_new_breakpoint(self):
        schema = _schema(
            [_bp("mobile", 0, 4), _bp("desktop", 1024)],
            {
                "mobile": {"structure": "vertical", "components": ["c1"]},
                "desktop": {"structure": "vertical", "components": []},
            },
            components=[
                {
                    "id": "c1",
                    "name": "Header",
                    "semanticTag": "header",
                    "responsiveCanvasLayout": {
                        "mobile": {"x": 0, "y": 0, "width": 4, "height": 1}
                    },
                }
            ],
        )
        normalized = normalize_schema(schema)
        c1 = normalized.get_component("c1")

        assert c1.responsive_canvas_layout["desktop"] == Rect(
            x=0, y=0, width=4, height=1
        )
        # Canvas inheritance does not imply layout inheritance
        assert normalized.layouts["desktop"].components == []

    @pytest.mark.unit
    def test_does_not_overwrite_explicit_rectangle(self, responsive_schema):
        normalized = normalize_schema(responsive_schema)
        c1 = normalized.get_component("c1")

        assert c1.responsive_canvas_layout["desktop"].width == 12
        assert c1.responsive_canvas_layout["tablet"] == Rect(
            x=0, y=0, width=4, height=1
        )

    @pytest.mark.unit
    def test_new_breakpoint_between_existing(self):
        schema = _schema(
            [_bp("mobile", 0, 4), _bp("laptop", 900, 10), _bp("desktop", 1024)],
            {
                "mobile": {"structure": "vertical", "components": ["c1", "c2"]},
                "laptop": {"structure": "vertical", "components": []},
                "desktop": {"structure": "vertical", "components": ["c1", "c2"]},
            },
            components=[
                {
                    "id": "c1",
                    "name": "Header",
                    "semanticTag": "header",
                    "responsiveCanvasLayout": {
                        "mobile": {"x": 0, "y": 0, "width": 4, "height": 1},
                        "desktop": {"x": 0, "y": 0, "width": 12, "height": 1},
                    },
                },
                {
                    "id": "c2",
                    "name": "Main",
                    "semanticTag": "main",
                    "responsiveCanvasLayout": {
                        "mobile": {"x": 0, "y": 1, "width": 4, "height": 6},
                        "desktop": {"x": 0, "y": 1, "width": 12, "height": 6},
                    },
                },
            ],
        )
        normalized = normalize_schema(schema)

        assert normalized.layouts["laptop"].components == []
        assert normalized.get_component("c1").responsive_canvas_layout[
            "laptop"
        ] == Rect(x=0, y=0, width=4, height=1)
        assert normalized.get_component("c2").responsive_canvas_layout[
            "laptop"
        ] == Rect(x=0, y=1, width=4, height=6)

    @pytest.mark.unit
    def test_component_without_responsive_map_untouched(self, make_component):
        component = make_component("c1", 0, 0, 12, 1)
        breakpoints = [Breakpoint(name="mobile", min_width=0, grid_cols=4, grid_rows=8)]
        assert cascade_canvas_layouts(component, breakpoints) == []
        assert component.responsive_canvas_layout is None

    @pytest.mark.unit
    def test_inherited_rectangles_are_independent(self, responsive_schema):
        normalized = normalize_schema(responsive_schema)
        c2 = normalized.get_component("c2")

        c2.responsive_canvas_layout["tablet"].width = 99
        assert c2.responsive_canvas_layout["mobile"].width == 4
        assert c2.responsive_canvas_layout["desktop"].width == 4


class TestNonAliasing:
    """The normalized schema never shares mutable state with its input."""

    @pytest.mark.unit
    def test_mutating_result_leaves_input_intact(self, three_breakpoints):
        schema = LayoutSchema.model_validate(
            _schema(
                three_breakpoints[:2],
                {"mobile": {"structure": "vertical", "components": ["c1"]}},
            )
        )
        normalized = normalize_schema(schema)
        normalized.layouts["mobile"].components.append("c2")
        normalized.components[0].name = "Renamed"

        assert schema.layouts["mobile"].components == ["c1"]
        assert schema.components[0].name == "Header"

    @pytest.mark.unit
    def test_inherited_layouts_are_independent(self, three_breakpoints):
        schema = _schema(
            three_breakpoints[:2],
            {"mobile": {"structure": "vertical", "components": ["c1"]}},
        )
        normalized = normalize_schema(schema)
        normalized.layouts["tablet"].components.append("c2")

        assert normalized.layouts["mobile"].components == ["c1"]

    @pytest.mark.unit
    def test_input_breakpoint_order_untouched(self, responsive_schema):
        before = [bp.name for bp in responsive_schema.breakpoints]
        normalize_schema(responsive_schema)
        assert [bp.name for bp in responsive_schema.breakpoints] == before
        assert "tablet" not in responsive_schema.layouts


class TestNormalizeSchema:
    """General contract of normalize_schema."""

    @pytest.mark.unit
    def test_idempotent(self, responsive_schema):
        once = normalize_schema(responsive_schema)
        twice = normalize_schema(once)
        assert twice == once
        assert twice.to_dict() == once.to_dict()

    @pytest.mark.unit
    def test_no_breakpoints(self):
        schema = _schema([], {})
        normalized = normalize_schema(schema)
        assert normalized.layouts == {}
        assert normalized.components[0].responsive_canvas_layout is None

    @pytest.mark.unit
    def test_none_raises(self):
        with pytest.raises(TypeError):
            normalize_schema(None)

    @pytest.mark.unit
    def test_tolerates_unknown_component_references(self, three_breakpoints):
        schema = _schema(
            three_breakpoints,
            {"mobile": {"structure": "vertical", "components": ["ghost"]}},
        )
        normalized = normalize_schema(schema)
        assert normalized.layouts["desktop"].components == ["ghost"]
