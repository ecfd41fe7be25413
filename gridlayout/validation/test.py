"""Unit tests for validation module."""

import pytest

from gridlayout.validation import (
    ValidationError,
    ValidationWarning,
    is_valid,
    validate_schema,
)


def _component(component_id, name, tag="div", rect=(0, 0, 1, 1), **extra) -> dict:
    data = {
        "id": component_id,
        "name": name,
        "semanticTag": tag,
        "positioning": {"type": "static"},
        "layout": {"type": "flex"},
        **extra,
    }
    if rect is not None:
        x, y, width, height = rect
        data["canvasLayout"] = {"x": x, "y": y, "width": width, "height": height}
    return data


def _schema(components, layouts=None, breakpoints=None, **extra) -> dict:
    breakpoints = breakpoints or [
        {"name": "mobile", "minWidth": 0, "gridCols": 12, "gridRows": 8}
    ]
    if layouts is None:
        layouts = {
            bp["name"]: {
                "structure": "vertical",
                "components": [c["id"] for c in components],
            }
            for bp in breakpoints
        }
    return {
        "schemaVersion": "2.0",
        "components": components,
        "breakpoints": breakpoints,
        "layouts": layouts,
        **extra,
    }


def _codes(items) -> list[str]:
    return [item.code for item in items]


class TestValidSchemas:
    """Schemas that pass validation."""

    @pytest.mark.unit
    def test_github_style_schema(self, github_style_schema):
        """A well-formed sidebar layout has no errors or warnings."""
        result = validate_schema(github_style_schema)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.unit
    def test_raw_mapping(self, github_style_schema):
        """Wire-format dicts are accepted."""
        assert is_valid(github_style_schema.to_dict())

    @pytest.mark.unit
    def test_warnings_do_not_invalidate(self):
        """Warnings alone keep the schema valid."""
        schema = _schema([_component("c1", "Box", rect=(10, 5, 10, 10))])
        result = validate_schema(schema)
        assert result.valid is True
        assert _codes(result.warnings) == ["CANVAS_OUT_OF_BOUNDS"]

    @pytest.mark.unit
    def test_none_is_programmer_error(self):
        """None is rejected outright rather than reported."""
        with pytest.raises(TypeError):
            validate_schema(None)


class TestVersionAndComponents:
    """Schema version and component checks."""

    @pytest.mark.unit
    def test_invalid_version(self):
        """Only version 2.0 is accepted."""
        schema = _schema([_component("c1", "Header")], schemaVersion="1.0")
        result = validate_schema(schema)
        assert result.valid is False
        assert result.errors[0] == ValidationError(
            code="INVALID_VERSION",
            message="Schema version must be '2.0', got '1.0'",
            field="schemaVersion",
        )

    @pytest.mark.unit
    def test_missing_version(self):
        """A mapping without schemaVersion is rejected."""
        schema = _schema([_component("c1", "Header")])
        del schema["schemaVersion"]
        assert "INVALID_VERSION" in _codes(validate_schema(schema).errors)

    @pytest.mark.unit
    def test_no_components(self):
        """At least one component is required."""
        result = validate_schema(_schema([], layouts={"mobile": {"components": []}}))
        assert result.valid is False
        errors = [e for e in result.errors if e.code == "NO_COMPONENTS"]
        assert errors[0].field == "components"

    @pytest.mark.unit
    def test_duplicate_component_id(self):
        """Duplicate ids are reported once per id."""
        schema = _schema(
            [
                _component("c1", "Header", rect=(0, 0, 12, 1)),
                _component("c1", "Footer", rect=(0, 7, 12, 1)),
            ],
            layouts={"mobile": {"structure": "vertical", "components": ["c1"]}},
        )
        result = validate_schema(schema)
        duplicates = [e for e in result.errors if e.code == "DUPLICATE_COMPONENT_ID"]
        assert len(duplicates) == 1
        assert duplicates[0].component_id == "c1"
        assert "2 times" in duplicates[0].message

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["myHeader", "header", "Main-Content", "1Box", ""])
    def test_non_pascal_case_name(self, name):
        """Component names must be PascalCase."""
        result = validate_schema(_schema([_component("c1", name)]))
        error = next(e for e in result.errors if e.code == "INVALID_COMPONENT_NAME")
        assert error.component_id == "c1"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["Header", "MainContent", "Card2", "X"])
    def test_pascal_case_name(self, name):
        """PascalCase names pass."""
        assert is_valid(_schema([_component("c1", name)]))


class TestBreakpointsAndLayouts:
    """Breakpoint and layout checks."""

    @pytest.mark.unit
    def test_no_breakpoints(self):
        """At least one breakpoint is required."""
        schema = _schema([_component("c1", "Header")])
        schema["breakpoints"] = []
        assert "NO_BREAKPOINTS" in _codes(validate_schema(schema).errors)

    @pytest.mark.unit
    def test_duplicate_breakpoint_name_and_width(self):
        """Breakpoint names and minWidths must be unique."""
        breakpoints = [
            {"name": "mobile", "minWidth": 0, "gridCols": 4, "gridRows": 8},
            {"name": "mobile", "minWidth": 0, "gridCols": 4, "gridRows": 8},
        ]
        result = validate_schema(_schema([_component("c1", "Box")], breakpoints=breakpoints))
        codes = _codes(result.errors)
        assert "DUPLICATE_BREAKPOINT_NAME" in codes
        assert "DUPLICATE_BREAKPOINT_MIN_WIDTH" in codes

    @pytest.mark.unit
    def test_negative_min_width(self):
        """minWidth must not be negative."""
        breakpoints = [{"name": "tiny", "minWidth": -1, "gridCols": 4, "gridRows": 8}]
        result = validate_schema(_schema([_component("c1", "Box")], breakpoints=breakpoints))
        error = next(e for e in result.errors if e.code == "INVALID_MIN_WIDTH")
        assert error.breakpoint == "tiny"

    @pytest.mark.unit
    def test_missing_layout(self, three_breakpoints):
        """Every declared breakpoint needs a layout."""
        schema = _schema(
            [_component("c1", "Header")],
            layouts={"mobile": {"structure": "vertical", "components": ["c1"]}},
            breakpoints=[three_breakpoints[0], three_breakpoints[2]],
        )
        result = validate_schema(schema)
        assert result.valid is False
        missing = [e for e in result.errors if e.code == "MISSING_LAYOUT"]
        assert [e.field for e in missing] == ["layouts.desktop"]

    @pytest.mark.unit
    def test_empty_layout_is_not_missing(self, three_breakpoints):
        """An explicitly empty layout satisfies the breakpoint."""
        schema = _schema(
            [_component("c1", "Header")],
            layouts={
                "mobile": {"structure": "vertical", "components": ["c1"]},
                "desktop": {"structure": "vertical", "components": []},
            },
            breakpoints=[three_breakpoints[0], three_breakpoints[2]],
        )
        assert is_valid(schema)

    @pytest.mark.unit
    def test_unknown_component_reference(self):
        """Layouts may only list known component ids."""
        schema = _schema(
            [_component("c1", "Header")],
            layouts={"mobile": {"structure": "vertical", "components": ["c1", "ghost"]}},
        )
        result = validate_schema(schema)
        error = next(e for e in result.errors if e.code == "UNKNOWN_COMPONENT_REFERENCE")
        assert error.component_id == "ghost"
        assert error.breakpoint == "mobile"


class TestCanvasGeometry:
    """Per-breakpoint canvas geometry checks."""

    @pytest.mark.unit
    def test_negative_coordinate_is_error(self):
        """Negative origins block the schema."""
        result = validate_schema(_schema([_component("c1", "Box", rect=(-1, -1, 12, 1))]))
        assert result.valid is False
        assert "CANVAS_NEGATIVE_COORDINATE" in _codes(result.errors)

    @pytest.mark.unit
    def test_negative_coordinate_of_unlisted_component(self):
        """Components that no layout lists still get their origin checked."""
        schema = _schema(
            [
                _component("c1", "Header"),
                _component("c2", "Orphan", rect=(-2, 0, 3, 1)),
            ],
            layouts={"mobile": {"structure": "vertical", "components": ["c1"]}},
        )
        result = validate_schema(schema)
        assert result.valid is False
        error = next(e for e in result.errors if e.code == "CANVAS_NEGATIVE_COORDINATE")
        assert error.component_id == "c2"
        assert error.breakpoint is None

    @pytest.mark.unit
    def test_zero_size_is_warning(self):
        """Zero-size rectangles are flagged but accepted."""
        result = validate_schema(_schema([_component("c1", "Box", rect=(0, 0, 0, 0))]))
        assert result.valid is True
        assert result.warnings == [
            ValidationWarning(
                code="CANVAS_ZERO_SIZE",
                message="Component 'c1' has zero size 0x0 at 'mobile'",
                field="canvasLayout",
                component_id="c1",
                breakpoint="mobile",
            )
        ]

    @pytest.mark.unit
    def test_out_of_bounds_is_warning(self):
        """Rectangles leaving the grid are flagged."""
        result = validate_schema(_schema([_component("c1", "Box", rect=(10, 5, 10, 10))]))
        assert "CANVAS_OUT_OF_BOUNDS" in _codes(result.warnings)

    @pytest.mark.unit
    def test_overlap_is_warning(self):
        """Overlapping rectangles are flagged once per pair."""
        schema = _schema(
            [
                _component("c1", "Sidebar", "aside", rect=(0, 1, 6, 4)),
                _component("c2", "MainContent", "main", rect=(4, 1, 8, 4)),
            ],
            layouts={"mobile": {"structure": "horizontal", "components": ["c1", "c2"]}},
        )
        result = validate_schema(schema)
        overlaps = [w for w in result.warnings if w.code == "CANVAS_COMPONENTS_OVERLAP"]
        assert len(overlaps) == 1
        assert "'c1' and 'c2'" in overlaps[0].message

    @pytest.mark.unit
    def test_touching_edges_do_not_overlap(self):
        """Adjacent rectangles are fine."""
        schema = _schema(
            [
                _component("c1", "Sidebar", "aside", rect=(0, 0, 3, 8)),
                _component("c2", "MainContent", "main", rect=(3, 0, 9, 8)),
            ]
        )
        assert validate_schema(schema).warnings == []

    @pytest.mark.unit
    def test_uses_responsive_rectangles(self, three_breakpoints):
        """Geometry is checked against each breakpoint's own grid."""
        header = _component(
            "c1",
            "Header",
            "header",
            rect=(0, 0, 12, 1),
            responsiveCanvasLayout={"mobile": {"x": 0, "y": 0, "width": 4, "height": 1}},
        )
        schema = _schema([header], breakpoints=three_breakpoints)
        result = validate_schema(schema)
        out_of_bounds = [w for w in result.warnings if w.code == "CANVAS_OUT_OF_BOUNDS"]
        assert [w.breakpoint for w in out_of_bounds] == ["tablet"]

    @pytest.mark.unit
    def test_components_outside_layout_are_not_checked(self):
        """Only components listed in a breakpoint's layout are measured."""
        schema = _schema(
            [_component("c1", "Box"), _component("c2", "Far", rect=(-5, 0, 1, 1))],
            layouts={"mobile": {"structure": "vertical", "components": ["c1"]}},
        )
        assert is_valid(schema)

    @pytest.mark.unit
    def test_components_without_geometry_are_skipped(self):
        """Missing geometry is not an error."""
        assert is_valid(_schema([_component("c1", "Box", rect=None)]))


class TestStructureHints:
    """Layout structure consistency checks."""

    @pytest.mark.unit
    def test_horizontal_with_column_direction(self):
        """A horizontal layout with a column container is flagged."""
        schema = _schema(
            [_component("c1", "Main", "main", rect=(0, 0, 12, 8))],
            layouts={
                "mobile": {
                    "structure": "horizontal",
                    "components": ["c1"],
                    "containerLayout": {"type": "flex", "flex": {"direction": "column"}},
                }
            },
        )
        assert "HORIZONTAL_STRUCTURE_NOT_ROW" in _codes(validate_schema(schema).warnings)

    @pytest.mark.unit
    def test_horizontal_with_row_direction(self):
        """A row container matches a horizontal layout."""
        schema = _schema(
            [_component("c1", "Main", "main", rect=(0, 0, 12, 8))],
            layouts={
                "mobile": {
                    "structure": "horizontal",
                    "components": ["c1"],
                    "containerLayout": {"type": "flex", "direction": "row"},
                }
            },
        )
        assert validate_schema(schema).warnings == []

    @pytest.mark.unit
    def test_sidebar_main_without_roles(self):
        """Sidebar structures need role assignments."""
        schema = _schema(
            [
                _component("sidebar", "Sidebar", "aside", rect=(0, 0, 3, 8)),
                _component("main", "Main", "main", rect=(3, 0, 9, 8)),
            ],
            layouts={
                "mobile": {"structure": "sidebar-main", "components": ["sidebar", "main"]}
            },
        )
        warning = next(
            w for w in validate_schema(schema).warnings if w.code == "SIDEBAR_MAIN_WITHOUT_ROLES"
        )
        assert warning.breakpoint == "mobile"
        assert "sidebar-main" in warning.message
