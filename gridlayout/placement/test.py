"""Unit tests for smart placement."""

import pytest
from pydantic import ValidationError

from gridlayout.geometry import Rect, rect_within, rects_intersect
from gridlayout.placement import (
    ComponentTemplate,
    Size,
    calculate_smart_position,
    find_empty_slot,
    get_recommended_size,
    instantiate_template,
)
from gridlayout.schema import SemanticTag

GRID_COLS = 12
GRID_ROWS = 8


def _template(tag: str, height: int | None = None, **body) -> ComponentTemplate:
    template = {
        "name": tag.title(),
        "semanticTag": tag,
        "positioning": {"type": "static"},
        "layout": {"type": "flex"},
        **body,
    }
    if height is not None:
        template["canvasLayout"] = {"x": 0, "y": 0, "width": 1, "height": height}
    return ComponentTemplate(
        id=f"{tag}-template", name=tag.title(), category="layout", template=template
    )


def _place(template, existing=(), cols=GRID_COLS, rows=GRID_ROWS, bp="desktop"):
    return calculate_smart_position(template, cols, rows, list(existing), bp)


class TestComponentTemplate:
    """Tests for the ComponentTemplate model."""

    @pytest.mark.unit
    def test_semantic_tag(self):
        assert _template("aside").semantic_tag == SemanticTag.ASIDE

    @pytest.mark.unit
    def test_requires_valid_semantic_tag(self):
        with pytest.raises(ValidationError):
            ComponentTemplate(id="t", name="T", template={"name": "X"})
        with pytest.raises(ValidationError):
            ComponentTemplate(
                id="t", name="T", template={"name": "X", "semanticTag": "blink"}
            )

    @pytest.mark.unit
    def test_rejects_component_id_in_body(self):
        with pytest.raises(ValidationError):
            ComponentTemplate(
                id="t",
                name="T",
                template={"id": "c1", "name": "X", "semanticTag": "div"},
            )

    @pytest.mark.unit
    def test_requested_height(self):
        assert _template("header", height=2).requested_height == 2
        assert _template("header").requested_height is None
        assert _template("header", height=0).requested_height is None


class TestChromePlacement:
    """Header, nav and footer placement."""

    @pytest.mark.unit
    def test_header_full_width_top(self):
        assert _place(_template("header", height=1)) == Rect(
            x=0, y=0, width=GRID_COLS, height=1
        )

    @pytest.mark.unit
    def test_header_ignores_existing_content(self, make_component):
        existing = [make_component("c1", 0, 0, 4, 4)]
        assert _place(SemanticTag.HEADER, existing) == Rect(
            x=0, y=0, width=GRID_COLS, height=1
        )

    @pytest.mark.unit
    def test_header_on_mobile_grid(self):
        rect = _place(_template("header"), cols=4, bp="mobile")
        assert rect.width == 4

    @pytest.mark.unit
    def test_header_uses_requested_height(self):
        assert _place(_template("header", height=2)).height == 2

    @pytest.mark.unit
    def test_nav_top_without_header(self):
        rect = _place(_template("nav"))
        assert (rect.x, rect.y, rect.width) == (0, 0, GRID_COLS)

    @pytest.mark.unit
    def test_nav_below_header(self, make_component):
        header = make_component("c1", 0, 0, 12, 1, tag="header")
        assert _place(_template("nav"), [header]).y == 1

    @pytest.mark.unit
    def test_nav_below_tall_header(self, make_component):
        header = make_component("c1", 0, 0, 12, 2, tag="header")
        assert _place("nav", [header]).y == 2

    @pytest.mark.unit
    def test_footer_bottom_full_width(self):
        assert _place(_template("footer", height=1)) == Rect(
            x=0, y=GRID_ROWS - 1, width=GRID_COLS, height=1
        )

    @pytest.mark.unit
    def test_footer_on_empty_grid(self):
        assert _place("footer", cols=0, rows=0) == Rect(x=0, y=0, width=0, height=1)


class TestSidebarPlacement:
    """Aside placement."""

    @pytest.mark.unit
    def test_first_aside_goes_left(self):
        rect = _place(_template("aside"))
        assert rect.x == 0
        assert rect.width <= GRID_COLS // 4
        assert rect == Rect(x=0, y=0, width=3, height=GRID_ROWS - 1)

    @pytest.mark.unit
    def test_second_aside_goes_right(self, make_component):
        left = make_component("c1", 0, 0, 3, 8, tag="aside")
        rect = _place(_template("aside"), [left])
        assert rect.x > GRID_COLS / 2
        assert rect.x == GRID_COLS - rect.width

    @pytest.mark.unit
    def test_aside_below_header_and_nav(self, make_component):
        existing = [
            make_component("c1", 0, 0, 12, 1, tag="header"),
            make_component("c2", 0, 1, 12, 1, tag="nav"),
        ]
        rect = _place("aside", existing)
        assert rect.y == 2
        assert rect.height == GRID_ROWS - 2 - 1

    @pytest.mark.unit
    def test_aside_on_tiny_grid(self):
        rect = _place("aside", cols=2, rows=1)
        assert rect.width == 1
        assert rect.height == 1


class TestMainPlacement:
    """Main placement between sidebars and chrome."""

    @pytest.mark.unit
    def test_full_width_without_sidebars(self):
        rect = _place(_template("main"))
        assert rect == Rect(x=0, y=0, width=GRID_COLS, height=GRID_ROWS)

    @pytest.mark.unit
    def test_beside_left_sidebar(self, make_component):
        left = make_component("c1", 0, 0, 3, 8, tag="aside")
        rect = _place(_template("main"), [left])
        assert rect.x == 3
        assert rect.width == 9

    @pytest.mark.unit
    def test_between_two_sidebars(self, make_component):
        existing = [
            make_component("c1", 0, 0, 3, 8, tag="aside"),
            make_component("c2", 9, 0, 3, 8, tag="aside"),
        ]
        rect = _place(_template("main"), existing)
        assert rect.x == 3
        assert rect.width == 6

    @pytest.mark.unit
    def test_between_header_and_footer(self, make_component):
        existing = [
            make_component("c1", 0, 0, 12, 1, tag="header"),
            make_component("c2", 0, 7, 12, 1, tag="footer"),
        ]
        rect = _place(_template("main"), existing)
        assert rect.y == 1
        assert rect.height == 6

    @pytest.mark.unit
    def test_uses_breakpoint_rectangles(self, make_component):
        aside = make_component(
            "c1",
            0,
            0,
            3,
            8,
            tag="aside",
            responsive={"mobile": {"x": 0, "y": 0, "width": 1, "height": 8}},
        )
        rect = _place("main", [aside], cols=4, bp="mobile")
        assert rect.x == 1
        assert rect.width == 3

    @pytest.mark.unit
    def test_ignores_components_without_geometry(self, make_component):
        ghost = make_component("c1", x=None, tag="aside")
        rect = _place("main", [ghost])
        assert rect.x == 0
        assert rect.width == GRID_COLS


class TestContentPlacement:
    """Section, article, div and form go to the first free slot."""

    @pytest.mark.unit
    def test_section_on_empty_grid(self):
        rect = _place(_template("section"))
        assert (rect.x, rect.y) == (0, 0)
        assert (rect.width, rect.height) == (6, 2)

    @pytest.mark.unit
    def test_section_avoids_header(self, make_component):
        header = make_component("c1", 0, 0, 12, 1, tag="header")
        rect = _place(_template("section"), [header])
        assert rect.y >= 1

    @pytest.mark.unit
    @pytest.mark.parametrize("tag", ["article", "div", "form"])
    def test_other_content_tags(self, tag):
        rect = _place(_template(tag))
        assert rect.width > 0
        assert rect.height > 0
        assert (rect.x, rect.y) == (0, 0)

    @pytest.mark.unit
    def test_div_fills_next_free_cell(self, make_component):
        existing = [make_component("c1", 0, 0, 1, 1)]
        assert _place("div", existing) == Rect(x=1, y=0, width=1, height=1)


class TestFindEmptySlot:
    """Tests for find_empty_slot."""

    @pytest.mark.unit
    def test_empty_grid(self):
        assert find_empty_slot([], GRID_COLS, GRID_ROWS, "desktop", 2, 2) == Rect(
            x=0, y=0, width=2, height=2
        )

    @pytest.mark.unit
    def test_empty_grid_skips_scan_for_oversized_request(self):
        assert find_empty_slot([], 4, 4, "desktop", 10, 10) == Rect(
            x=0, y=0, width=10, height=10
        )

    @pytest.mark.unit
    def test_avoids_existing(self, make_component):
        header = make_component("c1", 0, 0, 12, 1)
        slot = find_empty_slot([header], GRID_COLS, GRID_ROWS, "desktop", 2, 2)
        assert slot == Rect(x=0, y=1, width=2, height=2)

    @pytest.mark.unit
    def test_leftmost_in_top_row_wins(self, make_component):
        existing = [make_component("c1", 0, 0, 3, 2)]
        slot = find_empty_slot(existing, GRID_COLS, GRID_ROWS, "desktop", 2, 2)
        assert slot == Rect(x=3, y=0, width=2, height=2)

    @pytest.mark.unit
    def test_fills_remaining_rows(self, make_component):
        existing = [
            make_component("c1", 0, 0, 12, 3),
            make_component("c2", 0, 3, 12, 3),
        ]
        slot = find_empty_slot(existing, GRID_COLS, GRID_ROWS, "desktop", 12, 2)
        assert slot == Rect(x=0, y=6, width=12, height=2)

    @pytest.mark.unit
    def test_falls_back_below_lowest_row(self, make_component):
        existing = [make_component("c1", 0, 0, 12, 7)]
        slot = find_empty_slot(existing, GRID_COLS, GRID_ROWS, "desktop", 12, 3)
        assert slot == Rect(x=0, y=7, width=12, height=3)

    @pytest.mark.unit
    def test_oversized_request_is_echoed(self, make_component):
        existing = [make_component("c1", 0, 0, 2, 2)]
        slot = find_empty_slot(existing, 4, 4, "desktop", 6, 1)
        assert slot == Rect(x=0, y=2, width=6, height=1)

    @pytest.mark.unit
    def test_uses_responsive_rectangle(self, make_component):
        header = make_component(
            "c1",
            0,
            0,
            12,
            1,
            responsive={"mobile": {"x": 0, "y": 0, "width": 4, "height": 2}},
        )
        slot = find_empty_slot([header], 4, GRID_ROWS, "mobile", 2, 2)
        assert slot.y >= 2

    @pytest.mark.unit
    def test_only_geometry_less_components(self, make_component):
        ghost = make_component("c1", x=None)
        assert find_empty_slot([ghost], 4, 4, "desktop", 1, 1) == Rect(
            x=0, y=0, width=1, height=1
        )

    @pytest.mark.unit
    def test_result_never_overlaps_when_fit_exists(self, make_component):
        existing = [
            make_component("c1", 0, 0, 5, 2),
            make_component("c2", 7, 0, 5, 3),
            make_component("c3", 2, 3, 6, 2),
        ]
        for width, height in [(1, 1), (2, 2), (3, 1), (4, 3)]:
            slot = find_empty_slot(existing, GRID_COLS, GRID_ROWS, "desktop", width, height)
            assert rect_within(slot, GRID_COLS, GRID_ROWS)
            for component in existing:
                assert not rects_intersect(slot, component.canvas_layout)


class TestGetRecommendedSize:
    """Tests for get_recommended_size."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("header", Size(12, 1)),
            ("footer", Size(12, 1)),
            ("nav", Size(12, 1)),
            ("aside", Size(3, 6)),
            ("main", Size(9, 6)),
            ("section", Size(6, 2)),
            ("article", Size(6, 2)),
            ("div", Size(1, 1)),
            ("form", Size(1, 1)),
        ],
    )
    def test_desktop_grid(self, tag, expected):
        assert get_recommended_size(tag, GRID_COLS, GRID_ROWS) == expected

    @pytest.mark.unit
    def test_aside_on_narrow_grid(self):
        assert get_recommended_size("aside", 4, 8) == Size(1, 6)
        assert get_recommended_size("aside", 2, 8).width == 1

    @pytest.mark.unit
    def test_clamps_to_one(self):
        assert get_recommended_size(SemanticTag.MAIN, 1, 1) == Size(1, 1)
        assert get_recommended_size(SemanticTag.SECTION, 1, 2) == Size(1, 1)

    @pytest.mark.unit
    @pytest.mark.parametrize("tag", ["header", "footer", "nav"])
    def test_chrome_width_clamps_to_one(self, tag):
        assert get_recommended_size(tag, 0, 8) == Size(1, 1)

    @pytest.mark.unit
    @pytest.mark.parametrize(("cols", "width"), [(5, 3), (7, 5), (2, 1)])
    def test_main_width_floors(self, cols, width):
        assert get_recommended_size("main", cols, 8).width == width

    @pytest.mark.unit
    def test_unknown_tag_raises(self):
        with pytest.raises(ValueError):
            get_recommended_size("blink", GRID_COLS, GRID_ROWS)


class TestInstantiateTemplate:
    """Tests for instantiate_template."""

    @pytest.mark.unit
    def test_creates_component_with_next_id(self, make_component):
        existing = [make_component("c1", 0, 0, 12, 1, tag="header")]
        template = _template("nav", props={"role": "navigation"})

        component = instantiate_template(template, existing, GRID_COLS, GRID_ROWS, "desktop")

        assert component.id == "c2"
        assert component.name == "Nav"
        assert component.semantic_tag == "nav"
        assert component.canvas_layout == Rect(x=0, y=1, width=GRID_COLS, height=1)
        assert component.model_dump(by_alias=True)["props"] == {"role": "navigation"}

    @pytest.mark.unit
    def test_template_is_not_mutated(self):
        template = _template("div", height=1)
        before = template.model_dump()
        instantiate_template(template, [], GRID_COLS, GRID_ROWS, "desktop")
        assert template.model_dump() == before

    @pytest.mark.unit
    def test_drops_responsive_overrides(self):
        template = _template(
            "div",
            responsiveCanvasLayout={"desktop": {"x": 5, "y": 5, "width": 1, "height": 1}},
        )
        component = instantiate_template(template, [], GRID_COLS, GRID_ROWS, "desktop")
        assert component.responsive_canvas_layout is None
        assert component.canvas_layout == Rect(x=0, y=0, width=1, height=1)
