"""Unit tests for grid constraint analysis."""

import pytest

from gridlayout.constraints import (
    GridSize,
    calculate_minimum_grid_size,
    clamp_grid_size,
    get_affected_component_ids,
    is_component_out_of_bounds,
    is_grid_resize_safe,
    suggest_grid_compaction,
)
from gridlayout.geometry import Rect


class TestCalculateMinimumGridSize:
    """Tests for calculate_minimum_grid_size."""

    @pytest.mark.unit
    def test_empty_uses_global_minimum(self):
        assert calculate_minimum_grid_size([], "mobile") == GridSize(2, 2)

    @pytest.mark.unit
    def test_single_component(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2, tag="footer")
        assert calculate_minimum_grid_size([footer], "desktop") == GridSize(12, 12)

    @pytest.mark.unit
    def test_takes_furthest_edges(self, make_component):
        components = [
            make_component("a", 0, 0, 3, 3),
            make_component("b", 9, 17, 3, 3),
        ]
        assert calculate_minimum_grid_size(components, "desktop") == GridSize(20, 12)

    @pytest.mark.unit
    def test_small_components_keep_floor(self, make_component):
        tiny = make_component("a", 0, 0, 1, 1)
        assert calculate_minimum_grid_size([tiny], "desktop") == GridSize(2, 2)

    @pytest.mark.unit
    def test_uses_responsive_rectangle(self, make_component):
        header = make_component(
            "header",
            0,
            0,
            12,
            1,
            responsive={"mobile": {"x": 0, "y": 0, "width": 4, "height": 3}},
        )
        assert calculate_minimum_grid_size([header], "mobile") == GridSize(3, 4)
        assert calculate_minimum_grid_size([header], "desktop") == GridSize(2, 12)

    @pytest.mark.unit
    def test_ignores_components_without_geometry(self, make_component):
        ghost = make_component("ghost", x=None)
        assert calculate_minimum_grid_size([ghost], "desktop") == GridSize(2, 2)


class TestIsGridResizeSafe:
    """Tests for is_grid_resize_safe."""

    @pytest.mark.unit
    def test_growing_is_safe(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2, tag="footer")
        check = is_grid_resize_safe(13, 12, [footer], "desktop")
        assert check.safe is True
        assert check.affected_components == []
        assert check.minimum_required is None

    @pytest.mark.unit
    def test_exact_fit_is_safe(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2, tag="footer")
        assert is_grid_resize_safe(12, 12, [footer], "desktop").safe is True

    @pytest.mark.unit
    def test_row_reduction_clips(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2, tag="footer", name="Footer")
        check = is_grid_resize_safe(10, 12, [footer], "desktop")

        assert check.safe is False
        assert check.reason
        assert len(check.affected_components) == 1
        affected = check.affected_components[0]
        assert affected.id == "footer"
        assert affected.name == "Footer"
        assert affected.current_position == Rect(x=0, y=10, width=12, height=2)
        assert check.minimum_required == GridSize(12, 12)

    @pytest.mark.unit
    def test_column_reduction_clips(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2, tag="footer")
        assert is_grid_resize_safe(12, 10, [footer], "desktop").safe is False

    @pytest.mark.unit
    def test_last_row_component(self, make_component):
        bottom = make_component("bottom", 0, 9, 12, 1)
        check = is_grid_resize_safe(10, 12, [bottom], "desktop")
        assert check.safe is True

        check = is_grid_resize_safe(9, 12, [bottom], "desktop")
        assert check.safe is False
        assert len(check.affected_components) == 1

    @pytest.mark.unit
    def test_reports_every_affected_component(self, make_component):
        components = [
            make_component("a", 0, 0, 3, 3),
            make_component("b", 10, 0, 2, 2),
            make_component("c", 0, 6, 2, 2),
        ]
        check = is_grid_resize_safe(6, 8, components, "desktop")
        assert [item.id for item in check.affected_components] == ["b", "c"]

    @pytest.mark.unit
    def test_reported_position_is_a_copy(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2)
        check = is_grid_resize_safe(4, 4, [footer], "desktop")
        check.affected_components[0].current_position.y = 0
        assert footer.canvas_layout.y == 10

    @pytest.mark.unit
    def test_accepts_generator(self, make_component):
        components = (make_component(name) for name in ("a", "b"))
        check = is_grid_resize_safe(2, 2, components, "desktop")
        assert check.safe is True


class TestGetAffectedComponentIds:
    """Tests for get_affected_component_ids."""

    @pytest.mark.unit
    def test_matches_resize_check(self, make_component):
        components = [
            make_component("a", 0, 0, 12, 1),
            make_component("b", 0, 7, 12, 1),
        ]
        assert get_affected_component_ids(7, 12, components, "desktop") == ["b"]
        assert get_affected_component_ids(8, 11, components, "desktop") == ["a", "b"]
        assert get_affected_component_ids(8, 12, components, "desktop") == []


class TestSuggestGridCompaction:
    """Tests for suggest_grid_compaction."""

    @pytest.mark.unit
    def test_footer_bound_grid(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2)
        suggestion = suggest_grid_compaction([footer], 20, 12, "desktop")
        assert suggestion.can_reduce_rows == 8
        assert suggestion.can_reduce_cols == 0

    @pytest.mark.unit
    def test_empty_grid_shrinks_to_floor(self):
        suggestion = suggest_grid_compaction([], 20, 12, "desktop")
        assert suggestion.can_reduce_rows == 18
        assert suggestion.can_reduce_cols == 10

    @pytest.mark.unit
    def test_corner_components(self, make_component):
        components = [
            make_component("top-left", 0, 0, 3, 3),
            make_component("bottom-right", 9, 17, 3, 3),
        ]
        suggestion = suggest_grid_compaction(components, 25, 15, "desktop")
        assert suggestion.can_reduce_rows == 5
        assert suggestion.can_reduce_cols == 3

    @pytest.mark.unit
    def test_never_negative(self, make_component):
        big = make_component("big", 0, 0, 20, 20)
        suggestion = suggest_grid_compaction([big], 8, 12, "desktop")
        assert suggestion.can_reduce_rows == 0
        assert suggestion.can_reduce_cols == 0


class TestIsComponentOutOfBounds:
    """Tests for is_component_out_of_bounds."""

    @pytest.mark.unit
    def test_inside(self, make_component):
        assert not is_component_out_of_bounds(
            make_component("a", 0, 7, 12, 1), 12, 8, "desktop"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("x", "y", "width", "height"),
        [(-1, 0, 2, 2), (0, -1, 2, 2), (11, 0, 2, 1), (0, 7, 1, 2)],
    )
    def test_outside(self, make_component, x, y, width, height):
        component = make_component("a", x, y, width, height)
        assert is_component_out_of_bounds(component, 12, 8, "desktop")

    @pytest.mark.unit
    def test_footer_on_shorter_grid(self, make_component):
        footer = make_component("footer", 0, 10, 12, 2)
        assert is_component_out_of_bounds(footer, 12, 10, "desktop")
        assert not is_component_out_of_bounds(footer, 12, 12, "desktop")

    @pytest.mark.unit
    def test_no_geometry_is_in_bounds(self, make_component):
        assert not is_component_out_of_bounds(
            make_component("ghost", x=None), 12, 8, "desktop"
        )

    @pytest.mark.unit
    def test_resolves_per_breakpoint(self, make_component):
        header = make_component(
            "header",
            0,
            0,
            12,
            1,
            responsive={"mobile": {"x": 0, "y": 0, "width": 4, "height": 1}},
        )
        assert not is_component_out_of_bounds(header, 4, 8, "mobile")
        assert is_component_out_of_bounds(header, 4, 8, "tablet")


class TestClampGridSize:
    """Tests for clamp_grid_size."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("requested", "expected"),
        [((8, 12), (8, 12)), ((0, 1), (2, 2)), ((30, 100), (24, 24)), ((24, 2), (24, 2))],
    )
    def test_clamps_to_global_bounds(self, requested, expected):
        assert clamp_grid_size(*requested) == expected
