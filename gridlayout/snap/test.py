"""Unit tests for snap-to-grid mapping."""

import dataclasses

import pytest

from gridlayout.snap import (
    DEFAULT_SNAP_CONFIG,
    GuideAxis,
    SnapConfig,
    SnapGuide,
    SnapResult,
    calculate_snap_guides,
    get_snap_config_with_modifier,
    grid_to_pixel,
    snap_config_from_environment,
    snap_to_grid,
    toggle_snap,
)

CONFIG = SnapConfig(enabled=True, threshold=10, grid_cell_width=50, grid_cell_height=50)
DISABLED = SnapConfig(enabled=False, threshold=10, grid_cell_width=50, grid_cell_height=50)


class TestSnapToGrid:
    """Tests for snap_to_grid."""

    @pytest.mark.unit
    def test_one_axis_within_threshold_flags_snapped(self):
        assert snap_to_grid(245, 123, CONFIG) == SnapResult(x=5, y=2, snapped=True)

    @pytest.mark.unit
    def test_outside_threshold_floors(self):
        assert snap_to_grid(220, 180, CONFIG) == SnapResult(x=4, y=3, snapped=False)

    @pytest.mark.unit
    def test_exact_grid_line(self):
        assert snap_to_grid(250, 100, CONFIG) == SnapResult(x=5, y=2, snapped=True)

    @pytest.mark.unit
    def test_disabled_floors(self):
        assert snap_to_grid(245, 123, DISABLED) == SnapResult(x=4, y=2, snapped=False)

    @pytest.mark.unit
    def test_origin(self):
        assert snap_to_grid(0, 0, CONFIG) == SnapResult(x=0, y=0, snapped=True)

    @pytest.mark.unit
    def test_negative_coordinates(self):
        result = snap_to_grid(-10, -5, CONFIG)
        assert result.x <= 0
        assert result.y <= 0
        assert result.snapped is True

    @pytest.mark.unit
    def test_negative_coordinates_outside_threshold(self):
        assert snap_to_grid(-30, -70, CONFIG) == SnapResult(x=-1, y=-2, snapped=False)

    @pytest.mark.unit
    def test_different_cell_sizes(self):
        config = SnapConfig(enabled=True, threshold=5, grid_cell_width=100, grid_cell_height=80)
        assert snap_to_grid(203, 162, config) == SnapResult(x=2, y=2, snapped=True)

    @pytest.mark.unit
    def test_threshold_is_inclusive(self):
        assert snap_to_grid(240, 0, CONFIG).x == 5
        assert snap_to_grid(239, 0, SnapConfig(threshold=10)).x == 4

    @pytest.mark.unit
    def test_half_cell_rounds_up(self):
        config = SnapConfig(threshold=25)
        assert snap_to_grid(25, 75, config) == SnapResult(x=1, y=2, snapped=True)

    @pytest.mark.unit
    def test_fractional_pixels(self):
        assert snap_to_grid(249.5, 0.4, CONFIG) == SnapResult(x=5, y=0, snapped=True)

    @pytest.mark.unit
    def test_default_config(self):
        assert snap_to_grid(245, 123) == snap_to_grid(245, 123, CONFIG)


class TestGridToPixel:
    """Tests for grid_to_pixel."""

    @pytest.mark.unit
    def test_converts(self):
        assert grid_to_pixel(5, 3, 50, 50) == (250, 150)

    @pytest.mark.unit
    def test_origin(self):
        assert grid_to_pixel(0, 0, 50, 50) == (0, 0)

    @pytest.mark.unit
    def test_different_cell_sizes(self):
        assert grid_to_pixel(3, 2, 100, 80) == (300, 160)


class TestCalculateSnapGuides:
    """Tests for calculate_snap_guides."""

    @pytest.mark.unit
    def test_both_axes(self):
        guides = calculate_snap_guides(245, 103, CONFIG)
        assert guides == [
            SnapGuide(axis=GuideAxis.VERTICAL, position=250, active=True),
            SnapGuide(axis=GuideAxis.HORIZONTAL, position=100, active=True),
        ]

    @pytest.mark.unit
    def test_disabled(self):
        assert calculate_snap_guides(245, 103, DISABLED) == []

    @pytest.mark.unit
    def test_outside_threshold(self):
        assert calculate_snap_guides(225, 175, CONFIG) == []

    @pytest.mark.unit
    def test_single_axis(self):
        guides = calculate_snap_guides(245, 175, CONFIG)
        assert len(guides) == 1
        assert guides[0].axis == "vertical"
        assert guides[0].position == 250

    @pytest.mark.unit
    def test_horizontal_only(self):
        guides = calculate_snap_guides(225, 98, CONFIG)
        assert [guide.axis for guide in guides] == [GuideAxis.HORIZONTAL]


class TestConfigHelpers:
    """Tests for config toggling and modifiers."""

    @pytest.mark.unit
    def test_toggle_preserves_other_fields(self):
        toggled = toggle_snap(CONFIG)
        assert toggled.enabled is False
        assert toggled.threshold == CONFIG.threshold
        assert toggled.grid_cell_width == CONFIG.grid_cell_width
        assert CONFIG.enabled is True

    @pytest.mark.unit
    def test_toggle_back(self):
        assert toggle_snap(DISABLED).enabled is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("base", "pressed", "expected"),
        [(True, True, False), (True, False, True), (False, False, False), (False, True, False)],
    )
    def test_modifier(self, base, pressed, expected):
        config = dataclasses.replace(CONFIG, enabled=base)
        assert get_snap_config_with_modifier(config, pressed).enabled is expected

    @pytest.mark.unit
    def test_config_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CONFIG.enabled = False

    @pytest.mark.unit
    def test_defaults(self):
        assert DEFAULT_SNAP_CONFIG.enabled is True
        assert DEFAULT_SNAP_CONFIG.threshold == 10
        assert DEFAULT_SNAP_CONFIG.grid_cell_width == 50
        assert DEFAULT_SNAP_CONFIG.grid_cell_height == 50

    @pytest.mark.unit
    @pytest.mark.parametrize(("width", "height"), [(0, 50), (50, -1)])
    def test_rejects_non_positive_cells(self, width, height):
        with pytest.raises(ValueError, match="positive"):
            SnapConfig(grid_cell_width=width, grid_cell_height=height)


class TestSnapConfigFromEnvironment:
    """Tests for snap_config_from_environment."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        for name in (
            "GRIDLAYOUT_SNAP_ENABLED",
            "GRIDLAYOUT_SNAP_THRESHOLD",
            "GRIDLAYOUT_CELL_WIDTH",
            "GRIDLAYOUT_CELL_HEIGHT",
        ):
            monkeypatch.delenv(name, raising=False)
        assert snap_config_from_environment() == DEFAULT_SNAP_CONFIG

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GRIDLAYOUT_SNAP_ENABLED", "no")
        monkeypatch.setenv("GRIDLAYOUT_SNAP_THRESHOLD", "4")
        monkeypatch.setenv("GRIDLAYOUT_CELL_WIDTH", "100")
        monkeypatch.setenv("GRIDLAYOUT_CELL_HEIGHT", "80")
        assert snap_config_from_environment() == SnapConfig(
            enabled=False, threshold=4, grid_cell_width=100, grid_cell_height=80
        )
