"""Snap-to-grid coordinate mapping for drag gestures."""

from .lib import (
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

__all__ = [
    "SnapConfig",
    "DEFAULT_SNAP_CONFIG",
    "GuideAxis",
    "SnapResult",
    "SnapGuide",
    "snap_to_grid",
    "grid_to_pixel",
    "calculate_snap_guides",
    "toggle_snap",
    "get_snap_config_with_modifier",
    "snap_config_from_environment",
]
