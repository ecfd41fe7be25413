"""Snap-to-grid mapping of free pixel coordinates onto grid cells.

Each axis is handled independently: a coordinate within ``threshold``
pixels of a grid line snaps to that line, otherwise it falls into the cell
that contains it.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum

from gridlayout.config import EnvVar, get_environment


@dataclass(frozen=True)
class SnapConfig:
    """Snap behaviour for one drag gesture.

    Attributes:
        enabled: Whether snapping is active.
        threshold: Snap distance in pixels.
        grid_cell_width: Rendered cell width in pixels.
        grid_cell_height: Rendered cell height in pixels.
    """

    enabled: bool = True
    threshold: float = 10
    grid_cell_width: float = 50
    grid_cell_height: float = 50

    def __post_init__(self) -> None:
        if self.grid_cell_width <= 0 or self.grid_cell_height <= 0:
            raise ValueError(
                f"Grid cell size must be positive, got "
                f"{self.grid_cell_width}x{self.grid_cell_height}"
            )


DEFAULT_SNAP_CONFIG = SnapConfig()


class GuideAxis(str, Enum):
    """Orientation of a snap guide line."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class SnapResult:
    """Grid cell coordinates of a snapped point."""

    x: int
    y: int
    snapped: bool


@dataclass(frozen=True)
class SnapGuide:
    """A grid line to highlight while dragging.

    ``vertical`` guides mark an x position, ``horizontal`` guides a y
    position. Positions are in pixels.
    """

    axis: GuideAxis
    position: float
    active: bool = True


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _snap_axis(pixel: float, cell: float, threshold: float) -> tuple[int, bool]:
    exact = pixel / cell
    nearest = _round_half_up(exact)
    if abs(pixel - nearest * cell) <= threshold:
        return nearest, True
    return math.floor(exact), False


def snap_to_grid(
    pixel_x: float, pixel_y: float, config: SnapConfig = DEFAULT_SNAP_CONFIG
) -> SnapResult:
    """Map a pixel position to grid cell coordinates.

    When disabled, both axes are floored. When enabled, an axis within the
    threshold of its nearest grid line snaps to it. ``snapped`` is True if
    either axis snapped.

    Example:
        >>> snap_to_grid(245, 123)
        SnapResult(x=5, y=2, snapped=True)
    """
    if not config.enabled:
        return SnapResult(
            x=math.floor(pixel_x / config.grid_cell_width),
            y=math.floor(pixel_y / config.grid_cell_height),
            snapped=False,
        )

    x, snapped_x = _snap_axis(pixel_x, config.grid_cell_width, config.threshold)
    y, snapped_y = _snap_axis(pixel_y, config.grid_cell_height, config.threshold)
    return SnapResult(x=x, y=y, snapped=snapped_x or snapped_y)


def grid_to_pixel(
    grid_x: int, grid_y: int, cell_width: float, cell_height: float
) -> tuple[float, float]:
    """Convert grid cell coordinates to the pixel position of their corner."""
    return grid_x * cell_width, grid_y * cell_height


def calculate_snap_guides(
    pixel_x: float, pixel_y: float, config: SnapConfig = DEFAULT_SNAP_CONFIG
) -> list[SnapGuide]:
    """Get the guide lines to show for a pixel position.

    Returns:
        Zero, one or two guides; always empty when snapping is disabled.
    """
    if not config.enabled:
        return []

    guides: list[SnapGuide] = []
    axes = (
        (GuideAxis.VERTICAL, pixel_x, config.grid_cell_width),
        (GuideAxis.HORIZONTAL, pixel_y, config.grid_cell_height),
    )
    for axis, pixel, cell in axes:
        line = _round_half_up(pixel / cell) * cell
        if abs(pixel - line) <= config.threshold:
            guides.append(SnapGuide(axis=axis, position=line))
    return guides


def toggle_snap(config: SnapConfig) -> SnapConfig:
    """Return a copy of ``config`` with snapping flipped."""
    return replace(config, enabled=not config.enabled)


def get_snap_config_with_modifier(
    config: SnapConfig, modifier_pressed: bool
) -> SnapConfig:
    """Return a copy of ``config`` with snapping suspended while a modifier is held."""
    return replace(config, enabled=config.enabled and not modifier_pressed)


def snap_config_from_environment() -> SnapConfig:
    """Build a SnapConfig from GRIDLAYOUT_SNAP_* and GRIDLAYOUT_CELL_* variables."""
    return SnapConfig(
        enabled=get_environment(EnvVar.SNAP_ENABLED),
        threshold=get_environment(EnvVar.SNAP_THRESHOLD),
        grid_cell_width=get_environment(EnvVar.CELL_WIDTH),
        grid_cell_height=get_environment(EnvVar.CELL_HEIGHT),
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
