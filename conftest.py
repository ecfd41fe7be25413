"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Component and schema builders shared by the module test suites
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from gridlayout.schema import Component, LayoutSchema

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Component Builders
# =============================================================================


@pytest.fixture
def make_component() -> Callable[..., Component]:
    """Build a Component from a compact rectangle description.

    Returns:
        Factory ``(id, x, y, width, height, tag="div", name=None,
        responsive=None) -> Component``. Pass ``x=None`` for a component
        without a default canvas layout.
    """
    from gridlayout.schema import Component

    def _make(
        component_id: str,
        x: int | None = 0,
        y: int = 0,
        width: int = 1,
        height: int = 1,
        tag: str = "div",
        name: str | None = None,
        responsive: dict[str, dict[str, int]] | None = None,
    ) -> Component:
        data: dict = {
            "id": component_id,
            "name": name or component_id.title().replace("-", ""),
            "semanticTag": tag,
            "positioning": {"type": "static"},
            "layout": {"type": "flex"},
        }
        if x is not None:
            data["canvasLayout"] = {"x": x, "y": y, "width": width, "height": height}
        if responsive is not None:
            data["responsiveCanvasLayout"] = responsive
        return Component.model_validate(data)

    return _make


# =============================================================================
# Schema Fixtures
# =============================================================================


@pytest.fixture
def three_breakpoints() -> list[dict]:
    """Default mobile/tablet/desktop breakpoints as wire dicts."""
    return [
        {"name": "mobile", "minWidth": 0, "gridCols": 4, "gridRows": 8},
        {"name": "tablet", "minWidth": 768, "gridCols": 8, "gridRows": 8},
        {"name": "desktop", "minWidth": 1024, "gridCols": 12, "gridRows": 8},
    ]


@pytest.fixture
def github_style_schema() -> LayoutSchema:
    """Header + left sidebar + main on a single desktop breakpoint."""
    from gridlayout.schema import LayoutSchema

    return LayoutSchema.model_validate(
        {
            "schemaVersion": "2.0",
            "components": [
                {
                    "id": "header",
                    "name": "SiteHeader",
                    "semanticTag": "header",
                    "positioning": {"type": "sticky", "position": {"top": 0}},
                    "layout": {"type": "flex", "flex": {"direction": "row"}},
                    "canvasLayout": {"x": 0, "y": 0, "width": 12, "height": 1},
                },
                {
                    "id": "sidebar",
                    "name": "Sidebar",
                    "semanticTag": "aside",
                    "positioning": {"type": "sticky"},
                    "layout": {"type": "flex", "flex": {"direction": "column"}},
                    "canvasLayout": {"x": 0, "y": 1, "width": 3, "height": 7},
                },
                {
                    "id": "main",
                    "name": "MainContent",
                    "semanticTag": "main",
                    "positioning": {"type": "static"},
                    "layout": {"type": "container"},
                    "canvasLayout": {"x": 3, "y": 1, "width": 9, "height": 7},
                },
            ],
            "breakpoints": [
                {"name": "desktop", "minWidth": 1024, "gridCols": 12, "gridRows": 8}
            ],
            "layouts": {
                "desktop": {
                    "structure": "sidebar-main",
                    "components": ["header", "sidebar", "main"],
                    "roles": {"header": "header", "sidebar": "sidebar", "main": "main"},
                }
            },
        }
    )


@pytest.fixture
def responsive_schema(three_breakpoints: list[dict]) -> LayoutSchema:
    """Header and main with mobile-only geometry and a missing desktop layout.

    Tablet is absent from ``layouts`` (inherits), desktop is absent too, and
    the header has an explicit desktop rectangle.
    """
    from gridlayout.schema import LayoutSchema

    return LayoutSchema.model_validate(
        {
            "schemaVersion": "2.0",
            "components": [
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
                    "canvasLayout": {"x": 0, "y": 1, "width": 4, "height": 6},
                    "responsiveCanvasLayout": {
                        "mobile": {"x": 0, "y": 1, "width": 4, "height": 6},
                    },
                },
            ],
            # Deliberately unsorted
            "breakpoints": [
                three_breakpoints[2],
                three_breakpoints[0],
                three_breakpoints[1],
            ],
            "layouts": {
                "mobile": {"structure": "vertical", "components": ["c1", "c2"]},
            },
        }
    )
