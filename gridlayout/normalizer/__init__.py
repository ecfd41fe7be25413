"""Schema normalization with breakpoint inheritance."""

from gridlayout.normalizer.lib import (
    cascade_canvas_layouts,
    cascade_layouts,
    normalize_schema,
)

__all__ = [
    "cascade_canvas_layouts",
    "cascade_layouts",
    "normalize_schema",
]
