"""Collage tool geometry."""

from collage.layout import (
    LAYOUT_SLOTS,
    Cell,
    canvas_size,
    cell_geometry,
    cover_fit,
    layout_cells,
)

__all__ = ["LAYOUT_SLOTS", "Cell", "canvas_size", "cell_geometry", "cover_fit", "layout_cells"]
