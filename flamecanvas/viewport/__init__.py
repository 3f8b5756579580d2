# Viewport bounds, visible-box extraction and spatial queries
from __future__ import annotations

from flamecanvas.viewport.bounds import (
    FULL_BOUNDS,
    Bounds,
    CanvasSize,
    VisibleBoxes,
    clamp,
    clamp_scroll,
    get_bounded_boxes,
)
from flamecanvas.viewport.query import Direction, box_at_position, find_neighbor, index_of


__all__ = [
    "FULL_BOUNDS",
    "Bounds",
    "CanvasSize",
    "Direction",
    "VisibleBoxes",
    "box_at_position",
    "clamp",
    "clamp_scroll",
    "find_neighbor",
    "get_bounded_boxes",
    "index_of",
]
