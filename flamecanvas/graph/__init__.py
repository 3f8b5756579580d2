# Flame graph geometry: columns, boxes and colors
from __future__ import annotations

from flamecanvas.graph.boxes import Box, BoxSet, build_boxes
from flamecanvas.graph.colors import SYSTEM_COLORS, ColorPair, HslColor, pick_color
from flamecanvas.graph.columns import (
    Column,
    Frame,
    FrameRef,
    build_columns,
    merge_columns,
    resolve,
    walk_samples,
)


__all__ = [
    "Box",
    "BoxSet",
    "ColorPair",
    "Column",
    "Frame",
    "FrameRef",
    "HslColor",
    "SYSTEM_COLORS",
    "build_boxes",
    "build_columns",
    "merge_columns",
    "pick_color",
    "resolve",
    "walk_samples",
]
