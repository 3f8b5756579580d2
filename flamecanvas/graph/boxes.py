# flamecanvas/graph/boxes.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from loguru import logger

from flamecanvas.graph.colors import ColorPair, pick_color
from flamecanvas.graph.columns import FrameRef


if TYPE_CHECKING:
    from flamecanvas.config.base import ColorConfig, LayoutConfig
    from flamecanvas.graph.columns import Column, Frame


@dataclass(frozen=True)
class Box:
    """Rectangle of the flame graph grid.

    ``x1``/``x2`` are fractions of the full timeline, ``y1``/``y2`` are pixels
    measured from the top of the canvas (timeline strip included).
    """

    x1: float
    x2: float
    y1: float
    y2: float
    level: int
    color: ColorPair
    text: str
    frame: Frame

    @property
    def graph_id(self) -> int:
        return self.frame.graph_id


@dataclass(frozen=True)
class BoxSet:
    """All boxes of a model sorted by ``(level, x1)``, plus the content height."""

    boxes: tuple[Box, ...]
    max_y: float

    def __len__(self) -> int:
        return len(self.boxes)

    def find(self, graph_id: int) -> Box | None:
        """Return the box owning the frame with ``graph_id``."""
        return next((b for b in self.boxes if b.graph_id == graph_id), None)


def build_boxes(
    columns: list[Column],
    layout: LayoutConfig | None = None,
    colors: ColorConfig | None = None,
) -> BoxSet:
    """Flatten merged columns into sorted boxes.

    A Frame slot opens a new box at the running offset; a FrameRef slot
    stretches the box opened by the referenced column at the same depth.
    """
    box_height = layout.box_height if layout else 20.0
    timeline_height = layout.timeline_height if layout else 22.0

    total = sum(c.width for c in columns)
    scale = 1 / total if total > 0 else 0.0
    boxes: dict[tuple[int, int], Box] = {}

    offset = 0.0
    max_y = 0.0
    for x, col in enumerate(columns):
        for y, slot in enumerate(col.rows):
            if isinstance(slot, FrameRef):
                key = (slot.column, y)
                boxes[key] = replace(boxes[key], x2=(offset + col.width) * scale)
            else:
                y1 = box_height * y + timeline_height
                y2 = y1 + box_height
                boxes[(x, y)] = Box(
                    x1=offset * scale,
                    x2=(offset + col.width) * scale,
                    y1=y1,
                    y2=y2,
                    level=y,
                    text=slot.location.call_frame.function_name,
                    color=pick_color(slot, config=colors),
                    frame=slot,
                )
                max_y = max(y2, max_y)

        offset += col.width

    ordered = tuple(sorted(boxes.values(), key=lambda b: (b.level, b.x1)))
    logger.debug(f"Built {len(ordered)} boxes from {len(columns)} columns, height {max_y:g}px")
    return BoxSet(boxes=ordered, max_y=max_y)
