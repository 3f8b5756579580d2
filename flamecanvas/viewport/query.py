# flamecanvas/viewport/query.py
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Sequence


if TYPE_CHECKING:
    from flamecanvas.graph.boxes import Box


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def box_at_position(x: float, y: float, boxes: Sequence[Box]) -> Box | None:
    """Return the first box containing the point (half-open on both axes)."""
    for box in boxes:
        if box.y1 > y or box.y2 <= y:
            continue

        if box.x1 > x or box.x2 <= x:
            continue

        return box

    return None


def index_of(boxes: Sequence[Box], graph_id: int) -> int:
    """Position of the box with ``graph_id``, or -1."""
    return next((i for i, b in enumerate(boxes) if b.graph_id == graph_id), -1)


def find_neighbor(boxes: Sequence[Box], focused: Box, direction: Direction) -> Box | None:
    """Keyboard neighbor of ``focused`` among the sorted visible boxes.

    Left and right move to the adjacent entry only when it lies on the same
    row. Up picks the closest preceding box on a shallower row whose range
    contains the focused range; down picks the first following box on a
    deeper row whose range lies inside it.
    """
    index = index_of(boxes, focused.graph_id)
    if index < 0:
        return None

    f = boxes[index]
    if direction is Direction.RIGHT:
        if index + 1 < len(boxes) and boxes[index + 1].y1 == f.y1:
            return boxes[index + 1]
        return None

    if direction is Direction.LEFT:
        if index > 0 and boxes[index - 1].y1 == f.y1:
            return boxes[index - 1]
        return None

    if direction is Direction.UP:
        for i in range(index - 1, -1, -1):
            b = boxes[i]
            if b.y1 < f.y1 and b.x1 <= f.x1 and b.x2 >= f.x2:
                return b
        return None

    for b in boxes[index + 1 :]:
        if b.y1 > f.y1 and b.x1 >= f.x1 and b.x2 <= f.x2:
            return b
    return None
