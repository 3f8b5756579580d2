# flamecanvas/viewport/bounds.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable

from flamecanvas.graph.colors import pick_color


if TYPE_CHECKING:
    from flamecanvas.config.base import ColorConfig
    from flamecanvas.graph.boxes import Box


@dataclass(frozen=True)
class Bounds:
    """Visible window of the flame graph.

    ``min_x``/``max_x`` select a fraction of the timeline, ``y`` is the
    vertical scroll offset in pixels and ``level`` is the depth above which
    ancestors are drawn faded.
    """

    min_x: float = 0.0
    max_x: float = 1.0
    y: float = 0.0
    level: int = 0

    @property
    def range(self) -> float:
        return self.max_x - self.min_x


FULL_BOUNDS = Bounds()


@dataclass(frozen=True)
class CanvasSize:
    """Size of the rendering surface in CSS pixels."""

    width: float = 100.0
    height: float = 100.0


@dataclass(frozen=True)
class VisibleBoxes:
    """Boxes inside the current window, rescaled so the window spans [0, 1]."""

    boxes: tuple[Box, ...]
    max_y: float


def clamp(lower: float, value: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; ``lower`` wins if they cross."""
    return max(min(value, upper), lower)


def clamp_scroll(y: float, max_y: float, viewport_height: float) -> float:
    return clamp(0, y, max_y - viewport_height)


def get_bounded_boxes(
    boxes: Iterable[Box],
    bounds: Bounds,
    colors: ColorConfig | None = None,
) -> VisibleBoxes:
    """Select and rescale the boxes intersecting the window.

    Ancestors above ``bounds.level`` receive the faded color. ``max_y`` is
    taken over all boxes so vertical scrolling is clamped against the full
    content height. An empty or inverted window shows no boxes.
    """
    visible: list[Box] = []
    span = bounds.max_x - bounds.min_x
    max_y = 0.0
    for box in boxes:
        if span > 0 and box.x1 < bounds.max_x and box.x2 > bounds.min_x:
            visible.append(
                replace(
                    box,
                    color=pick_color(box.frame, fade=True, config=colors)
                    if box.level < bounds.level
                    else box.color,
                    x1=max(0.0, (box.x1 - bounds.min_x) / span),
                    x2=min(1.0, (box.x2 - bounds.min_x) / span),
                )
            )

        max_y = max(box.y2, max_y)

    return VisibleBoxes(boxes=tuple(visible), max_y=max_y)
