# flamecanvas/interaction/drag.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from flamecanvas.viewport.bounds import Bounds, clamp


class LockBound(IntFlag):
    """Parts of the window pinned while a drag is in progress."""

    NONE = 0
    Y = 1 << 0
    MIN_X = 1 << 1
    MAX_X = 1 << 2


@dataclass(frozen=True)
class DragState:
    """Snapshot taken when a pointer drag starts."""

    timestamp: float
    x_origin: float
    y_origin: float
    original: Bounds
    x_per_pixel: float
    lock: LockBound = LockBound.NONE

    @property
    def is_pan(self) -> bool:
        return self.lock == LockBound.NONE


def start_pan(bounds: Bounds, x: float, y: float, timestamp: float, canvas_width: float) -> DragState:
    """Start grabbing the graph itself: content follows the pointer."""
    return DragState(
        timestamp=timestamp,
        x_origin=x,
        y_origin=y,
        original=bounds,
        x_per_pixel=bounds.range / canvas_width,
        lock=LockBound.NONE,
    )


def start_handle_drag(
    bounds: Bounds,
    x: float,
    y: float,
    timestamp: float,
    canvas_width: float,
    lock: LockBound,
) -> DragState:
    """Start dragging the timeline handle.

    The handle maps the full timeline onto the canvas, so the window edges
    follow the pointer. ``LockBound.MAX_X`` drags the left edge,
    ``LockBound.MIN_X`` drags the right edge and ``LockBound.NONE`` moves the
    whole window. Vertical scrolling is always locked.
    """
    return DragState(
        timestamp=timestamp,
        x_origin=x,
        y_origin=y,
        original=bounds,
        x_per_pixel=-1 / canvas_width,
        lock=lock | LockBound.Y,
    )


def drag_to(
    drag: DragState,
    x: float,
    y: float,
    max_y: float,
    viewport_height: float,
    min_window: float = 0.005,
) -> Bounds:
    """Bounds for the pointer at ``(x, y)`` during ``drag``."""
    original = drag.original
    lock = drag.lock
    span = original.range
    dx = (x - drag.x_origin) * drag.x_per_pixel

    if not lock & LockBound.MIN_X:
        upper = original.max_x - min_window if lock & LockBound.MAX_X else 1 - span
        min_x = clamp(0, original.min_x - dx, upper)
        max_x = original.max_x if lock & LockBound.MAX_X else min(1.0, min_x + span)
    else:
        min_x = original.min_x
        max_x = clamp(min_x + min_window, original.max_x - dx, 1)

    if lock & LockBound.Y:
        new_y = original.y
    else:
        new_y = clamp(0, original.y - (y - drag.y_origin), max_y - viewport_height)

    return Bounds(min_x=min_x, max_x=max_x, y=new_y, level=original.level)


def is_click(
    drag: DragState,
    x: float,
    y: float,
    timestamp: float,
    max_ms: float = 500.0,
    max_px: float = 100.0,
) -> bool:
    """Whether a released drag was short and small enough to be a click."""
    return (
        timestamp - drag.timestamp < max_ms
        and abs(x - drag.x_origin) < max_px
        and abs(y - drag.y_origin) < max_px
    )
