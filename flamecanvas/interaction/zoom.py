# flamecanvas/interaction/zoom.py
from __future__ import annotations

from typing import TYPE_CHECKING

from flamecanvas.viewport.bounds import Bounds, clamp, clamp_scroll


if TYPE_CHECKING:
    from flamecanvas.graph.boxes import Box


def zoom_to_box(
    box: Box,
    bounds: Bounds,
    max_y: float,
    viewport_height: float,
    min_window: float = 0.005,
) -> Bounds:
    """Fit the window to ``box`` and fade everything above its level.

    ``box`` must be in timeline coordinates (not rescaled to a window). The
    scroll offset only jumps when the box top is below the visible area.
    Boxes narrower than ``min_window`` (zero-time samples) get a window of
    that width centred on them, kept inside [0, 1].
    """
    min_x, max_x = box.x1, box.x2
    if max_x - min_x < min_window:
        center = (min_x + max_x) / 2
        min_x = clamp(0.0, center - min_window / 2, 1.0 - min_window)
        max_x = min_x + min_window

    y = box.y1 if box.y1 > bounds.y + viewport_height else bounds.y
    return Bounds(
        min_x=min_x,
        max_x=max_x,
        y=clamp_scroll(y, max_y, viewport_height),
        level=box.level,
    )


def wheel_zoom(
    bounds: Bounds,
    cursor_x: float,
    canvas_width: float,
    delta_y: float,
    divisor: float = 400.0,
    min_window: float = 0.005,
) -> Bounds:
    """Zoom around the timeline position under the cursor.

    Positive ``delta_y`` zooms in. A zoom-in step is limited so the window
    never shrinks below ``min_window`` or inverts.

    Parameters
    ----------
    bounds : Bounds
        Current window.
    cursor_x : float
        Cursor position relative to the canvas left edge [px].
    canvas_width : float
        Canvas width [px].
    delta_y : float
        Wheel delta; ``divisor`` units shrink the window onto the cursor.
    divisor : float, optional
        Wheel units per full zoom (default: 400).
    min_window : float, optional
        Smallest window fraction a zoom step may produce (default: 0.005).

    Returns
    -------
    Bounds
        New window with unchanged ``y`` and ``level``.
    """
    span = bounds.range
    center = bounds.min_x + (span * clamp(0, cursor_x, canvas_width)) / canvas_width
    scale = delta_y / divisor
    if span > 0:
        scale = min(scale, max(0.0, 1 - min_window / span))

    return Bounds(
        min_x=max(0.0, bounds.min_x + scale * (center - bounds.min_x)),
        max_x=min(1.0, bounds.max_x - scale * (bounds.max_x - center)),
        y=bounds.y,
        level=bounds.level,
    )
