"""
Text and placement helpers for the flame graph chrome.

Covers the tooltip shown for the highlighted box, the location label of a
frame and the tick labels of the timeline strip. Everything here is pure and
in CSS pixels; drawing is left to the rendering backend.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np


if TYPE_CHECKING:
    from flamecanvas.graph.boxes import Box
    from flamecanvas.model.call_tree import Location
    from flamecanvas.viewport.bounds import Bounds, CanvasSize


TOOLTIP_WIDTH = 400
TOOLTIP_CLEARANCE = 300
TOOLTIP_OFFSET = 10


def format_ms(microseconds: float) -> str:
    """Format a microsecond duration as milliseconds with two decimals."""
    return f"{microseconds / 1000:,.2f}ms"


def format_significant(value: float, digits: int = 3) -> str:
    """Format ``value`` with a fixed number of significant digits."""
    if value == 0:
        return f"{0:.{digits - 1}f}"
    exponent = math.floor(math.log10(abs(value)))
    decimals = digits - 1 - exponent
    return f"{round(value, decimals):,.{max(0, decimals)}f}"


def location_text(location: Location) -> str | None:
    """Human-readable position of a location, or None for native frames."""
    frame = location.call_frame
    if not frame.url:
        return None

    src = location.src
    if src is None or src.path is None:
        return f"{frame.url}:{frame.line_number}:{frame.column_number}"

    if src.relative_path:
        return f"{src.relative_path}:{src.line_number}"

    return f"{src.path}:{src.line_number}"


def file_name(label: str) -> str:
    """Last path component of a location label (either separator)."""
    return re.split(r"[\\/]", label)[-1]


@dataclass(frozen=True)
class TooltipContent:
    function: str
    label: str | None
    file: str | None
    self_time: str
    aggregate_time: str
    hint: str | None


@dataclass(frozen=True)
class TooltipPlacement:
    """CSS position of the tooltip; exactly one of ``top``/``bottom`` is set."""

    left: float
    top: float | None
    bottom: float | None


def tooltip_content(box: Box, keyboard: bool = False) -> TooltipContent:
    """Tooltip text for ``box``.

    The jump hint is only offered when the location maps to a source file,
    and names Enter or Click depending on how the box was highlighted.
    """
    location = box.frame.location
    label = location_text(location)
    hint = None
    if location.src is not None:
        hint = f"Ctrl+{'Enter' if keyboard else 'Click'} to jump to file"

    return TooltipContent(
        function=location.call_frame.function_name,
        label=label,
        file=file_name(label) if label else None,
        self_time=format_ms(box.frame.self_time),
        aggregate_time=format_ms(box.frame.aggregate_time),
        hint=hint,
    )


def tooltip_placement(box: Box, bounds: Bounds, canvas: CanvasSize) -> TooltipPlacement:
    """Place the tooltip below the box, or above it near the bottom edge.

    ``box`` is a visible box, so ``x1`` is a fraction of the canvas width.
    """
    upper_y = box.y1 - bounds.y
    lower_y = box.y2 - bounds.y
    above = lower_y + TOOLTIP_CLEARANCE > canvas.height and lower_y > canvas.height / 2
    left = min(canvas.width - TOOLTIP_WIDTH, canvas.width * box.x1 + TOOLTIP_OFFSET)
    if above:
        return TooltipPlacement(left=left, top=None, bottom=upper_y + TOOLTIP_OFFSET)
    return TooltipPlacement(left=left, top=lower_y + TOOLTIP_OFFSET, bottom=None)


@dataclass(frozen=True)
class TimelineTick:
    x: float
    label: str


def timeline_ticks(
    duration: float,
    bounds: Bounds,
    canvas_width: float,
    spacing: float = 200.0,
) -> list[TimelineTick]:
    """Evenly spaced time labels for the visible window.

    Parameters
    ----------
    duration : float
        Total profile duration [µs].
    bounds : Bounds
        Current window.
    canvas_width : float
        Canvas width [px].
    spacing : float, optional
        Target distance between labels [px] (default: 200).

    Returns
    -------
    list[TimelineTick]
        One tick per label; tick ``i`` sits at the right end of the ``i``-th
        segment and shows the time at that position.
    """
    labels = round(canvas_width / spacing)
    if labels <= 0:
        return []

    step = canvas_width / labels
    fractions = np.arange(1, labels + 1) / labels
    times = duration * (fractions * bounds.range + bounds.min_x)
    return [
        TimelineTick(x=float(i * step), label=f"{format_significant(t / 1000)}ms")
        for i, t in zip(range(1, labels + 1), times.tolist())
    ]
