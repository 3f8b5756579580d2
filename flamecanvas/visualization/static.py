"""
Module: flamecanvas.visualization.static
Purpose: Rasterize the visible flame graph with Matplotlib
Dependencies: matplotlib, numpy

Description:
    Draws the boxes of the current window onto a figure sized like the
    canvas: one rectangle per visible box, a label when the box is wide
    enough, the timeline strip with its tick labels and, optionally, the
    focused and highlighted boxes. Figures are managed through a context
    manager so they are closed after saving.
"""

from __future__ import annotations

import gc
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from flamecanvas.config.base import LayoutConfig


if TYPE_CHECKING:
    from flamecanvas.display import TimelineTick
    from flamecanvas.graph.boxes import Box
    from flamecanvas.viewport.bounds import Bounds, CanvasSize


TEXT_COLOR = "#ffffff"
TIMELINE_COLOR = "#333333"
FOCUS_COLOR = "#0090f1"
MIN_LABEL_WIDTH = 10.0


class FlameGraphPlotter:
    """Static flame graph renderer.

    Parameters
    ----------
    layout : LayoutConfig, optional
        Row and timeline geometry. If None, uses defaults.
    dpi : int, optional
        Dots per inch used to convert canvas pixels to inches (default: 100).

    Examples
    --------
    >>> with FlameGraphPlotter() as plotter:
    ...     plotter.plot(controller.visible.boxes, controller.bounds, controller.canvas)
    ...     plotter.save("flame.png")
    """

    def __init__(self, layout: LayoutConfig | None = None, dpi: int = 100) -> None:
        self.layout = layout or LayoutConfig()
        self.dpi = dpi
        self._fig: Figure | None = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.cleanup()

    @property
    def figure(self) -> Figure | None:
        return self._fig

    def plot(
        self,
        boxes: tuple[Box, ...],
        bounds: Bounds,
        canvas: CanvasSize,
        ticks: list[TimelineTick] | None = None,
        focused_id: int | None = None,
        highlighted_id: int | None = None,
    ) -> Figure:
        """Draw visible boxes.

        Parameters
        ----------
        boxes : tuple[Box, ...]
            Visible boxes (x in window fractions, y in content pixels).
        bounds : Bounds
            Current window; ``bounds.y`` scrolls the rows.
        canvas : CanvasSize
            Output size in pixels.
        ticks : list[TimelineTick], optional
            Timeline labels to draw in the strip above the rows.
        focused_id, highlighted_id : int, optional
            Graph ids drawn with a focus border / the dark fill.

        Returns
        -------
        Figure
            Matplotlib figure of ``canvas`` size.

        Notes
        -----
        - Rows scrolled off the canvas are skipped
        - Labels are drawn only for boxes wider than 10 px and clipped to the box
        - Y-axis is inverted so the root row is at the top
        """
        self.cleanup()
        width, height = canvas.width, canvas.height
        fig, ax = plt.subplots(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)
        fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        self._fig = fig

        if boxes:
            coords = np.array([[b.x1, b.x2, b.y1, b.y2] for b in boxes], dtype=float)
            coords[:, :2] *= width
            coords[:, 2:] -= bounds.y
            on_screen = (coords[:, 3] >= 0) & (coords[:, 2] <= height)
        else:
            coords = np.empty((0, 4))
            on_screen = np.zeros(0, dtype=bool)

        for box, (x1, x2, y1, y2), shown in zip(boxes, coords, on_screen):
            if not shown:
                continue

            color = box.color.dark if box.graph_id == highlighted_id else box.color.light
            rect = mpatches.Rectangle(
                (x1, y1),
                x2 - x1,
                y2 - y1 - 1,
                facecolor=color.to_rgb(),
                edgecolor=FOCUS_COLOR if box.graph_id == focused_id else "none",
                linewidth=2 if box.graph_id == focused_id else 0,
            )
            ax.add_patch(rect)

            if x2 - x1 > MIN_LABEL_WIDTH:
                text = ax.text(
                    x1 + 3,
                    (y1 + y2) / 2,
                    box.text,
                    ha="left",
                    va="center",
                    color=TEXT_COLOR,
                    fontsize=8,
                )
                text.set_clip_path(rect)

        self._draw_timeline(ax, width, ticks or [])

        ax.set_xlim(0, width)
        ax.set_ylim(0, height)
        ax.invert_yaxis()
        ax.set_axis_off()

        return fig

    def _draw_timeline(self, ax: Any, width: float, ticks: list[TimelineTick]) -> None:
        strip = self.layout.timeline_height
        ax.add_patch(
            mpatches.Rectangle((0, 0), width, strip, facecolor="white", edgecolor="none", zorder=3)
        )
        for tick in ticks:
            ax.plot([tick.x, tick.x], [0, strip], color=TIMELINE_COLOR, linewidth=0.5, zorder=4)
            ax.text(
                tick.x - 3,
                strip / 2,
                tick.label,
                ha="right",
                va="center",
                color=TIMELINE_COLOR,
                fontsize=7,
                zorder=4,
            )

    def save(self, path: str | Path, **kwargs: Any) -> None:
        """Save current figure to file.

        Raises
        ------
        RuntimeError
            If no figure exists (plot() not called)
        """
        if self._fig is None:
            raise RuntimeError("No figure to save. Call plot() first.")
        self._fig.savefig(path, dpi=self.dpi, **kwargs)

    def cleanup(self) -> None:
        """Close the current figure."""
        if self._fig is not None:
            plt.close(self._fig)
            self._fig = None
            gc.collect()
