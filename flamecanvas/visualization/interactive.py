"""
Interactive flame graph figure using Plotly.

Builds a web-ready figure from the visible boxes of a flame graph view, with
per-box hover text carrying the function, location and times shown in the
tooltip.

Usage:
    from flamecanvas.visualization.interactive import create_flame_graph_figure

    fig = create_flame_graph_figure(controller.visible.boxes, controller.bounds)
    fig.write_html("flame.html")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import plotly.graph_objects as go

from flamecanvas.display import format_ms, location_text


if TYPE_CHECKING:
    from flamecanvas.graph.boxes import Box
    from flamecanvas.viewport.bounds import Bounds


def create_flame_graph_figure(
    boxes: tuple[Box, ...],
    bounds: Bounds,
    duration: float | None = None,
    title: str = "Flame Graph",
) -> go.Figure:
    """
    Create an interactive flame graph.

    Args:
        boxes: Visible boxes (x in window fractions)
        bounds: Current window, used to label the x-axis in timeline time
        duration: Total profile duration [µs]; when given the x-axis shows ms
        title: Figure title

    Returns:
        Plotly Figure with one horizontal bar per box

    Notes:
        - Y-axis is stack depth with the root at the top
        - Bars keep the hash colors of the boxes, faded ancestors included
        - Returns a figure with an annotation if there is nothing to show
    """
    if not boxes:
        fig = go.Figure()
        fig.add_annotation(
            text="No samples in the visible window",
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font={"size": 16},
        )
        return fig

    if duration:
        scale = duration * bounds.range / 1000
        offset = duration * bounds.min_x / 1000
        x_title = "Time (ms)"
    else:
        scale, offset = 1.0, 0.0
        x_title = "Window fraction"

    hover = [
        f"<b>{b.text}</b><br>"
        + f"{location_text(b.frame.location) or '(native)'}<br>"
        + f"Self time: {format_ms(b.frame.self_time)}<br>"
        + f"Aggregate time: {format_ms(b.frame.aggregate_time)}"
        for b in boxes
    ]

    fig = go.Figure(
        go.Bar(
            x=[(b.x2 - b.x1) * scale for b in boxes],
            y=[b.level for b in boxes],
            base=[b.x1 * scale + offset for b in boxes],
            orientation="h",
            marker={
                "color": [b.color.light.to_css() for b in boxes],
                "line": {"color": "white", "width": 0.5},
            },
            text=[b.text for b in boxes],
            textposition="inside",
            insidetextanchor="start",
            hovertext=hover,
            hovertemplate="%{hovertext}<extra></extra>",
            showlegend=False,
        )
    )

    max_depth = max(b.level for b in boxes)
    fig.update_layout(
        title=title,
        xaxis_title=x_title,
        yaxis_title="Call Depth",
        barmode="overlay",
        bargap=0.05,
        height=max(400, max_depth * 30 + 150),
        hovermode="closest",
        template="plotly_white",
        yaxis={"dtick": 1, "autorange": "reversed"},
    )

    return fig
