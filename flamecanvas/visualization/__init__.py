# Rendering adapters for flame graph views
from __future__ import annotations

from flamecanvas.visualization.interactive import create_flame_graph_figure
from flamecanvas.visualization.static import FlameGraphPlotter

__all__: list[str] = ["create_flame_graph_figure", "FlameGraphPlotter"]
