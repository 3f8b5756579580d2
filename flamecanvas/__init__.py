"""flamecanvas: interactive flame graphs for sampled call tree profiles"""

from __future__ import annotations


__version__ = "0.1.0"

from flamecanvas import config, graph, interaction, model, viewport
from flamecanvas.interaction.controller import FlameGraphController
from flamecanvas.model.call_tree import CallTreeModel
from flamecanvas.utils.logging_config import setup_logging


__all__ = [
    "CallTreeModel",
    "FlameGraphController",
    "config",
    "graph",
    "interaction",
    "model",
    "viewport",
    "setup_logging",
    "__version__",
]
