# Call tree input model
from __future__ import annotations

from flamecanvas.model.call_tree import (
    CallFrame,
    CallTreeModel,
    Category,
    Location,
    ProfileNode,
    SourceLocation,
)
from flamecanvas.model.builder import CallTreeBuilder, build_model_from_stacks
from flamecanvas.model.storage import load_model, save_model


__all__ = [
    "CallFrame",
    "CallTreeBuilder",
    "CallTreeModel",
    "Category",
    "Location",
    "ProfileNode",
    "SourceLocation",
    "build_model_from_stacks",
    "load_model",
    "save_model",
]
