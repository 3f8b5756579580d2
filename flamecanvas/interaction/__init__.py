# Interaction state machines: drag, wheel zoom, keyboard focus
from __future__ import annotations

from flamecanvas.interaction.controller import FlameGraphController
from flamecanvas.interaction.drag import (
    DragState,
    LockBound,
    drag_to,
    is_click,
    start_handle_drag,
    start_pan,
)
from flamecanvas.interaction.events import KeyEvent, PointerEvent, WheelEvent
from flamecanvas.interaction.keyboard import KeyAction, classify_key
from flamecanvas.interaction.pipeline import FlameGraphPipeline, MemoizedStage
from flamecanvas.interaction.state import Highlight, HighlightSource, OpenDocumentRequest
from flamecanvas.interaction.zoom import wheel_zoom, zoom_to_box


__all__ = [
    "DragState",
    "FlameGraphController",
    "FlameGraphPipeline",
    "Highlight",
    "HighlightSource",
    "KeyAction",
    "KeyEvent",
    "LockBound",
    "MemoizedStage",
    "OpenDocumentRequest",
    "PointerEvent",
    "WheelEvent",
    "classify_key",
    "drag_to",
    "is_click",
    "start_handle_drag",
    "start_pan",
    "wheel_zoom",
    "zoom_to_box",
]
