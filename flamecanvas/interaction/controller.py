"""
Interactive flame graph controller.

Owns the mutable view state of one flame graph (window bounds, drag in
progress, keyboard focus and tooltip highlight) and turns host input events
into state transitions. Every piece of state is an immutable value that is
replaced on each transition.

Usage:
    from flamecanvas.interaction import FlameGraphController
    from flamecanvas.interaction.events import PointerEvent

    controller = FlameGraphController(model, on_open_document=host.open)
    controller.resize(CanvasSize(width=1200, height=600))
    controller.on_pointer_down(PointerEvent(x=300, y=60, timestamp=0))
    controller.on_pointer_up(PointerEvent(x=302, y=61, timestamp=120))  # click: zoom
    renderer.draw(controller.visible.boxes, controller.bounds)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from loguru import logger

from flamecanvas.config.base import FlameGraphConfig
from flamecanvas.display import (
    TooltipContent,
    TooltipPlacement,
    timeline_ticks,
    tooltip_content,
    tooltip_placement,
)
from flamecanvas.interaction.drag import (
    DragState,
    LockBound,
    drag_to,
    is_click,
    start_handle_drag,
    start_pan,
)
from flamecanvas.interaction.keyboard import KeyAction, classify_key
from flamecanvas.interaction.pipeline import FlameGraphPipeline
from flamecanvas.interaction.state import Highlight, HighlightSource, OpenDocumentRequest
from flamecanvas.interaction.zoom import wheel_zoom, zoom_to_box
from flamecanvas.viewport.bounds import FULL_BOUNDS, Bounds, CanvasSize
from flamecanvas.viewport.query import box_at_position, find_neighbor, index_of


if TYPE_CHECKING:
    from flamecanvas.display import TimelineTick
    from flamecanvas.graph.boxes import Box, BoxSet
    from flamecanvas.interaction.events import KeyEvent, PointerEvent, WheelEvent
    from flamecanvas.model.call_tree import CallTreeModel
    from flamecanvas.viewport.bounds import VisibleBoxes


OpenDocumentSink = Callable[[OpenDocumentRequest], None]


class FlameGraphController:
    """
    View state and input handling for one flame graph.

    Attributes:
        config: Layout, interaction and color settings
        canvas: Current size of the rendering surface
        bounds: Visible window
        drag: Pointer drag in progress, if any
        focused: Keyboard-focused box, if any
        highlight: Box shown in the tooltip, if any
    """

    def __init__(
        self,
        model: CallTreeModel,
        config: FlameGraphConfig | None = None,
        canvas: CanvasSize | None = None,
        on_open_document: OpenDocumentSink | None = None,
    ) -> None:
        self.config = config or FlameGraphConfig()
        self.pipeline = FlameGraphPipeline(self.config)
        self.canvas = canvas or CanvasSize()
        self.bounds: Bounds = FULL_BOUNDS
        self.drag: DragState | None = None
        self.focused: Box | None = None
        self.highlight: Highlight | None = None
        self._model = model
        self._on_open_document = on_open_document

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def model(self) -> CallTreeModel:
        return self._model

    @model.setter
    def model(self, model: CallTreeModel) -> None:
        if model is self._model:
            return
        self._model = model
        self.drag = None
        self.focused = None
        self.highlight = None

    @property
    def box_set(self) -> BoxSet:
        """All boxes in timeline coordinates."""
        return self.pipeline.boxes(self._model)

    @property
    def visible(self) -> VisibleBoxes:
        """Boxes inside the current window, in window coordinates."""
        return self.pipeline.visible(self._model, self.bounds)

    def resize(self, canvas: CanvasSize) -> None:
        self.canvas = canvas

    def box_under_cursor(self, x: float, y: float) -> Box | None:
        """Visible box under a canvas position; the timeline strip never hits."""
        if y < self.config.layout.timeline_height or self.canvas.width <= 0:
            return None
        return box_at_position(x / self.canvas.width, y + self.bounds.y, self.visible.boxes)

    def tooltip(self) -> tuple[TooltipContent, TooltipPlacement] | None:
        """Content and position of the tooltip for the current highlight."""
        if self.highlight is None:
            return None
        boxes = self.visible.boxes
        index = index_of(boxes, self.highlight.box.graph_id)
        if index < 0:
            return None
        box = boxes[index]
        keyboard = self.highlight.source is HighlightSource.KEYBOARD
        return tooltip_content(box, keyboard), tooltip_placement(box, self.bounds, self.canvas)

    def timeline(self) -> list[TimelineTick]:
        return timeline_ticks(
            self._model.duration,
            self.bounds,
            self.canvas.width,
            self.config.layout.timeline_label_spacing,
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Show the whole timeline again."""
        self.bounds = FULL_BOUNDS
        logger.debug("Reset bounds to the full timeline")

    def zoom_to_box(self, box: Box) -> None:
        """Fit the window to ``box`` (visible or raw) and focus it."""
        box_set = self.box_set
        original = box_set.find(box.graph_id)
        if original is None:
            return
        self.bounds = zoom_to_box(
            original,
            self.bounds,
            box_set.max_y,
            self.canvas.height,
            self.config.interaction.min_window,
        )
        self.focused = box
        logger.debug(
            f"Zoomed to '{original.text}' [{self.bounds.min_x:.4f}, {self.bounds.max_x:.4f}] "
            f"level {self.bounds.level}"
        )

    def open_box(self, box: Box, to_side: bool = False) -> OpenDocumentRequest | None:
        """Ask the host to open the source of ``box``.

        Boxes without a source path are ignored.
        """
        request = OpenDocumentRequest.for_box(box, to_side)
        if request is None:
            logger.debug(f"No source for '{box.text}', not opening")
            return None
        if self._on_open_document is not None:
            self._on_open_document(request)
        return request

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def on_focus(self) -> None:
        """Canvas gained focus: show the focused box, defaulting to the first."""
        if self.focused is not None:
            self.highlight = Highlight(self.focused, HighlightSource.KEYBOARD)
            return

        boxes = self.visible.boxes
        if boxes:
            self.focused = boxes[0]
            self.highlight = Highlight(boxes[0], HighlightSource.KEYBOARD)

    def on_key_down(self, event: KeyEvent) -> bool:
        """Handle a key press. Returns False for keys the graph ignores."""
        highlight = self.highlight
        action, direction = classify_key(
            event,
            keyboard_highlight=highlight is not None
            and highlight.source is HighlightSource.KEYBOARD,
            has_highlight=highlight is not None,
        )

        if action is KeyAction.IGNORE:
            return False

        if action is KeyAction.DISMISS:
            self.highlight = None
        elif action is KeyAction.RESET:
            self.reset()
        elif action is KeyAction.OPEN and highlight is not None:
            self.open_box(highlight.box, to_side=event.alt)
        elif action is KeyAction.ZOOM and self.focused is not None:
            self.zoom_to_box(self.focused)
        elif action is KeyAction.MOVE and self.focused is not None and direction is not None:
            target = find_neighbor(self.visible.boxes, self.focused, direction)
            if target is not None:
                self.focused = target
                self.highlight = Highlight(target, HighlightSource.KEYBOARD)

        return True

    # ------------------------------------------------------------------
    # Pointer
    # ------------------------------------------------------------------

    def on_pointer_down(self, event: PointerEvent) -> None:
        """Start panning the graph; ignored while the canvas has no width."""
        if self.canvas.width <= 0:
            return
        self.drag = start_pan(self.bounds, event.x, event.y, event.timestamp, self.canvas.width)

    def on_handle_down(self, event: PointerEvent, lock: LockBound = LockBound.NONE) -> None:
        """Start dragging the timeline handle.

        ``LockBound.NONE`` grabs the handle body, ``LockBound.MAX_X`` the
        left bookend and ``LockBound.MIN_X`` the right bookend.
        """
        if self.canvas.width <= 0:
            return
        self.drag = start_handle_drag(
            self.bounds, event.x, event.y, event.timestamp, self.canvas.width, lock
        )

    def on_pointer_move(self, event: PointerEvent) -> None:
        if self.drag is not None:
            self.bounds = self._drag_bounds(self.drag, event)
            return

        box = self.box_under_cursor(event.x, event.y)
        highlight = self.highlight
        if highlight is not None:
            # moving off every box keeps a keyboard tooltip open
            if box is None and highlight.source is HighlightSource.KEYBOARD:
                return
            if box is not None and highlight.box.graph_id == box.graph_id:
                return

        self.highlight = Highlight(box, HighlightSource.HOVER) if box is not None else None

    def on_pointer_up(self, event: PointerEvent) -> None:
        """Finish a drag; a short, small plain drag is treated as a click."""
        drag = self.drag
        if drag is None:
            return
        self.drag = None

        interaction = self.config.interaction
        if drag.is_pan and is_click(
            drag,
            event.x,
            event.y,
            event.timestamp,
            interaction.click_max_ms,
            interaction.click_max_px,
        ):
            box = self.box_under_cursor(event.x, event.y)
            if box is not None and event.command:
                self.open_box(box, to_side=event.alt)
            elif box is not None:
                self.zoom_to_box(box)
            else:
                self.reset()
            self.highlight = None
            return

        self.bounds = self._drag_bounds(drag, event)

    def on_pointer_leave(self, event: PointerEvent) -> None:
        self.on_pointer_up(event)
        self.highlight = None

    def on_wheel(self, event: WheelEvent) -> None:
        if self.canvas.width <= 0:
            return
        interaction = self.config.interaction
        self.bounds = wheel_zoom(
            self.bounds,
            event.x,
            self.canvas.width,
            event.delta_y,
            divisor=interaction.wheel_divisor,
            min_window=interaction.min_window,
        )

    def _drag_bounds(self, drag: DragState, event: PointerEvent) -> Bounds:
        return drag_to(
            drag,
            event.x,
            event.y,
            self.box_set.max_y,
            self.canvas.height,
            self.config.interaction.min_window,
        )
