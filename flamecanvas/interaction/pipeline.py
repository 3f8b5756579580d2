"""
Memoized recomputation graph for flame graph geometry.

The stages form a chain:

    model -> columns -> box set -> visible boxes

Each stage remembers its last inputs and recomputes only when one of them
changes. Objects are compared by identity and plain numbers by value, so a
new model object rebuilds everything while a pan that keeps the same window
edges reuses the visible boxes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from loguru import logger

from flamecanvas.config.base import FlameGraphConfig
from flamecanvas.graph.boxes import build_boxes
from flamecanvas.graph.columns import build_columns
from flamecanvas.viewport.bounds import Bounds, get_bounded_boxes


if TYPE_CHECKING:
    from flamecanvas.graph.boxes import BoxSet
    from flamecanvas.graph.columns import Column
    from flamecanvas.model.call_tree import CallTreeModel
    from flamecanvas.viewport.bounds import VisibleBoxes


R = TypeVar("R")


def _same(a: Any, b: Any) -> bool:
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    return a is b


class MemoizedStage(Generic[R]):
    """Single-entry cache around a pure function."""

    def __init__(self, name: str, fn: Callable[..., R]) -> None:
        self.name = name
        self._fn = fn
        self._inputs: tuple[Any, ...] | None = None
        self._output: R | None = None
        self.computations = 0

    def __call__(self, *inputs: Any) -> R:
        cached = self._inputs
        if (
            cached is None
            or len(cached) != len(inputs)
            or not all(_same(a, b) for a, b in zip(cached, inputs))
        ):
            self._output = self._fn(*inputs)
            self._inputs = inputs
            self.computations += 1
            logger.debug(f"Recomputed stage '{self.name}' ({self.computations})")
        return self._output  # type: ignore[return-value]

    def clear(self) -> None:
        self._inputs = None
        self._output = None


class FlameGraphPipeline:
    """Geometry stages for one flame graph view."""

    def __init__(self, config: FlameGraphConfig | None = None) -> None:
        self.config = config or FlameGraphConfig()
        self.columns_stage: MemoizedStage[list[Column]] = MemoizedStage("columns", build_columns)
        self.boxes_stage: MemoizedStage[BoxSet] = MemoizedStage("boxes", self._build_boxes)
        self.visible_stage: MemoizedStage[VisibleBoxes] = MemoizedStage(
            "visible", self._bound_boxes
        )

    def _build_boxes(self, columns: list[Column]) -> BoxSet:
        return build_boxes(columns, self.config.layout, self.config.colors)

    def _bound_boxes(self, box_set: BoxSet, min_x: float, max_x: float, level: int) -> VisibleBoxes:
        bounds = Bounds(min_x=min_x, max_x=max_x, level=level)
        return get_bounded_boxes(box_set.boxes, bounds, self.config.colors)

    def columns(self, model: CallTreeModel) -> list[Column]:
        return self.columns_stage(model)

    def boxes(self, model: CallTreeModel) -> BoxSet:
        return self.boxes_stage(self.columns(model))

    def visible(self, model: CallTreeModel, bounds: Bounds) -> VisibleBoxes:
        return self.visible_stage(self.boxes(model), bounds.min_x, bounds.max_x, bounds.level)
