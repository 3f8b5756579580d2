# flamecanvas/graph/columns.py
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from loguru import logger


if TYPE_CHECKING:
    from flamecanvas.model.call_tree import CallTreeModel, Location


@dataclass
class Frame:
    """First occurrence of a stack frame at some depth of a column."""

    location: Location
    graph_id: int
    self_time: float = 0.0
    aggregate_time: float = 0.0

    @property
    def location_id(self) -> int:
        return self.location.id

    def merge_in(self, other: Frame) -> None:
        """Accumulate the times of a frame that continues this one."""
        self.self_time += other.self_time
        self.aggregate_time += other.aggregate_time


@dataclass(frozen=True)
class FrameRef:
    """Slot merged into the canonical Frame held by an earlier column."""

    column: int


Slot = Union[Frame, FrameRef]


@dataclass
class Column:
    """One sample's stack, root first, and its share of the timeline."""

    width: float
    rows: list[Slot] = field(default_factory=list)


def resolve(columns: list[Column], column_index: int, depth: int) -> Frame:
    """Return the canonical Frame for a slot, following a reference if needed."""
    slot = columns[column_index].rows[depth]
    if isinstance(slot, FrameRef):
        slot = columns[slot.column].rows[depth]
    return slot


def walk_samples(model: CallTreeModel) -> list[Column]:
    """Convert every sample into a column of frames, root to leaf.

    The first and last samples bound the profiling window and are skipped.
    The sampled node is the leaf and carries the self time; each ancestor
    carries it as aggregate time.
    """
    graph_ids = itertools.count()
    columns: list[Column] = []

    for i in range(1, len(model.samples) - 1):
        leaf = model.nodes[model.samples[i]]
        self_time = model.time_deltas[i - 1]
        rows: list[Slot] = [
            Frame(
                location=model.locations[leaf.location_id],
                graph_id=next(graph_ids),
                self_time=self_time,
                aggregate_time=0.0,
            )
        ]

        parent = leaf.parent
        while parent is not None:
            node = model.nodes[parent]
            rows.append(
                Frame(
                    location=model.locations[node.location_id],
                    graph_id=next(graph_ids),
                    self_time=0.0,
                    aggregate_time=self_time,
                )
            )
            parent = node.parent

        rows.reverse()
        width = self_time / model.duration if model.duration else 0.0
        columns.append(Column(width=width, rows=rows))

    return columns


def merge_columns(columns: list[Column]) -> list[Column]:
    """Merge each column into its predecessor along their shared stack prefix.

    Comparison stops at the first depth where the two stacks differ: frames
    below a divergence belong to a different call path even if they match.
    References always point at the column that owns the canonical Frame.
    Columns are modified in place and returned.
    """
    for x in range(1, len(columns)):
        col = columns[x]
        prev = columns[x - 1]
        for y in range(len(col.rows)):
            if y >= len(prev.rows):
                break

            prev_slot = prev.rows[y]
            owner = prev_slot.column if isinstance(prev_slot, FrameRef) else x - 1
            canonical = resolve(columns, owner, y)
            current = col.rows[y]
            if canonical.location_id != current.location_id:
                break

            col.rows[y] = FrameRef(owner)
            canonical.merge_in(current)

    return columns


def build_columns(model: CallTreeModel) -> list[Column]:
    """Walk and merge the samples of a model."""
    columns = merge_columns(walk_samples(model))
    logger.debug(f"Built {len(columns)} columns from {len(model.samples)} samples")
    return columns
