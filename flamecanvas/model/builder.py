# flamecanvas/model/builder.py
from __future__ import annotations

from typing import Sequence

from flamecanvas.model.call_tree import (
    CallFrame,
    CallTreeModel,
    Category,
    Location,
    ProfileNode,
    SourceLocation,
)


class CallTreeBuilder:
    """Build a call tree model from in-memory stacks.

    Each stack is a sequence of function names, root first. One location is
    created per distinct function name and one node per distinct stack prefix,
    so the same function reached through different paths shares a location
    but not a node.

    Examples
    --------
    >>> builder = CallTreeBuilder(sources={"main": "/src/app.py"})
    >>> model = builder.build([["main", "work"], ["main"]], deltas=[2000, 500])
    >>> model.duration
    2500.0
    """

    def __init__(
        self,
        sources: dict[str, str] | None = None,
        categories: dict[str, Category] | None = None,
    ) -> None:
        self.sources = sources or {}
        self.categories = categories or {}
        self._locations: list[Location] = []
        self._location_ids: dict[str, int] = {}
        self._nodes: list[ProfileNode] = []
        self._node_ids: dict[tuple[str, ...], int] = {}

    def _location_for(self, name: str) -> int:
        if name not in self._location_ids:
            loc_id = len(self._locations)
            path = self.sources.get(name)
            self._locations.append(
                Location(
                    id=loc_id,
                    category=self.categories.get(name, Category.USER),
                    call_frame=CallFrame(
                        function_name=name,
                        url=f"file://{path}" if path else "",
                        line_number=loc_id,
                    ),
                    src=SourceLocation(path=path, line_number=loc_id + 1, column_number=1)
                    if path
                    else None,
                )
            )
            self._location_ids[name] = loc_id
        return self._location_ids[name]

    def _node_for(self, path: tuple[str, ...]) -> int:
        if path not in self._node_ids:
            parent = self._node_for(path[:-1]) if len(path) > 1 else None
            node_id = len(self._nodes)
            self._nodes.append(
                ProfileNode(id=node_id, location_id=self._location_for(path[-1]), parent=parent)
            )
            self._node_ids[path] = node_id
        return self._node_ids[path]

    def build(
        self,
        stacks: Sequence[Sequence[str]],
        deltas: Sequence[float] | None = None,
    ) -> CallTreeModel:
        """Build a model whose visible samples are exactly ``stacks``.

        A boundary sample is added before the first and after the last stack
        so that every stack becomes a column; ``deltas[i]`` is the time of
        ``stacks[i]`` (default 1 ms each) and the duration is their sum.

        Raises:
            ValueError: If a stack is empty or the deltas do not match the stacks
        """
        if any(len(s) == 0 for s in stacks):
            raise ValueError("Stacks must contain at least one frame")
        times = [float(d) for d in deltas] if deltas is not None else [1000.0] * len(stacks)
        if len(times) != len(stacks):
            raise ValueError(f"Expected {len(stacks)} deltas, got {len(times)}")

        sample_nodes = [self._node_for(tuple(s)) for s in stacks]
        samples = [sample_nodes[0], *sample_nodes, sample_nodes[-1]] if sample_nodes else []

        return CallTreeModel(
            nodes=tuple(self._nodes),
            locations=tuple(self._locations),
            samples=tuple(samples),
            time_deltas=tuple(times + [0.0, 0.0]) if samples else (),
            duration=sum(times),
        )


def build_model_from_stacks(
    stacks: Sequence[Sequence[str]],
    deltas: Sequence[float] | None = None,
    sources: dict[str, str] | None = None,
    categories: dict[str, Category] | None = None,
) -> CallTreeModel:
    """Shorthand for ``CallTreeBuilder(sources, categories).build(stacks, deltas)``."""
    return CallTreeBuilder(sources=sources, categories=categories).build(stacks, deltas)
