# flamecanvas/model/call_tree.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Category(Enum):
    """Coarse origin of a location, as assigned by the profile model loader."""

    NONE = "none"
    USER = "user"
    MODULE = "module"
    SYSTEM = "system"
    DEEMPHASIZED = "deemphasized"


@dataclass(frozen=True)
class CallFrame:
    """Runtime call frame of a location."""

    function_name: str
    url: str = ""
    script_id: str = ""
    line_number: int = 0
    column_number: int = 0


@dataclass(frozen=True)
class SourceLocation:
    """Source-mapped position of a location on disk."""

    path: str | None
    line_number: int = 1
    column_number: int = 1
    relative_path: str | None = None


@dataclass(frozen=True)
class Location:
    """A distinct code location that samples can land in."""

    id: int
    call_frame: CallFrame
    category: Category = Category.NONE
    src: SourceLocation | None = None


@dataclass(frozen=True)
class ProfileNode:
    """Node of the call tree. ``parent`` is None for the root."""

    id: int
    location_id: int
    parent: int | None = None


@dataclass(frozen=True)
class CallTreeModel:
    """Structured call-tree profile consumed by the flame graph.

    Node and location ids are their positions in ``nodes`` and ``locations``.
    ``time_deltas[i]`` is the time elapsed before ``samples[i + 1]``; times are
    in microseconds.
    """

    nodes: tuple[ProfileNode, ...]
    locations: tuple[Location, ...]
    samples: tuple[int, ...]
    time_deltas: tuple[float, ...]
    duration: float
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CallTreeModel:
        """Build a model from its camelCase JSON representation.

        Raises:
            ValueError: If a required key is missing or has the wrong shape
        """
        try:
            locations = tuple(_location_from_dict(loc) for loc in data["locations"])
            nodes = tuple(
                ProfileNode(
                    id=int(node["id"]),
                    location_id=int(node["locationId"]),
                    parent=None if node.get("parent") is None else int(node["parent"]),
                )
                for node in data["nodes"]
            )
            return cls(
                nodes=nodes,
                locations=locations,
                samples=tuple(int(s) for s in data["samples"]),
                time_deltas=tuple(float(d) for d in data["timeDeltas"]),
                duration=float(data["duration"]),
                metadata=dict(data.get("metadata", {})),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed call tree model: {e!r}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase JSON representation."""
        return {
            "nodes": [
                {"id": n.id, "locationId": n.location_id, "parent": n.parent} for n in self.nodes
            ],
            "locations": [_location_to_dict(loc) for loc in self.locations],
            "samples": list(self.samples),
            "timeDeltas": list(self.time_deltas),
            "duration": self.duration,
            "metadata": self.metadata,
        }


def _location_from_dict(data: dict[str, Any]) -> Location:
    frame = data["callFrame"]
    src = data.get("src")
    return Location(
        id=int(data["id"]),
        category=Category(data.get("category", Category.NONE.value)),
        call_frame=CallFrame(
            function_name=frame["functionName"],
            url=frame.get("url", ""),
            script_id=str(frame.get("scriptId", "")),
            line_number=int(frame.get("lineNumber", 0)),
            column_number=int(frame.get("columnNumber", 0)),
        ),
        src=None
        if src is None
        else SourceLocation(
            path=src.get("source", {}).get("path"),
            line_number=int(src.get("lineNumber", 1)),
            column_number=int(src.get("columnNumber", 1)),
            relative_path=src.get("relativePath"),
        ),
    )


def _location_to_dict(location: Location) -> dict[str, Any]:
    frame = location.call_frame
    data: dict[str, Any] = {
        "id": location.id,
        "category": location.category.value,
        "callFrame": {
            "functionName": frame.function_name,
            "url": frame.url,
            "scriptId": frame.script_id,
            "lineNumber": frame.line_number,
            "columnNumber": frame.column_number,
        },
    }
    if location.src is not None:
        data["src"] = {
            "source": {"path": location.src.path},
            "lineNumber": location.src.line_number,
            "columnNumber": location.src.column_number,
            "relativePath": location.src.relative_path,
        }
    return data
