# flamecanvas/interaction/state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from flamecanvas.graph.boxes import Box


class HighlightSource(Enum):
    HOVER = "hover"
    KEYBOARD = "keyboard"


@dataclass(frozen=True)
class Highlight:
    """Box shown in the tooltip and where the highlight came from."""

    box: Box
    source: HighlightSource


@dataclass(frozen=True)
class OpenDocumentRequest:
    """Ask the host to open a source file at a position."""

    path: str
    line_number: int
    column_number: int
    to_side: bool = False

    @classmethod
    def for_box(cls, box: Box, to_side: bool = False) -> OpenDocumentRequest | None:
        """Request for the box's source, or None when it has no source path."""
        src = box.frame.location.src
        if src is None or not src.path:
            return None
        return cls(
            path=src.path,
            line_number=src.line_number,
            column_number=src.column_number,
            to_side=to_side,
        )
