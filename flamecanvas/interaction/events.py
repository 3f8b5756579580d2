"""Input events delivered by the host's event plumbing.

Pointer coordinates are relative to the canvas top-left corner in CSS pixels
and timestamps are in milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float
    timestamp: float = 0.0
    ctrl: bool = False
    meta: bool = False
    alt: bool = False

    @property
    def command(self) -> bool:
        """Ctrl on Windows/Linux, Cmd on macOS."""
        return self.ctrl or self.meta


@dataclass(frozen=True)
class WheelEvent:
    x: float
    delta_y: float


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl: bool = False
    meta: bool = False
    alt: bool = False

    @property
    def command(self) -> bool:
        return self.ctrl or self.meta
