# flamecanvas/interaction/keyboard.py
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from flamecanvas.viewport.query import Direction


if TYPE_CHECKING:
    from flamecanvas.interaction.events import KeyEvent


class KeyAction(Enum):
    """What a key press asks the flame graph to do."""

    DISMISS = "dismiss"  # hide the keyboard tooltip
    RESET = "reset"  # back to the full window
    ZOOM = "zoom"  # zoom to the focused box
    OPEN = "open"  # open the highlighted box's source
    MOVE = "move"  # move focus in a direction
    IGNORE = "ignore"


ARROW_DIRECTIONS = {
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
}

_SPACE_KEYS = (" ", "Space", "Spacebar")


def classify_key(
    event: KeyEvent,
    keyboard_highlight: bool,
    has_highlight: bool,
) -> tuple[KeyAction, Direction | None]:
    """Map a key press to an action.

    ``keyboard_highlight`` tells whether the current tooltip came from
    keyboard focus; Escape closes it before resetting the window.
    """
    if event.key == "Escape":
        return (KeyAction.DISMISS if keyboard_highlight else KeyAction.RESET), None

    if event.key == "Enter":
        if event.command and has_highlight:
            return KeyAction.OPEN, None
        return KeyAction.ZOOM, None

    if event.key in _SPACE_KEYS:
        return KeyAction.ZOOM, None

    direction = ARROW_DIRECTIONS.get(event.key)
    if direction is not None:
        return KeyAction.MOVE, direction

    return KeyAction.IGNORE, None
