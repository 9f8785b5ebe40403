from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Command(Enum):
    """Logical commands the turn handler understands.

    Physical keys are translated into these by :class:`InputMapper` so the game
    logic never deals with device specifics.
    """

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    EXIT = auto()
    TOGGLE_FULLSCREEN = auto()
    PICK_UP = auto()
    USE_ITEM = auto()


DIRECTIONS = {
    Command.MOVE_UP: (0, -1),
    Command.MOVE_DOWN: (0, 1),
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
}


@dataclass(frozen=True)
class KeyPress:
    """A key going down.

    Attributes:
        key: Canonical key name, e.g. "UP", "ESCAPE", "G", "1".
        alt: True if Alt was held.
        text: Printable text produced by the key, if any.
    """

    key: str
    alt: bool = False
    text: str = ""


@dataclass(frozen=True)
class MouseState:
    """Mouse position in map cells."""

    cx: int
    cy: int


# None stands for "no event this frame"
InputEvent = Optional[Union[KeyPress, MouseState]]


__all__ = ["Command", "DIRECTIONS", "InputEvent", "KeyPress", "MouseState"]
