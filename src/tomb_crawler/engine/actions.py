from __future__ import annotations

from enum import Enum


class PlayerAction(Enum):
    """Outcome of resolving one player input."""

    TOOK_TURN = "took_turn"
    DIDNT_TAKE_TURN = "didnt_take_turn"
    EXIT = "exit"


__all__ = ["PlayerAction"]
