from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..colors import Color
from .components import AiKind, Fighter, ItemKind


@dataclass
class Entity:
    """A generic object on the map: the player, a monster or an item.

    ``eid`` is a stable handle assigned by :class:`EntityStore`; it never changes
    and is never reused, so callers address entities by handle instead of by
    position in the collection.
    """

    x: int
    y: int
    glyph: str
    name: str
    color: Color
    blocks: bool = False
    alive: bool = False
    fighter: Optional[Fighter] = None
    ai: Optional[AiKind] = None
    item: Optional[ItemKind] = None
    eid: int = -1

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def distance_to(self, other: "Entity") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def __repr__(self) -> str:
        hp = f" hp={self.fighter.hp}/{self.fighter.max_hp}" if self.fighter else ""
        return f"Entity(#{self.eid} {self.name}@{self.x},{self.y}{hp})"
