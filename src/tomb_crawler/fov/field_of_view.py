from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Set, Tuple

from ..map.tiles import GameMap
from .fov import compute_fov

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class FieldOfView:
    """
    Tracks what the player currently sees and feeds the map's explored flags.

    Responsibilities:
    - Keeps the live visible set, computed from the last origin.
    - Marks every visible tile explored (permanently) on each recompute.
    - Decides whether a recompute is needed: only when the origin moved.

    The recompute decision is made by the caller via :meth:`should_recompute`
    and passed to :meth:`refresh`, so the render step never recomputes blindly.
    """

    def __init__(self, game_map: GameMap, radius: int = 10, light_walls: bool = True) -> None:
        if radius < 0:
            raise ValueError("radius must be >= 0")
        self.game_map = game_map
        self.radius = radius
        self.light_walls = light_walls
        self._visible: Set[Coord] = set()
        self._origin: Optional[Coord] = None
        self.recompute_count = 0

    def should_recompute(self, origin: Coord) -> bool:
        return self._origin != origin

    def recompute(self, origin: Coord) -> None:
        self._visible = compute_fov(self.game_map, origin, self.radius, self.light_walls)
        self._origin = origin
        self.recompute_count += 1
        self.game_map.mark_explored(self._visible)
        logger.debug("FieldOfView recomputed at %s: %d visible", origin, len(self._visible))

    def refresh(self, origin: Coord, should_recompute: bool) -> bool:
        """Recompute if told to. Returns whether a recompute happened."""
        if should_recompute:
            self.recompute(origin)
            return True
        return False

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self._visible

    def visible_tiles(self) -> FrozenSet[Coord]:
        return frozenset(self._visible)
