from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


@dataclass
class Tile:
    """A tile of the map and its properties.

    ``blocked`` and ``block_sight`` are fixed once generation finishes; only
    ``explored`` changes afterwards, and only from False to True.
    """

    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)


class GameMap:
    """
    Fixed-size grid of tiles addressed by (x, y).

    Coordinate system is 0-based: x in [0, width), y in [0, height), with (0, 0)
    at the top-left. A new map is solid rock (all walls).
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("GameMap width/height must be > 0")
        self.width = width
        self.height = height
        self._tiles: List[List[Tile]] = [[Tile.wall() for _ in range(width)] for _ in range(height)]
        logger.debug("GameMap created: %dx%d", width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile ({x},{y}) out of bounds for {self.width}x{self.height} map")
        return self._tiles[y][x]

    def is_blocked_tile(self, x: int, y: int) -> bool:
        return self.tile(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self._tiles[y][x].block_sight

    def carve(self, x: int, y: int) -> None:
        """Turn a cell into open floor. Only the dungeon generator calls this."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cannot carve ({x},{y}) outside the map")
        self._tiles[y][x] = Tile.empty()

    # ---------- Exploration ----------
    def mark_explored(self, cells: Iterable[Coord]) -> None:
        for x, y in cells:
            self.tile(x, y).explored = True

    def is_explored(self, x: int, y: int) -> bool:
        return self.tile(x, y).explored

    def explored_count(self) -> int:
        return sum(1 for row in self._tiles for t in row if t.explored)

    def rows(self) -> List[List[Tile]]:
        """Row-major view (``rows()[y][x]``) for renderers. Do not mutate."""
        return self._tiles

    @classmethod
    def from_ascii(cls, rows: Sequence[str], wall_chars: Iterable[str] = ("#",)) -> "GameMap":
        """
        Build a GameMap from ASCII rows for tests/tools.
        - Any char in wall_chars is a wall (blocked, blocks sight).
        - All others are open floor.
        """
        if not rows:
            raise ValueError("rows must not be empty")
        height = len(rows)
        width = len(rows[0])
        for r in rows:
            if len(r) != width:
                raise ValueError("All rows must be same width")
        game_map = cls(width, height)
        wall_set = set(wall_chars)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch not in wall_set:
                    game_map.carve(x, y)
        return game_map

    def __repr__(self) -> str:
        return f"GameMap({self.width}x{self.height})"
