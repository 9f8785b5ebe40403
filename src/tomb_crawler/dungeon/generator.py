from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..entities.entity import Entity
from ..entities.factories import make_item, make_monster
from ..map.tiles import GameMap
from ..movement import is_blocked
from ..rng import RandomSource
from ..settings import DungeonSettings, ItemTemplate, MapSettings, MonsterTemplate, Settings
from .rooms import Point, Room

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Output of one generation pass.

    ``rooms`` is kept for inspection and tests only; the game does not hold on to it.
    """

    map: GameMap
    player_start: Point
    entities: List[Entity] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)


class DungeonGenerator:
    """Rooms-and-corridors generator driven by a single random source.

    Places up to ``max_rooms`` non-overlapping rooms, connects each accepted room
    to the previously accepted one with an L-shaped corridor and populates rooms
    with monsters and items. Given the same seed the output is identical.
    """

    def __init__(
        self,
        map_settings: MapSettings,
        dungeon_settings: DungeonSettings,
        monsters: Tuple[MonsterTemplate, ...],
        items: Tuple[ItemTemplate, ...],
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.map_settings = map_settings
        self.settings = dungeon_settings
        self.monsters = monsters
        self.items = items
        self.rng = rng or RandomSource()

    @classmethod
    def from_settings(cls, settings: Settings, rng: Optional[RandomSource] = None) -> "DungeonGenerator":
        return cls(settings.map, settings.dungeon, settings.monsters, settings.item_templates, rng)

    def generate(self) -> GenerationResult:
        width, height = self.map_settings.width, self.map_settings.height
        game_map = GameMap(width, height)
        rooms: List[Room] = []
        placed: List[Entity] = []
        player_start: Optional[Point] = None

        for _ in range(self.settings.max_rooms):
            w = self.rng.randint(self.settings.room_min_size, self.settings.room_max_size)
            h = self.rng.randint(self.settings.room_min_size, self.settings.room_max_size)
            x = self.rng.randint(0, width - w - 1)
            y = self.rng.randint(0, height - h - 1)
            new_room = Room.from_size(x, y, w, h)

            if any(new_room.intersects(other) for other in rooms):
                continue

            self._carve_room(game_map, new_room)
            new_x, new_y = new_room.center()

            if not rooms:
                # first room: the player starts here
                player_start = (new_x, new_y)
            else:
                prev_x, prev_y = rooms[-1].center()
                if self.rng.coin_flip():
                    self._carve_h_corridor(game_map, prev_x, new_x, prev_y)
                    self._carve_v_corridor(game_map, prev_y, new_y, new_x)
                else:
                    self._carve_v_corridor(game_map, prev_y, new_y, prev_x)
                    self._carve_h_corridor(game_map, prev_x, new_x, new_y)

            placed.extend(self._place_monsters(game_map, new_room, placed, player_start))
            placed.extend(self._place_items(game_map, new_room, placed, player_start))
            rooms.append(new_room)

        if player_start is None:
            # no room fit; open a single cell in the middle so the player has somewhere to stand
            player_start = (width // 2, height // 2)
            game_map.carve(*player_start)
            logger.warning("DungeonGenerator: no rooms placed on %dx%d map", width, height)

        logger.debug("DungeonGenerator: %d rooms, %d entities placed", len(rooms), len(placed))
        return GenerationResult(map=game_map, player_start=player_start, entities=placed, rooms=rooms)

    # ---------- Population ----------
    def _place_monsters(
        self, game_map: GameMap, room: Room, blockers: List[Entity], reserved: Optional[Point]
    ) -> List[Entity]:
        placed: List[Entity] = []
        count = self.rng.randint(0, self.settings.max_room_monsters)
        weights = {t: t.weight for t in self.monsters}
        for _ in range(count):
            x = self.rng.randint(room.x1 + 1, room.x2 - 1)
            y = self.rng.randint(room.y1 + 1, room.y2 - 1)
            # one sample per monster: an occupied cell drops the monster
            if (x, y) == reserved or is_blocked(x, y, game_map, blockers + placed):
                logger.debug("Skipping monster at occupied cell (%d,%d)", x, y)
                continue
            template = self.rng.weighted_choice(weights)
            placed.append(make_monster(template, x, y))
        return placed

    def _place_items(
        self, game_map: GameMap, room: Room, blockers: List[Entity], reserved: Optional[Point]
    ) -> List[Entity]:
        placed: List[Entity] = []
        if not self.items:
            return placed
        count = self.rng.randint(0, self.settings.max_room_items)
        weights = {t: t.weight for t in self.items}
        for _ in range(count):
            x = self.rng.randint(room.x1 + 1, room.x2 - 1)
            y = self.rng.randint(room.y1 + 1, room.y2 - 1)
            if (x, y) == reserved or is_blocked(x, y, game_map, blockers + placed):
                continue
            template = self.rng.weighted_choice(weights)
            placed.append(make_item(template, x, y))
        return placed

    # ---------- Carving ----------
    @staticmethod
    def _carve_room(game_map: GameMap, room: Room) -> None:
        for x, y in room.interior():
            game_map.carve(x, y)

    @staticmethod
    def _carve_h_corridor(game_map: GameMap, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            game_map.carve(x, y)

    @staticmethod
    def _carve_v_corridor(game_map: GameMap, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            game_map.carve(x, y)
