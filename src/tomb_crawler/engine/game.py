from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..colors import RED
from ..dungeon.generator import DungeonGenerator
from ..entities.entity import Entity
from ..entities.factories import make_player
from ..entities.store import EntityStore
from ..fov.field_of_view import FieldOfView
from ..map.tiles import GameMap
from ..messages import MessageLog
from ..rng import RandomSource
from ..settings import Settings

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings."


class Game:
    """Aggregate root for one run.

    Owns the map, the on-map entities, the player's inventory (kept apart from
    the map), the message log and the player's field of view. Lives for the
    whole process; every turn operation receives it and mutates it in place.
    """

    def __init__(
        self,
        settings: Settings,
        game_map: GameMap,
        entities: EntityStore,
        messages: Optional[MessageLog] = None,
    ) -> None:
        self.settings = settings
        self.map = game_map
        self.entities = entities
        self.messages = messages or MessageLog()
        self.inventory: List[Entity] = []
        self.fov = FieldOfView(game_map, settings.fov.radius, settings.fov.light_walls)
        self.mouse: Optional[Tuple[int, int]] = None

    @classmethod
    def new(cls, settings: Optional[Settings] = None, seed: Optional[int] = None) -> "Game":
        """Generate a fresh dungeon and place the player in its first room."""
        settings = settings or Settings()
        seed = seed if seed is not None else settings.seed
        generator = DungeonGenerator.from_settings(settings, RandomSource(seed))
        result = generator.generate()

        player = make_player(settings.player, *result.player_start)
        store = EntityStore()
        store.add(player)
        for entity in result.entities:
            store.add(entity)

        game = cls(settings, result.map, store)
        game.messages.add(WELCOME_MESSAGE, RED)
        logger.info(
            "New game (seed=%s): %d rooms, %d entities, player at %s",
            seed,
            len(result.rooms),
            len(store),
            player.pos,
        )
        return game

    @classmethod
    def from_entities(
        cls,
        game_map: GameMap,
        player: Entity,
        others: Iterable[Entity] = (),
        settings: Optional[Settings] = None,
    ) -> "Game":
        """Assemble a game around an existing map, e.g. a hand-drawn test level."""
        store = EntityStore()
        store.add(player)
        for entity in others:
            store.add(entity)
        return cls(settings or Settings(), game_map, store)

    # ---------- Player ----------
    @property
    def player_id(self) -> int:
        return self.entities.player_id

    @property
    def player(self) -> Entity:
        return self.entities.player

    @property
    def player_alive(self) -> bool:
        return self.player.alive

    def player_hp(self) -> Tuple[int, int]:
        fighter = self.player.fighter
        if fighter is None:
            return (0, 0)
        return (fighter.hp, fighter.max_hp)

    # ---------- Queries ----------
    def update_visibility(self) -> bool:
        """Recompute the field of view if the player moved. Returns whether it did."""
        pos = self.player.pos
        return self.fov.refresh(pos, self.fov.should_recompute(pos))

    def names_at(self, x: int, y: int) -> str:
        return self.entities.names_at(x, y, self.fov.is_visible)

    def names_under_mouse(self) -> str:
        if self.mouse is None:
            return ""
        return self.names_at(*self.mouse)
