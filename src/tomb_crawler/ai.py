"""Autonomous behaviours for entities carrying an ``AiKind``."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict

from .combat.resolver import attack_by_id
from .entities.components import AiKind
from .entities.entity import Entity
from .movement import move_toward

if TYPE_CHECKING:  # pragma: no cover
    from .engine.game import Game

logger = logging.getLogger(__name__)

MELEE_RANGE = 2.0


def basic_turn(game: "Game", monster: Entity) -> None:
    """If you can see it, it can see you: chase the player and hit when adjacent.

    Reuses the player's field of view; a monster outside it does nothing.
    """
    if not game.fov.is_visible(monster.x, monster.y):
        return
    player = game.player
    if monster.distance_to(player) >= MELEE_RANGE:
        move_toward(monster, player.x, player.y, game.map, game.entities)
    elif player.fighter is not None and player.fighter.hp > 0:
        attack_by_id(game.entities, monster.eid, player.eid, game.messages)


AI_BEHAVIORS: Dict[AiKind, Callable[["Game", Entity], None]] = {
    AiKind.BASIC: basic_turn,
}


def take_turn(game: "Game", entity: Entity) -> None:
    if entity.ai is None:
        return
    AI_BEHAVIORS[entity.ai](game, entity)
