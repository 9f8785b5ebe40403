from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict

from ..colors import LIGHT_RED, LIGHT_GREY, VIOLET
from ..entities.components import ItemKind
from ..entities.entity import Entity

if TYPE_CHECKING:  # pragma: no cover
    from ..engine.game import Game

logger = logging.getLogger(__name__)


class UseResult(Enum):
    USED_UP = "used_up"
    CANCELLED = "cancelled"


def heal(entity: Entity, amount: int) -> int:
    """Heal by the given amount without going over the maximum. Returns hp gained."""
    fighter = entity.fighter
    if fighter is None:
        return 0
    before = fighter.hp
    fighter.hp = min(fighter.hp + amount, fighter.max_hp)
    return fighter.hp - before


def cast_heal(game: "Game", user: Entity) -> UseResult:
    fighter = user.fighter
    if fighter is None:
        game.messages.add("Nothing happens.", LIGHT_GREY)
        return UseResult.CANCELLED
    if fighter.hp == fighter.max_hp:
        game.messages.add("You are already at full health.", LIGHT_RED)
        return UseResult.CANCELLED
    healed = heal(user, game.settings.items.heal_amount)
    game.messages.add("Your wounds start to feel better!", VIOLET)
    logger.debug("%s healed %d hp", user.name, healed)
    return UseResult.USED_UP


ITEM_EFFECTS: Dict[ItemKind, Callable[["Game", Entity], UseResult]] = {
    ItemKind.HEAL: cast_heal,
}
