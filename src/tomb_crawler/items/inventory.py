from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..colors import GREEN, RED, WHITE
from ..entities.entity import Entity
from .effects import ITEM_EFFECTS, UseResult

if TYPE_CHECKING:  # pragma: no cover
    from ..engine.game import Game

logger = logging.getLogger(__name__)


def pick_up(game: "Game") -> Optional[Entity]:
    """Move the first item under the player from the map into the inventory.

    Returns the picked up item, or None when nothing was taken.
    """
    player = game.player
    item = next((e for e in game.entities.at(player.x, player.y) if e.item is not None), None)
    if item is None:
        return None
    if len(game.inventory) >= game.settings.items.inventory_capacity:
        game.messages.add(f"Your inventory is full, cannot pick up {item.name}.", RED)
        return None
    game.entities.remove(item.eid)
    game.inventory.append(item)
    game.messages.add(f"You picked up a {item.name}!", GREEN)
    return item


def use_item(game: "Game", index: int) -> UseResult:
    """Use the inventory item in slot ``index`` on the player."""
    if not 0 <= index < len(game.inventory):
        game.messages.add("You have nothing in that slot.", WHITE)
        return UseResult.CANCELLED
    item = game.inventory[index]
    effect = ITEM_EFFECTS.get(item.item) if item.item is not None else None
    if effect is None:
        game.messages.add(f"The {item.name} cannot be used.", WHITE)
        return UseResult.CANCELLED
    result = effect(game, game.player)
    if result is UseResult.USED_UP:
        del game.inventory[index]
    logger.debug("use_item(%d: %s) -> %s", index, item.name, result.value)
    return result
