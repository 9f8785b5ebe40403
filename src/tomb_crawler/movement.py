from __future__ import annotations

import logging
import math
from typing import Iterable

from .entities.entity import Entity
from .map.tiles import GameMap

logger = logging.getLogger(__name__)


def is_blocked(x: int, y: int, game_map: GameMap, entities: Iterable[Entity]) -> bool:
    """True if terrain or a blocking entity occupies the cell. Off-map counts as blocked."""
    if not game_map.in_bounds(x, y):
        return True
    if game_map.is_blocked_tile(x, y):
        return True
    return any(e.blocks and e.x == x and e.y == y for e in entities)


def move_by(entity: Entity, dx: int, dy: int, game_map: GameMap, entities: Iterable[Entity]) -> bool:
    """Move by (dx, dy) unless the destination is blocked. Returns whether it moved."""
    nx, ny = entity.x + dx, entity.y + dy
    if is_blocked(nx, ny, game_map, entities):
        logger.debug("%s bumps into (%d,%d)", entity.name, nx, ny)
        return False
    entity.move_to(nx, ny)
    return True


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def move_toward(entity: Entity, target_x: int, target_y: int, game_map: GameMap, entities: Iterable[Entity]) -> bool:
    """Take one greedy step toward a target.

    The direction vector is normalised to length 1 and each axis rounded to the
    nearest integer. There is no obstacle avoidance: a blocked step is simply lost.
    """
    dx = target_x - entity.x
    dy = target_y - entity.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return False
    step_x = _round_half_away(dx / distance)
    step_y = _round_half_away(dy / distance)
    return move_by(entity, step_x, step_y, game_map, entities)
