from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from ..colors import DARK_RED, ORANGE, RED, WHITE
from ..entities.components import DeathPolicy
from ..entities.entity import Entity
from ..entities.store import EntityStore
from ..messages import MessageLog

logger = logging.getLogger(__name__)

CORPSE_GLYPH = "%"
CORPSE_COLOR = DARK_RED


@dataclass(frozen=True)
class AttackOutcome:
    damage: int
    killed: bool


def compute_damage(attacker: Entity, defender: Entity) -> int:
    power = attacker.fighter.power if attacker.fighter else 0
    defense = defender.fighter.defense if defender.fighter else 0
    return power - defense


def take_damage(entity: Entity, damage: int, log: MessageLog) -> bool:
    """Apply damage and run the death transition if hp drops to 0 or below.

    Returns True if this hit killed the entity.
    """
    fighter = entity.fighter
    if fighter is None:
        return False
    if damage > 0:
        fighter.hp -= damage
    if fighter.hp <= 0 and not fighter.fallen:
        fighter.fallen = True
        entity.alive = False
        _DEATH_TRANSITIONS[fighter.on_death](entity, log)
        return True
    return False


def attack(attacker: Entity, defender: Entity, log: MessageLog) -> AttackOutcome:
    """Resolve one melee attack completely."""
    if attacker is defender:
        raise ValueError(f"{attacker.name} cannot attack itself")
    damage = compute_damage(attacker, defender)
    killed = False
    if damage > 0:
        log.add(f"{attacker.name} attacks {defender.name} for {damage} hit points.", WHITE)
        killed = take_damage(defender, damage, log)
    else:
        log.add(f"{attacker.name} attacks {defender.name} but it has no effect!", WHITE)
    logger.debug("%s -> %s: damage=%d killed=%s", attacker.name, defender.name, damage, killed)
    return AttackOutcome(damage=max(damage, 0), killed=killed)


def attack_by_id(store: EntityStore, attacker_id: int, defender_id: int, log: MessageLog) -> AttackOutcome:
    attacker, defender = store.pair(attacker_id, defender_id)
    return attack(attacker, defender, log)


# ---------- Death transitions ----------
def player_death(player: Entity, log: MessageLog) -> None:
    # the run is over; the corpse keeps its name and capabilities
    log.add("You died!", RED)
    player.glyph = CORPSE_GLYPH
    player.color = CORPSE_COLOR
    logger.info("Player died")


def monster_death(monster: Entity, log: MessageLog) -> None:
    log.add(f"{monster.name} is dead!", ORANGE)
    monster.glyph = CORPSE_GLYPH
    monster.color = CORPSE_COLOR
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.name = f"remains of {monster.name}"


_DEATH_TRANSITIONS: Dict[DeathPolicy, Callable[[Entity, MessageLog], None]] = {
    DeathPolicy.PLAYER: player_death,
    DeathPolicy.MONSTER: monster_death,
}
