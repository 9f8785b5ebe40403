"""Optional capability bundles carried by entities.

An entity may independently be a fighter, an autonomous actor and/or an item;
each capability is a separate optional field on :class:`Entity`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeathPolicy(str, Enum):
    """Selects which death transition runs when a fighter drops to 0 hp."""

    PLAYER = "player"
    MONSTER = "monster"


class AiKind(str, Enum):
    BASIC = "basic"


class ItemKind(str, Enum):
    HEAL = "heal"


@dataclass
class Fighter:
    max_hp: int
    hp: int
    defense: int
    power: int
    on_death: DeathPolicy
    # set once the death transition has run
    fallen: bool = False

    @classmethod
    def fresh(cls, hp: int, defense: int, power: int, on_death: DeathPolicy) -> "Fighter":
        """A fighter at full health."""
        return cls(max_hp=hp, hp=hp, defense=defense, power=power, on_death=on_death)


__all__ = ["AiKind", "DeathPolicy", "Fighter", "ItemKind"]
