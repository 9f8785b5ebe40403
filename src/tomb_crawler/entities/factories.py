from __future__ import annotations

from ..settings import ItemTemplate, MonsterTemplate, PlayerSettings
from .components import AiKind, DeathPolicy, Fighter
from .entity import Entity


def make_player(settings: PlayerSettings, x: int = 0, y: int = 0) -> Entity:
    return Entity(
        x=x,
        y=y,
        glyph=settings.glyph,
        name=settings.name,
        color=settings.color,
        blocks=True,
        alive=True,
        fighter=Fighter.fresh(settings.hp, settings.defense, settings.power, DeathPolicy.PLAYER),
    )


def make_monster(template: MonsterTemplate, x: int, y: int) -> Entity:
    return Entity(
        x=x,
        y=y,
        glyph=template.glyph,
        name=template.name,
        color=template.color,
        blocks=True,
        alive=True,
        fighter=Fighter.fresh(template.hp, template.defense, template.power, DeathPolicy.MONSTER),
        ai=AiKind.BASIC,
    )


def make_item(template: ItemTemplate, x: int, y: int) -> Entity:
    return Entity(
        x=x,
        y=y,
        glyph=template.glyph,
        name=template.name,
        color=template.color,
        blocks=False,
        item=template.effect,
    )
