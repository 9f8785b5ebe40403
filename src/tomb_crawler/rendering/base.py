from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Protocol, Tuple

from ..entities.entity import Entity
from ..map.tiles import Coord, GameMap
from ..messages import Message

if TYPE_CHECKING:  # pragma: no cover
    from ..engine.game import Game


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one frame.

    ``entities`` holds only visible entities, non-blocking ones first so that
    blockers are drawn on top. ``messages`` is newest first.
    """

    map: GameMap
    visible: FrozenSet[Coord]
    entities: Tuple[Entity, ...]
    messages: Tuple[Message, ...]
    hp: int
    max_hp: int
    tooltip: str


class Renderer(Protocol):
    def clear(self) -> None:  # pragma: no cover - Protocol
        ...

    def render(self, frame: Frame) -> None:  # pragma: no cover - Protocol
        ...

    def toggle_fullscreen(self) -> None:  # pragma: no cover - Protocol
        ...


def build_frame(game: "Game") -> Frame:
    to_draw = [e for e in game.entities if game.fov.is_visible(e.x, e.y)]
    # stable sort keeps collection order within each group
    to_draw.sort(key=lambda e: e.blocks)
    hp, max_hp = game.player_hp()
    return Frame(
        map=game.map,
        visible=game.fov.visible_tiles(),
        entities=tuple(to_draw),
        messages=tuple(game.messages.newest_first()),
        hp=hp,
        max_hp=max_hp,
        tooltip=game.names_under_mouse(),
    )
