from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ..exceptions import EntityAliasError, UnknownEntityError
from .entity import Entity

logger = logging.getLogger(__name__)


class EntityStore:
    """Ordered collection of entities addressed by stable integer handles.

    Iteration follows insertion order, which is also the order in which AI
    entities act. The first entity added is the player; its handle is exposed as
    :attr:`player_id` and it can never be removed.
    """

    def __init__(self) -> None:
        self._entities: Dict[int, Entity] = {}
        self._next_id = 0
        self._player_id: Optional[int] = None

    # ---------- Lifecycle ----------
    def add(self, entity: Entity) -> int:
        eid = self._next_id
        self._next_id += 1
        entity.eid = eid
        self._entities[eid] = entity
        if self._player_id is None:
            self._player_id = eid
        logger.debug("Added %r", entity)
        return eid

    def remove(self, eid: int) -> Entity:
        if eid == self._player_id:
            raise ValueError("The player cannot be removed from the map")
        try:
            entity = self._entities.pop(eid)
        except KeyError:
            raise UnknownEntityError(eid) from None
        logger.debug("Removed %r", entity)
        return entity

    # ---------- Access ----------
    @property
    def player_id(self) -> int:
        if self._player_id is None:
            raise UnknownEntityError("no player has been added")
        return self._player_id

    @property
    def player(self) -> Entity:
        return self.get(self.player_id)

    def get(self, eid: int) -> Entity:
        try:
            return self._entities[eid]
        except KeyError:
            raise UnknownEntityError(eid) from None

    def pair(self, first: int, second: int) -> Tuple[Entity, Entity]:
        """Fetch two distinct entities for a mutation touching both."""
        if first == second:
            raise EntityAliasError(f"entity #{first} cannot act on itself")
        return self.get(first), self.get(second)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, eid: object) -> bool:
        return eid in self._entities

    # ---------- Spatial queries ----------
    def at(self, x: int, y: int) -> List[Entity]:
        return [e for e in self._entities.values() if e.x == x and e.y == y]

    def fighter_at(self, x: int, y: int) -> Optional[Entity]:
        for e in self._entities.values():
            if e.fighter is not None and e.x == x and e.y == y:
                return e
        return None

    def names_at(self, x: int, y: int, is_visible: Callable[[int, int], bool]) -> str:
        """Names of the visible entities at a cell, in collection order."""
        names = [e.name for e in self._entities.values() if e.x == x and e.y == y and is_visible(e.x, e.y)]
        return ", ".join(names)
