from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .events import Command, KeyPress

logger = logging.getLogger(__name__)


def _key_name(key: object) -> Optional[str]:
    """Upper-cased key name, or None for anything that cannot be a key."""
    if isinstance(key, int):
        return str(key)
    if isinstance(key, str) and key.strip():
        return key.strip().upper()
    return None


class InputMapper:
    """Rebindable table from key names to :class:`Command` values.

    Lookups are case-insensitive and go through an alias table first, so a
    backend only has to turn its key constants into names.

        mapper = InputMapper.default()
        mapper.translate(KeyPress("w"))                 # Command.MOVE_UP
        mapper.translate(KeyPress("ENTER", alt=True))   # Command.TOGGLE_FULLSCREEN
    """

    def __init__(self, bindings: Optional[Dict[str, Command]] = None) -> None:
        self._bindings: Dict[str, Command] = {}
        self._aliases: Dict[str, str] = {}
        for key, command in (bindings or {}).items():
            self.bind(key, command)

    def bind(self, key: str, command: Command) -> None:
        name = _key_name(key)
        if name is None:
            logger.warning("Refusing to bind %r to %s", key, command.name)
            return
        self._bindings[name] = command

    def bind_many(self, keys: Iterable[str], command: Command) -> None:
        for key in keys:
            self.bind(key, command)

    def unbind(self, key: str) -> None:
        name = _key_name(key)
        if name is not None:
            self._bindings.pop(name, None)

    def set_alias(self, physical: str, canonical_name: str) -> None:
        """Treat ``physical`` as another spelling of ``canonical_name``."""
        src, dst = _key_name(physical), _key_name(canonical_name)
        if src and dst:
            self._aliases[src] = dst

    def canonical(self, key: str) -> Optional[str]:
        name = _key_name(key)
        return self._aliases.get(name, name) if name is not None else None

    def translate(self, event: KeyPress) -> Optional[Command]:
        """Command for a key press, or None if the key is unbound."""
        name = self.canonical(event.key)
        if name is None:
            return None
        # Alt+Enter is fixed and cannot be rebound
        if name == "ENTER" and event.alt:
            return Command.TOGGLE_FULLSCREEN
        return self._bindings.get(name)

    @classmethod
    def default(cls) -> "InputMapper":
        """Arrows and WASD move, Escape quits, G picks up, 1-9 use an inventory slot."""
        mapper = cls()
        for command, keys in (
            (Command.MOVE_UP, ("UP", "W")),
            (Command.MOVE_DOWN, ("DOWN", "S")),
            (Command.MOVE_LEFT, ("LEFT", "A")),
            (Command.MOVE_RIGHT, ("RIGHT", "D")),
            (Command.EXIT, ("ESCAPE",)),
            (Command.PICK_UP, ("G",)),
            (Command.USE_ITEM, tuple(str(n) for n in range(1, 10))),
        ):
            mapper.bind_many(keys, command)
        mapper.set_alias("ESC", "ESCAPE")
        mapper.set_alias("RETURN", "ENTER")
        return mapper


__all__ = ["InputMapper"]
