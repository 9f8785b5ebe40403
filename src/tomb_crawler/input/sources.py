from __future__ import annotations

import logging
from typing import IO, Iterable, Iterator, List, Optional, Protocol

from .events import InputEvent, KeyPress, MouseState

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    """Supplies at most one event per frame; None means nothing happened."""

    def poll_event(self) -> InputEvent:  # pragma: no cover - Protocol
        ...


def parse_event(token: str) -> InputEvent:
    """Parse a textual event description.

    ``"up"`` / ``"w"`` -> key press, ``"alt+enter"`` -> key press with Alt,
    ``"mouse 3 4"`` -> mouse over cell (3, 4), empty or ``"wait"`` -> no event.
    """
    t = token.strip()
    if not t or t.lower() == "wait":
        return None
    parts = t.split()
    if parts[0].lower() == "mouse":
        if len(parts) != 3:
            raise ValueError(f"Expected 'mouse X Y', got {token!r}")
        return MouseState(int(parts[1]), int(parts[2]))
    alt = False
    key = t
    if t.lower().startswith("alt+"):
        alt = True
        key = t[4:]
    text = key if len(key) == 1 else ""
    return KeyPress(key=key.upper(), alt=alt, text=text)


def parse_script(script: str) -> List[InputEvent]:
    """Comma separated event descriptions, e.g. ``"up,up,g,1,escape"``."""
    return [parse_event(tok) for tok in script.split(",")]


class ScriptedInput:
    """Replays a fixed sequence of events, then reports no event forever."""

    def __init__(self, events: Iterable[InputEvent]) -> None:
        self._events: Iterator[InputEvent] = iter(list(events))
        self.exhausted = False

    def poll_event(self) -> InputEvent:
        try:
            return next(self._events)
        except StopIteration:
            self.exhausted = True
            return None


class StdinInput:
    """Reads one event description per line; end of input becomes Escape."""

    def __init__(self, stream: IO[str], prompt: Optional[IO[str]] = None) -> None:
        self.stream = stream
        self.prompt = prompt

    def poll_event(self) -> InputEvent:
        if self.prompt is not None:
            self.prompt.write("> ")
            self.prompt.flush()
        line = self.stream.readline()
        if line == "":
            return KeyPress("ESCAPE")
        try:
            return parse_event(line)
        except ValueError as exc:
            logger.warning("Ignoring input %r: %s", line.strip(), exc)
            return None
