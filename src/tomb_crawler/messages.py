from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .colors import Color, WHITE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    text: str
    color: Color = WHITE


class MessageLog:
    """Append-only narration of game events, oldest first.

    Renderers read it newest-first and truncate when their panel is full.
    """

    def __init__(self) -> None:
        self._messages: List[Message] = []

    def add(self, text: str, color: Color = WHITE) -> None:
        self._messages.append(Message(text, color))
        logger.debug("message: %s", text)

    def newest_first(self) -> List[Message]:
        return list(reversed(self._messages))

    def latest(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def texts(self) -> List[str]:
        return [m.text for m in self._messages]

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
