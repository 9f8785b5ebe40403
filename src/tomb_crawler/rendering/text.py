from __future__ import annotations

import logging
import textwrap
from typing import IO, Dict, List, Optional, Sequence, Tuple

from ..messages import Message
from .base import Frame

logger = logging.getLogger(__name__)

# (visible, wall) -> glyph; unexplored cells stay blank
TILE_GLYPHS: Dict[Tuple[bool, bool], str] = {
    (False, True): "#",
    (False, False): ",",
    (True, True): "#",
    (True, False): ".",
}

BAR_WIDTH = 20
PANEL_HEIGHT = 7


def render_bar(name: str, value: int, maximum: int, total_width: int = BAR_WIDTH) -> str:
    """Text progress bar, e.g. ``[##########----------] HP: 15/30``."""
    filled = int(value / maximum * total_width) if maximum > 0 else 0
    filled = max(0, min(total_width, filled))
    return f"[{'#' * filled}{'-' * (total_width - filled)}] {name}: {value}/{maximum}"


def message_panel(messages: Sequence[Message], width: int, height: int) -> List[str]:
    """Wrap messages (given newest first) into at most ``height`` lines, newest at the bottom.

    Stops at the first message that no longer fits entirely.
    """
    lines: List[str] = []
    remaining = height
    for msg in messages:
        wrapped = textwrap.wrap(msg.text, width) or [""]
        if len(wrapped) > remaining:
            break
        lines[0:0] = wrapped
        remaining -= len(wrapped)
    return lines


class TextRenderer:
    """Headless renderer producing a plain-text screen.

    Useful for the command line and for tests; colours are ignored.
    """

    def __init__(self, stream: Optional[IO[str]] = None, message_width: Optional[int] = None) -> None:
        self.stream = stream
        self.message_width = message_width
        self.fullscreen = False
        self.last_screen: List[str] = []

    def clear(self) -> None:
        self.last_screen = []

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        logger.debug("Fullscreen toggled -> %s", self.fullscreen)

    def render(self, frame: Frame) -> None:
        self.last_screen = self.compose(frame)
        if self.stream is not None:
            self.stream.write("\n".join(self.last_screen) + "\n")
            self.stream.flush()

    def compose(self, frame: Frame) -> List[str]:
        game_map = frame.map
        grid: List[List[str]] = []
        for y, row in enumerate(game_map.rows()):
            line: List[str] = []
            for x, tile in enumerate(row):
                if not tile.explored:
                    line.append(" ")
                else:
                    line.append(TILE_GLYPHS[((x, y) in frame.visible, tile.block_sight)])
            grid.append(line)

        for entity in frame.entities:
            if game_map.in_bounds(entity.x, entity.y):
                grid[entity.y][entity.x] = entity.glyph

        width = self.message_width or max(20, game_map.width - BAR_WIDTH - 2)
        screen = ["".join(line) for line in grid]
        screen.append(frame.tooltip)
        screen.append(render_bar("HP", frame.hp, frame.max_hp))
        screen.extend(message_panel(frame.messages, width, PANEL_HEIGHT - 1))
        return screen
