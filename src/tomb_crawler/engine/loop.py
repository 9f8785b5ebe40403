from __future__ import annotations

import logging
from typing import Optional

from ..input.mapping import InputMapper
from ..input.sources import InputSource
from ..rendering.base import Renderer, build_frame
from .actions import PlayerAction
from .game import Game
from .turns import handle_event, run_ai_turns

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives a :class:`Game` one frame at a time.

    Each :meth:`step` runs, strictly in order: clear the renderer, poll one
    input event, refresh visibility (only if the player moved) and render,
    resolve the player's action, then run the AI pass if a turn was taken.
    Nothing after the action is processed once it classifies as EXIT.
    """

    def __init__(
        self,
        game: Game,
        input_source: InputSource,
        renderer: Optional[Renderer] = None,
        mapper: Optional[InputMapper] = None,
    ) -> None:
        self.game = game
        self.input = input_source
        self.renderer = renderer
        self.mapper = mapper or InputMapper.default()
        self._running = False
        self.frames = 0
        self.turns = 0

    @property
    def running(self) -> bool:
        return self._running

    def step(self) -> PlayerAction:
        if self.renderer is not None:
            self.renderer.clear()

        event = self.input.poll_event()

        self.game.update_visibility()
        if self.renderer is not None:
            self.renderer.render(build_frame(self.game))

        action = handle_event(self.game, event, self.mapper, self.renderer)
        self.frames += 1
        if action is PlayerAction.EXIT:
            self._running = False
            logger.info("Exit requested after %d turns", self.turns)
            return action

        if action is PlayerAction.TOOK_TURN:
            self.turns += 1
        run_ai_turns(self.game, action)
        return action

    def run(self, max_frames: Optional[int] = None) -> int:
        """Step until EXIT (or ``max_frames`` frames). Returns the number of frames run."""
        self._running = True
        start = self.frames
        while self._running:
            if max_frames is not None and self.frames - start >= max_frames:
                logger.info("Frame limit %d reached", max_frames)
                self._running = False
                break
            self.step()
        logger.info("Loop complete (frames=%d, turns=%d)", self.frames, self.turns)
        return self.frames - start
