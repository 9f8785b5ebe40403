from __future__ import annotations

import logging
from typing import Optional

from ..ai import take_turn
from ..combat.resolver import attack_by_id
from ..input.events import DIRECTIONS, Command, InputEvent, MouseState
from ..input.mapping import InputMapper
from ..items.effects import UseResult
from ..items.inventory import pick_up, use_item
from ..movement import move_by
from ..rendering.base import Renderer
from .actions import PlayerAction
from .game import Game

logger = logging.getLogger(__name__)

_DEFAULT_MAPPER = InputMapper.default()


def player_move_or_attack(game: Game, dx: int, dy: int) -> None:
    """Attack whatever fighter stands at the destination, otherwise try to move there."""
    player = game.player
    x, y = player.x + dx, player.y + dy
    target = game.entities.fighter_at(x, y)
    if target is not None:
        attack_by_id(game.entities, player.eid, target.eid, game.messages)
    else:
        move_by(player, dx, dy, game.map, game.entities)


def _inventory_slot(mapper: InputMapper, key: str) -> int:
    canonical = mapper.canonical(key) or ""
    return int(canonical) - 1 if canonical.isdigit() else 0


def handle_event(
    game: Game,
    event: InputEvent,
    mapper: Optional[InputMapper] = None,
    renderer: Optional[Renderer] = None,
) -> PlayerAction:
    """Classify and resolve one input event."""
    if event is None:
        return PlayerAction.DIDNT_TAKE_TURN
    if isinstance(event, MouseState):
        game.mouse = (event.cx, event.cy)
        return PlayerAction.DIDNT_TAKE_TURN

    mapper = mapper or _DEFAULT_MAPPER
    command = mapper.translate(event)

    if command is Command.EXIT:
        return PlayerAction.EXIT
    if command is Command.TOGGLE_FULLSCREEN:
        if renderer is not None:
            renderer.toggle_fullscreen()
        return PlayerAction.DIDNT_TAKE_TURN
    if not game.player_alive:
        return PlayerAction.DIDNT_TAKE_TURN

    if command in DIRECTIONS:
        dx, dy = DIRECTIONS[command]
        player_move_or_attack(game, dx, dy)
        return PlayerAction.TOOK_TURN
    if command is Command.PICK_UP:
        if pick_up(game) is not None:
            return PlayerAction.TOOK_TURN
        return PlayerAction.DIDNT_TAKE_TURN
    if command is Command.USE_ITEM:
        if use_item(game, _inventory_slot(mapper, event.key)) is UseResult.USED_UP:
            return PlayerAction.TOOK_TURN
        return PlayerAction.DIDNT_TAKE_TURN

    logger.debug("Unbound key %r", event.key)
    return PlayerAction.DIDNT_TAKE_TURN


def run_ai_turns(game: Game, action: PlayerAction) -> int:
    """Let every AI entity act once, in collection order, after a turn-taking action.

    Returns the number of entities that were given a turn.
    """
    if action is not PlayerAction.TOOK_TURN or not game.player_alive:
        return 0
    acted = 0
    for entity in game.entities:
        # killed earlier in this pass: its ai is gone
        if entity.ai is None:
            continue
        take_turn(game, entity)
        acted += 1
    return acted
