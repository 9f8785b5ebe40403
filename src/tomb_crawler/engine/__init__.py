from .actions import PlayerAction
from .game import Game
from .loop import GameLoop
from .turns import handle_event, player_move_or_attack, run_ai_turns

__all__ = ["Game", "GameLoop", "PlayerAction", "handle_event", "player_move_or_attack", "run_ai_turns"]
