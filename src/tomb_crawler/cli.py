from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .engine.game import Game
from .engine.loop import GameLoop
from .exceptions import SettingsError
from .input.events import KeyPress
from .input.sources import ScriptedInput, StdinInput, parse_script
from .logging_config import configure_logging
from .rendering.text import TextRenderer
from .settings import load_settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tomb-crawler",
        description="Headless turn-based dungeon crawl in the Tombs of the Ancient Kings.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for dungeon generation")
    parser.add_argument("--settings", type=Path, default=None, help="YAML settings overlay")
    parser.add_argument(
        "--script",
        default=None,
        help="Comma separated inputs to replay, e.g. 'up,up,left,g,1'. Reads stdin when omitted.",
    )
    parser.add_argument("--max-frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--summary", action="store_true", help="Print a JSON summary instead of the screen")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def summarize(game: Game, loop: GameLoop) -> Dict[str, Any]:
    hp, max_hp = game.player_hp()
    return {
        "frames": loop.frames,
        "turns": loop.turns,
        "player": {"pos": list(game.player.pos), "hp": hp, "max_hp": max_hp, "alive": game.player_alive},
        "explored_tiles": game.map.explored_count(),
        "monsters_alive": sum(1 for e in game.entities if e.ai is not None),
        "inventory": [e.name for e in game.inventory],
        "messages": [m.text for m in game.messages][-10:],
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)
    log = logging.getLogger(__name__)

    try:
        settings = load_settings(args.settings)
    except SettingsError as exc:
        print(exc.to_human(), file=sys.stderr)
        return 2
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    game = Game.new(settings, seed=args.seed)

    if args.script is not None:
        source = ScriptedInput(parse_script(args.script) + [KeyPress("ESCAPE")])
    else:
        source = StdinInput(sys.stdin, prompt=None if args.summary else sys.stderr)

    renderer = TextRenderer(stream=None if args.summary else sys.stdout)
    loop = GameLoop(game, source, renderer)
    loop.run(max_frames=args.max_frames)
    log.debug("Session finished")

    if args.summary:
        print(json.dumps(summarize(game, loop), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
