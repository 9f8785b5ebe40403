import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from tomb_crawler.colors import DESATURATED_GREEN  # noqa: E402
from tomb_crawler.entities.factories import make_monster, make_player  # noqa: E402
from tomb_crawler.map.tiles import GameMap  # noqa: E402
from tomb_crawler.settings import MonsterTemplate, PlayerSettings  # noqa: E402

ORC = MonsterTemplate("orc", "o", DESATURATED_GREEN, hp=10, defense=0, power=3, weight=80)

# 12x7 walled room, open floor inside
ROOM_ROWS = [
    "############",
    "#..........#",
    "#..........#",
    "#..........#",
    "#..........#",
    "#..........#",
    "############",
]


@pytest.fixture
def room_map() -> GameMap:
    return GameMap.from_ascii(ROOM_ROWS)


@pytest.fixture
def player_factory():
    def _make(x: int, y: int, **overrides):
        return make_player(PlayerSettings(**overrides), x, y)

    return _make


@pytest.fixture
def orc_factory():
    def _make(x: int, y: int, name: str = "orc"):
        monster = make_monster(ORC, x, y)
        monster.name = name
        return monster

    return _make
