from tomb_crawler.ai import take_turn
from tomb_crawler.engine.game import Game
from tomb_crawler.map.tiles import GameMap

SPLIT_ROWS = [
    "#########",
    "#...#...#",
    "#...#...#",
    "#########",
]


def _game(game_map, player, *monsters):
    game = Game.from_entities(game_map, player, monsters)
    game.update_visibility()
    return game


def test_unseen_monster_does_nothing(player_factory, orc_factory):
    game_map = GameMap.from_ascii(SPLIT_ROWS)
    player = player_factory(1, 1)
    orc = orc_factory(6, 1)
    game = _game(game_map, player, orc)
    assert not game.fov.is_visible(6, 1)

    take_turn(game, orc)
    assert orc.pos == (6, 1)
    assert len(game.messages) == 0


def test_adjacent_monster_attacks(room_map, player_factory, orc_factory):
    player = player_factory(3, 3)
    orc = orc_factory(4, 3)
    game = _game(room_map, player, orc)

    take_turn(game, orc)
    # power 3 against defense 2
    assert player.fighter.hp == 29
    assert orc.pos == (4, 3)
    assert game.messages.texts() == ["orc attacks player for 1 hit points."]


def test_diagonal_neighbour_counts_as_adjacent(room_map, player_factory, orc_factory):
    player = player_factory(3, 3)
    orc = orc_factory(4, 4)
    game = _game(room_map, player, orc)
    take_turn(game, orc)
    assert player.fighter.hp == 29


def test_distant_monster_steps_toward_player(room_map, player_factory, orc_factory):
    player = player_factory(3, 3)
    orc = orc_factory(6, 3)
    game = _game(room_map, player, orc)

    take_turn(game, orc)
    assert orc.pos == (5, 3)
    assert player.fighter.hp == 30


def test_dead_player_is_not_attacked(room_map, player_factory, orc_factory):
    player = player_factory(3, 3)
    orc = orc_factory(4, 3)
    game = _game(room_map, player, orc)
    player.fighter.hp = 0

    take_turn(game, orc)
    assert player.fighter.hp == 0
    assert len(game.messages) == 0


def test_entity_without_ai_is_skipped(room_map, player_factory, orc_factory):
    player = player_factory(3, 3)
    statue = orc_factory(4, 3)
    statue.ai = None
    game = _game(room_map, player, statue)
    take_turn(game, statue)
    assert player.fighter.hp == 30
