import itertools

import pytest

from tomb_crawler.dungeon.generator import DungeonGenerator
from tomb_crawler.dungeon.rooms import Room
from tomb_crawler.engine.game import Game
from tomb_crawler.rng import RandomSource
from tomb_crawler.settings import DungeonSettings, MapSettings, Settings

SEEDS = [1, 7, 42, 123, 2024]


class FakeRandom:
    """Scripted stand-in for RandomSource: randint pops queued values unless the range is fixed."""

    def __init__(self, ints, coin=True):
        self.ints = list(ints)
        self.coin = coin

    def randint(self, a, b):
        if a == b:
            return a
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def random(self):
        return 0.0

    def coin_flip(self):
        return self.coin

    def weighted_choice(self, weights):
        return next(iter(weights))


def generate(seed, **dungeon):
    settings = Settings(dungeon=DungeonSettings(**dungeon)) if dungeon else Settings()
    return DungeonGenerator.from_settings(settings, RandomSource(seed)).generate()


def walkable(game_map, x, y):
    return not game_map.is_blocked_tile(x, y)


@pytest.mark.parametrize("seed", SEEDS)
def test_rooms_never_overlap(seed):
    result = generate(seed)
    assert result.rooms
    for a, b in itertools.combinations(result.rooms, 2):
        assert not a.intersects(b)


@pytest.mark.parametrize("seed", SEEDS)
def test_room_interiors_are_open(seed):
    result = generate(seed)
    for room in result.rooms:
        for x, y in room.interior():
            tile = result.map.tile(x, y)
            assert not tile.blocked
            assert not tile.block_sight


@pytest.mark.parametrize("seed", SEEDS)
def test_corridors_link_consecutive_rooms(seed):
    result = generate(seed)
    game_map = result.map
    for prev, new in zip(result.rooms, result.rooms[1:]):
        (px, py), (nx, ny) = prev.center(), new.center()
        h_first = [(x, py) for x in range(min(px, nx), max(px, nx) + 1)] + [
            (nx, y) for y in range(min(py, ny), max(py, ny) + 1)
        ]
        v_first = [(px, y) for y in range(min(py, ny), max(py, ny) + 1)] + [
            (x, ny) for x in range(min(px, nx), max(px, nx) + 1)
        ]
        assert all(walkable(game_map, x, y) for x, y in h_first) or all(
            walkable(game_map, x, y) for x, y in v_first
        )


@pytest.mark.parametrize("seed", SEEDS)
def test_player_starts_at_first_room_center(seed):
    result = generate(seed)
    assert result.player_start == result.rooms[0].center()
    assert walkable(result.map, *result.player_start)


@pytest.mark.parametrize("seed", SEEDS)
def test_population_sits_on_free_floor(seed):
    result = generate(seed)
    blocking_cells = []
    for entity in result.entities:
        assert walkable(result.map, entity.x, entity.y)
        assert entity.pos != result.player_start or not entity.blocks
        if entity.blocks:
            blocking_cells.append(entity.pos)
    assert len(blocking_cells) == len(set(blocking_cells))


def test_monsters_have_fighter_and_ai():
    result = generate(5, max_room_items=0)
    monsters = [e for e in result.entities if e.blocks]
    assert monsters
    for m in monsters:
        assert m.name in ("orc", "troll")
        assert m.fighter is not None and m.fighter.hp == m.fighter.max_hp
        assert m.ai is not None
        assert m.alive
    assert not [e for e in result.entities if e.item is not None]


def test_generation_is_deterministic():
    a = Game.new(seed=99)
    b = Game.new(seed=99)
    rows_a = [[(t.blocked, t.block_sight) for t in row] for row in a.map.rows()]
    rows_b = [[(t.blocked, t.block_sight) for t in row] for row in b.map.rows()]
    assert rows_a == rows_b
    assert [(e.name, e.pos) for e in a.entities] == [(e.name, e.pos) for e in b.entities]


def test_rooms_respect_size_and_bounds():
    settings = Settings()
    result = DungeonGenerator.from_settings(settings, RandomSource(3)).generate()
    for room in result.rooms:
        assert settings.dungeon.room_min_size <= room.x2 - room.x1 <= settings.dungeon.room_max_size
        assert 0 <= room.x1 and room.x2 < settings.map.width
        assert 0 <= room.y1 and room.y2 < settings.map.height


def test_rejected_room_is_not_retried():
    # room 1 accepted, room 2 overlaps it and is dropped, no third attempt
    rng = FakeRandom([6, 6, 2, 2, 0, 0, 6, 6, 3, 3])
    gen = DungeonGenerator(
        MapSettings(30, 20),
        DungeonSettings(max_rooms=2, room_min_size=6, room_max_size=8, max_room_monsters=1, max_room_items=1),
        Settings().monsters,
        Settings().item_templates,
        rng,
    )
    result = gen.generate()
    assert result.rooms == [Room(2, 2, 8, 8)]
    assert rng.ints == []


def test_colliding_monster_is_skipped_not_resampled():
    rng = FakeRandom(
        [
            6, 6, 2, 3,  # room (2,3)-(8,9), centre (5,6)
            3,           # three monsters
            3, 4,        # first lands on (3,4)
            3, 4,        # second collides with the first and is skipped
            5, 6,        # third lands on the player's start and is skipped
        ]
    )
    gen = DungeonGenerator(
        MapSettings(20, 20),
        DungeonSettings(max_rooms=1, room_min_size=6, room_max_size=8, max_room_monsters=3, max_room_items=0),
        Settings().monsters,
        Settings().item_templates,
        rng,
    )
    result = gen.generate()
    assert result.player_start == (5, 6)
    assert [(e.name, e.pos) for e in result.entities] == [("orc", (3, 4))]
    assert rng.ints == []


def test_corridor_orientation_follows_coin():
    def two_rooms(coin):
        rng = FakeRandom([6, 6, 1, 1, 6, 6, 12, 10], coin=coin)
        gen = DungeonGenerator(
            MapSettings(30, 20),
            DungeonSettings(max_rooms=2, room_min_size=6, room_max_size=8, max_room_monsters=0, max_room_items=0),
            Settings().monsters,
            Settings().item_templates,
            rng,
        )
        return gen.generate()

    # centres (4,4) and (15,13)
    horizontal_first = two_rooms(True)
    assert walkable(horizontal_first.map, 10, 4)
    assert walkable(horizontal_first.map, 15, 8)

    vertical_first = two_rooms(False)
    assert walkable(vertical_first.map, 4, 10)
    assert walkable(vertical_first.map, 10, 13)
    assert not walkable(vertical_first.map, 10, 4)


def test_room_geometry():
    room = Room.from_size(2, 3, 6, 5)
    assert (room.x1, room.y1, room.x2, room.y2) == (2, 3, 8, 8)
    assert room.center() == (5, 5)
    interior = list(room.interior())
    assert len(interior) == 5 * 4
    assert (3, 4) in interior and (7, 7) in interior
    assert (2, 3) not in interior and (8, 8) not in interior

    # shared edge counts as overlap (closed intervals)
    assert room.intersects(Room(8, 3, 12, 8))
    assert not room.intersects(Room(9, 3, 12, 8))
