import pytest

from tomb_crawler.engine.actions import PlayerAction
from tomb_crawler.engine.game import Game
from tomb_crawler.engine.turns import handle_event
from tomb_crawler.entities.factories import make_item
from tomb_crawler.input.events import KeyPress
from tomb_crawler.items import UseResult, heal, pick_up, use_item
from tomb_crawler.settings import DEFAULT_ITEMS, ItemSettings, Settings

POTION = DEFAULT_ITEMS[0]


@pytest.fixture
def game(room_map, player_factory):
    player = player_factory(3, 3)
    potion = make_item(POTION, 3, 3)
    return Game.from_entities(room_map, player, [potion])


def test_heal_caps_at_max(player_factory):
    player = player_factory(1, 1)
    player.fighter.hp = 28
    assert heal(player, 40) == 2
    assert player.fighter.hp == 30


def test_pick_up_moves_item_into_inventory(game):
    item = pick_up(game)
    assert item is not None and item.name == "healing potion"
    assert game.inventory == [item]
    assert item.eid not in game.entities
    assert game.messages.texts() == ["You picked up a healing potion!"]


def test_pick_up_with_nothing_here(game):
    game.player.move_to(5, 5)
    assert pick_up(game) is None
    assert handle_event(game, KeyPress("G")) is PlayerAction.DIDNT_TAKE_TURN


def test_full_inventory_refuses_item(room_map, player_factory):
    settings = Settings(items=ItemSettings(inventory_capacity=0))
    game = Game.from_entities(room_map, player_factory(3, 3), [make_item(POTION, 3, 3)], settings)
    assert pick_up(game) is None
    assert game.inventory == []
    assert len(game.entities) == 2
    assert game.messages.latest().text == "Your inventory is full, cannot pick up healing potion."


def test_heal_at_full_health_is_cancelled(game):
    pick_up(game)
    assert use_item(game, 0) is UseResult.CANCELLED
    assert len(game.inventory) == 1
    assert game.messages.latest().text == "You are already at full health."


def test_heal_consumes_potion(game):
    pick_up(game)
    game.player.fighter.hp = 20
    assert use_item(game, 0) is UseResult.USED_UP
    assert game.player.fighter.hp == 24
    assert game.inventory == []
    assert game.messages.latest().text == "Your wounds start to feel better!"


def test_empty_slot(game):
    assert use_item(game, 3) is UseResult.CANCELLED
    assert game.messages.latest().text == "You have nothing in that slot."


def test_item_keys_drive_turns(game):
    assert handle_event(game, KeyPress("G")) is PlayerAction.TOOK_TURN
    # full health: cancelled, no turn
    assert handle_event(game, KeyPress("1")) is PlayerAction.DIDNT_TAKE_TURN
    game.player.fighter.hp = 10
    assert handle_event(game, KeyPress("1")) is PlayerAction.TOOK_TURN
    assert game.player.fighter.hp == 14
    assert handle_event(game, KeyPress("2")) is PlayerAction.DIDNT_TAKE_TURN


def test_items_do_not_block(game):
    assert handle_event(game, KeyPress("UP")) is PlayerAction.TOOK_TURN
    assert handle_event(game, KeyPress("DOWN")) is PlayerAction.TOOK_TURN
    assert game.player.pos == (3, 3)
