import pytest

from tomb_crawler.rng import RandomSource
from tomb_crawler.settings import DEFAULT_MONSTERS


def test_species_follow_their_weights():
    rng = RandomSource(1234)
    weights = {t.name: t.weight for t in DEFAULT_MONSTERS}
    draws = [rng.weighted_choice(weights) for _ in range(5000)]
    orcs = draws.count("orc") / len(draws)
    assert set(draws) == {"orc", "troll"}
    # 80 / 20 split, with room for sampling noise
    assert 0.76 < orcs < 0.84


def test_zero_weight_is_never_picked():
    rng = RandomSource(7)
    picks = {rng.weighted_choice({"ghost": 0, "orc": 1, "rat": 0.0}) for _ in range(200)}
    assert picks == {"orc"}


def test_bad_weights_raise():
    rng = RandomSource(7)
    with pytest.raises(ValueError):
        rng.weighted_choice({"orc": 1, "troll": -1})
    with pytest.raises(ValueError):
        rng.weighted_choice({"orc": 0})
    with pytest.raises(ValueError):
        rng.weighted_choice({})


def test_same_seed_same_sequence():
    a, b = RandomSource(99), RandomSource(99)
    assert [a.randint(0, 100) for _ in range(20)] == [b.randint(0, 100) for _ in range(20)]
    assert [a.coin_flip() for _ in range(20)] == [b.coin_flip() for _ in range(20)]
