import math
from collections import Counter

import pytest

from randomness import MersenneTwister, Randomness, SelectionError, WeightError, normalize_weights


def test_normalize_simple():
    assert normalize_weights({"a": 1, "b": 3}) == {"a": 0.25, "b": 0.75}


def test_normalize_rejects_negative_and_nan():
    with pytest.raises(WeightError):
        normalize_weights({"a": -1})
    with pytest.raises(ValueError):
        normalize_weights({"a": 1, "b": float("nan")})


def test_normalize_all_zero_is_uniform():
    assert normalize_weights({"a": 0, "b": 0, "c": 0, "d": 0}) == {"a": 0.25, "b": 0.25, "c": 0.25, "d": 0.25}


def test_normalize_empty():
    assert normalize_weights({}) == {}


def test_normalize_does_not_touch_input():
    weights = {"x": 2.0, "y": 6.0}
    out = normalize_weights(weights)
    assert weights == {"x": 2.0, "y": 6.0}
    assert out is not weights


def test_normalize_preserves_order_and_ranking():
    weights = {"e": 5.0, "a": 0.5, "c": 2.0, "z": 0.0, "b": 1.0}
    out = normalize_weights(weights)
    assert list(out) == list(weights)
    assert math.isclose(sum(out.values()), 1.0, abs_tol=1e-9)
    items = list(weights)
    for i in items:
        for j in items:
            if weights[i] > weights[j]:
                assert out[i] >= out[j]


def test_normalize_accepts_pairs_and_static_access():
    assert normalize_weights([("a", 1), ("b", 1)]) == {"a": 0.5, "b": 0.5}
    assert Randomness.normalize_weights({"a": 2}) == {"a": 1.0}


def test_normalize_rejects_none():
    with pytest.raises(TypeError):
        normalize_weights(None)


def test_weighted_choice_walks_in_order(constant):
    weights = {"a": 0.2, "b": 0.5, "c": 0.3}
    assert constant(0.0).weighted_choice(weights) == "a"
    assert constant(0.1).weighted_choice(weights) == "a"
    assert constant(0.3).weighted_choice(weights) == "b"
    assert constant(0.75).weighted_choice(weights) == "c"


def test_weighted_choice_last_item_despite_rounding(constant):
    weights = {"a": 0.1, "b": 0.2, "c": 0.7}
    assert constant(0.9999999999999999).weighted_choice(weights) == "c"


def test_weighted_choice_failure_and_default(constant):
    weights = {"a": 0.1, "b": 0.1}
    with pytest.raises(SelectionError):
        constant(0.5).weighted_choice(weights)
    assert constant(0.5).weighted_choice(weights, "fallback") == "fallback"
    assert constant(0.5).weighted_choice(weights, None) is None
    with pytest.raises(SelectionError):
        constant(0.5).weighted_choice({})


def test_weighted_choice_never_returns_zero_weight():
    rand = Randomness(MersenneTwister(8))
    weights = normalize_weights({"a": 3, "never": 0, "b": 1, "nope": 0})
    seen = Counter(rand.weighted_choice(weights) for _ in range(3000))
    assert set(seen) == {"a", "b"}
    assert 0.70 <= seen["a"] / 3000 <= 0.80


def test_weighted_choice_rejects_none():
    with pytest.raises(TypeError):
        Randomness(MersenneTwister(1)).weighted_choice(None)


def test_weighted_choices_all_items_in_order():
    rand = Randomness(MersenneTwister(1))
    weights = {"a": 0.0, "b": 0.9, "c": 0.1}
    # Whole mapping requested: weights are not consulted and order is kept
    assert list(rand.weighted_choices(3, weights)) == ["a", "b", "c"]
    assert list(rand.weighted_choices(10, weights)) == ["a", "b", "c"]


def test_weighted_choices_shrinks_remaining_mass(constant):
    weights = {"a": 0.5, "b": 0.3, "c": 0.2}
    assert list(constant(0.99).weighted_choices(2, weights)) == ["c", "b"]
    assert list(constant(0.0).weighted_choices(2, weights)) == ["a", "b"]
    assert weights == {"a": 0.5, "b": 0.3, "c": 0.2}


def test_weighted_choices_truncates_fractional_count(constant):
    weights = {"a": 0.5, "b": 0.3, "c": 0.2}
    assert list(constant(0.0).weighted_choices(1.5, weights)) == ["a"]
    assert list(constant(0.0).weighted_choices(3.7, weights)) == ["a", "b", "c"]
    assert list(constant(0.0).weighted_choices(-2, weights)) == []


def test_weighted_choices_no_repeats():
    rand = Randomness(MersenneTwister(12))
    weights = normalize_weights({k: w for k, w in zip("abcdefgh", [8, 1, 4, 2, 6, 3, 7, 5])})
    for n in range(len(weights)):
        picked = list(rand.weighted_choices(n, weights))
        assert len(picked) <= n
        assert len(set(picked)) == len(picked)
        assert set(picked) <= set(weights)


def test_weighted_choices_is_lazy():
    draws = []

    def gen():
        draws.append(1)
        return 0.0

    it = Randomness(gen).weighted_choices(2, {"a": 0.5, "b": 0.3, "c": 0.2})
    assert draws == []
    assert next(it) == "a"
    assert len(draws) == 1


def test_weighted_choices_first_pick_follows_weights():
    rand = Randomness(MersenneTwister(21))
    weights = {"heavy": 0.7, "light": 0.3}
    first = Counter(next(rand.weighted_choices(1, weights)) for _ in range(2000))
    assert 0.65 <= first["heavy"] / 2000 <= 0.75


def test_weighted_choices_rejects_none_eagerly():
    with pytest.raises(TypeError):
        Randomness(MersenneTwister(1)).weighted_choices(1, None)
