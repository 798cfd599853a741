import math
import random

import pytest

from luckdraw.errors import InvalidArgument, InvalidWeight
from luckdraw.luck_engine import multiplier
from luckdraw.models.candidate_models import Candidate
from luckdraw.weighting import calc_weights, sort_by_luckiness

from tests.stubs import StubRng


def scaled(luck):
    return math.floor(multiplier(luck) * 1000)


def by_id(weighted):
    return {w.identifier: w.effective_weight for w in weighted}


def test_zero_luck_gives_base_weights(rng):
    weighted = calc_weights(0, [
        {"identifier": "A", "luckiness": 2},
        {"identifier": "B", "luckiness": 1},
    ], rng)
    assert by_id(weighted) == {"A": 1000, "B": 1000}


def test_walk_is_sorted_by_luckiness_desc(rng, dice):
    weighted = calc_weights(100, dice, rng)
    assert [w.identifier for w in weighted] == [6, 5, 4, 3, 2, 1]


def test_luck_decays_only_between_tiers(rng):
    weighted = by_id(calc_weights(100, [
        {"identifier": "A", "luckiness": 3},
        {"identifier": "B", "luckiness": 2},
        {"identifier": "C", "luckiness": 2},
        {"identifier": "D", "luckiness": 1},
    ], rng))

    assert weighted["A"] == scaled(100)
    assert weighted["B"] == weighted["C"] == scaled(90)
    assert weighted["D"] == scaled(80)
    assert weighted["A"] > weighted["B"] > weighted["D"]


def test_luckiness_magnitude_does_not_matter(rng):
    close = by_id(calc_weights(200, [
        {"identifier": "hi", "luckiness": 2},
        {"identifier": "lo", "luckiness": 1},
    ], rng))
    far = by_id(calc_weights(200, [
        {"identifier": "hi", "luckiness": 10_000},
        {"identifier": "lo", "luckiness": 1},
    ], rng))
    assert close == far


def test_explicit_weight_scales_result(rng):
    weighted = by_id(calc_weights(150, [
        Candidate(identifier="A", luckiness=2, weight=3),
        Candidate(identifier="B", luckiness=1),
    ], rng))
    assert weighted["A"] == 3 * scaled(150)
    assert weighted["B"] == scaled(135)


def test_non_positive_weight_is_rejected(rng):
    for weight in (0, 0.0, -2):
        with pytest.raises(InvalidWeight):
            calc_weights(100, [{"identifier": "A", "luckiness": 1, "weight": weight}], rng)


def test_every_effective_weight_positive(rng):
    weighted = calc_weights(100, [
        {"identifier": "A", "luckiness": 2, "weight": 0.001},
        {"identifier": "B", "luckiness": 1},
    ], rng)
    assert all(w.effective_weight > 0 for w in weighted)


def test_large_integer_ranks_stay_distinct(rng):
    weighted = by_id(calc_weights(100, [
        {"identifier": "hi", "luckiness": 2 ** 60 + 1},
        {"identifier": "lo", "luckiness": 2 ** 60},
    ], rng))
    assert weighted == {"hi": scaled(100), "lo": scaled(90)}


def test_negative_luck_clamps_multiplier(rng, dice):
    weighted = calc_weights(-30, dice, rng)
    assert {w.effective_weight for w in weighted} == {1000}


def test_weight_sum_positive(rng, dice):
    for luck in (-5, 0, 1, 25, 100, 1000):
        assert sum(w.effective_weight for w in calc_weights(luck, dice, rng)) > 0


def test_ties_are_shuffled_before_sort():
    tied = [Candidate(identifier=i, luckiness=1) for i in range(5)]
    firsts = {
        sort_by_luckiness(tied, random.Random(seed))[0].identifier
        for seed in range(60)
    }
    assert len(firsts) > 1


def test_sort_is_stable_after_shuffle():
    # Stub shuffle is a no-op, so ties keep input order
    entries = [
        Candidate(identifier="a", luckiness=1),
        Candidate(identifier="b", luckiness=2),
        Candidate(identifier="c", luckiness=1),
        Candidate(identifier="d", luckiness=2),
    ]
    ordered = sort_by_luckiness(entries, StubRng())
    assert [c.identifier for c in ordered] == ["b", "d", "a", "c"]


def test_input_is_not_mutated(rng, dice):
    before = list(dice)
    calc_weights(100, dice, rng)
    assert dice == before


def test_malformed_candidate():
    with pytest.raises(InvalidArgument):
        calc_weights(10, [{"identifier": "A"}])


def test_duplicate_identifier():
    with pytest.raises(InvalidArgument):
        calc_weights(10, [
            {"identifier": "A", "luckiness": 1},
            {"identifier": "A", "luckiness": 2},
        ])
