"""
Tests for similarity, match scores, score spacing and categories.
"""

from __future__ import annotations

import random

import pytest

from matching import (
    assign_categories,
    bottom_matches,
    calculate_match,
    enforce_score_gaps,
    find_match,
    get_category,
    matches_by_category,
    rank_business_models,
    top_matches,
    trait_similarities,
    trait_similarity,
)
from normalizer import normalize_answers
from profiles import DEFAULT_SCORING_CONFIG, ScoringConfig, TRAIT_WEIGHTS


def _results(*scores):
    return [{'id': f'm{i}', 'name': f'Model {i}', 'score': s, 'category': ''} for i, s in enumerate(scores)]


def _scores(results):
    return [r['score'] for r in results]


@pytest.mark.parametrize('difference, expected', [
    (0.0, 1.0),
    (0.05, 0.98),
    (0.10, 0.94),
    (0.15, 0.90),
    (0.25, 0.75),
    (0.35, 0.55),
    (0.45, 0.30),
    (0.55, 0.10),
    (1.0, 0.0),
])
def test_similarity_band_edges(difference, expected):
    assert trait_similarity(difference) == pytest.approx(expected, abs=1e-9)


def test_similarity_is_symmetric_and_non_increasing():
    assert trait_similarity(-0.2) == trait_similarity(0.2)
    values = [trait_similarity(i / 100) for i in range(101)]
    assert all(b <= a + 1e-9 for a, b in zip(values, values[1:]))
    assert all(0.0 <= v <= 1.0 for v in values)


def test_large_gap_on_a_trait_is_nearly_worthless(max_answers):
    user = normalize_answers(max_answers)
    ideal = dict.fromkeys(TRAIT_WEIGHTS, 0.5)
    ideal['riskTolerance'] = 0.1
    assert trait_similarities(user, ideal)['riskTolerance'] < 0.10


def test_perfect_and_opposite_profiles_hit_the_score_bounds():
    ideal = dict.fromkeys(TRAIT_WEIGHTS, 1.0)
    assert calculate_match(ideal, ideal) == 96
    assert calculate_match(dict.fromkeys(TRAIT_WEIGHTS, 0.0), ideal) == 40


def test_scores_stay_in_range(sample_answers):
    user = normalize_answers(sample_answers)
    for model_id in DEFAULT_SCORING_CONFIG.model_ids:
        score = calculate_match(user, DEFAULT_SCORING_CONFIG.profile(model_id))
        assert isinstance(score, int)
        assert 40 <= score <= 96


def test_tied_scores_are_spread_deterministically():
    results = _results(90, 90, 90, 90)
    assert _scores(enforce_score_gaps(results)) == [90, 87, 82, 80]
    assert enforce_score_gaps(results) == enforce_score_gaps(results)


def test_wide_gaps_are_left_alone():
    assert _scores(enforce_score_gaps(_results(90, 70))) == [90, 70]


def test_repeated_gap_is_widened():
    assert _scores(enforce_score_gaps(_results(90, 87, 84))) == [90, 87, 81]


def test_scores_never_drop_below_zero():
    assert _scores(enforce_score_gaps(_results(1, 1))) == [1, 0]


def test_spacing_does_not_mutate_input():
    results = _results(90, 90)
    enforce_score_gaps(results)
    assert _scores(results) == [90, 90]


def test_seeded_rng_is_reproducible():
    results = _results(88, 88, 87, 80, 80, 79, 60)
    first = enforce_score_gaps(results, rng=random.Random(7))
    second = enforce_score_gaps(results, rng=random.Random(7))
    assert first == second


@pytest.mark.parametrize('rng', [None, random.Random(1), random.Random(42)])
def test_spacing_only_lowers_and_keeps_min_gap(rng):
    results = _results(92, 92, 91, 85, 85, 85, 70, 69, 50, 50)
    original = {r['id']: r['score'] for r in results}
    adjusted = enforce_score_gaps(results, min_gap=2, max_gap=7, rng=rng)

    scores = _scores(adjusted)
    assert scores == sorted(scores, reverse=True)
    for r in adjusted:
        assert r['score'] <= original[r['id']]
    for a, b in zip(scores, scores[1:]):
        assert a - b >= 2 or b == 0
    gaps = [a - b for a, b in zip(scores, scores[1:])]
    assert all(g1 != g2 for g1, g2 in zip(gaps, gaps[1:]))


@pytest.mark.parametrize('scores, expected', [
    ((90, 83, 76), [90, 83, 75]),
    ((90, 80, 70), [90, 80, 69]),
])
def test_repeated_gap_wider_than_allowed_is_broken(scores, expected):
    adjusted = _scores(enforce_score_gaps(_results(*scores)))
    assert adjusted == expected
    assert adjusted[0] - adjusted[1] != adjusted[1] - adjusted[2]


@pytest.mark.parametrize('min_gap, max_gap', [(0, 7), (5, 4)])
def test_invalid_gap_range_is_rejected(min_gap, max_gap):
    with pytest.raises(ValueError):
        enforce_score_gaps(_results(90, 80), min_gap=min_gap, max_gap=max_gap)


def test_top_three_are_always_best_fit():
    ranked = assign_categories(_results(50, 95, 85, 76, 56, 90))
    assert _scores(ranked) == [95, 90, 85, 76, 56, 50]
    assert [r['category'] for r in ranked] == [
        'Best Fit', 'Best Fit', 'Best Fit', 'Strong Fit', 'Possible Fit', 'Poor Fit',
    ]
    assert get_category(30, 0) == 'Best Fit'
    assert get_category(75, 3) == 'Strong Fit'
    assert get_category(54, 5) == 'Poor Fit'


def test_rank_business_models(sample_answers):
    ranked = rank_business_models(sample_answers)
    assert len(ranked) == len(DEFAULT_SCORING_CONFIG.model_ids)
    assert {r['id'] for r in ranked} == set(DEFAULT_SCORING_CONFIG.model_ids)

    scores = _scores(ranked)
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= s <= 96 for s in scores)
    assert [r['category'] for r in ranked[:3]] == ['Best Fit'] * 3
    assert rank_business_models(sample_answers) == ranked


def test_rank_with_injected_config(max_answers):
    user = normalize_answers(max_answers)
    config = ScoringConfig(
        weights=TRAIT_WEIGHTS,
        profiles={'mirror': dict(user), 'cautious': dict(user, riskTolerance=0.1)},
        names={'mirror': 'Mirror', 'cautious': 'Cautious'},
    )
    ranked = rank_business_models(max_answers, config=config)
    assert [r['id'] for r in ranked] == ['mirror', 'cautious']
    assert ranked[0]['score'] == 96
    assert ranked[0]['name'] == 'Mirror'


def test_query_helpers(sample_answers):
    ranked = rank_business_models(sample_answers)

    assert top_matches(ranked) == ranked[:3]
    assert top_matches(ranked, 0) == []
    assert bottom_matches(ranked, 2) == [ranked[-1], ranked[-2]]
    assert all(r['category'] == 'Best Fit' for r in matches_by_category(ranked, 'Best Fit'))
    assert find_match(ranked, 'copywriting')['id'] == 'copywriting'
    assert find_match(ranked, 'nope') is None
