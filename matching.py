# matching.py

import math

from config import Config
from logger import get_logger
from normalizer import normalize_answers
from profiles import DEFAULT_SCORING_CONFIG, TRAIT_WEIGHTS

logger = get_logger(__name__)

# (upper bound of difference, band width, similarity at the far edge, similarity span)
# Sharp cliffs between bands make small misalignments expensive.
SIMILARITY_BANDS = (
    (0.05, 0.05, 0.98, 0.02),
    (0.15, 0.10, 0.90, 0.08),
    (0.25, 0.10, 0.75, 0.15),
    (0.35, 0.10, 0.55, 0.20),
    (0.45, 0.10, 0.30, 0.25),
    (0.55, 0.10, 0.10, 0.20),
)
TAIL_SIMILARITY = 0.10
TAIL_WIDTH = 0.45

SCORE_FLOOR = 40
SCORE_CEILING = 96

BEST_FIT_COUNT = 3
CATEGORY_THRESHOLDS = (
    ('Strong Fit', 75),
    ('Possible Fit', 55),
)
BEST_FIT = 'Best Fit'
POOR_FIT = 'Poor Fit'
CATEGORIES = (BEST_FIT, 'Strong Fit', 'Possible Fit', POOR_FIT)

# How many of the allowed gaps the deterministic picker rotates through
GAP_ROTATION = 3


def trait_similarity(difference):
    """Map an absolute trait difference (0-1) to a similarity (0-1)."""

    difference = abs(difference)
    lower = 0.0
    for upper, width, base, span in SIMILARITY_BANDS:
        if difference <= upper:
            return base + span * (1 - (difference - lower) / width)
        lower = upper
    return max(0.0, TAIL_SIMILARITY * (1 - (difference - lower) / TAIL_WIDTH))


def trait_similarities(user_traits, ideal_profile, weights=TRAIT_WEIGHTS):
    """Per-trait similarity of a respondent against one ideal profile"""

    return {
        trait: trait_similarity(user_traits.get(trait, 0.0) - ideal_profile.get(trait, 0.0))
        for trait in weights
    }


def round_half_up(value):
    return int(math.floor(value + 0.5))


def calculate_match(user_traits, ideal_profile, weights=TRAIT_WEIGHTS):
    """Calculate match score 40-96"""

    similarities = trait_similarities(user_traits, ideal_profile, weights)

    total_weight = 0.0
    weighted = 0.0
    for trait, weight in weights.items():
        weighted += similarities[trait] * weight
        total_weight += weight

    raw = (weighted / total_weight) * 100 if total_weight > 0 else 0.0

    # Rescale so no pairing ever shows 0% or 100%
    scaled = SCORE_FLOOR + (raw / 100) * (SCORE_CEILING - SCORE_FLOOR)
    return round_half_up(scaled)


def _sorted_by_score(results):
    return sorted((dict(r) for r in results), key=lambda r: r['score'], reverse=True)


def _pick_gap(candidates, index, rng):
    if rng is not None:
        return rng.choice(candidates)
    return candidates[index % min(GAP_ROTATION, len(candidates))]


def enforce_score_gaps(results, min_gap=Config.SCORE_MIN_GAP, max_gap=Config.SCORE_MAX_GAP, rng=None):
    """Spread consecutive scores apart for display.

    Sorts descending, then walks down the list choosing a target gap in
    [min_gap, max_gap] different from the previous gap. When the real gap is
    smaller than the target, or repeats the previous gap, the lower item is
    pushed down to prev - target. A repeated gap wider than every allowed
    target is widened by one instead. Scores only decrease and order is kept.

    Target gaps follow a fixed index-based rotation so the same input always
    yields the same output. Pass a random.Random as rng to pick them at random.
    """

    if min_gap < 1 or max_gap < min_gap:
        raise ValueError(f'invalid gap range [{min_gap}, {max_gap}]')

    adjusted = _sorted_by_score(results)
    allowed = list(range(min_gap, max_gap + 1))
    last_gap = None

    for i in range(1, len(adjusted)):
        prev = adjusted[i - 1]['score']
        gap = prev - adjusted[i]['score']

        candidates = [g for g in allowed if g != last_gap] or allowed
        if gap == last_gap:
            # only a wider gap can break the repeat without raising the score
            candidates = [g for g in candidates if g > gap]
            if not candidates:
                adjusted[i]['score'] = max(0, prev - (gap + 1))
                last_gap = prev - adjusted[i]['score']
                continue
        target = _pick_gap(candidates, i, rng)

        if gap < target:
            adjusted[i]['score'] = max(0, prev - target)
            gap = prev - adjusted[i]['score']
        last_gap = gap

    return adjusted


def get_category(score, index):
    """Top 3 are always Best Fit, the rest by static thresholds"""

    if index < BEST_FIT_COUNT:
        return BEST_FIT
    for category, threshold in CATEGORY_THRESHOLDS:
        if score >= threshold:
            return category
    return POOR_FIT


def assign_categories(results):
    ranked = _sorted_by_score(results)
    for i, result in enumerate(ranked):
        result['category'] = get_category(result['score'], i)
    return ranked


def score_business_models(user_traits, config=DEFAULT_SCORING_CONFIG):
    """Unsorted, uncategorized scores for every configured model"""

    return [
        {
            'id': model_id,
            'name': config.display_name(model_id),
            'score': calculate_match(user_traits, config.profile(model_id), config.weights),
            'category': '',
        }
        for model_id in config.model_ids
    ]


def rank_business_models(answers, config=DEFAULT_SCORING_CONFIG,
                         min_gap=Config.SCORE_MIN_GAP, max_gap=Config.SCORE_MAX_GAP, rng=None):
    """Return every business model ranked, spaced and categorized for one answer record"""

    user_traits = normalize_answers(answers)
    scored = score_business_models(user_traits, config)
    spaced = enforce_score_gaps(scored, min_gap=min_gap, max_gap=max_gap, rng=rng)
    ranked = assign_categories(spaced)

    logger.info(
        'business_models_ranked',
        models=len(ranked),
        top_match=ranked[0]['id'] if ranked else None,
        top_score=ranked[0]['score'] if ranked else None,
    )
    return ranked


def top_matches(results, count=Config.TOP_MATCH_COUNT):
    return list(results[:max(0, count)])


def bottom_matches(results, count=Config.TOP_MATCH_COUNT):
    """Worst fits, worst first"""
    if count <= 0:
        return []
    return list(reversed(results[-count:]))


def matches_by_category(results, category):
    return [r for r in results if r['category'] == category]


def find_match(results, model_id):
    for result in results:
        if result['id'] == model_id:
            return result
    return None
