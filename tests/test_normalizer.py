"""
Tests for turning answer records into the 0-1 trait vector.
"""

from __future__ import annotations

import pytest

from normalizer import (
    Fallback,
    INVALID,
    MISSING,
    UNRECOGNIZED,
    label_key,
    normalize_answers,
    normalize_answers_with_diagnostics,
    resolve_aliases,
    to_number,
    yes_no_value,
)
from profiles import TRAIT_WEIGHTS

# Traits driven by quantities whose defaults are not the midpoint
QUANTITY_TRAITS = {'incomeAmbition', 'upfrontInvestmentTolerance', 'timeCommitment'}


def test_empty_record_has_every_trait_in_range():
    traits = normalize_answers({})
    assert list(traits) == list(TRAIT_WEIGHTS)
    assert all(0.0 <= v <= 1.0 for v in traits.values())


def test_midpoint_answers_are_neutral_except_quantities(neutral_answers):
    traits, fallbacks = normalize_answers_with_diagnostics(neutral_answers)
    for trait, value in traits.items():
        if trait not in QUANTITY_TRAITS:
            assert value == pytest.approx(0.5), trait
    assert not [f for f in fallbacks if f.reason != MISSING]


def test_empty_record_is_neutral_except_quantities():
    traits = normalize_answers({})
    for trait, value in traits.items():
        if trait not in QUANTITY_TRAITS:
            assert value == pytest.approx(0.5), trait
    assert traits['incomeAmbition'] == pytest.approx((5000 / 15000 + 0.5) / 2)
    assert traits['upfrontInvestmentTolerance'] == 0.0
    assert traits['timeCommitment'] == pytest.approx(20 / 25)


def test_all_max_risk_answers_give_full_risk_tolerance(max_answers):
    traits = normalize_answers(max_answers)
    assert traits['riskTolerance'] == pytest.approx(1.0)
    assert traits['toolLearning'] == 1.0


def test_legacy_field_name_matches_canonical():
    assert normalize_answers({'riskComfortLevel': 5}) == normalize_answers({'riskComfort': 5})
    assert normalize_answers({'timeToFirstIncome': '1-3-months'}) == normalize_answers({'firstIncomeTimeline': '1–3 months'})
    assert normalize_answers({'weeklyTimeCommitment': 10}) == normalize_answers({'hoursPerWeek': 10})


def test_canonical_name_wins_over_legacy():
    resolved = resolve_aliases({'riskComfort': 5, 'riskComfortLevel': 1})
    assert resolved == {'riskComfort': 5}


def test_blank_canonical_falls_through_to_legacy():
    resolved = resolve_aliases({'selfMotivation': '', 'selfMotivationLevel': 4})
    assert resolved['selfMotivation'] == 4
    assert 'selfMotivationLevel' not in resolved


def test_labels_match_ignoring_case_and_dash_style():
    a = normalize_answers({'hoursPerWeek': 'less than 5 HOURS'})
    b = normalize_answers({'hoursPerWeek': 'Less than 5 hours'})
    c = normalize_answers({'hoursPerWeek': '5-10 hours'})
    assert a['timeCommitment'] == b['timeCommitment'] == 0.1
    assert c['timeCommitment'] == 0.4


def test_income_goal_is_capped():
    traits = normalize_answers({'successIncomeGoal': '$15,000', 'businessGrowthAmbition': 'A widely recognized company'})
    assert traits['incomeAmbition'] == pytest.approx(1.0)
    capped = normalize_answers({'successIncomeGoal': 90000, 'businessGrowthAmbition': 'A widely recognized company'})
    assert capped['incomeAmbition'] == pytest.approx(1.0)


def test_likert_values_are_clamped():
    assert normalize_answers({'techSkillsRating': 9})['technicalComfort'] == 1.0
    assert normalize_answers({'techSkillsRating': -2})['technicalComfort'] == 0.0


def test_unrecognized_enum_is_neutral_and_reported():
    traits, fallbacks = normalize_answers_with_diagnostics({'firstIncomeTimeline': 'someday'})
    assert traits['speedToIncome'] == 0.5
    assert Fallback('firstIncomeTimeline', UNRECOGNIZED, 'someday') in fallbacks


def test_missing_fields_are_reported():
    _, fallbacks = normalize_answers_with_diagnostics({})
    missing = {f.field for f in fallbacks if f.reason == MISSING}
    assert {'successIncomeGoal', 'riskComfort', 'toolLearningWillingness'} <= missing


def test_non_mapping_record_is_treated_as_empty():
    traits, fallbacks = normalize_answers_with_diagnostics([1, 2, 3])
    assert fallbacks[0] == Fallback('<record>', INVALID, 'list')
    assert traits == normalize_answers({})
    assert normalize_answers(None) == normalize_answers({})


def test_yes_no_values():
    assert yes_no_value('Yes') == 1.0
    assert yes_no_value('no') == 0.0
    assert yes_no_value('Maybe') == 0.5
    assert yes_no_value(True) == 1.0
    assert yes_no_value('purple') is None
    assert normalize_answers({'promoteOthersProducts': 'purple'})['promoteOthersWillingness'] == 0.5


def test_to_number():
    assert to_number('$5,000') == 5000.0
    assert to_number(12) == 12.0
    assert to_number(True) is None
    assert to_number('nan') is None
    assert to_number('lots') is None


def test_label_key():
    assert label_key('  $500–$2,000/Month ') == '$500-$2,000/month'
