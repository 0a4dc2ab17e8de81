"""
Tests for the five headline trait percentages.
"""

from __future__ import annotations

from trait_summary import (
    DEFAULT_IDEAL_TRAITS,
    SUMMARY_TRAITS,
    calculate_trait_summary,
    calculate_trait_summary_with_diagnostics,
    compare_traits,
    get_ideal_traits,
)


def test_all_max_answers_score_100(max_answers):
    summary = calculate_trait_summary(max_answers)
    assert summary == dict.fromkeys(SUMMARY_TRAITS, 100)


def test_empty_record_uses_defaults():
    summary, fallbacks = calculate_trait_summary_with_diagnostics({})
    assert summary == {
        'riskTolerance': 50,
        'selfMotivation': 50,
        'techComfort': 15,
        'consistency': 50,
        'learningAgility': 27,
    }
    assert {'familiarTools', 'learningPreference', 'toolLearningWillingness'} <= {f.field for f in fallbacks}


def test_all_min_answers_score_0(min_answers):
    summary = calculate_trait_summary(min_answers)
    assert summary['riskTolerance'] == 0
    assert summary['selfMotivation'] == 0
    assert summary['consistency'] == 0


def test_legacy_names_are_accepted():
    legacy = calculate_trait_summary({'riskComfortLevel': 5, 'longTermConsistency': 5, 'trialErrorComfort': 5})
    canonical = calculate_trait_summary({'riskComfort': 5, 'consistencyWithGoals': 5, 'trialAndErrorComfort': 5})
    assert legacy == canonical


def test_each_tool_counts_once():
    once = calculate_trait_summary({'familiarTools': ['canva']})
    twice = calculate_trait_summary({'familiarTools': ['canva', 'Canva', 'unknown-tool']})
    none = calculate_trait_summary({'familiarTools': []})
    assert once == twice
    assert once['techComfort'] > none['techComfort']


def test_learning_preference_labels():
    slug = calculate_trait_summary({'learningPreference': 'watching-tutorials'})
    label = calculate_trait_summary({'learningPreference': 'Watching Tutorials'})
    assert slug == label


def test_compare_traits():
    rows = compare_traits({}, 'copywriting')
    assert [row['trait'] for row in rows] == list(SUMMARY_TRAITS)
    risk = rows[0]
    assert risk['ideal'] == 45
    assert risk['difference'] == risk['user'] - risk['ideal']
    assert risk['labels'] == {'min': 'Avoids Risks', 'max': 'Embraces Risks'}


def test_unknown_model_gets_default_ideal_traits():
    assert get_ideal_traits('print-on-demand') == DEFAULT_IDEAL_TRAITS
    ideal = get_ideal_traits('nope')
    ideal['riskTolerance'] = 0
    assert DEFAULT_IDEAL_TRAITS['riskTolerance'] == 60
