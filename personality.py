# personality.py
"""
Twelve-metric personality profile on a 1-5 scale.

Every answer adds fixed deltas to a set of raw metric sums: choice answers
through a lookup table, 1-5 answers through a formula on the distance from
the scale midpoint. Raw sums are then mapped onto 1-5 against a fixed
min/max per metric.
"""

import math

from matching import round_half_up
from normalizer import (
    INCOME_GOAL_LABELS,
    label_key,
    read_likert,
    resolve_aliases,
    to_number,
)

METRICS = (
    'socialComfort',
    'discipline',
    'riskTolerance',
    'techComfort',
    'structurePreference',
    'motivation',
    'feedbackResilience',
    'creativity',
    'confidence',
    'adaptability',
    'focusPreference',
    'resilience',
)

# Raw score bounds used to map each metric onto 1-5
MIN_MAX_SCORES = {
    'socialComfort': (-15, 25),
    'discipline': (-12, 28),
    'riskTolerance': (-18, 22),
    'techComfort': (-8, 32),
    'structurePreference': (-20, 20),
    'motivation': (-10, 30),
    'feedbackResilience': (-15, 25),
    'creativity': (-12, 28),
    'confidence': (-18, 22),
    'adaptability': (-10, 30),
    'focusPreference': (-15, 25),
    'resilience': (-12, 28),
}


def _half(v):
    return math.floor((v - 3) * 1.5)


# Choice answers: field -> {slug: {metric: delta}}
CHOICE_EFFECTS = {
    'mainMotivation': {
        'financial-freedom': {'socialComfort': 1, 'discipline': 2, 'riskTolerance': 2, 'motivation': 3, 'confidence': 2, 'adaptability': 2, 'focusPreference': 3, 'resilience': 2},
        'flexibility-autonomy': {'socialComfort': -1, 'discipline': 1, 'riskTolerance': 1, 'motivation': 2, 'structurePreference': -2, 'adaptability': 3, 'focusPreference': 1, 'resilience': 1},
        'purpose-impact': {'socialComfort': 2, 'motivation': 3, 'creativity': 3, 'confidence': 1, 'adaptability': 2, 'focusPreference': 2, 'resilience': 3},
        'creativity-passion': {'creativity': 4, 'motivation': 2, 'structurePreference': -1, 'confidence': 1, 'adaptability': 3, 'focusPreference': 1, 'resilience': 2},
    },
    'firstIncomeTimeline': {
        'under-1-month': {'motivation': 4, 'riskTolerance': 3, 'confidence': 2, 'discipline': -1, 'adaptability': 4, 'focusPreference': 4, 'resilience': 3},
        '1-3-months': {'motivation': 3, 'riskTolerance': 2, 'confidence': 1, 'discipline': 1, 'adaptability': 3, 'focusPreference': 3, 'resilience': 2},
        '3-6-months': {'motivation': 2, 'riskTolerance': 1, 'confidence': 1, 'discipline': 2, 'adaptability': 2, 'focusPreference': 2, 'resilience': 3},
        'no-rush': {'motivation': 1, 'riskTolerance': -1, 'confidence': -1, 'discipline': 3, 'adaptability': 1, 'focusPreference': 1, 'resilience': 4},
    },
    'sellOrExitBusiness': {
        'yes': {'motivation': 2, 'riskTolerance': 2, 'confidence': 1, 'structurePreference': 1},
        'no': {'motivation': 1, 'riskTolerance': -1, 'confidence': -1, 'structurePreference': -1},
        'not-sure': {'motivation': 1},
    },
    'businessGrowthAmbition': {
        'side-income': {'confidence': -1, 'motivation': 1, 'riskTolerance': -1, 'discipline': 1},
        'full-time-income': {'confidence': 1, 'motivation': 2, 'riskTolerance': 1, 'discipline': 2},
        'multi-6-figure': {'confidence': 2, 'motivation': 3, 'riskTolerance': 2, 'discipline': 3},
        'widely-recognized': {'confidence': 3, 'motivation': 4, 'riskTolerance': 3, 'discipline': 4, 'socialComfort': 2},
    },
    'learningPreference': {
        'hands-on': {'creativity': 2, 'structurePreference': -1, 'riskTolerance': 1, 'techComfort': 1},
        'tutorials': {'structurePreference': 1, 'techComfort': 2},
        'reading': {'creativity': 1, 'structurePreference': 2, 'riskTolerance': -1},
        'coaching': {'structurePreference': 1, 'riskTolerance': -1, 'socialComfort': 1},
    },
    'toolLearningWillingness': {
        'yes': {'techComfort': 3, 'structurePreference': 1, 'motivation': 1, 'confidence': 1},
        'no': {'techComfort': -3, 'structurePreference': -1, 'motivation': -1, 'confidence': -1},
    },
    'repetitiveTasksFeeling': {
        'avoid': {'discipline': -2, 'structurePreference': -2, 'creativity': 2, 'motivation': -1},
        'tolerate': {'discipline': 1},
        'dont-mind': {'discipline': 2, 'structurePreference': 1, 'creativity': -1, 'motivation': 1},
        'enjoy': {'discipline': 3, 'structurePreference': 2, 'creativity': -2, 'motivation': 2},
    },
    'workCollaborationPreference': {
        'solo-only': {'socialComfort': -3, 'structurePreference': -1, 'confidence': -1, 'creativity': 1},
        'mostly-solo': {'socialComfort': -1, 'creativity': 1},
        'team-oriented': {'socialComfort': 3, 'structurePreference': 1, 'confidence': 1},
        'both': {'socialComfort': 1, 'confidence': 1, 'creativity': 1},
    },
    'workStructurePreference': {
        'clear-steps': {'structurePreference': 3, 'discipline': 2, 'creativity': -1, 'riskTolerance': -1},
        'some-structure': {'structurePreference': 1, 'discipline': 1},
        'mostly-flexible': {'structurePreference': -1, 'creativity': 1, 'riskTolerance': 1},
        'total-freedom': {'structurePreference': -3, 'discipline': -1, 'creativity': 2, 'riskTolerance': 2},
    },
    'workspaceAvailability': {
        'yes': {'discipline': 2, 'structurePreference': 2, 'confidence': 1, 'techComfort': 1},
        'no': {'discipline': -2, 'structurePreference': -2, 'confidence': -1, 'techComfort': -1},
    },
    'supportSystemStrength': {
        'none': {'confidence': -2, 'feedbackResilience': -2, 'motivation': -1, 'socialComfort': -1},
        'one-two': {},
        'small-helpful-group': {'confidence': 1, 'feedbackResilience': 1, 'motivation': 1, 'socialComfort': 1},
        'very-strong': {'confidence': 2, 'feedbackResilience': 2, 'motivation': 2, 'socialComfort': 2},
    },
    'decisionMakingStyle': {
        'quickly-instinctively': {'riskTolerance': 2, 'structurePreference': -2, 'confidence': 1, 'creativity': 1},
        'after-some-research': {'riskTolerance': 1, 'confidence': 1, 'discipline': 1},
        'logical-process': {'structurePreference': 2, 'confidence': 1, 'discipline': 2},
        'talking-to-others': {'riskTolerance': -1, 'socialComfort': 2},
    },
    'pathCreationPreference': {
        'proven-paths': {'creativity': -2, 'riskTolerance': -2, 'structurePreference': 2, 'confidence': 1},
        'mix': {'confidence': 1},
        'mostly-original': {'creativity': 2, 'riskTolerance': 2, 'structurePreference': -1, 'confidence': 1},
        'build-something-new': {'creativity': 3, 'riskTolerance': 3, 'structurePreference': -2, 'confidence': 2},
    },
    'faceAndVoiceOnlineComfort': {
        'yes': {'socialComfort': 2, 'confidence': 2, 'techComfort': 1, 'creativity': 1},
        'no': {'socialComfort': -2, 'confidence': -2, 'techComfort': -1, 'creativity': -1},
    },
    'clientCallsComfort': {
        'yes': {'socialComfort': 3, 'confidence': 2, 'feedbackResilience': 1},
        'no': {'socialComfort': -3, 'confidence': -2, 'feedbackResilience': -1},
    },
    'physicalProductShipping': {
        'yes': {'discipline': 2, 'structurePreference': 2, 'techComfort': 1},
        'no': {'discipline': -1, 'structurePreference': -1},
    },
    'createEarnWorkConsistently': {
        'create-once-passive': {'creativity': 2, 'motivation': 2, 'structurePreference': 1, 'discipline': 1},
        'work-with-people': {'socialComfort': 3, 'discipline': 2, 'feedbackResilience': 1},
        'mix-both': {'creativity': 1, 'socialComfort': 1, 'discipline': 1, 'motivation': 1},
    },
}

# Older and label spellings of choice answers -> slug used above
CHOICE_SYNONYMS = {
    'watching-tutorials': 'tutorials',
    'reading-self-study': 'reading',
    'one-on-one-coaching': 'coaching',
    'i-like-both': 'both',
    'a-mix': 'mix',
    'i-want-to-build-something-new': 'build-something-new',
    'just-a-side-income': 'side-income',
    'multi-6-figure-brand': 'multi-6-figure',
    'a-widely-recognized-company': 'widely-recognized',
    "i-don't-mind-them": 'dont-mind',
    'create-once,-earn-passively': 'create-once-passive',
    'work-consistently-with-people': 'work-with-people',
    'mix-of-both': 'mix-both',
}

# 1-5 answers: field -> deltas as a function of the answer
LIKERT_EFFECTS = {
    'passionIdentityAlignment': lambda v: {
        'creativity': v - 3, 'motivation': _half(v), 'structurePreference': -(v - 3),
        'adaptability': v - 3, 'focusPreference': v - 3,
    },
    'passiveIncomeImportance': lambda v: {
        'motivation': v - 3, 'discipline': _half(v), 'structurePreference': v - 3,
    },
    'consistencyWithGoals': lambda v: {
        'discipline': (v - 3) * 2, 'motivation': v - 3, 'feedbackResilience': v - 3,
        'confidence': _half(v), 'adaptability': v - 3, 'focusPreference': v - 3, 'resilience': v,
    },
    'trialAndErrorComfort': lambda v: {
        'riskTolerance': (v - 3) * 2, 'structurePreference': -(v - 3) * 2, 'creativity': v - 3,
        'feedbackResilience': v - 3, 'adaptability': v, 'focusPreference': v - 3,
        'resilience': (v - 1) * 0.8,
    },
    'systemsRoutinesEnjoyment': lambda v: {
        'discipline': (v - 3) * 2, 'structurePreference': (v - 3) * 2, 'creativity': -(v - 3),
        'techComfort': v - 3,
    },
    'discouragementResilience': lambda v: {
        'feedbackResilience': (v - 3) * 2, 'motivation': v - 3, 'confidence': v - 3,
        'discipline': _half(v), 'adaptability': v - 3, 'focusPreference': v - 3, 'resilience': v,
    },
    'organizationLevel': lambda v: {
        'discipline': (v - 3) * 2, 'structurePreference': (v - 3) * 2, 'confidence': v - 3,
        'techComfort': _half(v),
    },
    'selfMotivation': lambda v: {
        'motivation': (v - 3) * 2, 'discipline': (v - 3) * 2, 'confidence': v - 3,
        'feedbackResilience': _half(v),
    },
    'uncertaintyHandling': lambda v: {
        'riskTolerance': (v - 3) * 2, 'structurePreference': -(v - 3) * 2, 'confidence': v - 3,
        'creativity': _half(v), 'adaptability': v, 'focusPreference': v - 3,
        'resilience': (v - 1) * 0.7,
    },
    'brandFaceComfort': lambda v: {
        'socialComfort': (v - 3) * 2, 'confidence': (v - 3) * 2, 'motivation': _half(v),
        'creativity': v - 3,
    },
    'competitivenessLevel': lambda v: {
        'motivation': (v - 3) * 2, 'confidence': (v - 3) * 2, 'riskTolerance': v - 3,
        'feedbackResilience': _half(v),
    },
    'creativeWorkEnjoyment': lambda v: {
        'creativity': (v - 3) * 2, 'structurePreference': -(v - 3), 'motivation': v - 3,
        'confidence': _half(v), 'adaptability': v - 3,
        'focusPreference': {5: 1, 4: 2, 3: 3, 2: 4}.get(v, 5),
    },
    'directCommunicationEnjoyment': lambda v: {
        'socialComfort': (v - 3) * 2, 'confidence': (v - 3) * 2, 'feedbackResilience': v - 3,
        'motivation': _half(v),
    },
    'techSkillsRating': lambda v: {
        'techComfort': (v - 3) * 3, 'confidence': v - 3,
        'structurePreference': math.floor((v - 3) * 0.5),
    },
    'internetDeviceReliability': lambda v: {
        'techComfort': (v - 3) * 2, 'structurePreference': v - 3, 'confidence': _half(v),
        'discipline': v - 3,
    },
    'riskComfort': lambda v: {
        'riskTolerance': (v - 3) * 3, 'confidence': (v - 3) * 2, 'motivation': v - 3,
        'feedbackResilience': _half(v),
    },
    'negativeFeedbackResponse': lambda v: {
        'feedbackResilience': (v - 3) * 3, 'confidence': (v - 3) * 2, 'motivation': v - 3,
        'socialComfort': _half(v), 'adaptability': v - 3, 'focusPreference': v - 3, 'resilience': v,
    },
    'controlImportance': lambda v: {
        'confidence': (v - 3) * 2, 'structurePreference': v - 3, 'riskTolerance': _half(v),
        'discipline': v - 3,
    },
}

# Quantity answers are bucketed: (lower bound, deltas), highest bound first
INCOME_BUCKETS = (
    (10000, {'confidence': 3, 'motivation': 4, 'riskTolerance': 3, 'adaptability': 4, 'focusPreference': 4, 'resilience': 4}),
    (5000, {'confidence': 2, 'motivation': 3, 'riskTolerance': 2, 'adaptability': 3, 'focusPreference': 3, 'resilience': 3}),
    (2000, {'confidence': 1, 'motivation': 2, 'riskTolerance': 1, 'adaptability': 2, 'focusPreference': 2, 'resilience': 2}),
    (float('-inf'), {'confidence': -2, 'motivation': 1, 'riskTolerance': -1, 'adaptability': 1, 'focusPreference': 2, 'resilience': 1}),
)
INVESTMENT_BUCKETS = (
    (2000, {'riskTolerance': 3, 'confidence': 2, 'motivation': 3}),
    (1000, {'riskTolerance': 1, 'confidence': 1, 'motivation': 2}),
    (250, {'riskTolerance': -1, 'confidence': -1, 'motivation': 1}),
    (float('-inf'), {'riskTolerance': -3, 'confidence': -2, 'motivation': -1}),
)
HOURS_BUCKETS = (
    (25, {'discipline': 3, 'motivation': 3, 'confidence': 2}),
    (10, {'discipline': 2, 'motivation': 2, 'confidence': 1}),
    (5, {'discipline': 1, 'motivation': 1}),
    (float('-inf'), {'discipline': -2, 'motivation': -1, 'confidence': -1}),
)

# Range labels -> representative amounts
INVESTMENT_AMOUNTS = {'$0': 0, 'Under $250': 125, '$250–$1,000': 625, '$1,000+': 1000}
HOURS_AMOUNTS = {'Less than 5 hours': 3, '5–10 hours': 7, '10–25 hours': 17, '25+ hours': 25}

QUANTITY_EFFECTS = (
    ('successIncomeGoal', INCOME_BUCKETS, INCOME_GOAL_LABELS, 5000),
    ('upfrontInvestment', INVESTMENT_BUCKETS, INVESTMENT_AMOUNTS, 0),
    ('hoursPerWeek', HOURS_BUCKETS, HOURS_AMOUNTS, 20),
)

TOOL_BONUSES = {
    'google-docs-sheets': {'techComfort': 2, 'discipline': 1, 'adaptability': 1, 'focusPreference': 1},
    'canva': {'techComfort': 2, 'creativity': 1, 'adaptability': 1, 'focusPreference': 1},
    'notion': {'techComfort': 3, 'structurePreference': 1, 'adaptability': 1, 'focusPreference': 1},
    'shopify-wix': {'techComfort': 3, 'confidence': 1, 'adaptability': 1, 'focusPreference': 1},
    'zoom-streamyard': {'techComfort': 2, 'socialComfort': 1, 'adaptability': 1, 'focusPreference': 1},
}
TOOL_SYNONYMS = {'shopify-wix-squarespace': 'shopify-wix'}

DESCRIPTIONS = {
    'socialComfort': {
        'low': 'Prefers working independently and behind-the-scenes',
        'medium': 'Comfortable with moderate social interaction',
        'high': 'Thrives on social interaction and being visible',
    },
    'discipline': {
        'low': 'Works best with flexibility and variety',
        'medium': 'Balances structure with adaptability',
        'high': 'Excels with consistent routines and systems',
    },
    'riskTolerance': {
        'low': 'Prefers proven, safe approaches',
        'medium': 'Comfortable with calculated risks',
        'high': 'Embraces uncertainty and bold ventures',
    },
    'techComfort': {
        'low': 'Prefers simple, familiar tools',
        'medium': 'Comfortable learning new technologies',
        'high': 'Loves exploring cutting-edge tools',
    },
    'structurePreference': {
        'low': 'Thrives with creative freedom',
        'medium': 'Appreciates some guidance and flexibility',
        'high': 'Performs best with clear frameworks',
    },
    'motivation': {
        'low': 'Steady, sustainable approach',
        'medium': 'Balanced drive and patience',
        'high': 'High energy and ambitious goals',
    },
    'feedbackResilience': {
        'low': 'Sensitive to criticism, needs encouragement',
        'medium': 'Handles feedback constructively',
        'high': 'Uses criticism as fuel for improvement',
    },
    'creativity': {
        'low': 'Prefers systematic, logical approaches',
        'medium': 'Balances creativity with practicality',
        'high': 'Thrives on innovation and original ideas',
    },
    'confidence': {
        'low': 'Cautious and thoughtful decision-maker',
        'medium': 'Balanced confidence and humility',
        'high': 'Bold and decisive leader',
    },
    'adaptability': {
        'low': 'Prefers stability and routine',
        'medium': 'Adjusts well to moderate changes',
        'high': 'Thrives in dynamic, changing environments',
    },
    'focusPreference': {
        'low': 'Prefers creative, varied tasks',
        'medium': 'Balances focus with creativity',
        'high': 'Excels at deep, concentrated work',
    },
    'resilience': {
        'low': 'Needs support during setbacks',
        'medium': 'Recovers steadily from challenges',
        'high': 'Bounces back quickly from failures',
    },
}


def slug(value):
    """'Under 1 month' -> 'under-1-month'"""
    return label_key(value).replace(' ', '-')


def _add(raw, deltas):
    for metric, delta in deltas.items():
        raw[metric] += delta


def _choice(value, table):
    if isinstance(value, bool):
        value = 'yes' if value else 'no'
    if not isinstance(value, str):
        return None
    key = slug(value)
    key = CHOICE_SYNONYMS.get(key, key)
    return table.get(key)


def _amount(value, labels, default):
    if value is None:
        return default
    if isinstance(value, str):
        for label, amount in labels.items():
            if label_key(label) == label_key(value):
                return amount
    number = to_number(value)
    return default if number is None else number


def _bucket(amount, buckets):
    for lower, deltas in buckets:
        if amount >= lower:
            return deltas
    return {}


def calculate_raw_scores(answers):
    data = resolve_aliases(answers)
    raw = {metric: 0 for metric in METRICS}
    unused = []

    for field, table in CHOICE_EFFECTS.items():
        deltas = _choice(data.get(field), table)
        if deltas is not None:
            _add(raw, deltas)

    for field, buckets, labels, default in QUANTITY_EFFECTS:
        _add(raw, _bucket(_amount(data.get(field), labels, default), buckets))

    for field, effect in LIKERT_EFFECTS.items():
        _add(raw, effect(read_likert(data, field, unused)))

    tools = data.get('familiarTools') or []
    if isinstance(tools, str):
        tools = [tools]
    if isinstance(tools, (list, tuple, set)):
        for tool in tools:
            if isinstance(tool, str):
                key = slug(tool)
                _add(raw, TOOL_BONUSES.get(TOOL_SYNONYMS.get(key, key), {}))

    return raw


def scale_raw_score(raw, low, high):
    """Map a raw sum onto 1-5, halves rounded up to one decimal"""
    normalized = 1 + ((raw - low) / (high - low)) * 4
    return round_half_up(max(1.0, min(5.0, normalized)) * 10) / 10


def calculate_personality_scores(answers):
    """1-5 score per metric, one decimal; never raises."""

    raw = calculate_raw_scores(answers)
    return {metric: scale_raw_score(raw[metric], *MIN_MAX_SCORES[metric]) for metric in METRICS}


def describe_level(score):
    if score <= 2.5:
        return 'low'
    if score <= 3.5:
        return 'medium'
    return 'high'


def get_personality_descriptions(scores):
    return {metric: DESCRIPTIONS[metric][describe_level(score)] for metric, score in scores.items() if metric in DESCRIPTIONS}
