# normalizer.py
"""
Turn a raw questionnaire answer record into the canonical 0-1 trait vector.

The record is loosely typed: 1-5 scale answers, label strings from the
current quiz, slugs from older quiz versions, plain numbers for income,
hours and budget, and lists of tags. Any field can be missing. Every branch
has a default, so normalization never raises; fields that fell back are
reported through the diagnostics list instead.
"""

import math
from collections import namedtuple
from collections.abc import Mapping

from logger import get_logger
from profiles import TRAIT_WEIGHTS

logger = get_logger(__name__)

Fallback = namedtuple('Fallback', ['field', 'reason', 'value'])

MISSING = 'missing'
UNRECOGNIZED = 'unrecognized'
INVALID = 'invalid'

# canonical field -> older names for the same question, in lookup order.
# The canonical name wins when several are present.
FIELD_ALIASES = {
    'successIncomeGoal': ('incomeGoal',),
    'businessGrowthAmbition': ('businessGrowthSize',),
    'firstIncomeTimeline': ('timeToFirstIncome',),
    'upfrontInvestment': ('startupBudget',),
    'sellOrExitBusiness': ('businessExitPlan',),
    'hoursPerWeek': ('weeklyTimeCommitment', 'timeCommitment'),
    'consistencyWithGoals': ('longTermConsistency',),
    'trialAndErrorComfort': ('trialErrorComfort',),
    'riskComfort': ('riskComfortLevel', 'riskTolerance'),
    'selfMotivation': ('selfMotivationLevel',),
    'negativeFeedbackResponse': ('feedbackRejectionResponse',),
    'pathCreationPreference': ('pathPreference',),
    'faceAndVoiceOnlineComfort': ('onlinePresenceComfort',),
    'physicalProductShipping': ('physicalShippingOpenness',),
    'createEarnWorkConsistently': ('workStylePreference',),
    'teachOrSolve': ('teachVsSolvePreference',),
    'platformEcosystemInterest': ('ecosystemParticipation',),
    'promoteOthersProducts': ('promotingOthersOpenness',),
    'techSkillsRating': ('technologyComfort',),
}

LIKERT_DEFAULT = 3
NEUTRAL = 0.5

INCOME_GOAL_CEILING = 15000
DEFAULT_INCOME_GOAL = 5000
HOURS_CEILING = 25
DEFAULT_HOURS = 20
INVESTMENT_CEILING = 1000
DEFAULT_INVESTMENT = 0

# Monthly income goal range labels -> representative amount
INCOME_GOAL_LABELS = {
    'Less than $500/month': 500,
    '$500–$2,000/month': 1250,
    '$2,000–$5,000/month': 3500,
    '$5,000+/month': 5000,
}

HOURS_LABELS = {
    'Less than 5 hours': 0.1,
    '5–10 hours': 0.4,
    '10–25 hours': 0.7,
    '25+ hours': 1.0,
}

INVESTMENT_LABELS = {
    '$0': 0.0,
    'Under $250': 0.25,
    '$250–$1,000': 0.6,
    '$1,000+': 1.0,
}

GROWTH_AMBITION = {
    'Just a side income': 0.2,
    'Full-time income': 0.5,
    'Multi-6-figure brand': 0.8,
    'A widely recognized company': 1.0,
    # legacy
    'side-income': 0.2,
    'full-time': 0.5,
    'full-time-income': 0.5,
    'scaling': 0.8,
    'multi-6-figure': 0.8,
    'empire': 1.0,
    'widely-recognized': 1.0,
}

FIRST_INCOME_TIMELINE = {
    'Under 1 month': 1.0,
    '1–3 months': 0.7,
    '3–6 months': 0.4,
    'No rush': 0.1,
    # legacy
    'under-1-month': 1.0,
    '1-2-weeks': 1.0,
    '1-month': 0.8,
    '1-3-months': 0.7,
    '3-6-months': 0.6,
    '6-12-months': 0.4,
    '1-2-years': 0.2,
    '2-plus-years': 0.0,
    'no-rush': 0.1,
}

EXIT_STRATEGY = {
    'Yes': 1.0,
    'No': 0.0,
    'Not sure': 0.5,
    # legacy
    'build-and-sell': 1.0,
    'long-term': 0.0,
    'undecided': 0.5,
    'not-sure': 0.5,
}

WORK_STRUCTURE = {
    'Clear steps and order': 1.0,
    'Some structure': 0.7,
    'Mostly flexible': 0.4,
    'Total freedom': 0.1,
    # legacy
    'clear-steps': 1.0,
    'some-structure': 0.7,
    'mostly-flexible': 0.4,
    'total-freedom': 0.1,
}

REPETITIVE_TASKS = {
    'I avoid them': 0.0,
    'I tolerate them': 0.3,
    "I don't mind them": 0.7,
    'I enjoy them': 1.0,
    # legacy
    'avoid': 0.0,
    'tolerate': 0.3,
    'neutral': 0.7,
    'dont-mind': 0.7,
    'enjoy': 1.0,
}

PATH_ORIGINALITY = {
    'Proven paths': 0.0,
    'A mix': 0.5,
    'Mostly original': 0.8,
    'I want to build something new': 1.0,
    # legacy
    'proven-paths': 0.0,
    'mix': 0.5,
    'mostly-original': 0.8,
    'build-something-new': 1.0,
}

WORK_STYLE = {
    'Create once, earn passively': 1.0,
    'Work consistently with people': 0.0,
    'Mix of both': 0.5,
    # legacy
    'passive': 1.0,
    'active': 0.0,
    'hybrid': 0.5,
    'create-once-passive': 1.0,
    'work-with-people': 0.0,
    'mix-both': 0.5,
}

TEACH_OR_SOLVE = {
    'Teach': 1.0,
    'Solve': 0.0,
    'Both': 0.5,
    'Neither': 0.25,
    # legacy
    'teaching': 1.0,
    'solving': 0.0,
    'solve-problems': 0.0,
    'teach-others': 1.0,
}

COLLABORATION = {
    'Solo only': 1.0,
    'Mostly solo': 0.8,
    'I like both': 0.5,
    'Team-oriented': 0.2,
    # legacy
    'solo': 1.0,
    'solo-only': 1.0,
    'mostly-solo': 0.8,
    'balanced': 0.5,
    'both': 0.5,
    'mostly-team': 0.2,
    'team-oriented': 0.2,
    'team-focused': 0.0,
}

YES_WORDS = {'yes', 'y', 'true', '1'}
NO_WORDS = {'no', 'n', 'false', '0'}
MAYBE_WORDS = {'maybe', 'not sure', 'not-sure', 'unsure', 'somewhat', 'somewhat-open'}


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_aliases(answers):
    """Return a copy of the record with legacy field names folded onto canonical ones.

    Blank values (None, empty strings) are dropped so they read as missing.
    """

    if not isinstance(answers, Mapping):
        return {}

    resolved = {k: v for k, v in answers.items() if not _is_blank(v)}
    for canonical, legacy in FIELD_ALIASES.items():
        for key in (canonical,) + legacy:
            value = answers.get(key)
            if not _is_blank(value):
                resolved[canonical] = value
                break
        for key in legacy:
            resolved.pop(key, None)
    return resolved


def label_key(text):
    """Case, dash and whitespace insensitive key for matching answer labels."""
    text = str(text).strip().casefold()
    text = text.replace('–', '-').replace('—', '-').replace('’', "'")
    return ' '.join(text.split())


def to_number(value):
    """Parse ints, floats and strings like '$5,000'; None when not a finite number."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace('$', '').replace(',', '')
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def clamp(value, low=0.0, high=1.0):
    return max(low, min(high, value))


def scale_five_point(value):
    """1-5 -> 0-1"""
    return clamp((value - 1) / 4)


def _match_label(value, table):
    if not isinstance(value, str):
        return None
    if value in table:
        return table[value]
    key = label_key(value)
    for label, mapped in table.items():
        if label_key(label) == key:
            return mapped
    return None


def read_likert(data, field, fallbacks, default=LIKERT_DEFAULT):
    """Raw 1-5 answer as a number, falling back to the scale midpoint."""

    value = data.get(field)
    if value is None:
        fallbacks.append(Fallback(field, MISSING, None))
        return default
    number = to_number(value)
    if number is None:
        fallbacks.append(Fallback(field, INVALID, value))
        return default
    return clamp(number, 1, 5)


def _likert(data, field, fallbacks):
    return scale_five_point(read_likert(data, field, fallbacks))


def _lookup(data, field, table, fallbacks, default=NEUTRAL):
    value = data.get(field)
    if value is None:
        fallbacks.append(Fallback(field, MISSING, None))
        return default
    mapped = _match_label(value, table)
    if mapped is None:
        fallbacks.append(Fallback(field, UNRECOGNIZED, value))
        return default
    return mapped


def yes_no_value(value):
    """yes -> 1.0, no -> 0.0, maybe -> 0.5, anything else -> None"""

    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if not isinstance(value, str):
        return None
    key = label_key(value)
    if key in YES_WORDS:
        return 1.0
    if key in NO_WORDS:
        return 0.0
    if key in MAYBE_WORDS:
        return NEUTRAL
    return None


def _yes_no(data, field, fallbacks):
    value = data.get(field)
    if value is None:
        fallbacks.append(Fallback(field, MISSING, None))
        return NEUTRAL
    mapped = yes_no_value(value)
    if mapped is None:
        fallbacks.append(Fallback(field, UNRECOGNIZED, value))
        return NEUTRAL
    return mapped


def _quantity(data, field, fallbacks, ceiling, default, labels=None, labels_are_scaled=False):
    """Min-max scale a quantity against a fixed ceiling.

    Label strings are looked up first; labels either map to an amount or,
    when labels_are_scaled is set, directly to the 0-1 value.
    """

    value = data.get(field)
    if value is None:
        fallbacks.append(Fallback(field, MISSING, None))
        return clamp(default / ceiling)

    if labels:
        mapped = _match_label(value, labels)
        if mapped is not None:
            return mapped if labels_are_scaled else clamp(mapped / ceiling)

    number = to_number(value)
    if number is None:
        fallbacks.append(Fallback(field, UNRECOGNIZED if isinstance(value, str) else INVALID, value))
        return clamp(default / ceiling)
    return clamp(number / ceiling)


def normalize_answers_with_diagnostics(answers):
    """Return (trait vector, fallbacks) for one answer record."""

    fallbacks = []
    if answers is not None and not isinstance(answers, Mapping):
        fallbacks.append(Fallback('<record>', INVALID, type(answers).__name__))
    data = resolve_aliases(answers)
    n = {}

    # === Core business traits ===

    income = _quantity(data, 'successIncomeGoal', fallbacks,
                       INCOME_GOAL_CEILING, DEFAULT_INCOME_GOAL, INCOME_GOAL_LABELS)
    growth = _lookup(data, 'businessGrowthAmbition', GROWTH_AMBITION, fallbacks)
    n['incomeAmbition'] = (income + growth) / 2

    n['speedToIncome'] = _lookup(data, 'firstIncomeTimeline', FIRST_INCOME_TIMELINE, fallbacks)

    n['upfrontInvestmentTolerance'] = _quantity(
        data, 'upfrontInvestment', fallbacks, INVESTMENT_CEILING, DEFAULT_INVESTMENT,
        INVESTMENT_LABELS, labels_are_scaled=True,
    )

    n['passiveIncomePreference'] = _likert(data, 'passiveIncomeImportance', fallbacks)
    n['businessExitStrategy'] = _lookup(data, 'sellOrExitBusiness', EXIT_STRATEGY, fallbacks)
    n['meaningfulContributionImportance'] = _likert(data, 'meaningfulContributionImportance', fallbacks)

    # === Work style & resilience ===

    n['passionAlignment'] = _likert(data, 'passionIdentityAlignment', fallbacks)

    n['timeCommitment'] = _quantity(
        data, 'hoursPerWeek', fallbacks, HOURS_CEILING, DEFAULT_HOURS,
        HOURS_LABELS, labels_are_scaled=True,
    )

    n['consistencyAndFollowThrough'] = _likert(data, 'consistencyWithGoals', fallbacks)

    n['riskTolerance'] = (
        _likert(data, 'trialAndErrorComfort', fallbacks)
        + _likert(data, 'discouragementResilience', fallbacks)
        + _likert(data, 'riskComfort', fallbacks)
    ) / 3

    n['systemsThinking'] = (
        _likert(data, 'systemsRoutinesEnjoyment', fallbacks)
        + _likert(data, 'organizationLevel', fallbacks)
    ) / 2

    n['toolLearning'] = _yes_no(data, 'toolLearningWillingness', fallbacks)

    n['autonomyControl'] = (
        _likert(data, 'selfMotivation', fallbacks)
        + _likert(data, 'controlImportance', fallbacks)
    ) / 2

    # high uncertainty handling means low need for structure
    n['structurePreference'] = (
        (1 - _likert(data, 'uncertaintyHandling', fallbacks))
        + _lookup(data, 'workStructurePreference', WORK_STRUCTURE, fallbacks)
    ) / 2

    n['repetitionTolerance'] = _lookup(data, 'repetitiveTasksFeeling', REPETITIVE_TASKS, fallbacks)
    n['adaptabilityToFeedback'] = _likert(data, 'negativeFeedbackResponse', fallbacks)
    n['originalityPreference'] = _lookup(data, 'pathCreationPreference', PATH_ORIGINALITY, fallbacks)

    # === Interaction & marketing style ===

    n['salesConfidence'] = _likert(data, 'directCommunicationEnjoyment', fallbacks)
    n['creativeInterest'] = _likert(data, 'creativeWorkEnjoyment', fallbacks)

    n['socialMediaComfort'] = (
        _likert(data, 'brandFaceComfort', fallbacks)
        + _yes_no(data, 'faceAndVoiceOnlineComfort', fallbacks)
        + _likert(data, 'socialMediaInterest', fallbacks)
    ) / 3

    n['productVsService'] = (
        _yes_no(data, 'physicalProductShipping', fallbacks)
        + _lookup(data, 'createEarnWorkConsistently', WORK_STYLE, fallbacks)
    ) / 2

    n['teachingVsSolving'] = _lookup(data, 'teachOrSolve', TEACH_OR_SOLVE, fallbacks)
    n['platformEcosystemComfort'] = _yes_no(data, 'platformEcosystemInterest', fallbacks)
    n['collaborationPreference'] = _lookup(data, 'workCollaborationPreference', COLLABORATION, fallbacks)
    n['promoteOthersWillingness'] = _yes_no(data, 'promoteOthersProducts', fallbacks)
    n['technicalComfort'] = _likert(data, 'techSkillsRating', fallbacks)

    traits = {trait: n.get(trait, NEUTRAL) for trait in TRAIT_WEIGHTS}
    return traits, fallbacks


def normalize_answers(answers):
    """Canonical trait vector for an answer record; never raises."""

    traits, fallbacks = normalize_answers_with_diagnostics(answers)
    if fallbacks:
        logger.debug(
            'answers_defaulted',
            fields=[f.field for f in fallbacks],
            unrecognized=[f.field for f in fallbacks if f.reason != MISSING],
        )
    return traits
