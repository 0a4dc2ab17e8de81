# trait_summary.py
"""
Five headline traits shown next to each business model.

Unlike the 0-1 trait vector used for scoring, these are 0-100 percentages
built from raw answer sums, so they read naturally on a bar chart next to
the model's ideal value.
"""

from normalizer import (
    Fallback,
    INVALID,
    MISSING,
    label_key,
    read_likert,
    resolve_aliases,
    yes_no_value,
)
from matching import round_half_up

SUMMARY_TRAITS = ('riskTolerance', 'selfMotivation', 'techComfort', 'consistency', 'learningAgility')

# Lowest and highest possible raw sum per trait
RAW_RANGES = {
    'riskTolerance': (3, 15),
    'selfMotivation': (3, 15),
    'techComfort': (2, 15),
    'consistency': (3, 15),
    'learningAgility': (4, 15),
}

TOOL_POINTS = {
    'google-docs-sheets': 1,
    'canva': 1,
    'notion': 1,
    'shopify-wix-squarespace': 1,
    'zoom-streamyard': 1,
}
TOOL_ALIASES = {
    'shopify-wix': 'shopify-wix-squarespace',
}

LEARNING_PREFERENCE_POINTS = {
    'hands-on': 5,
    'watching-tutorials': 3,
    'tutorials': 3,
    'reading-self-study': 4,
    'reading': 4,
    'one-on-one-coaching': 2,
    'coaching': 2,
}
DEFAULT_LEARNING_POINTS = 3

WILLING_POINTS = 5
UNWILLING_POINTS = 1

IDEAL_TRAITS = {
    'e-commerce-dropshipping': {'riskTolerance': 70, 'selfMotivation': 85, 'techComfort': 80, 'consistency': 75, 'learningAgility': 85},
    'affiliate-marketing': {'riskTolerance': 65, 'selfMotivation': 80, 'techComfort': 75, 'consistency': 70, 'learningAgility': 80},
    'content-creation': {'riskTolerance': 50, 'selfMotivation': 80, 'techComfort': 70, 'consistency': 85, 'learningAgility': 90},
    'youtube-automation': {'riskTolerance': 60, 'selfMotivation': 80, 'techComfort': 85, 'consistency': 80, 'learningAgility': 90},
    'local-service': {'riskTolerance': 60, 'selfMotivation': 75, 'techComfort': 65, 'consistency': 70, 'learningAgility': 75},
    'high-ticket-sales': {'riskTolerance': 55, 'selfMotivation': 90, 'techComfort': 60, 'consistency': 75, 'learningAgility': 80},
    'saas-development': {'riskTolerance': 80, 'selfMotivation': 90, 'techComfort': 95, 'consistency': 85, 'learningAgility': 95},
    'social-media-agency': {'riskTolerance': 70, 'selfMotivation': 85, 'techComfort': 85, 'consistency': 80, 'learningAgility': 90},
    'ai-marketing-agency': {'riskTolerance': 75, 'selfMotivation': 90, 'techComfort': 95, 'consistency': 85, 'learningAgility': 95},
    'digital-services': {'riskTolerance': 70, 'selfMotivation': 85, 'techComfort': 85, 'consistency': 80, 'learningAgility': 90},
    'investing-trading': {'riskTolerance': 90, 'selfMotivation': 70, 'techComfort': 80, 'consistency': 60, 'learningAgility': 95},
    'online-reselling': {'riskTolerance': 65, 'selfMotivation': 75, 'techComfort': 70, 'consistency': 70, 'learningAgility': 80},
    'handmade-goods': {'riskTolerance': 40, 'selfMotivation': 70, 'techComfort': 50, 'consistency': 80, 'learningAgility': 60},
    'copywriting': {'riskTolerance': 45, 'selfMotivation': 80, 'techComfort': 60, 'consistency': 85, 'learningAgility': 75},
    'virtual-assistant': {'riskTolerance': 35, 'selfMotivation': 70, 'techComfort': 70, 'consistency': 90, 'learningAgility': 75},
    'e-commerce': {'riskTolerance': 80, 'selfMotivation': 90, 'techComfort': 85, 'consistency': 85, 'learningAgility': 90},
    'online-coaching': {'riskTolerance': 40, 'selfMotivation': 75, 'techComfort': 65, 'consistency': 70, 'learningAgility': 80},
    'freelancing': {'riskTolerance': 55, 'selfMotivation': 80, 'techComfort': 70, 'consistency': 75, 'learningAgility': 85},
}

# Used for models without their own row
DEFAULT_IDEAL_TRAITS = {'riskTolerance': 60, 'selfMotivation': 80, 'techComfort': 70, 'consistency': 75, 'learningAgility': 80}

TRAIT_DESCRIPTIONS = {
    'riskTolerance': {'min': 'Avoids Risks', 'max': 'Embraces Risks'},
    'selfMotivation': {'min': 'Passive', 'max': 'Highly Self-Directed'},
    'techComfort': {'min': 'Low Tech Skills', 'max': 'Tech Savvy'},
    'consistency': {'min': 'Inconsistent', 'max': 'Highly Consistent'},
    'learningAgility': {'min': 'Resists New Skills', 'max': 'Quickly Adapts'},
}


def get_ideal_traits(model_id):
    return dict(IDEAL_TRAITS.get(model_id, DEFAULT_IDEAL_TRAITS))


def _tool_points(data, fallbacks):
    tools = data.get('familiarTools')
    if tools is None:
        fallbacks.append(Fallback('familiarTools', MISSING, None))
        return 0
    if isinstance(tools, str):
        tools = [tools]
    if not isinstance(tools, (list, tuple, set)):
        fallbacks.append(Fallback('familiarTools', INVALID, tools))
        return 0

    seen = set()
    for tool in tools:
        if not isinstance(tool, str):
            continue
        key = label_key(tool).replace(' ', '-')
        key = TOOL_ALIASES.get(key, key)
        if key in TOOL_POINTS:
            seen.add(key)
    return sum(TOOL_POINTS[t] for t in seen)


def _willing_points(data, fallbacks):
    value = data.get('toolLearningWillingness')
    if value is None:
        fallbacks.append(Fallback('toolLearningWillingness', MISSING, None))
    return WILLING_POINTS if yes_no_value(value) == 1.0 else UNWILLING_POINTS


def _learning_points(data, fallbacks):
    value = data.get('learningPreference')
    if value is None:
        fallbacks.append(Fallback('learningPreference', MISSING, None))
        return DEFAULT_LEARNING_POINTS
    points = LEARNING_PREFERENCE_POINTS.get(label_key(value).replace(' ', '-')) if isinstance(value, str) else None
    if points is None:
        fallbacks.append(Fallback('learningPreference', INVALID, value))
        return DEFAULT_LEARNING_POINTS
    return points


def _percentage(trait, raw):
    low, high = RAW_RANGES[trait]
    return max(0, min(100, round_half_up((raw - low) / (high - low) * 100)))


def calculate_trait_summary_with_diagnostics(answers):
    fallbacks = []
    data = resolve_aliases(answers)

    def likert(field):
        return read_likert(data, field, fallbacks)

    trial_error = likert('trialAndErrorComfort')
    long_term = likert('consistencyWithGoals')
    willing = _willing_points(data, fallbacks)

    raw = {
        'riskTolerance': trial_error + likert('uncertaintyHandling') + likert('riskComfort'),
        'selfMotivation': long_term + likert('discouragementResilience') + likert('selfMotivation'),
        'techComfort': willing + likert('techSkillsRating') + _tool_points(data, fallbacks),
        'consistency': long_term + likert('systemsRoutinesEnjoyment') + likert('organizationLevel'),
        'learningAgility': trial_error + _learning_points(data, fallbacks) + willing,
    }
    return {trait: _percentage(trait, raw[trait]) for trait in SUMMARY_TRAITS}, fallbacks


def calculate_trait_summary(answers):
    """0-100 percentage per headline trait; never raises."""
    summary, _ = calculate_trait_summary_with_diagnostics(answers)
    return summary


def compare_traits(answers, model_id):
    """User vs ideal percentages for one model, one row per headline trait"""

    user = calculate_trait_summary(answers)
    ideal = get_ideal_traits(model_id)
    return [
        {
            'trait': trait,
            'user': user[trait],
            'ideal': ideal[trait],
            'difference': user[trait] - ideal[trait],
            'labels': TRAIT_DESCRIPTIONS[trait],
        }
        for trait in SUMMARY_TRAITS
    ]
