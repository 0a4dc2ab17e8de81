"""
Pytest fixtures for the matcher tests: answer records and a Flask test client.
"""

from __future__ import annotations

import pytest

LIKERT_FIELDS = (
    'passiveIncomeImportance',
    'meaningfulContributionImportance',
    'passionIdentityAlignment',
    'consistencyWithGoals',
    'trialAndErrorComfort',
    'discouragementResilience',
    'riskComfort',
    'systemsRoutinesEnjoyment',
    'organizationLevel',
    'selfMotivation',
    'controlImportance',
    'uncertaintyHandling',
    'negativeFeedbackResponse',
    'directCommunicationEnjoyment',
    'creativeWorkEnjoyment',
    'brandFaceComfort',
    'socialMediaInterest',
    'techSkillsRating',
    'competitivenessLevel',
    'internetDeviceReliability',
)

ALL_TOOLS = ['google-docs-sheets', 'canva', 'notion', 'shopify-wix-squarespace', 'zoom-streamyard']


def likert_record(value):
    return {field: value for field in LIKERT_FIELDS}


@pytest.fixture
def max_answers():
    """Every 1-5 answer at 5, willing to learn tools, knows every tool."""
    answers = likert_record(5)
    answers.update({
        'toolLearningWillingness': 'Yes',
        'familiarTools': list(ALL_TOOLS),
        'learningPreference': 'hands-on',
        'firstIncomeTimeline': 'Under 1 month',
        'successIncomeGoal': '$5,000+/month',
        'hoursPerWeek': 30,
    })
    return answers


@pytest.fixture
def min_answers():
    answers = likert_record(1)
    answers.update({
        'toolLearningWillingness': 'No',
        'familiarTools': [],
        'learningPreference': 'one-on-one-coaching',
        'firstIncomeTimeline': 'No rush',
        'successIncomeGoal': 300,
        'hoursPerWeek': 2,
    })
    return answers


@pytest.fixture
def sample_answers():
    """A realistic current-quiz record using label strings."""
    return {
        'successIncomeGoal': '$2,000–$5,000/month',
        'businessGrowthAmbition': 'Full-time income',
        'firstIncomeTimeline': '1–3 months',
        'upfrontInvestment': 'Under $250',
        'passiveIncomeImportance': 4,
        'sellOrExitBusiness': 'Not sure',
        'meaningfulContributionImportance': 4,
        'passionIdentityAlignment': 3,
        'hoursPerWeek': '10–25 hours',
        'consistencyWithGoals': 4,
        'trialAndErrorComfort': 3,
        'discouragementResilience': 4,
        'riskComfort': 2,
        'systemsRoutinesEnjoyment': 4,
        'organizationLevel': 5,
        'toolLearningWillingness': 'Yes',
        'selfMotivation': 4,
        'controlImportance': 5,
        'uncertaintyHandling': 2,
        'workStructurePreference': 'Some structure',
        'repetitiveTasksFeeling': "I don't mind them",
        'negativeFeedbackResponse': 3,
        'pathCreationPreference': 'Proven paths',
        'directCommunicationEnjoyment': 2,
        'creativeWorkEnjoyment': 3,
        'brandFaceComfort': 2,
        'faceAndVoiceOnlineComfort': 'No',
        'socialMediaInterest': 2,
        'physicalProductShipping': 'No',
        'createEarnWorkConsistently': 'Work consistently with people',
        'teachOrSolve': 'Solve',
        'platformEcosystemInterest': 'Yes',
        'workCollaborationPreference': 'Mostly solo',
        'promoteOthersProducts': 'No',
        'techSkillsRating': 4,
        'familiarTools': ['google-docs-sheets', 'notion'],
        'learningPreference': 'reading-self-study',
    }


@pytest.fixture
def client():
    from app import app

    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def neutral_answers():
    """Every 1-5 answer at 3 and every choice answer on its middle option."""
    answers = likert_record(3)
    answers.update({
        'businessGrowthAmbition': 'Full-time income',
        'sellOrExitBusiness': 'Not sure',
        'toolLearningWillingness': 'Maybe',
        'faceAndVoiceOnlineComfort': 'Maybe',
        'physicalProductShipping': 'Maybe',
        'platformEcosystemInterest': 'Maybe',
        'promoteOthersProducts': 'Maybe',
        'pathCreationPreference': 'A mix',
        'teachOrSolve': 'Both',
        'workCollaborationPreference': 'I like both',
        'createEarnWorkConsistently': 'Mix of both',
    })
    return answers
