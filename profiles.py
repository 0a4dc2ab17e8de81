# profiles.py

from dataclasses import dataclass, field
from types import MappingProxyType

# Relative importance of each trait in the overall business model fit
TRAIT_WEIGHTS = {
    # Core business traits
    'incomeAmbition': 1.5,
    'speedToIncome': 1.3,
    'upfrontInvestmentTolerance': 1.0,
    'passiveIncomePreference': 1.4,
    'businessExitStrategy': 0.5,
    'meaningfulContributionImportance': 1.0,

    # Work style & resilience
    'passionAlignment': 1.3,
    'timeCommitment': 1.2,
    'consistencyAndFollowThrough': 1.1,
    'riskTolerance': 1.4,
    'systemsThinking': 1.0,
    'toolLearning': 0.9,
    'autonomyControl': 1.1,
    'structurePreference': 0.8,
    'repetitionTolerance': 0.7,
    'adaptabilityToFeedback': 0.8,
    'originalityPreference': 0.9,

    # Interaction & marketing style
    'salesConfidence': 1.1,
    'creativeInterest': 1.0,
    'socialMediaComfort': 1.0,
    'productVsService': 0.9,
    'teachingVsSolving': 0.8,
    'platformEcosystemComfort': 0.7,
    'collaborationPreference': 0.8,
    'promoteOthersWillingness': 0.5,
    'technicalComfort': 1.0,
}

# Ideal respondent per business model, 0-1 per trait
BUSINESS_MODEL_PROFILES = {
    'freelancing': {
        'incomeAmbition': 0.4,
        'speedToIncome': 0.9,
        'upfrontInvestmentTolerance': 0.8,
        'passiveIncomePreference': 0.1,
        'businessExitStrategy': 0.2,
        'meaningfulContributionImportance': 0.7,

        'passionAlignment': 0.7,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.6,
        'systemsThinking': 0.5,
        'toolLearning': 0.7,
        'autonomyControl': 1.0,
        'structurePreference': 0.6,
        'repetitionTolerance': 0.5,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.7,

        'salesConfidence': 0.8,
        'creativeInterest': 0.7,
        'socialMediaComfort': 0.4,
        'productVsService': 0.1,
        'teachingVsSolving': 0.6,
        'platformEcosystemComfort': 0.4,
        'collaborationPreference': 0.8,
        'promoteOthersWillingness': 0.3,
        'technicalComfort': 0.6,
    },
    'online-coaching': {
        'incomeAmbition': 0.5,
        'speedToIncome': 0.7,
        'upfrontInvestmentTolerance': 0.9,
        'passiveIncomePreference': 0.2,
        'businessExitStrategy': 0.1,
        'meaningfulContributionImportance': 0.9,

        'passionAlignment': 0.8,
        'timeCommitment': 0.6,
        'consistencyAndFollowThrough': 0.7,
        'riskTolerance': 0.5,
        'systemsThinking': 0.6,
        'toolLearning': 0.6,
        'autonomyControl': 0.8,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.4,

        'salesConfidence': 0.9,
        'creativeInterest': 0.4,
        'socialMediaComfort': 0.9,
        'productVsService': 0.0,
        'teachingVsSolving': 1.0,
        'platformEcosystemComfort': 0.8,
        'collaborationPreference': 0.6,
        'promoteOthersWillingness': 0.1,
        'technicalComfort': 0.5,
    },
    'e-commerce': {
        'incomeAmbition': 0.9,
        'speedToIncome': 0.4,
        'upfrontInvestmentTolerance': 0.6,
        'passiveIncomePreference': 0.6,
        'businessExitStrategy': 0.9,
        'meaningfulContributionImportance': 0.5,

        'passionAlignment': 0.8,
        'timeCommitment': 0.8,
        'consistencyAndFollowThrough': 0.9,
        'riskTolerance': 0.8,
        'systemsThinking': 0.8,
        'toolLearning': 0.8,
        'autonomyControl': 0.9,
        'structurePreference': 0.6,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.8,

        'salesConfidence': 0.6,
        'creativeInterest': 0.9,
        'socialMediaComfort': 0.7,
        'productVsService': 0.9,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.8,
        'collaborationPreference': 0.7,
        'promoteOthersWillingness': 0.4,
        'technicalComfort': 0.7,
    },
    'content-creation': {
        'incomeAmbition': 0.8,
        'speedToIncome': 0.6,
        'upfrontInvestmentTolerance': 0.8,
        'passiveIncomePreference': 0.5,
        'businessExitStrategy': 0.7,
        'meaningfulContributionImportance': 0.9,

        'passionAlignment': 0.9,
        'timeCommitment': 0.8,
        'consistencyAndFollowThrough': 0.9,
        'riskTolerance': 0.7,
        'systemsThinking': 0.6,
        'toolLearning': 0.7,
        'autonomyControl': 0.9,
        'structurePreference': 0.4,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.9,

        'salesConfidence': 0.7,
        'creativeInterest': 1.0,
        'socialMediaComfort': 1.0,
        'productVsService': 0.7,
        'teachingVsSolving': 0.4,
        'platformEcosystemComfort': 0.5,
        'collaborationPreference': 0.8,
        'promoteOthersWillingness': 0.7,
        'technicalComfort': 0.7,
    },
    'youtube-automation': {
        'incomeAmbition': 0.8,
        'speedToIncome': 0.5,
        'upfrontInvestmentTolerance': 0.7,
        'passiveIncomePreference': 0.7,
        'businessExitStrategy': 0.8,
        'meaningfulContributionImportance': 0.3,

        'passionAlignment': 0.7,
        'timeCommitment': 0.8,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.6,
        'systemsThinking': 0.7,
        'toolLearning': 0.8,
        'autonomyControl': 0.8,
        'structurePreference': 0.5,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.6,
        'originalityPreference': 0.7,

        'salesConfidence': 0.4,
        'creativeInterest': 0.9,
        'socialMediaComfort': 0.4,
        'productVsService': 0.8,
        'teachingVsSolving': 0.3,
        'platformEcosystemComfort': 0.7,
        'collaborationPreference': 0.9,
        'promoteOthersWillingness': 0.6,
        'technicalComfort': 0.8,
    },
    'local-service': {
        'incomeAmbition': 0.6,
        'speedToIncome': 0.6,
        'upfrontInvestmentTolerance': 0.5,
        'passiveIncomePreference': 0.4,
        'businessExitStrategy': 0.6,
        'meaningfulContributionImportance': 0.5,

        'passionAlignment': 0.5,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.7,
        'riskTolerance': 0.5,
        'systemsThinking': 0.6,
        'toolLearning': 0.4,
        'autonomyControl': 0.8,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.3,

        'salesConfidence': 0.8,
        'creativeInterest': 0.4,
        'socialMediaComfort': 0.8,
        'productVsService': 0.3,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.3,
        'collaborationPreference': 0.7,
        'promoteOthersWillingness': 0.2,
        'technicalComfort': 0.3,
    },
    'high-ticket-sales': {
        'incomeAmbition': 0.7,
        'speedToIncome': 0.8,
        'upfrontInvestmentTolerance': 0.8,
        'passiveIncomePreference': 0.3,
        'businessExitStrategy': 0.4,
        'meaningfulContributionImportance': 0.6,

        'passionAlignment': 0.6,
        'timeCommitment': 0.8,
        'consistencyAndFollowThrough': 0.9,
        'riskTolerance': 0.7,
        'systemsThinking': 0.7,
        'toolLearning': 0.5,
        'autonomyControl': 0.9,
        'structurePreference': 0.8,
        'repetitionTolerance': 0.8,
        'adaptabilityToFeedback': 0.9,
        'originalityPreference': 0.5,

        'salesConfidence': 1.0,
        'creativeInterest': 0.6,
        'socialMediaComfort': 1.0,
        'productVsService': 0.1,
        'teachingVsSolving': 0.3,
        'platformEcosystemComfort': 0.5,
        'collaborationPreference': 0.8,
        'promoteOthersWillingness': 0.4,
        'technicalComfort': 0.4,
    },
    'saas-development': {
        'incomeAmbition': 1.0,
        'speedToIncome': 0.2,
        'upfrontInvestmentTolerance': 0.4,
        'passiveIncomePreference': 0.8,
        'businessExitStrategy': 1.0,
        'meaningfulContributionImportance': 0.9,

        'passionAlignment': 0.9,
        'timeCommitment': 0.9,
        'consistencyAndFollowThrough': 1.0,
        'riskTolerance': 0.9,
        'systemsThinking': 1.0,
        'toolLearning': 0.9,
        'autonomyControl': 1.0,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.9,
        'originalityPreference': 1.0,

        'salesConfidence': 0.3,
        'creativeInterest': 0.8,
        'socialMediaComfort': 0.3,
        'productVsService': 1.0,
        'teachingVsSolving': 0.1,
        'platformEcosystemComfort': 0.9,
        'collaborationPreference': 0.8,
        'promoteOthersWillingness': 0.2,
        'technicalComfort': 1.0,
    },
    'social-media-agency': {
        'incomeAmbition': 0.8,
        'speedToIncome': 0.6,
        'upfrontInvestmentTolerance': 0.7,
        'passiveIncomePreference': 0.4,
        'businessExitStrategy': 0.7,
        'meaningfulContributionImportance': 0.7,

        'passionAlignment': 0.7,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.6,
        'systemsThinking': 0.7,
        'toolLearning': 0.8,
        'autonomyControl': 0.9,
        'structurePreference': 0.6,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.7,

        'salesConfidence': 0.9,
        'creativeInterest': 0.8,
        'socialMediaComfort': 0.9,
        'productVsService': 0.2,
        'teachingVsSolving': 0.3,
        'platformEcosystemComfort': 0.6,
        'collaborationPreference': 0.6,
        'promoteOthersWillingness': 0.5,
        'technicalComfort': 0.8,
    },
    'ai-marketing-agency': {
        'incomeAmbition': 0.9,
        'speedToIncome': 0.5,
        'upfrontInvestmentTolerance': 0.7,
        'passiveIncomePreference': 0.6,
        'businessExitStrategy': 0.8,
        'meaningfulContributionImportance': 0.7,

        'passionAlignment': 0.7,
        'timeCommitment': 0.8,
        'consistencyAndFollowThrough': 0.9,
        'riskTolerance': 0.7,
        'systemsThinking': 0.8,
        'toolLearning': 0.9,
        'autonomyControl': 1.0,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.7,

        'salesConfidence': 0.7,
        'creativeInterest': 0.7,
        'socialMediaComfort': 0.7,
        'productVsService': 0.3,
        'teachingVsSolving': 0.3,
        'platformEcosystemComfort': 0.7,
        'collaborationPreference': 0.7,
        'promoteOthersWillingness': 0.6,
        'technicalComfort': 1.0,
    },
    'digital-services': {
        'incomeAmbition': 0.8,
        'speedToIncome': 0.7,
        'upfrontInvestmentTolerance': 0.8,
        'passiveIncomePreference': 0.3,
        'businessExitStrategy': 0.7,
        'meaningfulContributionImportance': 0.6,

        'passionAlignment': 0.6,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.6,
        'systemsThinking': 0.8,
        'toolLearning': 0.7,
        'autonomyControl': 1.0,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.6,

        'salesConfidence': 0.6,
        'creativeInterest': 0.6,
        'socialMediaComfort': 0.6,
        'productVsService': 0.2,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.5,
        'collaborationPreference': 0.6,
        'promoteOthersWillingness': 0.4,
        'technicalComfort': 0.7,
    },
    'investing-trading': {
        'incomeAmbition': 0.7,
        'speedToIncome': 0.9,
        'upfrontInvestmentTolerance': 0.1,
        'passiveIncomePreference': 0.8,
        'businessExitStrategy': 0.2,
        'meaningfulContributionImportance': 0.4,

        'passionAlignment': 0.4,
        'timeCommitment': 0.9,
        'consistencyAndFollowThrough': 0.6,
        'riskTolerance': 1.0,
        'systemsThinking': 0.6,
        'toolLearning': 0.8,
        'autonomyControl': 1.0,
        'structurePreference': 0.4,
        'repetitionTolerance': 0.8,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.2,

        'salesConfidence': 0.2,
        'creativeInterest': 0.2,
        'socialMediaComfort': 0.2,
        'productVsService': 1.0,
        'teachingVsSolving': 0.0,
        'platformEcosystemComfort': 0.6,
        'collaborationPreference': 0.1,
        'promoteOthersWillingness': 0.0,
        'technicalComfort': 0.7,
    },
    'online-reselling': {
        'incomeAmbition': 0.4,
        'speedToIncome': 0.8,
        'upfrontInvestmentTolerance': 0.3,
        'passiveIncomePreference': 0.3,
        'businessExitStrategy': 0.5,
        'meaningfulContributionImportance': 0.5,

        'passionAlignment': 0.5,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.7,
        'riskTolerance': 0.4,
        'systemsThinking': 0.5,
        'toolLearning': 0.4,
        'autonomyControl': 0.9,
        'structurePreference': 0.6,
        'repetitionTolerance': 0.8,
        'adaptabilityToFeedback': 0.6,
        'originalityPreference': 0.5,

        'salesConfidence': 0.3,
        'creativeInterest': 0.5,
        'socialMediaComfort': 0.3,
        'productVsService': 0.9,
        'teachingVsSolving': 0.1,
        'platformEcosystemComfort': 0.5,
        'collaborationPreference': 0.9,
        'promoteOthersWillingness': 0.2,
        'technicalComfort': 0.4,
    },
    'handmade-goods': {
        'incomeAmbition': 0.3,
        'speedToIncome': 0.4,
        'upfrontInvestmentTolerance': 0.3,
        'passiveIncomePreference': 0.2,
        'businessExitStrategy': 0.3,
        'meaningfulContributionImportance': 1.0,

        'passionAlignment': 1.0,
        'timeCommitment': 0.6,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.3,
        'systemsThinking': 0.3,
        'toolLearning': 0.3,
        'autonomyControl': 1.0,
        'structurePreference': 0.5,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.5,
        'originalityPreference': 0.9,

        'salesConfidence': 0.2,
        'creativeInterest': 1.0,
        'socialMediaComfort': 0.2,
        'productVsService': 0.9,
        'teachingVsSolving': 0.1,
        'platformEcosystemComfort': 0.3,
        'collaborationPreference': 0.9,
        'promoteOthersWillingness': 0.1,
        'technicalComfort': 0.3,
    },
    'copywriting': {
        'incomeAmbition': 0.5,
        'speedToIncome': 0.6,
        'upfrontInvestmentTolerance': 0.8,
        'passiveIncomePreference': 0.3,
        'businessExitStrategy': 0.4,
        'meaningfulContributionImportance': 0.8,

        'passionAlignment': 0.8,
        'timeCommitment': 0.6,
        'consistencyAndFollowThrough': 0.7,
        'riskTolerance': 0.5,
        'systemsThinking': 0.6,
        'toolLearning': 0.6,
        'autonomyControl': 1.0,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.9,

        'salesConfidence': 0.4,
        'creativeInterest': 0.9,
        'socialMediaComfort': 0.3,
        'productVsService': 0.1,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.6,
        'collaborationPreference': 1.0,
        'promoteOthersWillingness': 0.3,
        'technicalComfort': 0.5,
    },
    'affiliate-marketing': {
        'incomeAmbition': 0.8,
        'speedToIncome': 0.7,
        'upfrontInvestmentTolerance': 0.7,
        'passiveIncomePreference': 0.7,
        'businessExitStrategy': 0.8,
        'meaningfulContributionImportance': 0.6,

        'passionAlignment': 0.6,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.7,
        'systemsThinking': 0.7,
        'toolLearning': 0.8,
        'autonomyControl': 0.8,
        'structurePreference': 0.6,
        'repetitionTolerance': 0.6,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.8,

        'salesConfidence': 0.7,
        'creativeInterest': 0.8,
        'socialMediaComfort': 0.7,
        'productVsService': 0.8,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.7,
        'collaborationPreference': 0.9,
        'promoteOthersWillingness': 1.0,
        'technicalComfort': 0.7,
    },
    'virtual-assistant': {
        'incomeAmbition': 0.4,
        'speedToIncome': 0.8,
        'upfrontInvestmentTolerance': 0.9,
        'passiveIncomePreference': 0.2,
        'businessExitStrategy': 0.1,
        'meaningfulContributionImportance': 0.5,

        'passionAlignment': 0.5,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.5,
        'systemsThinking': 0.7,
        'toolLearning': 0.6,
        'autonomyControl': 0.7,
        'structurePreference': 0.8,
        'repetitionTolerance': 0.8,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.4,

        'salesConfidence': 0.7,
        'creativeInterest': 0.4,
        'socialMediaComfort': 0.7,
        'productVsService': 0.0,
        'teachingVsSolving': 0.1,
        'platformEcosystemComfort': 0.4,
        'collaborationPreference': 0.7,
        'promoteOthersWillingness': 0.3,
        'technicalComfort': 0.5,
    },
    'e-commerce-dropshipping': {
        'incomeAmbition': 0.8,
        'speedToIncome': 0.6,
        'upfrontInvestmentTolerance': 0.8,
        'passiveIncomePreference': 0.5,
        'businessExitStrategy': 0.7,
        'meaningfulContributionImportance': 0.6,

        'passionAlignment': 0.9,
        'timeCommitment': 0.8,
        'consistencyAndFollowThrough': 0.9,
        'riskTolerance': 0.7,
        'systemsThinking': 0.8,
        'toolLearning': 0.7,
        'autonomyControl': 0.9,
        'structurePreference': 0.6,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.7,
        'originalityPreference': 0.8,

        'salesConfidence': 0.6,
        'creativeInterest': 0.9,
        'socialMediaComfort': 0.7,
        'productVsService': 0.9,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.8,
        'collaborationPreference': 0.7,
        'promoteOthersWillingness': 0.4,
        'technicalComfort': 0.7,
    },
    'print-on-demand': {
        'incomeAmbition': 0.7,
        'speedToIncome': 0.6,
        'upfrontInvestmentTolerance': 0.7,
        'passiveIncomePreference': 0.4,
        'businessExitStrategy': 0.6,
        'meaningfulContributionImportance': 0.5,

        'passionAlignment': 0.8,
        'timeCommitment': 0.7,
        'consistencyAndFollowThrough': 0.8,
        'riskTolerance': 0.6,
        'systemsThinking': 0.7,
        'toolLearning': 0.6,
        'autonomyControl': 0.8,
        'structurePreference': 0.7,
        'repetitionTolerance': 0.7,
        'adaptabilityToFeedback': 0.8,
        'originalityPreference': 0.7,

        'salesConfidence': 0.6,
        'creativeInterest': 0.6,
        'socialMediaComfort': 0.6,
        'productVsService': 0.2,
        'teachingVsSolving': 0.2,
        'platformEcosystemComfort': 0.5,
        'collaborationPreference': 0.6,
        'promoteOthersWillingness': 0.4,
        'technicalComfort': 0.7,
    },
}

BUSINESS_MODEL_NAMES = {
    'freelancing': 'Freelancing',
    'online-coaching': 'Online Coaching',
    'e-commerce': 'E-commerce Brand Building',
    'content-creation': 'Content Creation / UGC',
    'youtube-automation': 'YouTube Automation Channels',
    'local-service': 'Local Service Arbitrage',
    'high-ticket-sales': 'High-Ticket Sales / Closing',
    'saas-development': 'App or SaaS Development',
    'social-media-agency': 'Social Media Marketing Agency',
    'ai-marketing-agency': 'AI Marketing Agency',
    'digital-services': 'Digital Services Agency',
    'investing-trading': 'Investing / Trading',
    'online-reselling': 'Online Reselling',
    'handmade-goods': 'Handmade Goods',
    'copywriting': 'Copywriting / Ghostwriting',
    'affiliate-marketing': 'Affiliate Marketing',
    'virtual-assistant': 'Virtual Assistant',
    'e-commerce-dropshipping': 'E-commerce / Dropshipping',
    'print-on-demand': 'Print on Demand',
}


class ProfileConfigError(ValueError):
    """Raised when the weight or profile tables are inconsistent."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__('Invalid scoring configuration: ' + '; '.join(self.problems))


def validate_scoring_tables(weights, profiles):
    """Return a list of problems with the tables; empty when they are consistent."""

    problems = []
    if not weights:
        problems.append('trait weight table is empty')

    for trait, weight in weights.items():
        if not isinstance(weight, (int, float)) or isinstance(weight, bool) or weight <= 0:
            problems.append(f'weight for {trait!r} must be a positive number, got {weight!r}')

    if not profiles:
        problems.append('business model profile table is empty')

    for model_id, profile in profiles.items():
        missing = [t for t in weights if t not in profile]
        if missing:
            problems.append(f'{model_id!r} is missing traits: {", ".join(missing)}')

        unknown = [t for t in profile if t not in weights]
        if unknown:
            problems.append(f'{model_id!r} defines unweighted traits: {", ".join(unknown)}')

        for trait, value in profile.items():
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not 0.0 <= value <= 1.0:
                problems.append(f'{model_id!r}.{trait} must be within [0, 1], got {value!r}')

    return problems


@dataclass(frozen=True)
class ScoringConfig:
    """Immutable weight + profile tables handed to the scorer.

    Validation runs at construction, so an incomplete profile fails when the
    config is built rather than silently scoring its missing traits as 0.
    """

    weights: dict
    profiles: dict
    names: dict = field(default_factory=dict)

    def __post_init__(self):
        weights = dict(self.weights)
        profiles = {model_id: dict(profile) for model_id, profile in self.profiles.items()}

        problems = validate_scoring_tables(weights, profiles)
        if problems:
            raise ProfileConfigError(problems)

        object.__setattr__(self, 'weights', MappingProxyType(weights))
        object.__setattr__(
            self,
            'profiles',
            MappingProxyType({m: MappingProxyType(p) for m, p in profiles.items()}),
        )
        object.__setattr__(self, 'names', MappingProxyType(dict(self.names)))

    @property
    def traits(self):
        return tuple(self.weights)

    @property
    def model_ids(self):
        return tuple(self.profiles)

    def display_name(self, model_id):
        return self.names.get(model_id, model_id)

    def profile(self, model_id):
        return self.profiles[model_id]


DEFAULT_SCORING_CONFIG = ScoringConfig(
    weights=TRAIT_WEIGHTS,
    profiles=BUSINESS_MODEL_PROFILES,
    names=BUSINESS_MODEL_NAMES,
)
