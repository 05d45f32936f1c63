"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Drop cached configs and logging handlers between tests."""
    yield
    from bizpath.scoring.config import reset_scoring_config
    from bizpath.utils.logging import reset_logging

    reset_scoring_config()
    reset_logging()


@pytest.fixture
def empty_scores() -> dict[str, int]:
    """Fit scores of an unanswered questionnaire, in catalog order."""
    return {
        "content-creation-ugc": 75,
        "freelancing": 81,
        "affiliate-marketing": 87,
        "e-commerce-dropshipping": 54,
        "virtual-assistant": 88,
        "online-coaching-consulting": 50,
        "print-on-demand": 72,
        "youtube-automation": 52,
        "local-service-arbitrage": 50,
        "high-ticket-sales": 50,
        "app-saas-development": 50,
    }


@pytest.fixture
def developer_response() -> dict:
    """An ambitious, technical, solo builder with plenty of time."""
    return {
        "successIncomeGoal": 15000,
        "techSkillsRating": 5,
        "familiarTools": ["coding", "notion"],
        "decisionMakingStyle": "logical-process",
        "workCollaborationPreference": "solo-only",
        "weeklyTimeCommitment": 45,
        "selfMotivationLevel": 5,
        "riskComfortLevel": 5,
        "upfrontInvestment": 2000,
    }
