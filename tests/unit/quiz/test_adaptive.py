"""Tests for adaptive follow-up question gating."""

from __future__ import annotations

import pytest


class TestInventoryComfortQuestion:
    """Follow-up after the investment question."""

    @pytest.mark.parametrize(
        ("investment", "expected"),
        [(625, True), (501, True), (500, False), (100, False), (0, False)],
    )
    def test_shown_for_large_budgets(self, investment, expected):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        response = {"upfrontInvestment": investment}

        assert should_show_adaptive_question(4, response) is expected

    def test_hidden_when_unanswered(self):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        assert should_show_adaptive_question(4, {}) is False

    def test_legacy_budget_is_not_consulted(self):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        assert should_show_adaptive_question(4, {"startupBudget": 5000}) is False


class TestDigitalContentQuestion:
    """Follow-up after the tools question."""

    def test_shown_for_canva_users(self):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        response = {"familiarTools": ["notion", "canva"]}

        assert should_show_adaptive_question(12, response) is True

    def test_shown_for_creative_people(self):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        assert should_show_adaptive_question(12, {"creativeWorkEnjoyment": 4}) is True

    def test_hidden_otherwise(self):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        response = {"familiarTools": ["notion"], "creativeWorkEnjoyment": 3}

        assert should_show_adaptive_question(12, response) is False
        assert should_show_adaptive_question(12, {}) is False


class TestOtherSteps:
    """No follow-up exists after other steps."""

    @pytest.mark.parametrize("step", [0, 3, 5, 11, 13, 40])
    def test_no_follow_up(self, step):
        from bizpath.quiz.adaptive import should_show_adaptive_question

        response = {
            "upfrontInvestment": 5000,
            "familiarTools": ["canva"],
            "creativeWorkEnjoyment": 5,
        }

        assert should_show_adaptive_question(step, response) is False

    def test_accepts_quiz_response_model(self):
        from bizpath.quiz.adaptive import should_show_adaptive_question
        from bizpath.scoring.models import QuizResponse

        response = QuizResponse(upfront_investment=1000)

        assert should_show_adaptive_question(4, response) is True
