"""Questionnaire flow helpers."""

from bizpath.quiz.adaptive import should_show_adaptive_question

__all__ = ["should_show_adaptive_question"]
