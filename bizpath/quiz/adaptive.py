"""Gating for the questionnaire's adaptive follow-up questions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bizpath.scoring.models import QuizResponse

# Step after which each follow-up may be inserted
INVENTORY_COMFORT_STEP = 4
DIGITAL_CONTENT_COMFORT_STEP = 12


def should_show_adaptive_question(
    current_step: int, response: QuizResponse | Mapping[str, Any]
) -> bool:
    """Return True when the follow-up question for `current_step` applies.

    - After the investment question, users planning to spend more than $500
      are asked how they feel about holding inventory.
    - After the tools question, Canva users and people who enjoy creative
      work are asked about producing digital content.
    """
    if not isinstance(response, QuizResponse):
        response = QuizResponse.model_validate(dict(response))

    if current_step == INVENTORY_COMFORT_STEP:
        investment = response.upfront_investment
        return bool(investment) and investment > 500

    if current_step == DIGITAL_CONTENT_COMFORT_STEP:
        uses_canva = "canva" in (response.familiar_tools or [])
        creative = response.creative_work_enjoyment
        return uses_canva or (bool(creative) and creative >= 4)

    return False
