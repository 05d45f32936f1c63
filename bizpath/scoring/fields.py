"""Current/legacy field resolution for quiz responses.

Older saved responses use a previous naming scheme (`incomeGoal` instead of
`successIncomeGoal`, and so on). Each scored value is resolved on its own:
the current field wins, then the legacy field, then a fixed default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bizpath.scoring.models import QuizResponse, ResolvedInputs


@dataclass(frozen=True)
class FieldSpec:
    """Where a working value comes from and what it falls back to."""

    current: str
    legacy: str
    default: Any


RESOLVED_FIELDS: dict[str, FieldSpec] = {
    "income_goal": FieldSpec("success_income_goal", "income_goal", 1000),
    "income_timeline": FieldSpec(
        "first_income_timeline", "time_to_first_income", "3-6-months"
    ),
    "budget": FieldSpec("upfront_investment", "startup_budget", 0),
    "weekly_hours": FieldSpec("weekly_time_commitment", "time_commitment", 20),
    "tech_skills": FieldSpec("tech_skills_rating", "technology_comfort", 3),
    "self_motivation": FieldSpec("self_motivation_level", "self_motivation", 3),
    "risk_tolerance": FieldSpec("risk_comfort_level", "risk_tolerance", 3),
}


def resolve_value(
    response: QuizResponse, current: str, legacy: str, default: Any = 0
) -> Any:
    """Return the current field if set, else the legacy field, else `default`."""
    value = getattr(response, current, None)
    if value is not None:
        return value
    value = getattr(response, legacy, None)
    if value is not None:
        return value
    return default


def resolve_inputs(response: QuizResponse) -> ResolvedInputs:
    """Resolve every scored working value once."""
    return ResolvedInputs(
        **{
            name: resolve_value(response, spec.current, spec.legacy, spec.default)
            for name, spec in RESOLVED_FIELDS.items()
        }
    )


def missing_fields(response: QuizResponse) -> list[str]:
    """Return the working values that will fall back to their defaults."""
    return [
        name
        for name, spec in RESOLVED_FIELDS.items()
        if getattr(response, spec.current, None) is None
        and getattr(response, spec.legacy, None) is None
    ]
