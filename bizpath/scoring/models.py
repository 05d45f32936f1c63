"""Data models for the Fit Scoring system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Number = int | float


class QuizResponse(BaseModel):
    """Answers collected by the questionnaire.

    Every field is optional; `None` means the question was not answered.
    Input keys use the questionnaire's camelCase names
    (`successIncomeGoal`), and snake_case attribute names are accepted too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Round 1: motivation & vision
    main_motivation: str | None = None
    first_income_timeline: str | None = None
    success_income_goal: Number | None = None
    upfront_investment: Number | None = None
    passion_identity_alignment: Number | None = None
    business_exit_plan: str | None = None
    business_growth_size: str | None = None
    passive_income_importance: Number | None = None

    # Round 2: time, effort & learning style
    weekly_time_commitment: Number | None = None
    long_term_consistency: Number | None = None
    trial_error_comfort: Number | None = None
    learning_preference: str | None = None
    systems_routines_enjoyment: Number | None = None
    discouragement_resilience: Number | None = None
    tool_learning_willingness: str | None = None
    organization_level: Number | None = None
    self_motivation_level: Number | None = None
    uncertainty_handling: Number | None = None
    repetitive_tasks_feeling: str | None = None
    work_collaboration_preference: str | None = None

    # Round 3: personality & preferences
    brand_face_comfort: Number | None = None
    competitiveness_level: Number | None = None
    creative_work_enjoyment: Number | None = None
    direct_communication_enjoyment: Number | None = None
    work_structure_preference: str | None = None

    # Round 4: tools & work environment
    tech_skills_rating: Number | None = None
    workspace_availability: str | None = None
    support_system_strength: str | None = None
    internet_device_reliability: Number | None = None
    familiar_tools: list[str] | None = None

    # Round 5: strategy & decision-making
    decision_making_style: str | None = None
    risk_comfort_level: Number | None = None
    feedback_rejection_response: Number | None = None
    path_preference: str | None = None
    control_importance: Number | None = None

    # Round 6: business model fit filters
    online_presence_comfort: str | None = None
    client_calls_comfort: str | None = None
    physical_shipping_openness: str | None = None
    work_style_preference: str | None = None
    social_media_interest: Number | None = None
    ecosystem_participation: str | None = None
    existing_audience: str | None = None
    promoting_others_openness: str | None = None
    teach_vs_solve_preference: str | None = None
    meaningful_contribution_importance: Number | None = None

    # Adaptive follow-ups
    inventory_comfort: Number | None = None
    digital_content_comfort: Number | None = None
    teaching_comfort: Number | None = None
    public_speaking_comfort: Number | None = None
    sales_comfort: Number | None = None

    # Legacy fields kept for older saved responses
    primary_motivation: str | None = None
    income_goal: Number | None = None
    time_to_first_income: str | None = None
    startup_budget: Number | None = None
    time_commitment: Number | None = None
    learning_style: str | None = None
    work_preference: str | None = None
    risk_tolerance: Number | None = None
    customer_interaction_comfort: Number | None = None
    self_motivation: Number | None = None
    existing_skills: list[str] | None = None
    experience_level: Literal["beginner", "intermediate", "advanced"] | None = None
    lifestyle: Literal["freedom", "stability", "growth"] | None = None
    stress_response: str | None = None
    communication_style: str | None = None
    perfectionism_level: Number | None = None
    social_energy: str | None = None
    change_adaptability: Number | None = None
    attention_to_detail: Number | None = None
    competition_motivation: str | None = None
    failure_response: str | None = None
    routine_preference: str | None = None
    feedback_reception: str | None = None
    long_term_thinking: str | None = None
    authority_comfort: Number | None = None
    technology_comfort: Number | None = None

    def to_dict(self) -> dict:
        """Serialize answered fields using questionnaire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict) -> QuizResponse:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass(frozen=True)
class ResolvedInputs:
    """Working values the scorer reads after current/legacy/default resolution."""

    income_goal: Number
    income_timeline: str
    budget: Number
    weekly_hours: Number
    tech_skills: Number
    self_motivation: Number
    risk_tolerance: Number


@dataclass(frozen=True)
class ScoreAdjustment:
    """A single rule that fired while scoring a path."""

    label: str
    delta: int


@dataclass
class FitScoreBreakdown:
    """How a fit score was assembled for one path."""

    path_id: str
    base_score: int
    score: int
    raw_score: int
    adjustments: list[ScoreAdjustment] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")
        expected = self.base_score + sum(a.delta for a in self.adjustments)
        if expected != self.raw_score:
            raise ValueError(
                f"raw_score {self.raw_score} does not match base plus adjustments "
                f"({expected})"
            )

    @property
    def clamped(self) -> bool:
        return self.score != self.raw_score
