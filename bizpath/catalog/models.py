"""Data models for the business-path catalog."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class BusinessPath(BaseModel):
    """A business-path archetype from the static catalog.

    `fit_score` is an output slot: catalog entries carry 0 and scoring runs
    hand back copies with the score filled in.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable path identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="One-line summary")
    difficulty: Literal["Easy", "Medium", "Hard"] = Field(
        ..., description="Relative difficulty to get started"
    )
    time_to_profit: str = Field(..., description="Typical time to first profit")
    startup_cost: str = Field(..., description="Typical upfront cost range")
    potential_income: str = Field(..., description="Typical monthly income range")
    market_size: str = Field(default="", description="Market size blurb")
    skills: tuple[str, ...] = Field(default=(), description="Core skills")
    tools: tuple[str, ...] = Field(default=(), description="Common tools")
    fit_score: int = Field(default=0, ge=0, le=100, description="Derived fit score")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")
