"""Configuration settings for the Fit Scoring system."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Fit scoring configuration settings.

    The rule tables themselves are fixed; these settings only shape how
    rankings are consumed. Override via environment variables with the
    `SCORING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    response_path: Path = Field(
        default=Path("responses/response.yaml"),
        description="Default quiz response file (YAML/JSON)",
    )
    top_paths: Annotated[int, Field(ge=1)] = Field(
        default=3,
        description="Number of best-matching paths shown by the top command",
    )


# Singleton instance for easy import
_scoring_config: ScoringConfig | None = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def reset_scoring_config() -> None:
    """Reset the scoring configuration singleton (useful for testing)."""
    global _scoring_config
    _scoring_config = None
