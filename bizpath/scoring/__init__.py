"""Fit scoring and ranking of business paths.

Public API:
    - calculate_fit_score: Score one path for a quiz response
    - explain_fit_score: Score one path with the list of fired rules
    - generate_personalized_paths: Rank the whole catalog
    - FitScoringService: Service wrapper with formatting helpers
    - ResponseService: Load and validate saved quiz responses
    - QuizResponse: Response model
    - ScoringConfig: Configuration settings
"""

from bizpath.scoring.config import ScoringConfig, get_scoring_config, reset_scoring_config
from bizpath.scoring.fields import resolve_inputs, resolve_value
from bizpath.scoring.models import (
    FitScoreBreakdown,
    QuizResponse,
    ResolvedInputs,
    ScoreAdjustment,
)
from bizpath.scoring.responses import ResponseService
from bizpath.scoring.service import (
    FitScoringService,
    calculate_fit_score,
    explain_fit_score,
    generate_personalized_paths,
)

__all__ = [
    "FitScoringService",
    "ResponseService",
    "QuizResponse",
    "ResolvedInputs",
    "ScoreAdjustment",
    "FitScoreBreakdown",
    "ScoringConfig",
    "calculate_fit_score",
    "explain_fit_score",
    "generate_personalized_paths",
    "get_scoring_config",
    "reset_scoring_config",
    "resolve_inputs",
    "resolve_value",
]
