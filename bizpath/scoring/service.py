"""Fit scoring service implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from bizpath.catalog.models import BusinessPath
from bizpath.catalog.paths import BUSINESS_PATHS
from bizpath.scoring.config import ScoringConfig, get_scoring_config
from bizpath.scoring.fields import resolve_inputs
from bizpath.scoring.models import FitScoreBreakdown, QuizResponse, ScoreAdjustment
from bizpath.scoring.rules import (
    BASE_SCORE,
    MAX_SCORE,
    MIN_SCORE,
    PATH_RULES,
    UNIVERSAL_RULES,
)

logger = logging.getLogger(__name__)

ResponseLike = QuizResponse | Mapping[str, Any]


def _as_response(response: ResponseLike) -> QuizResponse:
    if isinstance(response, QuizResponse):
        return response
    return QuizResponse.model_validate(dict(response))


def _clamp(score: int) -> int:
    return min(max(score, MIN_SCORE), MAX_SCORE)


def explain_fit_score(path_id: str, response: ResponseLike) -> FitScoreBreakdown:
    """Score one path and report every adjustment that fired, in order."""
    data = _as_response(response)
    inputs = resolve_inputs(data)

    adjustments: list[ScoreAdjustment] = []
    for rule in PATH_RULES.get(path_id, ()):
        if rule.applies(data, inputs):
            adjustments.append(ScoreAdjustment(rule.label, rule.delta))

    for rule in UNIVERSAL_RULES:
        if rule.matches(path_id) and rule.applies(data, inputs):
            adjustments.append(ScoreAdjustment(rule.label, rule.delta))

    raw_score = BASE_SCORE + sum(a.delta for a in adjustments)
    return FitScoreBreakdown(
        path_id=path_id,
        base_score=BASE_SCORE,
        score=_clamp(raw_score),
        raw_score=raw_score,
        adjustments=adjustments,
    )


def calculate_fit_score(path_id: str, response: ResponseLike) -> int:
    """Return the 0-100 fit score of `response` for `path_id`.

    Unanswered fields fall back to their defaults, and unknown path ids only
    receive the universal adjustments, so this never raises for a valid
    (possibly empty) response.
    """
    return explain_fit_score(path_id, response).score


def generate_personalized_paths(
    response: ResponseLike,
    catalog: Iterable[BusinessPath] = BUSINESS_PATHS,
) -> list[BusinessPath]:
    """Score every catalog path and return copies sorted by fit score.

    The sort is stable, so equal scores keep catalog order. Catalog entries
    are never modified.
    """
    data = _as_response(response)
    paths = [
        path.model_copy(update={"fit_score": calculate_fit_score(path.id, data)})
        for path in catalog
    ]
    return sorted(paths, key=lambda path: path.fit_score, reverse=True)


class FitScoringService:
    """Service for ranking business paths against a quiz response."""

    def __init__(
        self,
        config: ScoringConfig | None = None,
        catalog: Iterable[BusinessPath] = BUSINESS_PATHS,
    ) -> None:
        self.config = config or get_scoring_config()
        self.catalog = tuple(catalog)

    def score(self, path_id: str, response: ResponseLike) -> int:
        score = calculate_fit_score(path_id, response)
        logger.debug("Scored %s: %s", path_id, score)
        return score

    def explain(self, path_id: str, response: ResponseLike) -> FitScoreBreakdown:
        breakdown = explain_fit_score(path_id, response)
        logger.debug(
            "Scored %s: %s (raw=%s, %s adjustments)",
            path_id,
            breakdown.score,
            breakdown.raw_score,
            len(breakdown.adjustments),
        )
        return breakdown

    def rank(
        self, response: ResponseLike, limit: int | None = None
    ) -> list[BusinessPath]:
        """Rank the catalog, optionally keeping only the first `limit` paths."""
        ranked = generate_personalized_paths(response, self.catalog)
        if ranked:
            logger.debug(
                "Ranked %s paths; top=%s (%s)",
                len(ranked),
                ranked[0].id,
                ranked[0].fit_score,
            )
        if limit is not None:
            return ranked[:limit]
        return ranked

    def top_paths(self, response: ResponseLike) -> list[BusinessPath]:
        """Return the configured number of best-fitting paths."""
        return self.rank(response, limit=self.config.top_paths)

    def format_ranking(self, ranked: list[BusinessPath]) -> str:
        """Format a ranking for CLI output."""
        if not ranked:
            return "No business paths to rank."
        width = max(len(path.name) for path in ranked)
        lines: list[str] = []
        for position, path in enumerate(ranked, start=1):
            lines.append(
                f"{position:>2}. {path.name:<{width}}  {path.fit_score:>3}%  "
                f"[{path.difficulty}] {path.time_to_profit}, {path.startup_cost}"
            )
        return "\n".join(lines)

    def format_breakdown(self, breakdown: FitScoreBreakdown) -> str:
        """Format a score breakdown for CLI output."""
        lines: list[str] = [f"Path: {breakdown.path_id}"]
        lines.append(f"Base score: {breakdown.base_score}")
        if breakdown.adjustments:
            for adjustment in breakdown.adjustments:
                lines.append(f"  {adjustment.delta:+d}  {adjustment.label}")
        else:
            lines.append("  (no adjustments)")
        if breakdown.clamped:
            lines.append(
                f"Fit score: {breakdown.score} (clamped from {breakdown.raw_score})"
            )
        else:
            lines.append(f"Fit score: {breakdown.score}")
        return "\n".join(lines)
