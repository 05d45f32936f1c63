"""Unit tests for ranking and FitScoringService."""

from __future__ import annotations

EMPTY_RANKING = [
    "virtual-assistant",
    "affiliate-marketing",
    "freelancing",
    "content-creation-ugc",
    "print-on-demand",
    "e-commerce-dropshipping",
    "youtube-automation",
    "online-coaching-consulting",
    "local-service-arbitrage",
    "high-ticket-sales",
    "app-saas-development",
]


class TestGeneratePersonalizedPaths:
    """Test ranking of the full catalog."""

    def test_ranking_covers_every_path_once(self, developer_response):
        """The ranking is a permutation of the catalog."""
        from bizpath.catalog.paths import business_path_ids
        from bizpath.scoring.service import generate_personalized_paths

        ranked = generate_personalized_paths(developer_response)

        assert sorted(p.id for p in ranked) == sorted(business_path_ids())

    def test_ranking_is_sorted_descending(self, developer_response):
        """Scores never increase down the ranking."""
        from bizpath.scoring.service import generate_personalized_paths

        scores = [p.fit_score for p in generate_personalized_paths(developer_response)]

        assert scores == sorted(scores, reverse=True)

    def test_ranking_scores_match_calculate(self, developer_response):
        """Each ranked entry carries its own fit score."""
        from bizpath.scoring.service import (
            calculate_fit_score,
            generate_personalized_paths,
        )

        for path in generate_personalized_paths(developer_response):
            assert path.fit_score == calculate_fit_score(path.id, developer_response)

    def test_empty_response_ranking_keeps_catalog_order_for_ties(self):
        """Paths with equal scores keep their catalog order."""
        from bizpath.scoring.service import generate_personalized_paths

        ranked = generate_personalized_paths({})

        assert [p.id for p in ranked] == EMPTY_RANKING
        assert [p.fit_score for p in ranked[-4:]] == [50, 50, 50, 50]

    def test_catalog_is_not_modified(self, developer_response):
        """Ranking returns copies and leaves catalog scores at zero."""
        from bizpath.catalog.paths import BUSINESS_PATHS, get_business_path
        from bizpath.scoring.service import generate_personalized_paths

        ranked = generate_personalized_paths(developer_response)

        assert all(path.fit_score == 0 for path in BUSINESS_PATHS)
        top = ranked[0]
        original = get_business_path(top.id)
        assert top is not original
        assert top.name == original.name
        assert top.model_dump(exclude={"fit_score"}) == original.model_dump(
            exclude={"fit_score"}
        )

    def test_developer_profile_ranks_software_among_top_matches(
        self, developer_response
    ):
        """App development ties at 100 and sits after earlier catalog entries."""
        from bizpath.scoring.service import generate_personalized_paths

        ranked = generate_personalized_paths(developer_response)
        ids = [p.id for p in ranked]
        top = [p.id for p in ranked if p.fit_score == 100]

        assert "app-saas-development" in top
        assert "e-commerce-dropshipping" in top
        assert ids[: len(top)] == top
        # Last catalog entry, so it closes the group of tied paths
        assert top[-1] == "app-saas-development"
        assert ids.index("e-commerce-dropshipping") < ids.index("app-saas-development")
        assert all(
            p.fit_score < 100 for p in ranked[ids.index("app-saas-development") + 1 :]
        )

    def test_custom_catalog(self):
        """Any catalog can be ranked, including ids without path rules."""
        from bizpath.catalog.models import BusinessPath
        from bizpath.scoring.service import generate_personalized_paths

        catalog = [
            BusinessPath(
                id="mystery-path",
                name="Mystery",
                description="Unknown",
                difficulty="Medium",
                time_to_profit="?",
                startup_cost="?",
                potential_income="?",
            )
        ]

        ranked = generate_personalized_paths({"selfMotivationLevel": 5}, catalog)

        assert [(p.id, p.fit_score) for p in ranked] == [("mystery-path", 58)]
        assert catalog[0].fit_score == 0

    def test_empty_catalog(self):
        """An empty catalog ranks to an empty list."""
        from bizpath.scoring.service import generate_personalized_paths

        assert generate_personalized_paths({}, []) == []


class TestFitScoringService:
    """Test the FitScoringService wrapper."""

    def test_rank_with_limit(self):
        """The limit keeps the first N ranked paths."""
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        ranked = service.rank({}, limit=2)

        assert [p.id for p in ranked] == EMPTY_RANKING[:2]

    def test_top_paths_uses_config(self):
        """top_paths returns the configured number of paths."""
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        config = ScoringConfig(_env_file=None, top_paths=4)  # type: ignore[call-arg]
        service = FitScoringService(config=config)

        assert [p.id for p in service.top_paths({})] == EMPTY_RANKING[:4]

    def test_score_and_explain(self):
        """score and explain agree with each other."""
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        assert service.score("freelancing", {}) == 81
        assert service.explain("freelancing", {}).score == 81

    def test_format_ranking(self):
        """Formatted ranking lists position, name, score and difficulty."""
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        text = service.format_ranking(service.rank({}, limit=2))
        lines = text.splitlines()

        assert len(lines) == 2
        assert lines[0].startswith(" 1. Virtual Assistant")
        assert " 88%  [Easy] 1-2 weeks, $0-100" in lines[0]
        assert lines[1].startswith(" 2. Affiliate Marketing")

    def test_format_ranking_empty(self):
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        assert service.format_ranking([]) == "No business paths to rank."

    def test_format_breakdown(self):
        """Formatted breakdown shows signed deltas and the final score."""
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        text = service.format_breakdown(service.explain("youtube-automation", {}))

        assert text.splitlines() == [
            "Path: youtube-automation",
            "Base score: 50",
            "  +12  3-12 month income timeline",
            "  -10  needs capital but budget is zero",
            "Fit score: 52",
        ]

    def test_format_breakdown_clamped(self, developer_response):
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        text = service.format_breakdown(
            service.explain("app-saas-development", developer_response)
        )

        assert text.endswith("Fit score: 100 (clamped from 158)")

    def test_format_breakdown_without_adjustments(self):
        from bizpath.scoring.config import ScoringConfig
        from bizpath.scoring.service import FitScoringService

        service = FitScoringService(config=ScoringConfig(_env_file=None))  # type: ignore[call-arg]

        text = service.format_breakdown(service.explain("high-ticket-sales", {}))

        assert "  (no adjustments)" in text
        assert text.endswith("Fit score: 50")
