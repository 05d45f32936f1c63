"""Tests for the business path catalog."""

from __future__ import annotations

import pytest


class TestCatalog:
    """Test the static BUSINESS_PATHS catalog."""

    def test_catalog_ids_are_unique(self):
        from bizpath.catalog.paths import BUSINESS_PATHS, business_path_ids

        ids = business_path_ids()

        assert len(ids) == len(BUSINESS_PATHS) == 11
        assert len(set(ids)) == len(ids)

    def test_catalog_order(self):
        """Catalog order decides how ties are ranked."""
        from bizpath.catalog.paths import business_path_ids

        assert business_path_ids() == [
            "content-creation-ugc",
            "freelancing",
            "affiliate-marketing",
            "e-commerce-dropshipping",
            "virtual-assistant",
            "online-coaching-consulting",
            "print-on-demand",
            "youtube-automation",
            "local-service-arbitrage",
            "high-ticket-sales",
            "app-saas-development",
        ]

    def test_catalog_entries_are_unscored(self):
        from bizpath.catalog.paths import BUSINESS_PATHS

        assert all(path.fit_score == 0 for path in BUSINESS_PATHS)

    def test_catalog_entries_have_display_data(self):
        from bizpath.catalog.paths import BUSINESS_PATHS

        for path in BUSINESS_PATHS:
            assert path.name
            assert path.description
            assert path.time_to_profit
            assert path.startup_cost
            assert path.potential_income
            assert path.skills
            assert path.tools


class TestGetBusinessPath:
    """Test lookup by id."""

    def test_returns_catalog_entry(self):
        from bizpath.catalog.paths import get_business_path

        path = get_business_path("freelancing")

        assert path.name == "Freelancing"
        assert path.difficulty == "Easy"

    def test_unknown_id_raises_key_error(self):
        from bizpath.catalog.paths import get_business_path

        with pytest.raises(KeyError, match="Unknown business path"):
            get_business_path("crypto-mining")


class TestBusinessPathModel:
    """Test BusinessPath validation."""

    def _path(self, **overrides):
        from bizpath.catalog.models import BusinessPath

        data = {
            "id": "test-path",
            "name": "Test",
            "description": "A path for tests",
            "difficulty": "Medium",
            "time_to_profit": "1 month",
            "startup_cost": "$0",
            "potential_income": "$1K/month",
        }
        data.update(overrides)
        return BusinessPath(**data)

    def test_entries_are_immutable(self):
        from pydantic import ValidationError

        path = self._path()

        with pytest.raises(ValidationError):
            path.fit_score = 90  # type: ignore[misc]

    def test_fit_score_bounds(self):
        from pydantic import ValidationError

        assert self._path(fit_score=100).fit_score == 100
        with pytest.raises(ValidationError):
            self._path(fit_score=101)
        with pytest.raises(ValidationError):
            self._path(fit_score=-1)

    def test_difficulty_must_be_known(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            self._path(difficulty="Extreme")

    def test_to_dict(self):
        data = self._path(skills=("Writing",)).to_dict()

        assert data["id"] == "test-path"
        assert data["skills"] == ["Writing"]
        assert data["fit_score"] == 0
