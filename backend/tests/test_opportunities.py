"""
Tests for persona filtering, catalog loading and opportunity ranking.
"""
import json

import pytest

from conftest import make_opportunity
from launchpad.schemas import UserProfile


@pytest.fixture
def catalog():
    from launchpad.services.opportunity_catalog import load_opportunities

    return load_opportunities()


class TestLoadOpportunities:

    def test_bundled_catalog(self, catalog):
        assert len(catalog) == 10
        assert catalog[0].id == "opp-001"
        assert catalog[0].company == "Google"

    def test_custom_path(self, tmp_path):
        from launchpad.services.opportunity_catalog import load_opportunities

        path = tmp_path / "opps.json"
        path.write_text(json.dumps({"opportunities": [
            {"id": "x-1", "title": "Intern", "company": "Tiny", "role_type": "Data Analyst"},
        ]}))

        loaded = load_opportunities(path)
        assert [o.id for o in loaded] == ["x-1"]
        assert loaded[0].level == "Intern"

    def test_missing_key_is_empty(self, tmp_path):
        from launchpad.services.opportunity_catalog import load_opportunities

        path = tmp_path / "empty.json"
        path.write_text("{}")
        assert load_opportunities(path) == []


class TestFilterOpportunities:

    def test_role_type(self, catalog):
        from launchpad.services.opportunity_catalog import filter_opportunities

        assert [o.id for o in filter_opportunities(catalog, role_type="Data Scientist")] == ["opp-003"]

    def test_sponsor(self, catalog):
        from launchpad.services.opportunity_catalog import filter_opportunities

        assert [o.id for o in filter_opportunities(catalog, sponsor="Google")] == ["opp-001"]

    def test_location_substring(self, catalog):
        from launchpad.services.opportunity_catalog import filter_opportunities

        ids = [o.id for o in filter_opportunities(catalog, location_type="remote")]
        assert ids == ["opp-001", "opp-007", "opp-010"]

    def test_no_filters(self, catalog):
        from launchpad.services.opportunity_catalog import filter_opportunities

        assert len(filter_opportunities(catalog)) == 10


class TestUserTypes:
    """Tests for persona relevance and filtering."""

    def test_student_excludes_senior_and_transition(self, catalog):
        from launchpad.services.user_types import filter_opportunities_by_user_type

        ids = {opp.id for opp, _ in filter_opportunities_by_user_type(catalog, "student")}
        assert "opp-009" not in ids
        assert "opp-010" not in ids
        assert {"opp-001", "opp-004", "opp-006", "opp-008"} <= ids

    def test_professional_sees_experienced_roles(self, catalog):
        from launchpad.services.user_types import filter_opportunities_by_user_type

        ids = [opp.id for opp, _ in filter_opportunities_by_user_type(catalog, "professional")]
        assert sorted(ids) == ["opp-009", "opp-010"]

    def test_sponsor_bonus_only_for_students(self):
        from launchpad.services.user_types import opportunity_relevance

        opp = make_opportunity(type="contract", experience_level=None, sponsor_tag="Acme")
        assert opportunity_relevance(opp, "student") == 60
        assert opportunity_relevance(opp, "other") == 80

    def test_relevance_capped(self, catalog):
        from launchpad.services.user_types import opportunity_relevance

        google = catalog[0]
        assert opportunity_relevance(google, "student") == 100

    def test_unknown_type_uses_other(self):
        from launchpad.services.user_types import get_preferences

        assert get_preferences("wizard") == get_preferences("other")
        assert get_preferences(None) == get_preferences("other")
        assert get_preferences("STUDENT") == get_preferences("student")

    def test_sorted_by_relevance(self):
        from launchpad.services.user_types import filter_opportunities_by_user_type

        plain = make_opportunity(id="plain", type="freelance", experience_level=None)
        strong = make_opportunity(id="strong", type="contract", experience_level="Junior")
        pairs = filter_opportunities_by_user_type([plain, strong], "other")

        assert [(o.id, r) for o, r in pairs] == [("strong", 100), ("plain", 80)]


class TestRankOpportunities:

    def test_ranking_formula_and_order(self, catalog, student_profile):
        from launchpad.services.opportunity_catalog import rank_opportunities
        from launchpad.services.user_types import opportunity_relevance

        ranked = rank_opportunities(student_profile, None, catalog)

        assert ranked
        for item in ranked:
            assert item.relevance_score == opportunity_relevance(item.opportunity, "student")
            expected = round(item.fit.score * 0.7 + item.relevance_score * 0.3, 1)
            assert item.ranking_score == expected

        scores = [r.ranking_score for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_target_role_listing_ranks_first(self, catalog, student_profile):
        """The remote SWE intern listing fits a SWE-targeting student best."""
        from launchpad.services.opportunity_catalog import rank_opportunities

        ranked = rank_opportunities(student_profile, None, catalog)
        assert ranked[0].opportunity.id == "opp-001"

    def test_catalog_relevance_replaced(self, student_profile):
        from launchpad.services.opportunity_catalog import rank_opportunities

        opp = make_opportunity(relevance_score=5, sponsor_tag=None, experience_level="Intern")
        ranked = rank_opportunities(student_profile, None, [opp])

        assert ranked[0].relevance_score == 100
