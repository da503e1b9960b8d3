"""
Tests for opportunity fit scoring.
"""
import pytest

from conftest import make_opportunity
from launchpad.schemas import UserProfile


@pytest.fixture
def fit_profile() -> UserProfile:
    return UserProfile(
        current_skills=["Python", "git", "SQL", "React"],
        location="Austin, TX",
        target_roles=["Software Engineer"],
    )


class TestScoreFit:
    """Tests for the additive factor breakdown."""

    def test_worked_example(self, fit_profile):
        """Target role, 3/4 required + 1/2 preferred, intern level, remote."""
        from launchpad.services.fit_scorer import score_fit

        result = score_fit(fit_profile, None, make_opportunity())

        # 22.5 + 5 = 27.5 -> 28 skill points
        assert result.score == 88
        assert [(f.name, f.points) for f in result.factors] == [
            ("Target Role Match", 30),
            ("Skills Match", 28),
            ("Level Appropriate", 15),
            ("Location Match", 15),
        ]
        assert result.factors[1].details == "3/4 required, 1/2 preferred"
        assert result.matched_skills == ["python", "git", "sql", "react"]
        assert result.missing_skills == ["docker"]

    def test_score_equals_factor_sum(self, fit_profile):
        from launchpad.services.fit_scorer import score_fit

        opportunities = [
            make_opportunity(),
            make_opportunity(required_skills=["python", "go", "rust"], preferred_skills=["react", "vue", "aws"]),
            make_opportunity(level="Senior", location_type="On-site - Boston, MA"),
            make_opportunity(role_type="Data Scientist", required_skills=[], preferred_skills=[]),
        ]
        for opp in opportunities:
            result = score_fit(fit_profile, None, opp)
            assert result.score == sum(f.points for f in result.factors)
            assert 0 <= result.score <= 100

    def test_unawarded_factors_omitted(self):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(role_type="Product Manager", level="Entry Level")
        result = score_fit(UserProfile(location="Austin, TX"), None, opp)

        names = [f.name for f in result.factors]
        assert "Target Role Match" not in names
        assert "Level Appropriate" not in names
        assert "Skills Match" in names

    def test_empty_required_awards_full_points(self):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(required_skills=[], preferred_skills=[])
        result = score_fit(UserProfile(), None, opp)

        skills = result.factors[0]
        assert skills.name == "Skills Match"
        assert skills.points == 30
        assert skills.details == "0/0 required, 0/0 preferred"
        assert result.missing_skills == []

    def test_blank_listing_skills_ignored(self):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(required_skills=["python", "  ", ""], preferred_skills=[])
        result = score_fit(UserProfile(current_skills=["python"]), None, opp)

        assert result.factors[0].details == "1/1 required, 0/0 preferred"

    def test_completed_roadmap_skills_count(self, fit_profile, sample_roadmap):
        """Docker from a completed milestone fills the last required gap."""
        from launchpad.services.fit_scorer import score_fit

        result = score_fit(fit_profile, sample_roadmap, make_opportunity())

        assert result.missing_skills == []
        assert result.factors[1].details == "4/4 required, 1/2 preferred"

    def test_in_progress_roadmap_skills_do_not_count(self, sample_roadmap):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(required_skills=["fastapi"], preferred_skills=[])
        result = score_fit(UserProfile(), sample_roadmap, opp)

        assert result.missing_skills == ["fastapi"]

    def test_alias_and_substring_matching(self):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(required_skills=["JavaScript", "React Native"], preferred_skills=[])
        result = score_fit(UserProfile(current_skills=["JS", "react"]), None, opp)

        assert result.missing_skills == []


class TestLocation:
    """Tests for the location factor."""

    def test_region_match(self):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(location_type="Hybrid - Austin, TX")
        result = score_fit(UserProfile(location="Austin, TX"), None, opp)

        assert result.factors[-1].name == "Location Match"
        assert result.factors[-1].points == 15

    def test_partial_when_region_differs(self):
        from launchpad.services.fit_scorer import score_fit

        opp = make_opportunity(location_type="On-site - Seattle, WA")
        result = score_fit(UserProfile(location="Austin, TX"), None, opp)

        assert result.factors[-1].name == "Location Partial"
        assert result.factors[-1].points == 7

    def test_remote_matches_without_location(self):
        from launchpad.services.fit_scorer import is_location_match

        assert is_location_match(UserProfile(), make_opportunity(location_type="remote"))

    def test_no_region_is_partial(self):
        from launchpad.services.fit_scorer import is_location_match

        opp = make_opportunity(location_type="On-site - Austin, TX")
        assert not is_location_match(UserProfile(location="Austin"), opp)

    @pytest.mark.parametrize("location,expected", [
        ("Austin, TX", "TX"),
        ("Toronto, ON, Canada", "ON"),
        ("Austin", None),
        ("Austin, ", None),
        ("", None),
        (None, None),
    ])
    def test_location_region(self, location, expected):
        from launchpad.services.fit_scorer import location_region

        assert location_region(location) == expected
