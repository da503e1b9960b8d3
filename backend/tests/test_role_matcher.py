"""
Tests for deterministic role matching.

Run with: pytest backend/tests/test_role_matcher.py -v
"""
import pytest

from conftest import make_role
from launchpad.schemas import UserProfile


class TestMatchRole:
    """Tests for scoring one profile against one role."""

    def test_worked_example(self):
        """Two of three required skills, no bonus, beginner on a beginner role."""
        from launchpad.services.role_matcher import match_role

        role = make_role(
            required_skills=("programming", "git", "sql"),
            preferred_skills=("react",),
        )
        profile = UserProfile(current_skills=["javascript", "git", "sql"], experience_level="beginner")

        result = match_role(profile, role)

        # 2/3 * 80 = 53.33, + 0 bonus, + 0 experience
        assert result.score == 53
        assert result.match_level == "fair"
        assert result.matched_skills == ["git", "sql"]
        assert result.gap_skills == ["programming"]
        assert result.bonus_skills == []
        assert "Test Role" in result.recommendation
        assert "programming" in result.recommendation
        assert result.source == "algorithmic"

    def test_aliases_count_as_matches(self):
        """JS on the profile satisfies a javascript requirement."""
        from launchpad.services.role_matcher import match_role

        role = make_role(required_skills=("javascript", "kubernetes"))
        profile = UserProfile(current_skills=["JS", "k8s"])

        result = match_role(profile, role)
        assert result.gap_skills == []
        assert result.score == 80

    def test_interests_and_resume_skills_join_pool(self):
        """Interests and parsed resume skills count toward the match."""
        from launchpad.schemas import ResumeExtract
        from launchpad.services.role_matcher import match_role

        role = make_role(required_skills=("python", "docker"))
        profile = UserProfile(
            interests=["Python"],
            resume_extract=ResumeExtract(normalized_skills=["Docker"]),
        )

        assert match_role(profile, role).matched_skills == ["python", "docker"]

    def test_empty_required_scores_full_required_points(self):
        from launchpad.services.role_matcher import match_role

        result = match_role(UserProfile(), make_role())
        assert result.score == 80
        assert result.match_level == "excellent"
        assert result.gap_skills == []

    def test_bonus_is_rounded_fraction(self):
        """One of three preferred skills is 6.67 -> 7 bonus points."""
        from launchpad.services.role_matcher import match_role

        role = make_role(preferred_skills=("react", "vue", "figma"))
        profile = UserProfile(current_skills=["React"])

        result = match_role(profile, role)
        assert result.score == 87
        assert result.bonus_skills == ["react"]

    def test_score_clamped_to_100(self):
        from launchpad.services.role_matcher import match_role

        role = make_role(preferred_skills=("react",))
        profile = UserProfile(current_skills=["react"], experience_level="advanced")

        assert match_role(profile, role).score == 100

    def test_empty_profile_never_raises(self, empty_profile):
        from launchpad.services.role_catalog import list_roles
        from launchpad.services.role_matcher import match_role

        for role in list_roles():
            result = match_role(empty_profile, role)
            assert result.matched_skills == []
            assert 0 <= result.score <= 100

    @pytest.mark.parametrize("experience,min_level,expected", [
        ("beginner", 0, 80),
        ("intermediate", 0, 85),
        ("advanced", 0, 90),
        ("advanced", 1, 85),
        ("beginner", 1, 75),
        ("beginner", 2, 70),
        ("no experience yet", 2, 70),
    ])
    def test_experience_adjustment(self, experience, min_level, expected):
        from launchpad.services.role_matcher import match_role

        role = make_role(min_experience_level=min_level)
        profile = UserProfile(experience_level=experience)

        assert match_role(profile, role).score == expected


class TestMatchProperties:
    """Invariants that hold for every catalog role."""

    def test_deterministic(self, student_profile):
        from launchpad.services.role_matcher import match_all_roles

        first = [m.to_dict() for m in match_all_roles(student_profile)]
        second = [m.to_dict() for m in match_all_roles(student_profile)]
        assert first == second

    def test_bounds_and_tier_consistency(self, student_profile):
        from launchpad.services.role_matcher import match_all_roles
        from launchpad.services.scoring import tier_of

        for match in match_all_roles(student_profile):
            assert 0 <= match.score <= 100
            assert match.match_level == tier_of(match.score)

    def test_matched_and_gap_partition_required(self, student_profile):
        from launchpad.services.role_catalog import list_roles
        from launchpad.services.role_matcher import match_role
        from launchpad.services.skill_taxonomy import normalize_skills

        for role in list_roles():
            result = match_role(student_profile, role)
            required = normalize_skills(list(role.required_skills))

            assert set(result.matched_skills) | set(result.gap_skills) == set(required)
            assert not set(result.matched_skills) & set(result.gap_skills)

    def test_bonus_skills_are_preferred(self, student_profile):
        from launchpad.services.role_catalog import list_roles
        from launchpad.services.role_matcher import match_role
        from launchpad.services.skill_taxonomy import normalize_skills

        for role in list_roles():
            result = match_role(student_profile, role)
            assert set(result.bonus_skills) <= set(normalize_skills(list(role.preferred_skills)))


class TestExperienceMapping:
    """Tests for free-text experience parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("beginner", 0),
        ("Intermediate", 1),
        ("ADVANCED", 2),
        ("I have some experience", 1),
        ("expert level", 2),
        ("no experience", 0),
        ("guru", 0),
        ("", 0),
        (None, 0),
    ])
    def test_map_experience_level(self, text, expected):
        from launchpad.services.role_matcher import map_experience_level

        assert map_experience_level(text) == expected

    def test_adjustment_is_capped(self):
        from launchpad.services.role_matcher import calculate_experience_adjustment

        assert calculate_experience_adjustment(2, 0) == 10
        assert calculate_experience_adjustment(0, 2) == -10
        assert calculate_experience_adjustment(5, 0) == 10
        assert calculate_experience_adjustment(0, 5) == -10
        assert calculate_experience_adjustment(1, 1) == 0


class TestRecommendation:
    """Tests for recommendation templates."""

    def test_excellent_mentions_applying(self):
        from launchpad.services.role_matcher import generate_recommendation

        text = generate_recommendation("Data Analyst", "excellent", [])
        assert "Excellent match" in text
        assert "Data Analyst" in text

    def test_good_names_two_gaps(self):
        from launchpad.services.role_matcher import generate_recommendation

        text = generate_recommendation("Backend Engineer", "good", ["docker", "sql", "apis"])
        assert "docker and sql" in text
        assert "apis" not in text

    def test_needs_development_names_three_gaps(self):
        from launchpad.services.role_matcher import generate_recommendation

        text = generate_recommendation("ML Engineer", "needs-development", ["a", "b", "c", "d"])
        assert "a, b, c" in text
        assert "d" not in text.split(":")[-1]

    def test_empty_gaps_are_handled(self):
        from launchpad.services.role_matcher import generate_recommendation

        for tier in ("good", "fair", "needs-development"):
            text = generate_recommendation("QA", tier, [])
            assert "QA" in text
            assert ":" not in text


class TestRanking:
    """Tests for sorting and top-N selection."""

    def test_sorted_descending(self, student_profile):
        from launchpad.services.role_matcher import match_all_roles

        scores = [m.score for m in match_all_roles(student_profile)]
        assert scores == sorted(scores, reverse=True)
        assert len(scores) == 10

    def test_ties_keep_catalog_order(self):
        from launchpad.services.role_matcher import match_all_roles

        roles = [make_role(id=f"role-{i}", name=f"Role {i}") for i in range(5)]
        matches = match_all_roles(UserProfile(), roles)

        assert [m.role_id for m in matches] == [f"role-{i}" for i in range(5)]

    def test_top_role_matches_is_prefix(self, student_profile):
        from launchpad.services.role_matcher import match_all_roles, top_role_matches

        top = top_role_matches(student_profile, 3)
        assert [m.to_dict() for m in top] == [m.to_dict() for m in match_all_roles(student_profile)[:3]]

    def test_top_role_matches_zero(self, student_profile):
        from launchpad.services.role_matcher import top_role_matches

        assert top_role_matches(student_profile, 0) == []


class TestMatchSpecificRoles:
    """Tests for matching a chosen subset of roles."""

    def test_unknown_ids_skipped(self, student_profile):
        from launchpad.services.role_matcher import match_specific_roles

        matches = match_specific_roles(student_profile, ["data-analyst", "astronaut", "software-engineer"])
        assert {m.role_id for m in matches} == {"data-analyst", "software-engineer"}

    def test_empty_ids_fall_back_to_top_three(self, student_profile):
        from launchpad.services.role_matcher import match_specific_roles, top_role_matches

        expected = [m.role_id for m in top_role_matches(student_profile, 3)]
        assert [m.role_id for m in match_specific_roles(student_profile, [])] == expected
        assert [m.role_id for m in match_specific_roles(student_profile, None)] == expected
