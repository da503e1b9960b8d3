"""
Role Matching Service - Deterministic Profile-to-Role Compatibility

Scores how well a user profile fits each catalog role and explains the
result with matched, missing and bonus skills.

Match Score Composition:
    - Required Skills (0-80): fraction of required skills the user has
    - Preferred Skills (0-20): fraction of preferred skills, rounded
    - Experience (-10..+10): 5 points per tier above/below the role minimum

Score Range: 0-100, classified into tiers:
    excellent >= 80 > good >= 60 > fair >= 40 > needs-development

All functions are pure and total: missing profile fields contribute
nothing, unknown skills compare by exact lower-cased name.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from launchpad.schemas.profile import UserProfile
from launchpad.services.role_catalog import (
    BEGINNER,
    INTERMEDIATE,
    ADVANCED,
    RoleProfile,
    get_role,
    list_roles,
)
from launchpad.services.scoring import clamp_score, round_half_up, tier_of
from launchpad.services.skill_taxonomy import normalize_skills

REQUIRED_SKILLS_WEIGHT = 80
PREFERRED_SKILLS_WEIGHT = 20
EXPERIENCE_STEP = 5
EXPERIENCE_CAP = 10

# Substring keywords per experience tier, checked in order
EXPERIENCE_KEYWORDS = [
    (BEGINNER, ("beginner", "no experience")),
    (INTERMEDIATE, ("intermediate", "some experience")),
    (ADVANCED, ("advanced", "expert")),
]


@dataclass
class MatchResult:
    """
    Outcome of matching one profile against one role.

    Attributes:
        role_id: Catalog role id
        role_name: Role display name
        score: Compatibility 0-100
        matched_skills: Required skills the user has (canonical)
        gap_skills: Required skills the user lacks (canonical)
        bonus_skills: Preferred skills the user has (canonical)
        match_level: Tier derived from score
        recommendation: Human-readable next step
        source: "algorithmic" or "ai"
    """
    role_id: str
    role_name: str
    score: int
    matched_skills: List[str] = field(default_factory=list)
    gap_skills: List[str] = field(default_factory=list)
    bonus_skills: List[str] = field(default_factory=list)
    match_level: str = "needs-development"
    recommendation: str = ""
    source: str = "algorithmic"

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses and storage."""
        return {
            "role_id": self.role_id,
            "role_name": self.role_name,
            "score": self.score,
            "matched_skills": list(self.matched_skills),
            "gap_skills": list(self.gap_skills),
            "bonus_skills": list(self.bonus_skills),
            "match_level": self.match_level,
            "recommendation": self.recommendation,
            "source": self.source,
        }


def collect_user_skills(profile: UserProfile) -> List[str]:
    """Raw skill pool: current skills, interests and resume skills."""
    return [
        *(profile.current_skills or []),
        *(profile.interests or []),
        *profile.resume_skills,
    ]


def map_experience_level(experience_level: Optional[str]) -> int:
    """Map a free-text experience level onto tier 0-2 (unknown -> 0)."""
    if not isinstance(experience_level, str):
        return BEGINNER

    level = experience_level.lower()
    for tier, keywords in EXPERIENCE_KEYWORDS:
        if any(keyword in level for keyword in keywords):
            return tier

    return BEGINNER


def calculate_experience_adjustment(user_level: int, role_min_level: int) -> int:
    """
    Reward over-qualification and penalize under-qualification.

    Returns:
        Adjustment in [-10, +10], 5 points per tier of difference
    """
    difference = user_level - role_min_level

    if difference >= 0:
        return min(EXPERIENCE_CAP, difference * EXPERIENCE_STEP)
    return max(-EXPERIENCE_CAP, difference * EXPERIENCE_STEP)


def calculate_required_score(user_skills: set, required: List[str]) -> float:
    """Required-skill contribution (0-80); an empty requirement list is fully met."""
    if not required:
        return float(REQUIRED_SKILLS_WEIGHT)

    matched = sum(1 for skill in required if skill in user_skills)
    return (matched / len(required)) * REQUIRED_SKILLS_WEIGHT


def calculate_bonus_score(user_skills: set, preferred: List[str]) -> int:
    """Preferred-skill bonus (0-20); no preferred skills means no bonus."""
    if not preferred:
        return 0

    matched = sum(1 for skill in preferred if skill in user_skills)
    return min(
        PREFERRED_SKILLS_WEIGHT,
        round_half_up((matched / len(preferred)) * PREFERRED_SKILLS_WEIGHT),
    )


def generate_recommendation(role_name: str, match_level: str, gap_skills: List[str]) -> str:
    """Templated advice for a match tier, naming the top gap skills."""
    if match_level == "excellent":
        return (
            f"Excellent match! You have most skills needed for {role_name}. "
            f"Consider applying to {role_name} positions."
        )

    if match_level == "good":
        if gap_skills:
            focus = " and ".join(gap_skills[:2])
            return f"Good fit for {role_name}. Focus on gaining {focus} to strengthen your candidacy."
        return f"Good fit for {role_name}. Build more experience to strengthen your candidacy."

    if match_level == "fair":
        if gap_skills:
            top_gaps = ", ".join(gap_skills[:3])
            return f"{role_name} is achievable with effort. Build skills in {top_gaps} through projects and courses."
        return f"{role_name} is achievable with effort. Gain hands-on experience through projects and courses."

    if gap_skills:
        top_gaps = ", ".join(gap_skills[:3])
        return f"{role_name} is a longer-term goal. Start with foundational skills: {top_gaps}."
    return f"{role_name} is a longer-term goal. Start by building practical experience."


def match_role(profile: UserProfile, role: RoleProfile) -> MatchResult:
    """
    Calculate compatibility between a user profile and one role.

    Algorithm:
        1. Pool = current skills + interests + resume skills, normalized
        2. Required: |matched| / |required| * 80 (80 when none required)
        3. Bonus: min(20, round(|matched preferred| / |preferred| * 20))
        4. Experience: clamp((user tier - role min tier) * 5, -10, 10)
        5. Score = round(required + bonus + experience) clamped to 0-100

    Args:
        profile: User profile
        role: Catalog role

    Returns:
        MatchResult with tier and recommendation derived from the score

    Example:
        >>> result = match_role(profile, get_role("data-analyst"))
        >>> result.match_level
        'fair'
    """
    user_skills = set(normalize_skills(collect_user_skills(profile)))
    required = normalize_skills(list(role.required_skills))
    preferred = normalize_skills(list(role.preferred_skills))

    required_score = calculate_required_score(user_skills, required)
    bonus_score = calculate_bonus_score(user_skills, preferred)
    exp_adjustment = calculate_experience_adjustment(
        map_experience_level(profile.experience_level),
        role.min_experience_level,
    )

    score = clamp_score(required_score + bonus_score + exp_adjustment)
    match_level = tier_of(score)

    gap_skills = [skill for skill in required if skill not in user_skills]

    return MatchResult(
        role_id=role.id,
        role_name=role.name,
        score=score,
        matched_skills=[skill for skill in required if skill in user_skills],
        gap_skills=gap_skills,
        bonus_skills=[skill for skill in preferred if skill in user_skills],
        match_level=match_level,
        recommendation=generate_recommendation(role.name, match_level, gap_skills),
    )


def sort_matches(matches: List[MatchResult]) -> List[MatchResult]:
    """Sort by score descending; ties keep their input (catalog) order."""
    return sorted(matches, key=lambda match: match.score, reverse=True)


def match_all_roles(
    profile: UserProfile,
    roles: Optional[List[RoleProfile]] = None,
) -> List[MatchResult]:
    """Match a profile against every role (default: whole catalog), best first."""
    if roles is None:
        roles = list_roles()
    return sort_matches([match_role(profile, role) for role in roles])


def top_role_matches(profile: UserProfile, limit: int = 3) -> List[MatchResult]:
    """Best `limit` role matches for a profile."""
    return match_all_roles(profile)[:max(0, limit)]


def match_specific_roles(profile: UserProfile, role_ids: Optional[List[str]]) -> List[MatchResult]:
    """
    Match only the named roles, best first.

    Unknown ids are skipped. An empty id list falls back to the top 3
    matches across the catalog.
    """
    if not role_ids:
        return top_role_matches(profile, 3)

    roles = [role for role in (get_role(role_id) for role_id in role_ids) if role is not None]
    return match_all_roles(profile, roles)
