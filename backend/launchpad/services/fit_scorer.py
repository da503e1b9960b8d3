"""
Opportunity Fit Scorer - Additive point scoring for internship listings

Calculates how well a listing suits a user, with an itemized breakdown
that is shown to the user for explainability.

Fit Factors (points):
    - Target Role Match (30): listing role type is one of the user's targets
    - Skills Match (0-40): up to 30 for required skills, 10 for preferred
    - Level Appropriate (15): listing level is "Intern"
    - Location Match (15) / Location Partial (7): remote, or region matches

Factors that award nothing are omitted from the breakdown. Score is the
sum of factor points capped at 100.

A user skill matches a listing skill when their canonical forms are equal
or either lower-cased name contains the other ("react" ~ "react native").
"""

from dataclasses import dataclass, field
from typing import List, Optional

from launchpad.schemas.opportunity import Opportunity
from launchpad.schemas.profile import UserProfile
from launchpad.schemas.roadmap import Roadmap
from launchpad.services.progress import completed_skills
from launchpad.services.scoring import round_half_up
from launchpad.services.skill_taxonomy import normalize_skill

TARGET_ROLE_POINTS = 30
REQUIRED_SKILLS_POINTS = 30
PREFERRED_SKILLS_POINTS = 10
LEVEL_POINTS = 15
LOCATION_MATCH_POINTS = 15
LOCATION_PARTIAL_POINTS = 7

INTERN_LEVEL = "Intern"
REMOTE_LOCATION = "remote"


@dataclass
class FitFactor:
    """One named contributor to a fit score."""
    name: str
    points: int
    details: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "points": self.points, "details": self.details}


@dataclass
class FitResult:
    """
    Fit of one opportunity for one user.

    Attributes:
        score: 0-100, equal to the capped sum of factor points
        factors: Awarded factors in evaluation order
        matched_skills: Matched required skills followed by matched preferred
        missing_skills: Required skills with no match in the user's pool
    """
    score: int
    factors: List[FitFactor] = field(default_factory=list)
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "factors": [f.to_dict() for f in self.factors],
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
        }


def _clean(skills) -> List[str]:
    """Lower-case, trim and drop blank/non-string skills."""
    return [s.lower().strip() for s in skills if isinstance(s, str) and s.strip()]


def skill_matches(user_skills: List[str], skill: str) -> bool:
    """True when any user skill matches the listing skill."""
    canonical = normalize_skill(skill)
    for user_skill in user_skills:
        if user_skill in skill or skill in user_skill:
            return True
        if canonical is not None and normalize_skill(user_skill) == canonical:
            return True
    return False


def location_region(location: Optional[str]) -> Optional[str]:
    """Region part of "City, Region" (None when absent)."""
    if not location or "," not in location:
        return None
    region = location.split(",")[1].strip()
    return region or None


def is_location_match(profile: UserProfile, opportunity: Opportunity) -> bool:
    """Remote listings always match; otherwise the user's region must appear."""
    location_type = opportunity.location_type or ""
    if location_type.strip().lower() == REMOTE_LOCATION:
        return True

    region = location_region(profile.location)
    return region is not None and region in location_type


def score_fit(
    profile: UserProfile,
    roadmap: Optional[Roadmap],
    opportunity: Opportunity,
) -> FitResult:
    """
    Score how well an opportunity fits a user.

    Args:
        profile: User profile (target roles, skills, location)
        roadmap: Optional roadmap; skills of completed milestones count
        opportunity: Listing to score

    Returns:
        FitResult with an itemized factor list

    Example:
        >>> result = score_fit(profile, None, opportunity)
        >>> [f.name for f in result.factors]
        ['Target Role Match', 'Skills Match', 'Level Appropriate', 'Location Match']
    """
    factors: List[FitFactor] = []

    # 1. Target role
    if opportunity.role_type in (profile.target_roles or []):
        factors.append(FitFactor(name="Target Role Match", points=TARGET_ROLE_POINTS))

    # 2. Skills
    user_skills = _clean([*(profile.current_skills or []), *completed_skills(roadmap)])
    required = _clean(opportunity.required_skills)
    preferred = _clean(opportunity.preferred_skills)

    matched_required = [s for s in required if skill_matches(user_skills, s)]
    matched_preferred = [s for s in preferred if skill_matches(user_skills, s)]

    if required:
        required_points = len(matched_required) / len(required) * REQUIRED_SKILLS_POINTS
    else:
        required_points = float(REQUIRED_SKILLS_POINTS)

    if preferred:
        preferred_points = len(matched_preferred) / len(preferred) * PREFERRED_SKILLS_POINTS
    else:
        preferred_points = 0.0

    factors.append(FitFactor(
        name="Skills Match",
        points=round_half_up(required_points + preferred_points),
        details=(
            f"{len(matched_required)}/{len(required)} required, "
            f"{len(matched_preferred)}/{len(preferred)} preferred"
        ),
    ))

    # 3. Level
    if opportunity.level == INTERN_LEVEL:
        factors.append(FitFactor(name="Level Appropriate", points=LEVEL_POINTS))

    # 4. Location (never fully disqualifying)
    if is_location_match(profile, opportunity):
        factors.append(FitFactor(name="Location Match", points=LOCATION_MATCH_POINTS))
    else:
        factors.append(FitFactor(name="Location Partial", points=LOCATION_PARTIAL_POINTS))

    return FitResult(
        score=min(sum(f.points for f in factors), 100),
        factors=factors,
        matched_skills=matched_required + matched_preferred,
        missing_skills=[s for s in required if s not in matched_required],
    )
