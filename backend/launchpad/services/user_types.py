"""
User Types - Opportunity preferences per user persona

Students see internships and entry-level programs; professionals see
mid/senior roles; everyone else gets a balanced mix.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from launchpad.schemas.opportunity import Opportunity

STUDENT = "student"
PROFESSIONAL = "professional"
OTHER = "other"

BASE_RELEVANCE = 50
PREFERRED_TYPE_BONUS = 30
EXPERIENCE_LEVEL_BONUS = 20
STUDENT_SPONSOR_BONUS = 10


@dataclass(frozen=True)
class OpportunityPreferences:
    preferred_types: Tuple[str, ...]
    experience_levels: Tuple[str, ...]
    exclude_types: Tuple[str, ...]


USER_TYPE_PREFERENCES: Dict[str, OpportunityPreferences] = {
    STUDENT: OpportunityPreferences(
        preferred_types=(
            "internship",
            "co-op",
            "fellowship",
            "new-grad",
            "entry-level",
            "student-program",
        ),
        experience_levels=("entry", "junior", "intern"),
        exclude_types=("senior", "staff", "principal", "executive"),
    ),
    PROFESSIONAL: OpportunityPreferences(
        preferred_types=(
            "mid-level",
            "senior",
            "staff",
            "career-transition",
            "reskilling-program",
            "professional-development",
        ),
        experience_levels=("mid", "senior", "staff", "principal"),
        exclude_types=("intern", "new-grad"),
    ),
    OTHER: OpportunityPreferences(
        preferred_types=("entry-level", "mid-level", "freelance", "contract"),
        experience_levels=("entry", "junior", "mid"),
        exclude_types=(),
    ),
}


def get_preferences(user_type: str) -> OpportunityPreferences:
    """Preferences for a user type; unknown types use the "other" persona."""
    return USER_TYPE_PREFERENCES.get((user_type or "").lower(), USER_TYPE_PREFERENCES[OTHER])


def _matches_preferred_type(opportunity: Opportunity, prefs: OpportunityPreferences) -> bool:
    opp_type = opportunity.type.lower()
    tags = [tag.lower() for tag in opportunity.tags]
    return any(
        t in opp_type or any(t in tag for tag in tags)
        for t in prefs.preferred_types
    )


def _matches_experience_level(opportunity: Opportunity, prefs: OpportunityPreferences) -> bool:
    labels = [
        label.lower()
        for label in (opportunity.experience_level, opportunity.level)
        if label
    ]
    return any(level in label for level in prefs.experience_levels for label in labels)


def opportunity_relevance(opportunity: Opportunity, user_type: str) -> int:
    """
    Persona relevance 0-100.

    Base 50, +30 for a preferred type, +20 for a matching experience level,
    +10 for sponsored listings shown to students.
    """
    prefs = get_preferences(user_type)
    score = BASE_RELEVANCE

    if any(t in opportunity.type.lower() for t in prefs.preferred_types):
        score += PREFERRED_TYPE_BONUS

    if opportunity.experience_level and any(
        level in opportunity.experience_level.lower() for level in prefs.experience_levels
    ):
        score += EXPERIENCE_LEVEL_BONUS

    if opportunity.sponsor_tag and (user_type or "").lower() == STUDENT:
        score += STUDENT_SPONSOR_BONUS

    return min(100, score)


def filter_opportunities_by_user_type(
    opportunities: List[Opportunity],
    user_type: str,
) -> List[Tuple[Opportunity, int]]:
    """
    Keep opportunities suited to a persona, paired with their relevance.

    Excluded types are dropped first; the rest are kept when they match a
    preferred type (type or tags) or an experience keyword (level labels).

    Returns:
        (opportunity, relevance) pairs, most relevant first
    """
    prefs = get_preferences(user_type)
    kept = []

    for opportunity in opportunities:
        opp_type = opportunity.type.lower()
        if any(excluded in opp_type for excluded in prefs.exclude_types):
            continue

        if _matches_preferred_type(opportunity, prefs) or _matches_experience_level(opportunity, prefs):
            kept.append((opportunity, opportunity_relevance(opportunity, user_type)))

    return sorted(kept, key=lambda pair: pair[1], reverse=True)
