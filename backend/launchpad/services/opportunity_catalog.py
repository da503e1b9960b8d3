"""
Opportunity Catalog - Static internship listings and ranking

Listings are loaded once from JSON (bundled data/opportunities.json unless
Settings.opportunities_path points elsewhere) and treated as read-only.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from launchpad.config import get_settings
from launchpad.schemas.opportunity import Opportunity
from launchpad.schemas.profile import UserProfile
from launchpad.schemas.roadmap import Roadmap
from launchpad.services.fit_scorer import FitResult, score_fit
from launchpad.services.user_types import filter_opportunities_by_user_type

logger = logging.getLogger(__name__)

DEFAULT_OPPORTUNITIES_PATH = Path(__file__).resolve().parent.parent / "data" / "opportunities.json"

FIT_WEIGHT = 0.7
RELEVANCE_WEIGHT = 0.3


@dataclass
class RankedOpportunity:
    """An opportunity with its fit breakdown and combined ranking score."""
    opportunity: Opportunity
    fit: FitResult
    relevance_score: float
    ranking_score: float


def load_opportunities(path: Optional[Path] = None) -> List[Opportunity]:
    """
    Load listings from a JSON file shaped {"opportunities": [...]}.

    Args:
        path: JSON file (default: bundled catalog)

    Returns:
        Validated Opportunity list in file order
    """
    path = Path(path) if path else DEFAULT_OPPORTUNITIES_PATH
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    opportunities = [Opportunity.model_validate(item) for item in data.get("opportunities", [])]
    logger.info(f"Loaded {len(opportunities)} opportunities from {path.name}")
    return opportunities


@lru_cache
def get_opportunities() -> tuple:
    """Process-wide opportunity catalog."""
    settings = get_settings()
    path = Path(settings.opportunities_path) if settings.opportunities_path else None
    return tuple(load_opportunities(path))


def filter_opportunities(
    opportunities: List[Opportunity],
    role_type: Optional[str] = None,
    sponsor: Optional[str] = None,
    location_type: Optional[str] = None,
) -> List[Opportunity]:
    """Filter by exact role type, exact sponsor and location substring."""
    result = []
    for opp in opportunities:
        if role_type and opp.role_type != role_type:
            continue
        if sponsor and opp.sponsor_tag != sponsor:
            continue
        if location_type and location_type.lower() not in opp.location_type.lower():
            continue
        result.append(opp)
    return result


def rank_opportunities(
    profile: UserProfile,
    roadmap: Optional[Roadmap],
    opportunities: List[Opportunity],
) -> List[RankedOpportunity]:
    """
    Rank listings for a user.

    Listings are filtered to the user's persona, fit-scored, and ordered by
    0.7 * fit + 0.3 * persona relevance. The catalog's own relevance_score
    is replaced by the persona relevance.
    """
    ranked = []
    for opportunity, persona_relevance in filter_opportunities_by_user_type(opportunities, profile.user_type):
        fit = score_fit(profile, roadmap, opportunity)
        ranked.append(RankedOpportunity(
            opportunity=opportunity,
            fit=fit,
            relevance_score=float(persona_relevance),
            ranking_score=round(fit.score * FIT_WEIGHT + persona_relevance * RELEVANCE_WEIGHT, 1),
        ))

    return sorted(ranked, key=lambda r: r.ranking_score, reverse=True)
