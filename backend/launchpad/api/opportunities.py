from typing import Optional
from fastapi import APIRouter, Depends, Query
from launchpad.api.profile import get_profile_store, require_profile
from launchpad.schemas import (
    FitResultResponse,
    OpportunityListResponse,
    ScoredOpportunity,
    UserProfile,
)
from launchpad.services.opportunity_catalog import (
    filter_opportunities,
    get_opportunities,
    rank_opportunities,
)
from launchpad.services.profile_store import ProfileStore

router = APIRouter()


@router.get("", response_model=OpportunityListResponse)
async def list_opportunities(
    role_type: Optional[str] = Query(None),
    sponsor: Optional[str] = Query(None),
    location_type: Optional[str] = Query(None),
    profile: UserProfile = Depends(require_profile),
    store: ProfileStore = Depends(get_profile_store),
):
    roadmap = await store.get_roadmap()
    candidates = filter_opportunities(
        list(get_opportunities()),
        role_type=role_type,
        sponsor=sponsor,
        location_type=location_type,
    )
    ranked = rank_opportunities(profile, roadmap, candidates)

    return OpportunityListResponse(
        opportunities=[
            ScoredOpportunity(
                opportunity=r.opportunity,
                fit=FitResultResponse.model_validate(r.fit.to_dict()),
                relevance_score=r.relevance_score,
                ranking_score=r.ranking_score,
            )
            for r in ranked
        ],
        total=len(ranked),
    )
