from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from launchpad.api.profile import get_profile_store, require_profile
from launchpad.config import get_settings
from launchpad.schemas import RoleMatchListResponse, RoleMatchResponse, UserProfile
from launchpad.services.ai_matcher import AIRoleMatcher, get_ai_matcher
from launchpad.services.profile_store import ProfileStore
from launchpad.services.role_matcher import (
    MatchResult,
    match_all_roles,
    match_specific_roles,
    top_role_matches,
)

router = APIRouter()


def to_response(matches: List[MatchResult]) -> RoleMatchListResponse:
    return RoleMatchListResponse(
        matches=[RoleMatchResponse.model_validate(m.to_dict()) for m in matches],
        total=len(matches),
    )


@router.get("", response_model=RoleMatchListResponse)
async def get_matches(
    limit: Optional[int] = Query(None, ge=1, le=50),
    role_ids: Optional[List[str]] = Query(None),
    profile: UserProfile = Depends(require_profile),
):
    if role_ids:
        matches = match_specific_roles(profile, role_ids)
    elif limit:
        matches = top_role_matches(profile, limit)
    else:
        matches = match_all_roles(profile)
    return to_response(matches)


@router.post("/ai", response_model=RoleMatchListResponse)
async def run_ai_matching(
    profile: UserProfile = Depends(require_profile),
    store: ProfileStore = Depends(get_profile_store),
    matcher: AIRoleMatcher = Depends(get_ai_matcher),
):
    matches = await matcher.top_matches(profile, get_settings().ai_match_top_n)
    await store.set_role_matches(matches)
    return to_response(matches)


@router.get("/saved", response_model=RoleMatchListResponse)
async def get_saved_matches(store: ProfileStore = Depends(get_profile_store)):
    saved = await store.get_role_matches()
    return RoleMatchListResponse(
        matches=[RoleMatchResponse.model_validate(m) for m in saved],
        total=len(saved),
    )
