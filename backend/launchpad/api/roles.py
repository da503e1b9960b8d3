from fastapi import APIRouter, Depends, HTTPException, Query
from launchpad.api.profile import require_profile
from launchpad.schemas import RoleResponse, UserProfile
from launchpad.services.role_catalog import (
    find_roles_by_skill,
    get_role,
    list_roles,
    recommend_roles_by_interests,
)

router = APIRouter()


@router.get("", response_model=list[RoleResponse])
async def get_roles():
    return [RoleResponse.model_validate(role.to_dict()) for role in list_roles()]


@router.get("/search", response_model=list[RoleResponse])
async def search_roles(skill: str = Query(..., min_length=1)):
    return [RoleResponse.model_validate(role.to_dict()) for role in find_roles_by_skill(skill)]


@router.get("/recommended")
async def recommended_roles(profile: UserProfile = Depends(require_profile)):
    return {"role_ids": recommend_roles_by_interests(profile.interests)}


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role_by_id(role_id: str):
    role = get_role(role_id)
    if role is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return RoleResponse.model_validate(role.to_dict())
