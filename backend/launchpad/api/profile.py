from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from launchpad.database import get_db
from launchpad.schemas import ProfileResponse, ProfileUpdate, ResumeExtract, UserProfile
from launchpad.services.profile_store import DEFAULT_PROFILE_ID, ProfileStore

router = APIRouter()


def get_profile_store(db: AsyncSession = Depends(get_db)) -> ProfileStore:
    return ProfileStore(db)


async def require_profile(store: ProfileStore = Depends(get_profile_store)) -> UserProfile:
    profile = await store.get_profile()
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


def to_response(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(id=DEFAULT_PROFILE_ID, **profile.model_dump())


@router.get("", response_model=ProfileResponse)
async def get_profile(profile: UserProfile = Depends(require_profile)):
    return to_response(profile)


@router.put("", response_model=ProfileResponse)
async def save_profile(
    profile: UserProfile,
    store: ProfileStore = Depends(get_profile_store),
):
    saved = await store.save_profile(profile)
    return to_response(saved)


@router.patch("", response_model=ProfileResponse)
async def update_profile(
    update: ProfileUpdate,
    store: ProfileStore = Depends(get_profile_store),
):
    profile = await store.update_profile(update)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return to_response(profile)


@router.put("/resume", response_model=ProfileResponse)
async def set_resume(
    extract: ResumeExtract,
    store: ProfileStore = Depends(get_profile_store),
):
    profile = await store.set_resume_extract(extract)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return to_response(profile)


@router.delete("")
async def reset_profile(store: ProfileStore = Depends(get_profile_store)):
    await store.reset()
    return {"message": "All data reset"}
