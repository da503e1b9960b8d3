from fastapi import APIRouter, Depends, HTTPException
from launchpad.api.profile import get_profile_store
from launchpad.schemas import MilestoneStatusUpdate, ProgressResponse, Roadmap
from launchpad.services.profile_store import ProfileStore
from launchpad.services.progress import completed_skills, next_steps, readiness_score

router = APIRouter()


@router.get("", response_model=Roadmap)
async def get_roadmap(store: ProfileStore = Depends(get_profile_store)):
    roadmap = await store.get_roadmap()
    if roadmap is None:
        raise HTTPException(status_code=404, detail="Roadmap not found")
    return roadmap


@router.put("", response_model=Roadmap)
async def set_roadmap(
    roadmap: Roadmap,
    store: ProfileStore = Depends(get_profile_store),
):
    return await store.set_roadmap(roadmap)


@router.patch("/phases/{phase_id}/milestones/{milestone_id}", response_model=Roadmap)
async def update_milestone(
    phase_id: str,
    milestone_id: str,
    update: MilestoneStatusUpdate,
    store: ProfileStore = Depends(get_profile_store),
):
    roadmap = await store.update_milestone_status(phase_id, milestone_id, update.status)
    if roadmap is None:
        raise HTTPException(status_code=404, detail="Milestone not found")
    return roadmap


@router.get("/progress", response_model=ProgressResponse)
async def get_progress(store: ProfileStore = Depends(get_profile_store)):
    profile = await store.get_profile()
    roadmap = await store.get_roadmap()
    return ProgressResponse(
        readiness_score=readiness_score(profile, roadmap),
        completed_skills=completed_skills(roadmap),
        next_steps=next_steps(roadmap),
    )
