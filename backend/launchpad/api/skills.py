from fastapi import APIRouter
from launchpad.schemas import NormalizeSkillsRequest, NormalizeSkillsResponse
from launchpad.services.skill_taxonomy import normalize_skills

router = APIRouter()


@router.post("/normalize", response_model=NormalizeSkillsResponse)
async def normalize(request: NormalizeSkillsRequest) -> NormalizeSkillsResponse:
    """Map raw skill names onto canonical taxonomy names."""
    skills = normalize_skills(request.skills)
    return NormalizeSkillsResponse(skills=skills, count=len(skills))
