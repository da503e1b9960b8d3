from fastapi import APIRouter
from launchpad.api import matches, opportunities, profile, roadmap, roles, skills

api_router = APIRouter()
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(roadmap.router, prefix="/roadmap", tags=["roadmap"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(matches.router, prefix="/matches", tags=["matches"])
api_router.include_router(opportunities.router, prefix="/opportunities", tags=["opportunities"])
api_router.include_router(skills.router, prefix="/skills", tags=["skills"])
