from pydantic import BaseModel, Field, field_validator
from typing import Any, Literal

from launchpad.schemas.profile import string_items

MatchTier = Literal["excellent", "good", "fair", "needs-development"]


class RoleMatchResponse(BaseModel):
    role_id: str
    role_name: str
    score: int
    matched_skills: list[str]
    gap_skills: list[str]
    bonus_skills: list[str]
    match_level: MatchTier
    recommendation: str
    source: Literal["algorithmic", "ai"] = "algorithmic"

    class Config:
        from_attributes = True


class RoleMatchListResponse(BaseModel):
    matches: list[RoleMatchResponse]
    total: int


class RoleResponse(BaseModel):
    id: str
    name: str
    summary: str
    description: str
    required_skills: list[str]
    preferred_skills: list[str]
    typical_tools: list[str]
    typical_stack: str
    responsibilities: list[str]
    example_projects: list[str]
    career_trajectory: str
    min_experience_level: int
    related_roles: list[str]

    class Config:
        from_attributes = True


class NormalizeSkillsRequest(BaseModel):
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> list[str]:
        return string_items(value)


class NormalizeSkillsResponse(BaseModel):
    skills: list[str]
    count: int
