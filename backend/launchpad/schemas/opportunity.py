from pydantic import BaseModel, Field
from typing import Optional


class Opportunity(BaseModel):
    """One internship/job listing from the static opportunity catalog."""
    id: str
    title: str
    company: str
    type: str = "internship"
    role_type: str
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    level: str = "Intern"
    experience_level: Optional[str] = None
    location_type: str = ""
    sponsor_tag: Optional[str] = None
    duration: str = ""
    description: str = ""
    relevance_score: Optional[float] = None
    apply_link: str = ""
    tags: list[str] = Field(default_factory=list)


class FitFactorResponse(BaseModel):
    name: str
    points: int
    details: Optional[str] = None


class FitResultResponse(BaseModel):
    score: int
    factors: list[FitFactorResponse]
    matched_skills: list[str]
    missing_skills: list[str]


class ScoredOpportunity(BaseModel):
    opportunity: Opportunity
    fit: FitResultResponse
    relevance_score: float
    ranking_score: float


class OpportunityListResponse(BaseModel):
    opportunities: list[ScoredOpportunity]
    total: int
