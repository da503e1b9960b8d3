from pydantic import BaseModel, Field
from typing import Literal

MilestoneStatus = Literal["not_started", "in_progress", "completed"]


class Milestone(BaseModel):
    id: str
    name: str
    description: str = ""
    skills: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    status: MilestoneStatus = "not_started"
    sponsor_tags: list[str] = Field(default_factory=list)


class Phase(BaseModel):
    id: str
    name: str
    timeline: str = ""
    milestones: list[Milestone] = Field(default_factory=list)


class Roadmap(BaseModel):
    tracks: list[str] = Field(default_factory=list)
    phases: list[Phase] = Field(default_factory=list)


class MilestoneStatusUpdate(BaseModel):
    status: MilestoneStatus


class NextStep(BaseModel):
    type: Literal["continue", "start"]
    phase: str
    phase_id: str
    milestone: Milestone


class ProgressResponse(BaseModel):
    readiness_score: int
    completed_skills: list[str]
    next_steps: list[NextStep]
