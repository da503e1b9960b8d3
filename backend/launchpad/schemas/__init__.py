from launchpad.schemas.profile import (
    UserProfile,
    ResumeExtract,
    Constraints,
    ProfileUpdate,
    ProfileResponse,
)
from launchpad.schemas.roadmap import (
    Roadmap,
    Phase,
    Milestone,
    MilestoneStatusUpdate,
    NextStep,
    ProgressResponse,
)
from launchpad.schemas.opportunity import (
    Opportunity,
    FitFactorResponse,
    FitResultResponse,
    ScoredOpportunity,
    OpportunityListResponse,
)
from launchpad.schemas.matching import (
    RoleMatchResponse,
    RoleMatchListResponse,
    RoleResponse,
    NormalizeSkillsRequest,
    NormalizeSkillsResponse,
)

__all__ = [
    "UserProfile",
    "ResumeExtract",
    "Constraints",
    "ProfileUpdate",
    "ProfileResponse",
    "Roadmap",
    "Phase",
    "Milestone",
    "MilestoneStatusUpdate",
    "NextStep",
    "ProgressResponse",
    "Opportunity",
    "FitFactorResponse",
    "FitResultResponse",
    "ScoredOpportunity",
    "OpportunityListResponse",
    "RoleMatchResponse",
    "RoleMatchListResponse",
    "RoleResponse",
    "NormalizeSkillsRequest",
    "NormalizeSkillsResponse",
]
