from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import Any, Optional


def string_items(value: Any) -> list[str]:
    """Keep only string entries; anything else collapses to an empty list."""
    if not isinstance(value, (list, tuple, set)):
        return []
    return [item for item in value if isinstance(item, str)]


class ResumeExtract(BaseModel):
    """Skills and history parsed from an uploaded resume."""
    normalized_skills: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)

    @field_validator("normalized_skills", "experience", "education", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> list[str]:
        return string_items(value)


class Constraints(BaseModel):
    time_availability: Optional[str] = None
    budget: Optional[str] = None


class UserProfile(BaseModel):
    name: str = ""
    major: str = ""
    user_type: str = "student"
    interests: list[str] = Field(default_factory=list)
    current_skills: list[str] = Field(default_factory=list)
    experience_level: str = "beginner"
    graduation_timeline: str = ""
    location: str = ""
    constraints: Constraints = Field(default_factory=Constraints)
    target_roles: list[str] = Field(default_factory=list)
    resume_extract: Optional[ResumeExtract] = None

    @field_validator("interests", "current_skills", "target_roles", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> list[str]:
        return string_items(value)

    @field_validator(
        "name", "major", "user_type", "experience_level", "graduation_timeline", "location",
        mode="before",
    )
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("constraints", mode="before")
    @classmethod
    def null_constraints(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def resume_skills(self) -> list[str]:
        if self.resume_extract is None:
            return []
        return self.resume_extract.normalized_skills


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    major: Optional[str] = None
    user_type: Optional[str] = None
    interests: Optional[list[str]] = None
    current_skills: Optional[list[str]] = None
    experience_level: Optional[str] = None
    graduation_timeline: Optional[str] = None
    location: Optional[str] = None
    constraints: Optional[Constraints] = None
    target_roles: Optional[list[str]] = None

    @field_validator("interests", "current_skills", "target_roles", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> Optional[list[str]]:
        # None means "leave unchanged"
        if value is None:
            return None
        return string_items(value)


class ProfileResponse(UserProfile):
    id: str

    class Config:
        from_attributes = True
