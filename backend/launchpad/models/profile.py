"""
Profile Model - The single user's profile, roadmap and last role matches

Single-user application: the row with id="default" holds all state that
the browser store used to keep. List/dict fields are JSON columns.
"""

from sqlalchemy import Boolean, Column, String, JSON, DateTime
from sqlalchemy.sql import func
from launchpad.database import Base


class Profile(Base):
    """
    Stored user profile.

    Attributes:
        onboarded: False until onboarding saves a full profile
        resume_extract: Parsed resume data ({"normalized_skills": [...], ...})
        roadmap: Roadmap JSON ({"tracks": [...], "phases": [...]})
        role_matches: Last persisted MatchResult dicts, best first
    """

    __tablename__ = "profiles"

    id = Column(String, primary_key=True, default="default")
    onboarded = Column(Boolean, nullable=False, default=False)
    name = Column(String(200), nullable=False, default="")
    major = Column(String(200), nullable=False, default="")
    user_type = Column(String(20), nullable=False, default="student")
    interests = Column(JSON, nullable=False, default=list)
    current_skills = Column(JSON, nullable=False, default=list)
    experience_level = Column(String(50), nullable=False, default="beginner")
    graduation_timeline = Column(String(100), nullable=False, default="")
    location = Column(String(200), nullable=False, default="")
    constraints = Column(JSON, nullable=False, default=dict)
    target_roles = Column(JSON, nullable=False, default=list)
    resume_extract = Column(JSON, nullable=True)
    roadmap = Column(JSON, nullable=True)
    role_matches = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
