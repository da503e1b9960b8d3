"""
Profile Store - Persistence for the user's profile, roadmap and matches

Wraps an AsyncSession around the single "default" profile row. Matching
code never touches the store; callers read a UserProfile, run the pure
matchers, and write results back with set_role_matches().

JSON columns are always reassigned (never mutated in place) so SQLAlchemy
sees the change.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from launchpad.models import Profile
from launchpad.schemas.profile import ProfileUpdate, ResumeExtract, UserProfile
from launchpad.schemas.roadmap import Roadmap
from launchpad.services.progress import update_milestone_status
from launchpad.services.role_matcher import MatchResult

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_ID = "default"

PROFILE_FIELDS = (
    "name",
    "major",
    "user_type",
    "interests",
    "current_skills",
    "experience_level",
    "graduation_timeline",
    "location",
    "constraints",
    "target_roles",
    "resume_extract",
)


class ProfileStore:
    """
    Async repository for the single stored profile.

    Attributes:
        db: Open AsyncSession (owned by the caller)
    """

    def __init__(self, db: AsyncSession, profile_id: str = DEFAULT_PROFILE_ID):
        self.db = db
        self.profile_id = profile_id

    async def _get_row(self) -> Optional[Profile]:
        result = await self.db.execute(select(Profile).where(Profile.id == self.profile_id))
        return result.scalar_one_or_none()

    async def _get_or_create_row(self) -> Profile:
        row = await self._get_row()
        if row is None:
            row = Profile(
                id=self.profile_id,
                onboarded=False,
                interests=[],
                current_skills=[],
                constraints={},
                target_roles=[],
                role_matches=[],
            )
            self.db.add(row)
        return row

    async def _commit(self, row: Profile) -> None:
        await self.db.commit()
        await self.db.refresh(row)

    @staticmethod
    def _to_profile(row: Profile) -> UserProfile:
        return UserProfile.model_validate(
            {field: getattr(row, field) for field in PROFILE_FIELDS}
        )

    async def get_profile(self) -> Optional[UserProfile]:
        """The onboarded profile, or None before onboarding."""
        row = await self._get_row()
        if row is None or not row.onboarded:
            return None
        return self._to_profile(row)

    async def save_profile(self, profile: UserProfile) -> UserProfile:
        """Create or replace the profile (onboarding completion)."""
        row = await self._get_or_create_row()
        data = profile.model_dump()
        for field in PROFILE_FIELDS:
            setattr(row, field, data[field])
        row.onboarded = True

        await self._commit(row)
        logger.info(f"Saved profile {self.profile_id}")
        return self._to_profile(row)

    async def update_profile(self, update: ProfileUpdate) -> Optional[UserProfile]:
        """Apply a partial update; None when no profile exists yet."""
        row = await self._get_row()
        if row is None or not row.onboarded:
            return None

        data = self._to_profile(row).model_dump()
        data.update(update.model_dump(exclude_unset=True, exclude_none=True))
        # Re-validate so list fields get the same cleaning as a full save
        data = UserProfile.model_validate(data).model_dump()
        for field in PROFILE_FIELDS:
            setattr(row, field, data[field])

        await self._commit(row)
        return self._to_profile(row)

    async def set_resume_extract(self, extract: Optional[ResumeExtract]) -> Optional[UserProfile]:
        """Attach (or clear with None) parsed resume data."""
        row = await self._get_row()
        if row is None or not row.onboarded:
            return None

        row.resume_extract = extract.model_dump() if extract is not None else None
        await self._commit(row)
        return self._to_profile(row)

    async def get_roadmap(self) -> Optional[Roadmap]:
        row = await self._get_row()
        if row is None or not row.roadmap:
            return None
        return Roadmap.model_validate(row.roadmap)

    async def set_roadmap(self, roadmap: Roadmap) -> Roadmap:
        row = await self._get_or_create_row()
        row.roadmap = roadmap.model_dump()
        await self._commit(row)
        return Roadmap.model_validate(row.roadmap)

    async def update_milestone_status(
        self,
        phase_id: str,
        milestone_id: str,
        status: str,
    ) -> Optional[Roadmap]:
        """Change one milestone's status; None if roadmap/milestone is missing."""
        roadmap = await self.get_roadmap()
        if roadmap is None:
            return None

        updated = update_milestone_status(roadmap, phase_id, milestone_id, status)
        if updated is None:
            return None

        return await self.set_roadmap(updated)

    async def set_role_matches(self, matches: List[MatchResult]) -> None:
        """Persist the latest role matches, replacing earlier ones."""
        row = await self._get_or_create_row()
        row.role_matches = [match.to_dict() for match in matches]
        await self._commit(row)
        logger.info(f"Stored {len(matches)} role matches")

    async def get_role_matches(self) -> List[dict]:
        row = await self._get_row()
        if row is None:
            return []
        return list(row.role_matches or [])

    async def reset(self) -> None:
        """Delete all stored state."""
        await self.db.execute(delete(Profile).where(Profile.id == self.profile_id))
        await self.db.commit()
        logger.info(f"Reset profile {self.profile_id}")
