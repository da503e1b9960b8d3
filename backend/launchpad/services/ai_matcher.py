"""
AI Role Matcher - LLM-scored role matching with deterministic fallback

Asks an LLM to assess the profile against every catalog role in parallel,
then merges the answers with the deterministic matcher.

Fault Handling:
    - Per role: request error, timeout, missing credentials or an invalid
      payload turns into a failed MatchAttempt; that role uses its
      deterministic MatchResult instead. One failure never aborts the batch.
    - Whole batch: anything failing before requests are issued returns
      top_role_matches() from the deterministic matcher.

Payload Validation:
    The LLM reply must be a JSON object with a numeric score in [0, 100].
    Missing skill arrays become empty lists, skills are normalized, and the
    match tier is always recomputed from the score.

Concurrency:
    One request per role via asyncio.gather; latency is bounded by the
    slowest request (or the per-request timeout), not their sum.
"""

import asyncio
import json
import logging
import math
import re
import time
from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from launchpad.middleware.metrics import record_ai_match_attempt, record_ai_match_latency
from launchpad.schemas.profile import UserProfile
from launchpad.services.llm_client import CompletionService
from launchpad.services.role_catalog import EXPERIENCE_LABELS, RoleProfile, list_roles
from launchpad.services.role_matcher import (
    MatchResult,
    collect_user_skills,
    match_role,
    sort_matches,
    top_role_matches,
)
from launchpad.services.scoring import clamp_score, tier_of
from launchpad.services.skill_taxonomy import normalize_skills

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 3

ROLE_MATCH_PROMPT = """You are a career advisor analyzing a candidate's fit for a specific tech role.

CANDIDATE PROFILE:
- Name: {name}
- Major: {major}
- Experience Level: {experience_level}
- Current Skills: {skills}
- Interests: {interests}
- Target Roles: {target_roles}
{resume_line}
ROLE: {role_name}
- Summary: {role_summary}
- Required Skills: {required_skills}
- Preferred Skills: {preferred_skills}
- Min Experience: {min_experience}

TASK:
Analyze how well this candidate matches this role. Consider:
1. Skills overlap (both technical and transferable)
2. Experience level fit
3. Interest alignment
4. Growth potential

Respond with ONLY a valid JSON object in this exact format:
{{
  "score": <number 0-100>,
  "matchedSkills": ["skill1", "skill2"],
  "gapSkills": ["skill3", "skill4"],
  "bonusSkills": ["skill5"],
  "matchLevel": "excellent|good|fair|needs-development",
  "recommendation": "Personalized 2-sentence recommendation"
}}

{guidance}"""

GENEROUS_GUIDANCE = """SCORING GUIDANCE:
- 85-100: Excellent fit, candidate has most required skills and clear interest
- 70-84: Good fit, candidate has core foundation and matching interests
- 55-69: Fair fit, candidate has potential and some relevant skills
- Below 55: Needs development, but still achievable with effort

Be generous and encouraging. Students with matching interests and some
foundation skills should score 65-90. Only give very low scores (<50) if
there is almost no skill overlap. Matching major/interests alone is worth
20-30 points; also credit coursework, projects, transferable skills and
learning potential."""

BALANCED_GUIDANCE = """SCORING GUIDANCE:
- 80-100: Has nearly all required skills at the expected experience level
- 60-79: Has most required skills; gaps can be closed within months
- 40-59: Has some foundation; several required skills are missing
- Below 40: Little overlap with the required skills

Be realistic. Score skills the candidate demonstrates, not interests alone."""


class InvalidMatchPayload(ValueError):
    """LLM reply could not be turned into a MatchResult."""


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class AIMatchPayload(BaseModel):
    """Validated shape of the LLM's JSON reply."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    score: float
    matched_skills: List[str] = Field(default_factory=list, alias="matchedSkills")
    gap_skills: List[str] = Field(default_factory=list, alias="gapSkills")
    bonus_skills: List[str] = Field(default_factory=list, alias="bonusSkills")
    recommendation: Optional[str] = None

    @field_validator("score", mode="before")
    @classmethod
    def score_is_number(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("score must be a number")
        return value

    @field_validator("score")
    @classmethod
    def score_in_range(cls, value: float) -> float:
        if math.isnan(value) or value < 0 or value > 100:
            raise ValueError(f"score {value} outside 0-100")
        return value

    @field_validator("matched_skills", "gap_skills", "bonus_skills", mode="before")
    @classmethod
    def coerce_skill_list(cls, value: Any) -> List[str]:
        return _string_list(value)


# Opening fence with an optional language tag ("```json"), on its own line or inline
CODE_FENCE_OPEN = re.compile(r"^```[A-Za-z0-9_+-]*")


def strip_code_fences(content: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    content = content.strip()
    if content.startswith("```"):
        content = CODE_FENCE_OPEN.sub("", content, count=1)
        if content.rstrip().endswith("```"):
            content = content.rstrip()[:-3]
    return content.strip()


def parse_match_response(content: Optional[str], role: RoleProfile) -> MatchResult:
    """
    Turn raw LLM text into a MatchResult for a role.

    Raises:
        InvalidMatchPayload: Not JSON, not an object, or fails validation
    """
    if not content or not content.strip():
        raise InvalidMatchPayload("empty response")

    try:
        data = json.loads(strip_code_fences(content))
    except json.JSONDecodeError as e:
        raise InvalidMatchPayload(f"response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidMatchPayload("response is not a JSON object")

    try:
        payload = AIMatchPayload.model_validate(data)
    except ValidationError as e:
        raise InvalidMatchPayload(f"invalid match payload: {e.error_count()} error(s)") from e

    score = clamp_score(payload.score)
    recommendation = (payload.recommendation or "").strip()

    return MatchResult(
        role_id=role.id,
        role_name=role.name,
        score=score,
        matched_skills=normalize_skills(payload.matched_skills),
        gap_skills=normalize_skills(payload.gap_skills),
        bonus_skills=normalize_skills(payload.bonus_skills),
        match_level=tier_of(score),
        recommendation=recommendation or f"Based on your profile, {role.name} could be a good fit.",
        source="ai",
    )


@dataclass
class MatchAttempt:
    """
    Outcome of asking the LLM about one role.

    Exactly one of result/error is set.
    """
    role: RoleProfile
    result: Optional[MatchResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    def resolve(self, profile: UserProfile) -> MatchResult:
        """The AI result, or the deterministic match for a failed attempt."""
        if self.result is not None:
            return self.result
        return match_role(profile, self.role)


def _join(items: List[str]) -> str:
    return ", ".join(items) if items else "None listed"


class AIRoleMatcher:
    """
    Role matcher that consults an LLM and falls back per role.

    Attributes:
        completion_service: LLM collaborator (None = no credentials)
        timeout: Per-request timeout in seconds (None disables it)
        generous: Use encouraging scoring guidance in the prompt
    """

    def __init__(
        self,
        completion_service: Optional[CompletionService],
        timeout: Optional[float] = 30.0,
        generous: bool = True,
    ):
        self.completion_service = completion_service
        self.timeout = timeout
        self.generous = generous

    def build_prompt(self, profile: UserProfile, role: RoleProfile) -> str:
        """Render the role-match prompt for one profile/role pair."""
        resume_skills = profile.resume_skills
        resume_line = f"- Resume Skills: {_join(resume_skills)}\n" if resume_skills else ""

        return ROLE_MATCH_PROMPT.format(
            name=profile.name or "Candidate",
            major=profile.major or "Not specified",
            experience_level=profile.experience_level or "Not specified",
            skills=_join(collect_user_skills(profile)),
            interests=_join(profile.interests),
            target_roles=_join(profile.target_roles),
            resume_line=resume_line,
            role_name=role.name,
            role_summary=role.summary,
            required_skills=_join(list(role.required_skills)),
            preferred_skills=_join(list(role.preferred_skills)),
            min_experience=EXPERIENCE_LABELS.get(role.min_experience_level, "Beginner"),
            guidance=GENEROUS_GUIDANCE if self.generous else BALANCED_GUIDANCE,
        )

    async def _request(self, prompt: str) -> str:
        request = self.completion_service.complete(prompt)
        if self.timeout is None:
            return await request
        return await asyncio.wait_for(request, timeout=self.timeout)

    async def attempt_role(self, role: RoleProfile, prompt: str) -> MatchAttempt:
        """
        Ask the LLM about one role.

        Never raises for provider faults; they become a failed attempt.
        """
        if self.completion_service is None:
            record_ai_match_attempt("no_credentials")
            return MatchAttempt(role=role, error="no LLM credentials configured")

        try:
            content = await self._request(prompt)
            result = parse_match_response(content, role)
        except asyncio.TimeoutError:
            logger.warning(f"AI match timed out for {role.id} after {self.timeout}s")
            record_ai_match_attempt("timeout")
            return MatchAttempt(role=role, error="request timed out")
        except InvalidMatchPayload as e:
            logger.warning(f"AI match payload rejected for {role.id}: {e}")
            record_ai_match_attempt("invalid_payload")
            return MatchAttempt(role=role, error=str(e))
        except Exception as e:
            logger.warning(f"AI match request failed for {role.id}: {e}")
            record_ai_match_attempt("error")
            return MatchAttempt(role=role, error=str(e) or type(e).__name__)

        record_ai_match_attempt("ai")
        logger.debug(f"AI match for {role.id}: {result.score}")
        return MatchAttempt(role=role, result=result)

    async def attempt_all(
        self,
        profile: UserProfile,
        roles: Optional[List[RoleProfile]] = None,
    ) -> List[MatchAttempt]:
        """
        Ask the LLM about every role concurrently.

        Prompts are built before any request is sent, so a profile that
        cannot be rendered fails the whole batch up front.

        Returns:
            One MatchAttempt per role, in catalog order
        """
        if roles is None:
            roles = list_roles()

        prompts = [(role, self.build_prompt(profile, role)) for role in roles]
        return list(await asyncio.gather(
            *(self.attempt_role(role, prompt) for role, prompt in prompts)
        ))

    @staticmethod
    def merge_attempts(profile: UserProfile, attempts: List[MatchAttempt]) -> List[MatchResult]:
        """Resolve attempts (AI or fallback) into results, best first."""
        fallbacks = [a.role.id for a in attempts if not a.ok]
        if fallbacks:
            logger.info(f"Using algorithmic fallback for {len(fallbacks)} role(s): {', '.join(fallbacks)}")
        return sort_matches([attempt.resolve(profile) for attempt in attempts])

    async def match_all(self, profile: UserProfile) -> List[MatchResult]:
        """AI-augmented matches for every catalog role, best first."""
        start = time.perf_counter()
        attempts = await self.attempt_all(profile)
        record_ai_match_latency(time.perf_counter() - start)
        return self.merge_attempts(profile, attempts)

    async def top_matches(self, profile: UserProfile, limit: int = DEFAULT_TOP_N) -> List[MatchResult]:
        """
        Best `limit` AI-augmented matches.

        Falls back to the deterministic top matches if the batch fails as a
        whole; never raises for LLM faults.

        Raises:
            ValueError: No profile given
        """
        if profile is None:
            raise ValueError("User profile is required")

        try:
            matches = await self.match_all(profile)
        except Exception as e:
            logger.error(f"AI role matching failed, using algorithmic matches: {e}")
            return top_role_matches(profile, limit)

        return matches[:max(0, limit)]


def get_ai_matcher() -> AIRoleMatcher:
    """AIRoleMatcher configured from settings."""
    from launchpad.config import get_settings
    from launchpad.services.llm_client import get_completion_service

    settings = get_settings()
    return AIRoleMatcher(
        completion_service=get_completion_service(),
        timeout=settings.llm_request_timeout_seconds,
        generous=settings.ai_match_generous,
    )
