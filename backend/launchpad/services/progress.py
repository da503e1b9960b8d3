"""
Roadmap progress helpers: completed skills, readiness and next steps.
"""

from typing import List, Optional

from launchpad.schemas.profile import UserProfile
from launchpad.schemas.roadmap import NextStep, Roadmap
from launchpad.services.scoring import round_half_up

MAX_NEXT_STEPS = 3


def completed_skills(roadmap: Optional[Roadmap]) -> List[str]:
    """Unique skills attached to completed milestones, first-seen order."""
    if roadmap is None:
        return []

    skills: List[str] = []
    for phase in roadmap.phases:
        for milestone in phase.milestones:
            if milestone.status != "completed":
                continue
            for skill in milestone.skills:
                if skill not in skills:
                    skills.append(skill)
    return skills


def readiness_score(profile: Optional[UserProfile], roadmap: Optional[Roadmap]) -> int:
    """
    Portfolio readiness 0-100.

    60 points scale with completed milestones, 20 with in-progress ones,
    plus 2 points per current skill.
    """
    if roadmap is None:
        return 0

    milestones = [m for phase in roadmap.phases for m in phase.milestones]
    total = len(milestones)

    completion = 0.0
    in_progress = 0.0
    if total:
        completion = sum(1 for m in milestones if m.status == "completed") / total * 60
        in_progress = sum(1 for m in milestones if m.status == "in_progress") / total * 20

    skill_points = 2 * len(profile.current_skills) if profile is not None else 0

    return min(round_half_up(completion + in_progress + skill_points), 100)


def next_steps(roadmap: Optional[Roadmap]) -> List[NextStep]:
    """
    Suggest up to three milestones to continue or start, walking phases in order.
    """
    if roadmap is None:
        return []

    steps: List[NextStep] = []
    for phase in roadmap.phases:
        in_progress = [m for m in phase.milestones if m.status == "in_progress"]
        not_started = [m for m in phase.milestones if m.status == "not_started"]

        if in_progress:
            steps.append(NextStep(type="continue", phase=phase.name, phase_id=phase.id, milestone=in_progress[0]))

        if not_started and len(steps) < MAX_NEXT_STEPS:
            steps.append(NextStep(type="start", phase=phase.name, phase_id=phase.id, milestone=not_started[0]))

        if len(steps) >= MAX_NEXT_STEPS:
            break

    return steps[:MAX_NEXT_STEPS]


def update_milestone_status(roadmap: Roadmap, phase_id: str, milestone_id: str, status: str) -> Optional[Roadmap]:
    """
    Return a copy of the roadmap with one milestone's status changed.

    Returns:
        Updated roadmap, or None when the phase/milestone does not exist
    """
    updated = roadmap.model_copy(deep=True)
    for phase in updated.phases:
        if phase.id != phase_id:
            continue
        for milestone in phase.milestones:
            if milestone.id == milestone_id:
                milestone.status = status
                return updated
    return None
