"""
Onboarding catalog and progress computation.

The catalog is static configuration. A club stores a blob holding the four
milestone fields plus derived fields; the derived fields are always recomputed
from the milestone fields and never read back as input.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class OnboardingStep(BaseModel):
    """One milestone of the onboarding checklist"""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str
    required: bool
    weight: int = 1


ONBOARDING_STEPS: tuple = (
    OnboardingStep(
        id="created_club",
        label="Create Your Club",
        description="Set up your club with basic information",
        required=True,
    ),
    OnboardingStep(
        id="enabled_modules",
        label="Enable Features",
        description="Choose which features your club will use",
        required=True,
    ),
    OnboardingStep(
        id="invited_member",
        label="Invite Members",
        description="Send invitations to your first members",
        required=False,
    ),
    OnboardingStep(
        id="created_event",
        label="Create First Event",
        description="Schedule your club's first event",
        required=False,
    ),
)

STEP_IDS = tuple(step.id for step in ONBOARDING_STEPS)

BOOLEAN_STEPS = ("created_club", "invited_member", "created_event")


class NextStep(BaseModel):
    id: str
    label: str
    description: str
    required: bool


class OnboardingStatus(BaseModel):
    """Milestone fields plus the progress derived from them"""

    created_club: bool = False
    enabled_modules: List[str] = []
    invited_member: bool = False
    created_event: bool = False

    completed_steps: int
    total_steps: int
    completion_percentage: int
    is_complete: bool
    next_steps: List[NextStep]


def get_step(step_id: str) -> Optional[OnboardingStep]:
    for step in ONBOARDING_STEPS:
        if step.id == step_id:
            return step
    return None


def is_step_completed(step_id: str, milestones: Dict[str, Any]) -> bool:
    if step_id == "enabled_modules":
        modules = milestones.get("enabled_modules")
        return isinstance(modules, list) and len(modules) > 0
    if step_id in BOOLEAN_STEPS:
        return bool(milestones.get(step_id))
    return False


def extract_milestones(
    blob: Optional[Dict[str, Any]], enabled_modules: Optional[List[str]] = None
) -> Dict[str, Any]:
    """
    Pull the milestone fields out of a stored blob, dropping derived fields.

    Args:
        blob: Stored onboarding blob, may be None
        enabled_modules: Club-level modules used when the blob has none

    Returns:
        Dict with exactly the four milestone keys
    """
    blob = blob or {}
    modules = blob.get("enabled_modules")
    if not isinstance(modules, list):
        modules = list(enabled_modules) if isinstance(enabled_modules, list) else []

    return {
        "created_club": bool(blob.get("created_club", False)),
        "enabled_modules": modules,
        "invited_member": bool(blob.get("invited_member", False)),
        "created_event": bool(blob.get("created_event", False)),
    }


def enrich(milestones: Dict[str, Any]) -> OnboardingStatus:
    """Compute progress metrics for a set of milestone fields."""
    fields = extract_milestones(milestones)

    total_weight = 0
    completed_weight = 0
    completed_steps = 0
    next_steps = []

    for step in ONBOARDING_STEPS:
        total_weight += step.weight
        if is_step_completed(step.id, fields):
            completed_steps += 1
            completed_weight += step.weight
        else:
            next_steps.append(
                NextStep(
                    id=step.id,
                    label=step.label,
                    description=step.description,
                    required=step.required,
                )
            )

    # Round half up
    percentage = int(completed_weight * 100 / total_weight + 0.5) if total_weight else 0

    return OnboardingStatus(
        **fields,
        completed_steps=completed_steps,
        total_steps=len(ONBOARDING_STEPS),
        completion_percentage=percentage,
        is_complete=completed_steps == len(ONBOARDING_STEPS),
        next_steps=next_steps,
    )


def initial_milestones(enabled_modules: Optional[List[str]] = None) -> Dict[str, Any]:
    return {
        "created_club": True,
        "enabled_modules": list(enabled_modules or []),
        "invited_member": False,
        "created_event": False,
    }


# Action tag -> milestone updates; data is the action payload
def milestone_updates(action: str, data: Any = None) -> Optional[Dict[str, Any]]:
    """
    Map an auto-update action tag to the milestone fields it sets.

    Returns None for an unknown action.
    """
    if action == "club_created":
        updates: Dict[str, Any] = {"created_club": True}
        if isinstance(data, dict) and data.get("enabled_modules"):
            updates["enabled_modules"] = list(data["enabled_modules"])
        return updates
    if action == "modules_enabled":
        modules = data.get("enabled_modules") if isinstance(data, dict) else data
        return {"enabled_modules": list(modules or [])}
    if action == "member_invited":
        return {"invited_member": True}
    if action == "event_created":
        return {"created_event": True}
    return None
