"""
Update Onboarding Step Use Case

Overwrites one milestone field and stores the re-enriched status.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import require_manager, store_error
from src.domain.onboarding import BOOLEAN_STEPS, STEP_IDS, OnboardingStatus, get_step

from .progress_writer import write_milestones


class UpdateOnboardingStepUseCase:
    """
    Use case for setting a single onboarding milestone.

    Business Rules:
    - step must be one of the catalog ids (INVALID_STEP)
    - Boolean steps take a bool, enabled_modules a list of strings
    - When a requester is given they must be club owner/admin
    - Derived fields are regenerated before every write
    """

    def __init__(self, uow: UnitOfWork, max_attempts: int = 3):
        self.uow = uow
        self.max_attempts = max_attempts

    async def execute(
        self, club_id: UUID, step: str, value: Any, requester_id: Optional[UUID] = None
    ) -> Result[OnboardingStatus]:
        if get_step(step) is None:
            return Return.err(
                Error(
                    "INVALID_STEP",
                    f"Invalid onboarding step: {step}. Must be one of: {', '.join(STEP_IDS)}",
                )
            )

        value_error = self._validate_value(step, value)
        if value_error is not None:
            return Return.err(value_error)

        async with self.uow:
            try:
                club = await self.uow.clubs.get_by_id(club_id)
                if club is None:
                    return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

                if requester_id is not None:
                    membership = await self.uow.club_members.get_active_by_club_and_user(
                        club_id, requester_id
                    )
                    if membership is None:
                        return Return.err(
                            Error(
                                "NOT_A_MEMBER",
                                "Access denied. You are not a member of this club.",
                            )
                        )
                    denied = await require_manager(
                        self.uow, club_id, requester_id, "update onboarding status"
                    )
                    if denied:
                        return Return.err(denied)

                def merge(current):
                    current[step] = value
                    return current

                return await write_milestones(self.uow, club_id, merge, self.max_attempts)
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "update onboarding status"))

    @staticmethod
    def _validate_value(step: str, value: Any) -> Optional[Error]:
        if step in BOOLEAN_STEPS and not isinstance(value, bool):
            return Error("INVALID_STEP_VALUE", f"Step '{step}' expects true or false")
        if step == "enabled_modules" and not (
            isinstance(value, list) and all(isinstance(item, str) for item in value)
        ):
            return Error(
                "INVALID_STEP_VALUE", "Step 'enabled_modules' expects a list of module names"
            )
        return None
