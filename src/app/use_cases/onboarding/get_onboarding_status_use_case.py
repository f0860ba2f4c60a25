"""
Get Onboarding Status Use Case

Returns a club's onboarding progress, recomputed from its milestone fields.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.domain.onboarding import OnboardingStatus, enrich, extract_milestones


class GetOnboardingStatusUseCase:
    """
    Use case for reading a club's onboarding status.

    Business Rules:
    - Missing club is CLUB_NOT_FOUND
    - When a requester is given they must hold an active membership
    - A club without a stored blob reads as all milestones incomplete
      (enabled_modules falls back to the club's modules)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, club_id: UUID, requester_id: Optional[UUID] = None
    ) -> Result[OnboardingStatus]:
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
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "fetch onboarding status"))

            milestones = extract_milestones(club.onboarding_status, club.enabled_modules)
            return Return.ok(enrich(milestones))
