"""
Initialize Onboarding Status Use Case

Seeds the onboarding blob of a newly created club.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.domain.onboarding import OnboardingStatus, initial_milestones

from .progress_writer import write_milestones


class InitializeOnboardingStatusUseCase:
    """
    Seeds created_club=true, the given modules, and the remaining milestones false.
    """

    def __init__(self, uow: UnitOfWork, max_attempts: int = 3):
        self.uow = uow
        self.max_attempts = max_attempts

    async def execute(
        self, club_id: UUID, enabled_modules: Optional[List[str]] = None
    ) -> Result[OnboardingStatus]:
        async with self.uow:
            try:
                return await write_milestones(
                    self.uow,
                    club_id,
                    lambda _current: initial_milestones(enabled_modules),
                    self.max_attempts,
                )
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "initialize onboarding status"))
