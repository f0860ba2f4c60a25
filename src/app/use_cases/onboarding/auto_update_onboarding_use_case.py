"""
Auto-update Onboarding Use Case

Marks milestones complete in response to club lifecycle actions.
"""

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.domain.onboarding import OnboardingStatus, milestone_updates

from .progress_writer import write_milestones

logger = logging.getLogger(__name__)


class AutoUpdateOnboardingUseCase:
    """
    Use case for action-driven onboarding updates.

    Business Rules:
    - club_created -> created_club (and enabled_modules when provided)
    - modules_enabled -> replaces enabled_modules
    - member_invited -> invited_member
    - event_created -> created_event
    - Unknown actions are logged and yield Ok(None)
    - Updates merge over the current milestones; repeating an action is a no-op
    """

    def __init__(self, uow: UnitOfWork, max_attempts: int = 3):
        self.uow = uow
        self.max_attempts = max_attempts

    async def execute(
        self, club_id: UUID, action: str, action_data: Any = None
    ) -> Result[Optional[OnboardingStatus]]:
        updates = milestone_updates(action, action_data)
        if updates is None:
            logger.warning(f"Unknown onboarding action: {action}")
            return Return.ok(None)

        async with self.uow:
            try:
                return await write_milestones(
                    self.uow,
                    club_id,
                    lambda current: {**current, **updates},
                    self.max_attempts,
                )
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "auto-update onboarding status"))
