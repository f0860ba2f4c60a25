"""
Onboarding subscriptions

Routes club lifecycle events to the onboarding auto-update, each in its own
unit of work so it never shares a transaction with the publisher.
"""

import logging
from typing import AsyncContextManager, Callable

from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.onboarding.auto_update_onboarding_use_case import (
    AutoUpdateOnboardingUseCase,
)
from src.domain.events import (
    ClubCreated,
    DomainEvent,
    EventCreated,
    MemberInvited,
    ModulesEnabled,
)

logger = logging.getLogger(__name__)

UnitOfWorkScope = Callable[[], AsyncContextManager[UnitOfWork]]


class OnboardingEventHandler:
    def __init__(self, uow_scope: UnitOfWorkScope, max_attempts: int = 3):
        self.uow_scope = uow_scope
        self.max_attempts = max_attempts

    async def __call__(self, event: DomainEvent) -> None:
        action, data = self._action_for(event)
        if action is None:
            logger.warning(f"No onboarding action for {type(event).__name__}")
            return

        async with self.uow_scope() as uow:
            result = await AutoUpdateOnboardingUseCase(
                uow, max_attempts=self.max_attempts
            ).execute(event.club_id, action, data)

        if result.is_err():
            logger.warning(
                f"Onboarding auto-update '{action}' failed for club {event.club_id}: "
                f"{result.error.code}"
            )

    @staticmethod
    def _action_for(event: DomainEvent):
        if isinstance(event, MemberInvited):
            return "member_invited", None
        if isinstance(event, ClubCreated):
            return "club_created", {"enabled_modules": event.enabled_modules}
        if isinstance(event, ModulesEnabled):
            return "modules_enabled", event.enabled_modules
        if isinstance(event, EventCreated):
            return "event_created", None
        return None, None


def register_onboarding_handlers(
    bus: EventBus, uow_scope: UnitOfWorkScope, max_attempts: int = 3
) -> OnboardingEventHandler:
    handler = OnboardingEventHandler(uow_scope, max_attempts=max_attempts)
    for event_type in (MemberInvited, ClubCreated, ModulesEnabled, EventCreated):
        bus.subscribe(event_type, handler)
    return handler
