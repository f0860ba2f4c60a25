"""
Accept Email Invitation Use Case

Accepts the pending invitation addressed to the caller's email.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.domain.events import MemberInvited
from src.domain.membership import membership_state

from .dtos import MembershipResponse

logger = logging.getLogger(__name__)

NO_PENDING_INVITATION = Error(
    "NO_PENDING_INVITATION", "No pending invitation found for your email"
)
ALREADY_MEMBER = Error("ALREADY_MEMBER", "You are already a member of this club")


class AcceptEmailInvitationUseCase:
    """
    Use case for accepting an email invitation.

    Business Rules:
    - The caller's verified email selects the pending row (case-insensitive)
    - A caller already active in the club gets ALREADY_MEMBER
    - The pending->active update is conditional, so it happens exactly once
    - Publishes MemberInvited after commit
    """

    def __init__(self, uow: UnitOfWork, events: EventBus):
        self.uow = uow
        self.events = events

    async def execute(
        self, club_id: UUID, user_id: UUID, user_email: Optional[str]
    ) -> Result[MembershipResponse]:
        if not user_email:
            return Return.err(Error("INVALID_EMAIL", "Unable to verify user email"))

        email = user_email.strip().lower()

        async with self.uow:
            try:
                row = await self.uow.club_members.get_pending_by_club_and_email(
                    club_id, email
                )
                if row is None:
                    return Return.err(NO_PENDING_INVITATION)

                existing = await self.uow.club_members.get_active_by_club_and_user(
                    club_id, user_id
                )
                if existing is not None:
                    return Return.err(ALREADY_MEMBER)

                try:
                    updated = await self.uow.club_members.activate(
                        row.id, user_id, datetime.utcnow()
                    )
                except IntegrityError:
                    await self.uow.rollback()
                    return Return.err(ALREADY_MEMBER)

                if updated is None:
                    await self.uow.rollback()
                    return Return.err(NO_PENDING_INVITATION)

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "accept email invitation"))

        membership = membership_state(updated)
        logger.info(f"User {user_id} accepted email invitation to club {club_id}")

        await self.events.publish(
            MemberInvited(
                club_id=club_id,
                invitation_id=membership.id,
                role=membership.role.value,
                email=email,
                user_id=user_id,
                accepted=True,
            )
        )

        return Return.ok(MembershipResponse.from_state(membership))
