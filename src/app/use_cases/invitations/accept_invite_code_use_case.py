"""
Accept Invite Code Use Case

Redeems a shareable invite code, turning its row into an active membership.
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
from src.domain.membership import PendingCodeInvite, membership_state

from .dtos import MembershipResponse

logger = logging.getLogger(__name__)

INVALID_CODE = Error("INVALID_INVITE_CODE", "Invalid or expired invitation code")
ALREADY_MEMBER = Error("ALREADY_MEMBER", "You are already a member of this club")


class AcceptInviteCodeUseCase:
    """
    Use case for joining a club with an invite code.

    Business Rules:
    - Unknown, consumed and cancelled codes all read as INVALID_INVITE_CODE
    - A user already active in the club gets ALREADY_MEMBER and the code
      stays pending for someone else
    - The pending->active update is conditional on the row still being
      pending, so of two concurrent redemptions only one succeeds
    - Publishes MemberInvited after commit
    """

    def __init__(self, uow: UnitOfWork, events: EventBus):
        self.uow = uow
        self.events = events

    async def execute(
        self, invite_code: str, user_id: UUID, user_email: Optional[str] = None
    ) -> Result[MembershipResponse]:
        """
        Execute accept invite code use case.

        Args:
            invite_code: Code shared by a club owner/admin
            user_id: Authenticated user redeeming the code
            user_email: Authenticated user's email, recorded on the membership

        Returns:
            Result with MembershipResponse DTO, or Error
        """
        async with self.uow:
            try:
                row = await self.uow.club_members.get_pending_by_invite_code(invite_code)
                if row is None or not isinstance(membership_state(row), PendingCodeInvite):
                    return Return.err(INVALID_CODE)

                existing = await self.uow.club_members.get_active_by_club_and_user(
                    row.club_id, user_id
                )
                if existing is not None:
                    return Return.err(ALREADY_MEMBER)

                try:
                    updated = await self.uow.club_members.activate(
                        row.id,
                        user_id,
                        datetime.utcnow(),
                        email=user_email.lower() if user_email else None,
                    )
                except IntegrityError:
                    await self.uow.rollback()
                    return Return.err(ALREADY_MEMBER)

                if updated is None:
                    # Spent or cancelled between lookup and update
                    await self.uow.rollback()
                    return Return.err(INVALID_CODE)

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "accept invitation"))

        membership = membership_state(updated)
        logger.info(f"User {user_id} joined club {membership.club_id} with an invite code")

        await self.events.publish(
            MemberInvited(
                club_id=membership.club_id,
                invitation_id=membership.id,
                role=membership.role.value,
                user_id=user_id,
                accepted=True,
            )
        )

        return Return.ok(MembershipResponse.from_state(membership))
