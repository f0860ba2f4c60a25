"""
Cancel Invitation Use Case

Hard-deletes a pending invitation.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import require_manager, store_error
from src.domain.membership import is_pending, membership_state

from .dtos import CancelInvitationResponse

logger = logging.getLogger(__name__)

NOT_PENDING = Error(
    "INVITATION_NOT_PENDING", "Only pending invitations can be cancelled"
)


class CancelInvitationUseCase:
    """
    Use case for cancelling an invitation.

    Business Rules:
    - Missing row is INVITATION_NOT_FOUND
    - Requester must be owner/admin of the row's club
    - Only pending rows can be cancelled; the delete is conditional on the
      row still being pending
    - No onboarding side effect
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: UUID, invitation_id: UUID
    ) -> Result[CancelInvitationResponse]:
        async with self.uow:
            try:
                invitation = await self.uow.club_members.get_by_id(invitation_id)
                if invitation is None:
                    return Return.err(
                        Error("INVITATION_NOT_FOUND", "Invitation not found")
                    )

                denied = await require_manager(
                    self.uow, invitation.club_id, requester_id, "cancel invitations"
                )
                if denied:
                    return Return.err(denied)

                if not is_pending(membership_state(invitation)):
                    return Return.err(NOT_PENDING)

                deleted = await self.uow.club_members.delete_pending(invitation_id)
                if not deleted:
                    # Accepted between lookup and delete
                    await self.uow.rollback()
                    return Return.err(NOT_PENDING)

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "cancel invitation"))

        logger.info(f"Invitation {invitation_id} cancelled by {requester_id}")
        return Return.ok(
            CancelInvitationResponse(id=str(invitation_id), status="cancelled")
        )
