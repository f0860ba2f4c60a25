"""
Generate Invite Code Use Case

Creates a pending invitation redeemable by anyone holding its code.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import require_manager, store_error
from src.domain.entities import ClubMember, InviteStatus
from src.domain.events import MemberInvited
from src.domain.invite_codes import DEFAULT_INVITE_CODE_LENGTH, generate_invite_code
from src.domain.membership import membership_state

from .dtos import InvitationResponse
from .validation import parse_invitable_role

logger = logging.getLogger(__name__)


class GenerateInviteCodeUseCase:
    """
    Use case for generating a single-use invite code.

    Business Rules:
    - Only owner/admin can generate codes (checked first)
    - Role must be member or admin
    - Codes are unique across all rows; a colliding candidate is redrawn,
      running out of attempts is a fatal anomaly (INVITE_CODE_EXHAUSTED)
    - The insert itself is never retried
    - Publishes MemberInvited after commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        events: EventBus,
        code_length: int = DEFAULT_INVITE_CODE_LENGTH,
        max_attempts: int = 3,
    ):
        self.uow = uow
        self.events = events
        self.code_length = code_length
        self.max_attempts = max_attempts

    async def execute(
        self, inviter_user_id: UUID, club_id: UUID, role: str
    ) -> Result[InvitationResponse]:
        async with self.uow:
            try:
                denied = await require_manager(
                    self.uow, club_id, inviter_user_id, "generate invite codes"
                )
                if denied:
                    return Return.err(denied)

                membership_role, error = parse_invitable_role(role)
                if error:
                    return Return.err(error)

                invite_code = None
                for _ in range(self.max_attempts):
                    candidate = generate_invite_code(self.code_length)
                    if not await self.uow.club_members.invite_code_exists(candidate):
                        invite_code = candidate
                        break
                    logger.warning(f"Invite code collision for club {club_id}, redrawing")

                if invite_code is None:
                    logger.error(
                        f"Invite code generation exhausted {self.max_attempts} attempts"
                    )
                    return Return.err(
                        Error("INVITE_CODE_EXHAUSTED", "Failed to generate invite code")
                    )

                invitation = ClubMember(
                    club_id=club_id,
                    role=membership_role,
                    invite_status=InviteStatus.pending,
                    invite_code=invite_code,
                    invited_by=inviter_user_id,
                    invited_at=datetime.utcnow(),
                )

                try:
                    invitation = await self.uow.club_members.create(invitation)
                except IntegrityError:
                    await self.uow.rollback()
                    logger.error(f"Invite code collided on insert for club {club_id}")
                    return Return.err(
                        Error("INVITE_CODE_EXHAUSTED", "Failed to generate invite code")
                    )

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "generate invite code"))

        logger.info(f"Invite code invitation {invitation.id} created for club {club_id}")

        await self.events.publish(
            MemberInvited(
                club_id=club_id,
                invitation_id=invitation.id,
                role=membership_role.value,
            )
        )

        return Return.ok(InvitationResponse.from_state(membership_state(invitation)))
