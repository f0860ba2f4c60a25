"""
Invite By Email Use Case

Creates a pending invitation addressed to an email.
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
from src.domain.membership import ActiveMembership, is_pending, membership_state

from .dtos import InvitationResponse
from .validation import normalize_email, parse_invitable_role

logger = logging.getLogger(__name__)


class InviteByEmailUseCase:
    """
    Use case for inviting a user to a club by email.

    Business Rules:
    - Only owner/admin can invite (checked first)
    - Role must be member or admin
    - Email must be a syntactically valid address; stored lowercased
    - A pending invitation for the email blocks a second one
    - An active row for the email, or for the account holding it, is ALREADY_MEMBER
    - Publishes MemberInvited after commit
    """

    def __init__(self, uow: UnitOfWork, events: EventBus):
        self.uow = uow
        self.events = events

    async def execute(
        self, inviter_user_id: UUID, club_id: UUID, email: str, role: str
    ) -> Result[InvitationResponse]:
        """
        Execute invite by email use case.

        Args:
            inviter_user_id: User ID of the person sending the invite
            club_id: Target club ID
            email: Email address to invite
            role: Role to assign (member/admin)

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        async with self.uow:
            try:
                denied = await require_manager(
                    self.uow, club_id, inviter_user_id, "invite new members"
                )
                if denied:
                    return Return.err(denied)

                membership_role, error = parse_invitable_role(role)
                if error:
                    return Return.err(error)

                normalized_email, error = normalize_email(email)
                if error:
                    return Return.err(error)

                # Match on the address itself or on the account that now owns it
                profile = await self.uow.profiles.get_by_email(normalized_email)
                existing_rows = await self.uow.club_members.list_by_club_and_email_or_user(
                    club_id, normalized_email, profile.id if profile else None
                )
                existing = [membership_state(row) for row in existing_rows]
                if any(is_pending(state) for state in existing):
                    return Return.err(
                        Error(
                            "INVITE_ALREADY_EXISTS",
                            "An invitation has already been sent to this email",
                        )
                    )
                for state in existing:
                    if isinstance(state, ActiveMembership):
                        return Return.err(
                            Error(
                                "ALREADY_MEMBER",
                                "This user is already a member of the club",
                            )
                        )

                invitation = ClubMember(
                    club_id=club_id,
                    email=normalized_email,
                    role=membership_role,
                    invite_status=InviteStatus.pending,
                    invited_by=inviter_user_id,
                    invited_at=datetime.utcnow(),
                )

                try:
                    invitation = await self.uow.club_members.create(invitation)
                except IntegrityError:
                    # Lost a race against a concurrent invite for the same email
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            "INVITE_ALREADY_EXISTS",
                            "An invitation has already been sent to this email",
                        )
                    )

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "create invitation"))

        logger.info(f"Email invitation {invitation.id} created for club {club_id}")

        await self.events.publish(
            MemberInvited(
                club_id=club_id,
                invitation_id=invitation.id,
                role=membership_role.value,
                email=normalized_email,
            )
        )

        return Return.ok(InvitationResponse.from_state(membership_state(invitation)))
