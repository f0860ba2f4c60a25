"""
List Club Invitations Use Case
"""

from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import require_manager, store_error
from src.domain.membership import membership_state

from .dtos import ClubInvitationView, InvitationResponse, PersonSummary


class ListClubInvitationsUseCase:
    """
    Pending invitations of a club, newest first, with inviter display data.
    Owner/admin only.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_id: UUID, club_id: UUID
    ) -> Result[List[ClubInvitationView]]:
        async with self.uow:
            try:
                denied = await require_manager(
                    self.uow, club_id, requester_id, "view invitations"
                )
                if denied:
                    return Return.err(denied)

                rows = await self.uow.club_members.list_pending_by_club(club_id)
                inviter_ids = list({row.invited_by for row in rows if row.invited_by})
                inviters = await self.uow.profiles.get_many(inviter_ids)
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "retrieve invitations"))

        views = []
        for row in rows:
            base = InvitationResponse.from_state(membership_state(row))
            views.append(
                ClubInvitationView(
                    **base.model_dump(),
                    inviter=PersonSummary.from_profile(inviters.get(row.invited_by)),
                )
            )
        return Return.ok(views)
