"""
List My Invitations Use Case
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error

from .dtos import ClubSummary, MyInvitationView, PersonSummary


class ListMyInvitationsUseCase:
    """
    Pending invitations addressed to the caller's email across all clubs,
    newest first, with club and inviter display data.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, user_email: Optional[str]
    ) -> Result[List[MyInvitationView]]:
        if not user_email:
            return Return.ok([])

        async with self.uow:
            try:
                rows = await self.uow.club_members.list_pending_by_email(
                    user_email.strip().lower()
                )
                clubs = await self.uow.clubs.get_by_ids(list({row.club_id for row in rows}))
                inviters = await self.uow.profiles.get_many(
                    list({row.invited_by for row in rows if row.invited_by})
                )
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "retrieve user invitations"))

        clubs_by_id = {club.id: club for club in clubs}
        return Return.ok(
            [
                MyInvitationView(
                    id=str(row.id),
                    club_id=str(row.club_id),
                    role=row.role.value,
                    invite_status=row.invite_status.value,
                    invited_at=row.invited_at.isoformat() if row.invited_at else None,
                    club=ClubSummary.from_club(clubs_by_id.get(row.club_id)),
                    inviter=PersonSummary.from_profile(inviters.get(row.invited_by)),
                )
                for row in rows
            ]
        )
