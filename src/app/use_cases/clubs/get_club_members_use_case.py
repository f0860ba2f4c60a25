"""
Get Club Members Use Case
"""

from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import get_role, store_error

from .dtos import ClubMemberView


class GetClubMembersUseCase:
    """
    Use case for listing the active members of a club.

    Business Rules:
    - Requester must hold an active row in the club
    - Pending invitations are not members and are never listed
    - Ordered by joined_at, earliest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, club_id: UUID, requester_id: UUID) -> Result[List[ClubMemberView]]:
        async with self.uow:
            try:
                club = await self.uow.clubs.get_by_id(club_id)
                if club is None:
                    return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

                if await get_role(self.uow, club_id, requester_id) is None:
                    return Return.err(
                        Error(
                            "NOT_A_MEMBER",
                            "Access denied. You are not a member of this club.",
                        )
                    )

                rows = await self.uow.club_members.list_active_by_club(club_id)
                profiles = await self.uow.profiles.get_many([row.user_id for row in rows])
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "retrieve club members"))

        return Return.ok(
            [ClubMemberView.from_row(row, profiles.get(row.user_id)) for row in rows]
        )
