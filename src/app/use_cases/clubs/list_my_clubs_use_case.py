"""
List My Clubs Use Case
"""

from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error

from .dtos import ClubResponse, MyClubView


class ListMyClubsUseCase:
    """Clubs the user actively belongs to, most recently joined first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[MyClubView]]:
        async with self.uow:
            try:
                memberships = await self.uow.club_members.list_active_by_user(user_id)
                clubs = await self.uow.clubs.get_by_ids([m.club_id for m in memberships])
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "retrieve clubs"))

        clubs_by_id = {club.id: club for club in clubs}
        views = []
        for membership in memberships:
            club = clubs_by_id.get(membership.club_id)
            if club is None:
                continue
            views.append(
                MyClubView(
                    **ClubResponse.from_club(club).model_dump(),
                    role=membership.role.value,
                    joined_at=membership.joined_at.isoformat()
                    if membership.joined_at
                    else None,
                )
            )
        return Return.ok(views)
