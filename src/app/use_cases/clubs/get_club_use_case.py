"""
Get Club Use Case
"""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error

from .dtos import ClubResponse


class GetClubUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, club_id: UUID) -> Result[ClubResponse]:
        async with self.uow:
            try:
                club = await self.uow.clubs.get_by_id(club_id)
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "fetch club"))

        if club is None:
            return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))
        return Return.ok(ClubResponse.from_club(club))
