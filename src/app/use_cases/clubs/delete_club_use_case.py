"""
Delete Club Use Case
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error

from .dtos import DeleteClubResponse

logger = logging.getLogger(__name__)


class DeleteClubUseCase:
    """
    Deletes a club together with all its membership and invitation rows.
    Creator only.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, club_id: UUID, user_id: UUID) -> Result[DeleteClubResponse]:
        async with self.uow:
            try:
                club = await self.uow.clubs.get_by_id(club_id)
                if club is None:
                    return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

                if club.creator_id != user_id:
                    return Return.err(
                        Error("NOT_CLUB_CREATOR", "Only the club creator can delete the club")
                    )

                await self.uow.clubs.delete(club)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "delete club"))

        logger.info(f"Club {club_id} deleted by {user_id}")
        return Return.ok(DeleteClubResponse(id=str(club_id), status="deleted"))
