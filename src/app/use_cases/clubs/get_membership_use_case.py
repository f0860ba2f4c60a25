"""
Get Membership Use Case
"""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.app.use_cases.invitations.dtos import MembershipResponse
from src.domain.membership import membership_state


class GetMembershipUseCase:
    """The caller's own active membership in a club"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, club_id: UUID, user_id: UUID) -> Result[MembershipResponse]:
        async with self.uow:
            try:
                row = await self.uow.club_members.get_active_by_club_and_user(
                    club_id, user_id
                )
            except SQLAlchemyError as exc:
                return Return.err(store_error(exc, "fetch membership"))

        if row is None:
            return Return.err(Error("MEMBERSHIP_NOT_FOUND", "Membership not found"))
        return Return.ok(MembershipResponse.from_state(membership_state(row)))
