from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.club_member_repository import ClubMemberRepository
from src.adapter.repositories.club_repository import ClubRepository
from src.adapter.repositories.profile_repository import ProfileRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.clubs = ClubRepository(self.session)
        self.club_members = ClubMemberRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


def uow_scope_factory(session_factory: async_sessionmaker):
    """
    Build a callable opening a fresh session-backed unit of work.

    Used by event subscribers, which run after the request's own
    transaction has committed.
    """

    @asynccontextmanager
    async def uow_scope() -> AsyncIterator[SqlAlchemyUnitOfWork]:
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    return uow_scope
