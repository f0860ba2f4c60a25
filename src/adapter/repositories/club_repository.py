from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.club_repository import IClubRepository
from src.domain.entities import Club, ClubMember


class ClubRepository(IClubRepository):
    """Club repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        """Get club by ID"""
        # Always re-read: onboarding writes compare against the stored version
        stmt = (
            select(Club)
            .where(Club.id == club_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_creator_and_name(
        self, creator_id: UUID, name: str
    ) -> Optional[Club]:
        """Get club by creator and name"""
        stmt = select(Club).where(Club.creator_id == creator_id, Club.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, club_ids: List[UUID]) -> List[Club]:
        """Get clubs by IDs"""
        if not club_ids:
            return []
        stmt = select(Club).where(Club.id.in_(club_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, club: Club) -> Club:
        """Create a new club"""
        self.session.add(club)
        await self.session.flush()
        await self.session.refresh(club)
        return club

    async def update(self, club: Club) -> Club:
        """Update existing club"""
        self.session.add(club)
        await self.session.flush()
        await self.session.refresh(club)
        return club

    async def delete(self, club: Club) -> None:
        """Delete a club and its membership rows"""
        await self.session.execute(
            delete(ClubMember)
            .where(ClubMember.club_id == club.id)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(
            delete(Club)
            .where(Club.id == club.id)
            .execution_options(synchronize_session=False)
        )
        self.session.expunge(club)

    async def compare_and_set_onboarding(
        self, club_id: UUID, expected_version: int, onboarding_status: dict
    ) -> bool:
        """Store onboarding_status if onboarding_version is unchanged"""
        stmt = (
            update(Club)
            .where(Club.id == club_id, Club.onboarding_version == expected_version)
            .values(
                onboarding_status=onboarding_status,
                onboarding_version=expected_version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
