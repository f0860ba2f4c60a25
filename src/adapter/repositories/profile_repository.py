from typing import Dict, List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.profile_repository import IProfileRepository
from src.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[Profile]:
        """Get profile by user ID"""
        stmt = select(Profile).where(Profile.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email address"""
        stmt = select(Profile).where(Profile.email == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, user_ids: List[UUID]) -> Dict[UUID, Profile]:
        """Get profiles keyed by user ID"""
        ids = [user_id for user_id in user_ids if user_id is not None]
        if not ids:
            return {}
        stmt = select(Profile).where(Profile.id.in_(ids))
        result = await self.session.execute(stmt)
        return {profile.id: profile for profile in result.scalars().all()}
