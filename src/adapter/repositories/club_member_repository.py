from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.club_member_repository import IClubMemberRepository
from src.domain.entities import MANAGER_ROLES, ClubMember, InviteStatus


class ClubMemberRepository(IClubMemberRepository):
    """Club member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, member_id: UUID) -> Optional[ClubMember]:
        """Get row by ID"""
        stmt = (
            select(ClubMember)
            .where(ClubMember.id == member_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_club_and_user(
        self, club_id: UUID, user_id: UUID
    ) -> Optional[ClubMember]:
        """Get active membership of a user in a club"""
        stmt = select(ClubMember).where(
            ClubMember.club_id == club_id,
            ClubMember.user_id == user_id,
            ClubMember.invite_status == InviteStatus.active,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_manager_membership(
        self, club_id: UUID, user_id: UUID
    ) -> Optional[ClubMember]:
        """Get active owner/admin membership of a user in a club"""
        stmt = select(ClubMember).where(
            ClubMember.club_id == club_id,
            ClubMember.user_id == user_id,
            ClubMember.invite_status == InviteStatus.active,
            ClubMember.role.in_(MANAGER_ROLES),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_club_and_email(
        self, club_id: UUID, email: str
    ) -> Optional[ClubMember]:
        """Get pending email invitation by club and email"""
        stmt = select(ClubMember).where(
            ClubMember.club_id == club_id,
            ClubMember.email == email.lower(),
            ClubMember.invite_status == InviteStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_club_and_email_or_user(
        self, club_id: UUID, email: str, user_id: Optional[UUID] = None
    ) -> List[ClubMember]:
        """Rows of a club addressed to email or bound to user_id"""
        match = ClubMember.email == email.lower()
        if user_id is not None:
            match = or_(match, ClubMember.user_id == user_id)
        stmt = select(ClubMember).where(ClubMember.club_id == club_id, match)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_pending_by_invite_code(self, invite_code: str) -> Optional[ClubMember]:
        """Get pending row by exact invite code"""
        stmt = select(ClubMember).where(
            ClubMember.invite_code == invite_code,
            ClubMember.invite_status == InviteStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def invite_code_exists(self, invite_code: str) -> bool:
        """Check whether any row carries the invite code"""
        stmt = select(func.count()).select_from(ClubMember).where(
            ClubMember.invite_code == invite_code
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def list_pending_by_club(self, club_id: UUID) -> List[ClubMember]:
        """Pending rows of a club, newest first"""
        stmt = (
            select(ClubMember)
            .where(
                ClubMember.club_id == club_id,
                ClubMember.invite_status == InviteStatus.pending,
            )
            .order_by(ClubMember.invited_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_pending_by_email(self, email: str) -> List[ClubMember]:
        """Pending rows addressed to an email across clubs, newest first"""
        stmt = (
            select(ClubMember)
            .where(
                ClubMember.email == email.lower(),
                ClubMember.invite_status == InviteStatus.pending,
            )
            .order_by(ClubMember.invited_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_active_by_club(self, club_id: UUID) -> List[ClubMember]:
        """Active rows of a club, oldest joined first"""
        stmt = (
            select(ClubMember)
            .where(
                ClubMember.club_id == club_id,
                ClubMember.invite_status == InviteStatus.active,
            )
            .order_by(ClubMember.joined_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_active_by_user(self, user_id: UUID) -> List[ClubMember]:
        """Active rows of a user, newest joined first"""
        stmt = (
            select(ClubMember)
            .where(
                ClubMember.user_id == user_id,
                ClubMember.invite_status == InviteStatus.active,
            )
            .order_by(ClubMember.joined_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, member: ClubMember) -> ClubMember:
        """Insert a new row"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def activate(
        self,
        member_id: UUID,
        user_id: UUID,
        joined_at: datetime,
        email: Optional[str] = None,
    ) -> Optional[ClubMember]:
        """Conditional pending -> active update"""
        values = dict(
            user_id=user_id,
            invite_status=InviteStatus.active,
            joined_at=joined_at,
        )
        if email is not None:
            values["email"] = func.coalesce(ClubMember.email, email)

        stmt = (
            update(ClubMember)
            .where(
                ClubMember.id == member_id,
                ClubMember.invite_status == InviteStatus.pending,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None
        return await self.get_by_id(member_id)

    async def delete_pending(self, member_id: UUID) -> bool:
        """Hard-delete a row only while it is pending"""
        stmt = (
            delete(ClubMember)
            .where(
                ClubMember.id == member_id,
                ClubMember.invite_status == InviteStatus.pending,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
