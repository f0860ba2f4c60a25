from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ClubMember


class IClubMemberRepository(ABC):
    """Club member repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: UUID) -> Optional[ClubMember]:
        """Get row by ID"""
        pass

    @abstractmethod
    async def get_active_by_club_and_user(
        self, club_id: UUID, user_id: UUID
    ) -> Optional[ClubMember]:
        """Get active membership of a user in a club"""
        pass

    @abstractmethod
    async def get_manager_membership(
        self, club_id: UUID, user_id: UUID
    ) -> Optional[ClubMember]:
        """Get active owner/admin membership of a user in a club"""
        pass

    @abstractmethod
    async def get_pending_by_club_and_email(
        self, club_id: UUID, email: str
    ) -> Optional[ClubMember]:
        """Get pending email invitation by club and email"""
        pass

    @abstractmethod
    async def list_by_club_and_email_or_user(
        self, club_id: UUID, email: str, user_id: Optional[UUID] = None
    ) -> List[ClubMember]:
        """Rows of a club addressed to email or bound to user_id"""
        pass

    @abstractmethod
    async def get_pending_by_invite_code(self, invite_code: str) -> Optional[ClubMember]:
        """Get pending row by exact invite code"""
        pass

    @abstractmethod
    async def invite_code_exists(self, invite_code: str) -> bool:
        """Check whether any row carries the invite code"""
        pass

    @abstractmethod
    async def list_pending_by_club(self, club_id: UUID) -> List[ClubMember]:
        """Pending rows of a club, newest first"""
        pass

    @abstractmethod
    async def list_pending_by_email(self, email: str) -> List[ClubMember]:
        """Pending rows addressed to an email across clubs, newest first"""
        pass

    @abstractmethod
    async def list_active_by_club(self, club_id: UUID) -> List[ClubMember]:
        """Active rows of a club, oldest joined first"""
        pass

    @abstractmethod
    async def list_active_by_user(self, user_id: UUID) -> List[ClubMember]:
        """Active rows of a user, newest joined first"""
        pass

    @abstractmethod
    async def create(self, member: ClubMember) -> ClubMember:
        """Insert a new row"""
        pass

    @abstractmethod
    async def activate(
        self,
        member_id: UUID,
        user_id: UUID,
        joined_at: datetime,
        email: Optional[str] = None,
    ) -> Optional[ClubMember]:
        """
        Atomically move a pending row to active, binding user_id and joined_at
        (and email, when the row has none).

        Returns the updated row, or None if the row is no longer pending.
        Raises IntegrityError if the user already holds a row in the club.
        """
        pass

    @abstractmethod
    async def delete_pending(self, member_id: UUID) -> bool:
        """Hard-delete a row only while it is pending"""
        pass
