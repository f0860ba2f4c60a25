from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Club


class IClubRepository(ABC):
    """Club repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        """Get club by ID"""
        pass

    @abstractmethod
    async def get_by_creator_and_name(
        self, creator_id: UUID, name: str
    ) -> Optional[Club]:
        """Get club by creator and name"""
        pass

    @abstractmethod
    async def get_by_ids(self, club_ids: List[UUID]) -> List[Club]:
        """Get clubs by IDs"""
        pass

    @abstractmethod
    async def create(self, club: Club) -> Club:
        """Create a new club"""
        pass

    @abstractmethod
    async def update(self, club: Club) -> Club:
        """Update existing club"""
        pass

    @abstractmethod
    async def delete(self, club: Club) -> None:
        """Delete a club and its membership rows"""
        pass

    @abstractmethod
    async def compare_and_set_onboarding(
        self, club_id: UUID, expected_version: int, onboarding_status: dict
    ) -> bool:
        """
        Store onboarding_status only if onboarding_version still equals
        expected_version; bumps the version. Returns False if another writer won.
        """
        pass
