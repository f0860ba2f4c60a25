from abc import ABC, abstractmethod

from src.app.repositories.club_member_repository import IClubMemberRepository
from src.app.repositories.club_repository import IClubRepository
from src.app.repositories.profile_repository import IProfileRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    clubs: IClubRepository
    club_members: IClubMemberRepository
    profiles: IProfileRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
