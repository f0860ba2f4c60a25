"""
Club Use Case DTOs (Data Transfer Objects)

Response classes for the club directory.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Club, ClubMember, Profile
from src.domain.onboarding import OnboardingStatus


class ClubResponse(BaseModel):
    """A club record"""

    id: str
    name: str
    type: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    creator_id: Optional[str] = None
    enabled_modules: List[str] = []
    created_at: Optional[str] = None

    @classmethod
    def from_club(cls, club: Club) -> "ClubResponse":
        return cls(
            id=str(club.id),
            name=club.name,
            type=club.type.value,
            description=club.description,
            logo_url=club.logo_url,
            creator_id=str(club.creator_id) if club.creator_id else None,
            enabled_modules=list(club.enabled_modules or []),
            created_at=club.created_at.isoformat() if club.created_at else None,
        )


class MyClubView(ClubResponse):
    """A club as listed to one of its members"""

    role: str
    joined_at: Optional[str] = None


class ClubMemberView(BaseModel):
    """An active member of a club with profile display data"""

    id: str
    user_id: str
    email: Optional[str] = None
    role: str
    joined_at: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_row(cls, row: ClubMember, profile: Optional[Profile]) -> "ClubMemberView":
        return cls(
            id=str(row.id),
            user_id=str(row.user_id),
            email=row.email or (profile.email if profile else None),
            role=row.role.value,
            joined_at=row.joined_at.isoformat() if row.joined_at else None,
            full_name=profile.full_name if profile else None,
            avatar_url=profile.avatar_url if profile else None,
        )


class DeleteClubResponse(BaseModel):
    """Response for delete club use case"""

    id: str
    status: str


class OnboardingClubResponse(BaseModel):
    """A club created through onboarding, with its seeded progress"""

    club: ClubResponse
    onboarding_status: OnboardingStatus
