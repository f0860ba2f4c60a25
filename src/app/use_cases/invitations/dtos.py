"""
Invitation Use Case DTOs (Data Transfer Objects)

Response classes for the invitation engine.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Club, Profile
from src.domain.membership import ActiveMembership, PendingCodeInvite, PendingInvite


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class PersonSummary(BaseModel):
    """Display metadata of a user"""

    id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: Optional[Profile]) -> Optional["PersonSummary"]:
        if profile is None:
            return None
        return cls(
            id=str(profile.id),
            full_name=profile.full_name,
            avatar_url=profile.avatar_url,
        )


class ClubSummary(BaseModel):
    """Display metadata of a club"""

    id: str
    name: str
    description: Optional[str] = None
    logo_url: Optional[str] = None

    @classmethod
    def from_club(cls, club: Optional[Club]) -> Optional["ClubSummary"]:
        if club is None:
            return None
        return cls(
            id=str(club.id),
            name=club.name,
            description=club.description,
            logo_url=club.logo_url,
        )


class InvitationResponse(BaseModel):
    """A pending invitation (email or code)"""

    id: str
    club_id: str
    email: Optional[str] = None
    role: str
    invite_status: str = "pending"
    invite_code: Optional[str] = None
    invited_by: Optional[str] = None
    invited_at: Optional[str] = None

    @classmethod
    def from_state(cls, state: PendingInvite) -> "InvitationResponse":
        is_code = isinstance(state, PendingCodeInvite)
        return cls(
            id=str(state.id),
            club_id=str(state.club_id),
            email=None if is_code else state.email,
            role=state.role.value,
            invite_code=state.invite_code if is_code else None,
            invited_by=str(state.invited_by) if state.invited_by else None,
            invited_at=_iso(state.invited_at),
        )


class ClubInvitationView(InvitationResponse):
    """Pending invitation as listed to club managers"""

    inviter: Optional[PersonSummary] = None


class MyInvitationView(BaseModel):
    """Pending invitation as listed to its addressee"""

    id: str
    club_id: str
    role: str
    invite_status: str = "pending"
    invited_at: Optional[str] = None
    club: Optional[ClubSummary] = None
    inviter: Optional[PersonSummary] = None


class MembershipResponse(BaseModel):
    """An active membership"""

    id: str
    club_id: str
    user_id: str
    email: Optional[str] = None
    role: str
    invite_status: str = "active"
    invited_by: Optional[str] = None
    invited_at: Optional[str] = None
    joined_at: Optional[str] = None

    @classmethod
    def from_state(cls, state: ActiveMembership) -> "MembershipResponse":
        return cls(
            id=str(state.id),
            club_id=str(state.club_id),
            user_id=str(state.user_id),
            email=state.email,
            role=state.role.value,
            invited_by=str(state.invited_by) if state.invited_by else None,
            invited_at=_iso(state.invited_at),
            joined_at=_iso(state.joined_at),
        )


class CancelInvitationResponse(BaseModel):
    """Response for cancel invitation use case"""

    id: str
    status: str
