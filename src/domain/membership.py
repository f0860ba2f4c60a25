"""
Membership states

A club_members row is one of three shapes, told apart by invite_status and
which of email / invite_code / user_id is set. Application code works with
these explicit states so an active row without a user, or a pending row with
neither an email nor a code, cannot be passed around.
"""

from datetime import datetime
from typing import Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .entities import ClubMember, InviteStatus, MembershipRole


class InvalidMembershipRow(ValueError):
    """Raised when a stored row matches none of the membership states"""


class _MembershipState(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    club_id: UUID
    role: MembershipRole
    invited_by: Optional[UUID] = None
    invited_at: Optional[datetime] = None


class PendingEmailInvite(_MembershipState):
    kind: Literal["pending_email"] = "pending_email"
    email: str


class PendingCodeInvite(_MembershipState):
    kind: Literal["pending_code"] = "pending_code"
    invite_code: str


class ActiveMembership(_MembershipState):
    kind: Literal["active"] = "active"
    user_id: UUID
    joined_at: Optional[datetime] = None
    email: Optional[str] = None
    invite_code: Optional[str] = None


MembershipState = Union[PendingEmailInvite, PendingCodeInvite, ActiveMembership]
PendingInvite = Union[PendingEmailInvite, PendingCodeInvite]


def membership_state(row: ClubMember) -> MembershipState:
    """Classify a stored row into its membership state."""
    common = dict(
        id=row.id,
        club_id=row.club_id,
        role=row.role,
        invited_by=row.invited_by,
        invited_at=row.invited_at,
    )

    if row.invite_status == InviteStatus.active:
        if row.user_id is None:
            raise InvalidMembershipRow(f"Active row {row.id} has no user_id")
        return ActiveMembership(
            **common,
            user_id=row.user_id,
            joined_at=row.joined_at,
            email=row.email,
            invite_code=row.invite_code,
        )

    if row.user_id is not None:
        raise InvalidMembershipRow(f"Pending row {row.id} is bound to a user")
    if row.invite_code:
        return PendingCodeInvite(**common, invite_code=row.invite_code)
    if row.email:
        return PendingEmailInvite(**common, email=row.email)
    raise InvalidMembershipRow(f"Pending row {row.id} has neither email nor code")


def is_pending(state: MembershipState) -> bool:
    return isinstance(state, (PendingEmailInvite, PendingCodeInvite))
