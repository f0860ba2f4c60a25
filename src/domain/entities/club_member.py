"""
ClubMember Entity

One row per (club, invitee) pairing: a pending invitation or an active membership.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from .enums import InviteStatus, MembershipRole

if TYPE_CHECKING:
    from .club import Club


class ClubMember(SQLModel, table=True):
    """
    ClubMember entity - pending invitation or active membership.

    Business Rules:
    - Email invitations carry a lowercased email, code invitations an invite_code
    - user_id and joined_at are bound exactly once, on acceptance
    - At most one row per (club_id, user_id): user_id is only set on active rows
    - At most one pending row per (club_id, email)
    - invite_code is unique across all rows
    - Pending rows may be hard-deleted by an owner/admin
    """

    __tablename__ = "club_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    club_id: UUID = Field(foreign_key="clubs.id", nullable=False, index=True)
    user_id: Optional[UUID] = Field(default=None, index=True)
    email: Optional[str] = Field(default=None, max_length=255, index=True)

    role: MembershipRole = Field(nullable=False)
    invite_status: InviteStatus = Field(default=InviteStatus.pending)
    invite_code: Optional[str] = Field(default=None, unique=True, max_length=32)

    invited_by: Optional[UUID] = Field(default=None)

    # Timestamps
    invited_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    joined_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    club: "Club" = Relationship(back_populates="members")

    __table_args__ = (
        Index("uq_club_member_user", "club_id", "user_id", unique=True),
        Index(
            "uq_club_member_pending_email",
            "club_id",
            "email",
            unique=True,
            sqlite_where=text("invite_status = 'pending'"),
            postgresql_where=text("invite_status = 'pending'"),
        ),
        Index("idx_club_member_status", "invite_status"),
    )
