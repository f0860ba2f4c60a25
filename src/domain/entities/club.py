"""
Club Entity

A club owns its memberships and its onboarding progress blob.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, Relationship, SQLModel

from .enums import ClubType

if TYPE_CHECKING:
    from .club_member import ClubMember


class Club(SQLModel, table=True):
    """
    Club entity - a group users can be invited to.

    Business Rules:
    - Name is unique per creator
    - Creator is assigned the owner role at creation
    - Only the creator can update or delete the club
    - onboarding_status holds the enriched progress blob;
      onboarding_version guards it with compare-and-set writes
    """

    __tablename__ = "clubs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    type: ClubType = Field(nullable=False)
    description: Optional[str] = Field(default=None, max_length=500)
    logo_url: Optional[str] = Field(default=None, max_length=2048)

    creator_id: Optional[UUID] = Field(default=None, index=True)

    enabled_modules: Optional[list] = Field(default=None, sa_column=Column(JSON))

    onboarding_status: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    onboarding_version: int = Field(default=0, nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    members: list["ClubMember"] = Relationship(
        back_populates="club",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    __table_args__ = (
        Index("uq_club_name_per_creator", "creator_id", "name", unique=True),
        Index("idx_club_type", "type"),
    )
