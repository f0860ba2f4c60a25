"""
Domain events published after a committed write.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    club_id: UUID
    occurred_at: datetime = Field(default_factory=datetime.utcnow)


class ClubCreated(DomainEvent):
    creator_id: UUID
    enabled_modules: List[str] = []


class ModulesEnabled(DomainEvent):
    enabled_modules: List[str] = []


class MemberInvited(DomainEvent):
    """An invitation was created or accepted"""

    invitation_id: UUID
    role: str
    email: Optional[str] = None
    user_id: Optional[UUID] = None
    accepted: bool = False


class EventCreated(DomainEvent):
    event_id: Optional[UUID] = None
