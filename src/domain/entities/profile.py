"""
Profile Entity

Display data for an auth platform user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel


class Profile(SQLModel, table=True):
    """
    Profile entity - public display data for a user.

    Business Rules:
    - id is the auth platform's user id
    - Email is unique and stored lowercased
    - Owned by the auth platform sync; read-only here
    """

    __tablename__ = "profiles"

    id: UUID = Field(primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
