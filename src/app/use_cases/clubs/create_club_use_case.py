"""
Create Club Use Case

Creates a club and makes its creator the owner.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.domain.entities import (
    Club,
    ClubMember,
    ClubType,
    InviteStatus,
    MembershipRole,
)
from src.domain.events import ClubCreated

from .dtos import ClubResponse
from .validation import validate_club_data

logger = logging.getLogger(__name__)

NAME_TAKEN = Error("CLUB_NAME_TAKEN", "You already have a club with this name")


class CreateClubUseCase:
    """
    Use case for creating a club.

    Business Rules:
    - Fields are validated before anything is written
    - Name is unique per creator
    - The creator gets an active owner row in the same transaction
    - Clubs created through onboarding must enable at least one module
    - Publishes ClubCreated after commit
    """

    def __init__(self, uow: UnitOfWork, events: EventBus):
        self.uow = uow
        self.events = events

    async def execute(
        self,
        creator_id: UUID,
        name: str,
        type: str,
        description: Optional[str] = None,
        logo_url: Optional[str] = None,
        enabled_modules: Optional[List[str]] = None,
        require_modules: bool = False,
    ) -> Result[ClubResponse]:
        data = {"name": name, "type": type, "description": description, "logo_url": logo_url}
        if enabled_modules is not None:
            data["enabled_modules"] = enabled_modules
        invalid = validate_club_data(data)
        if invalid:
            return Return.err(invalid)

        if require_modules and not enabled_modules:
            return Return.err(
                Error("INVALID_CLUB_DATA", "At least one module must be enabled")
            )

        name = name.strip()
        modules = list(enabled_modules or [])

        async with self.uow:
            try:
                existing = await self.uow.clubs.get_by_creator_and_name(creator_id, name)
                if existing:
                    return Return.err(NAME_TAKEN)

                club = Club(
                    name=name,
                    type=ClubType(type),
                    description=description,
                    logo_url=logo_url,
                    creator_id=creator_id,
                    enabled_modules=modules,
                )
                try:
                    club = await self.uow.clubs.create(club)
                except IntegrityError:
                    await self.uow.rollback()
                    return Return.err(NAME_TAKEN)

                now = datetime.utcnow()
                owner = ClubMember(
                    club_id=club.id,
                    user_id=creator_id,
                    role=MembershipRole.owner,
                    invite_status=InviteStatus.active,
                    invited_at=now,
                    joined_at=now,
                )
                await self.uow.club_members.create(owner)

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "create club"))

        logger.info(f"Club {club.id} created by {creator_id}")

        await self.events.publish(
            ClubCreated(club_id=club.id, creator_id=creator_id, enabled_modules=modules)
        )

        return Return.ok(ClubResponse.from_club(club))
