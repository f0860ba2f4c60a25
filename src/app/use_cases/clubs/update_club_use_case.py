"""
Update Club Use Case

Partial update of a club by its creator.
"""

import logging
from typing import Any, Dict
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import store_error
from src.domain.entities import ClubType
from src.domain.events import ModulesEnabled

from .create_club_use_case import NAME_TAKEN
from .dtos import ClubResponse
from .validation import validate_club_data

logger = logging.getLogger(__name__)


class UpdateClubUseCase:
    """
    Use case for updating a club.

    Business Rules:
    - Only the creator can update the club
    - Only the fields present in updates change
    - Renaming keeps the name unique per creator
    - Publishes ModulesEnabled when enabled_modules was part of the update
    """

    def __init__(self, uow: UnitOfWork, events: EventBus):
        self.uow = uow
        self.events = events

    async def execute(
        self, club_id: UUID, user_id: UUID, updates: Dict[str, Any]
    ) -> Result[ClubResponse]:
        invalid = validate_club_data(updates, partial=True)
        if invalid:
            return Return.err(invalid)

        async with self.uow:
            try:
                club = await self.uow.clubs.get_by_id(club_id)
                if club is None:
                    return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

                if club.creator_id != user_id:
                    return Return.err(
                        Error("NOT_CLUB_CREATOR", "Only the club creator can update the club")
                    )

                if "name" in updates:
                    name = updates["name"].strip()
                    if name != club.name:
                        existing = await self.uow.clubs.get_by_creator_and_name(
                            user_id, name
                        )
                        if existing:
                            return Return.err(NAME_TAKEN)
                    club.name = name
                if "type" in updates:
                    club.type = ClubType(updates["type"])
                if "description" in updates:
                    club.description = updates["description"]
                if "logo_url" in updates:
                    club.logo_url = updates["logo_url"]
                if "enabled_modules" in updates:
                    club.enabled_modules = list(updates["enabled_modules"])

                try:
                    club = await self.uow.clubs.update(club)
                except IntegrityError:
                    await self.uow.rollback()
                    return Return.err(NAME_TAKEN)

                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(store_error(exc, "update club"))

        logger.info(f"Club {club_id} updated by {user_id}")

        if "enabled_modules" in updates:
            await self.events.publish(
                ModulesEnabled(club_id=club_id, enabled_modules=club.enabled_modules)
            )

        return Return.ok(ClubResponse.from_club(club))
