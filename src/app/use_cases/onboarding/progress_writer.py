"""
Compare-and-set writer for a club's onboarding blob.

Reads the current milestones, applies a merge, re-enriches and stores the
result only if no other writer bumped onboarding_version in between.
On a lost race the whole read-merge-write is repeated.
"""

import logging
from typing import Any, Callable, Dict
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.onboarding import OnboardingStatus, enrich, extract_milestones

logger = logging.getLogger(__name__)

Merge = Callable[[Dict[str, Any]], Dict[str, Any]]


async def write_milestones(
    uow: UnitOfWork, club_id: UUID, merge: Merge, max_attempts: int = 3
) -> Result[OnboardingStatus]:
    """
    Apply merge to the club's milestones and persist the enriched status.

    Must be called inside an entered unit of work; commits on success.
    """
    for attempt in range(1, max_attempts + 1):
        club = await uow.clubs.get_by_id(club_id)
        if club is None:
            return Return.err(Error("CLUB_NOT_FOUND", "Club not found"))

        current = extract_milestones(club.onboarding_status, club.enabled_modules)
        status = enrich(merge(dict(current)))

        stored = await uow.clubs.compare_and_set_onboarding(
            club_id, club.onboarding_version, status.model_dump(mode="json")
        )
        if stored:
            await uow.commit()
            return Return.ok(status)

        logger.info(
            f"Onboarding write for club {club_id} lost a race "
            f"(attempt {attempt}/{max_attempts})"
        )
        await uow.rollback()

    return Return.err(
        Error(
            "ONBOARDING_UPDATE_CONFLICT",
            "Onboarding status is being updated concurrently, try again",
        )
    )
