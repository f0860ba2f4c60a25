"""
Helpers shared by use cases: the owner/admin permission check and
translation of storage failures into Result errors.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MembershipRole

logger = logging.getLogger(__name__)


async def require_manager(
    uow: UnitOfWork, club_id: UUID, user_id: UUID, action: str
) -> Optional[Error]:
    """
    Permission check for invitation and onboarding management.

    A single lookup for an active owner/admin row; anything else, including
    no membership at all, is INSUFFICIENT_ROLE.

    Returns:
        None if allowed, otherwise the Error to return
    """
    membership = await uow.club_members.get_manager_membership(club_id, user_id)
    if membership is None:
        return Error("INSUFFICIENT_ROLE", f"Only club owners and admins can {action}")
    return None


def store_error(exc: SQLAlchemyError, operation: str) -> Error:
    logger.error(f"Store failure during {operation}: {exc.__class__.__name__}: {exc}")
    return Error("STORE_ERROR", f"Failed to {operation}")


async def get_role(
    uow: UnitOfWork, club_id: UUID, user_id: UUID
) -> Optional[MembershipRole]:
    """Role of a user in a club, None unless they hold an active row"""
    membership = await uow.club_members.get_active_by_club_and_user(club_id, user_id)
    return membership.role if membership else None
