from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.clubs = MagicMock()
    for name in (
        "get_by_id",
        "get_by_creator_and_name",
        "get_by_ids",
        "create",
        "update",
        "delete",
        "compare_and_set_onboarding",
    ):
        setattr(uow.clubs, name, AsyncMock())

    uow.club_members = MagicMock()
    for name in (
        "get_by_id",
        "get_active_by_club_and_user",
        "get_manager_membership",
        "get_pending_by_club_and_email",
        "list_by_club_and_email_or_user",
        "get_pending_by_invite_code",
        "invite_code_exists",
        "list_pending_by_club",
        "list_pending_by_email",
        "list_active_by_club",
        "list_active_by_user",
        "create",
        "activate",
        "delete_pending",
    ):
        setattr(uow.club_members, name, AsyncMock())

    uow.profiles = MagicMock()
    uow.profiles.get_by_id = AsyncMock(return_value=None)
    uow.profiles.get_by_email = AsyncMock(return_value=None)
    uow.profiles.get_many = AsyncMock(return_value={})

    # Inserts hand back the row they were given
    uow.clubs.create.side_effect = lambda club: club
    uow.clubs.update.side_effect = lambda club: club
    uow.club_members.create.side_effect = lambda member: member

    return uow


@pytest.fixture
def mock_events():
    """Mock EventBus recording published events"""
    events = MagicMock()
    events.publish = AsyncMock()
    return events
