from datetime import datetime
from uuid import uuid4

import pytest

from src.app.use_cases.invitations import (
    CancelInvitationUseCase,
    ListClubInvitationsUseCase,
    ListMyInvitationsUseCase,
)
from src.domain.entities import MembershipRole, Profile
from tests.unit.factories import make_active, make_club, make_pending


@pytest.mark.asyncio
async def test_list_club_invitations_with_inviter(mock_uow):
    club_id, admin_id = uuid4(), uuid4()
    mock_uow.club_members.get_manager_membership.return_value = make_active(
        club_id, user_id=admin_id, role=MembershipRole.admin
    )
    newer = make_pending(club_id, email="bob@club.org", invited_by=admin_id)
    older = make_pending(
        club_id, invite_code="CODE234567", invited_by=admin_id, invited_at=datetime(2023, 1, 1)
    )
    mock_uow.club_members.list_pending_by_club.return_value = [newer, older]
    mock_uow.profiles.get_many.return_value = {
        admin_id: Profile(id=admin_id, email="ann@club.org", full_name="Ann Admin")
    }

    result = await ListClubInvitationsUseCase(mock_uow).execute(admin_id, club_id)

    assert result.is_ok()
    views = result.value
    assert [view.id for view in views] == [str(newer.id), str(older.id)]
    assert views[0].email == "bob@club.org"
    assert views[1].invite_code == "CODE234567"
    assert views[0].inviter.full_name == "Ann Admin"


@pytest.mark.asyncio
async def test_member_cannot_list_club_invitations(mock_uow):
    mock_uow.club_members.get_manager_membership.return_value = None

    result = await ListClubInvitationsUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.club_members.list_pending_by_club.assert_not_called()


@pytest.mark.asyncio
async def test_list_my_invitations_joins_club(mock_uow):
    club = make_club(name="Rowing Club")
    row = make_pending(club.id, email="bob@club.org")
    mock_uow.club_members.list_pending_by_email.return_value = [row]
    mock_uow.clubs.get_by_ids.return_value = [club]

    result = await ListMyInvitationsUseCase(mock_uow).execute(uuid4(), "Bob@Club.org")

    assert result.is_ok()
    assert len(result.value) == 1
    view = result.value[0]
    assert view.club.name == "Rowing Club"
    assert view.role == "member"
    assert view.inviter is None
    mock_uow.club_members.list_pending_by_email.assert_called_once_with("bob@club.org")


@pytest.mark.asyncio
async def test_list_my_invitations_without_email_is_empty(mock_uow):
    result = await ListMyInvitationsUseCase(mock_uow).execute(uuid4(), None)

    assert result.is_ok()
    assert result.value == []
    mock_uow.club_members.list_pending_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_pending_invitation(mock_uow):
    club_id, admin_id = uuid4(), uuid4()
    row = make_pending(club_id, email="bob@club.org")
    mock_uow.club_members.get_by_id.return_value = row
    mock_uow.club_members.get_manager_membership.return_value = make_active(
        club_id, user_id=admin_id, role=MembershipRole.owner
    )
    mock_uow.club_members.delete_pending.return_value = True

    result = await CancelInvitationUseCase(mock_uow).execute(admin_id, row.id)

    assert result.is_ok()
    assert result.value.status == "cancelled"
    mock_uow.club_members.delete_pending.assert_called_once_with(row.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_cancel_missing_invitation(mock_uow):
    mock_uow.club_members.get_by_id.return_value = None

    result = await CancelInvitationUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_member_cannot_cancel(mock_uow):
    row = make_pending(uuid4(), email="bob@club.org")
    mock_uow.club_members.get_by_id.return_value = row
    mock_uow.club_members.get_manager_membership.return_value = None

    result = await CancelInvitationUseCase(mock_uow).execute(uuid4(), row.id)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.club_members.delete_pending.assert_not_called()


@pytest.mark.asyncio
async def test_accepted_invitation_cannot_be_cancelled(mock_uow):
    club_id, admin_id = uuid4(), uuid4()
    row = make_active(club_id)
    mock_uow.club_members.get_by_id.return_value = row
    mock_uow.club_members.get_manager_membership.return_value = make_active(
        club_id, user_id=admin_id, role=MembershipRole.admin
    )

    result = await CancelInvitationUseCase(mock_uow).execute(admin_id, row.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_PENDING"
    mock_uow.club_members.delete_pending.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_racing_acceptance(mock_uow):
    club_id, admin_id = uuid4(), uuid4()
    row = make_pending(club_id, email="bob@club.org")
    mock_uow.club_members.get_by_id.return_value = row
    mock_uow.club_members.get_manager_membership.return_value = make_active(
        club_id, user_id=admin_id, role=MembershipRole.admin
    )
    mock_uow.club_members.delete_pending.return_value = False

    result = await CancelInvitationUseCase(mock_uow).execute(admin_id, row.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_PENDING"
    mock_uow.commit.assert_not_called()
