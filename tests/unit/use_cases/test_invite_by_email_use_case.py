from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.app.use_cases.invitations import InviteByEmailUseCase
from src.domain.entities import ClubMember, InviteStatus, MembershipRole, Profile
from src.domain.events import MemberInvited
from tests.unit.factories import make_active, make_pending


@pytest.fixture
def club_id():
    return uuid4()


@pytest.fixture
def inviter_id():
    return uuid4()


@pytest.fixture
def manager(mock_uow, club_id, inviter_id):
    membership = make_active(club_id, user_id=inviter_id, role=MembershipRole.admin)
    mock_uow.club_members.get_manager_membership.return_value = membership
    mock_uow.club_members.list_by_club_and_email_or_user.return_value = []
    return membership


@pytest.mark.asyncio
async def test_successful_invite(mock_uow, mock_events, manager, club_id, inviter_id):
    use_case = InviteByEmailUseCase(mock_uow, mock_events)

    result = await use_case.execute(inviter_id, club_id, "Bob@Club.org", "member")

    assert result.is_ok()
    invitation = result.value
    assert invitation.email == "bob@club.org"
    assert invitation.role == "member"
    assert invitation.invite_status == "pending"
    assert invitation.invite_code is None
    assert invitation.invited_by == str(inviter_id)

    created = mock_uow.club_members.create.call_args.args[0]
    assert isinstance(created, ClubMember)
    assert created.invite_status == InviteStatus.pending
    assert created.user_id is None
    assert created.invited_at is not None
    mock_uow.commit.assert_called_once()

    mock_events.publish.assert_awaited_once()
    event = mock_events.publish.call_args.args[0]
    assert isinstance(event, MemberInvited)
    assert event.club_id == club_id
    assert event.accepted is False


@pytest.mark.asyncio
async def test_admin_role_can_be_granted(mock_uow, mock_events, manager, club_id, inviter_id):
    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "ann@club.org", "admin"
    )

    assert result.is_ok()
    assert result.value.role == "admin"


@pytest.mark.asyncio
async def test_member_cannot_invite(mock_uow, mock_events, club_id):
    mock_uow.club_members.get_manager_membership.return_value = None

    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        uuid4(), club_id, "not-an-email", "owner"
    )

    # Permission wins over the invalid role and email
    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.club_members.create.assert_not_called()
    mock_events.publish.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["owner", "viewer", ""])
async def test_invalid_role(mock_uow, mock_events, manager, club_id, inviter_id, role):
    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "bob@club.org", role
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["bob", "bob@", "@club.org", "bob club@club.org"])
async def test_invalid_email(mock_uow, mock_events, manager, club_id, inviter_id, email):
    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, email, "member"
    )

    assert result.is_err()
    assert result.error.code == "INVALID_EMAIL"
    mock_uow.club_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_test_domain_is_accepted(mock_uow, mock_events, manager, club_id, inviter_id):
    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "Ann@Club.Test", "member"
    )

    assert result.is_ok()
    assert result.value.email == "ann@club.test"


@pytest.mark.asyncio
async def test_pending_invitation_blocks_second_invite(
    mock_uow, mock_events, manager, club_id, inviter_id
):
    mock_uow.club_members.list_by_club_and_email_or_user.return_value = [
        make_pending(club_id, email="bob@club.org")
    ]

    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "bob@club.org", "member"
    )

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.club_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_account_owning_the_email_is_already_member(
    mock_uow, mock_events, manager, club_id, inviter_id
):
    bob = Profile(id=uuid4(), email="bob@club.org")
    mock_uow.profiles.get_by_email.return_value = bob
    mock_uow.club_members.list_by_club_and_email_or_user.return_value = [
        make_active(club_id, user_id=bob.id)
    ]

    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "bob@club.org", "member"
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.club_members.list_by_club_and_email_or_user.assert_called_once_with(
        club_id, "bob@club.org", bob.id
    )


@pytest.mark.asyncio
async def test_unique_constraint_race_reads_as_duplicate(
    mock_uow, mock_events, manager, club_id, inviter_id
):
    mock_uow.club_members.create.side_effect = IntegrityError("insert", {}, Exception())

    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "bob@club.org", "member"
    )

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.rollback.assert_called()
    mock_uow.commit.assert_not_called()
    mock_events.publish.assert_not_awaited()


@pytest.mark.asyncio
async def test_store_failure_is_opaque(mock_uow, mock_events, manager, club_id, inviter_id):
    mock_uow.club_members.create.side_effect = OperationalError("insert", {}, Exception())

    result = await InviteByEmailUseCase(mock_uow, mock_events).execute(
        inviter_id, club_id, "bob@club.org", "member"
    )

    assert result.is_err()
    assert result.error.code == "STORE_ERROR"


@pytest.mark.asyncio
async def test_onboarding_failure_does_not_fail_invite(
    mock_uow, manager, club_id, inviter_id
):
    from src.app.services.event_bus import EventBus

    bus = EventBus()

    async def broken_handler(event):
        raise RuntimeError("onboarding down")

    bus.subscribe(MemberInvited, broken_handler)

    result = await InviteByEmailUseCase(mock_uow, bus).execute(
        inviter_id, club_id, "bob@club.org", "member"
    )

    assert result.is_ok()
    mock_uow.commit.assert_called_once()
