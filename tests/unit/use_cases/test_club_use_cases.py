from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.clubs import (
    CreateClubUseCase,
    DeleteClubUseCase,
    GetClubMembersUseCase,
    GetClubUseCase,
    GetMembershipUseCase,
    ListMyClubsUseCase,
    UpdateClubUseCase,
)
from src.domain.entities import ClubMember, InviteStatus, MembershipRole, Profile
from src.domain.events import ClubCreated, ModulesEnabled
from tests.unit.factories import make_active, make_club


@pytest.mark.asyncio
async def test_create_club_makes_creator_owner(mock_uow, mock_events):
    creator_id = uuid4()
    mock_uow.clubs.get_by_creator_and_name.return_value = None

    result = await CreateClubUseCase(mock_uow, mock_events).execute(
        creator_id=creator_id,
        name="  Chess Club ",
        type="hobby",
        logo_url="https://cdn.club.org/logo.PNG",
        enabled_modules=["events", "payments"],
    )

    assert result.is_ok()
    club = result.value
    assert club.name == "Chess Club"
    assert club.type == "hobby"
    assert club.enabled_modules == ["events", "payments"]

    owner = mock_uow.club_members.create.call_args.args[0]
    assert isinstance(owner, ClubMember)
    assert owner.user_id == creator_id
    assert owner.role == MembershipRole.owner
    assert owner.invite_status == InviteStatus.active
    assert owner.joined_at is not None
    mock_uow.commit.assert_called_once()

    event = mock_events.publish.call_args.args[0]
    assert isinstance(event, ClubCreated)
    assert event.enabled_modules == ["events", "payments"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"name": "A", "type": "hobby"},
        {"name": "x" * 101, "type": "hobby"},
        {"name": "Chess Club", "type": "casino"},
        {"name": "Chess Club", "type": "hobby", "description": "d" * 501},
        {"name": "Chess Club", "type": "hobby", "logo_url": "ftp://cdn.club.org/logo.png"},
        {"name": "Chess Club", "type": "hobby", "logo_url": "https://cdn.club.org/logo.bmp"},
        {"name": "Chess Club", "type": "hobby", "enabled_modules": ["teleport"]},
    ],
)
async def test_create_club_rejects_invalid_fields(mock_uow, mock_events, fields):
    result = await CreateClubUseCase(mock_uow, mock_events).execute(
        creator_id=uuid4(), **fields
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CLUB_DATA"
    mock_uow.clubs.create.assert_not_called()


@pytest.mark.asyncio
async def test_onboarding_creation_requires_a_module(mock_uow, mock_events):
    result = await CreateClubUseCase(mock_uow, mock_events).execute(
        creator_id=uuid4(), name="Chess Club", type="hobby", require_modules=True
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CLUB_DATA"


@pytest.mark.asyncio
async def test_create_club_name_taken(mock_uow, mock_events):
    mock_uow.clubs.get_by_creator_and_name.return_value = make_club()

    result = await CreateClubUseCase(mock_uow, mock_events).execute(
        creator_id=uuid4(), name="Chess Club", type="hobby"
    )

    assert result.is_err()
    assert result.error.code == "CLUB_NAME_TAKEN"


@pytest.mark.asyncio
async def test_create_club_name_race(mock_uow, mock_events):
    mock_uow.clubs.get_by_creator_and_name.return_value = None
    mock_uow.clubs.create.side_effect = IntegrityError("insert", {}, Exception())

    result = await CreateClubUseCase(mock_uow, mock_events).execute(
        creator_id=uuid4(), name="Chess Club", type="hobby"
    )

    assert result.is_err()
    assert result.error.code == "CLUB_NAME_TAKEN"
    mock_events.publish.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_club(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await GetClubUseCase(mock_uow).execute(club.id)

    assert result.is_ok()
    assert result.value.id == str(club.id)


@pytest.mark.asyncio
async def test_get_missing_club(mock_uow):
    mock_uow.clubs.get_by_id.return_value = None

    result = await GetClubUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "CLUB_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_modules_publishes_event(mock_uow, mock_events):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubUseCase(mock_uow, mock_events).execute(
        club.id, club.creator_id, {"enabled_modules": ["events", "reports"]}
    )

    assert result.is_ok()
    assert result.value.enabled_modules == ["events", "reports"]
    assert result.value.name == "Chess Club"
    event = mock_events.publish.call_args.args[0]
    assert isinstance(event, ModulesEnabled)
    assert event.enabled_modules == ["events", "reports"]


@pytest.mark.asyncio
async def test_update_without_modules_publishes_nothing(mock_uow, mock_events):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubUseCase(mock_uow, mock_events).execute(
        club.id, club.creator_id, {"description": "Weekly games"}
    )

    assert result.is_ok()
    assert result.value.description == "Weekly games"
    mock_events.publish.assert_not_awaited()


@pytest.mark.asyncio
async def test_only_creator_updates(mock_uow, mock_events):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await UpdateClubUseCase(mock_uow, mock_events).execute(
        club.id, uuid4(), {"name": "Go Club"}
    )

    assert result.is_err()
    assert result.error.code == "NOT_CLUB_CREATOR"


@pytest.mark.asyncio
async def test_rename_to_taken_name(mock_uow, mock_events):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.clubs.get_by_creator_and_name.return_value = make_club(name="Go Club")

    result = await UpdateClubUseCase(mock_uow, mock_events).execute(
        club.id, club.creator_id, {"name": "Go Club"}
    )

    assert result.is_err()
    assert result.error.code == "CLUB_NAME_TAKEN"


@pytest.mark.asyncio
async def test_delete_club_by_creator(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await DeleteClubUseCase(mock_uow).execute(club.id, club.creator_id)

    assert result.is_ok()
    assert result.value.status == "deleted"
    mock_uow.clubs.delete.assert_called_once_with(club)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_club_by_other_user(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club

    result = await DeleteClubUseCase(mock_uow).execute(club.id, uuid4())

    assert result.error.code == "NOT_CLUB_CREATOR"
    mock_uow.clubs.delete.assert_not_called()


@pytest.mark.asyncio
async def test_list_my_clubs_carries_role(mock_uow):
    user_id = uuid4()
    chess, rowing = make_club(name="Chess Club"), make_club(name="Rowing Club")
    mock_uow.club_members.list_active_by_user.return_value = [
        make_active(rowing.id, user_id=user_id, joined_at=datetime(2024, 3, 1)),
        make_active(
            chess.id, user_id=user_id, role=MembershipRole.owner, joined_at=datetime(2024, 1, 1)
        ),
    ]
    mock_uow.clubs.get_by_ids.return_value = [chess, rowing]

    result = await ListMyClubsUseCase(mock_uow).execute(user_id)

    assert [club.name for club in result.value] == ["Rowing Club", "Chess Club"]
    assert [club.role for club in result.value] == ["member", "owner"]


@pytest.mark.asyncio
async def test_club_members_with_profiles(mock_uow):
    club = make_club()
    requester_id, other_id = uuid4(), uuid4()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.club_members.get_active_by_club_and_user.return_value = make_active(
        club.id, user_id=requester_id
    )
    mock_uow.club_members.list_active_by_club.return_value = [
        make_active(club.id, user_id=requester_id, role=MembershipRole.owner),
        make_active(club.id, user_id=other_id),
    ]
    mock_uow.profiles.get_many.return_value = {
        other_id: Profile(id=other_id, email="bob@club.org", full_name="Bob")
    }

    result = await GetClubMembersUseCase(mock_uow).execute(club.id, requester_id)

    assert result.is_ok()
    members = result.value
    assert [m.role for m in members] == ["owner", "member"]
    assert members[1].full_name == "Bob"
    assert members[1].email == "bob@club.org"


@pytest.mark.asyncio
async def test_outsider_cannot_list_members(mock_uow):
    club = make_club()
    mock_uow.clubs.get_by_id.return_value = club
    mock_uow.club_members.get_active_by_club_and_user.return_value = None

    result = await GetClubMembersUseCase(mock_uow).execute(club.id, uuid4())

    assert result.error.code == "NOT_A_MEMBER"
    mock_uow.club_members.list_active_by_club.assert_not_called()


@pytest.mark.asyncio
async def test_get_membership(mock_uow):
    club_id, user_id = uuid4(), uuid4()
    mock_uow.club_members.get_active_by_club_and_user.return_value = make_active(
        club_id, user_id=user_id, role=MembershipRole.admin
    )

    result = await GetMembershipUseCase(mock_uow).execute(club_id, user_id)

    assert result.value.role == "admin"
    assert result.value.user_id == str(user_id)


@pytest.mark.asyncio
async def test_get_membership_not_found(mock_uow):
    mock_uow.club_members.get_active_by_club_and_user.return_value = None

    result = await GetMembershipUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.error.code == "MEMBERSHIP_NOT_FOUND"
