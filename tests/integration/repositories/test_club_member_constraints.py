from datetime import datetime
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from src.domain.entities import Club, ClubMember, ClubType, InviteStatus, MembershipRole


@pytest_asyncio.fixture
async def stored_club(db_session):
    club = Club(name="Harbour Sailing", type=ClubType.sports, creator_id=uuid4())
    db_session.add(club)
    await db_session.commit()
    return club


def pending_email(club_id, email="dora@club.org"):
    return ClubMember(
        club_id=club_id,
        email=email,
        role=MembershipRole.member,
        invite_status=InviteStatus.pending,
        invited_at=datetime.utcnow(),
    )


def pending_code(club_id, code):
    return ClubMember(
        club_id=club_id,
        invite_code=code,
        role=MembershipRole.member,
        invite_status=InviteStatus.pending,
        invited_at=datetime.utcnow(),
    )


def active(club_id, user_id, email=None):
    return ClubMember(
        club_id=club_id,
        user_id=user_id,
        email=email,
        role=MembershipRole.member,
        invite_status=InviteStatus.active,
        joined_at=datetime.utcnow(),
    )


async def insert(db_session, *rows):
    for row in rows:
        db_session.add(row)
    await db_session.commit()


@pytest.mark.asyncio
async def test_second_pending_invite_for_email_rejected(db_session, stored_club):
    await insert(db_session, pending_email(stored_club.id))

    with pytest.raises(IntegrityError):
        await insert(db_session, pending_email(stored_club.id))
    await db_session.rollback()


@pytest.mark.asyncio
async def test_pending_email_uniqueness_ignores_active_rows(db_session, stored_club):
    await insert(db_session, active(stored_club.id, uuid4(), email="dora@club.org"))

    await insert(db_session, pending_email(stored_club.id))


@pytest.mark.asyncio
async def test_same_email_pending_in_two_clubs(db_session, stored_club):
    other = Club(name="Hill Walkers", type=ClubType.hobby, creator_id=uuid4())
    await insert(db_session, other)

    await insert(db_session, pending_email(stored_club.id), pending_email(other.id))


@pytest.mark.asyncio
async def test_invite_code_unique_across_clubs(db_session, stored_club):
    other = Club(name="Hill Walkers", type=ClubType.hobby, creator_id=uuid4())
    await insert(db_session, other, pending_code(stored_club.id, "ABCD234567"))

    with pytest.raises(IntegrityError):
        await insert(db_session, pending_code(other.id, "ABCD234567"))
    await db_session.rollback()


@pytest.mark.asyncio
async def test_user_holds_one_row_per_club(db_session, stored_club):
    user_id = uuid4()
    await insert(db_session, active(stored_club.id, user_id))

    with pytest.raises(IntegrityError):
        await insert(db_session, active(stored_club.id, user_id))
    await db_session.rollback()


@pytest.mark.asyncio
async def test_pending_rows_without_user_coexist(db_session, stored_club):
    await insert(
        db_session,
        pending_code(stored_club.id, "ABCD234567"),
        pending_code(stored_club.id, "EFGH234567"),
        pending_email(stored_club.id),
    )
