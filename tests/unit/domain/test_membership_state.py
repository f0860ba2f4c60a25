from uuid import uuid4

import pytest

from src.domain.entities import InviteStatus, MembershipRole
from src.domain.membership import (
    ActiveMembership,
    InvalidMembershipRow,
    PendingCodeInvite,
    PendingEmailInvite,
    is_pending,
    membership_state,
)
from tests.unit.factories import make_active, make_pending


def test_pending_row_with_email_is_email_invite():
    row = make_pending(uuid4(), email="bob@club.org")

    state = membership_state(row)

    assert isinstance(state, PendingEmailInvite)
    assert state.email == "bob@club.org"
    assert is_pending(state)


def test_pending_row_with_code_is_code_invite():
    row = make_pending(uuid4(), invite_code="ABCDEFGH23")

    state = membership_state(row)

    assert isinstance(state, PendingCodeInvite)
    assert state.invite_code == "ABCDEFGH23"


def test_active_row_is_membership():
    user_id = uuid4()
    row = make_active(uuid4(), user_id=user_id, role=MembershipRole.admin)

    state = membership_state(row)

    assert isinstance(state, ActiveMembership)
    assert state.user_id == user_id
    assert state.role == MembershipRole.admin
    assert not is_pending(state)


def test_active_row_without_user_is_rejected():
    row = make_active(uuid4())
    row.user_id = None

    with pytest.raises(InvalidMembershipRow):
        membership_state(row)


def test_pending_row_bound_to_user_is_rejected():
    row = make_pending(uuid4(), email="bob@club.org", user_id=uuid4())

    with pytest.raises(InvalidMembershipRow):
        membership_state(row)


def test_pending_row_without_email_or_code_is_rejected():
    row = make_pending(uuid4())

    with pytest.raises(InvalidMembershipRow):
        membership_state(row)


def test_states_are_immutable():
    state = membership_state(make_pending(uuid4(), email="bob@club.org"))

    with pytest.raises(Exception):
        state.email = "eve@club.org"


def test_status_enum_values():
    assert InviteStatus.pending.value == "pending"
    assert InviteStatus.active.value == "active"
