"""
/invites surface: the same acceptance and listing operations as the
/clubs invitation routes, keyed by request body instead of path.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.envelope import Envelope
from src.api.error import raise_for_error
from src.api.utils.params import parse_uuid
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptEmailInvitationUseCase,
    AcceptInviteCodeUseCase,
    ListMyInvitationsUseCase,
    MembershipResponse,
    MyInvitationView,
)
from src.depends import get_current_user, get_event_bus, get_unit_of_work

router = APIRouter(prefix="/invites", tags=["Invites"])


class AcceptCodeRequest(BaseModel):
    invite_code: str = Field(..., min_length=1, description="Invite code to redeem")


class AcceptEmailRequest(BaseModel):
    club_id: str = Field(..., description="Club the invitation belongs to")


@router.post("/accept", status_code=status.HTTP_200_OK, response_model=Envelope[MembershipResponse])
async def accept_invite_code(
    request: AcceptCodeRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """Redeem an invite code (same as POST /clubs/join/{invite_code})"""
    use_case = AcceptInviteCodeUseCase(uow, events)
    result = await use_case.execute(
        request.invite_code.strip(), UUID(current_user["sub"]), current_user.get("email")
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Successfully joined the club")


@router.get("/pending", status_code=status.HTTP_200_OK, response_model=Envelope[List[MyInvitationView]])
async def pending_invites(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending invitations for the caller's email"""
    use_case = ListMyInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), current_user.get("email"))

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitations retrieved successfully")


@router.post(
    "/accept-email", status_code=status.HTTP_200_OK, response_model=Envelope[MembershipResponse]
)
async def accept_email_invite(
    request: AcceptEmailRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """Accept the caller's email invitation to a club"""
    use_case = AcceptEmailInvitationUseCase(uow, events)
    result = await use_case.execute(
        parse_uuid(request.club_id, "club"),
        UUID(current_user["sub"]),
        current_user.get("email"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitation accepted successfully")
