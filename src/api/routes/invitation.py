from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.envelope import Envelope
from src.api.error import ClientError, raise_for_error
from src.api.utils.params import parse_uuid
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptEmailInvitationUseCase,
    AcceptInviteCodeUseCase,
    CancelInvitationResponse,
    CancelInvitationUseCase,
    ClubInvitationView,
    GenerateInviteCodeUseCase,
    InvitationResponse,
    InviteByEmailUseCase,
    ListClubInvitationsUseCase,
    ListMyInvitationsUseCase,
    MembershipResponse,
    MyInvitationView,
)
from src.depends import get_config, get_current_user, get_event_bus, get_unit_of_work

router = APIRouter(prefix="/clubs", tags=["Invitations"])


class InviteByEmailRequest(BaseModel):
    """
    Invite by email HTTP request payload

    Email format and role are validated by the use case so that both
    surface as INVALID_EMAIL / INVALID_ROLE.
    """

    email: str = Field(..., description="Email address to invite")
    role: str = Field("member", description="Role to grant (member/admin)")


class InviteCodeRequest(BaseModel):
    """Generate invite code HTTP request payload"""

    role: str = Field("member", description="Role to grant (member/admin)")


@router.get(
    "/my-invitations",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[List[MyInvitationView]],
)
async def list_my_invitations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Pending Invitations

    Pending invitations addressed to the caller's email across all clubs.
    """
    use_case = ListMyInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), current_user.get("email"))

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitations retrieved successfully")


@router.post(
    "/join/{invite_code}",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[MembershipResponse],
)
async def join_with_code(
    invite_code: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """
    Accept Invite Code

    Raises:
        - 400 Bad Request: INVALID_INVITE_CODE, ALREADY_MEMBER
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = AcceptInviteCodeUseCase(uow, events)
    result = await use_case.execute(
        invite_code, UUID(current_user["sub"]), current_user.get("email")
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Successfully joined the club")


@router.delete(
    "/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[CancelInvitationResponse],
)
async def cancel_invitation(
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Invitation

    Hard-deletes a pending invitation. Requires owner or admin role.

    Raises:
        - 400 Bad Request: INVITATION_NOT_FOUND, INVITATION_NOT_PENDING, malformed id
        - 403 Forbidden: INSUFFICIENT_ROLE
    """
    use_case = CancelInvitationUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["sub"]), parse_uuid(invitation_id, "invitation")
    )

    if result.is_err():
        if result.error.code == "INVITATION_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_400_BAD_REQUEST)
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitation cancelled successfully")


@router.post(
    "/{club_id}/invite-email",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[InvitationResponse],
)
async def invite_by_email(
    club_id: str,
    request: InviteByEmailRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """
    Invite by Email

    Creates a pending invitation for an email address. Requires owner or admin role.

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_EMAIL, INVITE_ALREADY_EXISTS,
                           ALREADY_MEMBER
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 500 Internal Server Error: Server error
    """
    use_case = InviteByEmailUseCase(uow, events)
    result = await use_case.execute(
        UUID(current_user["sub"]),
        parse_uuid(club_id, "club"),
        request.email,
        request.role,
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitation sent successfully")


@router.post(
    "/{club_id}/invite-code",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[InvitationResponse],
)
async def generate_invite_code(
    club_id: str,
    request: Optional[InviteCodeRequest] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
    config: ApplicationConfig = Depends(get_config),
):
    """
    Generate Invite Code

    Creates a pending invitation redeemable by anyone holding the code.
    Requires owner or admin role.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 500 Internal Server Error: INVITE_CODE_EXHAUSTED
    """
    role = request.role if request else "member"

    use_case = GenerateInviteCodeUseCase(
        uow,
        events,
        code_length=config.INVITE_CODE_LENGTH,
        max_attempts=config.INVITE_CODE_MAX_ATTEMPTS,
    )
    result = await use_case.execute(
        UUID(current_user["sub"]), parse_uuid(club_id, "club"), role
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invite code generated successfully")


@router.post(
    "/{club_id}/accept-invitation",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[MembershipResponse],
)
async def accept_email_invitation(
    club_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """
    Accept Email Invitation

    Raises:
        - 400 Bad Request: NO_PENDING_INVITATION, ALREADY_MEMBER
    """
    use_case = AcceptEmailInvitationUseCase(uow, events)
    result = await use_case.execute(
        parse_uuid(club_id, "club"), UUID(current_user["sub"]), current_user.get("email")
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitation accepted successfully")


@router.get(
    "/{club_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[List[ClubInvitationView]],
)
async def list_club_invitations(
    club_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Club Invitations

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
    """
    use_case = ListClubInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Invitations retrieved successfully")
