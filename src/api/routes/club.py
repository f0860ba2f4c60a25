from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.envelope import Envelope
from src.api.error import raise_for_error
from src.api.utils.params import parse_uuid
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clubs import (
    ClubMemberView,
    ClubResponse,
    CreateClubUseCase,
    DeleteClubResponse,
    DeleteClubUseCase,
    GetClubMembersUseCase,
    GetClubUseCase,
    GetMembershipUseCase,
    ListMyClubsUseCase,
    MyClubView,
    UpdateClubUseCase,
)
from src.app.use_cases.invitations import MembershipResponse
from src.depends import get_current_user, get_event_bus, get_unit_of_work

router = APIRouter(prefix="/clubs", tags=["Clubs"])


class CreateClubRequest(BaseModel):
    """
    Create club HTTP request payload

    Field rules (length, type vocabulary, logo URL, modules) are enforced by
    the use case and reported as INVALID_CLUB_DATA.
    """

    name: str = Field(..., description="Club name (2-100 characters)")
    type: str = Field(..., description="Club type")
    description: Optional[str] = Field(None, description="Up to 500 characters")
    logo_url: Optional[str] = Field(None, description="http(s) image URL")
    enabled_modules: Optional[List[str]] = Field(None, description="Modules to enable")


class UpdateClubRequest(BaseModel):
    """Update club HTTP request payload; only the fields sent are changed"""

    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    enabled_modules: Optional[List[str]] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[ClubResponse])
async def create_club(
    request: CreateClubRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """
    Create Club

    The caller becomes the club's owner.

    Raises:
        - 400 Bad Request: INVALID_CLUB_DATA, CLUB_NAME_TAKEN
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = CreateClubUseCase(uow, events)
    result = await use_case.execute(
        creator_id=UUID(current_user["sub"]),
        name=request.name,
        type=request.type,
        description=request.description,
        logo_url=request.logo_url,
        enabled_modules=request.enabled_modules,
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Club created successfully")


@router.get("/my-clubs", status_code=status.HTTP_200_OK, response_model=Envelope[List[MyClubView]])
async def list_my_clubs(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List clubs the caller is an active member of"""
    result = await ListMyClubsUseCase(uow).execute(UUID(current_user["sub"]))

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Clubs retrieved successfully")


@router.get("/{club_id}", status_code=status.HTTP_200_OK, response_model=Envelope[ClubResponse])
async def get_club(
    club_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Club

    Raises:
        - 404 Not Found: CLUB_NOT_FOUND
    """
    result = await GetClubUseCase(uow).execute(parse_uuid(club_id, "club"))

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Club retrieved successfully")


@router.patch("/{club_id}", status_code=status.HTTP_200_OK, response_model=Envelope[ClubResponse])
async def update_club(
    club_id: str,
    request: UpdateClubRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
):
    """
    Update Club

    Raises:
        - 400 Bad Request: INVALID_CLUB_DATA, CLUB_NAME_TAKEN
        - 403 Forbidden: NOT_CLUB_CREATOR
        - 404 Not Found: CLUB_NOT_FOUND
    """
    use_case = UpdateClubUseCase(uow, events)
    result = await use_case.execute(
        parse_uuid(club_id, "club"),
        UUID(current_user["sub"]),
        request.model_dump(exclude_unset=True),
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Club updated successfully")


@router.delete(
    "/{club_id}", status_code=status.HTTP_200_OK, response_model=Envelope[DeleteClubResponse]
)
async def delete_club(
    club_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Club

    Removes the club together with its memberships and invitations.

    Raises:
        - 403 Forbidden: NOT_CLUB_CREATOR
        - 404 Not Found: CLUB_NOT_FOUND
    """
    result = await DeleteClubUseCase(uow).execute(
        parse_uuid(club_id, "club"), UUID(current_user["sub"])
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Club deleted successfully")


@router.get(
    "/{club_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[List[ClubMemberView]],
)
async def get_club_members(
    club_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Club Members

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: CLUB_NOT_FOUND
    """
    result = await GetClubMembersUseCase(uow).execute(
        parse_uuid(club_id, "club"), UUID(current_user["sub"])
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Members retrieved successfully")


@router.get(
    "/{club_id}/membership",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[MembershipResponse],
)
async def get_membership(
    club_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get My Membership

    Raises:
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    result = await GetMembershipUseCase(uow).execute(
        parse_uuid(club_id, "club"), UUID(current_user["sub"])
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Membership retrieved successfully")
