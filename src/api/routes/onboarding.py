from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.envelope import Envelope
from src.api.error import raise_for_error
from src.api.utils.params import parse_uuid
from src.app.services.event_bus import EventBus
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clubs import CreateClubUseCase, OnboardingClubResponse
from src.app.use_cases.onboarding import (
    GetOnboardingStatusUseCase,
    InitializeOnboardingStatusUseCase,
    UpdateOnboardingStepUseCase,
)
from src.domain.onboarding import ONBOARDING_STEPS, OnboardingStatus, OnboardingStep
from src.depends import get_config, get_current_user, get_event_bus, get_unit_of_work

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


class UpdateStepRequest(BaseModel):
    """Update onboarding step HTTP request payload"""

    club_id: str = Field(..., description="Club whose progress is updated")
    step: str = Field(..., description="Milestone id")
    value: Any = Field(..., description="true/false, or a module list for enabled_modules")


class OnboardingClubRequest(BaseModel):
    """Create club through onboarding; at least one module is required"""

    name: str
    type: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    enabled_modules: List[str] = Field(default_factory=list)


@router.get("/steps", status_code=status.HTTP_200_OK, response_model=Envelope[List[OnboardingStep]])
async def list_steps(current_user: dict = Depends(get_current_user)):
    """Milestone catalog, in order"""
    return Envelope(data=list(ONBOARDING_STEPS), message="Onboarding steps retrieved successfully")


@router.get("/status", status_code=status.HTTP_200_OK, response_model=Envelope[OnboardingStatus])
async def get_status(
    club_id: str = Query(..., description="Club ID"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Onboarding Status

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: CLUB_NOT_FOUND
    """
    use_case = GetOnboardingStatusUseCase(uow)
    result = await use_case.execute(parse_uuid(club_id, "club"), UUID(current_user["sub"]))

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Onboarding status retrieved successfully")


@router.patch("/status", status_code=status.HTTP_200_OK, response_model=Envelope[OnboardingStatus])
async def update_status(
    request: UpdateStepRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config: ApplicationConfig = Depends(get_config),
):
    """
    Update Onboarding Step

    Raises:
        - 400 Bad Request: INVALID_STEP, INVALID_STEP_VALUE
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_ROLE
        - 404 Not Found: CLUB_NOT_FOUND
        - 500 Internal Server Error: ONBOARDING_UPDATE_CONFLICT
    """
    use_case = UpdateOnboardingStepUseCase(
        uow, max_attempts=config.ONBOARDING_MAX_UPDATE_ATTEMPTS
    )
    result = await use_case.execute(
        parse_uuid(request.club_id, "club"),
        request.step,
        request.value,
        requester_id=UUID(current_user["sub"]),
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value, message="Onboarding status updated successfully")


@router.post(
    "/club", status_code=status.HTTP_201_CREATED, response_model=Envelope[OnboardingClubResponse]
)
async def create_onboarding_club(
    request: OnboardingClubRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    events: EventBus = Depends(get_event_bus),
    config: ApplicationConfig = Depends(get_config),
):
    """
    Create Club (onboarding)

    Creates the club, then seeds its onboarding progress.

    Raises:
        - 400 Bad Request: INVALID_CLUB_DATA, CLUB_NAME_TAKEN
    """
    created = await CreateClubUseCase(uow, events).execute(
        creator_id=UUID(current_user["sub"]),
        name=request.name,
        type=request.type,
        description=request.description,
        logo_url=request.logo_url,
        enabled_modules=request.enabled_modules,
        require_modules=True,
    )
    if created.is_err():
        raise_for_error(created.error)

    club = created.value
    initialized = await InitializeOnboardingStatusUseCase(
        uow, max_attempts=config.ONBOARDING_MAX_UPDATE_ATTEMPTS
    ).execute(UUID(club.id), club.enabled_modules)
    if initialized.is_err():
        raise_for_error(initialized.error)

    return Envelope(
        data=OnboardingClubResponse(club=club, onboarding_status=initialized.value),
        message="Club created successfully",
    )
