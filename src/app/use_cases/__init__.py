"""
Use Cases

Organized by area:
- clubs/: Club directory
- invitations/: Email invitations and invite codes
- onboarding/: Onboarding progress tracking
"""

from .clubs import (
    CreateClubUseCase,
    DeleteClubUseCase,
    GetClubMembersUseCase,
    GetClubUseCase,
    GetMembershipUseCase,
    ListMyClubsUseCase,
    UpdateClubUseCase,
)
from .invitations import (
    AcceptEmailInvitationUseCase,
    AcceptInviteCodeUseCase,
    CancelInvitationUseCase,
    GenerateInviteCodeUseCase,
    InviteByEmailUseCase,
    ListClubInvitationsUseCase,
    ListMyInvitationsUseCase,
)
from .onboarding import (
    AutoUpdateOnboardingUseCase,
    GetOnboardingStatusUseCase,
    InitializeOnboardingStatusUseCase,
    UpdateOnboardingStepUseCase,
)

__all__ = [
    # Clubs
    "CreateClubUseCase",
    "GetClubUseCase",
    "UpdateClubUseCase",
    "DeleteClubUseCase",
    "ListMyClubsUseCase",
    "GetClubMembersUseCase",
    "GetMembershipUseCase",
    # Invitations
    "InviteByEmailUseCase",
    "GenerateInviteCodeUseCase",
    "AcceptInviteCodeUseCase",
    "AcceptEmailInvitationUseCase",
    "ListClubInvitationsUseCase",
    "ListMyInvitationsUseCase",
    "CancelInvitationUseCase",
    # Onboarding
    "GetOnboardingStatusUseCase",
    "UpdateOnboardingStepUseCase",
    "InitializeOnboardingStatusUseCase",
    "AutoUpdateOnboardingUseCase",
]
