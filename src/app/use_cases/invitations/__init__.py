"""
Invitation Use Cases

Email invitations, invite codes, and their acceptance.
"""

from .accept_email_invitation_use_case import AcceptEmailInvitationUseCase
from .accept_invite_code_use_case import AcceptInviteCodeUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .dtos import (
    CancelInvitationResponse,
    ClubInvitationView,
    ClubSummary,
    InvitationResponse,
    MembershipResponse,
    MyInvitationView,
    PersonSummary,
)
from .generate_invite_code_use_case import GenerateInviteCodeUseCase
from .invite_by_email_use_case import InviteByEmailUseCase
from .list_club_invitations_use_case import ListClubInvitationsUseCase
from .list_my_invitations_use_case import ListMyInvitationsUseCase

__all__ = [
    "InviteByEmailUseCase",
    "GenerateInviteCodeUseCase",
    "AcceptInviteCodeUseCase",
    "AcceptEmailInvitationUseCase",
    "ListClubInvitationsUseCase",
    "ListMyInvitationsUseCase",
    "CancelInvitationUseCase",
    "InvitationResponse",
    "ClubInvitationView",
    "MyInvitationView",
    "MembershipResponse",
    "CancelInvitationResponse",
    "PersonSummary",
    "ClubSummary",
]
