"""
Club Use Cases

Club directory: club CRUD and membership lookups.
"""

from .create_club_use_case import CreateClubUseCase
from .delete_club_use_case import DeleteClubUseCase
from .dtos import (
    ClubMemberView,
    ClubResponse,
    DeleteClubResponse,
    MyClubView,
    OnboardingClubResponse,
)
from .get_club_members_use_case import GetClubMembersUseCase
from .get_club_use_case import GetClubUseCase
from .get_membership_use_case import GetMembershipUseCase
from .list_my_clubs_use_case import ListMyClubsUseCase
from .update_club_use_case import UpdateClubUseCase

__all__ = [
    "CreateClubUseCase",
    "GetClubUseCase",
    "UpdateClubUseCase",
    "DeleteClubUseCase",
    "ListMyClubsUseCase",
    "GetClubMembersUseCase",
    "GetMembershipUseCase",
    "ClubResponse",
    "MyClubView",
    "ClubMemberView",
    "DeleteClubResponse",
    "OnboardingClubResponse",
]
