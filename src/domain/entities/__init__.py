"""
Club Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    INVITABLE_ROLES,
    MANAGER_ROLES,
    ClubModule,
    ClubType,
    InviteStatus,
    MembershipRole,
)

# Export all entities
from .club import Club
from .club_member import ClubMember
from .profile import Profile

__all__ = [
    # Enums
    "MembershipRole",
    "InviteStatus",
    "ClubType",
    "ClubModule",
    "INVITABLE_ROLES",
    "MANAGER_ROLES",
    # Entities
    "Club",
    "ClubMember",
    "Profile",
]
