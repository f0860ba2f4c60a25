"""
Club Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within a club"""

    owner = "owner"
    admin = "admin"
    member = "member"


# Roles an invitation may grant; owner is only assigned at club creation
INVITABLE_ROLES = (MembershipRole.member, MembershipRole.admin)

# Roles allowed to manage invitations and onboarding
MANAGER_ROLES = (MembershipRole.owner, MembershipRole.admin)


class InviteStatus(str, Enum):
    """Lifecycle status of a club_members row"""

    pending = "pending"
    active = "active"


class ClubType(str, Enum):
    """Club category"""

    sports = "sports"
    scouts = "scouts"
    hobby = "hobby"
    educational = "educational"
    social = "social"
    volunteer = "volunteer"
    professional = "professional"
    other = "other"


class ClubModule(str, Enum):
    """Feature modules a club can enable"""

    events = "events"
    inventory = "inventory"
    payments = "payments"
    communications = "communications"
    member_management = "member_management"
    reports = "reports"
    documents = "documents"
