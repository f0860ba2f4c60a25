from typing import Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from libs.result import Error
from src.domain.entities import INVITABLE_ROLES, MembershipRole


def parse_invitable_role(role: str) -> Tuple[Optional[MembershipRole], Optional[Error]]:
    """Only member and admin may be granted by invitation."""
    try:
        membership_role = MembershipRole(role)
    except ValueError:
        membership_role = None

    if membership_role not in INVITABLE_ROLES:
        return None, Error("INVALID_ROLE", 'Role must be either "member" or "admin"')
    return membership_role, None


def normalize_email(email: str) -> Tuple[Optional[str], Optional[Error]]:
    """Validate address syntax and return it lowercased."""
    try:
        validate_email(email or "", check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return None, Error("INVALID_EMAIL", "Invalid email format")
    return email.strip().lower(), None
