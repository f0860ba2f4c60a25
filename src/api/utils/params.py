from uuid import UUID

from libs.result import Error
from src.api.error import ClientError


def parse_uuid(value: str, label: str) -> UUID:
    """Parse a path/body identifier, rejecting malformed ones with INVALID_ID"""
    try:
        return UUID(str(value))
    except ValueError:
        raise ClientError(Error("INVALID_ID", f"Invalid {label} ID format"))
