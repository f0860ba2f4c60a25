from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Validation and conflict failures both surface as 400
BAD_REQUEST_CODES = {
    "INVALID_ROLE",
    "INVALID_EMAIL",
    "INVALID_STEP",
    "INVALID_STEP_VALUE",
    "INVALID_CLUB_DATA",
    "INVALID_ID",
    "INVITE_ALREADY_EXISTS",
    "ALREADY_MEMBER",
    "INVALID_INVITE_CODE",
    "NO_PENDING_INVITATION",
    "INVITATION_NOT_PENDING",
    "CLUB_NAME_TAKEN",
}

FORBIDDEN_CODES = {"INSUFFICIENT_ROLE", "NOT_A_MEMBER", "NOT_CLUB_CREATOR"}

NOT_FOUND_CODES = {"CLUB_NOT_FOUND", "INVITATION_NOT_FOUND", "MEMBERSHIP_NOT_FOUND"}


def raise_for_error(error: Error):
    """Translate a use case Error into the HTTP exception for its family."""
    if error.code in BAD_REQUEST_CODES:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in FORBIDDEN_CODES:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code in NOT_FOUND_CODES:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)
