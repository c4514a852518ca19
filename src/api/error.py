from fastapi import status

from src.libs.result import Error

CLIENT_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_STATUS": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_USERNAME": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_TAX_CODE": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_MEMBERSHIP_CODE": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_ENTRY": status.HTTP_400_BAD_REQUEST,
    "ALREADY_RECORDED": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "MISSING_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FILM_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PROPOSAL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PROPOSAL_ALREADY_REVIEWED": status.HTTP_409_CONFLICT,
}

# Codes whose message and details are also served at the top level of the
# body, e.g. {"message", "memberName", "alreadyMarked", "error": {...}}
FLAT_ERROR_CODES = {"ALREADY_RECORDED", "MEMBER_NOT_FOUND"}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> None:
    """Raise the HTTP-level exception matching a use case error code"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
