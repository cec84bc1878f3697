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


# Error code -> HTTP status for codes surfaced to the caller
CLIENT_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "INVALID_TOKEN": status.HTTP_400_BAD_REQUEST,
    "TOKEN_EXPIRED": status.HTTP_400_BAD_REQUEST,
    "TOKEN_ALREADY_USED": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TASK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ASSIGNEE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PROJECT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MILESTONE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ALREADY_PROJECT_MEMBER": status.HTTP_409_CONFLICT,
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
}


def raise_for_error(error: Error, overrides: dict = None):
    """Raise ClientError for known client codes, ServerError for everything else"""
    status_map = {**CLIENT_ERROR_STATUS, **(overrides or {})}
    if error.code in status_map:
        raise ClientError(error, status_code=status_map[error.code])
    raise ServerError(error)
