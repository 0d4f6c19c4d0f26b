from fastapi import status

from catering.domain.errors import INVALID_PARAM, NOT_FOUND, REQUIRED_PARAM, UNAUTHORIZED
from catering.domain.result import Error

CLIENT_ERROR_STATUS = {
    REQUIRED_PARAM: status.HTTP_400_BAD_REQUEST,
    INVALID_PARAM: 422,
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Map a use case error code onto the HTTP error category."""
    if error.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[error.code])
    raise ServerError(error)
