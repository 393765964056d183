"""
Application error taxonomy and the DRF exception handler that renders it.

Services raise AppError with a code and a user-facing message; views let it
propagate and app_exception_handler turns it into {'error': ..., 'code': ...}.
"""
import logging
from enum import Enum

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class AppErrorCode(Enum):
    NOT_FOUND = 'NOT_FOUND'
    UNAUTHORIZED = 'UNAUTHORIZED'
    ALREADY_EXISTS = 'ALREADY_EXISTS'
    LIMIT_EXCEEDED = 'LIMIT_EXCEEDED'
    INVALID_REQUEST = 'INVALID_REQUEST'
    UNKNOWN_ERROR = 'UNKNOWN_ERROR'


STATUS_BY_CODE = {
    AppErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AppErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    AppErrorCode.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    AppErrorCode.LIMIT_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    AppErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    AppErrorCode.UNKNOWN_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(APIException):
    """
    Error raised by services for conditions the caller should see.

    Usage:
        raise AppError(AppErrorCode.NOT_FOUND, message='Team not found')
    """

    def __init__(self, code, message=None):
        self.code = code
        self.message = message or code.value.replace('_', ' ').capitalize()
        self.status_code = STATUS_BY_CODE[code]
        super().__init__(detail=self.message, code=code.value)

    def __str__(self):
        return f"{self.code.value}: {self.message}"


def app_exception_handler(exc, context):
    """
    DRF exception handler rendering AppError as {'error': message, 'code': code}.
    Everything else falls back to the default DRF handler.
    """
    if isinstance(exc, AppError):
        if exc.code == AppErrorCode.UNKNOWN_ERROR:
            logger.error(f"Request failed with unknown error: {exc.message}")
        response = exception_handler(exc, context)
        if response is not None:
            response.data = {'error': exc.message, 'code': exc.code.value}
        return response

    return exception_handler(exc, context)
