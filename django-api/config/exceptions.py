"""Maps domain errors and DRF exceptions to JSON error responses.

Every error body has the shape {"error": <CODE>, "message": <text>}.
Unexpected exceptions are logged and reported as INTERNAL_ERROR without
any internal detail.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from accounts.domain.errors import (
    AccountConflictError,
    AuthenticationError,
    DomainError,
    HostAccountError,
    MissingCredentialsError,
    RetryableError,
)
from events.domain.errors import (
    EventAccessDeniedError,
    EventNotFoundError,
    InvalidEventIdError,
)

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = "1"

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (HostAccountError, status.HTTP_403_FORBIDDEN),
    (AccountConflictError, status.HTTP_409_CONFLICT),
    (EventAccessDeniedError, status.HTTP_403_FORBIDDEN),
    (EventNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidEventIdError, status.HTTP_400_BAD_REQUEST),
    (RetryableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def _status_for(exc: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        response = Response(
            {"error": exc.code.value, "message": exc.message},
            status=_status_for(exc),
        )
        if isinstance(exc, AuthenticationError):
            response["WWW-Authenticate"] = "Bearer"
        if isinstance(exc, RetryableError):
            response["Retry-After"] = RETRY_AFTER_SECONDS
        return response

    if isinstance(exc, ValidationError):
        return Response(
            {
                "error": "INVALID_REQUEST",
                "message": "The request body is malformed.",
                "details": exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, NotAuthenticated):
        error = MissingCredentialsError()
        return Response(
            {"error": error.code.value, "message": error.message},
            status=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )

    response = exception_handler(exc, context)
    if response is not None:
        code = exc.get_codes() if isinstance(exc, APIException) else None
        response.data = {
            "error": code.upper() if isinstance(code, str) else "ERROR",
            "message": str(response.data.get("detail", "")),
        }
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in view",
        extra={"view": view.__class__.__name__ if view is not None else None},
    )
    return Response(
        {
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred. Please try again later.",
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
