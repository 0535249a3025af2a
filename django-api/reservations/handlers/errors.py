"""Translate domain errors into HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Only the error code and
the user-safe message leave the process.
"""

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from reservations.domain.errors import (
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
)

logger = structlog.get_logger(__name__)

_STATUS_BY_KIND = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: DomainError) -> int:
    for kind, code in _STATUS_BY_KIND:
        if isinstance(exc, kind):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    http_status = status_for(exc)
    logger.info(
        "Domain error",
        code=exc.code.value,
        status=http_status,
        view=type(context.get("view")).__name__,
    )
    return Response(
        {"error": {"code": exc.code.value, "message": exc.message}},
        status=http_status,
    )
