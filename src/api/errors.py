"""
Error responses - Map typed registration errors to HTTP responses.

The mapping is total over RegistrationError. There is no default
branch: a new error variant makes assert_never fail type
checking until a response is defined for it here.
"""

import logging
from dataclasses import dataclass
from typing import assert_never

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.domain.errors import (
    ExpiredCard,
    InsufficientFunds,
    RegistrationError,
    UserExists,
    UsernameMissing,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorContent:
    """Status code and message for one error variant."""

    status_code: int
    message: str


def to_error_content(error: RegistrationError) -> ErrorContent:
    """Return the response status and message for a registration error."""
    match error:
        case UsernameMissing():
            return ErrorContent(status.HTTP_400_BAD_REQUEST, "Username missing")
        case UserExists():
            return ErrorContent(status.HTTP_409_CONFLICT, "Username already exists")
        case ExpiredCard():
            return ErrorContent(status.HTTP_402_PAYMENT_REQUIRED, "Card expired")
        case InsufficientFunds():
            return ErrorContent(status.HTTP_402_PAYMENT_REQUIRED, "Credit maxed")
        case _:
            assert_never(error)


def error_response(error: RegistrationError) -> JSONResponse:
    """Build the JSON error response ({"detail": message}) for a registration error."""
    content = to_error_content(error)
    return JSONResponse(status_code=content.status_code, content={"detail": content.message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Generic handler for fatal faults.

    Anything that is not a typed registration error ends up here: storage
    failures, unknown provider faults, programming errors. Details are
    logged, never returned to the client.
    """
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
