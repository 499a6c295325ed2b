"""
API routes - Premium registration endpoint.

This module defines the HTTP endpoints:
- POST /premium/{username} - Register a premium user and charge them
- POST /premium/ - Empty username, answered with 400
"""

from fastapi import APIRouter, Depends, Path, Response, status

from src.api.dependencies import get_registration_workflow
from src.api.errors import error_response
from src.api.models import ErrorResponse
from src.domain.errors import RegistrationError
from src.domain.ports import User
from src.domain.registration import RegistrationWorkflow
from src.domain.result import Err, Result

router = APIRouter(tags=["premium"])

_error_responses: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Username missing"},
    402: {"model": ErrorResponse, "description": "Card expired or credit maxed"},
    409: {"model": ErrorResponse, "description": "Username already exists"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


@router.post(
    "/premium/{username}",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=_error_responses,
    summary="Register a premium user",
    description="Create the user and charge the premium price in one transaction. "
    "If the charge is declined the user is not created.",
)
def register_premium_user(
    username: str = Path(..., description="Username to register"),
    workflow: RegistrationWorkflow = Depends(get_registration_workflow),
) -> Response:
    """
    Register a premium user.

    - **username**: Unique username, surrounding whitespace ignored

    Returns 201 with an empty body on success.
    """
    return _to_response(workflow.register(username))


@router.post(
    "/premium/",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=_error_responses,
    include_in_schema=False,
)
def register_premium_user_without_username(
    workflow: RegistrationWorkflow = Depends(get_registration_workflow),
) -> Response:
    """Handle an empty username path segment."""
    return _to_response(workflow.register(None))


def _to_response(result: Result[User, RegistrationError]) -> Response:
    if isinstance(result, Err):
        return error_response(result.error)
    return Response(status_code=status.HTTP_201_CREATED)
