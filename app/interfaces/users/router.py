"""
FastAPI router for users.

Users can be listed, registered and fetched. Updating or deleting a
user is not supported and answers 405 with an error envelope.
"""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import Response

from app.application.taskboard.dtos import CreateUserCommand
from app.application.taskboard.user_service import UserService
from app.domain.taskboard.entities import User
from app.domain.taskboard.errors import FailureKind
from app.interfaces.dependencies import (
    PageRequest,
    get_page_request,
    get_user_service,
    parse_resource_id,
)
from app.interfaces.schemas import (
    ERROR_RESPONSES,
    NOT_FOUND_RESPONSE,
    ErrorEnvelope,
    PaginatedEnvelope,
    SuccessEnvelope,
)
from app.interfaces.translation import translate_failures
from app.interfaces.users.schemas import CreateUserRequest, UserItem
from app.shared.responses import (
    ApiResponse,
    created,
    failure,
    not_found,
    paginated,
    success,
    validation_error,
)

router = APIRouter(prefix="/users", tags=["users"])


def _user_data(user: User) -> dict[str, Any]:
    return UserItem.model_validate(user).model_dump(mode="json")


@router.get(
    "",
    response_model=None,
    responses={200: {"model": PaginatedEnvelope}, **ERROR_RESPONSES},
    summary="List users",
)
@translate_failures("Failed to retrieve users")
def list_users(
    paging: PageRequest = Depends(get_page_request),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    """List users page by page."""
    page = service.get_all_users(paging.page, paging.limit)
    return paginated(page.map(_user_data), "Users retrieved successfully")


@router.post(
    "",
    response_model=None,
    status_code=201,
    responses={
        201: {"model": SuccessEnvelope},
        409: {"model": ErrorEnvelope, "description": "Username or e-mail taken"},
        **ERROR_RESPONSES,
    },
    summary="Register a user",
)
@translate_failures("Failed to create user")
def create_user(
    request: CreateUserRequest,
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    """Register a new user."""
    user = service.create_user(
        CreateUserCommand(username=request.username, email=request.email)
    )
    return created(_user_data(user), "User created successfully")


@router.get(
    "/{user_id}",
    response_model=None,
    responses={200: {"model": SuccessEnvelope}, **NOT_FOUND_RESPONSE, **ERROR_RESPONSES},
    summary="Get a user",
)
@translate_failures("Failed to retrieve user")
def show_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    """Return a single user."""
    parsed_id = parse_resource_id(user_id)
    if parsed_id is None:
        return validation_error("Invalid user ID")

    user = service.get_user_by_id(parsed_id)
    if user is None:
        return not_found("User not found")
    return success(_user_data(user), "User retrieved successfully")


@router.api_route(
    "/{user_id}",
    methods=["PUT", "PATCH", "DELETE"],
    response_model=None,
    responses={405: {"model": ErrorEnvelope, "description": "Not supported"}},
    summary="Update or delete a user (not supported)",
)
def reject_user_change(user_id: str) -> Response:
    """Users are immutable through the API."""
    return failure(FailureKind.METHOD_NOT_ALLOWED, "Method not allowed").to_response()
