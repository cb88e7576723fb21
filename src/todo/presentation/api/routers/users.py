"""User router for registration, login and user CRUD.

Every handler is a single pass: bind the payload, delegate to the user
service, wrap the result in the success envelope. Domain errors propagate
to the centralized exception handlers.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from todo.domain.shared.exceptions import UnauthorizedError
from todo.presentation.api.dependencies import (
    CurrentRequester,
    DBSession,
    UserServiceDep,
)
from todo.presentation.api.schemas import (
    ErrorResponse,
    SuccessResponse,
    TokenResponse,
    UserCreateRequest,
    UserLoginRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User successfully registered"},
        400: {"model": ErrorResponse, "description": "Invalid input data"},
    },
)
async def register_user(
    request: UserCreateRequest,
    user_service: UserServiceDep,
    session: DBSession,
) -> SuccessResponse[UUID]:
    """
    Register a new user.

    A successful registration returns the new user's ID.
    """
    user_id = await user_service.register(request.to_dto())
    await session.commit()

    return SuccessResponse(data=user_id)


@router.post(
    "/login",
    summary="User login",
    responses={
        200: {"description": "User successfully logged in"},
        400: {"model": ErrorResponse, "description": "Invalid login credentials"},
    },
)
async def login(
    request: UserLoginRequest,
    user_service: UserServiceDep,
) -> SuccessResponse[TokenResponse]:
    """Log in with email and password and receive an access token."""
    token = await user_service.login(request.to_dto())
    return SuccessResponse(data=TokenResponse.from_token(token))


@router.get(
    "",
    summary="Get all users",
    responses={
        200: {"description": "List of users retrieved successfully"},
        400: {"model": ErrorResponse, "description": "Users could not be loaded"},
        401: {"description": "Not authenticated"},
    },
)
async def get_all_users(
    _requester: CurrentRequester,
    user_service: UserServiceDep,
) -> SuccessResponse[list[UserResponse]]:
    users = await user_service.get_all_users()
    return SuccessResponse(data=[UserResponse.from_domain(u) for u in users])


@router.get(
    "/{user_id}",
    summary="Get a user by ID",
    responses={
        200: {"description": "User retrieved successfully"},
        400: {"model": ErrorResponse, "description": "Invalid ID format"},
        401: {"description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    _requester: CurrentRequester,
    user_service: UserServiceDep,
) -> SuccessResponse[UserResponse]:
    user = await user_service.get_user_by_id(user_id)
    return SuccessResponse(data=UserResponse.from_domain(user))


@router.patch(
    "/{user_id}",
    summary="Update a user",
    responses={
        200: {"description": "User updated successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input or bad request"},
        401: {"model": ErrorResponse, "description": "Not the requester's account"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    requester: CurrentRequester,
    user_service: UserServiceDep,
    session: DBSession,
) -> SuccessResponse[bool]:
    """
    Update the requester's own profile.

    Only fields present in the body are changed.
    """
    if not requester.is_self(user_id):
        logger.warning("%s attempted to update user %s", requester, user_id)
        raise UnauthorizedError("unauthorized: ID does not match")

    await user_service.update_user(user_id, request.to_dto())
    await session.commit()

    return SuccessResponse(data=True)


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    responses={
        200: {"description": "User deleted successfully"},
        400: {"model": ErrorResponse, "description": "Invalid ID format"},
        401: {"description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def delete_user(
    user_id: UUID,
    requester: CurrentRequester,
    user_service: UserServiceDep,
    session: DBSession,
) -> SuccessResponse[bool]:
    await user_service.delete_user(user_id)
    await session.commit()

    logger.info("%s deleted user %s", requester, user_id)
    return SuccessResponse(data=True)
