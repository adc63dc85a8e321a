"""
Users API Router.

GET  /users  → every user's public profile
POST /users  → update the caller's own name and picture URL (bearer token required)
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from chat_service.application.commands.users import (
    UpdateProfileCommand,
    UpdateProfileHandler,
)
from chat_service.application.queries.users import ListUsersHandler, ListUsersQuery
from chat_service.domain.entities.user import User
from chat_service.domain.exceptions import EntityNotFoundError, PersistenceError
from chat_service.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class UpdateUserRequest(BaseModel):
    name: str = Field(min_length=1)
    profile_picture_url: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: int
    name: str
    profile_picture_url: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            name=user.name,
            profile_picture_url=user.profile_picture_url,
        )


router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserResponse],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_users(handler: FromDishka[ListUsersHandler]):
    try:
        users = await handler.execute(ListUsersQuery())
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error retrieving users",
        ) from e
    return [UserResponse.from_entity(user) for user in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def update_user(
    request: UpdateUserRequest,
    handler: FromDishka[UpdateProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Update the caller's profile.

    The target id is always the token's user; any id in the body is ignored.
    """
    command = UpdateProfileCommand(
        user_id=current_user.user_id,
        name=request.name,
        profile_picture_url=request.profile_picture_url,
    )
    try:
        user = await handler.execute(command)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error updating user",
        ) from e

    logger.info(f"User {current_user.user_id} updated their profile")
    return UserResponse.from_entity(user)
