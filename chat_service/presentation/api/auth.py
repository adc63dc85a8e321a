"""
Auth API Router.

POST /auth/login {"name": ..., "password": ...}
  → 200 {"token": "...", "user_id": 1, "expiry": <epoch ms>}
"""

from logging import getLogger
from fastapi import APIRouter, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from chat_service.application.commands.auth import (
    InvalidCredentialsError,
    LoginCommand,
    LoginHandler,
)
from chat_service.domain.exceptions import PersistenceError

logger = getLogger(__name__)


class LoginRequest(BaseModel):
    name: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    user_id: int
    expiry: int  # absolute instant, epoch milliseconds


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def login(
    request: LoginRequest,
    handler: FromDishka[LoginHandler],
):
    """Exchange a name/password pair for a bearer token."""
    try:
        session = await handler.execute(
            LoginCommand(name=request.name, password=request.password)
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)
        ) from e
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        ) from e

    return LoginResponse(
        token=session.token,
        user_id=session.user_id.value,
        expiry=session.expiry,
    )
