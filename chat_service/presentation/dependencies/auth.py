"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Resolves it against the SessionRegistry held by the app container
- Returns AuthUser for use in route handlers
- Raises HTTPException 401 otherwise; the route body never runs

The only state change this causes is the registry dropping a token it finds
expired.
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from chat_service.domain.exceptions import SessionExpiredError, SessionNotFoundError
from chat_service.domain.value_objects.user_id import UserId
from chat_service.infrastructure.sessions.session_registry import SessionRegistry


@dataclass(frozen=True)
class AuthUser:
    user_id: UserId


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Resolve the caller's identity from the bearer token.

    Raises:
        HTTPException 401 if the header is missing or not Bearer,
        the token is unknown, or the token has expired
    """
    if credentials is None:
        raise _unauthorized("Missing or invalid Authorization header")

    registry = await request.app.state.dishka_container.get(SessionRegistry)
    try:
        user_id = registry.resolve(credentials.credentials)
    except SessionExpiredError:
        raise _unauthorized("Token expired")
    except SessionNotFoundError:
        raise _unauthorized("Invalid token")

    return AuthUser(user_id=user_id)
