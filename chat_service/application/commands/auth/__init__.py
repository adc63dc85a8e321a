"""Auth commands."""

from .login import LoginCommand, LoginHandler, InvalidCredentialsError

__all__ = [
    "LoginCommand",
    "LoginHandler",
    "InvalidCredentialsError",
]
