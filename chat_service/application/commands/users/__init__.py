"""User commands."""

from .update_profile import UpdateProfileCommand, UpdateProfileHandler

__all__ = [
    "UpdateProfileCommand",
    "UpdateProfileHandler",
]
