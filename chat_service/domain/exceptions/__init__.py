"""
DOMAIN EXCEPTIONS

Raised by domain and infrastructure code, caught by the presentation layer
and mapped to HTTP status codes.
"""

from chat_service.domain.exceptions.entity_not_found import EntityNotFoundError
from chat_service.domain.exceptions.persistence_error import PersistenceError
from chat_service.domain.exceptions.authentication import (
    AuthenticationError,
    SessionNotFoundError,
    SessionExpiredError,
)

__all__ = [
    "EntityNotFoundError",
    "PersistenceError",
    "AuthenticationError",
    "SessionNotFoundError",
    "SessionExpiredError",
]
