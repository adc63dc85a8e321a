"""
PORTS - Interfaces implemented by the infrastructure layer.
"""

from chat_service.domain.ports.credential_store import CredentialStore
from chat_service.domain.ports.repositories import (
    UserRepository,
    MessageRepository,
)

__all__ = [
    "CredentialStore",
    "UserRepository",
    "MessageRepository",
]
