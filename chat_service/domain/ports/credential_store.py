"""
Credential Store Port - verifies a name/password pair.
Implementation: chat_service/infrastructure/persistence/prisma_credential_store.py

Password checking lives entirely behind this interface, so a hashing scheme
can replace the plaintext comparison without touching callers.
"""

from abc import ABC, abstractmethod
from typing import Optional
from chat_service.domain.entities.user import User


class CredentialStore(ABC):
    @abstractmethod
    async def verify(self, name: str, password: str) -> Optional[User]:
        """Return the matching user, or None when the pair does not match."""
        ...
