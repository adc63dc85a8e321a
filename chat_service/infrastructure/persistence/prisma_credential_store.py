"""
Prisma Credential Store Implementation.

Passwords are stored and compared in plaintext, matching the existing data.
Swapping in a hash check only touches verify().
"""

import logging
from typing import Optional, TYPE_CHECKING
from prisma.errors import PrismaError
from chat_service.domain.entities.user import User
from chat_service.domain.exceptions import PersistenceError
from chat_service.domain.ports.credential_store import CredentialStore
from chat_service.infrastructure.persistence.prisma_user_repository import (
    user_to_entity,
)

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaCredentialStore(CredentialStore):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    async def verify(self, name: str, password: str) -> Optional[User]:
        try:
            record = await self._prisma.user.find_first(
                where={"name": name, "password": password}
            )
        except PrismaError as e:
            logger.exception("DB error in verify")
            raise PersistenceError("Server error validating credentials") from e
        return user_to_entity(record) if record else None
