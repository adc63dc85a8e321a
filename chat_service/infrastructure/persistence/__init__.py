"""
Prisma repository implementations.

The generated prisma client (`prisma generate`) is only needed to construct
a real `Prisma`; these modules import without it.
"""

from chat_service.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from chat_service.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from chat_service.infrastructure.persistence.prisma_credential_store import (
    PrismaCredentialStore,
)

__all__ = [
    "PrismaUserRepository",
    "PrismaMessageRepository",
    "PrismaCredentialStore",
]
