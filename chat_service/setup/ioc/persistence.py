"""
Dishka provider for the prisma-backed store.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from chat_service.domain.ports.credential_store import CredentialStore
from chat_service.domain.ports.repositories import MessageRepository, UserRepository
from chat_service.infrastructure.persistence import (
    PrismaCredentialStore,
    PrismaMessageRepository,
    PrismaUserRepository,
)


class PersistenceProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use; disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_credential_store(self, prisma: Prisma) -> CredentialStore:
        return PrismaCredentialStore(prisma)
