"""
Prisma User Repository Implementation.

Prisma User Model (from schema.prisma):
    model User {
        id                  Int    @id @default(autoincrement())
        name                String @unique
        password            String
        profile_picture_url String @default("")
    }

The password column is never mapped onto the domain entity.
"""

import logging
from typing import TYPE_CHECKING
from prisma.errors import PrismaError
from chat_service.domain.entities.user import User
from chat_service.domain.exceptions import EntityNotFoundError, PersistenceError
from chat_service.domain.ports.repositories.user_repository import UserRepository
from chat_service.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import User as PrismaUser

logger = logging.getLogger(__name__)


def user_to_entity(record: "PrismaUser") -> User:
    """Map Prisma record to domain entity."""
    return User(
        id=UserId(record.id),
        name=record.name,
        profile_picture_url=record.profile_picture_url,
    )


class PrismaUserRepository(UserRepository):
    """
    Prisma implementation of UserRepository.

    Driver errors are logged here and re-raised as PersistenceError.
    """

    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    async def list_all(self) -> list[User]:
        try:
            records = await self._prisma.user.find_many(order={"id": "asc"})
        except PrismaError as e:
            logger.exception("DB error in list_all users")
            raise PersistenceError("Server error retrieving users") from e
        return [user_to_entity(record) for record in records]

    async def update_profile(
        self, user_id: UserId, name: str, profile_picture_url: str
    ) -> User:
        """
        Overwrite name and picture URL of one user.

        Raises:
            EntityNotFoundError: no row with this id
            PersistenceError: any driver failure, including a duplicate name
        """
        try:
            record = await self._prisma.user.update(
                where={"id": user_id.value},
                data={"name": name, "profile_picture_url": profile_picture_url},
            )
        except PrismaError as e:
            logger.exception(f"DB error in update_profile for user {user_id}")
            raise PersistenceError("Server error updating user") from e
        if record is None:
            raise EntityNotFoundError("User not found")
        return user_to_entity(record)
