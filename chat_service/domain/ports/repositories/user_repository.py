"""
User Repository Port - Interface for user persistence.
Implementation: chat_service/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from chat_service.domain.entities.user import User
from chat_service.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def list_all(self) -> list[User]: ...

    @abstractmethod
    async def update_profile(
        self, user_id: UserId, name: str, profile_picture_url: str
    ) -> User:
        """Raises EntityNotFoundError when no user has this id."""
        ...
