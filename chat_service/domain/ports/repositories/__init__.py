from chat_service.domain.ports.repositories.user_repository import UserRepository
from chat_service.domain.ports.repositories.message_repository import (
    MessageRepository,
)

__all__ = [
    "UserRepository",
    "MessageRepository",
]
