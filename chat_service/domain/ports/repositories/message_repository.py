"""
Message Repository Port - Interface for message persistence.
Implementation: chat_service/infrastructure/persistence/prisma_message_repository.py

List operations return messages newest first (created_at descending).
"""

from abc import ABC, abstractmethod
from chat_service.domain.entities.message import Message, NewMessage


class MessageRepository(ABC):
    @abstractmethod
    async def add(self, message: NewMessage) -> Message: ...

    @abstractmethod
    async def list_all(self) -> list[Message]: ...

    @abstractmethod
    async def list_by_channel(self, channel: str) -> list[Message]: ...

    @abstractmethod
    async def list_channels(self) -> list[str]: ...
