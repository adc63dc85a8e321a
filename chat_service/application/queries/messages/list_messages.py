"""List Messages Query - all messages or a single channel, newest first."""

from dataclasses import dataclass
from typing import Optional
from chat_service.application.common.interfaces import Query, QueryHandler
from chat_service.domain.entities.message import Message
from chat_service.domain.ports.repositories import MessageRepository


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    channel: Optional[str] = None


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        if query.channel is None:
            return await self._message_repository.list_all()
        return await self._message_repository.list_by_channel(query.channel)
