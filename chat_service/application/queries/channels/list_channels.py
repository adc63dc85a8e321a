"""List Channels Query - distinct channel names that have messages."""

from dataclasses import dataclass
from chat_service.application.common.interfaces import Query, QueryHandler
from chat_service.domain.ports.repositories import MessageRepository


@dataclass(frozen=True)
class ListChannelsQuery(Query[list[str]]):
    pass


class ListChannelsHandler(QueryHandler[list[str]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListChannelsQuery) -> list[str]:
        return await self._message_repository.list_channels()
