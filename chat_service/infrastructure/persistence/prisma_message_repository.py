"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id          Int      @id @default(autoincrement())
        body        String
        user_id     Int
        attachments String[] @default([])
        in_reply_to Int?
        channel     String   @default("general")
        created_at  DateTime @default(now())
    }

Mapping:
- Prisma: id (int) ←→ Domain: id (MessageId)
- Prisma: user_id (int) ←→ Domain: user_id (UserId)
- Prisma: in_reply_to (int | None) ←→ Domain: in_reply_to (MessageId | None)
- Prisma: attachments (list) ←→ Domain: attachments (tuple)

Every list is ordered by created_at descending (newest first).
"""

import logging
from typing import TYPE_CHECKING
from prisma.errors import PrismaError
from chat_service.domain.entities.message import Message, NewMessage
from chat_service.domain.exceptions import PersistenceError
from chat_service.domain.ports.repositories.message_repository import (
    MessageRepository,
)
from chat_service.domain.value_objects.message_id import MessageId
from chat_service.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Message as PrismaMessage

logger = logging.getLogger(__name__)

NEWEST_FIRST = {"created_at": "desc"}


class PrismaMessageRepository(MessageRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaMessage") -> Message:
        return Message(
            id=MessageId(record.id),
            body=record.body,
            user_id=UserId(record.user_id),
            channel=record.channel,
            created_at=record.created_at,
            attachments=tuple(record.attachments or ()),
            in_reply_to=(
                MessageId(record.in_reply_to)
                if record.in_reply_to is not None
                else None
            ),
        )

    async def add(self, message: NewMessage) -> Message:
        data = {
            "body": message.body,
            "user_id": message.user_id.value,
            "attachments": list(message.attachments),
            "channel": message.channel,
        }
        if message.in_reply_to is not None:
            data["in_reply_to"] = message.in_reply_to.value
        try:
            record = await self._prisma.message.create(data=data)
        except PrismaError as e:
            logger.exception("DB error in add message")
            raise PersistenceError("Server error adding message") from e
        return self._to_entity(record)

    async def list_all(self) -> list[Message]:
        try:
            records = await self._prisma.message.find_many(order=NEWEST_FIRST)
        except PrismaError as e:
            logger.exception("DB error in list_all messages")
            raise PersistenceError("Server error retrieving messages") from e
        return [self._to_entity(record) for record in records]

    async def list_by_channel(self, channel: str) -> list[Message]:
        try:
            records = await self._prisma.message.find_many(
                where={"channel": channel},
                order=NEWEST_FIRST,
            )
        except PrismaError as e:
            logger.exception(f"DB error in list_by_channel for {channel!r}")
            raise PersistenceError("Server error retrieving channel messages") from e
        return [self._to_entity(record) for record in records]

    async def list_channels(self) -> list[str]:
        try:
            records = await self._prisma.message.find_many(
                distinct=["channel"],
                order={"channel": "asc"},
            )
        except PrismaError as e:
            logger.exception("DB error in list_channels")
            raise PersistenceError("Server error retrieving channels") from e
        return [record.channel for record in records]
