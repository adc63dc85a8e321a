"""
Post Message Command.

The author is the authenticated caller. Channel, attachments and reply target
are optional; omitted values get server-side defaults.
"""

from dataclasses import dataclass, field
from typing import Optional
from chat_service.application.common.interfaces import Command, CommandHandler
from chat_service.domain.entities.message import Message, NewMessage
from chat_service.domain.ports.repositories import MessageRepository
from chat_service.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class PostMessageCommand(Command[Message]):
    user_id: UserId
    body: str
    channel: Optional[str] = None
    attachments: list[str] = field(default_factory=list)
    in_reply_to: Optional[int] = None


class PostMessageHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository, default_channel: str):
        self._message_repository = message_repository
        self._default_channel = default_channel

    async def execute(self, command: PostMessageCommand) -> Message:
        new_message = NewMessage.create(
            body=command.body,
            user_id=command.user_id,
            default_channel=self._default_channel,
            channel=command.channel,
            attachments=command.attachments,
            in_reply_to=command.in_reply_to,
        )
        return await self._message_repository.add(new_message)
